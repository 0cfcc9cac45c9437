"""Draw one connection line per resolvable edge.

Rendering is a full rebuild: every pass clears the surface's connections,
walks the graph in authoring order (layer, node, target) and draws a line
between the current midpoints of source and target. An edge with an
unresolved endpoint, whether the target id is dangling or the element is
missing or has no size, is skipped. One bad edge never stops the pass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from netdiagram.viz.surface import Connection

if TYPE_CHECKING:
    from netdiagram.graph import NetworkGraph
    from netdiagram.viz.geometry import GeometryResolver
    from netdiagram.viz.highlight import HighlightController
    from netdiagram.viz.surface import DiagramSurface

logger = logging.getLogger(__name__)


class ConnectionRenderer:
    """Rebuilds the connection layer of a surface from a graph.

    Args:
        graph: Source of edges
        geometry: Resolves node midpoints in surface coordinates
        surface: Receives the connection primitives
        controller: If given, its highlight state is re-applied after every
            pass so a redraw is invisible to the current interaction
    """

    def __init__(
        self,
        graph: NetworkGraph,
        geometry: GeometryResolver,
        surface: DiagramSurface,
        controller: HighlightController | None = None,
    ) -> None:
        self.graph = graph
        self.geometry = geometry
        self.surface = surface
        self.controller = controller
        self.passes = 0

    def render(self) -> list[Connection]:
        """Redraw all connections. Safe to call any number of times."""
        self.surface.clear_connections()
        skipped = 0

        for source_id, target_id in self.graph.iter_edges():
            start = self.geometry.midpoint(source_id)
            end = self.geometry.midpoint(target_id)
            if start is None or end is None:
                skipped += 1
                logger.debug(
                    "Skipping edge %s -> %s: unresolved %s",
                    source_id,
                    target_id,
                    "source" if start is None else "target",
                )
                continue
            self.surface.add_connection(Connection(source_id, target_id, start, end))

        if self.controller is not None:
            self.controller.apply()

        self.passes += 1
        connections = self.surface.connections
        logger.debug(
            "Render pass %d: %d connections drawn, %d skipped",
            self.passes,
            len(connections),
            skipped,
        )
        return connections
