"""Column layout for layered diagrams.

Places each node's box the way the diagram page does with flexbox: one
column per layer, columns spread evenly across the viewport width, and the
boxes of a column stacked and vertically centred. This is the stand-in for
the browser's layout engine, so a viewport resize moves boxes and makes
previously drawn connections stale until the next redraw.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from netdiagram.viz.coordinates import Point, Rect

if TYPE_CHECKING:
    from netdiagram.graph import NetworkGraph


@dataclass(frozen=True)
class ColumnLayout:
    """Computes node boxes in page coordinates for a given viewport.

    Attributes:
        node_width: Preferred box width; shrinks to fit narrow columns
        node_height: Box height
        row_gap: Vertical space between boxes in a column
        column_padding: Horizontal padding inside each column
        min_node_width: Narrowest a box may shrink to
        origin: Page position of the diagram container's top-left corner
    """

    node_width: float = 180
    node_height: float = 44
    row_gap: float = 24
    column_padding: float = 16
    min_node_width: float = 60
    origin: Point = Point(0, 0)

    def column_centers(self, layer_count: int, width: float) -> list[float]:
        """X centre of each column, relative to the container.

        Example:
            >>> ColumnLayout().column_centers(2, 400)
            [100.0, 300.0]
        """
        if layer_count <= 0:
            return []
        column_width = width / layer_count
        return [column_width * (i + 0.5) for i in range(layer_count)]

    def box_width(self, layer_count: int, width: float) -> float:
        if layer_count <= 0:
            return 0.0
        available = width / layer_count - 2 * self.column_padding
        return max(self.min_node_width, min(self.node_width, available))

    def compute(self, graph: NetworkGraph, width: float, height: float) -> dict[str, Rect]:
        """Return page-space boxes keyed by node id.

        Args:
            graph: Graph whose layers become columns
            width: Viewport width in pixels
            height: Viewport height in pixels
        """
        layers = graph.layers
        centers = self.column_centers(len(layers), width)
        box_width = self.box_width(len(layers), width)

        rects: dict[str, Rect] = {}
        for layer, center_x in zip(layers, centers):
            count = len(layer.nodes)
            stack_height = count * self.node_height + max(0, count - 1) * self.row_gap
            top = max(self.row_gap, (height - stack_height) / 2)
            for row, node in enumerate(layer.nodes):
                local = Rect(
                    x=center_x - box_width / 2,
                    y=top + row * (self.node_height + self.row_gap),
                    width=box_width,
                    height=self.node_height,
                )
                rects[node.id] = local.translated(self.origin)
        return rects

    def content_size(self, graph: NetworkGraph, width: float, height: float) -> tuple[int, int]:
        """Smallest (width, height) that shows every box of the layout.

        Used for widget sizing: tall columns grow the height past the viewport.
        """
        rects = self.compute(graph, width, height)
        if not rects:
            return int(width), int(height)
        bottom = max(r.bottom for r in rects.values()) - self.origin.y
        return int(width), int(max(height, bottom + self.row_gap))
