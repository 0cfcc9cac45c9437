"""Midpoint resolution and connection validation.

A GeometryResolver answers one question: where is the centre of a node,
in drawing-surface coordinates, right now? Answers are never cached because
boxes move whenever the viewport changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

from netdiagram.viz.coordinates import Point

if TYPE_CHECKING:
    from netdiagram.viz.surface import Connection, DiagramSurface


@runtime_checkable
class GeometryResolver(Protocol):
    """Maps a node id to its current midpoint, or None if unavailable."""

    def midpoint(self, node_id: str) -> Point | None: ...


class SurfaceGeometry:
    """Resolves midpoints from the laid-out elements of a DiagramSurface.

    Returns None when the element does not exist, has not been laid out, or
    has zero width or height.
    """

    def __init__(self, surface: DiagramSurface) -> None:
        self.surface = surface

    def midpoint(self, node_id: str) -> Point | None:
        rect = self.surface.bounding_rect(node_id)
        if rect is None or rect.is_empty:
            return None
        return rect.center - self.surface.origin


class StaticGeometry:
    """Fixed midpoints, for tests and for pre-computed layouts."""

    def __init__(self, points: Mapping[str, Point | tuple[float, float]]) -> None:
        self._points = {
            node_id: p if isinstance(p, Point) else Point(*p) for node_id, p in points.items()
        }

    def midpoint(self, node_id: str) -> Point | None:
        return self._points.get(node_id)


@dataclass
class ConnectionValidator:
    """Checks drawn connections against current node geometry.

    Checks that:
    1. Both endpoints of every connection still resolve
    2. The line starts at the centre of its source node
    3. The line ends at the centre of its target node

    A validator run right after a redraw reports nothing; one run after a
    resize but before the redraw reports every line that moved.
    """

    geometry: GeometryResolver
    connections: list[Connection]
    tolerance: float = 0.5  # pixels

    def validate_connection(self, connection: Connection) -> list[str]:
        """Returns list of issues (empty = valid)."""
        issues = []

        src = self.geometry.midpoint(connection.source_id)
        tgt = self.geometry.midpoint(connection.target_id)

        if src is None:
            issues.append(f"Source node '{connection.source_id}' has no geometry")
        if tgt is None:
            issues.append(f"Target node '{connection.target_id}' has no geometry")
        if issues:
            return issues

        start_offset = connection.start.distance_to(src)
        if start_offset > self.tolerance:
            issues.append(
                f"Line start is {start_offset:.1f}px from centre of '{connection.source_id}'"
            )
        end_offset = connection.end.distance_to(tgt)
        if end_offset > self.tolerance:
            issues.append(
                f"Line end is {end_offset:.1f}px from centre of '{connection.target_id}'"
            )
        return issues

    def validate_all(self) -> dict[str, list[str]]:
        """Returns {"source->target": [issues]} for connections with issues."""
        return {
            f"{c.source_id}->{c.target_id}": issues
            for c in self.connections
            if (issues := self.validate_connection(c))
        }


def format_issues(issues: dict[str, list[str]]) -> str:
    """Format validation issues for display in test failures."""
    lines = []
    for edge_id, edge_issues in issues.items():
        lines.append(f"  {edge_id}:")
        for issue in edge_issues:
            lines.append(f"    - {issue}")
    return "\n".join(lines)
