"""Coordinate primitives for diagram layout.

Node elements are positioned in page coordinates; connection endpoints live
in the drawing surface's own space, which is the page space shifted by the
surface's on-screen origin.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D point.

    Example:
        >>> Point(10, 20) - Point(5, 5)
        Point(x=5, y=15)
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        """Add two points coordinate-wise.

        Example:
            >>> Point(1, 2) + Point(3, 4)
            Point(x=4, y=6)
        """
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        """Subtract two points coordinate-wise.

        Example:
            >>> Point(5, 10) - Point(2, 3)
            Point(x=3, y=7)
        """
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box, like a DOM client rect.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal size
        height: Vertical size

    Example:
        >>> Rect(10, 20, 100, 40).center
        Point(x=60.0, y=40.0)
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        """Top-left corner."""
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_empty(self) -> bool:
        """True if the box has no measurable area."""
        return self.width <= 0 or self.height <= 0

    def translated(self, offset: Point) -> Rect:
        """Return the same box moved by offset.

        Example:
            >>> Rect(0, 0, 10, 10).translated(Point(5, -5))
            Rect(x=5, y=-5, width=10, height=10)
        """
        return Rect(self.x + offset.x, self.y + offset.y, self.width, self.height)
