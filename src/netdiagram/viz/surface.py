"""Drawing surface holding node elements and connection primitives.

The surface is the rendering collaborator: it owns the laid-out node boxes
(with their visual class flags) and the list of drawn connection lines. It
has no opinion about when lines are drawn or which ones are highlighted;
the renderer and the highlight controller drive it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

from netdiagram.viz.coordinates import Point, Rect

if TYPE_CHECKING:
    from collections.abc import Iterator

    from netdiagram.graph import NetworkGraph

# Visual class names shared by node elements and connections
HOVER_CLASS = "hover-highlighted"
ACTIVE_CLASS = "active"
ADJACENT_CLASS = "adjacent-highlighted"


@dataclass
class NodeElement:
    """The rendered box of one node.

    ``rect`` is None until the element has been laid out.
    """

    node_id: str
    label: str
    layer_id: str
    rect: Rect | None = None
    classes: set[str] = field(default_factory=set)

    def toggle_class(self, name: str, on: bool) -> None:
        if on:
            self.classes.add(name)
        else:
            self.classes.discard(name)


@dataclass
class Connection:
    """A line between two node midpoints.

    Endpoints and the (source_id, target_id) tag are fixed at creation; only
    the highlight flags change afterwards. Equality ignores the flags.
    """

    source_id: str
    target_id: str
    start: Point
    end: Point
    hover: bool = field(default=False, compare=False)
    active: bool = field(default=False, compare=False)

    @property
    def key(self) -> tuple[str, str]:
        return (self.source_id, self.target_id)

    @property
    def highlighted(self) -> bool:
        """Hover and active highlighting combine additively."""
        return self.hover or self.active

    @property
    def classes(self) -> list[str]:
        names = ["connection"]
        if self.hover:
            names.append(HOVER_CLASS)
        if self.active:
            names.append(ACTIVE_CLASS)
        return names

    def touches(self, node_id: str) -> bool:
        return node_id == self.source_id or node_id == self.target_id


class DiagramSurface:
    """Container for node elements plus the drawing layer for connections.

    Args:
        width: Viewport width
        height: Viewport height
        origin: Page position of the drawing layer's top-left corner.
            Connection endpoints are expressed relative to it.
    """

    def __init__(self, width: float, height: float, origin: Point = Point(0, 0)) -> None:
        self.width = width
        self.height = height
        self.origin = origin
        self._elements: dict[str, NodeElement] = {}
        self._connections: list[Connection] = []

    # -- node elements -----------------------------------------------------

    def build_elements(self, graph: NetworkGraph) -> None:
        """Create one element per node, replacing any existing ones."""
        self._elements = {
            node.id: NodeElement(node.id, node.label, layer.id)
            for layer in graph.layers
            for node in layer.nodes
        }

    def apply_layout(self, rects: Mapping[str, Rect]) -> None:
        """Position elements. Elements absent from rects stay unplaced."""
        for node_id, element in self._elements.items():
            element.rect = rects.get(node_id)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def element(self, node_id: str) -> NodeElement | None:
        return self._elements.get(node_id)

    def iter_elements(self) -> Iterator[NodeElement]:
        return iter(self._elements.values())

    def bounding_rect(self, node_id: str) -> Rect | None:
        """Page-space box of a node element, or None if missing or unplaced."""
        element = self._elements.get(node_id)
        return element.rect if element is not None else None

    # -- connections -------------------------------------------------------

    @property
    def connections(self) -> list[Connection]:
        return list(self._connections)

    def clear_connections(self) -> None:
        self._connections.clear()

    def add_connection(self, connection: Connection) -> None:
        self._connections.append(connection)

    def find_connection(self, source_id: str, target_id: str) -> Connection | None:
        for connection in self._connections:
            if connection.source_id == source_id and connection.target_id == target_id:
                return connection
        return None
