"""Interaction events delivered to a diagram."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PointerEnter:
    """Pointer moved onto a node's box.

    Attributes:
        node_id: Id of the node under the pointer.
    """

    node_id: str


@dataclass(frozen=True)
class PointerLeave:
    """Pointer left a node's box.

    Attributes:
        node_id: Id of the node that was left. Informational only: leaving
            any node ends hover highlighting.
    """

    node_id: str | None = None


@dataclass(frozen=True)
class Click:
    """Click on a node, or outside every node when node_id is None."""

    node_id: str | None = None

    @property
    def outside(self) -> bool:
        return self.node_id is None


@dataclass(frozen=True)
class Resize:
    """Viewport size changed.

    Attributes:
        width: New viewport width in pixels.
        height: New viewport height in pixels.
    """

    width: float
    height: float


DiagramEvent = Union[PointerEnter, PointerLeave, Click, Resize]
