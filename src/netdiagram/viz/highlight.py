"""Hover and toggle highlighting.

Two independent inputs decide what is highlighted:

- ``hover_id``: the single node under the pointer, if any
- ``active_ids``: nodes toggled on by clicking, kept until toggled off or
  cleared by a click outside every node

A connection is highlighted if it qualifies under hover OR under active;
neither source suppresses the other. Every event replaces the state through
``reduce_highlight`` and then recomputes every flag from scratch with
``compute_highlights``. Nothing is patched incrementally.

Usage:
    controller = HighlightController(surface)
    controller.on_hover("a")        # lines touching a, neighbours of a
    controller.on_toggle("d")       # lines touching d stay lit
    controller.on_hover_end()       # only d's lines remain
    controller.on_click_outside()   # nothing highlighted
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from netdiagram.events import Click, PointerEnter, PointerLeave
from netdiagram.viz.surface import ACTIVE_CLASS, ADJACENT_CLASS, HOVER_CLASS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from netdiagram.events import DiagramEvent
    from netdiagram.viz.surface import DiagramSurface

logger = logging.getLogger(__name__)

Edge = tuple[str, str]


@dataclass(frozen=True)
class HighlightState:
    """Current interaction inputs. Lives for one diagram session."""

    hover_id: str | None = None
    active_ids: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Highlights:
    """Derived highlight sets for one state over one set of drawn edges."""

    hover_edges: frozenset[Edge] = frozenset()
    active_edges: frozenset[Edge] = frozenset()
    hover_nodes: frozenset[str] = frozenset()
    active_nodes: frozenset[str] = frozenset()
    adjacent_nodes: frozenset[str] = frozenset()

    @property
    def highlighted_edges(self) -> frozenset[Edge]:
        return self.hover_edges | self.active_edges

    def is_highlighted(self, source_id: str, target_id: str) -> bool:
        return (source_id, target_id) in self.highlighted_edges


def reduce_highlight(state: HighlightState, event: DiagramEvent) -> HighlightState:
    """Return the state that follows event. Events that do not affect
    highlighting (e.g. Resize) return state unchanged."""
    if isinstance(event, PointerEnter):
        return replace(state, hover_id=event.node_id)
    if isinstance(event, PointerLeave):
        return replace(state, hover_id=None)
    if isinstance(event, Click):
        if event.outside:
            return replace(state, active_ids=frozenset())
        if not isinstance(event.node_id, str):
            return state
        if event.node_id in state.active_ids:
            return replace(state, active_ids=state.active_ids - {event.node_id})
        return replace(state, active_ids=state.active_ids | {event.node_id})
    return state


def compute_highlights(state: HighlightState, edges: Iterable[Edge]) -> Highlights:
    """Derive highlighted edges and nodes from state.

    Args:
        state: Current hover and active inputs
        edges: (source_id, target_id) of every drawn connection. Only drawn
            edges count, so an unresolved edge never highlights anything.
    """
    hover_id = state.hover_id if isinstance(state.hover_id, str) else None
    active_ids = state.active_ids

    hover_edges: set[Edge] = set()
    active_edges: set[Edge] = set()
    adjacent: set[str] = set()
    for source_id, target_id in edges:
        if hover_id is not None and hover_id in (source_id, target_id):
            hover_edges.add((source_id, target_id))
            adjacent.add(target_id if source_id == hover_id else source_id)
        if active_ids and (source_id in active_ids or target_id in active_ids):
            active_edges.add((source_id, target_id))

    return Highlights(
        hover_edges=frozenset(hover_edges),
        active_edges=frozenset(active_edges),
        hover_nodes=frozenset({hover_id}) if hover_id is not None else frozenset(),
        active_nodes=frozenset(active_ids),
        adjacent_nodes=frozenset(adjacent),
    )


class HighlightController:
    """Owns the highlight state and applies it to a surface.

    The renderer calls ``apply()`` after every redraw so that a redraw never
    drops the user's current hover or toggle highlighting.
    """

    def __init__(self, surface: DiagramSurface, state: HighlightState | None = None) -> None:
        self.surface = surface
        self._state = state or HighlightState()
        self._highlights = Highlights()

    @property
    def state(self) -> HighlightState:
        return self._state

    @property
    def highlights(self) -> Highlights:
        """Result of the most recent recomputation."""
        return self._highlights

    @property
    def hover_id(self) -> str | None:
        return self._state.hover_id

    @property
    def active_ids(self) -> frozenset[str]:
        return self._state.active_ids

    def dispatch(self, event: DiagramEvent) -> Highlights:
        """Apply one interaction event and recompute all highlighting."""
        self._state = reduce_highlight(self._state, event)
        logger.debug(
            "%s -> hover=%r active=%s",
            type(event).__name__,
            self._state.hover_id,
            sorted(self._state.active_ids),
        )
        return self.apply()

    def on_hover(self, node_id: str) -> Highlights:
        return self.dispatch(PointerEnter(node_id))

    def on_hover_end(self) -> Highlights:
        return self.dispatch(PointerLeave(self._state.hover_id))

    def on_toggle(self, node_id: str) -> Highlights:
        return self.dispatch(Click(node_id))

    def on_click_outside(self) -> Highlights:
        return self.dispatch(Click(None))

    def connected(self, element_id: str, node_id: str) -> bool:
        """True if a drawn connection joins the two ids in either direction.

        Ids that are not strings match nothing.
        """
        if not isinstance(element_id, str) or not isinstance(node_id, str):
            return False
        return (
            self.surface.find_connection(element_id, node_id) is not None
            or self.surface.find_connection(node_id, element_id) is not None
        )

    def apply(self) -> Highlights:
        """Recompute highlights from state and write every flag to the surface."""
        connections = self.surface.connections
        highlights = compute_highlights(self._state, (c.key for c in connections))

        for connection in connections:
            connection.hover = connection.key in highlights.hover_edges
            connection.active = connection.key in highlights.active_edges

        for element in self.surface.iter_elements():
            element.toggle_class(HOVER_CLASS, element.node_id in highlights.hover_nodes)
            element.toggle_class(ACTIVE_CLASS, element.node_id in highlights.active_nodes)
            element.toggle_class(ADJACENT_CLASS, element.node_id in highlights.adjacent_nodes)

        self._highlights = highlights
        return highlights
