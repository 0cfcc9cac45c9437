"""Shared fixtures for netdiagram tests.

This module provides:
1. Small graph factories (the a/b/c/d scenario graph, dangling targets)
2. A manual-clock event loop stand-in for debounce tests
"""

from __future__ import annotations

import pytest

from netdiagram.graph import NetworkGraph
from netdiagram.sample import skills_network


# =============================================================================
# Test Graph Factories
# =============================================================================

ABCD_DATA = [
    {"id": "in", "nodes": [{"id": "A", "label": "A", "targets": ["B", "C"]}]},
    {
        "id": "mid",
        "nodes": [
            {"id": "B", "label": "B", "targets": ["D"]},
            {"id": "C", "label": "C", "targets": []},
        ],
    },
    {"id": "out", "nodes": [{"id": "D", "label": "D", "targets": []}]},
]


def make_abcd_graph() -> NetworkGraph:
    """A -> [B, C], B -> [D]."""
    return NetworkGraph.from_data(ABCD_DATA)


def make_dangling_graph() -> NetworkGraph:
    """A -> [B, ghost], B -> [phantom]: two edges that can never be drawn."""
    return NetworkGraph.from_data(
        [
            {"id": "l1", "nodes": [{"id": "A", "label": "A", "targets": ["B", "ghost"]}]},
            {"id": "l2", "nodes": [{"id": "B", "label": "B", "targets": ["phantom"]}]},
        ]
    )


@pytest.fixture
def abcd_graph() -> NetworkGraph:
    return make_abcd_graph()


@pytest.fixture
def dangling_graph() -> NetworkGraph:
    return make_dangling_graph()


@pytest.fixture
def sample_graph() -> NetworkGraph:
    return skills_network()


# =============================================================================
# Manual Clock Loop
# =============================================================================


class FakeHandle:
    """Cancellable scheduled callback."""

    def __init__(self, when: float, callback, args) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Implements call_soon / call_later against a clock moved by advance()."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[FakeHandle] = []

    def call_soon(self, callback, *args) -> FakeHandle:
        return self.call_later(0, callback, *args)

    def call_later(self, delay: float, callback, *args) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def scheduled(self) -> list[FakeHandle]:
        """Handles that are neither cancelled nor run yet."""
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running due callbacks in time order."""
        target = self.now + seconds
        while True:
            due = sorted(
                (h for h in self.scheduled if h.when <= target + 1e-9),
                key=lambda h: h.when,
            )
            if not due:
                break
            handle = due[0]
            self.handles.remove(handle)
            self.now = max(self.now, handle.when)
            handle.callback(*handle.args)
        self.now = target


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()
