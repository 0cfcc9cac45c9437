"""Schedules connection redraws after layout changes.

The first pass runs on the next event-loop iteration, after the node
elements have been placed. Resize signals are debounced on the trailing
edge: each signal cancels the pending redraw and schedules a new one a
quiet window later, so a burst of resizes costs exactly one redraw, run
after the burst ends.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

RESIZE_QUIET_WINDOW = 0.120  # seconds


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """The subset of asyncio.AbstractEventLoop the trigger needs."""

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> Cancellable: ...

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Cancellable: ...


class LayoutTrigger:
    """Runs a render callback after initial build and after resize bursts.

    Args:
        render: Called with no arguments to redraw
        loop: Scheduler to use. Defaults to the running asyncio loop,
            looked up when the first pass is scheduled.
        quiet_window: Seconds without a resize signal before redrawing
    """

    def __init__(
        self,
        render: Callable[[], Any],
        loop: Scheduler | None = None,
        *,
        quiet_window: float = RESIZE_QUIET_WINDOW,
    ) -> None:
        self._render = render
        self._loop = loop
        self.quiet_window = quiet_window
        self._pending: Cancellable | None = None
        self.runs = 0

    @property
    def loop(self) -> Scheduler:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    @property
    def pending(self) -> bool:
        """True if a redraw is scheduled and has not run yet."""
        return self._pending is not None

    def schedule_initial(self) -> None:
        """Queue one redraw for the next loop iteration."""
        self.cancel()
        self._pending = self.loop.call_soon(self._fire)
        logger.debug("Initial layout pass scheduled")

    def on_resize(self) -> None:
        """Restart the quiet window; the redraw runs when it elapses."""
        self.cancel()
        self._pending = self.loop.call_later(self.quiet_window, self._fire)
        logger.debug("Resize: redraw scheduled in %.0f ms", self.quiet_window * 1000)

    def cancel(self) -> None:
        """Drop the pending redraw, if any. A cancelled redraw never runs."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _fire(self) -> None:
        self._pending = None
        self.runs += 1
        self._render()
