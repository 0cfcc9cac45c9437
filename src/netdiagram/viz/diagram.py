"""A diagram session: one graph, one surface, one interaction state.

Wires the column layout, surface, geometry resolver, renderer, highlight
controller and layout trigger together and routes interaction events to
them. All work happens on one event loop; each event is handled to
completion before the next.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from netdiagram.events import Click, PointerEnter, PointerLeave, Resize
from netdiagram.viz.geometry import ConnectionValidator, SurfaceGeometry
from netdiagram.viz.highlight import HighlightController
from netdiagram.viz.layout import ColumnLayout
from netdiagram.viz.renderer import ConnectionRenderer
from netdiagram.viz.surface import DiagramSurface
from netdiagram.viz.trigger import RESIZE_QUIET_WINDOW, LayoutTrigger

if TYPE_CHECKING:
    from netdiagram.events import DiagramEvent
    from netdiagram.graph import NetworkGraph
    from netdiagram.viz.highlight import Highlights
    from netdiagram.viz.surface import Connection
    from netdiagram.viz.trigger import Scheduler

logger = logging.getLogger(__name__)


class Diagram:
    """Interactive network diagram.

    Scheduled draws (``mount()`` and ``Resize``) need an event loop: the
    one passed as ``loop``, or the running asyncio loop. Without one they
    raise RuntimeError before the surface changes. Synchronous callers use
    ``render_now()`` instead.

    Example:
        >>> async def main():
        ...     diagram = Diagram(skills_network(), width=960, height=540)
        ...     diagram.mount()                 # places boxes, schedules first draw
        ...     diagram.handle(Resize(1280, 720))  # lines follow after the quiet window
        ...     await asyncio.sleep(0.2)
        ...     diagram.handle(PointerEnter("skill-py"))
        ...     return diagram.to_svg()

        >>> diagram = Diagram(skills_network())  # no event loop
        >>> diagram.render_now()
        >>> diagram.handle(Click("proc-algo"))
    """

    def __init__(
        self,
        graph: NetworkGraph,
        *,
        width: float = 960,
        height: float = 540,
        layout: ColumnLayout | None = None,
        loop: Scheduler | None = None,
        quiet_window: float = RESIZE_QUIET_WINDOW,
    ) -> None:
        self.graph = graph
        self.layout = layout or ColumnLayout()
        self.surface = DiagramSurface(width, height, origin=self.layout.origin)
        self.geometry = SurfaceGeometry(self.surface)
        self.controller = HighlightController(self.surface)
        self.renderer = ConnectionRenderer(graph, self.geometry, self.surface, self.controller)
        self.trigger = LayoutTrigger(self.renderer.render, loop, quiet_window=quiet_window)
        self._mounted = False

    @property
    def connections(self) -> list[Connection]:
        return self.surface.connections

    @property
    def highlights(self) -> Highlights:
        return self.controller.highlights

    def mount(self, *, schedule: bool = True) -> None:
        """Create and place node elements, then schedule the first draw.

        Args:
            schedule: If False, skip scheduling; call render_now() instead.
        """
        if schedule:
            self._require_scheduler()
        self.surface.build_elements(self.graph)
        self._relayout()
        self._mounted = True
        if schedule:
            self.trigger.schedule_initial()

    def render_now(self) -> list[Connection]:
        """Draw synchronously, cancelling any scheduled pass."""
        if not self._mounted:
            self.mount(schedule=False)
        self.trigger.cancel()
        return self.renderer.render()

    def handle(self, event: DiagramEvent) -> None:
        """Route one interaction event."""
        if isinstance(event, Resize):
            self._require_scheduler()
            self.surface.resize(event.width, event.height)
            self._relayout()
            self.trigger.on_resize()
        elif isinstance(event, (PointerEnter, PointerLeave, Click)):
            self.controller.dispatch(event)
        else:
            logger.warning("Ignoring unknown event %r", event)

    def _require_scheduler(self) -> None:
        # Raises RuntimeError when there is no loop to run the redraw on.
        self.trigger.loop

    def _relayout(self) -> None:
        rects = self.layout.compute(self.graph, self.surface.width, self.surface.height)
        self.surface.apply_layout(rects)

    def stale_connections(self) -> dict[str, list[str]]:
        """Connections that no longer match node geometry (pending redraw)."""
        return ConnectionValidator(self.geometry, self.surface.connections).validate_all()

    def to_svg(self) -> str:
        from netdiagram.viz.svg import surface_to_svg

        return surface_to_svg(self.surface)

    def to_html(self, *, title: str = "Network diagram") -> str:
        from netdiagram.viz.svg import generate_diagram_html

        return generate_diagram_html(self.to_svg(), title=title)
