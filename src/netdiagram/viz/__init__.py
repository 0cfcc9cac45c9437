"""Visualization module for netdiagram.

Usage (inside a running asyncio loop):
    diagram = Diagram(graph, width=960, height=540)
    diagram.mount()                       # first draw on the next loop tick
    diagram.handle(PointerEnter("a"))     # hover highlighting
    diagram.handle(Click("d"))            # sticky highlighting
    diagram.handle(Resize(1280, 720))     # debounced redraw

Without a loop, draw synchronously:
    diagram = Diagram(graph)
    diagram.render_now()

    visualize(graph, hover="a")           # notebook widget

Debug:
    from netdiagram.viz import find_issues, trace_node
"""

from netdiagram.viz.coordinates import Point, Rect
from netdiagram.viz.debug import find_issues, trace_node, validate_graph
from netdiagram.viz.diagram import Diagram
from netdiagram.viz.geometry import (
    ConnectionValidator,
    GeometryResolver,
    StaticGeometry,
    SurfaceGeometry,
)
from netdiagram.viz.highlight import (
    HighlightController,
    Highlights,
    HighlightState,
    compute_highlights,
    reduce_highlight,
)
from netdiagram.viz.layout import ColumnLayout
from netdiagram.viz.renderer import ConnectionRenderer
from netdiagram.viz.surface import Connection, DiagramSurface, NodeElement
from netdiagram.viz.trigger import LayoutTrigger
from netdiagram.viz.widget import DiagramWidget, visualize

__all__ = [
    "ColumnLayout",
    "Connection",
    "ConnectionRenderer",
    "ConnectionValidator",
    "Diagram",
    "DiagramSurface",
    "DiagramWidget",
    "GeometryResolver",
    "HighlightController",
    "HighlightState",
    "Highlights",
    "LayoutTrigger",
    "NodeElement",
    "Point",
    "Rect",
    "StaticGeometry",
    "SurfaceGeometry",
    "compute_highlights",
    "find_issues",
    "reduce_highlight",
    "trace_node",
    "validate_graph",
    "visualize",
]
