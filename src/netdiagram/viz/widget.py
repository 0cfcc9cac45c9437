"""Jupyter widget for network diagrams."""

from __future__ import annotations

import html as html_module
from typing import TYPE_CHECKING, Iterable

from netdiagram.viz.diagram import Diagram
from netdiagram.viz.layout import ColumnLayout

if TYPE_CHECKING:
    from netdiagram.graph import NetworkGraph


class DiagramWidget:
    """Displays a diagram snapshot in Jupyter/VSCode notebooks.

    Uses an iframe with explicit dimensions so the notebook does not add a
    second scrollbar around the diagram.
    """

    def __init__(self, html_content: str, width: int, height: int):
        """Create a widget.

        Args:
            html_content: Complete HTML document for the diagram
            width: Widget width in pixels
            height: Widget height in pixels
        """
        self.html_content = html_content
        self.width = width
        self.height = height

    def _repr_html_(self) -> str:
        """Return HTML representation for Jupyter display."""
        escaped_html = html_module.escape(self.html_content, quote=True)
        return (
            f'<iframe srcdoc="{escaped_html}" '
            f'width="{self.width}" height="{self.height}" frameborder="0" '
            f'style="border: none; width: {self.width}px; max-width: 100%; '
            f'height: {self.height}px; display: block; background: transparent; '
            f'margin: 0 auto; border-radius: 8px;" '
            f'sandbox="allow-same-origin">'
            f"</iframe>"
        )


def visualize(
    graph: NetworkGraph,
    *,
    width: int = 960,
    height: int = 540,
    hover: str | None = None,
    active: Iterable[str] = (),
    layout: ColumnLayout | None = None,
    filepath: str | None = None,
) -> DiagramWidget | None:
    """Render a graph and return a notebook widget or write an HTML file.

    Args:
        graph: Graph to draw
        width: Viewport width in pixels
        height: Viewport height in pixels; grown to fit tall columns
        hover: Node to show as hovered
        active: Nodes to show as toggled on
        layout: Column layout override
        filepath: Path to save HTML file (default: None, display in notebook)

    Returns:
        DiagramWidget if filepath is None, otherwise None (saves to file)

    Example:
        >>> from netdiagram.sample import skills_network
        >>> widget = visualize(skills_network(), hover="proc-algo")
        >>> visualize(skills_network(), filepath="skills.html")
    """
    layout = layout or ColumnLayout()
    final_width, final_height = layout.content_size(graph, width, height)

    diagram = Diagram(graph, width=final_width, height=final_height, layout=layout)
    diagram.render_now()
    for node_id in active:
        diagram.controller.on_toggle(node_id)
    if hover is not None:
        diagram.controller.on_hover(hover)

    html_content = diagram.to_html()

    if filepath is not None:
        if not filepath.endswith(".html"):
            filepath = filepath + ".html"
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(html_content)
        return None

    return DiagramWidget(html_content, final_width, final_height)
