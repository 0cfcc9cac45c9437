"""Render command: draw a diagram snapshot to SVG or HTML."""

from __future__ import annotations

from typing import Annotated

import typer

from netdiagram.cli._config import load_config
from netdiagram.cli._format import print_json
from netdiagram.cli.graph_cmd import load_graph


def register_commands(app: typer.Typer) -> None:
    """Register `render` as a top-level command on the app."""

    @app.command("render")
    def render_cmd(
        target: Annotated[str, typer.Argument(help="JSON file, 'module:attribute', or registered name")],
        output: Annotated[str | None, typer.Option("--output", "-o", help="Write to .svg or .html file")] = None,
        width: Annotated[int | None, typer.Option("--width", help="Viewport width in pixels")] = None,
        height: Annotated[int | None, typer.Option("--height", help="Viewport height in pixels")] = None,
        hover: Annotated[str | None, typer.Option("--hover", help="Node to show as hovered")] = None,
        toggle: Annotated[list[str] | None, typer.Option("--toggle", help="Node to toggle on (repeatable)")] = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output drawn connections as JSON")] = False,
    ):
        """Render a diagram with optional hover and toggle highlighting."""
        from netdiagram.events import Click, PointerEnter
        from netdiagram.viz.diagram import Diagram

        graph = load_graph(target)
        config = load_config()

        diagram = Diagram(graph, width=width or config.width, height=height or config.height)
        diagram.render_now()
        for node_id in toggle or []:
            diagram.handle(Click(node_id))
        if hover is not None:
            diagram.handle(PointerEnter(hover))

        if as_json:
            data = {
                "width": diagram.surface.width,
                "height": diagram.surface.height,
                "hover": diagram.controller.hover_id,
                "active": sorted(diagram.controller.active_ids),
                "connections": [
                    {
                        "source": c.source_id,
                        "target": c.target_id,
                        "start": [c.start.x, c.start.y],
                        "end": [c.end.x, c.end.y],
                        "highlighted": c.highlighted,
                    }
                    for c in diagram.connections
                ],
            }
            print_json("render", data, output)
            return

        if output is None:
            print(diagram.to_svg())
            return

        content = diagram.to_html() if output.endswith(".html") else diagram.to_svg()
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
        highlighted = sum(1 for c in diagram.connections if c.highlighted)
        print(f"Wrote {output} ({len(diagram.connections)} connections, {highlighted} highlighted)")
