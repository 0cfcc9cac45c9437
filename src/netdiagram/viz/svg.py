"""Static SVG and HTML snapshots of a diagram surface.

The snapshot shows the surface exactly as it is: drawn connections with
their highlight classes, and node boxes with theirs. Ids are written to
``data-*`` attributes and always HTML-escaped.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from netdiagram.viz.coordinates import Point

if TYPE_CHECKING:
    from netdiagram.viz.surface import DiagramSurface

DIAGRAM_CSS = """
.connection { stroke: #94a3b8; stroke-width: 1.5; opacity: 0.45; }
.connection.hover-highlighted, .connection.active { stroke: #38bdf8; stroke-width: 2.5; opacity: 1; }
.node rect { fill: #0f172a; stroke: #334155; stroke-width: 1; rx: 8; }
.node text { fill: #e2e8f0; font: 13px system-ui, sans-serif; text-anchor: middle; dominant-baseline: middle; }
.node.hover-highlighted rect { stroke: #38bdf8; stroke-width: 2; }
.node.active rect { fill: #0c4a6e; stroke: #38bdf8; stroke-width: 2; }
.node.adjacent-highlighted rect { stroke: #7dd3fc; }
"""


def _attr(value: object) -> str:
    return html.escape(str(value), quote=True)


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def surface_to_svg(surface: DiagramSurface) -> str:
    """Serialize the surface to a standalone SVG document.

    Connections are emitted before nodes so boxes sit on top of lines, and
    in draw order so the last drawn line is topmost.
    """
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" class="network-diagram" '
        f'width="{_num(surface.width)}" height="{_num(surface.height)}" '
        f'viewBox="0 0 {_num(surface.width)} {_num(surface.height)}">',
        f"<style>{DIAGRAM_CSS}</style>",
        '<g class="connections-layer">',
    ]
    for c in surface.connections:
        parts.append(
            f'<line class="{" ".join(c.classes)}" '
            f'x1="{_num(c.start.x)}" y1="{_num(c.start.y)}" '
            f'x2="{_num(c.end.x)}" y2="{_num(c.end.y)}" '
            f'data-source="{_attr(c.source_id)}" data-target="{_attr(c.target_id)}"/>'
        )
    parts.append("</g>")

    parts.append('<g class="layers-container">')
    for element in surface.iter_elements():
        if element.rect is None:
            continue
        rect = element.rect.translated(Point(-surface.origin.x, -surface.origin.y))
        classes = " ".join(["node", *sorted(element.classes)])
        center = rect.center
        parts.append(
            f'<g class="{classes}" data-id="{_attr(element.node_id)}" '
            f'data-layer="{_attr(element.layer_id)}">'
            f'<rect x="{_num(rect.x)}" y="{_num(rect.y)}" '
            f'width="{_num(rect.width)}" height="{_num(rect.height)}"/>'
            f'<text x="{_num(center.x)}" y="{_num(center.y)}">{html.escape(element.label)}</text>'
            f"</g>"
        )
    parts.append("</g>")
    parts.append("</svg>")
    return "\n".join(parts)


def generate_diagram_html(svg: str, *, title: str = "Network diagram") -> str:
    """Wrap an SVG snapshot in a minimal standalone HTML document."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{ margin: 0; background: #020617; display: flex; align-items: center; justify-content: center; }}
        #diagram {{ position: relative; }}
    </style>
</head>
<body>
  <div id="diagram">
{svg}
  </div>
</body>
</html>
"""
