"""Drive a diagram on a real event loop: first draw, a resize burst, a toggle.

Shows that a burst of resize signals produces one redraw once the window
has been quiet for 120ms, then writes the final state to HTML.

Run:  python examples/resize_demo.py
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from netdiagram import Click, PointerEnter, Resize
from netdiagram.sample import skills_network
from netdiagram.viz import Diagram

OUTPUT_PATH = Path(__file__).parent / "resize-demo.html"


async def main() -> None:
    diagram = Diagram(skills_network(), width=960, height=540)
    diagram.mount()
    await asyncio.sleep(0)
    print(f"first pass: {len(diagram.connections)} connections")

    for width in range(960, 1200, 20):
        diagram.handle(Resize(width, 540))
        await asyncio.sleep(0.01)
    print(f"during burst: {len(diagram.stale_connections())} stale connections")

    await asyncio.sleep(0.2)
    print(f"after burst: {diagram.renderer.passes} render passes, "
          f"{len(diagram.stale_connections())} stale")

    diagram.handle(Click("proc-algo"))
    diagram.handle(PointerEnter("skill-strat"))
    highlighted = [c.key for c in diagram.connections if c.highlighted]
    print(f"highlighted: {highlighted}")

    OUTPUT_PATH.write_text(diagram.to_html(title="Skills network"), encoding="utf-8")
    print(f"wrote {OUTPUT_PATH}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    asyncio.run(main())
