from __future__ import annotations

from typing import Sequence

from asciiwriter.geometry import Point, to_cell
from asciiwriter.raster.grid import CharGrid


HEAD_RIGHT = ">"
HEAD_LEFT = "<"
HEAD_DOWN = "v"
HEAD_UP = "^"


def head_glyph(dx: float, dy: float) -> str:
    if abs(dx) >= abs(dy):
        return HEAD_RIGHT if dx >= 0 else HEAD_LEFT
    return HEAD_DOWN if dy >= 0 else HEAD_UP


def draw_arrow_heads(
    grid: CharGrid,
    anchors: Sequence[Point],
    heads: tuple[bool, bool],
    scale: float,
) -> None:
    """Stamp head glyphs at the requested ends of a polyline.

    Both heads take their direction from the segment touching that end,
    measured in path order (first anchor toward second, second-to-last
    toward last).
    """
    if len(anchors) < 2:
        return
    start_head, end_head = heads
    if start_head:
        direction = anchors[1].sub(anchors[0])
        x, y = to_cell(anchors[0], scale)
        grid.set(x, y, head_glyph(direction.x, direction.y))
    if end_head:
        direction = anchors[-1].sub(anchors[-2])
        x, y = to_cell(anchors[-1], scale)
        grid.set(x, y, head_glyph(direction.x, direction.y))
