from __future__ import annotations

import math
from typing import Sequence

from asciiwriter.geometry import Point, to_cell
from asciiwriter.palette import TermColor
from asciiwriter.raster.grid import CharGrid


HLINE = "-"
VLINE = "|"
DIAG_DOWN = "\\"
DIAG_UP = "/"

_AXIS_EPS = 0.001


def draw_hline(grid: CharGrid, x0: int, x1: int, y: int, char: str, color: TermColor | None = None) -> None:
    for x in range(min(x0, x1), max(x0, x1) + 1):
        grid.set(x, y, char, color)


def draw_vline(grid: CharGrid, x: int, y0: int, y1: int, char: str, color: TermColor | None = None) -> None:
    for y in range(min(y0, y1), max(y0, y1) + 1):
        grid.set(x, y, char, color)


def line_glyph(p0: Point, p1: Point) -> str:
    """Pick one glyph for a whole segment from its angle in source space."""
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    if abs(dx) < _AXIS_EPS:
        return VLINE
    if abs(dy) < _AXIS_EPS:
        return HLINE
    angle = abs(math.degrees(math.atan(dy / dx)))
    if angle < 22.5:
        return HLINE
    if angle < 67.5:
        # Screen Y grows downward, so same-sign deltas run down-right (or up-left).
        return DIAG_DOWN if (dx > 0) == (dy > 0) else DIAG_UP
    return VLINE


def draw_line_segment(
    grid: CharGrid,
    p0: Point,
    p1: Point,
    char: str,
    scale: float,
    color: TermColor | None = None,
) -> None:
    x0, y0 = to_cell(p0, scale)
    x1, y1 = to_cell(p1, scale)
    draw_cell_segment(grid, x0, y0, x1, y1, char, color)


def draw_cell_segment(
    grid: CharGrid,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    char: str,
    color: TermColor | None = None,
) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        grid.set(x0, y0, char, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def draw_polyline(grid: CharGrid, anchors: Sequence[Point], char: str, scale: float) -> None:
    if len(anchors) < 2:
        return
    for i in range(len(anchors) - 1):
        draw_line_segment(grid, anchors[i], anchors[i + 1], char, scale)
