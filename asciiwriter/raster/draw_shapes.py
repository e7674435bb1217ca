from __future__ import annotations

import math

from asciiwriter.geometry import Point, to_cell, to_cells
from asciiwriter.palette import TermColor
from asciiwriter.raster.draw_lines import HLINE, VLINE, DIAG_DOWN, DIAG_UP, draw_hline, draw_vline
from asciiwriter.raster.grid import CharGrid


CORNER = "+"
BLOCK = "█"
DISC = "●"
ELLIPSE_TOP = "_"
ELLIPSE_DOT = "o"


def rect_fill(
    grid: CharGrid,
    top_left: Point,
    size: Point,
    char: str,
    scale: float,
    color: TermColor | None = None,
) -> None:
    ix, iy = to_cell(top_left, scale)
    w = to_cells(size.x, scale)
    h = to_cells(size.y, scale)
    if w <= 0 or h <= 0:
        return
    for yy in range(iy, iy + h):
        draw_hline(grid, ix, ix + w - 1, yy, char, color)


def rect_outline(grid: CharGrid, top_left: Point, size: Point, scale: float) -> None:
    ix, iy = to_cell(top_left, scale)
    w = to_cells(size.x, scale)
    h = to_cells(size.y, scale)
    if w <= 0 or h <= 0:
        return

    right = ix + w - 1
    bottom = iy + h - 1
    grid.set(ix, iy, CORNER)
    grid.set(right, iy, CORNER)
    grid.set(ix, bottom, CORNER)
    grid.set(right, bottom, CORNER)

    if w > 2:
        draw_hline(grid, ix + 1, right - 1, iy, HLINE)
        draw_hline(grid, ix + 1, right - 1, bottom, HLINE)
    if h > 2:
        draw_vline(grid, ix, iy + 1, bottom - 1, VLINE)
        draw_vline(grid, right, iy + 1, bottom - 1, VLINE)


def ellipse_outline(grid: CharGrid, center: Point, size: Point, scale: float) -> None:
    """Box-like ellipse: flat spans on each side, slanted corners once it is big enough."""
    a = max(size.x / 2.0, 0.0)
    b = max(size.y / 2.0, 0.0)
    if a <= 0.0 or b <= 0.0:
        return

    cx, cy = to_cell(center, scale)
    w = to_cells(a * 2.0, scale)
    h = to_cells(b * 2.0, scale)
    if w <= 2 or h <= 2:
        grid.set(cx, cy, ELLIPSE_DOT)
        return

    left = cx - w // 2
    right = cx + w // 2
    top = cy - h // 2
    bottom = cy + h // 2

    for x in range(left + 1, right):
        grid.set(x, top, ELLIPSE_TOP)
        grid.set(x, bottom, ELLIPSE_TOP)
    for y in range(top + 1, bottom):
        grid.set(left, y, VLINE)
        grid.set(right, y, VLINE)

    if w > 3 and h > 3:
        grid.set(left, top, DIAG_UP)
        grid.set(right, top, DIAG_DOWN)
        grid.set(left, bottom, DIAG_DOWN)
        grid.set(right, bottom, DIAG_UP)
    else:
        grid.set(left, top, CORNER)
        grid.set(right, top, CORNER)
        grid.set(left, bottom, CORNER)
        grid.set(right, bottom, CORNER)


def ellipse_fill(
    grid: CharGrid,
    center: Point,
    size: Point,
    char: str,
    scale: float,
    color: TermColor | None = None,
) -> None:
    a = max(size.x / 2.0, 0.0)
    b = max(size.y / 2.0, 0.0)
    if a <= 0.0 or b <= 0.0:
        return
    if not all(math.isfinite(v) for v in (a, b, center.x, center.y)):
        return
    row0 = math.floor((center.y - b) / scale)
    row1 = math.ceil((center.y + b) / scale)

    for iy in range(row0, row1 + 1):
        # x = a * sqrt(1 - y^2 / b^2), sampled at the row's source-space y.
        dy = iy * scale - center.y
        inside = 1.0 - (dy * dy) / (b * b)
        if inside < 0.0:
            continue
        span = a * math.sqrt(inside)
        x0 = math.floor((center.x - span) / scale)
        x1 = math.ceil((center.x + span) / scale)
        draw_hline(grid, x0, x1, iy, char, color)
