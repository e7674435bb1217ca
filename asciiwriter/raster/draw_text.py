from __future__ import annotations

from asciiwriter.geometry import Point, to_cell
from asciiwriter.raster.grid import CharGrid


def split_lines(text: str) -> list[str]:
    r"""Break on "\n" only, dropping one "\r" before each break and a trailing empty line."""
    if not text:
        return [""]
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def draw_text_centered(grid: CharGrid, center: Point, text: str, scale: float) -> None:
    """Write a multi-line block centered on `center`.

    The block is centered vertically as a whole and every line is centered on
    its own character count. Wide glyphs still take a single cell.
    """
    lines = split_lines(text)
    cx, cy = to_cell(center, scale)
    start_y = cy - (len(lines) - 1) // 2
    for i, line in enumerate(lines):
        start_x = cx - len(line) // 2
        y = start_y + i
        for j, ch in enumerate(line):
            grid.set(start_x + j, y, ch)
