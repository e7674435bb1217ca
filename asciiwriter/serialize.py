from __future__ import annotations

from asciiwriter.palette import TermColor
from asciiwriter.raster.grid import BLANK, Cell, CharGrid


RESET = "\x1b[0m"


def sgr(color: TermColor) -> str:
    return f"\x1b[{color.sgr}m"


def serialize_plain(grid: CharGrid) -> str:
    out: list[str] = []
    for row in grid.rows():
        cells = _trim_trailing_blanks(row)
        out.append("".join(cell.char for cell in cells))
        out.append("\n")
    return "".join(out)


def serialize_colored(grid: CharGrid) -> str:
    """Run-length ANSI output: an escape only where the color changes.

    Leaving a color always resets first; a line that ends colored gets a
    trailing reset so nothing bleeds into the next line.
    """
    out: list[str] = []
    for row in grid.rows():
        current: TermColor | None = None
        for cell in _trim_trailing_blanks(row):
            if cell.color != current:
                if current is not None:
                    out.append(RESET)
                if cell.color is not None:
                    out.append(sgr(cell.color))
                current = cell.color
            out.append(cell.char)
        if current is not None:
            out.append(RESET)
        out.append("\n")
    return "".join(out)


def _trim_trailing_blanks(row: list[Cell]) -> list[Cell]:
    end = len(row)
    while end > 0 and row[end - 1].char == BLANK:
        end -= 1
    return row[:end]
