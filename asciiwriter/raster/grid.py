from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from asciiwriter.palette import TermColor, color_from_index, color_index


BLANK = " "
NO_COLOR = -1
_BLANK_CODE = ord(BLANK)


@dataclass(frozen=True)
class Cell:
    char: str = BLANK
    color: TermColor | None = None


class CharGrid:
    """Lazily growing 2-D buffer of glyphs (stored as code points) with an optional terminal color per cell.

    The logical size only ever grows, to 1 + the largest coordinate written on
    each axis. Backing arrays are over-allocated so repeated growth stays cheap;
    cells outside the logical size are never observable.
    """

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._chars = np.full((0, 0), _BLANK_CODE, dtype=np.uint32)
        self._colors = np.full((0, 0), NO_COLOR, dtype=np.int8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set(self, x: int, y: int, char: str, color: TermColor | None = None) -> None:
        if x < 0 or y < 0:
            return
        self._ensure_size(x, y)
        self._chars[y, x] = ord(char)
        self._colors[y, x] = color_index(color)

    def get(self, x: int, y: int) -> Cell:
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return Cell()
        return Cell(char=chr(int(self._chars[y, x])), color=color_from_index(int(self._colors[y, x])))

    def rows(self) -> Iterator[list[Cell]]:
        for y in range(self._height):
            chars = self._chars[y, : self._width].tolist()
            colors = self._colors[y, : self._width].tolist()
            yield [Cell(char=chr(ch), color=color_from_index(c)) for ch, c in zip(chars, colors, strict=True)]

    def codepoints(self) -> np.ndarray:
        """Copy of the visible glyphs as code points, shape (height, width)."""
        return self._chars[: self._height, : self._width].copy()

    def _ensure_size(self, x: int, y: int) -> None:
        need_h = max(self._height, y + 1)
        need_w = max(self._width, x + 1)
        cap_h, cap_w = self._chars.shape
        if need_h > cap_h or need_w > cap_w:
            new_h = max(need_h, cap_h * 2) if need_h > cap_h else cap_h
            new_w = max(need_w, cap_w * 2) if need_w > cap_w else cap_w
            chars = np.full((new_h, new_w), _BLANK_CODE, dtype=np.uint32)
            colors = np.full((new_h, new_w), NO_COLOR, dtype=np.int8)
            chars[:cap_h, :cap_w] = self._chars
            colors[:cap_h, :cap_w] = self._colors
            self._chars = chars
            self._colors = colors
        self._height = need_h
        self._width = need_w
