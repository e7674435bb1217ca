from __future__ import annotations

from enum import Enum

import numpy as np

from asciiwriter.style import RGBA


class TermColor(Enum):
    """The eight ANSI foreground colors, valued by SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    @property
    def sgr(self) -> int:
        return self.value

    @property
    def anchor(self) -> tuple[int, int, int]:
        return _ANCHORS[self]


# Corners of the RGB cube. Nearest-corner matching splits every channel at
# the 128 midpoint.
_ANCHORS: dict[TermColor, tuple[int, int, int]] = {
    TermColor.WHITE: (255, 255, 255),
    TermColor.BLACK: (0, 0, 0),
    TermColor.RED: (255, 0, 0),
    TermColor.GREEN: (0, 255, 0),
    TermColor.BLUE: (0, 0, 255),
    TermColor.YELLOW: (255, 255, 0),
    TermColor.MAGENTA: (255, 0, 255),
    TermColor.CYAN: (0, 255, 255),
}

# WHITE first so argmin ties land on it.
_ORDER: tuple[TermColor, ...] = tuple(_ANCHORS)
_ANCHOR_RGB = np.asarray([_ANCHORS[c] for c in _ORDER], dtype=np.float64)


def resolve_term_color(rgba: RGBA | None) -> TermColor | None:
    if rgba is None:
        return None
    rgb = np.asarray(rgba[:3], dtype=np.float64)
    dist = np.sum((_ANCHOR_RGB - rgb) ** 2, axis=1)
    return _ORDER[int(np.argmin(dist))]


def color_index(color: TermColor | None) -> int:
    """Compact integer form stored in the grid; -1 means no color."""
    if color is None:
        return -1
    return _ORDER.index(color)


def color_from_index(index: int) -> TermColor | None:
    if index < 0:
        return None
    return _ORDER[index]
