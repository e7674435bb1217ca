"""Character-grid render backend.

Draw calls are rasterized onto a lazily growing grid of glyphs. Coordinates
are divided by the call's scale (the style's font size) and rounded to the
nearest cell; Y grows downward.

In terminal mode filled shapes are painted with block glyphs, optionally
colored with ANSI escapes. Outside terminal mode only outlines are drawn, so
the output stays readable as a plain text file. Clip regions are recorded but
never restrict drawing.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from asciiwriter.backend import ClipHandle, ClipRegion, PathSegment, RenderBackend
from asciiwriter.config import WriterConfig, resolve_writer_config
from asciiwriter.geometry import Point, to_cells
from asciiwriter.palette import TermColor, resolve_term_color
from asciiwriter.raster import (
    CharGrid,
    draw_arrow_heads,
    draw_line_segment,
    draw_polyline,
    draw_text_centered,
    ellipse_fill,
    ellipse_outline,
    line_glyph,
    rect_fill,
    rect_outline,
)
from asciiwriter.raster.draw_shapes import BLOCK, DISC
from asciiwriter.serialize import serialize_colored, serialize_plain
from asciiwriter.style import StyleAttr


LOGGER = logging.getLogger(__name__)

DEFAULT_SCALE = 6.0
SOLID_PATH = "*"
DASHED_PATH = "."


class ASCIIWriter(RenderBackend):
    def __init__(self, is_terminal: bool | None = None, use_colors: bool | None = None) -> None:
        config = resolve_writer_config(is_terminal, use_colors)
        self._is_terminal = config.is_terminal
        self._use_colors = config.use_colors
        self._grid = CharGrid()
        self._clips: list[ClipRegion] = []

    @classmethod
    def from_config(cls, config: WriterConfig) -> ASCIIWriter:
        return cls(is_terminal=config.is_terminal, use_colors=config.use_colors)

    @property
    def is_terminal(self) -> bool:
        return self._is_terminal

    @property
    def uses_colors(self) -> bool:
        return self._use_colors

    def set_use_colors(self, use_colors: bool) -> None:
        self._use_colors = use_colors and self._is_terminal

    @property
    def grid(self) -> CharGrid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def clips(self) -> tuple[ClipRegion, ...]:
        return tuple(self._clips)

    def finalize(self) -> str:
        if self._is_terminal and self._use_colors:
            return serialize_colored(self._grid)
        return serialize_plain(self._grid)

    def draw_rect(
        self,
        origin: Point,
        size: Point,
        style: StyleAttr,
        properties: str | None = None,
        clip: ClipHandle | None = None,
    ) -> None:
        if not _finite(origin, size):
            return
        scale = _scale_of(style)
        if to_cells(size.x, scale) <= 0 or to_cells(size.y, scale) <= 0:
            LOGGER.debug("skipping empty rect at %s size %s", origin, size)
            return
        # Fill first so the outline wins where they overlap.
        if style.fill_color is not None and self._is_terminal:
            rect_fill(self._grid, origin, size, BLOCK, scale, self._fill_color(style))
        rect_outline(self._grid, origin, size, scale)

    def draw_circle(self, center: Point, size: Point, style: StyleAttr, properties: str | None = None) -> None:
        if not _finite(center, size):
            return
        scale = _scale_of(style)
        if size.x <= 0.0 or size.y <= 0.0:
            LOGGER.debug("skipping degenerate ellipse at %s size %s", center, size)
            return
        if style.fill_color is not None and self._is_terminal:
            ellipse_fill(self._grid, center, size, DISC, scale, self._fill_color(style))
        ellipse_outline(self._grid, center, size, scale)

    def draw_line(self, start: Point, end: Point, style: StyleAttr, properties: str | None = None) -> None:
        if not _finite(start, end):
            return
        draw_line_segment(self._grid, start, end, line_glyph(start, end), _scale_of(style))

    def draw_text(self, anchor: Point, text: str, style: StyleAttr) -> None:
        if not _finite(anchor):
            return
        draw_text_centered(self._grid, anchor, text, _scale_of(style))

    def draw_arrow(
        self,
        path: Sequence[PathSegment],
        dashed: bool,
        heads: tuple[bool, bool],
        style: StyleAttr,
        properties: str | None = None,
        label: str = "",
    ) -> None:
        if not path:
            return
        scale = _scale_of(style)
        anchors = [anchor for anchor, _control in path]
        if not _finite(*anchors):
            return
        draw_polyline(self._grid, anchors, DASHED_PATH if dashed else SOLID_PATH, scale)
        draw_arrow_heads(self._grid, anchors, heads, scale)
        if label:
            draw_text_centered(self._grid, anchors[len(anchors) // 2], label, scale)

    def create_clip(self, origin: Point, size: Point, corner_radius: int = 0) -> ClipHandle:
        self._clips.append(ClipRegion(origin=origin, size=size, corner_radius=corner_radius))
        handle = len(self._clips) - 1
        LOGGER.debug("recorded clip %d at %s size %s (not applied)", handle, origin, size)
        return handle

    def _fill_color(self, style: StyleAttr) -> TermColor | None:
        if not self._use_colors:
            return None
        return resolve_term_color(style.fill_color)


def _scale_of(style: StyleAttr) -> float:
    scale = float(style.font_size)
    if not math.isfinite(scale) or scale <= 0.0:
        LOGGER.warning("font size %r cannot be used as a scale; falling back to %s", style.font_size, DEFAULT_SCALE)
        return DEFAULT_SCALE
    return scale


def _finite(*points: Point) -> bool:
    if all(p.is_finite() for p in points):
        return True
    LOGGER.debug("skipping draw call with non-finite geometry: %s", points)
    return False
