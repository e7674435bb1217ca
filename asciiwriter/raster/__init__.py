from .draw_lines import draw_cell_segment, draw_hline, draw_line_segment, draw_polyline, draw_vline, line_glyph
from .draw_markers import draw_arrow_heads, head_glyph
from .draw_shapes import ellipse_fill, ellipse_outline, rect_fill, rect_outline
from .draw_text import draw_text_centered, split_lines
from .grid import BLANK, Cell, CharGrid

__all__ = [
    "BLANK",
    "Cell",
    "CharGrid",
    "draw_arrow_heads",
    "draw_cell_segment",
    "draw_hline",
    "draw_line_segment",
    "draw_polyline",
    "draw_text_centered",
    "draw_vline",
    "ellipse_fill",
    "ellipse_outline",
    "head_glyph",
    "line_glyph",
    "rect_fill",
    "rect_outline",
    "split_lines",
]
