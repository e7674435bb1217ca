from __future__ import annotations

import unittest

import numpy as np

from asciiwriter.geometry import Point
from asciiwriter.raster import (
    CharGrid,
    draw_arrow_heads,
    draw_cell_segment,
    draw_hline,
    draw_line_segment,
    draw_text_centered,
    draw_vline,
    ellipse_fill,
    ellipse_outline,
    head_glyph,
    line_glyph,
    rect_fill,
    rect_outline,
    split_lines,
)
from asciiwriter.raster.draw_shapes import BLOCK


def _lines(grid: CharGrid) -> list[str]:
    return ["".join(cell.char for cell in row).rstrip() for row in grid.rows()]


def _marked(grid: CharGrid, char: str) -> set[tuple[int, int]]:
    ys, xs = np.nonzero(grid.codepoints() == ord(char))
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


class LineRasterTests(unittest.TestCase):
    def test_axis_fills_are_inclusive_in_either_order(self) -> None:
        grid = CharGrid()
        draw_hline(grid, 5, 2, 0, "-")
        draw_vline(grid, 0, 3, 1, "|")
        self.assertEqual(_marked(grid, "-"), {(2, 0), (3, 0), (4, 0), (5, 0)})
        self.assertEqual(_marked(grid, "|"), {(0, 1), (0, 2), (0, 3)})

    def test_glyph_follows_segment_angle(self) -> None:
        origin = Point(0.0, 0.0)
        self.assertEqual(line_glyph(origin, Point(10.0, 0.0)), "-")
        self.assertEqual(line_glyph(origin, Point(0.0, 10.0)), "|")
        self.assertEqual(line_glyph(origin, Point(10.0, 3.0)), "-")
        self.assertEqual(line_glyph(origin, Point(3.0, 10.0)), "|")
        self.assertEqual(line_glyph(origin, Point(10.0, 10.0)), "\\")
        self.assertEqual(line_glyph(Point(10.0, 10.0), origin), "\\")
        self.assertEqual(line_glyph(origin, Point(10.0, -10.0)), "/")
        self.assertEqual(line_glyph(origin, Point(-10.0, 10.0)), "/")

    def test_bresenham_covers_major_axis_without_gaps(self) -> None:
        for x1, y1 in ((7, 3), (3, 7), (9, 9), (12, 1), (0, 6)):
            grid = CharGrid()
            draw_cell_segment(grid, 0, 0, x1, y1, "*")
            cells = _marked(grid, "*")
            self.assertEqual(len(cells), max(x1, y1) + 1)
            self.assertIn((0, 0), cells)
            self.assertIn((x1, y1), cells)
            major = 0 if x1 >= y1 else 1
            self.assertEqual({c[major] for c in cells}, set(range(max(x1, y1) + 1)))
            ordered = sorted(cells, key=lambda c: c[major])
            for a, b in zip(ordered, ordered[1:]):
                self.assertLessEqual(abs(a[0] - b[0]), 1)
                self.assertLessEqual(abs(a[1] - b[1]), 1)

    def test_bresenham_is_direction_independent_in_coverage_count(self) -> None:
        grid = CharGrid()
        draw_cell_segment(grid, 8, 5, 1, 2, "*")
        self.assertEqual(len(_marked(grid, "*")), 8)

    def test_segment_maps_endpoints_with_scale(self) -> None:
        grid = CharGrid()
        draw_line_segment(grid, Point(0.0, 14.0), Point(28.0, 14.0), "-", 14.0)
        self.assertEqual(_lines(grid), ["", "---"])


class ShapeRasterTests(unittest.TestCase):
    def test_rect_outline(self) -> None:
        grid = CharGrid()
        rect_outline(grid, Point(0.0, 0.0), Point(56.0, 56.0), 14.0)
        self.assertEqual(_lines(grid), ["+--+", "|  |", "|  |", "+--+"])
        self.assertEqual(len(_marked(grid, "+")), 4)

    def test_small_rect_is_corners_only(self) -> None:
        grid = CharGrid()
        rect_outline(grid, Point(0.0, 0.0), Point(28.0, 28.0), 14.0)
        self.assertEqual(_lines(grid), ["++", "++"])

    def test_flat_rect_draws_nothing(self) -> None:
        grid = CharGrid()
        rect_outline(grid, Point(0.0, 0.0), Point(5.0, 56.0), 14.0)
        rect_fill(grid, Point(0.0, 0.0), Point(56.0, 0.0), BLOCK, 14.0)
        self.assertEqual((grid.width, grid.height), (0, 0))

    def test_outline_overrides_fill(self) -> None:
        grid = CharGrid()
        rect_fill(grid, Point(0.0, 0.0), Point(56.0, 56.0), BLOCK, 14.0)
        rect_outline(grid, Point(0.0, 0.0), Point(56.0, 56.0), 14.0)
        self.assertEqual(_marked(grid, BLOCK), {(1, 1), (2, 1), (1, 2), (2, 2)})

    def test_tiny_ellipse_is_a_dot(self) -> None:
        grid = CharGrid()
        ellipse_outline(grid, Point(14.0, 14.0), Point(28.0, 28.0), 14.0)
        self.assertEqual(_lines(grid), ["", " o"])

    def test_large_ellipse_uses_slanted_corners(self) -> None:
        grid = CharGrid()
        ellipse_outline(grid, Point(70.0, 70.0), Point(84.0, 84.0), 14.0)
        lines = _lines(grid)
        self.assertEqual(lines[2], "  /_____\\")
        self.assertEqual(lines[5], "  |     |")
        self.assertEqual(lines[8], "  \\_____/")

    def test_medium_ellipse_uses_plain_corners(self) -> None:
        grid = CharGrid()
        ellipse_outline(grid, Point(28.0, 28.0), Point(42.0, 42.0), 14.0)
        self.assertEqual(_lines(grid), ["", " +_+", " | |", " +_+"])

    def test_ellipse_fill_small_circle(self) -> None:
        grid = CharGrid()
        ellipse_fill(grid, Point(14.0, 14.0), Point(28.0, 28.0), "●", 14.0)
        self.assertEqual(_marked(grid, "●"), {(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)})

    def test_ellipse_fill_is_mirror_symmetric(self) -> None:
        grid = CharGrid()
        ellipse_fill(grid, Point(70.0, 70.0), Point(112.0, 84.0), "●", 14.0)
        cells = _marked(grid, "●")
        self.assertTrue(cells)
        for x, y in cells:
            for mx, my in ((10 - x, y), (x, 10 - y)):
                near = {(mx + dx, my + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)}
                self.assertTrue(near & cells, f"no mirror for {(x, y)}")

    def test_degenerate_ellipse_is_skipped(self) -> None:
        grid = CharGrid()
        ellipse_fill(grid, Point(14.0, 14.0), Point(0.0, 28.0), "●", 14.0)
        ellipse_outline(grid, Point(14.0, 14.0), Point(28.0, -1.0), 14.0)
        self.assertEqual((grid.width, grid.height), (0, 0))


class TextAndMarkerTests(unittest.TestCase):
    def test_single_line_is_centered(self) -> None:
        grid = CharGrid()
        draw_text_centered(grid, Point(70.0, 14.0), "abc", 14.0)
        self.assertEqual(_lines(grid), ["", "    abc"])

    def test_multi_line_block_is_centered_per_line(self) -> None:
        grid = CharGrid()
        draw_text_centered(grid, Point(70.0, 14.0), "ab\ncdef\ng", 14.0)
        self.assertEqual(_lines(grid), ["    ab", "   cdef", "     g"])

    def test_text_left_of_origin_is_clipped_by_grid(self) -> None:
        grid = CharGrid()
        draw_text_centered(grid, Point(0.0, 0.0), "hello", 14.0)
        self.assertEqual(_lines(grid), ["llo"])

    def test_lines_break_on_newline_only(self) -> None:
        self.assertEqual(split_lines("a\r\nb"), ["a", "b"])
        self.assertEqual(split_lines("a\nb\n"), ["a", "b"])
        self.assertEqual(split_lines("a\x0cb\x1cc\u2028d"), ["a\x0cb\x1cc\u2028d"])
        self.assertEqual(split_lines(""), [""])

    def test_form_feed_stays_inside_its_line(self) -> None:
        grid = CharGrid()
        draw_text_centered(grid, Point(14.0, 0.0), "a\x0cb", 14.0)
        self.assertEqual(grid.height, 1)
        self.assertEqual(_lines(grid), ["a\x0cb"])

    def test_crlf_text_draws_without_carriage_returns(self) -> None:
        grid = CharGrid()
        draw_text_centered(grid, Point(14.0, 14.0), "a\r\nb", 14.0)
        self.assertEqual(_lines(grid), ["", " a", " b"])

    def test_head_glyph_by_dominant_axis(self) -> None:
        self.assertEqual(head_glyph(5.0, 0.0), ">")
        self.assertEqual(head_glyph(-5.0, 1.0), "<")
        self.assertEqual(head_glyph(0.0, 5.0), "v")
        self.assertEqual(head_glyph(1.0, -5.0), "^")
        self.assertEqual(head_glyph(3.0, 3.0), ">")

    def test_heads_only_at_requested_ends(self) -> None:
        anchors = [Point(0.0, 0.0), Point(42.0, 0.0), Point(42.0, 28.0)]
        grid = CharGrid()
        draw_arrow_heads(grid, anchors, (False, True), 14.0)
        self.assertEqual(_lines(grid), ["", "", "   v"])
        grid = CharGrid()
        draw_arrow_heads(grid, anchors, (True, False), 14.0)
        self.assertEqual(_lines(grid), [">"])

    def test_heads_need_two_anchors(self) -> None:
        grid = CharGrid()
        draw_arrow_heads(grid, [Point(0.0, 0.0)], (True, True), 14.0)
        self.assertEqual((grid.width, grid.height), (0, 0))


if __name__ == "__main__":
    unittest.main()
