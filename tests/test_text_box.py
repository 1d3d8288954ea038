from __future__ import annotations

import math
import unittest

import numpy as np

from wxchart import Chart, ChartContractError, FontHandle, Padding, Range, Spacing, TextBox, TextSegment
from wxchart.raster.draw_text import line_height


RED = (255, 0, 0)
GREEN = (0, 255, 0)


class TextBoxTests(unittest.TestCase):
    def setUp(self) -> None:
        self.font = FontHandle()
        self.px = self.font.at(14)

    def test_segments_join_on_one_line_when_they_fit(self) -> None:
        box = TextBox([TextSegment.white("a "), TextSegment.white("b")], self.font, 14, max_width=500)
        self.assertEqual(box.line_texts(), ["a b"])
        self.assertEqual(len(box.lines[0]), 1)

    def test_inner_whitespace_is_kept(self) -> None:
        box = TextBox([TextSegment.white("a   b")], self.font, 14, max_width=500)
        self.assertEqual(box.line_texts(), ["a   b"])

    def test_color_changes_start_new_runs(self) -> None:
        box = TextBox([TextSegment("hot ", RED), TextSegment("cold", GREEN)], self.font, 14, max_width=500)
        runs = box.lines[0]
        self.assertEqual([run.color for run in runs], [RED, GREEN])
        self.assertEqual(runs[0].x, 0.0)
        self.assertAlmostEqual(runs[1].x, self.px.getlength("hot") + self.px.getlength(" "))

    def test_wraps_at_whitespace_and_drops_it(self) -> None:
        max_width = int(math.ceil(self.px.getlength("one") + self.px.getlength(" ")))
        box = TextBox([TextSegment.white("one two")], self.font, 14, max_width=max_width)
        self.assertEqual(box.line_texts(), ["one", "two"])
        self.assertEqual(box.height, 2 * line_height(self.px))

    def test_overflow_is_truncated_at_line_budget(self) -> None:
        box = TextBox([TextSegment.white("alpha beta gamma")], self.font, 14, max_width=1, line_budget=2)
        self.assertEqual(box.line_texts(), ["alpha", "beta"])

    def test_leading_whitespace_is_kept_when_it_fits(self) -> None:
        box = TextBox([TextSegment.white(" a"), TextSegment(" b", RED)], self.font, 14, max_width=500)
        self.assertEqual(box.line_texts(), [" a b"])

    def test_word_after_leading_whitespace_is_not_lost(self) -> None:
        max_width = int(math.ceil(self.px.getlength("Temperature"))) + 1
        box = TextBox([TextSegment.white(" Temperature")], self.font, 14, max_width=max_width, line_budget=1)
        self.assertEqual(box.line_texts(), ["Temperature"])

    def test_replaced_leading_whitespace_does_not_use_up_a_line(self) -> None:
        max_width = int(math.ceil(self.px.getlength("Temperature"))) + 1
        box = TextBox([TextSegment.white(" Temperature Next")], self.font, 14, max_width=max_width, line_budget=2)
        self.assertEqual(box.line_texts(), ["Temperature", "Next"])
        self.assertEqual(box.height, 2 * line_height(self.px))

    def test_empty_title_has_no_height(self) -> None:
        box = TextBox([], self.font, 14, max_width=100)
        self.assertEqual(box.height, 0)
        self.assertEqual(box.width, 0)

    def test_invalid_budget_raises(self) -> None:
        with self.assertRaises(ChartContractError):
            TextBox([TextSegment.white("x")], self.font, 14, max_width=100, line_budget=0)

    def test_draws_each_segment_in_its_color_above_the_plot(self) -> None:
        box = TextBox([TextSegment("Temp ", RED), TextSegment("Dew", GREEN)], self.font, 14, max_width=200)
        chart = Chart(5, Range(0, 100), Spacing(50, 10), Padding(box.height + 2, 2, 4, 1))
        chart.draw(box)
        canvas = chart.into_canvas().astype(int)
        title_rows = canvas[: box.height + 2]
        reds = (title_rows[:, :, 0] > 0) & (title_rows[:, :, 1] == 0)
        greens = (title_rows[:, :, 1] > 0) & (title_rows[:, :, 0] == 0)
        self.assertTrue(np.any(reds))
        self.assertTrue(np.any(greens))
        self.assertFalse(np.any(canvas[:, :4] != 0))

    def test_title_taller_than_padding_raises(self) -> None:
        box = TextBox([TextSegment.white("Title")], self.font, 14, max_width=200)
        chart = Chart(5, Range(0, 100), Spacing(50, 10), Padding(0, 2, 4, 1))
        with self.assertRaises(ChartContractError):
            chart.draw(box)


class FontHandleTests(unittest.TestCase):
    def test_missing_font_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            FontHandle("/nonexistent/font.ttf")

    def test_fonts_are_cached_per_size(self) -> None:
        handle = FontHandle()
        self.assertIs(handle.at(12), handle.at(12.2))


if __name__ == "__main__":
    unittest.main()
