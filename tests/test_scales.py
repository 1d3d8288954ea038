from __future__ import annotations

import math
import unittest

from wxchart import ChartContractError, Range, next_multiple, plan_value_range, previous_and_next_multiple, to_fixed_point
from wxchart.scales import format_tick, previous_multiple


class ScalesTests(unittest.TestCase):
    def test_to_fixed_point_rounds_half_away_from_zero(self) -> None:
        self.assertEqual(to_fixed_point(2.5), 250)
        self.assertEqual(to_fixed_point(0.125), 13)
        self.assertEqual(to_fixed_point(-0.125), -13)
        self.assertEqual(to_fixed_point(-4), -400)

    def test_to_fixed_point_rejects_non_finite(self) -> None:
        for bad in (math.nan, math.inf, -math.inf, None):
            with self.subTest(value=bad), self.assertRaises(ChartContractError):
                to_fixed_point(bad)

    def test_range_length_is_inclusive(self) -> None:
        self.assertEqual(len(Range(0, 10000)), 10001)
        self.assertEqual(Range(-400, 400).span, 800)
        with self.assertRaises(ChartContractError):
            Range(5, 1)

    def test_next_and_previous_multiple(self) -> None:
        self.assertEqual(next_multiple(1001, 4), 1004)
        self.assertEqual(next_multiple(1000, 4), 1000)
        self.assertEqual(next_multiple(0, 400), 0)
        self.assertEqual(next_multiple(-7, 5), -5)
        self.assertEqual(previous_multiple(-7, 5), -10)
        with self.assertRaises(ChartContractError):
            next_multiple(10, 0)

    def test_previous_and_next_multiple_bounds_the_input(self) -> None:
        for start, end in ((1000, 2000), (1001, 1999), (-350, 1270), (-1, 1), (7, 8)):
            for interval in (1, 4, 100, 400, 500):
                with self.subTest(start=start, end=end, interval=interval):
                    out = previous_and_next_multiple(Range(start, end), interval)
                    self.assertLessEqual(out.start, start)
                    self.assertGreaterEqual(out.end, end)
                    self.assertEqual(out.start % interval, 0)
                    self.assertEqual(out.end % interval, 0)
                    self.assertLess(start - out.start, interval)

    def test_temperature_series_plans_to_whole_multiples(self) -> None:
        values = [to_fixed_point(v) for v in (10, 20, 15)]
        self.assertEqual(previous_and_next_multiple(Range(min(values), max(values)), 4), Range(1000, 2000))
        self.assertEqual(plan_value_range(values, 400, anchor_zero=False), Range(800, 2000))

    def test_degenerate_range_is_widened_by_one_interval(self) -> None:
        self.assertEqual(previous_and_next_multiple(Range(1200, 1200), 400), Range(1200, 1600))
        self.assertEqual(previous_and_next_multiple(Range(0, 0), 100), Range(0, 100))

    def test_plan_value_range_anchored_at_zero(self) -> None:
        self.assertEqual(plan_value_range([0, 0, 0], 100, anchor_zero=True), Range(0, 100))
        self.assertEqual(plan_value_range([30, 1450, 220], 500, anchor_zero=True), Range(0, 1500))
        self.assertEqual(plan_value_range([-300], 100, anchor_zero=True), Range(0, 100))
        self.assertEqual(plan_value_range([], 400, anchor_zero=False), Range(0, 400))

    def test_format_tick(self) -> None:
        self.assertEqual(format_tick(2000), "20")
        self.assertEqual(format_tick(250), "2.5")
        self.assertEqual(format_tick(-400), "-4")
        self.assertEqual(format_tick(0), "0")


if __name__ == "__main__":
    unittest.main()
