from __future__ import annotations

import unittest

from wxbot.meteo import absolute_humidity, clock_time, day_from_timestamp, hour_from_timestamp, wet_bulb_temp


# 2024-03-01T23:30:00Z
TIMESTAMP = 1709335800


class MeteoTests(unittest.TestCase):
    def test_hour_and_day_follow_utc_offset(self) -> None:
        self.assertEqual(hour_from_timestamp(TIMESTAMP, 0), 23)
        self.assertEqual(day_from_timestamp(TIMESTAMP, 0), 1)
        self.assertEqual(hour_from_timestamp(TIMESTAMP, 3600), 0)
        self.assertEqual(day_from_timestamp(TIMESTAMP, 3600), 2)
        self.assertEqual(hour_from_timestamp(TIMESTAMP, -5 * 3600), 18)

    def test_clock_time(self) -> None:
        self.assertEqual(clock_time(TIMESTAMP, 0), "23:30")
        self.assertEqual(clock_time(TIMESTAMP, 5400), "01:00")

    def test_wet_bulb_matches_stull(self) -> None:
        self.assertAlmostEqual(wet_bulb_temp(20, 50), 13.7, places=1)
        self.assertLess(wet_bulb_temp(30, 20), 30)

    def test_absolute_humidity(self) -> None:
        self.assertAlmostEqual(absolute_humidity(0.5, 30), 15.18, places=1)
        self.assertAlmostEqual(absolute_humidity(0.0, 10), 0.0)
        self.assertGreater(absolute_humidity(1.0, 20), absolute_humidity(0.5, 20))


if __name__ == "__main__":
    unittest.main()
