from __future__ import annotations

import unittest

from wxbot import FriendlyError, UpstreamError
from wxbot.current import CurrentWeather, describe_interval, weather_code_to_str
from wxbot.sun import SunTimes


CURRENT_PAYLOAD = {
    "current": {
        "time": 1709251200,
        "interval": 900,
        "temperature_2m": 4.5,
        "relative_humidity_2m": 81,
        "apparent_temperature": 1.2,
        "precipitation": 0.0,
        "rain": 0.0,
        "showers": 0.0,
        "snowfall": 0.0,
        "weather_code": 3,
        "cloud_cover": 100,
        "wind_speed_10m": 11.2,
        "wind_direction_10m": 225,
        "wind_gusts_10m": 24.5,
        "uv_index": 0.35,
        "uv_index_clear_sky": 0.4,
    }
}


class CurrentWeatherTests(unittest.TestCase):
    def test_weather_codes(self) -> None:
        self.assertEqual(weather_code_to_str(0), "Clear sky")
        self.assertEqual(weather_code_to_str(95), "Thunderstorm")
        self.assertIsNone(weather_code_to_str(4))

    def test_describe_interval(self) -> None:
        self.assertEqual(describe_interval(900), "15 minutes")
        self.assertEqual(describe_interval(3600), "1 hour")
        self.assertEqual(describe_interval(3661), "1 hour, 1 minute and 1 second")
        self.assertEqual(describe_interval(0), "0 seconds")

    def test_describe(self) -> None:
        text = CurrentWeather.from_payload(CURRENT_PAYLOAD).describe()
        self.assertTrue(text.startswith("Temperature: 4.5°C, apparent temperature: 1.2°C, relative humidity: 81%"))
        self.assertIn("weather code: Overcast", text)
        self.assertIn("wind gusts: 24.5km/h", text)
        self.assertTrue(text.endswith("interval: 15 minutes"))

    def test_missing_field_is_upstream_error(self) -> None:
        payload = {"current": dict(CURRENT_PAYLOAD["current"])}
        del payload["current"]["rain"]
        with self.assertRaises(UpstreamError):
            CurrentWeather.from_payload(payload)


class SunTimesTests(unittest.TestCase):
    def setUp(self) -> None:
        # 2024-03-01 06:10Z / 17:20Z and the day after.
        self.times = SunTimes(
            sunrises=(1709273400, 1709359740),
            sunsets=(1709313600, 1709400060),
            utc_offset_seconds=3600,
        )

    def test_sunrise_first_in_the_night(self) -> None:
        self.assertEqual(self.times.describe(1709251200), "🌅07:10 🌃18:20")

    def test_sunset_first_during_the_day(self) -> None:
        self.assertEqual(self.times.describe(1709280000), "🌃18:20 🌅07:09")

    def test_no_upcoming_event_is_friendly(self) -> None:
        with self.assertRaises(FriendlyError):
            self.times.describe(1709500000)

    def test_from_payload(self) -> None:
        payload = {
            "utc_offset_seconds": 0,
            "daily": {"time": [1709251200], "sunrise": [1709273400], "sunset": [1709313600]},
        }
        times = SunTimes.from_payload(payload)
        self.assertEqual(times.sunrises, (1709273400,))
        self.assertEqual(times.describe(1709251200), "🌅06:10 🌃17:20")


if __name__ == "__main__":
    unittest.main()
