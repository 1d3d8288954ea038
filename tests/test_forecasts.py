from __future__ import annotations

import unittest

from wxchart import FontSet, Range, decode_png

from wxbot.forecasts.absolute_humidity import AbsoluteHumidityForecast, absolute_humidity_panel, render_absolute_humidity
from wxbot.forecasts.daily import DAILY_VARIABLES, DailyForecast, daily_panels, render_daily
from wxbot.forecasts.hourly import HOURLY_VARIABLES, HourlyForecast, hourly_panels, render_hourly
from wxbot.forecasts.soil import DEPTHS, SoilMoistureForecast, render_soil_moisture, soil_moisture_panel


START = 1709251200  # 2024-03-01T00:00:00Z
FONTS = FontSet()


def hourly_payload(hours: int, **series: list[float]) -> dict:
    return {
        "utc_offset_seconds": 3600,
        "hourly": {"time": [START + 3600 * i for i in range(hours)], **series},
    }


def wave(count: int, low: float, high: float) -> list[float]:
    return [low + (high - low) * ((i * 7) % count) / count for i in range(count)]


def full_hourly_payload() -> dict:
    values = {
        "uv_index": wave(48, 0, 6),
        "uv_index_clear_sky": wave(48, 0, 7),
        "temperature_2m": wave(48, -3.5, 12.25),
        "relative_humidity_2m": wave(48, 40, 100),
        "apparent_temperature": wave(48, -8, 10),
        "precipitation_probability": wave(48, 0, 100),
        "precipitation": wave(48, 0, 2.4),
        "wind_speed_10m": wave(48, 0, 9),
        "wind_gusts_10m": wave(48, 2, 17),
    }
    assert set(values) == set(HOURLY_VARIABLES)
    return hourly_payload(48, **values)


def full_daily_payload() -> dict:
    daily = {name: wave(14, 0, 20) for name in DAILY_VARIABLES}
    daily["temperature_2m_min"] = wave(14, -6, 2)
    daily["temperature_2m_max"] = wave(14, 3, 11)
    daily["time"] = [START + 86400 * i for i in range(14)]
    return {"utc_offset_seconds": 0, "daily": daily}


class HourlyForecastTests(unittest.TestCase):
    def test_payload_hours_use_local_time(self) -> None:
        forecast = HourlyForecast.from_payload(full_hourly_payload())
        self.assertEqual(forecast.hours[:3], (1, 2, 3))
        self.assertEqual(len(forecast.wet_bulb_temperature), 48)

    def test_panels_in_display_order(self) -> None:
        panels = hourly_panels(HourlyForecast.from_payload(full_hourly_payload()))
        titles = ["".join(segment.text for segment in panel.title) for panel in panels]
        self.assertEqual(
            titles,
            [
                "Dry bulb, wet bulb and apparent temperatures (°C)",
                "Relative humidity",
                "Probability of precipitation",
                "Amount of precipitation (mm)",
                "Wind and gust speed (m/s)",
                "UV index (and clear sky UVI)",
            ],
        )
        self.assertEqual(panels[1].planned_range(), Range(0, 10000))
        self.assertEqual(panels[3].planned_range(), Range(0, 300))

    def test_render_produces_one_wide_image(self) -> None:
        image = decode_png(render_hourly(HourlyForecast.from_payload(full_hourly_payload()), FONTS))
        self.assertEqual(image.shape[1], 48 * 8 + 21 + 3)
        self.assertEqual(image.shape[2], 3)


class DailyForecastTests(unittest.TestCase):
    def test_days_and_render(self) -> None:
        forecast = DailyForecast.from_payload(full_daily_payload())
        self.assertEqual(forecast.days[:3], (1, 2, 3))
        self.assertEqual(len(daily_panels(forecast)), 5)
        image = decode_png(render_daily(forecast, FONTS))
        self.assertEqual(image.shape[1], 14 * 25 + 21 + 9)


class AbsoluteHumidityTests(unittest.TestCase):
    def test_panel_starts_at_zero(self) -> None:
        payload = hourly_payload(
            48,
            temperature_2m=wave(48, 10, 25),
            relative_humidity_2m=wave(48, 30, 90),
        )
        forecast = AbsoluteHumidityForecast.from_payload(payload)
        panel = absolute_humidity_panel(forecast)
        planned = panel.planned_range()
        self.assertEqual(planned.start, 0)
        self.assertEqual(planned.end % 400, 0)
        self.assertGreaterEqual(planned.end, max(panel.series[0].values))
        image = decode_png(render_absolute_humidity(forecast, FONTS))
        self.assertEqual(image.shape[1], 47 * 8 + 21 + 3)


class SoilMoistureTests(unittest.TestCase):
    def payload(self, high: float) -> dict:
        return hourly_payload(72, **{f"soil_moisture_{depth}": wave(72, 0.1, high) for depth in DEPTHS})

    def test_range_has_a_floor_for_dry_soil(self) -> None:
        panel = soil_moisture_panel(SoilMoistureForecast.from_payload(self.payload(0.3)))
        self.assertEqual(panel.planned_range(), Range(0, 5000))

    def test_range_grows_with_wet_soil(self) -> None:
        forecast = SoilMoistureForecast.from_payload(self.payload(0.62))
        panel = soil_moisture_panel(forecast)
        highest = max(v for depth in forecast.moisture for v in depth)
        self.assertEqual(panel.planned_range(), Range(0, round(highest * 10000)))
        title = "".join(segment.text for segment in panel.title)
        self.assertEqual(title, "Soil moisture at 0 to 1, 1 to 3, 3 to 9, 9 to 27 and 27 to 81 cm")

    def test_render(self) -> None:
        image = decode_png(render_soil_moisture(SoilMoistureForecast.from_payload(self.payload(0.4)), FONTS))
        self.assertEqual(image.shape[1], 71 * 8 + 21 + 3)


if __name__ == "__main__":
    unittest.main()
