from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wxchart import (
    ChartLayout,
    FontSet,
    LineSeries,
    MarkIntervals,
    Padding,
    PanelSpec,
    Range,
    SolidBarSeries,
    Spacing,
    TextSegment,
    render_png,
)

from wxbot.forecasts.common import BLUE, CLEAR_SKY_BLUE, GREEN, GUST_GREEN, RED, fixed, uv_panel, wind_panel
from wxbot.location import Coordinates
from wxbot.meteo import hour_from_timestamp, wet_bulb_temp
from wxbot.open_meteo import OpenMeteoClient, read_series, read_times, utc_offset


FORECAST_HOURS = 48
HORIZONTAL = 8
HOUR_MARKS = MarkIntervals(1, 2)
HOURLY_LAYOUT = ChartLayout(Padding(above=3, below=19, left=21, right=3), title_scale=18.0, axis_label_scale=14.0)
HOURLY_VARIABLES = (
    "uv_index",
    "uv_index_clear_sky",
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation_probability",
    "precipitation",
    "wind_speed_10m",
    "wind_gusts_10m",
)


@dataclass(frozen=True)
class HourlyForecast:
    hours: tuple[int, ...]
    temperature: tuple[float, ...]
    apparent_temperature: tuple[float, ...]
    relative_humidity: tuple[float, ...]
    precipitation_probability: tuple[float, ...]
    precipitation: tuple[float, ...]
    wind_speed: tuple[float, ...]
    wind_gusts: tuple[float, ...]
    uv_index: tuple[float, ...]
    uv_index_clear_sky: tuple[float, ...]

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "HourlyForecast":
        offset = utc_offset(payload)

        def series(key: str) -> tuple[float, ...]:
            return tuple(read_series(payload, "hourly", key))

        return cls(
            hours=tuple(hour_from_timestamp(t, offset) for t in read_times(payload, "hourly")),
            temperature=series("temperature_2m"),
            apparent_temperature=series("apparent_temperature"),
            relative_humidity=series("relative_humidity_2m"),
            precipitation_probability=series("precipitation_probability"),
            precipitation=series("precipitation"),
            wind_speed=series("wind_speed_10m"),
            wind_gusts=series("wind_gusts_10m"),
            uv_index=series("uv_index"),
            uv_index_clear_sky=series("uv_index_clear_sky"),
        )

    @property
    def wet_bulb_temperature(self) -> tuple[float, ...]:
        return tuple(wet_bulb_temp(t, h) for t, h in zip(self.temperature, self.relative_humidity))


async def fetch_hourly(api: OpenMeteoClient, coordinates: Coordinates) -> HourlyForecast:
    params = [("hourly", name) for name in HOURLY_VARIABLES]
    params += [("wind_speed_unit", "ms"), ("forecast_hours", str(FORECAST_HOURS))]
    return HourlyForecast.from_payload(await api.forecast(coordinates, params))


def hourly_panels(forecast: HourlyForecast) -> list[PanelSpec]:
    hours = forecast.hours
    temperature = PanelSpec(
        title=(
            TextSegment("Dry bulb", RED),
            TextSegment.white(", "),
            TextSegment("wet bulb", BLUE),
            TextSegment.white(" and "),
            TextSegment("apparent", GREEN),
            TextSegment.white(" temperatures (°C)"),
        ),
        labels=hours,
        series=(
            LineSeries(GREEN, fixed(forecast.apparent_temperature)),
            LineSeries(BLUE, fixed(forecast.wet_bulb_temperature)),
            LineSeries(RED, fixed(forecast.temperature)),
        ),
        spacing=Spacing(HORIZONTAL, 3),
        vertical_intervals=MarkIntervals(2, 4),
        horizontal_intervals=HOUR_MARKS,
        center_on_slots=True,
    )
    humidity = PanelSpec(
        title=(TextSegment("Relative humidity", BLUE),),
        labels=hours,
        series=(LineSeries(BLUE, fixed(forecast.relative_humidity, 100)),),
        spacing=Spacing(HORIZONTAL, 1),
        vertical_intervals=MarkIntervals(10, 20),
        horizontal_intervals=HOUR_MARKS,
        value_range=Range(0, 10000),
        center_on_slots=True,
    )
    pop = PanelSpec(
        title=(TextSegment.white("Probability of "), TextSegment("precipitation", (0, 180, 255))),
        labels=hours,
        series=(SolidBarSeries((0, 180, 255), fixed(forecast.precipitation_probability, 100)),),
        spacing=Spacing(HORIZONTAL, 1),
        vertical_intervals=MarkIntervals(10, 20),
        horizontal_intervals=HOUR_MARKS,
        labels_centered=True,
        value_range=Range(0, 10000),
    )
    precipitation = PanelSpec(
        title=(TextSegment.white("Amount of "), TextSegment("precipitation", BLUE), TextSegment.white(" (mm)")),
        labels=hours,
        series=(SolidBarSeries(BLUE, fixed(forecast.precipitation)),),
        spacing=Spacing(HORIZONTAL, 16),
        vertical_intervals=MarkIntervals(1, 1),
        horizontal_intervals=HOUR_MARKS,
        anchor_zero=True,
    )
    wind = wind_panel(
        (
            TextSegment("Wind", GREEN),
            TextSegment.white(" and "),
            TextSegment("gust", GUST_GREEN),
            TextSegment.white(" speed (m/s)"),
        ),
        hours,
        forecast.wind_speed,
        forecast.wind_gusts,
        HORIZONTAL,
        HOUR_MARKS,
    )
    uv = uv_panel(
        (
            TextSegment("UV index", GREEN),
            TextSegment.white(" (and "),
            TextSegment("clear sky UVI", CLEAR_SKY_BLUE),
            TextSegment.white(")"),
        ),
        hours,
        forecast.uv_index,
        forecast.uv_index_clear_sky,
        HORIZONTAL,
        HOUR_MARKS,
    )
    return [temperature, humidity, pop, precipitation, wind, uv]


def render_hourly(forecast: HourlyForecast, fonts: FontSet) -> bytes:
    return render_png(hourly_panels(forecast), fonts, HOURLY_LAYOUT)
