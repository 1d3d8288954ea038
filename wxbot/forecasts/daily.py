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
from wxbot.meteo import day_from_timestamp
from wxbot.open_meteo import OpenMeteoClient, read_series, read_times, utc_offset


FORECAST_DAYS = 14
HORIZONTAL = 25
DAY_MARKS = MarkIntervals(1, 1)
DAILY_LAYOUT = ChartLayout(Padding(above=3, below=19, left=21, right=9), title_scale=14.0, axis_label_scale=14.0)
DAILY_VARIABLES = (
    "temperature_2m_min",
    "temperature_2m_max",
    "apparent_temperature_min",
    "apparent_temperature_max",
    "precipitation_sum",
    "precipitation_probability_min",
    "precipitation_probability_mean",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "wind_gusts_10m_max",
    "uv_index_max",
    "uv_index_clear_sky_max",
)
APPARENT_GREEN = (0, 170, 33)


@dataclass(frozen=True)
class DailyForecast:
    days: tuple[int, ...]
    temperature_min: tuple[float, ...]
    temperature_max: tuple[float, ...]
    apparent_temperature_min: tuple[float, ...]
    apparent_temperature_max: tuple[float, ...]
    precipitation_sum: tuple[float, ...]
    precipitation_probability_min: tuple[float, ...]
    precipitation_probability_mean: tuple[float, ...]
    precipitation_probability_max: tuple[float, ...]
    wind_speed_max: tuple[float, ...]
    wind_gusts_max: tuple[float, ...]
    uv_index_max: tuple[float, ...]
    uv_index_clear_sky_max: tuple[float, ...]

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "DailyForecast":
        offset = utc_offset(payload)

        def series(key: str) -> tuple[float, ...]:
            return tuple(read_series(payload, "daily", key))

        return cls(
            days=tuple(day_from_timestamp(t, offset) for t in read_times(payload, "daily")),
            temperature_min=series("temperature_2m_min"),
            temperature_max=series("temperature_2m_max"),
            apparent_temperature_min=series("apparent_temperature_min"),
            apparent_temperature_max=series("apparent_temperature_max"),
            precipitation_sum=series("precipitation_sum"),
            precipitation_probability_min=series("precipitation_probability_min"),
            precipitation_probability_mean=series("precipitation_probability_mean"),
            precipitation_probability_max=series("precipitation_probability_max"),
            wind_speed_max=series("wind_speed_10m_max"),
            wind_gusts_max=series("wind_gusts_10m_max"),
            uv_index_max=series("uv_index_max"),
            uv_index_clear_sky_max=series("uv_index_clear_sky_max"),
        )


async def fetch_daily(api: OpenMeteoClient, coordinates: Coordinates) -> DailyForecast:
    params = [("daily", name) for name in DAILY_VARIABLES]
    params += [("wind_speed_unit", "ms"), ("forecast_days", str(FORECAST_DAYS))]
    return DailyForecast.from_payload(await api.forecast(coordinates, params))


def daily_panels(forecast: DailyForecast) -> list[PanelSpec]:
    days = forecast.days
    temperature = PanelSpec(
        title=(
            TextSegment("Minimum", BLUE),
            TextSegment.white(", "),
            TextSegment("maximum", RED),
            TextSegment.white(" and "),
            TextSegment("apparent minimum and maximum", APPARENT_GREEN),
            TextSegment.white(" temperatures (°C)"),
        ),
        labels=days,
        series=(
            LineSeries(APPARENT_GREEN, fixed(forecast.apparent_temperature_min)),
            LineSeries(APPARENT_GREEN, fixed(forecast.apparent_temperature_max)),
            LineSeries(BLUE, fixed(forecast.temperature_min)),
            LineSeries(RED, fixed(forecast.temperature_max)),
        ),
        spacing=Spacing(HORIZONTAL, 3),
        vertical_intervals=MarkIntervals(2, 4),
        horizontal_intervals=DAY_MARKS,
        center_on_slots=True,
    )
    pop = PanelSpec(
        title=(
            TextSegment("Maximum", (0, 90, 255)),
            TextSegment.white(", "),
            TextSegment("mean", (0, 180, 255)),
            TextSegment.white(" and "),
            TextSegment("minimum", (100, 200, 255)),
            TextSegment.white(" probability of precipitation"),
        ),
        labels=days,
        series=(
            SolidBarSeries((0, 90, 255), fixed(forecast.precipitation_probability_max, 100)),
            SolidBarSeries((0, 180, 255), fixed(forecast.precipitation_probability_mean, 100)),
            SolidBarSeries((100, 200, 255), fixed(forecast.precipitation_probability_min, 100)),
        ),
        spacing=Spacing(HORIZONTAL, 1),
        vertical_intervals=MarkIntervals(10, 20),
        horizontal_intervals=DAY_MARKS,
        labels_centered=True,
        value_range=Range(0, 10000),
    )
    precipitation = PanelSpec(
        title=(TextSegment.white("Total "), TextSegment("precipitation", BLUE), TextSegment.white(" (mm)")),
        labels=days,
        series=(SolidBarSeries(BLUE, fixed(forecast.precipitation_sum)),),
        spacing=Spacing(HORIZONTAL, 1),
        vertical_intervals=MarkIntervals(25, 25),
        horizontal_intervals=DAY_MARKS,
        labels_centered=True,
        anchor_zero=True,
    )
    wind = wind_panel(
        (
            TextSegment.white("Maximum "),
            TextSegment("wind", GREEN),
            TextSegment.white(" and "),
            TextSegment("gust", GUST_GREEN),
            TextSegment.white(" speeds (m/s)"),
        ),
        days,
        forecast.wind_speed_max,
        forecast.wind_gusts_max,
        HORIZONTAL,
        DAY_MARKS,
    )
    uv = uv_panel(
        (
            TextSegment("UV index", GREEN),
            TextSegment.white(" (and "),
            TextSegment("clear sky UV", CLEAR_SKY_BLUE),
            TextSegment.white(")"),
        ),
        days,
        forecast.uv_index_max,
        forecast.uv_index_clear_sky_max,
        HORIZONTAL,
        DAY_MARKS,
    )
    return [temperature, pop, precipitation, wind, uv]


def render_daily(forecast: DailyForecast, fonts: FontSet) -> bytes:
    return render_png(daily_panels(forecast), fonts, DAILY_LAYOUT)
