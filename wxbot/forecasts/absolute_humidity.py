from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wxchart import FontSet, LineSeries, MarkIntervals, PanelSpec, Spacing, TextSegment, render_png

from wxbot.forecasts.common import BLUE, fixed
from wxbot.forecasts.hourly import HORIZONTAL, HOUR_MARKS, HOURLY_LAYOUT
from wxbot.location import Coordinates
from wxbot.meteo import absolute_humidity, hour_from_timestamp
from wxbot.open_meteo import OpenMeteoClient, read_series, read_times, utc_offset


FORECAST_HOURS = 48


@dataclass(frozen=True)
class AbsoluteHumidityForecast:
    hours: tuple[int, ...]
    temperature: tuple[float, ...]
    relative_humidity: tuple[float, ...]

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AbsoluteHumidityForecast":
        offset = utc_offset(payload)
        return cls(
            hours=tuple(hour_from_timestamp(t, offset) for t in read_times(payload, "hourly")),
            temperature=tuple(read_series(payload, "hourly", "temperature_2m")),
            relative_humidity=tuple(read_series(payload, "hourly", "relative_humidity_2m")),
        )

    @property
    def absolute_humidity(self) -> tuple[float, ...]:
        return tuple(absolute_humidity(h / 100.0, t) for t, h in zip(self.temperature, self.relative_humidity))


async def fetch_absolute_humidity(api: OpenMeteoClient, coordinates: Coordinates) -> AbsoluteHumidityForecast:
    params = [
        ("hourly", "temperature_2m"),
        ("hourly", "relative_humidity_2m"),
        ("forecast_hours", str(FORECAST_HOURS)),
    ]
    return AbsoluteHumidityForecast.from_payload(await api.forecast(coordinates, params))


def absolute_humidity_panel(forecast: AbsoluteHumidityForecast) -> PanelSpec:
    return PanelSpec(
        title=(TextSegment("Absolute humidity", BLUE),),
        labels=forecast.hours,
        series=(LineSeries(BLUE, fixed(forecast.absolute_humidity)),),
        spacing=Spacing(HORIZONTAL, 3),
        vertical_intervals=MarkIntervals(2, 4),
        horizontal_intervals=HOUR_MARKS,
        anchor_zero=True,
    )


def render_absolute_humidity(forecast: AbsoluteHumidityForecast, fonts: FontSet) -> bytes:
    return render_png([absolute_humidity_panel(forecast)], fonts, HOURLY_LAYOUT)
