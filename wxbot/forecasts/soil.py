from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wxchart import FontSet, LineSeries, MarkIntervals, PanelSpec, Range, Spacing, TextSegment, render_png, to_fixed_point

from wxbot.forecasts.common import fixed
from wxbot.forecasts.hourly import HORIZONTAL, HOUR_MARKS, HOURLY_LAYOUT
from wxbot.location import Coordinates
from wxbot.meteo import hour_from_timestamp
from wxbot.open_meteo import OpenMeteoClient, read_series, read_times, utc_offset


FORECAST_HOURS = 72
DEPTHS = ("0_to_1cm", "1_to_3cm", "3_to_9cm", "9_to_27cm", "27_to_81cm")
DEPTH_COLORS = (
    (255, 200, 200),
    (255, 150, 150),
    (255, 100, 100),
    (200, 50, 50),
    (150, 0, 0),
)
# Keeps a mostly dry forecast from zooming in on noise.
MIN_RANGE_TOP = 0.5


@dataclass(frozen=True)
class SoilMoistureForecast:
    hours: tuple[int, ...]
    # Volumetric fraction (m³/m³) per depth, shallowest first.
    moisture: tuple[tuple[float, ...], ...]

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SoilMoistureForecast":
        offset = utc_offset(payload)
        return cls(
            hours=tuple(hour_from_timestamp(t, offset) for t in read_times(payload, "hourly")),
            moisture=tuple(tuple(read_series(payload, "hourly", f"soil_moisture_{depth}")) for depth in DEPTHS),
        )


async def fetch_soil_moisture(api: OpenMeteoClient, coordinates: Coordinates) -> SoilMoistureForecast:
    params = [("hourly", f"soil_moisture_{depth}") for depth in DEPTHS]
    params.append(("forecast_hours", str(FORECAST_HOURS)))
    return SoilMoistureForecast.from_payload(await api.forecast(coordinates, params))


def soil_moisture_panel(forecast: SoilMoistureForecast) -> PanelSpec:
    highest = max((m for depth in forecast.moisture for m in depth), default=0.0)
    value_range = Range(0, to_fixed_point(max(highest, MIN_RANGE_TOP) * 100))
    title = [TextSegment.white("Soil moisture at ")]
    separators = (", ", ", ", ", ", " and ", " cm")
    for depth, color, separator in zip(DEPTHS, DEPTH_COLORS, separators):
        title.append(TextSegment(depth.removesuffix("cm").replace("_", " "), color))
        title.append(TextSegment.white(separator))
    # Deepest layer first so the shallow, fast-changing layers stay on top.
    series = [LineSeries(color, fixed(values, 100)) for values, color in zip(forecast.moisture, DEPTH_COLORS)]
    return PanelSpec(
        title=title,
        labels=forecast.hours,
        series=tuple(reversed(series)),
        spacing=Spacing(HORIZONTAL, 3),
        vertical_intervals=MarkIntervals(5, 5),
        horizontal_intervals=HOUR_MARKS,
        value_range=value_range,
    )


def render_soil_moisture(forecast: SoilMoistureForecast, fonts: FontSet) -> bytes:
    return render_png([soil_moisture_panel(forecast)], fonts, HOURLY_LAYOUT)
