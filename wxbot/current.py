from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from wxbot.errors import UpstreamError
from wxbot.location import Coordinates
from wxbot.open_meteo import OpenMeteoClient


LOGGER = logging.getLogger(__name__)

CURRENT_VARIABLES = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "rain",
    "showers",
    "snowfall",
    "weather_code",
    "cloud_cover",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
    "uv_index",
    "uv_index_clear_sky",
)

# WMO weather interpretation codes as used by Open-Meteo.
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def weather_code_to_str(code: int) -> str | None:
    return WEATHER_CODES.get(code)


def describe_interval(seconds: int) -> str:
    """`900 -> "15 minutes"`, `3660 -> "1 hour and 1 minute"`."""
    hours, rest = divmod(max(0, int(seconds)), 3600)
    minutes, secs = divmod(rest, 60)
    parts = [
        f"{amount} {unit}{'' if amount == 1 else 's'}"
        for amount, unit in ((hours, "hour"), (minutes, "minute"), (secs, "second"))
        if amount
    ]
    if not parts:
        return "0 seconds"
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + " and " + parts[-1]


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class CurrentWeather:
    temperature: float
    relative_humidity: float
    apparent_temperature: float
    precipitation: float
    rain: float
    showers: float
    snowfall: float
    weather_code: int
    cloud_cover: float
    wind_speed: float
    wind_direction: float
    wind_gusts: float
    uv_index: float
    uv_index_clear_sky: float
    # Seconds between the model steps this value was interpolated from.
    interval: int | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CurrentWeather":
        try:
            current = payload["current"]
            interval = current.get("interval")
            return cls(
                temperature=float(current["temperature_2m"]),
                relative_humidity=float(current["relative_humidity_2m"]),
                apparent_temperature=float(current["apparent_temperature"]),
                precipitation=float(current["precipitation"]),
                rain=float(current["rain"]),
                showers=float(current["showers"]),
                snowfall=float(current["snowfall"]),
                weather_code=int(current["weather_code"]),
                cloud_cover=float(current["cloud_cover"]),
                wind_speed=float(current["wind_speed_10m"]),
                wind_direction=float(current["wind_direction_10m"]),
                wind_gusts=float(current["wind_gusts_10m"]),
                uv_index=float(current["uv_index"]),
                uv_index_clear_sky=float(current["uv_index_clear_sky"]),
                interval=None if interval is None else int(interval),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamError(f"malformed current weather: {exc}") from exc

    def describe(self) -> str:
        interval = "unknown" if self.interval is None else describe_interval(self.interval)
        return (
            f"Temperature: {_num(self.temperature)}°C, "
            f"apparent temperature: {_num(self.apparent_temperature)}°C, "
            f"relative humidity: {_num(self.relative_humidity)}%, "
            f"precipitation: {_num(self.precipitation)}mm, "
            f"rain: {_num(self.rain)}mm, "
            f"showers: {_num(self.showers)}mm, "
            f"snowfall: {_num(self.snowfall)}cm, "
            f"weather code: {weather_code_to_str(self.weather_code) or '?'}, "
            f"cloud cover: {_num(self.cloud_cover)}%, "
            f"wind speed: {_num(self.wind_speed)}km/h, "
            f"wind direction: {_num(self.wind_direction)}°, "
            f"wind gusts: {_num(self.wind_gusts)}km/h, "
            f"UVI: {_num(self.uv_index)}, "
            f"clear-sky UVI: {_num(self.uv_index_clear_sky)}, "
            f"interval: {interval}"
        )


async def fetch_current(api: OpenMeteoClient, coordinates: Coordinates) -> CurrentWeather:
    params = [("current", name) for name in CURRENT_VARIABLES]
    return CurrentWeather.from_payload(await api.forecast(coordinates, params))
