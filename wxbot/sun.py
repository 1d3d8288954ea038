from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wxbot.errors import FriendlyError
from wxbot.location import Coordinates
from wxbot.meteo import clock_time
from wxbot.open_meteo import OpenMeteoClient, read_series, utc_offset


FORECAST_DAYS = 2


@dataclass(frozen=True)
class SunTimes:
    sunrises: tuple[int, ...]
    sunsets: tuple[int, ...]
    utc_offset_seconds: int

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SunTimes":
        return cls(
            sunrises=tuple(int(t) for t in read_series(payload, "daily", "sunrise")),
            sunsets=tuple(int(t) for t in read_series(payload, "daily", "sunset")),
            utc_offset_seconds=utc_offset(payload),
        )

    def next_after(self, now: float) -> tuple[int, int]:
        sunrise = next((t for t in self.sunrises if t > now), None)
        sunset = next((t for t in self.sunsets if t > now), None)
        if sunrise is None or sunset is None:
            raise FriendlyError("No upcoming sunrise or sunset in the forecast")
        return sunrise, sunset

    def describe(self, now: float) -> str:
        sunrise, sunset = self.next_after(now)
        rise = clock_time(sunrise, self.utc_offset_seconds)
        set_ = clock_time(sunset, self.utc_offset_seconds)
        if sunrise < sunset:
            return f"🌅{rise} 🌃{set_}"
        if sunrise > sunset:
            return f"🌃{set_} 🌅{rise}"
        return "Eternal day or night?"


async def fetch_sun_times(api: OpenMeteoClient, coordinates: Coordinates) -> SunTimes:
    params = [("daily", "sunrise"), ("daily", "sunset"), ("forecast_days", str(FORECAST_DAYS))]
    return SunTimes.from_payload(await api.forecast(coordinates, params))
