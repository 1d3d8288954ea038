from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wxbot.errors import FriendlyError, WeatherBotError

if TYPE_CHECKING:
    from wxbot.open_meteo import GeocodingResult, OpenMeteoClient
    from wxbot.store import UserLocationStore


_NUMBER = r"(\d+(?:\.\d+)?)"
_DMS_PART = rf"{_NUMBER}\s*°\s*(?:{_NUMBER}\s*['′]\s*)?(?:{_NUMBER}\s*(?:\"|″|'')\s*)?"
_DMS_RE = re.compile(rf"^\s*{_DMS_PART}([NS])[\s,]*{_DMS_PART}([EW])\s*$", re.IGNORECASE)
_DECIMAL_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:,\s*|\s+)(-?\d+(?:\.\d+)?)\s*$")


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise FriendlyError(f"Latitude {self.latitude} is not between -90 and 90")
        if not -180.0 <= self.longitude <= 180.0:
            raise FriendlyError(f"Longitude {self.longitude} is not between -180 and 180")

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"

    @classmethod
    def parse(cls, text: str) -> "Coordinates | None":
        """Read `59.91, 10.75`, `59.91 10.75` or `59°54'36"N 10°45'0"E`.

        Returns None when the text does not look like coordinates at all, so
        the caller can treat it as a place name instead.
        """
        match = _DECIMAL_RE.match(text)
        if match:
            return cls(float(match.group(1)), float(match.group(2)))
        match = _DMS_RE.match(text)
        if match:
            lat = _from_dms(match.group(1, 2, 3), match.group(4).upper() == "S")
            lon = _from_dms(match.group(5, 6, 7), match.group(8).upper() == "W")
            return cls(lat, lon)
        return None


def _from_dms(parts: tuple[str | None, str | None, str | None], negative: bool) -> float:
    degrees, minutes, seconds = (float(p) if p else 0.0 for p in parts)
    if minutes >= 60 or seconds >= 60:
        raise FriendlyError("Minutes and seconds must be below 60")
    value = degrees + minutes / 60 + seconds / 3600
    return -value if negative else value


@dataclass(frozen=True)
class Location:
    coordinates: Coordinates
    name: str | None = None
    country: str | None = None
    feature_code: str | None = None

    @classmethod
    def from_geocoding(cls, result: "GeocodingResult") -> "Location":
        return cls(
            coordinates=Coordinates(result.latitude, result.longitude),
            name=result.name,
            country=result.country,
            feature_code=result.feature_code,
        )

    @property
    def display_name(self) -> str:
        return self.name or "unspecified"

    @property
    def display_country(self) -> str:
        return self.country or "unspecified"

    @property
    def display_feature_code(self) -> str:
        return self.feature_code or "unspecified"


async def resolve_location(
    place: str | None,
    *,
    api: "OpenMeteoClient",
    store: "UserLocationStore",
    domain: int | None,
    user: int,
) -> Location:
    """Location for a weather command: the argument if given, else the user's default."""
    if place and place.strip():
        coordinates = Coordinates.parse(place)
        if coordinates is not None:
            return Location(coordinates)
        return Location.from_geocoding(await api.geocode(place.strip()))
    if domain is None:
        raise WeatherBotError("stored locations are per server, and this interaction has no server")
    stored = store.get(domain, user)
    if stored is None:
        raise FriendlyError("No location set, and no location provided")
    return stored
