from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Sequence

import aiohttp

from wxbot.errors import FriendlyError, UpstreamError
from wxbot.location import Coordinates


LOGGER = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
RAW_SNIPPET_CHARS = 300

Params = Sequence[tuple[str, str]]


@dataclass(frozen=True)
class GeocodingResult:
    id: int
    name: str
    latitude: float
    longitude: float
    feature_code: str
    elevation: float | None = None
    country_code: str | None = None
    country: str | None = None
    population: int | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "GeocodingResult":
        try:
            return cls(
                id=int(payload["id"]),
                name=str(payload["name"]),
                latitude=float(payload["latitude"]),
                longitude=float(payload["longitude"]),
                feature_code=str(payload["feature_code"]),
                elevation=payload.get("elevation"),
                country_code=payload.get("country_code"),
                country=payload.get("country"),
                population=payload.get("population"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamError(f"malformed geocoding result: {payload!r}") from exc


class OpenMeteoClient:
    """Thin async client for the Open-Meteo forecast and geocoding APIs."""

    def __init__(self, session: aiohttp.ClientSession, *, timeout_s: float = 15.0) -> None:
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_s)

    async def forecast(self, coordinates: Coordinates, params: Params) -> dict[str, Any]:
        query = list(params) + [
            ("timeformat", "unixtime"),
            ("timezone", "auto"),
            ("latitude", str(coordinates.latitude)),
            ("longitude", str(coordinates.longitude)),
        ]
        return await self._get_json(FORECAST_URL, query)

    async def geocode(self, place: str) -> GeocodingResult:
        payload = await self._get_json(GEOCODING_URL, [("count", "1"), ("format", "json"), ("name", place)])
        results = payload.get("results") or []
        if not results:
            raise FriendlyError("No geocoding results")
        return GeocodingResult.from_payload(results[0])

    async def _get_json(self, url: str, params: Params) -> dict[str, Any]:
        LOGGER.debug("GET %s %s", url, params)
        try:
            async with self._session.get(url, params=list(params), timeout=self._timeout) as response:
                status = response.status
                body = await response.text()
        except aiohttp.ClientError as exc:
            raise UpstreamError(f"request to {url} failed: {exc}") from exc
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise UpstreamError(f"{url} returned non-JSON (HTTP {status}): {body[:RAW_SNIPPET_CHARS]}") from exc
        if not isinstance(payload, dict):
            raise UpstreamError(f"{url} returned unexpected JSON: {body[:RAW_SNIPPET_CHARS]}")
        if payload.get("error") or status >= 400:
            raise UpstreamError(f"{url} returned HTTP {status}: {payload.get('reason', body[:RAW_SNIPPET_CHARS])}")
        return payload


def read_series(payload: dict[str, Any], section: str, key: str) -> list[float]:
    try:
        raw = payload[section][key]
    except (KeyError, TypeError) as exc:
        raise UpstreamError(f"forecast is missing {section}.{key}") from exc
    values: list[float] = []
    for value in raw:
        if value is None or isinstance(value, bool):
            raise UpstreamError(f"forecast has a gap in {section}.{key}")
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise UpstreamError(f"forecast has a non-numeric value {value!r} in {section}.{key}") from exc
        if not math.isfinite(number):
            raise UpstreamError(f"forecast has a non-finite value in {section}.{key}")
        values.append(number)
    return values


def read_times(payload: dict[str, Any], section: str) -> list[int]:
    return [int(t) for t in read_series(payload, section, "time")]


def utc_offset(payload: dict[str, Any]) -> int:
    try:
        return int(payload["utc_offset_seconds"])
    except (KeyError, TypeError, ValueError) as exc:
        raise UpstreamError("forecast is missing utc_offset_seconds") from exc
