from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from wxchart import FontSet

from wxbot.current import fetch_current
from wxbot.errors import FriendlyError, WeatherBotError
from wxbot.forecasts import (
    fetch_absolute_humidity,
    fetch_daily,
    fetch_hourly,
    fetch_soil_moisture,
    render_absolute_humidity,
    render_daily,
    render_hourly,
    render_soil_moisture,
)
from wxbot.location import Coordinates, Location, resolve_location
from wxbot.open_meteo import OpenMeteoClient
from wxbot.store import UserLocationStore
from wxbot.sun import fetch_sun_times


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    content: str | None = None
    image: bytes | None = None
    filename: str | None = None
    ephemeral: bool = False

    @classmethod
    def private(cls, content: str) -> "Reply":
        return cls(content=content, ephemeral=True)


@dataclass
class CommandContext:
    api: OpenMeteoClient
    store: UserLocationStore
    fonts: FontSet
    domain: int | None
    user: int
    clock: Callable[[], float] = field(default=time.time)

    async def location(self, place: str | None) -> Location:
        return await resolve_location(place, api=self.api, store=self.store, domain=self.domain, user=self.user)

    def require_domain(self) -> int:
        if self.domain is None:
            raise WeatherBotError("stored locations are per server, and this interaction has no server")
        return self.domain


Handler = Callable[[CommandContext, "str | None"], Awaitable[Reply]]


async def find_coordinates(ctx: CommandContext, place: str | None) -> Reply:
    if not place:
        raise FriendlyError("No argument")
    result = await ctx.api.geocode(place)
    population = "unknown" if result.population is None else str(result.population)
    return Reply(
        content=(
            f"Name: {result.name}, population: {population}, latitude: {result.latitude}, "
            f"longitude: {result.longitude}, feature code: {result.feature_code}, "
            f"country: {result.country or 'unspecified'}"
        )
    )


async def current(ctx: CommandContext, place: str | None) -> Reply:
    location = await ctx.location(place)
    weather = await fetch_current(ctx.api, location.coordinates)
    return Reply(content=weather.describe())


async def hourly(ctx: CommandContext, place: str | None) -> Reply:
    location = await ctx.location(place)
    forecast = await fetch_hourly(ctx.api, location.coordinates)
    return Reply(image=render_hourly(forecast, ctx.fonts), filename="hourly.png")


async def daily(ctx: CommandContext, place: str | None) -> Reply:
    location = await ctx.location(place)
    forecast = await fetch_daily(ctx.api, location.coordinates)
    return Reply(image=render_daily(forecast, ctx.fonts), filename="daily.png")


async def absolute_humidity(ctx: CommandContext, place: str | None) -> Reply:
    location = await ctx.location(place)
    forecast = await fetch_absolute_humidity(ctx.api, location.coordinates)
    return Reply(image=render_absolute_humidity(forecast, ctx.fonts), filename="hourly_absolute_humidity.png")


async def soil_moisture(ctx: CommandContext, place: str | None) -> Reply:
    location = await ctx.location(place)
    forecast = await fetch_soil_moisture(ctx.api, location.coordinates)
    return Reply(image=render_soil_moisture(forecast, ctx.fonts), filename="hourly_soil.png")


async def sun(ctx: CommandContext, place: str | None) -> Reply:
    location = await ctx.location(place)
    times = await fetch_sun_times(ctx.api, location.coordinates)
    return Reply(content=times.describe(ctx.clock()))


async def set_location(ctx: CommandContext, place: str | None) -> Reply:
    if not place or not place.strip():
        raise WeatherBotError("set_location called without a location")
    domain = ctx.require_domain()
    coordinates = Coordinates.parse(place)
    if coordinates is not None:
        location = Location(coordinates)
    else:
        location = Location.from_geocoding(await ctx.api.geocode(place.strip()))
    ctx.store.set(domain, ctx.user, location)
    return Reply.private(
        f"Location set to {location.display_name} ({location.coordinates}), "
        f"country: {location.display_country}, feature code: {location.display_feature_code}"
    )


async def unset_location(ctx: CommandContext, _: str | None = None) -> Reply:
    ctx.store.unset(ctx.require_domain(), ctx.user)
    return Reply.private("Successfully unset location.")


async def run_command(name: str, handler: Handler, ctx: CommandContext, argument: str | None) -> Reply:
    """Run a handler and turn its failures into the reply the user should see."""
    try:
        return await handler(ctx, argument)
    except FriendlyError as exc:
        LOGGER.info("command %s declined: %s", name, exc)
        return Reply.private(str(exc))
    except Exception:
        LOGGER.exception("command %s failed", name)
        return Reply.private("Error")
