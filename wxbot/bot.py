from __future__ import annotations

import io
import logging
from typing import Optional

import aiohttp
import discord
from discord import app_commands

from wxchart import FontHandle, FontSet

from wxbot import commands
from wxbot.commands import CommandContext, Handler, Reply, run_command
from wxbot.config import BotSettings
from wxbot.open_meteo import OpenMeteoClient
from wxbot.store import UserLocationStore


LOGGER = logging.getLogger(__name__)


def build_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.guilds = True
    return intents


async def deliver(interaction: discord.Interaction, reply: Reply) -> None:
    kwargs: dict[str, object] = {"ephemeral": reply.ephemeral}
    if reply.content:
        kwargs["content"] = reply.content
    if reply.image is not None:
        kwargs["file"] = discord.File(io.BytesIO(reply.image), filename=reply.filename or "image.png")
    if interaction.response.is_done():
        if reply.ephemeral:
            # The first follow-up would reuse the public "thinking" message and ignore the flag.
            await interaction.delete_original_response()
        await interaction.followup.send(**kwargs)
    else:
        await interaction.response.send_message(**kwargs)


class WeatherBot(discord.Client):
    def __init__(self, settings: BotSettings, *, register: bool = False) -> None:
        super().__init__(intents=build_intents())
        self.settings = settings
        self.register = register
        self.tree = app_commands.CommandTree(self)
        self.store = UserLocationStore(settings.database_path)
        self.fonts = FontSet(
            body=FontHandle(settings.body_font_path),
            header=FontHandle(settings.header_font_path or settings.body_font_path),
        )
        self._session: aiohttp.ClientSession | None = None
        self._api: OpenMeteoClient | None = None
        register_commands(self)

    @property
    def api(self) -> OpenMeteoClient:
        if self._api is None:
            raise RuntimeError("bot is not set up yet")
        return self._api

    async def setup_hook(self) -> None:
        self._session = aiohttp.ClientSession()
        self._api = OpenMeteoClient(self._session, timeout_s=self.settings.http_timeout_s)

    async def on_ready(self) -> None:
        LOGGER.info("logged in as %s", self.user)
        if not self.register:
            return
        for guild in self.guilds:
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            LOGGER.info(
                "guild %s now has slash commands: %s", guild.id, ", ".join(command.name for command in synced)
            )

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
        self.store.close()
        await super().close()

    async def dispatch_command(
        self,
        interaction: discord.Interaction,
        name: str,
        handler: Handler,
        argument: str | None = None,
        *,
        defer: bool = False,
    ) -> None:
        if defer:
            # Visible to everyone; deliver() replaces it when the reply is private.
            await interaction.response.defer(thinking=True)
        ctx = CommandContext(
            api=self.api,
            store=self.store,
            fonts=self.fonts,
            domain=interaction.guild_id,
            user=interaction.user.id,
        )
        reply = await run_command(name, handler, ctx, argument)
        await deliver(interaction, reply)


def register_commands(bot: WeatherBot) -> None:
    tree = bot.tree

    @tree.command(name="find_coordinates", description="Finds the coordinates of the specified place.")
    @app_commands.describe(place="The place to find the coordinates of.")
    async def find_coordinates(interaction: discord.Interaction, place: str) -> None:
        await bot.dispatch_command(interaction, "find_coordinates", commands.find_coordinates, place)

    @tree.command(name="current", description="Current weather")
    @app_commands.describe(place="The place to get the weather of.")
    async def current(interaction: discord.Interaction, place: Optional[str] = None) -> None:
        await bot.dispatch_command(interaction, "current", commands.current, place)

    @tree.command(name="hourly", description="Hourly weather forecast")
    @app_commands.describe(place="The place to get the weather forecast of.")
    async def hourly(interaction: discord.Interaction, place: Optional[str] = None) -> None:
        await bot.dispatch_command(interaction, "hourly", commands.hourly, place, defer=True)

    @tree.command(name="daily", description="Daily weather forecast")
    @app_commands.describe(place="The place to get the weather forecast of.")
    async def daily(interaction: discord.Interaction, place: Optional[str] = None) -> None:
        await bot.dispatch_command(interaction, "daily", commands.daily, place, defer=True)

    @tree.command(name="absolute_humidity", description="Hourly absolute humidity forecast")
    @app_commands.describe(place="The place to get the weather forecast of.")
    async def absolute_humidity(interaction: discord.Interaction, place: Optional[str] = None) -> None:
        await bot.dispatch_command(interaction, "absolute_humidity", commands.absolute_humidity, place, defer=True)

    @tree.command(name="soil_moisture", description="Hourly soil moisture forecast")
    @app_commands.describe(place="The place to get the weather forecast of.")
    async def soil_moisture(interaction: discord.Interaction, place: Optional[str] = None) -> None:
        await bot.dispatch_command(interaction, "soil_moisture", commands.soil_moisture, place, defer=True)

    @tree.command(name="sun", description="Next sunrise and sunset")
    @app_commands.describe(place="The place to get the next sunrise and sunset of.")
    async def sun(interaction: discord.Interaction, place: Optional[str] = None) -> None:
        await bot.dispatch_command(interaction, "sun", commands.sun, place)

    @tree.command(name="set_location", description="Set the location to use by default for weather commands.")
    @app_commands.describe(location="The location to use by default for weather commands")
    async def set_location(interaction: discord.Interaction, location: str) -> None:
        await bot.dispatch_command(interaction, "set_location", commands.set_location, location)

    @tree.command(name="unset_location", description="Unset the location to use by default for weather commands.")
    async def unset_location(interaction: discord.Interaction) -> None:
        await bot.dispatch_command(interaction, "unset_location", commands.unset_location)
