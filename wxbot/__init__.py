from wxbot.commands import CommandContext, Reply
from wxbot.config import BotSettings
from wxbot.errors import FriendlyError, UpstreamError, WeatherBotError
from wxbot.location import Coordinates, Location
from wxbot.store import UserLocationStore

__all__ = [
    "BotSettings",
    "CommandContext",
    "Coordinates",
    "FriendlyError",
    "Location",
    "Reply",
    "UpstreamError",
    "UserLocationStore",
    "WeatherBotError",
]
