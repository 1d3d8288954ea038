from __future__ import annotations


class WeatherBotError(Exception):
    """A command failure the user only sees as a generic "Error" reply."""


class FriendlyError(WeatherBotError):
    """A command failure whose message is shown to the user as is."""


class UpstreamError(WeatherBotError):
    """Open-Meteo answered with an error, or with something that is not JSON."""
