from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable

from wxchart import FontHandle, FontSet

from wxbot.config import BotSettings
from wxbot.forecasts.absolute_humidity import AbsoluteHumidityForecast, render_absolute_humidity
from wxbot.forecasts.daily import DailyForecast, render_daily
from wxbot.forecasts.hourly import HourlyForecast, render_hourly
from wxbot.forecasts.soil import SoilMoistureForecast, render_soil_moisture


LOGGER = logging.getLogger(__name__)

RENDERERS: dict[str, Callable[[dict, FontSet], bytes]] = {
    "hourly": lambda payload, fonts: render_hourly(HourlyForecast.from_payload(payload), fonts),
    "daily": lambda payload, fonts: render_daily(DailyForecast.from_payload(payload), fonts),
    "absolute_humidity": lambda payload, fonts: render_absolute_humidity(
        AbsoluteHumidityForecast.from_payload(payload), fonts
    ),
    "soil_moisture": lambda payload, fonts: render_soil_moisture(SoilMoistureForecast.from_payload(payload), fonts),
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wxbot")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Connect to Discord and serve slash commands.")
    run.add_argument("--db", type=Path, default=None, help="Location database. Default: WXBOT_DB_PATH.")
    register = sub.add_parser("register", help="Like run, but first sync the slash commands to every guild.")
    register.add_argument("--db", type=Path, default=None, help="Location database. Default: WXBOT_DB_PATH.")

    render = sub.add_parser("render", help="Render a chart from a saved Open-Meteo JSON response.")
    render.add_argument("kind", choices=sorted(RENDERERS))
    render.add_argument("--payload", type=Path, required=True)
    render.add_argument("--out", type=Path, required=True)
    args = parser.parse_args(argv)

    try:
        settings = BotSettings.from_env()
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    _configure_logging(settings.log_level)

    if args.command == "render":
        fonts = FontSet(
            body=FontHandle(settings.body_font_path),
            header=FontHandle(settings.header_font_path or settings.body_font_path),
        )
        payload = json.loads(args.payload.read_text(encoding="utf-8"))
        image = RENDERERS[args.kind](payload, fonts)
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_bytes(image)
        LOGGER.info("wrote %s (%d bytes)", args.out, len(image))
        return 0

    if not settings.token:
        raise SystemExit("Set DISCORD_BOT_TOKEN")
    if args.db is not None:
        settings = replace(settings, database_path=args.db)

    from wxbot.bot import WeatherBot

    bot = WeatherBot(settings, register=args.command == "register")
    bot.run(settings.token, log_handler=None)
    return 0
