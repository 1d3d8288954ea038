from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


DEFAULT_DB_PATH = "data/db.db"
DEFAULT_TOKEN_FILE = "token.txt"
DEFAULT_HTTP_TIMEOUT_S = 15.0


@dataclass(frozen=True)
class BotSettings:
    database_path: Path
    token: str = ""
    body_font_path: str | None = None
    header_font_path: str | None = None
    http_timeout_s: float = DEFAULT_HTTP_TIMEOUT_S
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.http_timeout_s <= 0:
            raise ValueError("http_timeout_s must be > 0")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BotSettings":
        env = os.environ if environ is None else environ
        token = env.get("DISCORD_BOT_TOKEN", "").strip()
        if not token:
            token_file = Path(env.get("WXBOT_TOKEN_FILE", DEFAULT_TOKEN_FILE))
            if token_file.is_file():
                token = token_file.read_text(encoding="utf-8").strip()
        timeout_raw = env.get("WXBOT_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_S))
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError(f"WXBOT_HTTP_TIMEOUT must be a number, got {timeout_raw!r}") from exc
        return cls(
            token=token,
            database_path=Path(env.get("WXBOT_DB_PATH", DEFAULT_DB_PATH)),
            body_font_path=env.get("WXBOT_BODY_FONT") or None,
            header_font_path=env.get("WXBOT_HEADER_FONT") or None,
            http_timeout_s=timeout,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
