from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from PIL import ImageFont


LOGGER = logging.getLogger(__name__)

PILFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class FontHandle:
    """Read-only reference to a font file, shared by every chart that uses it.

    `path=None` selects the font bundled with Pillow.
    """

    path: str | None = None

    def __post_init__(self) -> None:
        if self.path is not None and not Path(self.path).is_file():
            raise FileNotFoundError(f"font file not found: {self.path}")

    def at(self, size_px: float) -> PILFont:
        return _load_font(self.path, max(1, int(round(size_px))))


@dataclass(frozen=True)
class FontSet:
    body: FontHandle = field(default_factory=FontHandle)
    header: FontHandle = field(default_factory=FontHandle)


@lru_cache(maxsize=64)
def _load_font(path: str | None, size: int) -> PILFont:
    if path is None:
        return ImageFont.load_default(size=size)
    LOGGER.debug("loading font %s at %spx", path, size)
    return ImageFont.truetype(path, size=size)
