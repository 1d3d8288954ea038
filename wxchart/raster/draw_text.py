from __future__ import annotations

import math

import numpy as np
from PIL import Image, ImageDraw

from wxchart.fonts import PILFont
from wxchart.gradient import RGB


def text_width(text: str, font: PILFont) -> int:
    if not text:
        return 0
    return int(math.ceil(font.getlength(text)))


def line_height(font: PILFont) -> int:
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        return max(1, int(ascent + descent))
    _, _, _, bottom = font.getbbox("Ag")
    return max(1, int(bottom))


def draw_text(dst: np.ndarray, x: int, y: int, text: str, color: RGB, font: PILFont) -> None:
    """Blend `text` onto `dst` with its top-left corner at (x, y); clipped at the edges."""
    if not text.strip():
        return
    mask = _render_mask(text, font)
    _blend_mask(dst, x, y, mask, color)


def _render_mask(text: str, font: PILFont) -> np.ndarray:
    width = max(1, text_width(text, font) + 2)
    height = line_height(font)
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((0, 0), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGB) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    if not np.any(cov > 0):
        return
    patch = dst[y0:y1, x0:x1]
    src = np.asarray(color, dtype=np.float32).reshape(1, 1, 3)
    out = src * cov[:, :, None] + patch.astype(np.float32) * (1.0 - cov[:, :, None])
    patch[:, :, :] = np.clip(np.rint(out), 0, 255).astype(np.uint8)
