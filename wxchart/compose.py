from __future__ import annotations

import io
from typing import Sequence

import numpy as np
from PIL import Image

from wxchart.errors import ChartContractError


def composite(canvases: Sequence[np.ndarray]) -> np.ndarray:
    """Stack equally wide panels top to bottom in the given order."""
    if not canvases:
        raise ChartContractError("nothing to composite")
    widths = {canvas.shape[1] for canvas in canvases}
    if len(widths) != 1:
        raise ChartContractError(f"panels have differing widths: {sorted(widths)}")
    for canvas in canvases:
        if canvas.ndim != 3 or canvas.shape[2] != 3:
            raise ChartContractError(f"expected an RGB canvas, got shape {canvas.shape}")
    return np.vstack(canvases)


def make_png(canvas: np.ndarray) -> bytes:
    image = Image.fromarray(np.ascontiguousarray(canvas, dtype=np.uint8))
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    with Image.open(io.BytesIO(data)) as image:
        return np.array(image.convert("RGB"), dtype=np.uint8)
