from __future__ import annotations

from typing import Sequence

import numpy as np

from wxchart.gradient import RGB
from wxchart.raster.canvas import draw_pixel


def draw_polyline(dst: np.ndarray, xs: Sequence[int], ys: Sequence[int], color: RGB) -> None:
    if len(xs) == 1:
        draw_pixel(dst, int(xs[0]), int(ys[0]), color)
        return
    for i in range(len(xs) - 1):
        _draw_line_segment(dst, int(xs[i]), int(ys[i]), int(xs[i + 1]), int(ys[i + 1]), color)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGB) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        draw_pixel(dst, x0, y0, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
