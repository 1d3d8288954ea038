from __future__ import annotations

import numpy as np

from wxchart.errors import ChartContractError
from wxchart.gradient import RGB


def new_canvas(width: int, height: int, color: RGB = (0, 0, 0)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ChartContractError(f"canvas must have positive size, got {width}x{height}")
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    canvas[:, :] = color
    return canvas


def _check_inside(dst: np.ndarray, x: int, y: int) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        raise ChartContractError(f"pixel ({x}, {y}) outside {dst.shape[1]}x{dst.shape[0]} canvas")


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGB) -> None:
    _check_inside(dst, x, y)
    dst[y, x] = color


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGB) -> None:
    xa, xb = min(x0, x1), max(x0, x1)
    _check_inside(dst, xa, y)
    _check_inside(dst, xb, y)
    dst[y, xa : xb + 1] = color


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGB) -> None:
    ya, yb = min(y0, y1), max(y0, y1)
    _check_inside(dst, x, ya)
    _check_inside(dst, x, yb)
    dst[ya : yb + 1, x] = color


def fill_rect(dst: np.ndarray, x0: int, x1: int, y0: int, y1: int, color: RGB) -> None:
    """Fill the inclusive rectangle [x0, x1] x [y0, y1]; empty when x1 < x0."""
    if x1 < x0 or y1 < y0:
        return
    _check_inside(dst, x0, y0)
    _check_inside(dst, x1, y1)
    dst[y0 : y1 + 1, x0 : x1 + 1] = color


def fill_rows(dst: np.ndarray, x0: int, x1: int, y0: int, colors: np.ndarray) -> None:
    """Paint one color per row, starting at row y0 and going down."""
    if x1 < x0 or len(colors) == 0:
        return
    y1 = y0 + len(colors) - 1
    _check_inside(dst, x0, y0)
    _check_inside(dst, x1, y1)
    dst[y0 : y1 + 1, x0 : x1 + 1] = colors[:, None, :]
