from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from wxchart.errors import ChartContractError
from wxchart.layout import ChartStyle, Padding, Spacing
from wxchart.raster.canvas import new_canvas
from wxchart.scales import FIXED_POINT_SCALE, Range, round_half_away


LOGGER = logging.getLogger(__name__)

MAX_CANVAS_SIDE = 8192


class Drawable(Protocol):
    def draw(self, chart: "Chart") -> None: ...


class Chart:
    """One panel: a fixed-size RGB raster plus the mapping from data to pixels.

    Points sit on vertical gridlines `spacing.horizontal` pixels apart, starting
    at `padding.left`. A value `v` sits `(v - value_range.start) * spacing.vertical / 100`
    pixels above the baseline, which is `padding.below` pixels above the
    bottom edge.
    """

    def __init__(
        self,
        point_count: int,
        value_range: Range,
        spacing: Spacing,
        padding: Padding,
        style: ChartStyle | None = None,
    ) -> None:
        if point_count < 1:
            raise ChartContractError(f"point_count must be >= 1, got {point_count}")
        if padding.right < 1:
            raise ChartContractError("padding.right must be >= 1 so the last gridline is on the canvas")
        self.point_count = point_count
        self.value_range = value_range
        self.spacing = spacing
        self.padding = padding
        self.style = style or ChartStyle()
        self.width = (point_count - 1) * spacing.horizontal + padding.left + padding.right
        self.height = padding.above + padding.below + self.offset_px(len(value_range) - 1) + 1
        if self.width > MAX_CANVAS_SIDE or self.height > MAX_CANVAS_SIDE:
            raise ChartContractError(
                f"chart of {self.width}x{self.height} exceeds the {MAX_CANVAS_SIDE}px limit"
            )
        self._canvas: np.ndarray | None = new_canvas(self.width, self.height, self.style.background)

    @property
    def slot_count(self) -> int:
        return self.point_count - 1

    @property
    def canvas(self) -> np.ndarray:
        if self._canvas is None:
            raise ChartContractError("chart canvas was already taken")
        return self._canvas

    def offset_px(self, delta: int) -> int:
        return round_half_away(delta * self.spacing.vertical / FIXED_POINT_SCALE)

    def x_of(self, index: int) -> int:
        return self.padding.left + index * self.spacing.horizontal

    def height_of(self, value: int) -> int:
        """Pixel height of `value` above the bottom edge of the canvas."""
        return self.padding.below + self.offset_px(value - self.value_range.start)

    def row_of_height(self, height: int) -> int:
        return self.height - 1 - height

    def y_of(self, value: int) -> int:
        return self.row_of_height(self.height_of(value))

    def clamp(self, value: int, upper: int | None = None) -> int:
        top = self.value_range.end if upper is None else upper
        return min(max(value, self.value_range.start), top)

    def draw(self, primitive: Drawable) -> "Chart":
        primitive.draw(self)
        return self

    def into_canvas(self) -> np.ndarray:
        canvas = self.canvas
        self._canvas = None
        LOGGER.debug("chart finished at %sx%s", self.width, self.height)
        return canvas
