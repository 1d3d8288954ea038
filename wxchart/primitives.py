from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

from wxchart.errors import ChartContractError
from wxchart.fonts import FontHandle
from wxchart.gradient import RGB, MultiPointGradient
from wxchart.layout import MarkIntervals
from wxchart.raster.canvas import draw_hline, draw_vline, fill_rect, fill_rows
from wxchart.raster.draw_lines import draw_polyline
from wxchart.raster.draw_text import draw_text, line_height, text_width
from wxchart.scales import FIXED_POINT_SCALE, Range, format_tick, next_multiple, round_half_away

if TYPE_CHECKING:
    from wxchart.chart import Chart


def fixed_values(data: Iterable[object]) -> list[int]:
    out: list[int] = []
    for value in data:
        if isinstance(value, (bool, np.bool_)):
            raise ChartContractError(f"expected a fixed-point number, got {value!r}")
        if isinstance(value, (int, np.integer)):
            out.append(int(value))
        elif isinstance(value, (float, np.floating)):
            if not math.isfinite(value):
                raise ChartContractError(f"non-finite value {value!r}")
            out.append(round_half_away(float(value)))
        else:
            raise ChartContractError(f"expected a fixed-point number, got {value!r}")
    return out


def _check_count(kind: str, actual: int, expected: int) -> None:
    if actual != expected:
        raise ChartContractError(f"{kind} has {actual} values, chart expects {expected}")


@dataclass(frozen=True)
class AxisGridLabels:
    vertical_intervals: MarkIntervals
    horizontal_intervals: MarkIntervals
    vertical_label_range: Range
    horizontal_labels: Sequence[object]
    horizontal_labels_centered: bool
    font: FontHandle
    font_scale: float

    def draw(self, chart: "Chart") -> None:
        labels = list(self.horizontal_labels)
        label_slots = chart.slot_count if self.horizontal_labels_centered else chart.point_count
        if len(labels) > label_slots:
            raise ChartContractError(f"{len(labels)} horizontal labels for {label_slots} positions")
        value_range = self.vertical_label_range
        if value_range.start < chart.value_range.start or value_range.end > chart.value_range.end:
            raise ChartContractError(f"label range {value_range} does not fit chart range {chart.value_range}")

        canvas = chart.canvas
        style = chart.style
        font = self.font.at(self.font_scale)
        text_h = line_height(font)
        left = chart.x_of(0)
        right = chart.x_of(chart.point_count - 1)
        top = chart.y_of(chart.value_range.end)
        base = chart.y_of(chart.value_range.start)

        h_minor, h_major = self.horizontal_intervals.minor, self.horizontal_intervals.major
        for index in range(0, chart.point_count, h_minor):
            color = style.grid_major if index % h_major == 0 else style.grid_minor
            draw_vline(canvas, chart.x_of(index), top, base, color)

        v_minor = self.vertical_intervals.minor * FIXED_POINT_SCALE
        v_major = self.vertical_intervals.major * FIXED_POINT_SCALE
        for tick in range(next_multiple(value_range.start, v_minor), value_range.end + 1, v_minor):
            y = chart.y_of(tick)
            major = tick % v_major == 0
            draw_hline(canvas, left, right, y, style.grid_major if major else style.grid_minor)
            if major:
                text = format_tick(tick)
                draw_text(canvas, left - 2 - text_width(text, font), y - text_h // 2, text, style.label, font)

        for index, label in enumerate(labels):
            if index % h_major != 0:
                continue
            text = str(label)
            if self.horizontal_labels_centered:
                x = chart.x_of(index) + (chart.spacing.horizontal - text_width(text, font)) // 2
            else:
                x = chart.x_of(index)
            draw_text(canvas, x, base + 2, text, style.label, font)


@dataclass(frozen=True)
class Line:
    color: RGB
    data: Sequence[object]
    max: int

    def draw(self, chart: "Chart") -> None:
        values = fixed_values(self.data)
        _check_count("line", len(values), chart.point_count)
        if not chart.value_range.contains(self.max):
            raise ChartContractError(f"line max {self.max} outside chart range {chart.value_range}")
        xs = [chart.x_of(i) for i in range(len(values))]
        ys = [chart.y_of(chart.clamp(v, self.max)) for v in values]
        draw_polyline(chart.canvas, xs, ys, self.color)


def _bar_columns(chart: "Chart", index: int) -> tuple[int, int]:
    return chart.x_of(index) + 1, chart.x_of(index + 1) - 1


@dataclass(frozen=True)
class SolidBars:
    color: RGB
    data: Sequence[object]

    def draw(self, chart: "Chart") -> None:
        values = fixed_values(self.data)
        _check_count("bar series", len(values), chart.slot_count)
        base = chart.height_of(chart.value_range.start)
        for index, value in enumerate(values):
            top = chart.height_of(chart.clamp(value))
            if top <= base:
                continue
            x0, x1 = _bar_columns(chart, index)
            fill_rect(chart.canvas, x0, x1, chart.row_of_height(top), chart.row_of_height(base + 1), self.color)


@dataclass(frozen=True)
class GradientBars:
    gradient: MultiPointGradient
    data: Sequence[object]

    def draw(self, chart: "Chart") -> None:
        values = fixed_values(self.data)
        _check_count("bar series", len(values), chart.slot_count)
        base = chart.height_of(chart.value_range.start)
        by_height = np.asarray([self.gradient.color_at(h) for h in range(chart.height)], dtype=np.uint8)
        for index, value in enumerate(values):
            top = chart.height_of(chart.clamp(value))
            if top <= base:
                continue
            x0, x1 = _bar_columns(chart, index)
            fill_rows(chart.canvas, x0, x1, chart.row_of_height(top), by_height[top:base:-1])


@dataclass(frozen=True)
class HorizontalLines:
    color: RGB
    data: Sequence[object]

    def draw(self, chart: "Chart") -> None:
        values = fixed_values(self.data)
        _check_count("reference lines", len(values), chart.slot_count)
        for index, value in enumerate(values):
            x0, x1 = _bar_columns(chart, index)
            if x1 < x0:
                continue
            draw_hline(chart.canvas, x0, x1, chart.y_of(chart.clamp(value)), self.color)
