from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from wxchart.chart import Chart
from wxchart.compose import composite, make_png
from wxchart.errors import ChartContractError
from wxchart.fonts import FontSet
from wxchart.layout import ChartLayout, MarkIntervals, Spacing
from wxchart.primitives import AxisGridLabels
from wxchart.scales import FIXED_POINT_SCALE, Range, plan_value_range
from wxchart.series import Series
from wxchart.text_box import TextBox, TextSegment


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelSpec:
    """Everything needed to draw one panel of a forecast image.

    A panel holding bar-type series gets one more gridline than it has values,
    each value filling the slot between two gridlines. A line-only panel puts
    one value on each gridline. `center_on_slots` shifts a line panel half a
    slot to the right so it lines up with bar panels in the same image.
    When `value_range` is omitted it is planned from the data, rounded out to
    the major vertical interval.

    Bar series may be empty: the panel keeps its single gridline and a flat
    plot. A line panel needs at least one point.
    """

    title: Sequence[TextSegment]
    labels: Sequence[object]
    series: Sequence[Series]
    spacing: Spacing
    vertical_intervals: MarkIntervals
    horizontal_intervals: MarkIntervals
    labels_centered: bool = False
    value_range: Range | None = None
    anchor_zero: bool = False
    center_on_slots: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", tuple(self.title))
        object.__setattr__(self, "labels", tuple(self.labels))
        object.__setattr__(self, "series", tuple(self.series))
        if not self.series:
            raise ChartContractError("panel has no series")
        lengths = {len(s.values) for s in self.series}
        if len(lengths) != 1:
            raise ChartContractError(f"panel series differ in length: {sorted(lengths)}")
        kinds = {s.bars for s in self.series}
        if len(kinds) != 1:
            raise ChartContractError("panel mixes line and bar series")
        if not self.data_length and not self.has_bars:
            raise ChartContractError("line panel needs at least one point")
        if self.has_bars and self.center_on_slots:
            raise ChartContractError("center_on_slots applies to line panels only")
        if self.labels_centered and not self.has_bars:
            raise ChartContractError("centered labels need bar slots")

    @property
    def has_bars(self) -> bool:
        return self.series[0].bars

    @property
    def data_length(self) -> int:
        return len(self.series[0].values)

    @property
    def point_count(self) -> int:
        return self.data_length + 1 if self.has_bars else self.data_length

    def planned_range(self) -> Range:
        if self.value_range is not None:
            return self.value_range
        values = [v for s in self.series for v in s.values]
        interval = self.vertical_intervals.major * FIXED_POINT_SCALE
        return plan_value_range(values, interval, anchor_zero=self.anchor_zero)


def render_panel(spec: PanelSpec, fonts: FontSet, layout: ChartLayout) -> np.ndarray:
    padding = layout.padding
    horizontal = spec.spacing.horizontal
    if spec.center_on_slots:
        padding = padding.grow(left=horizontal // 2, right=horizontal - horizontal // 2)
    value_range = spec.planned_range()

    plot_width = (spec.point_count - 1) * horizontal + (horizontal if spec.center_on_slots else 0)
    title = TextBox(spec.title, fonts.header, layout.title_scale, plot_width, layout.title_line_budget)
    chart = Chart(spec.point_count, value_range, spec.spacing, padding.grow(above=title.height), layout.style)
    chart.draw(title)
    chart.draw(
        AxisGridLabels(
            vertical_intervals=spec.vertical_intervals,
            horizontal_intervals=spec.horizontal_intervals,
            vertical_label_range=value_range,
            horizontal_labels=spec.labels,
            horizontal_labels_centered=spec.labels_centered,
            font=fonts.body,
            font_scale=layout.axis_label_scale,
        )
    )
    for series in spec.series:
        chart.draw(series.primitive(chart))
    return chart.into_canvas()


def render_panels(specs: Sequence[PanelSpec], fonts: FontSet, layout: ChartLayout) -> np.ndarray:
    return composite([render_panel(spec, fonts, layout) for spec in specs])


def render_png(specs: Sequence[PanelSpec], fonts: FontSet, layout: ChartLayout) -> bytes:
    image = render_panels(specs, fonts, layout)
    LOGGER.info("rendered %d panel(s) into %sx%s image", len(specs), image.shape[1], image.shape[0])
    return make_png(image)
