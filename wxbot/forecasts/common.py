from __future__ import annotations

from typing import Iterable, Sequence

from wxchart import (
    GradientBarSeries,
    GradientStop,
    MarkIntervals,
    PanelSpec,
    ReferenceLineSeries,
    Spacing,
    TextSegment,
    to_fixed_point,
)


GREEN = (0, 255, 33)
BLUE = (0, 148, 255)
RED = (255, 0, 0)
GUST_GREEN = (70, 119, 67)
CLEAR_SKY_BLUE = (118, 215, 234)

WIND_STOPS = (
    GradientStop(0, GREEN),
    GradientStop(7, (255, 255, 33)),
    GradientStop(14, (255, 0, 33)),
    GradientStop(21, (188, 66, 255)),
)
GUST_STOPS = (
    GradientStop(0, GUST_GREEN),
    GradientStop(7, (118, 118, 62)),
    GradientStop(14, (122, 67, 62)),
    GradientStop(21, (103, 78, 122)),
)
UV_STOPS = (
    GradientStop(0, GREEN),
    GradientStop(4.5, (255, 255, 33)),
    GradientStop(9, (255, 0, 33)),
)


def fixed(values: Iterable[float], factor: float = 1.0) -> list[int]:
    return [to_fixed_point(v * factor) for v in values]


def wind_panel(
    title: Sequence[TextSegment],
    labels: Sequence[int],
    speeds: Sequence[float],
    gusts: Sequence[float],
    horizontal: int,
    horizontal_intervals: MarkIntervals,
) -> PanelSpec:
    return PanelSpec(
        title=title,
        labels=labels,
        series=(GradientBarSeries(GUST_STOPS, fixed(gusts)), GradientBarSeries(WIND_STOPS, fixed(speeds))),
        spacing=Spacing(horizontal, 5),
        vertical_intervals=MarkIntervals(5, 5),
        horizontal_intervals=horizontal_intervals,
        labels_centered=True,
        anchor_zero=True,
    )


def uv_panel(
    title: Sequence[TextSegment],
    labels: Sequence[int],
    uv_index: Sequence[float],
    clear_sky: Sequence[float],
    horizontal: int,
    horizontal_intervals: MarkIntervals,
) -> PanelSpec:
    return PanelSpec(
        title=title,
        labels=labels,
        series=(ReferenceLineSeries(CLEAR_SKY_BLUE, fixed(clear_sky)), GradientBarSeries(UV_STOPS, fixed(uv_index))),
        spacing=Spacing(horizontal, 10),
        vertical_intervals=MarkIntervals(1, 1),
        horizontal_intervals=horizontal_intervals,
        labels_centered=True,
        anchor_zero=True,
    )
