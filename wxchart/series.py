from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, Union

from wxchart.gradient import RGB, GradientPoint, MultiPointGradient
from wxchart.primitives import GradientBars, HorizontalLines, Line, SolidBars, fixed_values
from wxchart.scales import round_half_away

if TYPE_CHECKING:
    from wxchart.chart import Chart


def _freeze_values(series: object) -> None:
    object.__setattr__(series, "values", tuple(fixed_values(series.values)))  # type: ignore[attr-defined]


@dataclass(frozen=True)
class LineSeries:
    color: RGB
    values: Sequence[int]
    bars = False

    def __post_init__(self) -> None:
        _freeze_values(self)

    def primitive(self, chart: "Chart") -> Line:
        return Line(self.color, self.values, chart.value_range.end)


@dataclass(frozen=True)
class SolidBarSeries:
    color: RGB
    values: Sequence[int]
    bars = True

    def __post_init__(self) -> None:
        _freeze_values(self)

    def primitive(self, chart: "Chart") -> SolidBars:
        return SolidBars(self.color, self.values)


@dataclass(frozen=True)
class GradientStop:
    """A gradient color pinned `units` grid units above the baseline."""

    units: float
    color: RGB


@dataclass(frozen=True)
class GradientBarSeries:
    stops: Sequence[GradientStop]
    values: Sequence[int]
    bars = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "stops", tuple(self.stops))
        _freeze_values(self)

    def gradient(self, chart: "Chart") -> MultiPointGradient:
        base = chart.padding.below
        return MultiPointGradient(
            [
                GradientPoint.from_rgb(base + round_half_away(stop.units * chart.spacing.vertical), stop.color)
                for stop in self.stops
            ]
        )

    def primitive(self, chart: "Chart") -> GradientBars:
        return GradientBars(self.gradient(chart), self.values)


@dataclass(frozen=True)
class ReferenceLineSeries:
    color: RGB
    values: Sequence[int]
    bars = True

    def __post_init__(self) -> None:
        _freeze_values(self)

    def primitive(self, chart: "Chart") -> HorizontalLines:
        return HorizontalLines(self.color, self.values)


Series = Union[LineSeries, SolidBarSeries, GradientBarSeries, ReferenceLineSeries]
