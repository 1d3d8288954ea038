from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Sequence

from wxchart.errors import ChartContractError
from wxchart.scales import round_half_away


RGB = tuple[int, int, int]


def _as_rgb(color: Sequence[int]) -> RGB:
    if len(color) != 3:
        raise ChartContractError(f"expected an RGB triple, got {color!r}")
    r, g, b = (int(c) for c in color)
    for channel in (r, g, b):
        if channel < 0 or channel > 255:
            raise ChartContractError(f"color channel out of range: {color!r}")
    return (r, g, b)


@dataclass(frozen=True)
class GradientPoint:
    position: int
    color: RGB

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", _as_rgb(self.color))

    @classmethod
    def from_rgb(cls, position: int, color: Sequence[int]) -> "GradientPoint":
        return cls(position=int(position), color=_as_rgb(color))


class MultiPointGradient:
    """Piecewise-linear color ramp keyed on absolute pixel height."""

    def __init__(self, points: Sequence[GradientPoint]) -> None:
        if not points:
            raise ChartContractError("gradient needs at least one point")
        positions = [p.position for p in points]
        if any(b < a for a, b in zip(positions, positions[1:])):
            raise ChartContractError(f"gradient positions must ascend: {positions}")
        self._points = tuple(points)
        self._positions = tuple(positions)

    @property
    def points(self) -> tuple[GradientPoint, ...]:
        return self._points

    def color_at(self, position: float) -> RGB:
        points = self._points
        if position <= points[0].position:
            return points[0].color
        if position >= points[-1].position:
            return points[-1].color
        hi = bisect_right(self._positions, position)
        lower = points[hi - 1]
        upper = points[hi]
        if lower.position == position or upper.position == lower.position:
            return lower.color
        t = (position - lower.position) / (upper.position - lower.position)
        return tuple(
            min(255, max(0, round_half_away(a + (b - a) * t)))
            for a, b in zip(lower.color, upper.color)
        )  # type: ignore[return-value]
