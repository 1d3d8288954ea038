from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from wxchart.errors import ChartContractError


FIXED_POINT_SCALE = 100


def round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def to_fixed_point(value: float | int | None) -> int:
    """Scale a real value to hundredths, rounding half away from zero."""
    if value is None or isinstance(value, bool):
        raise ChartContractError(f"expected a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ChartContractError(f"expected a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ChartContractError(f"non-finite value {value!r}")
    return round_half_away(number * FIXED_POINT_SCALE)


@dataclass(frozen=True)
class Range:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ChartContractError(f"range start {self.start} is above end {self.end}")

    def __len__(self) -> int:
        return self.end - self.start + 1

    @property
    def span(self) -> int:
        return self.end - self.start

    def contains(self, value: int) -> bool:
        return self.start <= value <= self.end


def _check_interval(interval: int) -> None:
    if interval <= 0:
        raise ChartContractError(f"interval must be positive, got {interval}")


def next_multiple(value: int, interval: int) -> int:
    _check_interval(interval)
    return -((-value) // interval) * interval


def previous_multiple(value: int, interval: int) -> int:
    _check_interval(interval)
    return (value // interval) * interval


def previous_and_next_multiple(value_range: Range, interval: int) -> Range:
    """Widen a range outward so both bounds land on multiples of interval.

    A range that collapses to a single value is widened by one interval so the
    plot keeps a non-zero height.
    """
    start = previous_multiple(value_range.start, interval)
    end = next_multiple(value_range.end, interval)
    if start == end:
        end = start + interval
    return Range(start, end)


def plan_value_range(values: Iterable[int], interval: int, *, anchor_zero: bool) -> Range:
    _check_interval(interval)
    data = list(values)
    if not data:
        return Range(0, interval)
    if anchor_zero:
        return Range(0, max(next_multiple(max(max(data), 0), interval), interval))
    return previous_and_next_multiple(Range(min(data), max(data)), interval)


def format_tick(value: int) -> str:
    whole, rest = divmod(abs(value), FIXED_POINT_SCALE)
    sign = "-" if value < 0 else ""
    if rest == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{rest:02d}".rstrip("0")
