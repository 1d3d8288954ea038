from __future__ import annotations

from dataclasses import dataclass, field, replace

from wxchart.errors import ChartContractError
from wxchart.gradient import RGB


@dataclass(frozen=True)
class Padding:
    above: int
    below: int
    left: int
    right: int

    def __post_init__(self) -> None:
        for name in ("above", "below", "left", "right"):
            if getattr(self, name) < 0:
                raise ChartContractError(f"padding.{name} must be >= 0")

    def grow(self, *, above: int = 0, below: int = 0, left: int = 0, right: int = 0) -> "Padding":
        return replace(
            self,
            above=self.above + above,
            below=self.below + below,
            left=self.left + left,
            right=self.right + right,
        )


@dataclass(frozen=True)
class Spacing:
    """Pixel distance between neighbouring points and between whole value units."""

    horizontal: int
    vertical: int

    def __post_init__(self) -> None:
        if self.horizontal <= 0 or self.vertical <= 0:
            raise ChartContractError(f"spacing must be positive: {self}")


@dataclass(frozen=True)
class MarkIntervals:
    """Grid line every `minor` units and a label every `major` units."""

    minor: int
    major: int

    def __post_init__(self) -> None:
        if self.minor <= 0 or self.major <= 0:
            raise ChartContractError(f"mark intervals must be positive: {self}")


@dataclass(frozen=True)
class ChartStyle:
    background: RGB = (0, 0, 0)
    grid_minor: RGB = (34, 34, 34)
    grid_major: RGB = (68, 68, 68)
    label: RGB = (255, 255, 255)


@dataclass(frozen=True)
class ChartLayout:
    padding: Padding
    title_scale: float = 18.0
    axis_label_scale: float = 14.0
    title_line_budget: int = 2
    style: ChartStyle = field(default_factory=ChartStyle)

    def __post_init__(self) -> None:
        if self.title_scale <= 0 or self.axis_label_scale <= 0:
            raise ChartContractError("font scales must be positive")
        if self.title_line_budget < 1:
            raise ChartContractError("title_line_budget must be >= 1")
