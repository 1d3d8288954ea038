from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from wxchart.errors import ChartContractError
from wxchart.fonts import FontHandle
from wxchart.gradient import RGB
from wxchart.raster.draw_text import draw_text, line_height

if TYPE_CHECKING:
    from wxchart.chart import Chart


WHITE: RGB = (255, 255, 255)
_TOKEN_RE = re.compile(r"\s+|\S+")


@dataclass(frozen=True)
class TextSegment:
    text: str
    color: RGB

    @classmethod
    def white(cls, text: str) -> "TextSegment":
        return cls(text, WHITE)


@dataclass(frozen=True)
class TextRun:
    text: str
    color: RGB
    x: float


class TextBox:
    """Word-wrapped, multi-colored title drawn directly above a chart's plot area."""

    def __init__(
        self,
        segments: Sequence[TextSegment],
        font: FontHandle,
        scale: float,
        max_width: int,
        line_budget: int = 2,
    ) -> None:
        if line_budget < 1:
            raise ChartContractError(f"line_budget must be >= 1, got {line_budget}")
        if max_width < 0:
            raise ChartContractError(f"max_width must be >= 0, got {max_width}")
        self.segments = tuple(segments)
        self.max_width = max_width
        self.line_budget = line_budget
        self._font = font.at(scale)
        self._line_height = line_height(self._font)
        self.lines = self._layout()

    @property
    def height(self) -> int:
        return len(self.lines) * self._line_height

    @property
    def width(self) -> int:
        widths = [self._line_width(line) for line in self.lines]
        return int(round(max(widths, default=0.0)))

    def line_texts(self) -> list[str]:
        return ["".join(run.text for run in line) for line in self.lines]

    def draw(self, chart: "Chart") -> None:
        top = chart.padding.above - self.height
        if top < 0:
            raise ChartContractError("chart padding.above is smaller than the title height")
        for row, line in enumerate(self.lines):
            y = top + row * self._line_height
            for run in line:
                draw_text(chart.canvas, chart.padding.left + int(round(run.x)), y, run.text, run.color, self._font)

    def _line_width(self, line: tuple[TextRun, ...]) -> float:
        if not line:
            return 0.0
        last = line[-1]
        return last.x + self._font.getlength(last.text)

    def _layout(self) -> tuple[tuple[TextRun, ...], ...]:
        lines: list[list[tuple[str, RGB]]] = [[]]
        width = 0.0
        for segment in self.segments:
            for token in _TOKEN_RE.findall(segment.text):
                token_width = self._font.getlength(token)
                fits = width + token_width <= self.max_width
                if fits:
                    lines[-1].append((token, segment.color))
                    width += token_width
                    continue
                if _is_blank(lines[-1]):
                    # A word too wide for a fresh line replaces the whitespace before it.
                    if not token.isspace():
                        lines[-1] = [(token, segment.color)]
                        width = token_width
                    continue
                if len(lines) == self.line_budget:
                    return self._runs(lines)
                while lines[-1][-1][0].isspace():
                    lines[-1].pop()
                if token.isspace():
                    lines.append([])
                    width = 0.0
                else:
                    lines.append([(token, segment.color)])
                    width = token_width
        return self._runs(lines)

    def _runs(self, lines: list[list[tuple[str, RGB]]]) -> tuple[tuple[TextRun, ...], ...]:
        out: list[tuple[TextRun, ...]] = []
        for tokens in lines:
            if _is_blank(tokens):
                continue
            runs: list[TextRun] = []
            x = 0.0
            for text, color in tokens:
                if runs and runs[-1].color == color:
                    runs[-1] = TextRun(runs[-1].text + text, color, runs[-1].x)
                else:
                    runs.append(TextRun(text, color, x))
                x += self._font.getlength(text)
            out.append(tuple(runs))
        return tuple(out)


def _is_blank(tokens: list[tuple[str, RGB]]) -> bool:
    return all(text.isspace() for text, _ in tokens)
