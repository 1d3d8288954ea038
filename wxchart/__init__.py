from wxchart.chart import MAX_CANVAS_SIDE, Chart
from wxchart.compose import composite, decode_png, make_png
from wxchart.errors import ChartContractError
from wxchart.fonts import FontHandle, FontSet
from wxchart.gradient import GradientPoint, MultiPointGradient
from wxchart.layout import ChartLayout, ChartStyle, MarkIntervals, Padding, Spacing
from wxchart.panel import PanelSpec, render_panel, render_panels, render_png
from wxchart.primitives import AxisGridLabels, GradientBars, HorizontalLines, Line, SolidBars
from wxchart.scales import (
    FIXED_POINT_SCALE,
    Range,
    next_multiple,
    plan_value_range,
    previous_and_next_multiple,
    previous_multiple,
    to_fixed_point,
)
from wxchart.series import GradientBarSeries, GradientStop, LineSeries, ReferenceLineSeries, SolidBarSeries
from wxchart.text_box import TextBox, TextSegment

__all__ = [
    "AxisGridLabels",
    "Chart",
    "ChartContractError",
    "ChartLayout",
    "ChartStyle",
    "FIXED_POINT_SCALE",
    "FontHandle",
    "FontSet",
    "GradientBarSeries",
    "GradientBars",
    "GradientPoint",
    "GradientStop",
    "HorizontalLines",
    "Line",
    "LineSeries",
    "MAX_CANVAS_SIDE",
    "MarkIntervals",
    "MultiPointGradient",
    "Padding",
    "PanelSpec",
    "Range",
    "ReferenceLineSeries",
    "SolidBarSeries",
    "SolidBars",
    "Spacing",
    "TextBox",
    "TextSegment",
    "composite",
    "decode_png",
    "make_png",
    "next_multiple",
    "plan_value_range",
    "previous_and_next_multiple",
    "previous_multiple",
    "render_panel",
    "render_panels",
    "render_png",
    "to_fixed_point",
]
