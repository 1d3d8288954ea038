from .canvas import draw_hline, draw_pixel, draw_vline, fill_rect, fill_rows, new_canvas
from .draw_lines import draw_polyline
from .draw_text import draw_text, line_height, text_width

__all__ = [
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "fill_rect",
    "fill_rows",
    "line_height",
    "new_canvas",
    "text_width",
]
