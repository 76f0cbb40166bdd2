from __future__ import annotations

from typing import Protocol

from chartdraw.box import Box
from chartdraw.style import Color, DashArray


class Renderer(Protocol):
    """Stateful 2D drawing surface the layout engine issues commands against.

    Style setters change the current state; path commands build the current
    path, which `fill`, `stroke` and `fill_stroke` consume. `text` draws with
    the baseline at `y`. Not safe for concurrent use.
    """

    def set_fill_color(self, color: Color | None) -> None:
        ...

    def set_stroke_color(self, color: Color | None) -> None:
        ...

    def set_stroke_width(self, width: float) -> None:
        ...

    def set_stroke_dash_array(self, dash_array: DashArray | None) -> None:
        ...

    def set_font(self, font: str | None) -> None:
        ...

    def set_font_color(self, color: Color | None) -> None:
        ...

    def set_font_size(self, size: float) -> None:
        ...

    def move_to(self, x: int, y: int) -> None:
        ...

    def line_to(self, x: int, y: int) -> None:
        ...

    def close(self) -> None:
        ...

    def fill(self) -> None:
        ...

    def stroke(self) -> None:
        ...

    def fill_stroke(self) -> None:
        ...

    def measure_text(self, body: str) -> Box:
        ...

    def text(self, body: str, x: int, y: int) -> None:
        ...
