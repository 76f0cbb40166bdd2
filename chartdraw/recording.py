from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from chartdraw.box import Box
from chartdraw.renderer import Renderer
from chartdraw.style import SYSTEM_FONT_SIZE, Color, DashArray


MeasureFn = Callable[[str, str | None, float], Box]


@dataclass(frozen=True)
class DrawCommand:
    op: str
    args: tuple[Any, ...] = ()


def fixed_advance_measure(body: str, font: str | None, font_size: float) -> Box:
    """Monospace estimate: 0.6 em advance per character, one em tall."""
    width = int(round(len(body) * font_size * 0.6))
    height = int(round(font_size))
    return Box(top=0, left=0, right=width, bottom=height)


class RecordingRenderer(Renderer):
    """Renderer that keeps every command as a display list.

    Measurement is delegated to `measure`, which receives the current font and
    font size. The list can be replayed onto any other renderer.
    """

    def __init__(self, measure: MeasureFn | None = None) -> None:
        self._measure = measure or fixed_advance_measure
        self.commands: list[DrawCommand] = []
        self.font: str | None = None
        self.font_size: float = SYSTEM_FONT_SIZE

    def set_fill_color(self, color: Color | None) -> None:
        self._record("set_fill_color", color)

    def set_stroke_color(self, color: Color | None) -> None:
        self._record("set_stroke_color", color)

    def set_stroke_width(self, width: float) -> None:
        self._record("set_stroke_width", width)

    def set_stroke_dash_array(self, dash_array: DashArray | None) -> None:
        self._record("set_stroke_dash_array", dash_array)

    def set_font(self, font: str | None) -> None:
        self.font = font
        self._record("set_font", font)

    def set_font_color(self, color: Color | None) -> None:
        self._record("set_font_color", color)

    def set_font_size(self, size: float) -> None:
        self.font_size = size
        self._record("set_font_size", size)

    def move_to(self, x: int, y: int) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: int, y: int) -> None:
        self._record("line_to", x, y)

    def close(self) -> None:
        self._record("close")

    def fill(self) -> None:
        self._record("fill")

    def stroke(self) -> None:
        self._record("stroke")

    def fill_stroke(self) -> None:
        self._record("fill_stroke")

    def measure_text(self, body: str) -> Box:
        return self._measure(body, self.font, self.font_size)

    def text(self, body: str, x: int, y: int) -> None:
        self._record("text", body, x, y)

    def ops(self) -> list[str]:
        return [cmd.op for cmd in self.commands]

    def calls(self, op: str) -> list[tuple[Any, ...]]:
        return [cmd.args for cmd in self.commands if cmd.op == op]

    def clear(self) -> None:
        self.commands.clear()

    def replay(self, target: Renderer) -> None:
        for cmd in self.commands:
            getattr(target, cmd.op)(*cmd.args)

    def _record(self, op: str, *args: Any) -> None:
        self.commands.append(DrawCommand(op=op, args=args))
