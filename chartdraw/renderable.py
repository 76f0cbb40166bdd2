from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Protocol

from chartdraw.box import Box
from chartdraw.config import DEFAULT_DRAWING, DrawingDefaults
from chartdraw.draw import draw_box, draw_text, draw_text_centered
from chartdraw.ranges import Range
from chartdraw.renderer import Renderer
from chartdraw.series import Series
from chartdraw.style import Style, resolve


LOGGER = logging.getLogger(__name__)


class Renderable(Protocol):
    """Deferred drawing bound to a canvas box; drawn once per render pass."""

    def draw(self, r: Renderer, canvas_box: Box, default_style: Style) -> None:
        ...


@dataclass(frozen=True)
class SeriesRenderable:
    series: Series
    x_range: Range
    y_range: Range
    defaults: DrawingDefaults = DEFAULT_DRAWING

    def draw(self, r: Renderer, canvas_box: Box, default_style: Style) -> None:
        self.series.render(r, canvas_box, self.x_range, self.y_range, default_style, defaults=self.defaults)


@dataclass(frozen=True)
class BoxRenderable:
    """Fills and outlines the whole canvas box."""

    style: Style = field(default_factory=Style)
    defaults: DrawingDefaults = DEFAULT_DRAWING

    def draw(self, r: Renderer, canvas_box: Box, default_style: Style) -> None:
        draw_box(r, canvas_box, resolve(self.style, default_style), defaults=self.defaults)


@dataclass(frozen=True)
class TextRenderable:
    body: str
    x: int
    y: int
    style: Style = field(default_factory=Style)
    centered: bool = False
    defaults: DrawingDefaults = DEFAULT_DRAWING

    def draw(self, r: Renderer, canvas_box: Box, default_style: Style) -> None:
        style = resolve(self.style, default_style)
        x = canvas_box.left + self.x
        y = canvas_box.top + self.y
        if self.centered:
            draw_text_centered(r, self.body, x, y, style, defaults=self.defaults)
        else:
            draw_text(r, self.body, x, y, style, defaults=self.defaults)


def render_all(
    r: Renderer,
    canvas_box: Box,
    default_style: Style,
    renderables: Iterable[Renderable],
) -> int:
    """Draw each renderable once, in order. Returns how many were drawn."""
    count = 0
    for item in renderables:
        LOGGER.debug("drawing %s in %s", type(item).__name__, canvas_box)
        item.draw(r, canvas_box, default_style)
        count += 1
    return count
