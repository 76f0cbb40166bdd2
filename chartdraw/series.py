from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from typing import Protocol

from chartdraw.box import Box
from chartdraw.config import DEFAULT_DRAWING, DrawingDefaults
from chartdraw.draw import draw_annotation, draw_line_series, measure_annotation
from chartdraw.ranges import Range
from chartdraw.renderer import Renderer
from chartdraw.style import Style, is_visible, resolve
from chartdraw.values import ValueProvider


LOGGER = logging.getLogger(__name__)


class SeriesKind(Enum):
    LINE = "line"
    ANNOTATION = "annotation"


class Series(Protocol):
    @property
    def kind(self) -> SeriesKind:
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def style(self) -> Style:
        ...

    def render(
        self,
        r: Renderer,
        canvas_box: Box,
        x_range: Range,
        y_range: Range,
        default_style: Style,
        *,
        defaults: DrawingDefaults = DEFAULT_DRAWING,
    ) -> None:
        ...


@dataclass(frozen=True)
class LineSeries:
    name: str
    values: ValueProvider
    style: Style = field(default_factory=Style)

    @property
    def kind(self) -> SeriesKind:
        return SeriesKind.LINE

    def render(
        self,
        r: Renderer,
        canvas_box: Box,
        x_range: Range,
        y_range: Range,
        default_style: Style,
        *,
        defaults: DrawingDefaults = DEFAULT_DRAWING,
    ) -> None:
        style = resolve(self.style, default_style)
        draw_line_series(r, canvas_box, x_range, y_range, style, self.values, defaults=defaults)


@dataclass(frozen=True)
class Annotation:
    x: float
    y: float
    label: str


@dataclass(frozen=True)
class AnnotationSeries:
    """Callouts pinned to data points. Never listed in a legend."""

    name: str
    annotations: tuple[Annotation, ...] = ()
    style: Style = field(default_factory=Style)

    @property
    def kind(self) -> SeriesKind:
        return SeriesKind.ANNOTATION

    def working_style(self, default_style: Style, *, defaults: DrawingDefaults = DEFAULT_DRAWING) -> Style:
        return resolve(
            self.style,
            Style(
                font=default_style.font,
                fill_color=defaults.annotation_fill_color,
                font_size=defaults.annotation_font_size,
                stroke_color=default_style.stroke_color,
                stroke_width=default_style.stroke_width,
                padding=defaults.annotation_padding,
            ),
        )

    def measure(
        self,
        r: Renderer,
        canvas_box: Box,
        x_range: Range,
        y_range: Range,
        default_style: Style,
        *,
        defaults: DrawingDefaults = DEFAULT_DRAWING,
    ) -> Box:
        if not is_visible(self.style):
            return Box()
        anchors = self._anchors(canvas_box, x_range, y_range)
        if not anchors:
            return Box()
        style = self.working_style(default_style, defaults=defaults)
        boxes = [
            measure_annotation(r, canvas_box, style, lx, ly, label, defaults=defaults)
            for lx, ly, label in anchors
        ]
        bounds = boxes[0]
        for box in boxes[1:]:
            bounds = bounds.grow(box)
        return bounds

    def render(
        self,
        r: Renderer,
        canvas_box: Box,
        x_range: Range,
        y_range: Range,
        default_style: Style,
        *,
        defaults: DrawingDefaults = DEFAULT_DRAWING,
    ) -> None:
        if not is_visible(self.style):
            return
        style = self.working_style(default_style, defaults=defaults)
        for lx, ly, label in self._anchors(canvas_box, x_range, y_range):
            draw_annotation(r, canvas_box, style, lx, ly, label, defaults=defaults)

    def _anchors(self, canvas_box: Box, x_range: Range, y_range: Range) -> list[tuple[int, int, str]]:
        anchors: list[tuple[int, int, str]] = []
        for a in self.annotations:
            if not (math.isfinite(a.x) and math.isfinite(a.y)):
                LOGGER.debug("skipping annotation %r at non-finite (%s, %s)", a.label, a.x, a.y)
                continue
            anchors.append(
                (
                    canvas_box.left + x_range.translate(a.x),
                    canvas_box.bottom - y_range.translate(a.y),
                    a.label,
                )
            )
        return anchors
