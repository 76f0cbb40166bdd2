from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

from chartdraw.box import Box
from chartdraw.config import DEFAULT_DRAWING, DrawingDefaults
from chartdraw.ranges import Range
from chartdraw.renderer import Renderer
from chartdraw.style import Style
from chartdraw.values import ValueProvider, finite_arrays


Point = tuple[int, int]


@dataclass(frozen=True)
class AnnotationGeometry:
    box: Box
    outline: tuple[Point, ...]
    text_x: int
    text_y: int


def trace_path(r: Renderer, points: Sequence[Point], *, close: bool = False) -> None:
    if not points:
        return
    x0, y0 = points[0]
    r.move_to(x0, y0)
    for x, y in points[1:]:
        r.line_to(x, y)
    if close:
        r.close()


def series_points(canvas_box: Box, x_range: Range, y_range: Range, values: ValueProvider) -> list[Point]:
    """Pixel positions of every finite value; y grows downward from the canvas bottom."""
    if len(values) == 0:
        return []
    xs, ys = finite_arrays(values)
    if xs.size == 0:
        return []
    px = canvas_box.left + x_range.translate_array(xs)
    py = canvas_box.bottom - y_range.translate_array(ys)
    return list(zip(px.tolist(), py.tolist(), strict=False))


def draw_line_series(
    r: Renderer,
    canvas_box: Box,
    x_range: Range,
    y_range: Range,
    style: Style,
    values: ValueProvider,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> None:
    points = series_points(canvas_box, x_range, y_range, values)
    if not points:
        return

    fill = style.get_fill_color()
    if fill is not None:
        first_x = points[0][0]
        last_x = points[-1][0]
        baseline = canvas_box.bottom
        r.set_fill_color(fill)
        trace_path(r, points + [(last_x, baseline), (first_x, baseline)], close=True)
        r.fill()

    r.set_stroke_color(style.get_stroke_color())
    r.set_stroke_dash_array(style.get_stroke_dash_array())
    r.set_stroke_width(style.get_stroke_width(defaults.stroke_width))
    trace_path(r, points)
    r.stroke()


def annotation_geometry(
    text_box: Box,
    style: Style,
    lx: int,
    ly: int,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> AnnotationGeometry:
    padding = style.get_padding()
    pt = padding.get_top(defaults.annotation_padding.top)
    pl = padding.get_left(defaults.annotation_padding.left)
    pr = padding.get_right(defaults.annotation_padding.right)
    pb = padding.get_bottom(defaults.annotation_padding.bottom)

    text_width = text_box.width
    half_text_height = text_box.height // 2
    delta = defaults.annotation_delta_width
    stroke_width = style.get_stroke_width()

    top = ly - (pt + half_text_height)
    right = lx + pl + pr + text_width + delta + int(math.ceil(stroke_width))
    bottom = ly + (pb + half_text_height)
    box = Box(top=top, left=lx, right=right, bottom=bottom)

    outline = (
        (lx, ly),
        (lx + delta, top),
        (right, top),
        (right, bottom),
        (lx + delta, bottom),
        (lx, ly),
    )
    return AnnotationGeometry(
        box=box,
        outline=outline,
        text_x=lx + delta + pl,
        text_y=ly + half_text_height,
    )


def _apply_annotation_font(r: Renderer, style: Style, defaults: DrawingDefaults) -> None:
    r.set_font(style.get_font())
    r.set_font_color(style.get_font_color(defaults.text_color))
    r.set_font_size(style.get_font_size(defaults.annotation_font_size))


def measure_annotation(
    r: Renderer,
    canvas_box: Box,
    style: Style,
    lx: int,
    ly: int,
    label: str,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> Box:
    r.set_fill_color(style.get_fill_color(defaults.annotation_fill_color))
    r.set_stroke_color(style.get_stroke_color())
    r.set_stroke_width(style.get_stroke_width())
    _apply_annotation_font(r, style, defaults)

    text_box = r.measure_text(label)
    return annotation_geometry(text_box, style, lx, ly, defaults=defaults).box


def draw_annotation(
    r: Renderer,
    canvas_box: Box,
    style: Style,
    lx: int,
    ly: int,
    label: str,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> None:
    r.set_fill_color(style.get_fill_color(defaults.annotation_fill_color))
    r.set_stroke_color(style.get_stroke_color())
    r.set_stroke_width(style.get_stroke_width())
    r.set_stroke_dash_array(style.get_stroke_dash_array())
    _apply_annotation_font(r, style, defaults)

    text_box = r.measure_text(label)
    geometry = annotation_geometry(text_box, style, lx, ly, defaults=defaults)

    trace_path(r, geometry.outline, close=True)
    r.fill_stroke()

    r.text(label, geometry.text_x, geometry.text_y)


def draw_box(r: Renderer, box: Box, style: Style, *, defaults: DrawingDefaults = DEFAULT_DRAWING) -> None:
    r.set_fill_color(style.get_fill_color())
    r.set_stroke_color(style.get_stroke_color(defaults.stroke_color))
    r.set_stroke_width(style.get_stroke_width(defaults.stroke_width))
    r.set_stroke_dash_array(style.get_stroke_dash_array())

    trace_path(
        r,
        (
            (box.left, box.top),
            (box.right, box.top),
            (box.right, box.bottom),
            (box.left, box.bottom),
            (box.left, box.top),
        ),
    )
    r.fill_stroke()


def _apply_text_style(r: Renderer, style: Style, defaults: DrawingDefaults) -> None:
    r.set_font_color(style.get_font_color(defaults.text_color))
    r.set_stroke_color(style.get_stroke_color())
    r.set_stroke_width(style.get_stroke_width())
    r.set_font(style.get_font())
    r.set_font_size(style.get_font_size(defaults.font_size))


def draw_text(
    r: Renderer,
    body: str,
    x: int,
    y: int,
    style: Style,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> None:
    _apply_text_style(r, style, defaults)
    r.text(body, x, y)


def draw_text_centered(
    r: Renderer,
    body: str,
    x: int,
    y: int,
    style: Style,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> None:
    _apply_text_style(r, style, defaults)
    tb = r.measure_text(body)
    r.text(body, x - (tb.width // 2), y - (tb.height // 2))

