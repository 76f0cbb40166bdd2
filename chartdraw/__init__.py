from chartdraw.box import Box
from chartdraw.config import DEFAULT_DRAWING, DrawingDefaults, drawing_defaults
from chartdraw.draw import (
    draw_annotation,
    draw_box,
    draw_line_series,
    draw_text,
    draw_text_centered,
    measure_annotation,
)
from chartdraw.errors import ChartDataError
from chartdraw.legend import Legend, LegendLayout, layout_legend, legend_entries
from chartdraw.ranges import Range
from chartdraw.recording import DrawCommand, RecordingRenderer
from chartdraw.renderable import BoxRenderable, Renderable, SeriesRenderable, TextRenderable, render_all
from chartdraw.renderer import Renderer
from chartdraw.series import Annotation, AnnotationSeries, LineSeries, Series, SeriesKind
from chartdraw.style import Style, resolve
from chartdraw.values import ArrayValues, ValueProvider

__all__ = [
    "Annotation",
    "AnnotationSeries",
    "ArrayValues",
    "Box",
    "BoxRenderable",
    "ChartDataError",
    "DEFAULT_DRAWING",
    "DrawCommand",
    "DrawingDefaults",
    "Legend",
    "LegendLayout",
    "LineSeries",
    "Range",
    "RecordingRenderer",
    "Renderable",
    "Renderer",
    "Series",
    "SeriesKind",
    "SeriesRenderable",
    "Style",
    "TextRenderable",
    "ValueProvider",
    "draw_annotation",
    "draw_box",
    "draw_line_series",
    "draw_text",
    "draw_text_centered",
    "drawing_defaults",
    "layout_legend",
    "legend_entries",
    "measure_annotation",
    "render_all",
    "resolve",
]
