from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence

from chartdraw.box import Box
from chartdraw.config import DEFAULT_DRAWING, DrawingDefaults
from chartdraw.draw import draw_box
from chartdraw.renderer import Renderer
from chartdraw.series import Series, SeriesKind
from chartdraw.style import Style, is_visible, resolve


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegendEntry:
    label: str
    style: Style


@dataclass(frozen=True)
class LegendRow:
    label: str
    style: Style
    text_box: Box


@dataclass(frozen=True)
class LegendLayout:
    box: Box
    content: Box
    rows: tuple[LegendRow, ...]


def legend_entries(series: Sequence[Series]) -> list[LegendEntry]:
    """Visible, non-annotation series in chart order.

    A series with no style at all counts as visible.
    """
    entries: list[LegendEntry] = []
    for s in series:
        if not is_visible(s.style):
            continue
        if s.kind is SeriesKind.ANNOTATION:
            continue
        entries.append(LegendEntry(label=s.name, style=s.style))
    return entries


def legend_baseline_style(defaults: DrawingDefaults = DEFAULT_DRAWING) -> Style:
    return Style(
        fill_color=defaults.legend_fill_color,
        font_color=defaults.text_color,
        font_size=defaults.legend_font_size,
        stroke_color=defaults.axis_color,
        stroke_width=defaults.axis_line_width,
    )


def layout_legend(
    r: Renderer,
    canvas_box: Box,
    entries: Sequence[LegendEntry],
    working_style: Style,
    *,
    defaults: DrawingDefaults = DEFAULT_DRAWING,
) -> LegendLayout:
    """Measure every label and size the legend box around the rows.

    Sets the working font on `r` so later text calls use the measured font.
    """
    pad = defaults.legend_padding
    r.set_font(working_style.get_font())
    r.set_font_color(working_style.get_font_color())
    r.set_font_size(working_style.get_font_size())

    rows: list[LegendRow] = []
    content_height = 0
    content_width = 0
    for entry in entries:
        if not entry.label:
            continue
        tb = r.measure_text(entry.label)
        rows.append(LegendRow(label=entry.label, style=entry.style, text_box=tb))
        content_height += tb.height + defaults.minimum_tick_vertical_spacing
        row_width = tb.width + defaults.legend_line_length_minimum + defaults.legend_line_text_gap
        content_width = max(content_width, row_width)

    content = Box(
        top=canvas_box.top + pad,
        left=canvas_box.left + pad,
        right=canvas_box.left + pad + content_width,
        bottom=canvas_box.top + pad + content_height,
    )
    anchor = Box(top=canvas_box.top, left=canvas_box.left, right=canvas_box.left, bottom=canvas_box.top)
    box = anchor.grow(content)
    return LegendLayout(box=box, content=content, rows=tuple(rows))


@dataclass(frozen=True)
class Legend:
    """Auto-sized legend box anchored at the canvas top-left."""

    series: Sequence[Series]
    style: Style = field(default_factory=Style)
    defaults: DrawingDefaults = DEFAULT_DRAWING

    def working_style(self, default_style: Style) -> Style:
        return resolve(self.style, default_style, legend_baseline_style(self.defaults))

    def layout(self, r: Renderer, canvas_box: Box, default_style: Style) -> LegendLayout:
        return layout_legend(
            r,
            canvas_box,
            legend_entries(self.series),
            self.working_style(default_style),
            defaults=self.defaults,
        )

    def draw(self, r: Renderer, canvas_box: Box, default_style: Style) -> None:
        working = self.working_style(default_style)
        layout = layout_legend(r, canvas_box, legend_entries(self.series), working, defaults=self.defaults)
        LOGGER.debug("legend: %d row(s) in %s", len(layout.rows), layout.box)

        draw_box(r, layout.box, working, defaults=self.defaults)

        pad = self.defaults.legend_padding
        gap = self.defaults.legend_line_text_gap
        content_right = layout.box.right - pad
        tx = layout.content.left
        ycursor = layout.content.top
        for row in layout.rows:
            tb = row.text_box
            ycursor += tb.height
            r.text(row.label, tx, ycursor)

            lx = tx + tb.width + gap
            ly = ycursor - (tb.height // 2)
            lx2 = content_right - pad

            r.set_stroke_color(row.style.get_stroke_color())
            r.set_stroke_width(row.style.get_stroke_width())
            r.set_stroke_dash_array(row.style.get_stroke_dash_array())
            r.move_to(lx, ly)
            r.line_to(lx2, ly)
            r.stroke()

            ycursor += self.defaults.minimum_tick_vertical_spacing
