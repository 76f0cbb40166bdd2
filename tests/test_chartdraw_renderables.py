from __future__ import annotations

import unittest
from unittest import mock

from chartdraw import (
    Annotation,
    AnnotationSeries,
    ArrayValues,
    Box,
    BoxRenderable,
    Legend,
    LineSeries,
    Range,
    RecordingRenderer,
    SeriesKind,
    SeriesRenderable,
    Style,
    TextRenderable,
    render_all,
)
from chartdraw.draw import measure_annotation


CANVAS = Box(top=0, left=0, right=100, bottom=100)
X_RANGE = Range(min=0.0, max=10.0, domain=100)
Y_RANGE = Range(min=0.0, max=10.0, domain=100)
BLUE = (0, 0, 255, 255)


class SeriesVariantTests(unittest.TestCase):
    def test_kinds_are_discriminable(self) -> None:
        self.assertIs(LineSeries("a", ArrayValues.from_pairs([])).kind, SeriesKind.LINE)
        self.assertIs(AnnotationSeries("n").kind, SeriesKind.ANNOTATION)

    def test_line_series_inherits_default_style(self) -> None:
        r = RecordingRenderer()
        series = LineSeries("a", ArrayValues.from_pairs([(0, 0), (10, 10)]))
        series.render(r, CANVAS, X_RANGE, Y_RANGE, Style(stroke_color=BLUE, stroke_width=2.0))
        self.assertEqual(r.calls("set_stroke_color"), [(BLUE,)])
        self.assertEqual(r.calls("set_stroke_width"), [(2.0,)])

    def test_annotation_series_places_callouts_at_data_points(self) -> None:
        r = RecordingRenderer()
        series = AnnotationSeries("notes", (Annotation(2.0, 3.0, "a"), Annotation(5.0, 5.0, "b")))
        series.render(r, CANVAS, X_RANGE, Y_RANGE, Style())
        self.assertEqual(r.calls("move_to"), [(20, 70), (50, 50)])
        self.assertEqual([args[0] for args in r.calls("text")], ["a", "b"])
        self.assertEqual(r.calls("fill_stroke"), [(), ()])

    def test_hidden_annotation_series_draws_nothing(self) -> None:
        r = RecordingRenderer()
        series = AnnotationSeries("notes", (Annotation(2.0, 3.0, "a"),), Style(fill_color=BLUE))
        series.render(r, CANVAS, X_RANGE, Y_RANGE, Style())
        self.assertEqual(r.commands, [])
        self.assertEqual(series.measure(r, CANVAS, X_RANGE, Y_RANGE, Style()), Box())

    def test_annotation_series_measure_unions_callouts(self) -> None:
        r = RecordingRenderer()
        series = AnnotationSeries("notes", (Annotation(2.0, 3.0, "a"), Annotation(8.0, 9.0, "bbb")))
        style = series.working_style(Style())
        first = measure_annotation(r, CANVAS, style, 20, 70, "a")
        second = measure_annotation(r, CANVAS, style, 80, 10, "bbb")
        bounds = series.measure(r, CANVAS, X_RANGE, Y_RANGE, Style())
        self.assertEqual(bounds, first.grow(second))

    def test_annotation_with_non_finite_anchor_is_skipped(self) -> None:
        r = RecordingRenderer()
        series = AnnotationSeries("notes", (Annotation(float("nan"), 1.0, "gone"), Annotation(2.0, 3.0, "a")))
        series.render(r, CANVAS, X_RANGE, Y_RANGE, Style())
        self.assertEqual(r.calls("move_to"), [(20, 70)])
        self.assertEqual([args[0] for args in r.calls("text")], ["a"])

        only = AnnotationSeries("notes", (Annotation(2.0, 3.0, "a"),))
        self.assertEqual(
            series.measure(r, CANVAS, X_RANGE, Y_RANGE, Style()),
            only.measure(r, CANVAS, X_RANGE, Y_RANGE, Style()),
        )

    def test_measure_without_drawable_callouts_is_empty(self) -> None:
        r = RecordingRenderer()
        self.assertEqual(AnnotationSeries("notes").measure(r, CANVAS, X_RANGE, Y_RANGE, Style()), Box())
        series = AnnotationSeries("notes", (Annotation(1.0, float("inf"), "gone"),))
        self.assertEqual(series.measure(r, CANVAS, X_RANGE, Y_RANGE, Style()), Box())
        series.render(r, CANVAS, X_RANGE, Y_RANGE, Style())
        self.assertEqual(r.calls("text"), [])

    def test_annotation_working_style_uses_annotation_defaults(self) -> None:
        style = AnnotationSeries("notes").working_style(Style(font="Mono", stroke_color=BLUE))
        self.assertEqual(style.font, "Mono")
        self.assertEqual(style.stroke_color, BLUE)
        self.assertEqual(style.fill_color, (255, 255, 255, 255))
        self.assertEqual(style.padding, Box(top=5, left=5, right=5, bottom=5))


class RenderableTests(unittest.TestCase):
    def test_render_all_draws_each_once_in_order(self) -> None:
        calls: list[str] = []
        items = []
        for name in ("background", "series", "legend"):
            item = mock.Mock()
            item.draw.side_effect = lambda r, cb, ds, name=name: calls.append(name)
            items.append(item)

        count = render_all(RecordingRenderer(), CANVAS, Style(), items)

        self.assertEqual(count, 3)
        self.assertEqual(calls, ["background", "series", "legend"])
        for item in items:
            item.draw.assert_called_once()

    def test_heterogeneous_renderables_share_one_renderer(self) -> None:
        r = RecordingRenderer()
        values = ArrayValues.from_pairs([(0, 0), (10, 10)])
        line = LineSeries("a", values)
        renderables = [
            BoxRenderable(Style(fill_color=(250, 250, 250, 255))),
            SeriesRenderable(line, X_RANGE, Y_RANGE),
            SeriesRenderable(AnnotationSeries("notes", (Annotation(5.0, 5.0, "mid"),)), X_RANGE, Y_RANGE),
            Legend([line]),
        ]
        render_all(r, CANVAS, Style(), renderables)

        self.assertEqual(r.ops().count("fill_stroke"), 3)
        self.assertEqual(r.ops().count("stroke"), 2)
        self.assertEqual([args[0] for args in r.calls("text")], ["mid", "a"])

    def test_text_renderable_offsets_from_canvas(self) -> None:
        r = RecordingRenderer()
        TextRenderable("title", 10, 12).draw(r, Box(top=5, left=7, right=50, bottom=50), Style())
        self.assertEqual(r.calls("text"), [("title", 17, 17)])

    def test_centered_text_renderable(self) -> None:
        r = RecordingRenderer()
        TextRenderable("ab", 50, 50, Style(font_size=10.0), centered=True).draw(r, CANVAS, Style())
        # fixed-advance metrics: 12 x 10
        self.assertEqual(r.calls("text"), [("ab", 44, 45)])

    def test_render_all_logs_each_renderable(self) -> None:
        with self.assertLogs("chartdraw.renderable", level="DEBUG") as logs:
            render_all(RecordingRenderer(), CANVAS, Style(), [BoxRenderable()])
        self.assertIn("BoxRenderable", logs.output[0])


class RecordingRendererTests(unittest.TestCase):
    def test_replay_reissues_commands(self) -> None:
        source = RecordingRenderer()
        LineSeries("a", ArrayValues.from_pairs([(0, 0), (10, 10)])).render(source, CANVAS, X_RANGE, Y_RANGE, Style())
        target = RecordingRenderer()
        source.replay(target)
        self.assertEqual(target.commands, source.commands)

    def test_measure_tracks_font_state(self) -> None:
        seen: list[tuple[str | None, float]] = []

        def measure(body: str, font: str | None, font_size: float) -> Box:
            seen.append((font, font_size))
            return Box(right=len(body), bottom=1)

        r = RecordingRenderer(measure=measure)
        r.set_font("Mono")
        r.set_font_size(14.0)
        self.assertEqual(r.measure_text("abc").width, 3)
        self.assertEqual(seen, [("Mono", 14.0)])

    def test_clear(self) -> None:
        r = RecordingRenderer()
        r.move_to(1, 2)
        r.clear()
        self.assertEqual(r.commands, [])


if __name__ == "__main__":
    unittest.main()
