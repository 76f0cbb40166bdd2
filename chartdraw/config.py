from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
import re
from typing import Any, Mapping

from chartdraw.box import Box
from chartdraw.style import Color

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_KEYS = (
    "stroke_color",
    "text_color",
    "axis_color",
    "annotation_fill_color",
    "legend_fill_color",
)
_POSITIVE_FLOAT_KEYS = (
    "stroke_width",
    "axis_line_width",
    "font_size",
    "annotation_font_size",
    "legend_font_size",
)
_NON_NEGATIVE_INT_KEYS = (
    "annotation_delta_width",
    "minimum_tick_vertical_spacing",
    "legend_padding",
    "legend_line_text_gap",
    "legend_line_length_minimum",
)


@dataclass(frozen=True)
class DrawingDefaults:
    """Default constants shared by every drawing component."""

    stroke_width: float = 1.0
    stroke_color: Color = (0, 116, 217, 255)
    text_color: Color = (51, 51, 51, 255)
    axis_color: Color = (51, 51, 51, 255)
    axis_line_width: float = 1.0
    font_size: float = 10.0

    annotation_fill_color: Color = (255, 255, 255, 255)
    annotation_font_size: float = 10.0
    annotation_padding: Box = Box(top=5, left=5, right=5, bottom=5)
    # horizontal room reserved for the pointer leader
    annotation_delta_width: int = 10

    minimum_tick_vertical_spacing: int = 20

    legend_fill_color: Color = (255, 255, 255, 255)
    legend_font_size: float = 8.0
    legend_padding: int = 5
    legend_line_text_gap: int = 5
    legend_line_length_minimum: int = 25


DEFAULT_DRAWING = DrawingDefaults()


def parse_color(value: Any, *, key: str = "color") -> Color:
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ValueError(f"`{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        r = int(value[1:3], 16)
        g = int(value[3:5], 16)
        b = int(value[5:7], 16)
        a = int(value[7:9], 16) if len(value) == 9 else 255
        return (r, g, b, a)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError(f"`{key}` channels must be in [0, 255]")
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    raise ValueError(f"`{key}` must be a hex string or an RGB/RGBA tuple")


def drawing_defaults(
    overrides: Mapping[str, Any] | None = None,
    *,
    base: DrawingDefaults = DEFAULT_DRAWING,
) -> DrawingDefaults:
    """Validate and merge overrides against `base`.

    Raises `ValueError` on unknown keys or invalid values.
    """

    if not overrides:
        return base

    known = {f.name for f in fields(DrawingDefaults)}
    updates: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            raise ValueError(f"Unknown drawing default: {key}")
        updates[key] = value

    for key in _COLOR_KEYS:
        if key in updates:
            updates[key] = parse_color(updates[key], key=key)

    for key in _POSITIVE_FLOAT_KEYS:
        if key in updates:
            value = updates[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) <= 0:
                raise ValueError(f"`{key}` must be a positive number")
            updates[key] = float(value)

    for key in _NON_NEGATIVE_INT_KEYS:
        if key in updates:
            value = updates[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"`{key}` must be a non-negative integer")

    if "annotation_padding" in updates:
        updates["annotation_padding"] = _coerce_padding(updates["annotation_padding"])

    return replace(base, **updates)


def _coerce_padding(value: Any) -> Box:
    if isinstance(value, Box):
        return value
    if isinstance(value, Mapping):
        raw = asdict(Box())
        for key, edge in value.items():
            if key not in raw:
                raise ValueError(f"Unknown padding edge: {key}")
            raw[key] = edge
        value = Box(**raw)
    elif isinstance(value, int) and not isinstance(value, bool):
        value = Box(top=value, left=value, right=value, bottom=value)
    else:
        raise ValueError("`annotation_padding` must be a Box, a mapping of edges or an int")
    for edge in (value.top, value.left, value.right, value.bottom):
        if not isinstance(edge, int) or edge < 0:
            raise ValueError("`annotation_padding` edges must be non-negative integers")
    return value
