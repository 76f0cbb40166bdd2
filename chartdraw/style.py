from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from chartdraw.box import Box


Color = tuple[int, int, int, int]
DashArray = tuple[float, ...]

SYSTEM_STROKE_WIDTH = 1.0
SYSTEM_FONT_SIZE = 10.0


def _is_unset(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, tuple):
        # (0, 0, 0, 0) is the zero color
        return len(value) == 0 or (len(value) == 4 and all(c == 0 for c in value))
    if isinstance(value, Box):
        return value.is_zero()
    return False


@dataclass(frozen=True)
class Style:
    """Optional drawing attributes with default-valued accessors.

    `None`, numeric zero, an empty dash tuple, the all-zero color and a zero
    padding box all read as unset. Accessors return the own value, else the supplied default, else
    the system default.
    """

    fill_color: Color | None = None
    stroke_color: Color | None = None
    stroke_width: float | None = None
    stroke_dash_array: DashArray | None = None
    font: str | None = None
    font_color: Color | None = None
    font_size: float | None = None
    padding: Box | None = None
    show: bool = False

    def is_zero(self) -> bool:
        if self.show:
            return False
        return all(_is_unset(getattr(self, f.name)) for f in fields(self) if f.name != "show")

    def get_fill_color(self, default: Color | None = None) -> Color | None:
        return _pick(self.fill_color, default, None)

    def get_stroke_color(self, default: Color | None = None) -> Color | None:
        return _pick(self.stroke_color, default, None)

    def get_stroke_width(self, default: float | None = None) -> float:
        return float(_pick(self.stroke_width, default, SYSTEM_STROKE_WIDTH))

    def get_stroke_dash_array(self, default: DashArray | None = None) -> DashArray | None:
        return _pick(self.stroke_dash_array, default, None)

    def get_font(self, default: str | None = None) -> str | None:
        return _pick(self.font, default, None)

    def get_font_color(self, default: Color | None = None) -> Color | None:
        return _pick(self.font_color, default, None)

    def get_font_size(self, default: float | None = None) -> float:
        return float(_pick(self.font_size, default, SYSTEM_FONT_SIZE))

    def get_padding(self, default: Box | None = None) -> Box:
        return _pick(self.padding, default, Box())

    def with_defaults_from(self, fallback: "Style") -> "Style":
        updates: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "show":
                continue
            if _is_unset(getattr(self, f.name)):
                updates[f.name] = getattr(fallback, f.name)
        return replace(self, **updates)


def resolve(explicit: Style, *fallbacks: Style) -> Style:
    """Merge field by field; earlier styles win over later ones."""
    out = explicit
    for fallback in fallbacks:
        out = out.with_defaults_from(fallback)
    return out


def is_visible(style: Style) -> bool:
    return style.is_zero() or style.show


def _pick(value: Any, default: Any, system: Any) -> Any:
    if not _is_unset(value):
        return value
    if not _is_unset(default):
        return default
    return system
