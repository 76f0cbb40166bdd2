from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from typing import Any, Iterable, Protocol

import numpy as np

from chartdraw.errors import ChartDataError


LOGGER = logging.getLogger(__name__)


class ValueProvider(Protocol):
    """Read-only, indexable sequence of data-space `(x, y)` pairs."""

    def __len__(self) -> int:
        ...

    def get_value(self, index: int) -> tuple[float, float]:
        ...


@dataclass(frozen=True)
class ArrayValues:
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if self.x.shape != self.y.shape:
            raise ChartDataError(f"x and y length mismatch: {self.x.size} != {self.y.size}")

    def __len__(self) -> int:
        return int(self.y.size)

    def get_value(self, index: int) -> tuple[float, float]:
        return (float(self.x[index]), float(self.y[index]))

    @classmethod
    def from_xy(cls, y: Any, x: Any = None) -> "ArrayValues":
        y_arr = _coerce_1d_numeric(y, label="y")
        if x is None:
            x_arr = np.arange(y_arr.size, dtype=np.float64)
        else:
            x_arr = _coerce_1d_numeric(x, label="x")
        return cls(x=x_arr, y=y_arr)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "ArrayValues":
        items = list(pairs)
        if not items:
            return cls(x=np.empty(0, dtype=np.float64), y=np.empty(0, dtype=np.float64))
        for i, pair in enumerate(items):
            if not isinstance(pair, Sequence) or isinstance(pair, (str, bytes)) or len(pair) != 2:
                raise ChartDataError(f"pair at index {i} must be an (x, y) pair: {pair!r}")
        xs = [pair[0] for pair in items]
        ys = [pair[1] for pair in items]
        return cls.from_xy(ys, x=xs)


def values_to_arrays(values: ValueProvider) -> tuple[np.ndarray, np.ndarray]:
    if isinstance(values, ArrayValues):
        return values.x, values.y
    n = len(values)
    xs = np.empty(n, dtype=np.float64)
    ys = np.empty(n, dtype=np.float64)
    for i in range(n):
        xs[i], ys[i] = values.get_value(i)
    return xs, ys


def finite_arrays(values: ValueProvider) -> tuple[np.ndarray, np.ndarray]:
    """Drawable x/y arrays: points with a non-finite coordinate are left out."""
    xs, ys = values_to_arrays(values)
    live = np.isfinite(xs) & np.isfinite(ys)
    if np.all(live):
        return xs, ys
    LOGGER.debug("skipping %d non-finite point(s) of %d", int(live.size - np.count_nonzero(live)), live.size)
    return xs[live], ys[live]


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, (np.ndarray, Sequence)):
        raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")
    arr = value if isinstance(value, np.ndarray) else np.asarray(value, dtype=object)
    if arr.ndim != 1:
        raise ChartDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    # None becomes NaN and is masked out at draw time
    return np.fromiter(
        (_to_float(raw, label=label, index=i) for i, raw in enumerate(arr.tolist())),
        dtype=np.float64,
        count=arr.size,
    )


def _to_float(raw: Any, *, label: str, index: int) -> float:
    if raw is None:
        return float("nan")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ChartDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
