from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import numpy as np


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Range:
    """Linear mapping from the data domain `[min, max]` onto `[0, domain]` pixels.

    Values outside the domain extrapolate; callers decide whether to clip.
    """

    min: float
    max: float
    domain: int

    @property
    def delta(self) -> float:
        return self.max - self.min

    def is_zero(self) -> bool:
        return self.delta == 0

    def translate(self, value: float) -> int:
        if self.is_zero():
            return 0
        ratio = (float(value) - self.min) / self.delta
        return int(np.rint(ratio * self.domain))

    def translate_array(self, values: Any) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        if self.is_zero():
            return np.zeros(arr.shape, dtype=np.int64)
        ratio = (arr - self.min) / self.delta
        return np.rint(ratio * self.domain).astype(np.int64)

    @classmethod
    def fit(cls, values: Any, domain: int) -> "Range":
        arr = np.asarray(values, dtype=np.float64)
        finite = arr[np.isfinite(arr)]
        if finite.size != arr.size:
            LOGGER.warning("ignoring %d non-finite value(s) while fitting range", arr.size - finite.size)
        if finite.size == 0:
            return cls(min=0.0, max=0.0, domain=domain)
        return cls(min=float(np.min(finite)), max=float(np.max(finite)), domain=domain)
