"""Closed search intervals."""

from __future__ import annotations

from dataclasses import dataclass

import math

from .errors import InvalidInterval


@dataclass(frozen=True)
class SearchInterval:
    lower: float
    upper: float

    def __post_init__(self):
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise InvalidInterval(self.lower, self.upper, "bounds must be finite")
        if self.lower >= self.upper:
            raise InvalidInterval(self.lower, self.upper)
        # probes are placed at fractions of the width, which must not overflow
        if not math.isfinite(self.upper - self.lower):
            raise InvalidInterval(self.lower, self.upper, "interval width overflows")

    @classmethod
    def of(cls, lower, upper) -> "SearchInterval":
        return cls(float(lower), float(upper))

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.lower + self.upper)

    def contains(self, x: float) -> bool:
        return self.lower <= x <= self.upper

    def clamp(self, x: float) -> float:
        return min(max(x, self.lower), self.upper)
