# MIT License
"""Linear mapping from data space to pixel space."""
from __future__ import annotations

import math
from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict


def scale_value(v: float, lo: float, hi: float, extent: float, invert: bool = False) -> float:
    """Map ``v`` from ``[lo, hi]`` onto ``[0, extent]``.

    Vertical axes pass ``invert=True`` so larger values render higher.  A
    zero-width domain maps every value to the midpoint ``extent / 2``.
    """
    if hi == lo:
        return extent / 2
    pos = extent * (v - lo) / (hi - lo)
    return extent - pos if invert else pos


def value_domain(values: Iterable[float]) -> Tuple[float, float]:
    """Min and max of the finite ``values``, always extended to include 0."""
    finite = [float(v) for v in values if math.isfinite(v)]
    return min([0.0] + finite), max([0.0] + finite)


def x_domain(values: Iterable[float]) -> Tuple[float, float]:
    """Plain min and max of ``values``; ``(0, 0)`` when empty."""
    xs = list(values)
    if not xs:
        return 0.0, 0.0
    return float(min(xs)), float(max(xs))


class LinearScale(BaseModel):
    """A data-space domain bound to a pixel extent."""

    model_config = ConfigDict(frozen=True)

    lo: float
    hi: float
    extent: float
    invert: bool = False

    def __call__(self, v: float) -> float:
        return scale_value(v, self.lo, self.hi, self.extent, self.invert)

    @property
    def is_degenerate(self) -> bool:
        return self.lo == self.hi
