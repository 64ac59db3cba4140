# MIT License
"""Pointer-to-column resolution for chart tooltips.

Each distinct x value owns an invisible full-height hit region.  For curve
charts the region is centred on the column's scaled position and is as wide
as the spacing between the first two columns; bar charts use their bands.
A pointer resolves to the column whose region contains it.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict


class TooltipEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    y: float
    color: str
    negative_color: Optional[str] = None

    @property
    def display_color(self) -> str:
        if self.negative_color is not None and self.y < 0:
            return self.negative_color
        return self.color


class Tooltip(BaseModel):
    """Tooltip state for one resolved column.

    ``x_px`` and ``y_px`` only place the tooltip box; ``y_px`` is the mean
    scaled y of the matched points, not a data value.
    """

    model_config = ConfigDict(frozen=True)

    x: float
    entries: List[TooltipEntry]
    x_px: float
    y_px: float


def distinct_xs(series) -> List[float]:
    """Sorted distinct x values across ``series``."""
    return sorted({p.x for s in series for p in s.points})


def column_width(scaled_xs: Sequence[float], plot_width: float) -> float:
    if len(scaled_xs) > 1:
        return scaled_xs[1] - scaled_xs[0]
    return plot_width


def resolve_column(
    pointer_x: float,
    distinct: Sequence[float],
    scaled_xs: Sequence[float],
    plot_width: float,
) -> Optional[float]:
    """Return the x value whose hit region contains ``pointer_x``.

    ``pointer_x`` is in plot pixels.  Regions are half-open
    ``[sx - w/2, sx + w/2)``; the first containing region wins.  Returns
    ``None`` when the pointer is over no column.
    """
    w = column_width(scaled_xs, plot_width)
    for x, sx in zip(distinct, scaled_xs):
        if sx - w / 2 <= pointer_x < sx + w / 2:
            return x
    return None


def band_width(n_columns: int, plot_width: float) -> float:
    return plot_width / n_columns if n_columns > 0 else plot_width


def resolve_band(pointer_x: float, distinct: Sequence[float], plot_width: float) -> Optional[float]:
    """Bar-chart variant of :func:`resolve_column` keyed by band."""
    bw = band_width(len(distinct), plot_width)
    for i, x in enumerate(distinct):
        if i * bw <= pointer_x < (i + 1) * bw:
            return x
    return None


def tooltip_for(
    x: float,
    series,
    y_scale: Callable[[float], float],
    x_px: float,
) -> Optional[Tooltip]:
    """Gather every series' point at ``x``.

    Series without a point at ``x`` are skipped.  Returns ``None`` when no
    series has one.
    """
    entries = []
    for s in series:
        point = next((p for p in s.points if p.x == x), None)
        if point is None:
            continue
        entries.append(
            TooltipEntry(label=s.label, y=point.y, color=s.color, negative_color=s.negative_color)
        )
    if not entries:
        return None
    y_px = float(np.mean([y_scale(e.y) for e in entries]))
    return Tooltip(x=x, entries=entries, x_px=x_px, y_px=y_px)
