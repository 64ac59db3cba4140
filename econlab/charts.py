# MIT License
"""Curve and bar chart scenes.

A scene is everything needed to draw one chart in plot-pixel space: the
scales, the smoothed paths (or bars), the point markers, the axis labels and
the hit regions used to resolve tooltips.  Scenes are plain data; turning
them into plotly figures is the job of :mod:`econlab.plots`.

Series carry a :class:`SeriesKind`.  ``SIGNED`` series (marginal product,
total profit) are split wherever they cross zero and their negative runs
are drawn in the loss colour.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from .hit_test import (
    Tooltip,
    band_width,
    column_width,
    distinct_xs,
    resolve_band,
    resolve_column,
    tooltip_for,
)
from .params import ChartSettings, EconomicRecord
from .paths import ChartPoint, build_smooth_path, sign_runs
from .scales import LinearScale, value_domain, x_domain

LOSS_COLOR = "#ef4444"

COLORS = {
    "Total Production": "#3b82f6",
    "Marginal Product of Labour": "#a855f7",
    "Marginal Cost": "#06b6d4",
    "Average Total Cost": "#f59e0b",
    "Total Profit": "#22c55e",
}


class SeriesKind(str, Enum):
    PLAIN = "plain"
    SIGNED = "signed"


class ChartSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    points: List[ChartPoint]
    kind: SeriesKind = SeriesKind.PLAIN
    color: str = "#64748b"

    @property
    def negative_color(self) -> Optional[str]:
        return LOSS_COLOR if self.kind is SeriesKind.SIGNED else None

    def color_for(self, y: float) -> str:
        if self.kind is SeriesKind.SIGNED and y < 0:
            return LOSS_COLOR
        return self.color


class PathSpec(BaseModel):
    label: str
    d: str
    color: str


class Marker(BaseModel):
    label: str
    x: float
    y: float
    x_px: float
    y_px: float
    color: str


class Bar(BaseModel):
    label: str
    x: float
    y: float
    left: float
    top: float
    width: float
    height: float
    color: str


class Column(BaseModel):
    """A column's hit region, in plot pixels."""

    x: float
    center: float
    left: float
    width: float


class AxisLabel(BaseModel):
    text: str
    x_px: float
    y_px: float


class ChartScene(BaseModel):
    title: str
    width: float
    height: float
    series: List[ChartSeries]
    y_scale: LinearScale
    columns: List[Column]
    x_labels: List[AxisLabel]
    y_labels: List[AxisLabel]
    zero_line: Optional[float] = None

    @property
    def distinct_xs(self) -> List[float]:
        return [c.x for c in self.columns]

    def column_center(self, x: float) -> Optional[float]:
        for c in self.columns:
            if c.x == x:
                return c.center
        return None

    def tooltip_for_x(self, x: float) -> Optional[Tooltip]:
        center = self.column_center(x)
        if center is None:
            return None
        return tooltip_for(x, self.series, self.y_scale, center)


class CurveScene(ChartScene):
    x_scale: LinearScale
    paths: List[PathSpec]
    markers: List[Marker]

    def resolve(self, pointer_x: float) -> Optional[float]:
        return resolve_column(
            pointer_x, self.distinct_xs, [c.center for c in self.columns], self.width
        )

    def tooltip_at(self, pointer_x: float) -> Optional[Tooltip]:
        x = self.resolve(pointer_x)
        return None if x is None else self.tooltip_for_x(x)


class BarScene(ChartScene):
    band_width: float
    bar_width: float
    bars: List[Bar]

    def resolve(self, pointer_x: float) -> Optional[float]:
        return resolve_band(pointer_x, self.distinct_xs, self.width)

    def tooltip_at(self, pointer_x: float) -> Optional[Tooltip]:
        x = self.resolve(pointer_x)
        return None if x is None else self.tooltip_for_x(x)


def _y_scale(series: Sequence[ChartSeries], height: float) -> LinearScale:
    lo, hi = value_domain(p.y for s in series for p in s.points)
    return LinearScale(lo=lo, hi=hi, extent=height, invert=True)


def _y_labels(y_scale: LinearScale) -> List[AxisLabel]:
    return [
        AxisLabel(text=str(math.ceil(y_scale.hi)), x_px=-10.0, y_px=y_scale(y_scale.hi)),
        AxisLabel(text=str(math.floor(y_scale.lo)), x_px=-10.0, y_px=y_scale(y_scale.lo)),
    ]


def _x_text(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else f"{x:g}"


def build_curve_scene(
    series: Sequence[ChartSeries],
    title: str = "",
    settings: Optional[ChartSettings] = None,
) -> CurveScene:
    """Lay out ``series`` as smoothed curves.

    ``SIGNED`` series are split into same-sign runs in data space, then each
    run is scaled and smoothed on its own.  All others become one continuous path.
    """
    settings = settings or ChartSettings()
    width, height = settings.plot_width, settings.plot_height
    series = list(series)
    xs = distinct_xs(series)
    lo_x, hi_x = x_domain(xs)
    x_scale = LinearScale(lo=lo_x, hi=hi_x, extent=width)
    y_scale = _y_scale(series, height)

    def scaled(points):
        return [ChartPoint(x_scale(p.x), y_scale(p.y)) for p in points]

    paths = []
    for s in series:
        if s.kind is SeriesKind.SIGNED:
            for run in sign_runs(s.points):
                color = LOSS_COLOR if run.negative else s.color
                paths.append(PathSpec(label=s.label, d=build_smooth_path(scaled(run.points), settings.tension), color=color))
        else:
            paths.append(PathSpec(label=s.label, d=build_smooth_path(scaled(s.points), settings.tension), color=s.color))

    markers = [
        Marker(label=s.label, x=p.x, y=p.y, x_px=x_scale(p.x), y_px=y_scale(p.y), color=s.color_for(p.y))
        for s in series
        for p in s.points
    ]

    centers = [x_scale(x) for x in xs]
    w = column_width(centers, width)
    columns = [Column(x=x, center=c, left=c - w / 2, width=w) for x, c in zip(xs, centers)]

    return CurveScene(
        title=title,
        width=width,
        height=height,
        series=series,
        x_scale=x_scale,
        y_scale=y_scale,
        paths=paths,
        markers=markers,
        columns=columns,
        x_labels=[AxisLabel(text=_x_text(x), x_px=c, y_px=height + 15) for x, c in zip(xs, centers)],
        y_labels=_y_labels(y_scale),
        zero_line=y_scale(0.0) if y_scale.lo < 0 else None,
    )


def build_bar_scene(
    series: Sequence[ChartSeries],
    title: str = "",
    settings: Optional[ChartSettings] = None,
) -> BarScene:
    """Lay out ``series`` as grouped bars, one band per distinct x.

    Each band keeps ``settings.bar_padding`` of its width as side padding and
    shares the rest evenly between the series.  Bars run from the zero line
    to the value, downward for negative values.
    """
    settings = settings or ChartSettings()
    width, height = settings.plot_width, settings.plot_height
    series = list(series)
    xs = distinct_xs(series)
    y_scale = _y_scale(series, height)
    bw = band_width(len(xs), width)
    group_width = bw * (1 - settings.bar_padding)
    bar_w = group_width / len(series) if series else group_width
    zero_px = y_scale(0.0)

    bars = []
    for idx, x in enumerate(xs):
        group_left = idx * bw + (bw * settings.bar_padding) / 2
        for i, s in enumerate(series):
            point = next((p for p in s.points if p.x == x), None)
            if point is None:
                continue
            y_px = y_scale(point.y)
            bars.append(
                Bar(
                    label=s.label,
                    x=x,
                    y=point.y,
                    left=group_left + i * bar_w,
                    top=y_px if point.y >= 0 else zero_px,
                    width=bar_w,
                    height=abs(y_px - zero_px),
                    color=s.color_for(point.y),
                )
            )

    columns = [Column(x=x, center=i * bw + bw / 2, left=i * bw, width=bw) for i, x in enumerate(xs)]
    return BarScene(
        title=title,
        width=width,
        height=height,
        series=series,
        y_scale=y_scale,
        band_width=bw,
        bar_width=bar_w,
        bars=bars,
        columns=columns,
        x_labels=[AxisLabel(text=_x_text(c.x), x_px=c.center, y_px=height + 15) for c in columns],
        y_labels=_y_labels(y_scale),
        zero_line=zero_px if y_scale.lo < 0 else None,
    )


# --- series builders ---------------------------------------------------------

def _series(label: str, points, kind: SeriesKind = SeriesKind.PLAIN) -> ChartSeries:
    finite = [ChartPoint(float(x), float(y)) for x, y in points if math.isfinite(y)]
    return ChartSeries(label=label, points=finite, kind=kind, color=COLORS[label])


def production_series(records: Sequence[EconomicRecord]) -> List[ChartSeries]:
    return [
        _series("Total Production", [(r.labour, r.total_production) for r in records]),
        _series(
            "Marginal Product of Labour",
            [(r.labour, r.marginal_product) for r in records],
            SeriesKind.SIGNED,
        ),
    ]


def cost_series(records: Sequence[EconomicRecord]) -> List[ChartSeries]:
    """Marginal and average total cost; undefined rates are dropped."""
    return [
        _series("Marginal Cost", [(r.labour, r.marginal_cost) for r in records]),
        _series("Average Total Cost", [(r.labour, r.average_total_cost) for r in records]),
    ]


def profit_series(records: Sequence[EconomicRecord]) -> List[ChartSeries]:
    return [_series("Total Profit", [(r.labour, r.total_profit) for r in records], SeriesKind.SIGNED)]
