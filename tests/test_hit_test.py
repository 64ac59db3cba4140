"""Tests for pointer-to-column resolution and tooltip gathering."""

import math

from econlab.charts import ChartSeries, SeriesKind
from econlab.hit_test import (
    band_width,
    column_width,
    distinct_xs,
    resolve_band,
    resolve_column,
    tooltip_for,
)
from econlab.paths import ChartPoint
from econlab.scales import LinearScale


def _series():
    return [
        ChartSeries(label="A", points=[ChartPoint(0, 10), ChartPoint(1, 20), ChartPoint(2, 30)], color="#111111"),
        ChartSeries(
            label="B",
            points=[ChartPoint(1, -10), ChartPoint(2, 40)],
            kind=SeriesKind.SIGNED,
            color="#222222",
        ),
    ]


def test_distinct_xs_sorted_and_deduplicated():
    assert distinct_xs(_series()) == [0, 1, 2]


def test_column_width():
    assert column_width([0, 130, 260], 260) == 130
    assert column_width([130], 260) == 260


def test_resolve_column_by_containment():
    xs, sx = [0, 1, 2], [0.0, 130.0, 260.0]
    assert resolve_column(0.0, xs, sx, 260) == 0
    assert resolve_column(64.9, xs, sx, 260) == 0
    assert resolve_column(65.0, xs, sx, 260) == 1
    assert resolve_column(250.0, xs, sx, 260) == 2
    assert resolve_column(-70.0, xs, sx, 260) is None
    assert resolve_column(400.0, xs, sx, 260) is None


def test_resolve_single_column_spans_full_width():
    assert resolve_column(0.0, [5], [130.0], 260) == 5
    assert resolve_column(259.0, [5], [130.0], 260) == 5
    assert resolve_column(-1.0, [5], [130.0], 260) is None
    assert resolve_column(260.0, [5], [130.0], 260) is None


def test_resolve_band():
    assert band_width(4, 260) == 65
    xs = [0, 1, 2, 3]
    assert resolve_band(0.0, xs, 260) == 0
    assert resolve_band(64.99, xs, 260) == 0
    assert resolve_band(65.0, xs, 260) == 1
    assert resolve_band(259.0, xs, 260) == 3
    assert resolve_band(260.0, xs, 260) is None


def test_tooltip_skips_missing_points_and_averages_y():
    y = LinearScale(lo=-10, hi=40, extent=150, invert=True)
    tip = tooltip_for(0, _series(), y, 0.0)
    assert [e.label for e in tip.entries] == ["A"]
    assert math.isclose(tip.y_px, y(10))

    tip = tooltip_for(1, _series(), y, 130.0)
    assert [e.label for e in tip.entries] == ["A", "B"]
    assert math.isclose(tip.y_px, (y(20) + y(-10)) / 2)
    assert tip.x_px == 130.0
    # negative values of signed series use the loss colour
    assert tip.entries[1].display_color != "#222222"
    assert tip.entries[0].display_color == "#111111"


def test_tooltip_none_when_nothing_matches():
    y = LinearScale(lo=0, hi=1, extent=100)
    assert tooltip_for(7, _series(), y, 0.0) is None
