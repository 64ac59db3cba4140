"""Tests for curve smoothing and the zero-crossing split."""

import math

from econlab.paths import (
    ChartPoint,
    build_smooth_path,
    sign_runs,
    smooth_segments,
    split_at_zero_crossing,
    zero_crossing_x,
)


def test_short_inputs():
    assert build_smooth_path([]) == ""
    assert build_smooth_path([ChartPoint(1, 2)]) == ""
    assert build_smooth_path([ChartPoint(0, 0), ChartPoint(10, 5.5)]) == "M 0,0 L 10,5.5"


def test_smooth_path_starts_and_ends_on_input_points():
    pts = [ChartPoint(0, 100), ChartPoint(26, 80), ChartPoint(52, 30.25), ChartPoint(78, 40)]
    path = build_smooth_path(pts)
    assert path.startswith("M 0,100 C ")
    assert path.endswith(" 78,40")
    assert path.count(" C ") == 3


def test_segments_use_catmull_rom_tangents():
    pts = [ChartPoint(0, 0), ChartPoint(10, 10), ChartPoint(20, 0)]
    segs = smooth_segments(pts, tension=0.5)
    assert len(segs) == 2
    # first segment: p0 == p1 at the start
    assert segs[0].cp1 == ChartPoint(5.0, 5.0)
    assert segs[0].cp2 == ChartPoint(0.0, 10.0)
    assert segs[0].end == ChartPoint(10.0, 10.0)
    # last segment: p3 == p2 at the end
    assert segs[1].cp1 == ChartPoint(20.0, 10.0)
    assert segs[1].cp2 == ChartPoint(15.0, 5.0)
    assert segs[1].end == ChartPoint(20.0, 0.0)


def test_zero_tension_gives_corner_control_points():
    pts = [ChartPoint(0, 0), ChartPoint(10, 10), ChartPoint(20, 0)]
    segs = smooth_segments(pts, tension=0.0)
    assert segs[0].cp1 == pts[0]
    assert segs[0].cp2 == pts[1]


def test_zero_crossing_split():
    positive, negative = split_at_zero_crossing([ChartPoint(0, 5), ChartPoint(1, -3)])
    assert math.isclose(zero_crossing_x(ChartPoint(0, 5), ChartPoint(1, -3)), 0.625)
    assert positive == [ChartPoint(0, 5), ChartPoint(0.625, 0)]
    assert negative == [ChartPoint(0.625, 0), ChartPoint(1, -3)]


def test_split_from_negative_to_positive():
    pts = [ChartPoint(0, -100), ChartPoint(1, -110), ChartPoint(2, -45), ChartPoint(3, 95), ChartPoint(4, 160)]
    positive, negative = split_at_zero_crossing(pts)
    x0 = 2 + 45 / 140
    assert negative[-1].y == 0 and math.isclose(negative[-1].x, x0)
    assert positive[0].y == 0 and math.isclose(positive[0].x, x0)
    assert [p.x for p in negative[:-1]] == [0, 1, 2]
    assert [p.x for p in positive[1:]] == [3, 4]


def test_split_without_sign_change():
    pts = [ChartPoint(0, 1), ChartPoint(1, 4), ChartPoint(2, 2)]
    positive, negative = split_at_zero_crossing(pts)
    assert positive == pts
    assert negative == []


def test_points_on_the_axis_belong_to_both_halves():
    pts = [ChartPoint(0, 10), ChartPoint(1, 0), ChartPoint(2, 0)]
    positive, negative = split_at_zero_crossing(pts)
    assert positive == pts
    assert negative == [ChartPoint(1, 0), ChartPoint(2, 0)]


def test_only_first_crossing_seeds_the_seam():
    pts = [ChartPoint(0, 2), ChartPoint(1, -2), ChartPoint(2, 2)]
    positive, negative = split_at_zero_crossing(pts)
    assert positive == [ChartPoint(0, 2), ChartPoint(2, 2), ChartPoint(0.5, 0)]
    assert negative == [ChartPoint(0.5, 0), ChartPoint(1, -2)]


def test_sign_runs_match_single_split():
    pts = [ChartPoint(0, 5), ChartPoint(1, -3)]
    runs = sign_runs(pts)
    positive, negative = split_at_zero_crossing(pts)
    assert [r.negative for r in runs] == [False, True]
    assert runs[0].points == positive
    assert runs[1].points == negative


def test_sign_runs_split_every_crossing():
    pts = [ChartPoint(0, 2), ChartPoint(1, -2), ChartPoint(2, 2)]
    runs = sign_runs(pts)
    assert [r.negative for r in runs] == [False, True, False]
    assert runs[0].points == [ChartPoint(0, 2), ChartPoint(0.5, 0)]
    assert runs[1].points == [ChartPoint(0.5, 0), ChartPoint(1, -2), ChartPoint(1.5, 0)]
    assert runs[2].points == [ChartPoint(1.5, 0), ChartPoint(2, 2)]


def test_sign_runs_use_points_on_the_axis_as_seams():
    pts = [ChartPoint(0, -5), ChartPoint(1, 0), ChartPoint(2, 3), ChartPoint(3, 0)]
    runs = sign_runs(pts)
    assert [r.negative for r in runs] == [True, False]
    assert runs[0].points == [ChartPoint(0, -5), ChartPoint(1, 0)]
    assert runs[1].points == [ChartPoint(1, 0), ChartPoint(2, 3), ChartPoint(3, 0)]


def test_sign_runs_edge_cases():
    assert sign_runs([]) == []
    flat = [ChartPoint(0, 0), ChartPoint(1, 0)]
    assert sign_runs(flat) == [(False, flat)]
