# MIT License
"""Smoothed SVG paths and zero-crossing splits.

Curves are drawn as Catmull-Rom splines converted to cubic Bezier
segments.  For each segment ``p1 -> p2`` the neighbours ``p0`` and ``p3``
(the segment's own endpoints at either end of the series) set the tangents::

    t1 = (p2 - p0) * tension
    t2 = (p3 - p1) * tension
    C  (p1 + t1) (p2 - t2) p2

Series that change sign are first split at the zero crossing into a
non-negative and a negative half, each smoothed on its own so they can be
drawn in two colours and meet on the axis.
"""
from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple


class ChartPoint(NamedTuple):
    x: float
    y: float


class BezierSegment(NamedTuple):
    cp1: ChartPoint
    cp2: ChartPoint
    end: ChartPoint


def _num(v: float) -> str:
    s = repr(float(v))
    return s[:-2] if s.endswith(".0") else s


def _pt(p: ChartPoint) -> str:
    return f"{_num(p.x)},{_num(p.y)}"


def smooth_segments(points: Sequence[ChartPoint], tension: float = 0.5) -> List[BezierSegment]:
    """Cubic Bezier segments through ``points`` (at least 2 points)."""
    pts = [ChartPoint(float(p[0]), float(p[1])) for p in points]
    segments = []
    for i in range(len(pts) - 1):
        p0 = pts[i - 1] if i > 0 else pts[i]
        p1 = pts[i]
        p2 = pts[i + 1]
        p3 = pts[i + 2] if i < len(pts) - 2 else p2
        t1x, t1y = (p2.x - p0.x) * tension, (p2.y - p0.y) * tension
        t2x, t2y = (p3.x - p1.x) * tension, (p3.y - p1.y) * tension
        segments.append(
            BezierSegment(
                cp1=ChartPoint(p1.x + t1x, p1.y + t1y),
                cp2=ChartPoint(p2.x - t2x, p2.y - t2y),
                end=p2,
            )
        )
    return segments


def build_smooth_path(points: Sequence[ChartPoint], tension: float = 0.5) -> str:
    """Build an SVG path string through already-scaled ``points``.

    Fewer than two points give an empty path and exactly two points a
    straight line.  Longer series start at the first point and end exactly on
    the last one.
    """
    if len(points) < 2:
        return ""
    pts = [ChartPoint(float(p[0]), float(p[1])) for p in points]
    path = f"M {_pt(pts[0])}"
    if len(pts) == 2:
        return path + f" L {_pt(pts[1])}"
    for seg in smooth_segments(pts, tension):
        path += f" C {_pt(seg.cp1)} {_pt(seg.cp2)} {_pt(seg.end)}"
    return path


def zero_crossing_x(p1: ChartPoint, p2: ChartPoint) -> float:
    """x where the line through ``p1`` and ``p2`` meets y = 0."""
    return p1.x - p1.y * (p2.x - p1.x) / (p2.y - p1.y)


def split_at_zero_crossing(points: Sequence[ChartPoint]) -> Tuple[List[ChartPoint], List[ChartPoint]]:
    """Split a data-space series into non-negative and negative halves.

    Points with ``y >= 0`` go to the first list and points with ``y <= 0`` to
    the second, keeping their order.  At the first strict sign change the
    interpolated point ``(x0, 0)`` is appended to the half being left and
    prepended to the half being entered, so both halves meet on the axis.

    Only the first sign change seeds the seam; series that cross zero more
    than once are outside what this split draws correctly.
    """
    pts = [ChartPoint(float(p[0]), float(p[1])) for p in points]
    positive = [p for p in pts if p.y >= 0]
    negative = [p for p in pts if p.y <= 0]
    for p1, p2 in zip(pts, pts[1:]):
        if (p1.y >= 0 and p2.y < 0) or (p1.y <= 0 and p2.y > 0):
            if p2.y != p1.y:
                crossing = ChartPoint(zero_crossing_x(p1, p2), 0.0)
                if p1.y >= 0:
                    positive.append(crossing)
                    negative.insert(0, crossing)
                else:
                    negative.append(crossing)
                    positive.insert(0, crossing)
            break
    return positive, negative


class SignRun(NamedTuple):
    negative: bool
    points: List[ChartPoint]


def _sign(y: float) -> int:
    return (y > 0) - (y < 0)


def sign_runs(points: Sequence[ChartPoint]) -> List[SignRun]:
    """Split a series at every sign change into same-sign runs.

    Consecutive runs share their seam point on the axis: the interpolated
    crossing, or the data point itself when it lies exactly on zero.  For a
    series with a single sign change the runs are the two halves returned by
    :func:`split_at_zero_crossing`.
    """
    pts = [ChartPoint(float(p[0]), float(p[1])) for p in points]
    if not pts:
        return []
    runs = []
    current = [pts[0]]
    sign = _sign(pts[0].y)
    for p1, p2 in zip(pts, pts[1:]):
        s2 = _sign(p2.y)
        if sign != 0 and s2 != 0 and s2 != sign:
            seam = p1 if p1.y == 0 else ChartPoint(zero_crossing_x(p1, p2), 0.0)
            if seam is not p1:
                current.append(seam)
            runs.append(SignRun(negative=sign < 0, points=current))
            current = [seam, p2]
        else:
            current.append(p2)
        if s2 != 0:
            sign = s2
    runs.append(SignRun(negative=sign < 0, points=current))
    return runs
