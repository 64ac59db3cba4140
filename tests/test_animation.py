"""Tests for the eased number transitions."""

import math

from econlab.animation import NumberTween, ease_out_cubic


def test_ease_out_cubic():
    assert ease_out_cubic(0.0) == 0.0
    assert ease_out_cubic(1.0) == 1.0
    assert math.isclose(ease_out_cubic(0.5), 0.875)


def test_tween_values():
    t = NumberTween(start=0.0, end=100.0, started_at=10.0, duration=0.5)
    assert t.value_at(10.0) == 0.0
    assert math.isclose(t.value_at(10.25), 87.5)
    assert t.value_at(10.5) == 100.0
    assert t.value_at(99.0) == 100.0
    assert not t.done(10.25)
    assert t.done(10.5)


def test_retarget_continues_from_current_value():
    t = NumberTween(start=0.0, end=100.0, started_at=0.0, duration=0.5)
    t2 = t.retarget(50.0, now=0.25)
    assert math.isclose(t2.start, 87.5)
    assert t2.end == 50.0
    assert t2.started_at == 0.25
    assert t2.value_at(0.75) == 50.0


def test_cancel_freezes_value():
    t = NumberTween(start=0.0, end=100.0, started_at=0.0, duration=0.5).cancel(0.25)
    assert t.done(0.3)
    assert math.isclose(t.value_at(1.0), 87.5)


def test_frames_end_on_target():
    frames = list(NumberTween(start=10.0, end=20.0, duration=0.5).frames(fps=10))
    assert len(frames) == 5
    assert frames[-1] == 20.0
    assert frames == sorted(frames)
