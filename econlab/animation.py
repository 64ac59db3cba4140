# MIT License
"""Eased transitions of a displayed number.

A :class:`NumberTween` interpolates from a start value to an end value over
a fixed duration using an easing function.  It is driven by explicit
timestamps, so callers decide the frame clock.  A new target arriving
mid-flight supersedes the running tween via :meth:`NumberTween.retarget`,
which continues from the value currently displayed.
"""
from __future__ import annotations

from typing import Callable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field


def ease_out_cubic(p: float) -> float:
    return 1 - (1 - p) ** 3


class NumberTween(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    start: float
    end: float
    started_at: float = 0.0
    duration: float = Field(0.5, gt=0.0, description="Seconds")
    easing: Callable[[float], float] = ease_out_cubic
    cancelled_at: Optional[float] = None

    def progress(self, now: float) -> float:
        if self.cancelled_at is not None:
            now = min(now, self.cancelled_at)
        return min(max((now - self.started_at) / self.duration, 0.0), 1.0)

    def value_at(self, now: float) -> float:
        """Displayed value at ``now``; exactly ``end`` once finished.

        A cancelled tween freezes at the value it had when cancelled.
        """
        p = self.progress(now)
        if p >= 1.0:
            return self.end
        return self.start + (self.end - self.start) * self.easing(p)

    def done(self, now: float) -> bool:
        return self.cancelled_at is not None or self.progress(now) >= 1.0

    def cancel(self, now: float) -> "NumberTween":
        return self.model_copy(update={"cancelled_at": now})

    def retarget(self, end: float, now: float) -> "NumberTween":
        """Supersede this tween with one heading to ``end`` from the current value."""
        return NumberTween(
            start=self.value_at(now),
            end=end,
            started_at=now,
            duration=self.duration,
            easing=self.easing,
        )

    def frames(self, fps: int = 30) -> Iterator[float]:
        """Values sampled at ``fps`` from start to finish, ending on ``end``."""
        n = max(1, int(self.duration * fps))
        for k in range(1, n + 1):
            yield self.value_at(self.started_at + self.duration * k / n)
