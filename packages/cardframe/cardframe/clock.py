"""Clock and FrameContext for the wall-clock driven frame loop."""

import random

from cardframe.types import FrameContext


class Clock:
    def __init__(self, start: float = 0.0) -> None:
        self._frame_number = 0
        self._now = start
        self._dt = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def now(self) -> float:
        return self._now

    @property
    def dt(self) -> float:
        return self._dt

    def advance(self, now: float) -> int:
        """Move to a new frame at ``now`` milliseconds.

        Time never runs backwards; an earlier timestamp is treated as a
        zero-length frame.
        """
        now = max(now, self._now)
        self._dt = now - self._now
        self._now = now
        self._frame_number += 1
        return self._frame_number

    def context(self, rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            now=self._now,
            dt=self._dt,
            random=rng,
        )
