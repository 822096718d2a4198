"""Shared type aliases and errors for the card engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Vec3 = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    now: float
    dt: float
    random: _random.Random


class ConfigError(ValueError):
    """Raised when a keyframe edit is structurally invalid."""


if TYPE_CHECKING:
    from cardframe.state import EngineState

System = Callable[["EngineState", FrameContext], None]
