"""Easing curves and scalar blending helpers."""
from __future__ import annotations


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_out_quad_fade(s: float) -> float:
    """Remaining opacity for a collapse at local progress ``s``: (1 - s)^2."""
    return (1 - s) ** 2


ease = ease_in_out_cubic


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    # NaN compares false everywhere, so it falls through to ``low``.
    if not value >= low:
        return low
    if value > high:
        return high
    return value


def lerp(a: float, b: float, t: float) -> float:
    """Blend ``a`` toward ``b``. Returns ``a`` at t=0 and ``b`` at t=1 exactly."""
    return a * (1 - t) + b * t
