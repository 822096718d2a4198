"""Tests for easing curves and scalar helpers."""

import math

from cardframe.easing import clamp, ease_in_out_cubic, ease_out_quad_fade, lerp


class TestCubicInOut:
    """Test the cubic in-out curve."""

    def test_at_zero(self):
        """Cubic in-out should return exactly 0 at t=0."""
        assert ease_in_out_cubic(0.0) == 0.0

    def test_at_quarter(self):
        """First half is 4t^3: 0.0625 at t=0.25."""
        assert ease_in_out_cubic(0.25) == 0.0625

    def test_at_half(self):
        """Cubic in-out passes through 0.5 at t=0.5."""
        assert ease_in_out_cubic(0.5) == 0.5

    def test_at_three_quarters(self):
        """Second half is 1 - (2 - 2t)^3 / 2: 0.9375 at t=0.75."""
        assert ease_in_out_cubic(0.75) == 0.9375

    def test_at_one(self):
        """Cubic in-out should return exactly 1 at t=1."""
        assert ease_in_out_cubic(1.0) == 1.0

    def test_monotonic(self):
        """Curve never decreases over [0, 1]."""
        samples = [ease_in_out_cubic(i / 100) for i in range(101)]
        assert all(a <= b for a, b in zip(samples, samples[1:]))


class TestQuadFade:
    def test_endpoints(self):
        assert ease_out_quad_fade(0.0) == 1.0
        assert ease_out_quad_fade(1.0) == 0.0

    def test_half(self):
        assert ease_out_quad_fade(0.5) == 0.25


class TestLerp:
    def test_endpoints_exact(self):
        """lerp returns its endpoints exactly, even for awkward floats."""
        a, b = 0.1, -3.7
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b

    def test_midpoint(self):
        assert lerp(2.0, 4.0, 0.5) == 3.0


class TestClamp:
    def test_inside(self):
        assert clamp(0.4) == 0.4

    def test_below(self):
        assert clamp(-2.0) == 0.0

    def test_above(self):
        assert clamp(7.0) == 1.0

    def test_custom_bounds(self):
        assert clamp(5.0, 0.0, 3.0) == 3.0

    def test_nan_becomes_low(self):
        assert clamp(math.nan) == 0.0
