"""3D vector helpers operating on plain float triples."""
from __future__ import annotations

import math
from typing import Iterable

from cardframe.easing import lerp
from cardframe.types import Vec3

ORIGIN: Vec3 = (0.0, 0.0, 0.0)


def lerp3(a: Vec3, b: Vec3, t: float) -> Vec3:
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t), lerp(a[2], b[2], t))


def centroid(points: Iterable[Vec3]) -> Vec3 | None:
    """Mean of ``points``, or None when there are none."""
    sx = sy = sz = 0.0
    n = 0
    for x, y, z in points:
        sx += x
        sy += y
        sz += z
        n += 1
    if n == 0:
        return None
    return (sx / n, sy / n, sz / n)


def distance_xz(x: float, z: float, point: Vec3) -> float:
    """Planar distance from (x, z) to ``point``, ignoring height."""
    return math.hypot(point[0] - x, point[2] - z)
