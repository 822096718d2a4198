"""World -> screen projection matching the engine's camera model.

Screen y grows downward, as does world y (negative y is up). A point is
rotated by the card's own rotation, moved to the card's position, rotated by
the camera about X, Y then Z, scaled by zoom, and finally projected with a
perspective camera looking down -z from in front of the screen.
"""
from __future__ import annotations

import math

from cardframe import CameraPose
from cardframe.types import Vec3

from ui.constants import FOV_Y_DEG, NEAR_PLANE


def rotate_x(p: Vec3, a: float) -> Vec3:
    x, y, z = p
    c, s = math.cos(a), math.sin(a)
    return x, y * c - z * s, y * s + z * c


def rotate_y(p: Vec3, a: float) -> Vec3:
    x, y, z = p
    c, s = math.cos(a), math.sin(a)
    return x * c + z * s, y, -x * s + z * c


def rotate_z(p: Vec3, a: float) -> Vec3:
    x, y, z = p
    c, s = math.cos(a), math.sin(a)
    return x * c - y * s, x * s + y * c, z


def eye_distance(view_h: float) -> float:
    return (view_h / 2) / math.tan(math.radians(FOV_Y_DEG) / 2)


def to_view(p: Vec3, camera: CameraPose) -> Vec3:
    p = rotate_x(p, math.radians(camera.rot_x))
    p = rotate_y(p, math.radians(camera.rot_y))
    p = rotate_z(p, math.radians(camera.rot_z))
    return p[0] * camera.zoom, p[1] * camera.zoom, p[2] * camera.zoom


def project(
    p: Vec3, camera: CameraPose, view_w: float, view_h: float,
) -> tuple[float, float] | None:
    """Screen position of world point ``p``, or None behind the near plane."""
    x, y, z = to_view(p, camera)
    eye = eye_distance(view_h)
    depth = eye - z
    if depth < NEAR_PLANE:
        return None
    f = eye / depth
    return view_w / 2 + x * f, view_h / 2 + y * f
