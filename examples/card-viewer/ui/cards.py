"""Card box renderer: black-filled boxes with a stroked outline."""
from __future__ import annotations

import pygame

from cardframe import CameraPose, RenderCard, is_visible
from cardframe.types import Vec3

from ui.constants import BG_COLOR
from ui.projection import project, rotate_x, rotate_y, rotate_z, to_view

# Corner sign pattern and the 12 box edges between corner indices
_CORNERS = [
    (sx, sy, sz) for sx in (-1, 1) for sy in (-1, 1) for sz in (-1, 1)
]
_EDGES = [
    (a, b) for a in range(8) for b in range(a + 1, 8)
    if sum(x != y for x, y in zip(_CORNERS[a], _CORNERS[b])) == 1
]


def card_corners(card: RenderCard) -> list[Vec3]:
    """World-space corners of the card's box."""
    w, h, d = card.size
    rx, ry, rz = card.rotation
    px, py, pz = card.position
    corners = []
    for sx, sy, sz in _CORNERS:
        p = (sx * w / 2, sy * h / 2, sz * d / 2)
        p = rotate_x(p, rx)
        p = rotate_y(p, ry)
        p = rotate_z(p, rz)
        corners.append((p[0] + px, p[1] + py, p[2] + pz))
    return corners


def faded(stroke: tuple[float, float, float], alive: float) -> tuple[int, int, int]:
    """Stroke alpha-blended over the black background."""
    return tuple(max(0, min(255, round(c * alive))) for c in stroke)  # type: ignore[return-value]


def convex_hull(points: list[tuple[float, float]]) -> list[tuple[float, float]]:
    """Monotone chain hull, counter-clockwise."""
    pts = sorted(set(points))
    if len(pts) < 3:
        return pts

    def cross(o, a, b) -> float:  # type: ignore[no-untyped-def]
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

    lower: list[tuple[float, float]] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: list[tuple[float, float]] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]


def _depth(card: RenderCard, camera: CameraPose) -> float:
    return to_view(card.position, camera)[2]


def draw_cards(
    surface: pygame.Surface,
    cards: tuple[RenderCard, ...],
    camera: CameraPose,
    view_w: int,
    view_h: int,
) -> int:
    """Draw every visible card, farthest first. Returns the number drawn."""
    visible = [c for c in cards if is_visible(c)]
    visible.sort(key=lambda c: _depth(c, camera))

    for card in visible:
        points = [project(p, camera, view_w, view_h) for p in card_corners(card)]
        on_screen = [p for p in points if p is not None]
        hull = convex_hull(on_screen)
        if len(hull) >= 3:
            pygame.draw.polygon(surface, BG_COLOR, hull)

        color = faded(card.stroke, card.alive)
        for a, b in _EDGES:
            pa, pb = points[a], points[b]
            if pa is None or pb is None:
                continue
            pygame.draw.aaline(surface, color, pa, pb)
    return len(visible)
