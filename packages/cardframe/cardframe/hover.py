"""Pointer picking of card groups and the hover lift."""
from __future__ import annotations

import dataclasses
import logging
import math
from typing import Sequence

from cardframe.driver import request_transition
from cardframe.easing import lerp
from cardframe.interpolate import RenderCard
from cardframe.keyframes import CameraPose, LayoutKind
from cardframe.state import EngineState
from cardframe.vec import distance_xz

logger = logging.getLogger(__name__)


def unproject(
    pointer: tuple[float, float],
    viewport: tuple[float, float],
    camera: CameraPose,
) -> tuple[float, float]:
    """Approximate world (x, z) under a screen point.

    Undoes the camera transform on the screen plane: inverse zoom, then the
    inverse rotations about Z, Y and X in that order. Height is discarded.
    """
    wx = (pointer[0] - viewport[0] / 2) / camera.zoom
    wy = (pointer[1] - viewport[1] / 2) / camera.zoom
    wz = 0.0

    a = -math.radians(camera.rot_z)
    wx, wy = wx * math.cos(a) - wy * math.sin(a), wx * math.sin(a) + wy * math.cos(a)

    a = -math.radians(camera.rot_y)
    wx, wz = wx * math.cos(a) + wz * math.sin(a), -wx * math.sin(a) + wz * math.cos(a)

    a = -math.radians(camera.rot_x)
    wy, wz = wy * math.cos(a) - wz * math.sin(a), wy * math.sin(a) + wz * math.cos(a)

    return wx, wz


def pick_group(
    cards: Sequence[RenderCard],
    point: tuple[float, float],
    threshold: float,
    min_alive: float = 0.0,
) -> int | None:
    """Group of the card nearest ``point`` in the XZ plane, if within ``threshold``.

    Cards without a group, or fainter than ``min_alive``, are skipped.
    """
    best_group = None
    best_dist = math.inf
    for card in cards:
        if card.group_index is None or card.alive < min_alive:
            continue
        d = distance_xz(point[0], point[1], card.position)
        if d < best_dist:
            best_group, best_dist = card.group_index, d
    return best_group if best_dist < threshold else None


def update_hover(state: EngineState) -> None:
    if not state.hover_enabled or state.pointer is None:
        state.hovered_group = None
        return
    point = unproject(state.pointer, state.viewport, state.camera)
    settings = state.settings
    state.hovered_group = pick_group(
        state.cards, point, settings.hover_threshold, settings.visibility_threshold,
    )


def update_lift(state: EngineState) -> None:
    """Ease the lift offset one frame toward its target."""
    settings = state.settings
    if state.hover_enabled:
        target = settings.lift_height if state.hovered_group is not None else 0.0
        state.lift_offset = lerp(state.lift_offset, target, settings.lift_engage_rate)
    else:
        state.lift_offset = lerp(state.lift_offset, 0.0, settings.lift_release_rate)


def lift_for(state: EngineState, card: RenderCard) -> float:
    """Vertical offset for ``card``: the hovered group, or the selected group
    while a transition leaves the grouped keyframe."""
    if card.group_index is None or not state.on_grouped_keyframe:
        return 0.0
    if state.hovered_group is not None and card.group_index == state.hovered_group:
        return state.lift_offset
    if state.animating and card.group_index == state.selected_group:
        return state.lift_offset
    return 0.0


def apply_lift(state: EngineState) -> list[RenderCard]:
    lifted = []
    for card in state.cards:
        dy = lift_for(state, card)
        if dy:
            x, y, z = card.position
            card = dataclasses.replace(card, position=(x, y + dy, z))
        lifted.append(card)
    return lifted


def select_hovered(state: EngineState, now: float) -> bool:
    """Make the hovered group the wheel source and head for the wheel.

    Returns True when a transition started.
    """
    if not state.hover_enabled or state.hovered_group is None:
        return False
    state.selected_group = state.hovered_group
    logger.debug("Selected group %d for the wheel", state.selected_group)
    target = state.store.find_layout(LayoutKind.WHEEL, state.animation.current)
    if target is None:
        return False
    return request_transition(state, target, now)
