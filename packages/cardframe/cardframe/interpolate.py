"""Interpolation between two keyframes at a given progress.

Two choreographies exist. The generic one pairs cards by index: cards present
at both ends move, surplus source cards shrink away and surplus destination
cards grow in with a cascading delay. The grouped-stack to wheel transition
pairs cards by wheel slot instead: the selected group's cards fly to their
slots, the remaining slots are filled by duplicates that spawn from the
group's centroid, and every other card collapses on a faster timeline.

``progress`` is the transition progress after the driver's easing, in [0, 1].
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from cardframe.color import WHITE, Color, delayed_blend, lerp_color
from cardframe.config import EngineConfig
from cardframe.easing import clamp, ease, ease_out_quad_fade, lerp
from cardframe.keyframes import CameraPose, KeyframeConfig, LayoutKind
from cardframe.layout import CardPlacement, generate
from cardframe.types import Vec3
from cardframe.vec import ORIGIN, centroid, lerp3

_DEFAULT_CONFIG = EngineConfig()


@dataclass(frozen=True)
class RenderCard:
    """A drawable card. ``group_index`` None means not hoverable."""

    position: Vec3
    rotation: Vec3
    size: Vec3
    stroke: Color
    group_index: int | None
    alive: float


def snapshot(placements: Sequence[CardPlacement]) -> list[RenderCard]:
    """Freeze a layout into a fully alive render state."""
    return [
        RenderCard(p.position, p.rotation, p.size, p.stroke, p.group_index, 1.0)
        for p in placements
    ]


def interpolate_camera(a: CameraPose, b: CameraPose, t: float) -> CameraPose:
    return CameraPose(
        zoom=lerp(a.zoom, b.zoom, t),
        rot_x=lerp(a.rot_x, b.rot_x, t),
        rot_y=lerp(a.rot_y, b.rot_y, t),
        rot_z=lerp(a.rot_z, b.rot_z, t),
    )


def is_wheel_transition(from_config: KeyframeConfig, to_config: KeyframeConfig) -> bool:
    return (
        from_config.layout is LayoutKind.GROUPED_STACK
        and to_config.layout is LayoutKind.WHEEL
    )


def group_anchor(placements: Sequence[CardPlacement], group: int) -> Vec3 | None:
    """Centroid of the cards belonging to ``group``."""
    return centroid(p.position for p in placements if p.group_index == group)


def interpolate(
    from_config: KeyframeConfig,
    to_config: KeyframeConfig,
    progress: float,
    selected_group: int,
    rng: random.Random | None = None,
    settings: EngineConfig | None = None,
) -> list[RenderCard]:
    """Render state for the transition ``from_config -> to_config``.

    Generic transitions return one card per index up to the larger card
    count. The grouped-stack to wheel transition returns the wheel slots
    first (entry ``i`` is wheel slot ``i``, all ``to_config.card_count`` of
    them), followed by the collapsing source cards in source order.
    """
    if settings is None:
        settings = _DEFAULT_CONFIG
    progress = clamp(progress)
    source = generate(from_config, selected_group, rng, settings)
    dest = generate(to_config, selected_group, rng, settings)
    if is_wheel_transition(from_config, to_config):
        origin_stroke = from_config.group_stroke(selected_group) or WHITE
        return _grouped_to_wheel(source, dest, progress, selected_group, origin_stroke, settings)

    anchor = None
    if from_config.layout is LayoutKind.GROUPED_STACK:
        anchor = group_anchor(source, selected_group)
    return _generic(source, dest, progress, selected_group, anchor, settings)


def _generic(
    source: Sequence[CardPlacement],
    dest: Sequence[CardPlacement],
    progress: float,
    selected_group: int,
    anchor: Vec3 | None,
    settings: EngineConfig,
) -> list[RenderCard]:
    blend = delayed_blend(progress, settings.color_hold)
    cards = []
    for i in range(max(len(source), len(dest))):
        if i >= len(source):
            dst = dest[i]
            origin = anchor if dst.group_index == selected_group else None
            cards.append(_spawn(dst, i - len(source), progress, origin, settings))
        elif i >= len(dest):
            cards.append(_despawn(source[i], progress))
        else:
            src, dst = source[i], dest[i]
            cards.append(RenderCard(
                position=lerp3(src.position, dst.position, progress),
                rotation=lerp3(src.rotation, dst.rotation, progress),
                size=lerp3(src.size, dst.size, progress),
                stroke=lerp_color(src.stroke, dst.stroke, blend),
                group_index=dst.group_index,
                alive=1.0,
            ))
    return cards


def _spawn(
    dst: CardPlacement,
    order: int,
    progress: float,
    origin: Vec3 | None,
    settings: EngineConfig,
) -> RenderCard:
    duration = settings.spawn_duration
    # Capped so the last card still finishes by progress 1.
    delay = min(order * settings.spawn_stagger, 1.0 - duration)
    local = ease(clamp((progress - delay) / duration))
    start = dst.position if origin is None else origin
    return RenderCard(
        position=lerp3(start, dst.position, local),
        rotation=lerp3(ORIGIN, dst.rotation, local),
        size=lerp3(ORIGIN, dst.size, local),
        stroke=dst.stroke,
        group_index=dst.group_index,
        alive=local,
    )


def _despawn(src: CardPlacement, progress: float) -> RenderCard:
    return RenderCard(
        position=src.position,
        rotation=src.rotation,
        size=lerp3(src.size, ORIGIN, progress),
        stroke=src.stroke,
        group_index=src.group_index,
        alive=1.0 - progress,
    )


def _grouped_to_wheel(
    source: Sequence[CardPlacement],
    dest: Sequence[CardPlacement],
    progress: float,
    selected_group: int,
    origin_stroke: Color,
    settings: EngineConfig,
) -> list[RenderCard]:
    blend = delayed_blend(progress, settings.color_hold)
    anchor = group_anchor(source, selected_group) or ORIGIN

    # wheel slot -> index of the source card that flies there
    mapped: dict[int, int] = {}
    for index, card in enumerate(source):
        slot = card.wheel_slot
        if card.group_index == selected_group and slot is not None and slot < len(dest):
            mapped[slot] = index

    duplicates = [slot for slot in range(len(dest)) if slot not in mapped]
    spawn_order = {slot: order for order, slot in enumerate(duplicates)}
    delay_per_duplicate = settings.duplicate_window / max(1, len(duplicates))
    eased = ease(progress)

    cards = []
    for slot, dst in enumerate(dest):
        stroke_to = dst.stroke
        if slot in mapped:
            src = source[mapped[slot]]
            cards.append(RenderCard(
                position=lerp3(src.position, dst.position, eased),
                rotation=lerp3(src.rotation, dst.rotation, eased),
                size=lerp3(src.size, dst.size, eased),
                stroke=lerp_color(src.stroke, stroke_to, blend),
                group_index=dst.group_index,
                alive=1.0,
            ))
            continue
        delay = spawn_order[slot] * delay_per_duplicate
        local = ease(clamp((progress - delay) / settings.duplicate_duration))
        cards.append(RenderCard(
            position=lerp3(anchor, dst.position, local),
            rotation=lerp3(ORIGIN, dst.rotation, local),
            size=lerp3(ORIGIN, dst.size, local),
            stroke=lerp_color(origin_stroke, stroke_to, blend),
            group_index=dst.group_index,
            alive=local,
        ))

    flying = set(mapped.values())
    for index, card in enumerate(source):
        if index not in flying:
            cards.append(_collapse(card, progress, settings))
    return cards


def _collapse(card: CardPlacement, progress: float, settings: EngineConfig) -> RenderCard:
    s = clamp(progress * settings.collapse_speed)
    x, y, z = card.position
    # Shift up by half the lost height so the bottom edge stays on the floor.
    return RenderCard(
        position=(x, y + lerp(0.0, card.size[1] / 2, s), z),
        rotation=card.rotation,
        size=lerp3(card.size, ORIGIN, s),
        stroke=card.stroke,
        group_index=card.group_index,
        alive=ease_out_quad_fade(s),
    )
