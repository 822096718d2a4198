"""Layout generation: keyframe configuration -> card placements."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass

from cardframe.color import WHITE, Color
from cardframe.config import EngineConfig
from cardframe.keyframes import RANDOM_BASE_HEIGHT, KeyframeConfig, LayoutKind
from cardframe.types import Vec3

_DEFAULT_CONFIG = EngineConfig()


@dataclass(frozen=True)
class CardPlacement:
    """One card of a generated layout. Rotation is in radians.

    ``wheel_slot`` is set only for cards that take part in the wheel: the
    selected group of a grouped stack, and every card of a wheel.
    """

    position: Vec3
    rotation: Vec3
    size: Vec3
    stroke: Color = WHITE
    group_index: int | None = None
    wheel_slot: int | None = None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def group_sizes(config: KeyframeConfig) -> list[int]:
    """Card count of each group. The sum need not equal ``card_count``."""
    return [round_half_up(g.percentage / 100 * config.card_count) for g in config.groups]


def _bottom_aligned(x: float, z: float, w: float, h: float, d: float) -> tuple[Vec3, Vec3]:
    return (x, -h / 2, z), (w, h, d)


def _random_stack(config: KeyframeConfig, rng: random.Random | None) -> list[CardPlacement]:
    count = config.card_count
    spacing = config.card_spacing
    base_height = config.card_height * RANDOM_BASE_HEIGHT
    scales = config.height_scales(rng)
    start_z = -(count * spacing) / 2

    placements = []
    for i in range(count):
        position, size = _bottom_aligned(
            0.0, start_z + i * spacing,
            config.card_width, base_height * scales[i], config.card_thickness,
        )
        placements.append(CardPlacement(position, (0.0, 0.0, 0.0), size))
    return placements


def _grouped_stack(
    config: KeyframeConfig, selected_group: int, settings: EngineConfig,
) -> list[CardPlacement]:
    count = config.card_count
    if not config.groups:
        return []
    spacing = config.card_spacing
    gap = config.group_spacing
    if gap is None:
        gap = settings.default_group_spacing

    sizes = group_sizes(config)
    # Cards the rounded sizes do not cover join the last group.
    covered = sum(sizes)
    if covered < count:
        sizes[-1] += count - covered

    z = -(count * spacing + gap * len(sizes)) / 2
    placements: list[CardPlacement] = []
    next_slot = 0
    for g, size in enumerate(sizes):
        stroke = config.groups[g].stroke
        for _ in range(size):
            if len(placements) >= count:
                break
            slot = None
            if g == selected_group:
                slot = next_slot
                next_slot += 1
            position, dims = _bottom_aligned(
                0.0, z, config.card_width, config.card_height, config.card_thickness,
            )
            placements.append(
                CardPlacement(position, (0.0, 0.0, 0.0), dims, stroke, g, slot)
            )
            z += spacing
        z += gap
    return placements


def _wheel(
    config: KeyframeConfig, selected_group: int, settings: EngineConfig,
) -> list[CardPlacement]:
    count = config.card_count
    radius = settings.wheel_radius
    placements = []
    for i in range(count):
        angle = (i + 0.5) / count * math.tau
        position, size = _bottom_aligned(
            math.cos(angle) * radius, math.sin(angle) * radius,
            config.card_width, config.card_height, config.card_thickness,
        )
        placements.append(
            CardPlacement(position, (0.0, -angle + math.pi, 0.0), size, WHITE, selected_group, i)
        )
    return placements


def generate(
    config: KeyframeConfig,
    selected_group: int,
    rng: random.Random | None = None,
    settings: EngineConfig | None = None,
) -> list[CardPlacement]:
    """Place ``config.card_count`` cards for the keyframe's layout.

    Pure apart from the random stack, whose per-card heights are drawn from
    ``rng`` the first time a given card count is laid out and reused after.
    """
    if config.card_count <= 0:
        return []
    if settings is None:
        settings = _DEFAULT_CONFIG
    if config.layout is LayoutKind.RANDOM_STACK:
        return _random_stack(config, rng)
    if config.layout is LayoutKind.GROUPED_STACK:
        return _grouped_stack(config, selected_group, settings)
    return _wheel(config, selected_group, settings)
