"""Tests for layout generation."""
from __future__ import annotations

import math
import random

import pytest

from cardframe.color import WHITE, parse_color
from cardframe.config import EngineConfig
from cardframe.keyframes import KeyframeConfig, LayoutKind, default_keyframes
from cardframe.layout import generate, group_sizes, round_half_up

RED = "#ff0000"
GREEN = "#00ff00"


def _grouped(count: int, groups, spacing: float = 1.0, gap: float | None = 2.0) -> KeyframeConfig:  # type: ignore[no-untyped-def]
    return KeyframeConfig(
        layout=LayoutKind.GROUPED_STACK,
        card_count=count,
        card_height=10.0,
        card_spacing=spacing,
        groups=groups,
        group_spacing=gap,
    )


class TestCommon:
    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_length_matches_count(self, index: int) -> None:
        kf = default_keyframes()[index]
        cards = generate(kf, selected_group=2, rng=random.Random(0))
        assert len(cards) == kf.card_count

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_sizes_non_negative(self, index: int) -> None:
        cards = generate(default_keyframes()[index], selected_group=2, rng=random.Random(0))
        assert all(s >= 0 for card in cards for s in card.size)

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_bottom_on_floor(self, index: int) -> None:
        cards = generate(default_keyframes()[index], selected_group=2, rng=random.Random(0))
        for card in cards:
            assert card.position[1] == -card.size[1] / 2

    @pytest.mark.parametrize("layout", list(LayoutKind))
    def test_zero_count_is_empty(self, layout: LayoutKind) -> None:
        kf = KeyframeConfig(layout=layout, card_count=0, groups=((100, RED),))
        assert generate(kf, selected_group=0) == []


class TestRandomStack:
    def test_spacing_along_z(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.RANDOM_STACK, card_count=4, card_spacing=1.0)
        cards = generate(kf, 0, random.Random(0))
        assert [c.position[2] for c in cards] == [-2.0, -1.0, 0.0, 1.0]
        assert all(c.position[0] == 0.0 for c in cards)

    def test_heights_in_range(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.RANDOM_STACK, card_count=40, card_height=30.0)
        for card in generate(kf, 0, random.Random(0)):
            assert 15.0 * 0.8 <= card.size[1] <= 15.0 * 1.4

    def test_cache_stable(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.RANDOM_STACK, card_count=8)
        first = generate(kf, 0, random.Random(1))
        second = generate(kf, 0, random.Random(99))
        assert [c.size for c in first] == [c.size for c in second]

    def test_count_change_invalidates_cache(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.RANDOM_STACK, card_count=8)
        rng = random.Random(1)
        first = [c.size[1] for c in generate(kf, 0, rng)]
        kf.edit(card_count=9)
        second = [c.size[1] for c in generate(kf, 0, rng)]
        assert len(second) == 9
        assert second[:8] != first

    def test_no_groups(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.RANDOM_STACK, card_count=3)
        cards = generate(kf, 0, random.Random(0))
        assert all(c.group_index is None and c.wheel_slot is None for c in cards)
        assert all(c.stroke == WHITE for c in cards)


class TestGroupedStack:
    def test_round_half_up(self) -> None:
        assert [round_half_up(x) for x in (0.5, 1.5, 2.5, 2.4)] == [1, 2, 3, 2]

    def test_group_sizes_default(self) -> None:
        assert group_sizes(default_keyframes()[1]) == [3, 5, 8, 10, 8, 5, 8, 5]

    def test_group_indices_in_range(self) -> None:
        kf = default_keyframes()[1]
        cards = generate(kf, 2)
        assert all(0 <= c.group_index < len(kf.groups) for c in cards)

    def test_positions_with_gaps(self) -> None:
        kf = _grouped(4, ((50, RED), (50, GREEN)))
        cards = generate(kf, 0)
        assert [c.position[2] for c in cards] == [-4.0, -3.0, 0.0, 1.0]

    def test_group_strokes(self) -> None:
        kf = _grouped(4, ((50, RED), (50, GREEN)))
        cards = generate(kf, 0)
        assert [c.stroke for c in cards] == [parse_color(RED)] * 2 + [parse_color(GREEN)] * 2

    def test_selected_group_gets_wheel_slots(self) -> None:
        kf = _grouped(10, ((30, RED), (50, GREEN), (20, RED)))
        cards = generate(kf, 1)
        assert [c.wheel_slot for c in cards if c.group_index == 1] == [0, 1, 2, 3, 4]
        assert all(c.wheel_slot is None for c in cards if c.group_index != 1)

    def test_leftover_cards_join_last_group(self) -> None:
        kf = _grouped(5, ((20, RED), (20, GREEN)))
        cards = generate(kf, 0)
        assert [c.group_index for c in cards] == [0, 1, 1, 1, 1]

    def test_oversubscribed_groups_truncate(self) -> None:
        kf = _grouped(3, ((50, RED), (50, GREEN)))
        cards = generate(kf, 1)
        assert [c.group_index for c in cards] == [0, 0, 1]
        assert cards[2].wheel_slot == 0

    def test_default_gap_when_unset(self) -> None:
        kf = _grouped(2, ((50, RED), (50, GREEN)), gap=None)
        cards = generate(kf, 0, settings=EngineConfig(default_group_spacing=4.0))
        assert cards[1].position[2] - cards[0].position[2] == 5.0

    def test_selected_group_missing(self) -> None:
        kf = _grouped(4, ((50, RED), (50, GREEN)))
        assert all(c.wheel_slot is None for c in generate(kf, 7))


class TestWheel:
    def test_four_card_angles(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.WHEEL, card_count=4)
        cards = generate(kf, 2)
        for i, card in enumerate(cards):
            angle = math.pi / 4 * (2 * i + 1)
            assert card.position[0] == pytest.approx(math.cos(angle) * 40.0)
            assert card.position[2] == pytest.approx(math.sin(angle) * 40.0)
            assert card.rotation[1] == pytest.approx(-angle + math.pi)

    def test_first_card_at_45_degrees(self) -> None:
        card = generate(KeyframeConfig(layout=LayoutKind.WHEEL, card_count=4), 0)[0]
        assert math.degrees(math.atan2(card.position[2], card.position[0])) == pytest.approx(45.0)

    def test_tagged_with_selected_group_and_slot(self) -> None:
        cards = generate(KeyframeConfig(layout=LayoutKind.WHEEL, card_count=6), 3)
        assert [c.group_index for c in cards] == [3] * 6
        assert [c.wheel_slot for c in cards] == list(range(6))

    def test_radius_from_settings(self) -> None:
        kf = KeyframeConfig(layout=LayoutKind.WHEEL, card_count=3)
        card = generate(kf, 0, settings=EngineConfig(wheel_radius=10.0))[0]
        assert math.hypot(card.position[0], card.position[2]) == pytest.approx(10.0)
