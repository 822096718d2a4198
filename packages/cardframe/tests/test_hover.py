"""Tests for pointer unprojection, group picking and the hover lift."""
from __future__ import annotations

import random

import pytest

from cardframe.config import EngineConfig
from cardframe.hover import (
    apply_lift,
    lift_for,
    pick_group,
    select_hovered,
    unproject,
    update_hover,
    update_lift,
)
from cardframe.interpolate import RenderCard
from cardframe.keyframes import CameraPose, KeyframeConfig, KeyframeStore, LayoutKind
from cardframe.state import EngineState

VIEWPORT = (800.0, 600.0)
TOP_DOWN = CameraPose(zoom=1.0, rot_x=-90.0)


def _card(x: float, z: float, group: int | None, alive: float = 1.0) -> RenderCard:
    return RenderCard(
        (x, -5.0, z), (0.0, 0.0, 0.0), (20.0, 10.0, 0.1), (255.0, 255.0, 255.0), group, alive,
    )


def _store(with_wheel: bool = True) -> KeyframeStore:
    # cards at z = -4, -3 (group 0) and 0, 1 (group 1), seen from above
    grouped = KeyframeConfig(
        layout=LayoutKind.GROUPED_STACK,
        card_count=4,
        groups=((50, "#ff0000"), (50, "#0000ff")),
        group_spacing=2.0,
        camera=TOP_DOWN,
    )
    last = LayoutKind.WHEEL if with_wheel else LayoutKind.RANDOM_STACK
    return KeyframeStore([
        grouped,
        KeyframeConfig(layout=LayoutKind.RANDOM_STACK, card_count=4),
        KeyframeConfig(layout=last, card_count=6),
    ])


def _pointer_over(z: float) -> tuple[float, float]:
    return VIEWPORT[0] / 2, VIEWPORT[1] / 2 + z


@pytest.fixture
def state() -> EngineState:
    return EngineState(
        store=_store(),
        settings=EngineConfig(hover_threshold=0.6),
        rng=random.Random(0),
        viewport=VIEWPORT,
    )


class TestUnproject:
    def test_center_is_origin(self) -> None:
        x, z = unproject((400.0, 300.0), VIEWPORT, CameraPose())
        assert (x, z) == pytest.approx((0.0, 0.0))

    def test_zoom_scales(self) -> None:
        x, _ = unproject((450.0, 300.0), VIEWPORT, CameraPose(zoom=2.0))
        assert x == pytest.approx(25.0)

    def test_yaw_swaps_axes(self) -> None:
        x, z = unproject((450.0, 300.0), VIEWPORT, CameraPose(rot_y=90.0))
        assert x == pytest.approx(0.0, abs=1e-9)
        assert z == pytest.approx(50.0)

    def test_top_down_maps_screen_y_to_z(self) -> None:
        x, z = unproject(_pointer_over(-3.0), VIEWPORT, TOP_DOWN)
        assert x == pytest.approx(0.0, abs=1e-9)
        assert z == pytest.approx(-3.0)


class TestPickGroup:
    def test_nearest_wins(self) -> None:
        cards = [_card(0.0, 0.0, 0), _card(0.0, 10.0, 1)]
        assert pick_group(cards, (0.0, 7.0), threshold=40.0) == 1

    def test_outside_threshold(self) -> None:
        cards = [_card(0.0, 0.0, 0)]
        assert pick_group(cards, (50.0, 0.0), threshold=40.0) is None

    def test_ungrouped_cards_skipped(self) -> None:
        cards = [_card(0.0, 0.0, None), _card(0.0, 5.0, 3)]
        assert pick_group(cards, (0.0, 0.0), threshold=40.0) == 3

    def test_faint_cards_skipped(self) -> None:
        cards = [_card(0.0, 0.0, 0, alive=0.001), _card(0.0, 5.0, 1)]
        assert pick_group(cards, (0.0, 0.0), threshold=40.0, min_alive=0.01) == 1

    def test_empty(self) -> None:
        assert pick_group([], (0.0, 0.0), threshold=40.0) is None


class TestUpdateHover:
    def test_hovers_group_under_pointer(self, state: EngineState) -> None:
        state.pointer = _pointer_over(-3.0)
        update_hover(state)
        assert state.hovered_group == 0
        state.pointer = _pointer_over(1.0)
        update_hover(state)
        assert state.hovered_group == 1

    def test_gap_between_groups(self, state: EngineState) -> None:
        state.pointer = _pointer_over(-1.5)
        update_hover(state)
        assert state.hovered_group is None

    def test_no_pointer(self, state: EngineState) -> None:
        update_hover(state)
        assert state.hovered_group is None

    def test_disabled_off_grouped_keyframe(self, state: EngineState) -> None:
        state.show(1)
        state.pointer = _pointer_over(-3.0)
        update_hover(state)
        assert state.hovered_group is None

    def test_disabled_while_animating(self, state: EngineState) -> None:
        state.pointer = _pointer_over(-3.0)
        update_hover(state)
        state.animation.running = True
        update_hover(state)
        assert state.hovered_group is None


class TestLift:
    def test_engages_gradually(self, state: EngineState) -> None:
        state.hovered_group = 0
        update_lift(state)
        assert state.lift_offset == pytest.approx(-0.5)
        update_lift(state)
        assert state.lift_offset == pytest.approx(-0.975)

    def test_relaxes_without_hover(self, state: EngineState) -> None:
        state.lift_offset = -10.0
        update_lift(state)
        assert state.lift_offset == pytest.approx(-9.5)

    def test_releases_faster_when_disabled(self, state: EngineState) -> None:
        state.lift_offset = -10.0
        state.animation.running = True
        update_lift(state)
        assert state.lift_offset == pytest.approx(-8.0)

    def test_only_hovered_group_lifted(self, state: EngineState) -> None:
        state.hovered_group = 1
        state.lift_offset = -4.0
        lifted = apply_lift(state)
        assert [c.position[1] - o.position[1] for c, o in zip(lifted, state.cards)] == [
            0.0, 0.0, -4.0, -4.0,
        ]

    def test_selected_group_keeps_lift_while_leaving(self, state: EngineState) -> None:
        state.selected_group = 0
        state.lift_offset = -6.0
        state.animation.running = True
        assert lift_for(state, state.cards[0]) == -6.0
        assert lift_for(state, state.cards[3]) == 0.0

    def test_no_lift_off_grouped_keyframe(self, state: EngineState) -> None:
        state.show(2)
        state.lift_offset = -6.0
        assert all(lift_for(state, c) == 0.0 for c in state.cards)


class TestSelectHovered:
    def test_click_heads_for_wheel(self, state: EngineState) -> None:
        state.pointer = _pointer_over(-3.0)
        update_hover(state)
        assert select_hovered(state, 40.0)
        assert state.selected_group == 0
        assert state.animation.target == 2
        assert state.animation.start == 40.0

    def test_click_without_hover(self, state: EngineState) -> None:
        assert not select_hovered(state, 0.0)
        assert not state.animating
        assert state.selected_group == 2

    def test_no_wheel_keyframe(self) -> None:
        state = EngineState(
            store=_store(with_wheel=False),
            settings=EngineConfig(hover_threshold=0.6),
            viewport=VIEWPORT,
        )
        state.hovered_group = 1
        assert not select_hovered(state, 0.0)
        assert not state.animating
