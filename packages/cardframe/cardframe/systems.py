"""System factories run once per frame by the Engine."""
from __future__ import annotations

from typing import Any, Callable

from cardframe.driver import advance_animation
from cardframe.events import EventQueue
from cardframe.hover import update_hover, update_lift
from cardframe.state import EngineState
from cardframe.types import FrameContext, System


def make_event_system(
    queue: EventQueue,
    on_event: Callable[[EngineState, FrameContext, Any, bool], None] | None = None,
) -> System:
    def event_system(state: EngineState, ctx: FrameContext) -> None:
        for event, accepted in queue.drain(state, ctx):
            if on_event is not None:
                on_event(state, ctx, event, accepted)

    return event_system


def make_hover_system() -> System:
    def hover_system(state: EngineState, ctx: FrameContext) -> None:
        update_hover(state)

    return hover_system


def make_lift_system() -> System:
    def lift_system(state: EngineState, ctx: FrameContext) -> None:
        update_lift(state)

    return lift_system


def make_animation_system(
    on_complete: Callable[[EngineState, FrameContext, int], None] | None = None,
) -> System:
    """Return a system that advances the running transition.

    ``on_complete(state, ctx, keyframe_index)`` fires on the frame a
    transition lands.
    """

    def animation_system(state: EngineState, ctx: FrameContext) -> None:
        if advance_animation(state, ctx.now) and on_complete is not None:
            on_complete(state, ctx, state.animation.current)

    return animation_system
