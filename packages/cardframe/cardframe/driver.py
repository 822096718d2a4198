"""Animation driver: starts, advances and completes keyframe transitions."""
from __future__ import annotations

import logging
from typing import Any

from cardframe.easing import ease
from cardframe.interpolate import interpolate, interpolate_camera
from cardframe.state import EngineState

logger = logging.getLogger(__name__)


def request_transition(state: EngineState, target: int, now: float) -> bool:
    """Start animating from the current keyframe to ``target``.

    Returns False when nothing starts: the target is already shown, or a
    transition is in flight (re-entrant requests are ignored).
    """
    state.store.check_index(target)
    anim = state.animation
    if anim.running:
        logger.info(
            "Ignoring transition to %d while %d->%d is running",
            target, anim.current, anim.target,
        )
        return False
    if target == anim.current:
        return False
    anim.target = target
    anim.start = now
    anim.duration = state.store.duration_for(anim.current, target)
    anim.running = True
    logger.debug("Transition %d->%d started (%.0f ms)", anim.current, target, anim.duration)
    return True


def jump_to(state: EngineState, index: int) -> None:
    """Show keyframe ``index`` immediately, abandoning any transition."""
    state.store.check_index(index)
    if state.animating:
        logger.debug(
            "Jump to %d cancels transition %d->%d",
            index, state.animation.current, state.animation.target,
        )
    state.show(index)


def advance_animation(state: EngineState, now: float) -> bool:
    """Recompute the render state for ``now``. Returns True on completion.

    On completion the last interpolated render state is kept as-is, so the
    blended colors it ends on stay exactly what was drawn.
    """
    anim = state.animation
    if not anim.running:
        return False
    raw = anim.progress(now)
    eased = ease(raw)
    from_kf = state.store[anim.current]
    to_kf = state.store[anim.target]
    state.camera = interpolate_camera(from_kf.camera, to_kf.camera, eased)
    state.cards = interpolate(
        from_kf, to_kf, eased, state.selected_group, state.rng, state.settings,
    )
    if raw >= 1.0:
        logger.debug("Transition %d->%d complete", anim.current, anim.target)
        anim.running = False
        anim.current = anim.target
        return True
    return False


def edit_keyframe(state: EngineState, index: int, **changes: Any) -> None:
    """Apply a configuration edit, refreshing the display if it is showing.

    Mid-transition edits need no refresh; the next frame regenerates both
    endpoints anyway.
    """
    state.store.edit(index, **changes)
    if not state.animating and index == state.animation.current:
        state.show(index)
