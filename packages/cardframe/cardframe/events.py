"""Input events and the queue that routes them to handlers once per frame."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from cardframe.driver import edit_keyframe, jump_to, request_transition
from cardframe.hover import select_hovered
from cardframe.state import EngineState
from cardframe.types import ConfigError, FrameContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvanceNext:
    pass


@dataclass(frozen=True)
class AdvancePrevious:
    pass


@dataclass(frozen=True)
class JumpTo:
    index: int


@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


@dataclass(frozen=True)
class PointerClicked:
    pass


@dataclass(frozen=True)
class ViewportResized:
    width: float
    height: float


@dataclass(frozen=True)
class EditKeyframe:
    index: int
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SetTransitionDuration:
    from_index: int
    to_index: int
    ms: float


Handler = Callable[[Any, EngineState, FrameContext], bool]


class EventQueue:
    """Routes input events to typed handlers during the frame loop.

    Events are frozen dataclasses dispatched by type, one handler per type.
    A new queue comes with the standard handlers installed; ``handle``
    replaces them.
    """

    def __init__(self, install_defaults: bool = True) -> None:
        self._handlers: dict[type[Any], Handler] = {}
        self._pending: deque[Any] = deque()
        if install_defaults:
            for event_type, handler in DEFAULT_HANDLERS.items():
                self.handle(event_type, handler)

    def handle(self, event_type: type[Any], handler: Handler) -> None:
        """Register ``handler(event, state, ctx) -> bool`` for ``event_type``.

        Return True to accept, False to reject. Later calls overwrite.
        """
        self._handlers[event_type] = handler

    def enqueue(self, event: Any) -> None:
        """Add an event. Safe to call between frames."""
        self._pending.append(event)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, state: EngineState, ctx: FrameContext) -> list[tuple[Any, bool]]:
        """Process all pending events in order. Returns ``[(event, accepted), ...]``.

        Raises ``TypeError`` if no handler is registered for an event's type.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            event = self._pending.popleft()
            event_type = type(event)
            handler = self._handlers.get(event_type)
            if handler is None:
                raise TypeError(f"No handler registered for {event_type.__qualname__}")
            results.append((event, handler(event, state, ctx)))
        return results


def _on_advance_next(event: AdvanceNext, state: EngineState, ctx: FrameContext) -> bool:
    target = state.store.next_index(state.animation.current)
    return request_transition(state, target, ctx.now)


def _on_advance_previous(event: AdvancePrevious, state: EngineState, ctx: FrameContext) -> bool:
    target = state.store.previous_index(state.animation.current)
    return request_transition(state, target, ctx.now)


def _on_jump(event: JumpTo, state: EngineState, ctx: FrameContext) -> bool:
    try:
        jump_to(state, event.index)
    except IndexError as exc:
        logger.warning("Rejected jump: %s", exc)
        return False
    return True


def _on_pointer_moved(event: PointerMoved, state: EngineState, ctx: FrameContext) -> bool:
    state.pointer = (float(event.x), float(event.y))
    return True


def _on_pointer_clicked(event: PointerClicked, state: EngineState, ctx: FrameContext) -> bool:
    return select_hovered(state, ctx.now)


def _on_viewport_resized(event: ViewportResized, state: EngineState, ctx: FrameContext) -> bool:
    state.viewport = (max(float(event.width), 1.0), max(float(event.height), 1.0))
    return True


def _on_edit(event: EditKeyframe, state: EngineState, ctx: FrameContext) -> bool:
    try:
        edit_keyframe(state, event.index, **event.changes)
    except (ConfigError, IndexError) as exc:
        logger.warning("Rejected edit of keyframe %s: %s", event.index, exc)
        return False
    return True


def _on_set_duration(event: SetTransitionDuration, state: EngineState, ctx: FrameContext) -> bool:
    try:
        state.store.set_duration(event.from_index, event.to_index, event.ms)
    except IndexError as exc:
        logger.warning("Rejected duration override: %s", exc)
        return False
    return True


DEFAULT_HANDLERS: dict[type[Any], Handler] = {
    AdvanceNext: _on_advance_next,
    AdvancePrevious: _on_advance_previous,
    JumpTo: _on_jump,
    PointerMoved: _on_pointer_moved,
    PointerClicked: _on_pointer_clicked,
    ViewportResized: _on_viewport_resized,
    EditKeyframe: _on_edit,
    SetTransitionDuration: _on_set_duration,
}
