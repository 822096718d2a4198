"""Engine - frame loop and standard system wiring."""

import os
import random
from typing import Callable

from cardframe.clock import Clock
from cardframe.config import EngineConfig
from cardframe.events import EventQueue
from cardframe.keyframes import KeyframeStore
from cardframe.state import EngineState
from cardframe.systems import (
    make_animation_system,
    make_event_system,
    make_hover_system,
    make_lift_system,
)
from cardframe.types import FrameContext, System

DEFAULT_FRAME_MS = 1000.0 / 60


class Engine:
    def __init__(
        self,
        store: KeyframeStore | None = None,
        settings: EngineConfig | None = None,
        seed: int | None = None,
    ) -> None:
        if settings is None:
            settings = EngineConfig()
        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)
        self._clock = Clock()
        self._state = EngineState(store=store, settings=settings, rng=self._rng)
        self._systems: list[System] = []

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self, now: float) -> None:
        """Run one frame at wall-clock time ``now`` (milliseconds)."""
        self._clock.advance(now)
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self._state, ctx)

    def run(self, frames: int, frame_ms: float = DEFAULT_FRAME_MS) -> None:
        """Run ``frames`` frames spaced ``frame_ms`` apart, without sleeping."""
        for _ in range(frames):
            self.step(self._clock.now + frame_ms)


def create_engine(
    store: KeyframeStore | None = None,
    settings: EngineConfig | None = None,
    seed: int | None = None,
    on_complete: Callable[[EngineState, FrameContext, int], None] | None = None,
) -> tuple[Engine, EventQueue]:
    """Engine with the standard systems in frame order: events, hover, lift,
    animation. Feed input through the returned queue."""
    engine = Engine(store=store, settings=settings, seed=seed)
    queue = EventQueue()
    engine.add_system(make_event_system(queue))
    engine.add_system(make_hover_system())
    engine.add_system(make_lift_system())
    engine.add_system(make_animation_system(on_complete=on_complete))
    return engine, queue
