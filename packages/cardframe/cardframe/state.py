"""Engine state: everything the per-frame systems read and write."""
from __future__ import annotations

import random
from dataclasses import dataclass, field

from cardframe.config import EngineConfig
from cardframe.easing import clamp
from cardframe.interpolate import RenderCard, snapshot
from cardframe.keyframes import DEFAULT_DURATION, CameraPose, KeyframeConfig, KeyframeStore, LayoutKind
from cardframe.layout import generate


@dataclass
class AnimationState:
    """Idle on ``current`` when not running; otherwise animating to ``target``.

    ``start`` and ``duration`` are in milliseconds.
    """

    current: int = 0
    target: int = 0
    start: float = 0.0
    duration: float = DEFAULT_DURATION
    running: bool = False

    def progress(self, now: float) -> float:
        """Raw (uneased) progress of the running transition, in [0, 1]."""
        if not self.running:
            return 1.0
        return clamp((now - self.start) / self.duration)


@dataclass
class EngineState:
    """Mutable engine state, owned by one Engine and touched once per frame.

    ``cards`` is the render state and ``camera`` the rendered camera pose.
    ``pointer`` is in screen pixels, None until the pointer first moves.
    """

    store: KeyframeStore = None  # type: ignore[assignment]
    settings: EngineConfig = field(default_factory=EngineConfig)
    rng: random.Random = field(default_factory=random.Random)
    animation: AnimationState = field(default_factory=AnimationState)
    selected_group: int | None = None
    hovered_group: int | None = None
    lift_offset: float = 0.0
    pointer: tuple[float, float] | None = None
    viewport: tuple[float, float] = (800.0, 600.0)
    camera: CameraPose = field(default_factory=CameraPose)
    cards: list[RenderCard] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.store is None:
            self.store = KeyframeStore(
                default_duration=self.settings.default_duration,
                min_duration=self.settings.min_duration,
            )
        if self.selected_group is None:
            self.selected_group = self.settings.initial_selected_group
        if not self.cards:
            self.show(self.animation.current)

    @property
    def current_keyframe(self) -> KeyframeConfig:
        return self.store[self.animation.current]

    @property
    def animating(self) -> bool:
        return self.animation.running

    @property
    def on_grouped_keyframe(self) -> bool:
        return self.current_keyframe.layout is LayoutKind.GROUPED_STACK

    @property
    def hover_enabled(self) -> bool:
        """Hover picking runs only while idle on a grouped stack."""
        return not self.animating and self.on_grouped_keyframe

    def show(self, index: int) -> None:
        """Display keyframe ``index`` as-is and stop any transition."""
        kf = self.store[index]
        self.animation.current = index
        self.animation.target = index
        self.animation.running = False
        self.cards = snapshot(generate(kf, self.selected_group, self.rng, self.settings))
        self.camera = kf.camera
