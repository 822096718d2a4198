"""Keyframe configurations and the three-slot keyframe store.

A keyframe is a card layout plus a camera pose. The store holds exactly three
of them together with per-transition duration overrides. Every value that
enters a keyframe, on construction or through ``edit``, goes through a
sanitizer: bad numbers are clamped to something drawable, while structural
mistakes (unknown layout, a grouped stack without groups, unreadable colors)
raise ConfigError at edit time so the interpolation engine never sees them.
"""
from __future__ import annotations

import dataclasses
import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Sequence

from cardframe.color import Color, ColorLike, parse_color
from cardframe.types import ConfigError

logger = logging.getLogger(__name__)

SLOT_COUNT = 3
MIN_DIMENSION = 1e-3
MIN_DURATION = 100.0
DEFAULT_DURATION = 2000.0

# Random stack cards are this fraction of the configured height, times a
# per-card scale drawn from HEIGHT_SCALE_RANGE.
RANDOM_BASE_HEIGHT = 0.5
HEIGHT_SCALE_RANGE = (0.8, 1.4)


class LayoutKind(str, Enum):
    RANDOM_STACK = "stacked-random"
    GROUPED_STACK = "stacked-group"
    WHEEL = "wheel"


def parse_layout(value: LayoutKind | str) -> LayoutKind:
    try:
        return LayoutKind(value)
    except ValueError:
        raise ConfigError(f"Unknown layout {value!r}") from None


def _is_finite(value: Any) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def sanitize_dimension(value: Any, name: str = "dimension") -> float:
    """Positive float, flooring NaN and non-positive input to MIN_DIMENSION."""
    if not _is_finite(value) or float(value) <= 0:
        logger.warning("Clamping %s=%r to %s", name, value, MIN_DIMENSION)
        return MIN_DIMENSION
    return float(value)


def sanitize_count(value: Any) -> int:
    """Non-negative card count. Fractions truncate, garbage becomes 0."""
    if not _is_finite(value):
        logger.warning("Clamping card_count=%r to 0", value)
        return 0
    count = int(float(value))
    if count < 0:
        logger.warning("Clamping card_count=%r to 0", value)
        return 0
    return count


def sanitize_angle(value: Any, name: str = "angle") -> float:
    if not _is_finite(value):
        logger.warning("Clamping %s=%r to 0", name, value)
        return 0.0
    return float(value)


def sanitize_gap(value: Any) -> float | None:
    """Group spacing: None keeps the engine default, negatives clamp to 0."""
    if value is None:
        return None
    if not _is_finite(value):
        logger.warning("Ignoring group_spacing=%r", value)
        return None
    return max(float(value), 0.0)


def sanitize_duration(value: Any, minimum: float = MIN_DURATION) -> float:
    if not _is_finite(value) or float(value) < minimum:
        logger.warning("Clamping duration=%r to %s ms", value, minimum)
        return minimum
    return float(value)


@dataclass(frozen=True)
class GroupEntry:
    """One group of a grouped stack: share of the card count and its stroke."""

    percentage: float
    stroke: Color

    @classmethod
    def of(cls, percentage: Any, stroke: ColorLike) -> GroupEntry:
        if not _is_finite(percentage):
            logger.warning("Clamping group percentage=%r to 0", percentage)
            return cls(percentage=0.0, stroke=parse_color(stroke))
        pct = float(percentage)
        if pct < 0:
            logger.warning("Clamping group percentage=%r to 0", percentage)
            pct = 0.0
        return cls(percentage=pct, stroke=parse_color(stroke))


def sanitize_groups(
    groups: Iterable[GroupEntry | tuple[Any, ColorLike]] | None,
) -> tuple[GroupEntry, ...]:
    if groups is None:
        return ()
    if isinstance(groups, str):
        raise ConfigError(f"groups must be a sequence of (percentage, color), got {groups!r}")
    try:
        entries = list(groups)
    except TypeError:
        raise ConfigError(f"groups must be a sequence of (percentage, color), got {groups!r}") from None
    result = []
    for entry in entries:
        if isinstance(entry, GroupEntry):
            result.append(GroupEntry.of(entry.percentage, entry.stroke))
        else:
            try:
                percentage, stroke = entry
            except (TypeError, ValueError):
                raise ConfigError(f"Group entry must be (percentage, color), got {entry!r}") from None
            result.append(GroupEntry.of(percentage, stroke))
    return tuple(result)


@dataclass(frozen=True)
class CameraPose:
    """Camera zoom and rotations in degrees."""

    zoom: float = 1.0
    rot_x: float = 0.0
    rot_y: float = 0.0
    rot_z: float = 0.0

    @classmethod
    def of(cls, zoom: Any = 1.0, rot_x: Any = 0.0, rot_y: Any = 0.0, rot_z: Any = 0.0) -> CameraPose:
        return cls(
            zoom=sanitize_dimension(zoom, "zoom"),
            rot_x=sanitize_angle(rot_x, "rot_x"),
            rot_y=sanitize_angle(rot_y, "rot_y"),
            rot_z=sanitize_angle(rot_z, "rot_z"),
        )


_CAMERA_FIELDS = ("zoom", "rot_x", "rot_y", "rot_z")


@dataclass
class KeyframeConfig:
    layout: LayoutKind
    card_count: int
    card_width: float = 20.0
    card_height: float = 10.0
    card_thickness: float = 0.1
    card_spacing: float = 1.0
    groups: tuple[GroupEntry, ...] = ()
    group_spacing: float | None = None
    camera: CameraPose = field(default_factory=CameraPose)
    _height_scales: list[float] | None = field(
        default=None, init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        self.layout = parse_layout(self.layout)
        self.card_count = sanitize_count(self.card_count)
        self.card_width = sanitize_dimension(self.card_width, "card_width")
        self.card_height = sanitize_dimension(self.card_height, "card_height")
        self.card_thickness = sanitize_dimension(self.card_thickness, "card_thickness")
        self.card_spacing = sanitize_dimension(self.card_spacing, "card_spacing")
        self.groups = sanitize_groups(self.groups)
        self.group_spacing = sanitize_gap(self.group_spacing)
        c = self.camera
        self.camera = CameraPose.of(c.zoom, c.rot_x, c.rot_y, c.rot_z)
        _check_groups(self.layout, self.groups)

    def edit(self, **changes: Any) -> None:
        """Apply configuration edits atomically.

        Accepts any field name plus the camera shortcuts ``zoom``, ``rot_x``,
        ``rot_y`` and ``rot_z``. Nothing is changed if any edit is rejected.
        """
        values: dict[str, Any] = {}
        camera_changes: dict[str, Any] = {}
        for name, value in changes.items():
            if name in _CAMERA_FIELDS:
                camera_changes[name] = value
            elif name == "layout":
                values[name] = parse_layout(value)
            elif name == "card_count":
                values[name] = sanitize_count(value)
            elif name in ("card_width", "card_height", "card_thickness", "card_spacing"):
                values[name] = sanitize_dimension(value, name)
            elif name == "groups":
                values[name] = sanitize_groups(value)
            elif name == "group_spacing":
                values[name] = sanitize_gap(value)
            elif name == "camera":
                if not isinstance(value, CameraPose):
                    raise ConfigError(f"camera must be a CameraPose, got {value!r}")
                values[name] = CameraPose.of(value.zoom, value.rot_x, value.rot_y, value.rot_z)
            else:
                raise ConfigError(f"Unknown keyframe field {name!r}")

        if camera_changes:
            base = dataclasses.asdict(values.get("camera", self.camera))
            base.update(camera_changes)
            values["camera"] = CameraPose.of(**base)

        _check_groups(values.get("layout", self.layout), values.get("groups", self.groups))

        for name, value in values.items():
            setattr(self, name, value)

    def height_scales(self, rng: random.Random | None = None) -> list[float]:
        """Per-card random height factors, sampled once per card count."""
        if self._height_scales is None or len(self._height_scales) != self.card_count:
            draw = rng if rng is not None else random
            low, high = HEIGHT_SCALE_RANGE
            self._height_scales = [draw.uniform(low, high) for _ in range(self.card_count)]
        return self._height_scales

    def group_stroke(self, index: int) -> Color | None:
        if not self.groups:
            return None
        return self.groups[index % len(self.groups)].stroke


def _check_groups(layout: LayoutKind, groups: Sequence[GroupEntry]) -> None:
    if layout is LayoutKind.GROUPED_STACK and not groups:
        raise ConfigError("A stacked-group keyframe needs at least one group")


class KeyframeStore:
    """Three keyframe slots plus per-pair transition duration overrides."""

    def __init__(
        self,
        keyframes: Sequence[KeyframeConfig] | None = None,
        durations: dict[tuple[int, int], float] | None = None,
        default_duration: float = DEFAULT_DURATION,
        min_duration: float = MIN_DURATION,
    ) -> None:
        if keyframes is None:
            keyframes = default_keyframes()
        if len(keyframes) != SLOT_COUNT:
            raise ConfigError(f"Expected {SLOT_COUNT} keyframes, got {len(keyframes)}")
        self._keyframes = list(keyframes)
        self._min_duration = min_duration
        self._durations: dict[tuple[int, int], float] = {}
        self._last_duration = sanitize_duration(default_duration, min_duration)
        if durations is None:
            durations = default_durations()
        for (a, b), ms in durations.items():
            self.set_duration(a, b, ms)

    def __len__(self) -> int:
        return SLOT_COUNT

    def __getitem__(self, index: int) -> KeyframeConfig:
        return self._keyframes[self.check_index(index)]

    def __iter__(self) -> Iterator[KeyframeConfig]:
        return iter(self._keyframes)

    @staticmethod
    def check_index(index: int) -> int:
        if not 0 <= index < SLOT_COUNT:
            raise IndexError(f"Keyframe index {index} out of range 0..{SLOT_COUNT - 1}")
        return index

    def edit(self, index: int, **changes: Any) -> None:
        self[index].edit(**changes)

    @property
    def durations(self) -> dict[tuple[int, int], float]:
        return dict(self._durations)

    @property
    def last_duration(self) -> float:
        return self._last_duration

    def set_duration(self, from_index: int, to_index: int, ms: Any) -> None:
        self.check_index(from_index)
        self.check_index(to_index)
        self._durations[(from_index, to_index)] = sanitize_duration(ms, self._min_duration)

    def duration_for(self, from_index: int, to_index: int) -> float:
        """Override for the ordered pair, else whichever duration was used last."""
        ms = self._durations.get((from_index, to_index))
        if ms is not None:
            self._last_duration = ms
        return self._last_duration

    def next_index(self, index: int) -> int:
        return (index + 1) % SLOT_COUNT

    def previous_index(self, index: int) -> int:
        return (index - 1) % SLOT_COUNT

    def find_layout(self, kind: LayoutKind, after: int) -> int | None:
        """First slot after ``after`` (wrapping, excluding it) with ``kind``."""
        for step in range(1, SLOT_COUNT):
            index = (after + step) % SLOT_COUNT
            if self._keyframes[index].layout is kind:
                return index
        return None


def default_durations() -> dict[tuple[int, int], float]:
    return {(0, 1): 2000.0, (1, 2): 2000.0, (2, 0): 2000.0}


def default_keyframes() -> list[KeyframeConfig]:
    """The stock random stack, grouped stack and wheel keyframes."""
    return [
        KeyframeConfig(
            layout=LayoutKind.RANDOM_STACK,
            card_count=52,
            card_width=0.1,
            card_height=30.0,
            card_thickness=0.1,
            card_spacing=1.0,
            camera=CameraPose(zoom=10.0, rot_x=0.0, rot_y=90.0, rot_z=0.0),
        ),
        KeyframeConfig(
            layout=LayoutKind.GROUPED_STACK,
            card_count=50,
            card_width=20.0,
            card_height=10.0,
            card_thickness=0.1,
            card_spacing=1.0,
            groups=(
                (5, "#68B3BE"),
                (10, "#3C946A"),
                (15, "#FF5A87"),
                (20, "#D26E00"),
                (15, "#F9C3C0"),
                (10, "#D093D0"),
                (15, "#FFE600"),
                (10, "#89C6FF"),
            ),
            group_spacing=3.0,
            camera=CameraPose(zoom=8.0, rot_x=-35.0, rot_y=-45.0, rot_z=0.0),
        ),
        KeyframeConfig(
            layout=LayoutKind.WHEEL,
            card_count=100,
            card_width=20.0,
            card_height=10.0,
            card_thickness=0.1,
            card_spacing=1.0,
            group_spacing=5.0,
            camera=CameraPose(zoom=5.0, rot_x=90.0, rot_y=0.0, rot_z=0.0),
        ),
    ]
