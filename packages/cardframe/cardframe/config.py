"""Engine tuning configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable tunables for layout, choreography and hover.

    Attributes:
        wheel_radius: Radius of the wheel layout in world units.
        default_group_spacing: Gap between groups when a keyframe sets none.
        color_hold: Progress before which stroke colors stay at the source.
        spawn_stagger: Per-card start delay for generic spawns.
        spawn_duration: Fraction of the transition a generic spawn takes.
        duplicate_window: Fraction of the transition over which wheel
            duplicates start spawning.
        duplicate_duration: Fraction of the transition one duplicate takes.
        collapse_speed: Time multiplier for cards dismissed by the wheel
            transition.
        default_duration: Transition length in ms before any override is used.
        min_duration: Floor for transition duration overrides in ms.
        hover_threshold: Max XZ distance for a card to count as hovered.
        lift_height: Vertical offset applied to a hovered group (negative is up).
        lift_engage_rate: Per-frame approach rate while hovering is possible.
        lift_release_rate: Per-frame relax rate otherwise.
        visibility_threshold: Aliveness under which a card is not drawn.
        min_visible_size: A card with every axis under this is not drawn.
        initial_selected_group: Group that feeds the wheel before any click.
    """

    wheel_radius: float = 40.0
    default_group_spacing: float = 5.0
    color_hold: float = 0.85
    spawn_stagger: float = 0.005
    spawn_duration: float = 0.6
    duplicate_window: float = 0.7
    duplicate_duration: float = 0.3
    collapse_speed: float = 3.0
    default_duration: float = 2000.0
    min_duration: float = 100.0
    hover_threshold: float = 40.0
    lift_height: float = -10.0
    lift_engage_rate: float = 0.05
    lift_release_rate: float = 0.2
    visibility_threshold: float = 0.01
    min_visible_size: float = 0.05
    initial_selected_group: int = 2

    def __post_init__(self) -> None:
        if not 0.0 < self.spawn_duration <= 1.0:
            raise ValueError(f"spawn_duration must be in (0, 1], got {self.spawn_duration}")
        if not 0.0 < self.duplicate_duration <= 1.0:
            raise ValueError(
                f"duplicate_duration must be in (0, 1], got {self.duplicate_duration}"
            )
        if self.min_duration <= 0:
            raise ValueError(f"min_duration must be > 0, got {self.min_duration}")
