"""What the rendering collaborator draws each frame."""
from __future__ import annotations

from dataclasses import dataclass

from cardframe.config import EngineConfig
from cardframe.hover import apply_lift
from cardframe.interpolate import RenderCard
from cardframe.keyframes import CameraPose
from cardframe.state import EngineState

_DEFAULT_CONFIG = EngineConfig()


@dataclass(frozen=True)
class RenderFrame:
    cards: tuple[RenderCard, ...]
    camera: CameraPose


def is_visible(card: RenderCard, settings: EngineConfig | None = None) -> bool:
    """False for cards too faint, or too small on every axis, to draw."""
    if settings is None:
        settings = _DEFAULT_CONFIG
    if card.alive < settings.visibility_threshold:
        return False
    return any(s >= settings.min_visible_size for s in card.size)


def render_frame(state: EngineState) -> RenderFrame:
    """Current render state with the hover lift applied, plus the camera."""
    return RenderFrame(cards=tuple(apply_lift(state)), camera=state.camera)
