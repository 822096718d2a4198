"""cardframe - Keyframe-based 3D card layout animation engine."""
from __future__ import annotations

from cardframe.clock import Clock
from cardframe.color import Color, lerp_color, parse_color, to_hex
from cardframe.config import EngineConfig
from cardframe.driver import advance_animation, edit_keyframe, jump_to, request_transition
from cardframe.easing import ease_in_out_cubic
from cardframe.engine import Engine, create_engine
from cardframe.events import (
    AdvanceNext,
    AdvancePrevious,
    EditKeyframe,
    EventQueue,
    JumpTo,
    PointerClicked,
    PointerMoved,
    SetTransitionDuration,
    ViewportResized,
)
from cardframe.hover import pick_group, unproject
from cardframe.interpolate import RenderCard, interpolate, interpolate_camera
from cardframe.keyframes import (
    CameraPose,
    GroupEntry,
    KeyframeConfig,
    KeyframeStore,
    LayoutKind,
    default_keyframes,
)
from cardframe.layout import CardPlacement, generate
from cardframe.render import RenderFrame, is_visible, render_frame
from cardframe.state import AnimationState, EngineState
from cardframe.types import ConfigError, FrameContext

__all__ = [
    "Engine",
    "create_engine",
    "Clock",
    "FrameContext",
    "EngineConfig",
    "EngineState",
    "AnimationState",
    "KeyframeStore",
    "KeyframeConfig",
    "LayoutKind",
    "GroupEntry",
    "CameraPose",
    "default_keyframes",
    "ConfigError",
    "CardPlacement",
    "generate",
    "RenderCard",
    "interpolate",
    "interpolate_camera",
    "request_transition",
    "advance_animation",
    "jump_to",
    "edit_keyframe",
    "pick_group",
    "unproject",
    "EventQueue",
    "AdvanceNext",
    "AdvancePrevious",
    "JumpTo",
    "PointerMoved",
    "PointerClicked",
    "ViewportResized",
    "EditKeyframe",
    "SetTransitionDuration",
    "RenderFrame",
    "render_frame",
    "is_visible",
    "Color",
    "parse_color",
    "lerp_color",
    "to_hex",
    "ease_in_out_cubic",
]
