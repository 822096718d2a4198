"""RGB stroke colors and the delayed blend ramp."""
from __future__ import annotations

from typing import Union

from cardframe.easing import clamp, lerp
from cardframe.types import ConfigError

Color = tuple[float, float, float]
ColorLike = Union[str, tuple[float, float, float]]

WHITE: Color = (255.0, 255.0, 255.0)

COLOR_HOLD = 0.85


def parse_color(value: ColorLike) -> Color:
    """Parse ``"#RRGGBB"``, ``"#RGB"`` or an RGB triple into a Color.

    Raises ConfigError on anything else.
    """
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ConfigError(f"Malformed color {value!r}")
        try:
            r, g, b = (int(text[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ConfigError(f"Malformed color {value!r}") from None
        return (float(r), float(g), float(b))

    try:
        size = len(value)
    except TypeError:
        raise ConfigError(f"Malformed color {value!r}") from None
    if size != 3:
        raise ConfigError(f"Color needs 3 channels, got {size}")
    channels = []
    for c in value:
        try:
            c = float(c)
        except (TypeError, ValueError):
            raise ConfigError(f"Malformed color {value!r}") from None
        if c != c:
            raise ConfigError(f"Malformed color {value!r}")
        channels.append(clamp(c, 0.0, 255.0))
    return (channels[0], channels[1], channels[2])


def to_hex(color: Color) -> str:
    return "#" + "".join(f"{int(round(clamp(c, 0.0, 255.0))):02X}" for c in color)


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t), lerp(a[2], b[2], t))


def delayed_blend(progress: float, hold: float = COLOR_HOLD) -> float:
    """Blend factor that stays 0 until ``hold`` then ramps linearly to 1."""
    if hold >= 1.0:
        return 1.0 if progress >= 1.0 else 0.0
    return clamp((progress - hold) / (1.0 - hold))
