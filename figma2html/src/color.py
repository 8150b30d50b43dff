"""
Color Codec
Figma의 정규화된 float 색상(0~1)을 CSS rgba() 문자열로 변환
"""

from typing import Optional

from .figma_types import Color
from .utils import format_number, round_half_up

TRANSPARENT = "transparent"


def to_css_rgba(color: Optional[Color], opacity: Optional[float] = None) -> str:
    """
    Convert a Figma color to ``rgba(r, g, b, a)``

    Args:
        color: normalized color; None yields ``transparent``
        opacity: explicit alpha override (e.g. a paint's opacity)

    Returns:
        CSS color string
    """
    if color is None:
        return TRANSPARENT

    r = round_half_up(color.r * 255)
    g = round_half_up(color.g * 255)
    b = round_half_up(color.b * 255)

    if opacity is not None:
        alpha = opacity
    elif color.a is not None:
        alpha = color.a
    else:
        alpha = 1

    return f"rgba({r}, {g}, {b}, {format_number(alpha)})"
