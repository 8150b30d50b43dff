"""
Paint Resolver
Figma fills/strokes를 CSS background/border 값으로 변환
"""

import logging
import math
from typing import List, Optional

from .color import to_css_rgba
from .figma_types import (
    ImagePaint,
    LinearGradientPaint,
    Paint,
    SolidPaint,
    Vector,
)
from .utils import format_number, px, round_half_up

# Figma measures 0deg pointing right, CSS gradients measure 0deg pointing up
GRADIENT_ANGLE_OFFSET = 90
IMAGE_PLACEHOLDER = "#d9d9d9"


def topmost_visible_paint(paints: Optional[List[Paint]]) -> Optional[Paint]:
    """Return the last visible paint (paint arrays are ordered bottom to top)"""
    visible = [paint for paint in paints or [] if paint.visible]
    if not visible:
        return None
    return visible[-1]


def resolve_background(fills: Optional[List[Paint]]) -> Optional[str]:
    """
    Resolve a fill list to a ``background`` value

    Only the topmost visible fill is rendered. Unsupported variants
    (radial gradients, unknown types) produce no declaration.
    """
    paint = topmost_visible_paint(fills)
    if paint is None:
        return None

    if isinstance(paint, SolidPaint):
        return to_css_rgba(paint.color, paint.opacity)
    if isinstance(paint, LinearGradientPaint):
        return linear_gradient_to_css(paint)
    if isinstance(paint, ImagePaint):
        # 이미지 에셋은 해석하지 않고 중립 플레이스홀더만 사용
        return IMAGE_PLACEHOLDER

    logging.debug(f"[PAINT] Ignoring unsupported fill {type(paint).__name__}")
    return None


def resolve_border(
    strokes: Optional[List[Paint]], stroke_weight: Optional[float]
) -> Optional[str]:
    """Resolve a stroke list to a ``border`` shorthand value"""
    if not stroke_weight or stroke_weight <= 0:
        return None

    paint = topmost_visible_paint(strokes)
    if not isinstance(paint, SolidPaint):
        return None

    return f"{px(stroke_weight)} solid {to_css_rgba(paint.color, paint.opacity)}"


def gradient_angle(start: Vector, end: Vector) -> float:
    """Convert two gradient handles to a CSS ``linear-gradient`` angle in degrees"""
    angle = math.degrees(math.atan2(end.y - start.y, end.x - start.x))
    return angle + GRADIENT_ANGLE_OFFSET


def linear_gradient_to_css(paint: LinearGradientPaint) -> Optional[str]:
    handles = paint.gradient_handle_positions
    if len(handles) < 2 or not paint.gradient_stops:
        return None

    angle = gradient_angle(handles[0], handles[1])
    stops = ", ".join(
        f"{to_css_rgba(stop.color)} {round_half_up(stop.position * 100)}%"
        for stop in paint.gradient_stops
    )
    return f"linear-gradient({format_number(angle)}deg, {stops})"
