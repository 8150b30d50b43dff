"""
Effect Resolver
Figma shadow effect를 CSS box-shadow 값으로 변환

Blur effects are not rendered.
"""

from typing import List, Optional

from .color import to_css_rgba
from .figma_types import DropShadowEffect, Effect, InnerShadowEffect
from .utils import px


def shadow_to_css(effect) -> str:
    parts = []
    if isinstance(effect, InnerShadowEffect):
        parts.append("inset")
    parts.extend(
        [
            px(effect.offset.x),
            px(effect.offset.y),
            px(effect.radius),
            px(effect.spread),
            to_css_rgba(effect.color),
        ]
    )
    return " ".join(parts)


def resolve_box_shadow(effects: Optional[List[Effect]]) -> Optional[str]:
    shadows = [
        shadow_to_css(effect)
        for effect in effects or []
        if effect.visible and isinstance(effect, (DropShadowEffect, InnerShadowEffect))
    ]
    if not shadows:
        return None
    return ", ".join(shadows)
