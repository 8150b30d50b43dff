"""
Typography Resolver
Figma TypeStyle을 CSS 폰트/텍스트 속성으로 변환
"""

from typing import Dict, List, Optional

from .color import to_css_rgba
from .figma_types import Paint, SolidPaint, TypeStyle
from .utils import format_number, px

GENERIC_FONT_FALLBACK = "sans-serif"

TEXT_ALIGN_MAP = {
    "LEFT": "left",
    "RIGHT": "right",
    "CENTER": "center",
    "JUSTIFIED": "justify",
}


def resolve_typography(style: Optional[TypeStyle]) -> Dict[str, str]:
    """
    Build the font declarations for a text node

    Line height prefers the pixel value over the percentage one; letter
    spacing is only emitted when it is set and non-zero.
    """
    if style is None:
        return {}

    declarations: Dict[str, str] = {}

    if style.font_family:
        declarations["font-family"] = (
            f"'{style.font_family}', {GENERIC_FONT_FALLBACK}"
        )
    if style.font_size is not None:
        declarations["font-size"] = px(style.font_size)
    if style.font_weight is not None:
        declarations["font-weight"] = format_number(style.font_weight)

    if style.line_height_px:
        declarations["line-height"] = px(style.line_height_px)
    elif style.line_height_percent:
        declarations["line-height"] = f"{format_number(style.line_height_percent)}%"

    if style.letter_spacing:
        declarations["letter-spacing"] = px(style.letter_spacing)

    text_align = TEXT_ALIGN_MAP.get(style.text_align_horizontal or "")
    if text_align:
        declarations["text-align"] = text_align

    return declarations


def resolve_text_color(fills: Optional[List[Paint]]) -> Optional[str]:
    """Text color comes from the first visible solid fill"""
    for paint in fills or []:
        if paint.visible and isinstance(paint, SolidPaint):
            return to_css_rgba(paint.color, paint.opacity)
    return None
