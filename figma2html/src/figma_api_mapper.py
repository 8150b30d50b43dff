"""
Figma API Mapper
Figma REST API 응답(JSON dict)을 도메인 모델로 변환

The REST API emits null for nested values it considers "unset"; those are
replaced here by their documented defaults so the converter never sees None
inside a present color, vector or color stop.
"""

import logging
from typing import Any, Dict, List, Optional

from figma2html.core.exception.exceptions import InvalidInputException

from .figma_types import (
    BackgroundBlurEffect,
    BoundingBox,
    Color,
    ColorStop,
    DropShadowEffect,
    Effect,
    ImagePaint,
    InnerShadowEffect,
    LayerBlurEffect,
    LayoutMode,
    LayoutPositioning,
    LinearGradientPaint,
    Node,
    NodeType,
    Paint,
    RadialGradientPaint,
    SolidPaint,
    TypeStyle,
    UnsupportedEffect,
    UnsupportedPaint,
    Vector,
)


def figma_api_to_domain(api_node: Optional[Dict[str, Any]]) -> Node:
    """
    Figma API 노드를 도메인 Node로 재귀 변환

    Args:
        api_node: Figma REST API 노드 (document 또는 하위 노드)

    Returns:
        Node 트리

    Raises:
        InvalidInputException: api_node가 None인 경우
    """
    if api_node is None:
        raise InvalidInputException(
            "Invalid Figma API response: response is null or undefined"
        )

    children = api_node.get("children")
    fills = api_node.get("fills")
    strokes = api_node.get("strokes")
    effects = api_node.get("effects")
    style = api_node.get("style")
    background_color = api_node.get("backgroundColor")

    return Node(
        id=str(api_node.get("id", "")),
        name=api_node.get("name") or "",
        type=NodeType.parse(api_node.get("type")),
        children=(
            [figma_api_to_domain(child) for child in children if child is not None]
            if children is not None
            else None
        ),
        absolute_bounding_box=map_bounding_box(api_node.get("absoluteBoundingBox")),
        fills=_map_entries(fills, map_paint),
        strokes=_map_entries(strokes, map_paint),
        stroke_weight=api_node.get("strokeWeight"),
        stroke_align=api_node.get("strokeAlign"),
        effects=_map_entries(effects, map_effect),
        characters=api_node.get("characters"),
        style=map_type_style(style) if style else None,
        layout_mode=_parse_layout_mode(api_node.get("layoutMode")),
        layout_positioning=(
            LayoutPositioning.ABSOLUTE
            if api_node.get("layoutPositioning") == "ABSOLUTE"
            else LayoutPositioning.AUTO
        ),
        primary_axis_align_items=api_node.get("primaryAxisAlignItems"),
        counter_axis_align_items=api_node.get("counterAxisAlignItems"),
        padding_left=api_node.get("paddingLeft"),
        padding_right=api_node.get("paddingRight"),
        padding_top=api_node.get("paddingTop"),
        padding_bottom=api_node.get("paddingBottom"),
        item_spacing=api_node.get("itemSpacing"),
        background_color=(
            map_color(background_color) if background_color is not None else None
        ),
        opacity=api_node.get("opacity"),
        visible=api_node.get("visible", True) is not False,
        corner_radius=api_node.get("cornerRadius"),
        rectangle_corner_radii=api_node.get("rectangleCornerRadii"),
    )


def _parse_layout_mode(value: Optional[str]) -> LayoutMode:
    try:
        return LayoutMode(value) if value else LayoutMode.NONE
    except ValueError:
        # GRID 등 지원하지 않는 레이아웃은 수동 배치로 취급
        logging.debug(f"[MAPPER] Unsupported layoutMode '{value}', using NONE")
        return LayoutMode.NONE


def map_color(api_color: Optional[Dict[str, Any]]) -> Color:
    if not api_color:
        return Color()
    return Color(
        r=_or_default(api_color.get("r"), 0.0),
        g=_or_default(api_color.get("g"), 0.0),
        b=_or_default(api_color.get("b"), 0.0),
        a=_or_default(api_color.get("a"), 1.0),
    )


def map_vector(api_vector: Optional[Dict[str, Any]]) -> Vector:
    if not api_vector:
        return Vector()
    return Vector(
        x=_or_default(api_vector.get("x"), 0.0),
        y=_or_default(api_vector.get("y"), 0.0),
    )


def map_color_stop(api_stop: Optional[Dict[str, Any]]) -> ColorStop:
    if not api_stop:
        return ColorStop()
    return ColorStop(
        position=_or_default(api_stop.get("position"), 0.0),
        color=map_color(api_stop.get("color")),
    )


def map_bounding_box(api_box: Optional[Dict[str, Any]]) -> Optional[BoundingBox]:
    if not api_box:
        return None
    return BoundingBox(
        x=_or_default(api_box.get("x"), 0.0),
        y=_or_default(api_box.get("y"), 0.0),
        width=_or_default(api_box.get("width"), 0.0),
        height=_or_default(api_box.get("height"), 0.0),
    )


def map_paint(api_paint: Dict[str, Any]) -> Paint:
    paint_type = api_paint.get("type")
    visible = api_paint.get("visible", True) is not False
    opacity = api_paint.get("opacity")

    if paint_type == "SOLID":
        return SolidPaint(
            color=map_color(api_paint.get("color")), visible=visible, opacity=opacity
        )
    if paint_type in ("GRADIENT_LINEAR", "GRADIENT_RADIAL"):
        paint_cls = (
            LinearGradientPaint
            if paint_type == "GRADIENT_LINEAR"
            else RadialGradientPaint
        )
        return paint_cls(
            gradient_handle_positions=_map_list(
                api_paint.get("gradientHandlePositions"), map_vector
            ),
            gradient_stops=_map_list(api_paint.get("gradientStops"), map_color_stop),
            visible=visible,
            opacity=opacity,
        )
    if paint_type == "IMAGE":
        return ImagePaint(
            image_ref=api_paint.get("imageRef"),
            scale_mode=api_paint.get("scaleMode"),
            visible=visible,
            opacity=opacity,
        )
    return UnsupportedPaint(type=str(paint_type), visible=visible, opacity=opacity)


def map_effect(api_effect: Dict[str, Any]) -> Effect:
    effect_type = api_effect.get("type")
    visible = api_effect.get("visible", True) is not False
    radius = _or_default(api_effect.get("radius"), 0.0)

    if effect_type in ("DROP_SHADOW", "INNER_SHADOW"):
        effect_cls = (
            DropShadowEffect if effect_type == "DROP_SHADOW" else InnerShadowEffect
        )
        return effect_cls(
            radius=radius,
            offset=map_vector(api_effect.get("offset")),
            spread=_or_default(api_effect.get("spread"), 0.0),
            color=map_color(api_effect.get("color")),
            visible=visible,
        )
    if effect_type == "LAYER_BLUR":
        return LayerBlurEffect(radius=radius, visible=visible)
    if effect_type == "BACKGROUND_BLUR":
        return BackgroundBlurEffect(radius=radius, visible=visible)
    return UnsupportedEffect(type=str(effect_type), visible=visible)


def map_type_style(api_style: Dict[str, Any]) -> TypeStyle:
    return TypeStyle(
        font_family=api_style.get("fontFamily"),
        font_post_script_name=api_style.get("fontPostScriptName"),
        font_weight=api_style.get("fontWeight"),
        font_size=api_style.get("fontSize"),
        text_align_horizontal=api_style.get("textAlignHorizontal"),
        text_align_vertical=api_style.get("textAlignVertical"),
        letter_spacing=api_style.get("letterSpacing"),
        line_height_px=api_style.get("lineHeightPx"),
        line_height_percent=api_style.get("lineHeightPercent"),
    )


def _map_list(values: Optional[List[Any]], mapper) -> list:
    return [mapper(value) for value in values or []]


def _or_default(value: Any, default: float) -> float:
    return default if value is None else value


def _map_entries(values: Optional[List[Any]], mapper) -> Optional[list]:
    # 배열 자체가 없으면 None 유지, null 항목은 건너뜀
    if values is None:
        return None
    return [mapper(value) for value in values if value is not None]
