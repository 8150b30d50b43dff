"""
Layout Resolver
노드별 CSS positioning 방식과 flexbox(auto layout) 속성 결정
"""

import logging
from enum import Enum
from typing import Dict, Optional

from .figma_types import LayoutMode, Node, NodeType
from .utils import px

ALIGNMENT_MAP = {
    "MIN": "start",
    "MAX": "end",
    "CENTER": "center",
    "BASELINE": "baseline",
    "STRETCH": "stretch",
    "SPACE_BETWEEN": "space-between",
}
DEFAULT_ALIGNMENT = "start"

# text-driven inference: vertical -> align-items, horizontal -> justify-content
TEXT_VERTICAL_ALIGNMENT_MAP = {"TOP": "start", "CENTER": "center", "BOTTOM": "end"}
TEXT_HORIZONTAL_ALIGNMENT_MAP = {"LEFT": "start", "CENTER": "center", "RIGHT": "end"}
INFERRED_DEFAULT_ALIGNMENT = "center"

ROOT_BACKGROUND = "white"


class PositionMode(str, Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    STATIC = "static"


def map_alignment(value: Optional[str]) -> str:
    """Map a Figma axis alignment keyword to a flexbox alignment keyword"""
    return ALIGNMENT_MAP.get(value or "", DEFAULT_ALIGNMENT)


def needs_containing_block(node: Node) -> bool:
    """
    True when at least one emitted child of ``node`` will be absolutely
    positioned: a forced-absolute child, or any child of a node without
    auto layout.
    """
    children = node.visible_children()
    if not children:
        return False
    if not node.has_auto_layout:
        return True
    return any(child.is_forced_absolute for child in children)


def resolve_position_mode(
    node: Node, parent_node: Optional[Node], is_root: bool
) -> PositionMode:
    """First matching rule wins: root, forced-absolute, flex child, default"""
    if is_root:
        return PositionMode.RELATIVE
    if node.is_forced_absolute:
        return PositionMode.ABSOLUTE
    if parent_node is not None and parent_node.has_auto_layout:
        if needs_containing_block(node):
            return PositionMode.RELATIVE
        return PositionMode.STATIC
    return PositionMode.ABSOLUTE


def resolve_positioning(
    node: Node, parent_node: Optional[Node], is_root: bool = False
) -> Dict[str, str]:
    mode = resolve_position_mode(node, parent_node, is_root)

    logging.debug(
        f"[POSITIONING] Node: '{node.name}' ({node.id}) | "
        f"Parent: '{parent_node.name if parent_node else None}' | "
        f"Mode: {mode.value}"
    )

    declarations = {"position": mode.value}

    if mode == PositionMode.RELATIVE and is_root:
        declarations["overflow"] = "hidden"
        declarations["background-color"] = ROOT_BACKGROUND
    elif mode == PositionMode.ABSOLUTE:
        declarations.update(_absolute_offset(node, parent_node))

    return declarations


def _absolute_offset(node: Node, parent_node: Optional[Node]) -> Dict[str, str]:
    box = node.absolute_bounding_box
    parent_box = parent_node.absolute_bounding_box if parent_node else None
    if box is None or parent_box is None:
        return {}
    return {
        "left": px(box.x - parent_box.x),
        "top": px(box.y - parent_box.y),
    }


def resolve_flex_layout(node: Node) -> Dict[str, str]:
    """Flexbox declarations for an auto-layout container"""
    if not node.has_auto_layout:
        return {}

    padding = " ".join(
        px(value or 0)
        for value in (
            node.padding_top,
            node.padding_right,
            node.padding_bottom,
            node.padding_left,
        )
    )

    return {
        "display": "flex",
        "flex-direction": "row" if node.layout_mode == LayoutMode.HORIZONTAL else "column",
        "gap": px(node.item_spacing or 0),
        "padding": padding,
        "align-items": map_alignment(node.counter_axis_align_items),
        "justify-content": map_alignment(node.primary_axis_align_items),
    }


def infer_text_alignment(node: Node) -> Dict[str, str]:
    """
    Promote a plain container wrapping a single aligned label to flexbox.

    Figma does not expose alignment on containers without auto layout, so
    the alignment of the only text child is mirrored onto the container.
    This is a heuristic and is not reliable for containers with several
    non-text children.
    """
    if node.is_text or node.has_auto_layout:
        return {}

    children = node.visible_children()
    if any(child.is_forced_absolute for child in children):
        return {}

    text_children = [child for child in children if child.type == NodeType.TEXT]
    if len(text_children) != 1:
        return {}

    style = text_children[0].style
    if style is None or not (style.text_align_horizontal or style.text_align_vertical):
        return {}

    return {
        "display": "flex",
        "align-items": TEXT_VERTICAL_ALIGNMENT_MAP.get(
            style.text_align_vertical or "", INFERRED_DEFAULT_ALIGNMENT
        ),
        "justify-content": TEXT_HORIZONTAL_ALIGNMENT_MAP.get(
            style.text_align_horizontal or "", INFERRED_DEFAULT_ALIGNMENT
        ),
    }
