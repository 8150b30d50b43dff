"""
CSS Style Builder
Build the CSS declaration block of a single Figma node
"""

from typing import Dict, Optional

from .color import to_css_rgba
from .effects import resolve_box_shadow
from .figma_types import Node
from .layout import infer_text_alignment, resolve_flex_layout, resolve_positioning
from .paint import resolve_background, resolve_border
from .typography import resolve_text_color, resolve_typography
from .utils import format_number, px


class CSSStyleBuilder:
    """Build CSS styles for nodes"""

    def __init__(self):
        self.styles: Dict[str, str] = {}

    def add_style(self, property: str, value: Optional[str]) -> "CSSStyleBuilder":
        """Add a CSS property-value pair"""
        if value:
            self.styles[property] = value
        return self

    def add_styles_from_dict(self, style_dict: Dict[str, str]) -> "CSSStyleBuilder":
        """Add multiple styles from a dictionary"""
        for prop, value in style_dict.items():
            self.add_style(prop, value)
        return self

    def add_size_styles(self, node: Node) -> "CSSStyleBuilder":
        """Add width and height from the absolute bounding box"""
        box = node.absolute_bounding_box
        if box is not None:
            self.add_style("width", px(box.width))
            self.add_style("height", px(box.height))
        return self

    def add_position_styles(
        self, node: Node, parent_node: Optional[Node] = None, is_root: bool = False
    ) -> "CSSStyleBuilder":
        """Add positioning based on the root flag and the parent's layout"""
        return self.add_styles_from_dict(
            resolve_positioning(node, parent_node, is_root)
        )

    def add_layout_styles(self, node: Node) -> "CSSStyleBuilder":
        """Add flexbox styles from auto layout, or inferred from a text child"""
        if node.has_auto_layout:
            return self.add_styles_from_dict(resolve_flex_layout(node))
        return self.add_styles_from_dict(infer_text_alignment(node))

    def add_background_styles(self, node: Node) -> "CSSStyleBuilder":
        """Add background styles from fills (text nodes use fills as color)"""
        if node.is_text:
            return self

        if node.fills is not None:
            self.add_style("background", resolve_background(node.fills))
        elif node.background_color is not None:
            self.add_style("background-color", to_css_rgba(node.background_color))
        return self

    def add_border_styles(self, node: Node) -> "CSSStyleBuilder":
        """Add border styles from strokes"""
        self.add_style("border", resolve_border(node.strokes, node.stroke_weight))
        return self.add_border_radius(node)

    def add_border_radius(self, node: Node) -> "CSSStyleBuilder":
        """Add border radius styles"""
        if node.corner_radius:
            return self.add_style("border-radius", px(node.corner_radius))

        radii = node.rectangle_corner_radii
        if radii and len(radii) == 4:
            self.add_style("border-radius", " ".join(px(r) for r in radii))
        return self

    def add_shadow_styles(self, node: Node) -> "CSSStyleBuilder":
        """Add shadow styles from effects"""
        return self.add_style("box-shadow", resolve_box_shadow(node.effects))

    def add_opacity(self, node: Node) -> "CSSStyleBuilder":
        """Add opacity if less than 1"""
        if node.opacity is not None and node.opacity < 1.0:
            self.add_style("opacity", format_number(node.opacity))
        return self

    def add_text_styles(self, node: Node) -> "CSSStyleBuilder":
        """Add text-specific styles"""
        if not node.is_text:
            return self
        self.add_styles_from_dict(resolve_typography(node.style))
        return self.add_style("color", resolve_text_color(node.fills))

    def build(self) -> str:
        """Build the final declaration block"""
        return " ".join(f"{prop}: {value};" for prop, value in self.styles.items())

    def build_dict(self) -> Dict[str, str]:
        """Build and return styles as dictionary"""
        return self.styles.copy()


def build_css_for_node(
    node: Node, parent_node: Optional[Node] = None, is_root: bool = False
) -> str:
    """
    Build CSS for a node (convenience function)

    Args:
        node: Figma node
        parent_node: Parent node for layout context
        is_root: whether the node is a top-level artboard

    Returns:
        CSS declaration string
    """
    builder = CSSStyleBuilder()

    return (
        builder.add_size_styles(node)
        .add_position_styles(node, parent_node, is_root)
        .add_layout_styles(node)
        .add_background_styles(node)
        .add_border_styles(node)
        .add_shadow_styles(node)
        .add_opacity(node)
        .add_text_styles(node)
        .build()
    )
