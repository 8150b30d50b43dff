"""
HTML Generator
Figma 노드 트리를 HTML 마크업과 CSS 스타일시트로 변환
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from figma2html.core.config import get_setting
from figma2html.core.exception.exceptions import InvalidInputException

from .artboard import find_artboards
from .figma_types import ConversionResult, Node
from .style_builder import build_css_for_node
from .utils import class_name_for, escape_text

ARTBOARDS_CONTAINER_CLASS = "artboards-container"

BASE_CSS = """body {
  font-family: sans-serif;
  margin: 0;
  padding: 0;
  display: flex;
  justify-content: center;
  align-items: center;
  min-height: 100vh;
  background-color: #f5f5f5;
}
* { box-sizing: border-box; }"""


@dataclass
class EmissionContext:
    """CSS rules collected during a single conversion, in emission order"""

    css_rules: List[Tuple[str, str]] = field(default_factory=list)

    def add_rule(self, class_name: str, declarations: str) -> None:
        self.css_rules.append((class_name, declarations))

    def render(self) -> str:
        return "\n".join(
            f".{class_name} {{ {declarations} }}"
            for class_name, declarations in self.css_rules
        )


def artboards_container_css(gap: int) -> str:
    return (
        f".{ARTBOARDS_CONTAINER_CLASS} {{ display: flex; flex-direction: column; "
        f"gap: {gap}px; align-items: center; padding: {gap}px; }}"
    )


class HtmlGenerator:
    """Figma 노드 트리를 HTML/CSS로 변환하는 생성기

    The generator keeps no per-conversion state: every ``convert`` call
    creates its own EmissionContext and threads it through the recursion,
    so one instance can be shared across threads.
    """

    def __init__(self, artboard_gap: Optional[int] = None):
        self.artboard_gap = (
            artboard_gap if artboard_gap is not None else get_setting().ARTBOARD_GAP
        )

    def convert(self, root_node: Optional[Node]) -> ConversionResult:
        """
        메인 변환 함수

        Args:
            root_node: Figma 문서 루트 (또는 임의의 하위 노드)

        Returns:
            html / css 문자열을 담은 ConversionResult

        Raises:
            InvalidInputException: root_node가 None인 경우
        """
        if root_node is None:
            raise InvalidInputException()

        context = EmissionContext()
        artboards = find_artboards(root_node) or [root_node]

        logging.debug(
            f"[HTML] Converting '{root_node.name}' with {len(artboards)} artboard(s)"
        )

        fragments = [
            self.emit(artboard, artboard, context, is_root=True)
            for artboard in artboards
        ]

        css_parts = [BASE_CSS]
        if len(artboards) > 1:
            html = (
                f'<div class="{ARTBOARDS_CONTAINER_CLASS}">{"".join(fragments)}</div>'
            )
            css_parts.append(artboards_container_css(self.artboard_gap))
        else:
            html = "".join(fragments)

        if context.css_rules:
            css_parts.append(context.render())

        return ConversionResult(html=html, css="\n".join(css_parts))

    def emit(
        self,
        node: Node,
        parent_node: Optional[Node],
        context: EmissionContext,
        is_root: bool = False,
    ) -> str:
        """단일 노드(및 하위 트리)를 HTML로 변환하고 CSS 규칙을 context에 추가"""
        if not node.visible:
            logging.debug(f"[HTML] Skipping hidden node '{node.name}' ({node.id})")
            return ""

        class_name = class_name_for(node.id)
        context.add_rule(class_name, build_css_for_node(node, parent_node, is_root))

        if node.is_text:
            content = escape_text(node.characters or "")
        else:
            content = "".join(
                self.emit(child, node, context) for child in node.children or []
            )

        return f'<div class="{class_name}">{content}</div>'


def convert(root_node: Optional[Node]) -> ConversionResult:
    """
    Convert a Figma node tree into HTML and CSS (convenience function)

    Args:
        root_node: document root or any node of a Figma tree

    Returns:
        ConversionResult with ``html`` and ``css``
    """
    return HtmlGenerator().convert(root_node)
