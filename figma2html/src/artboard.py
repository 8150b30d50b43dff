"""
Artboard Locator
문서 트리에서 최상위 렌더링 대상(아트보드) 탐색
"""

from typing import List

from .figma_types import Node, NodeType

ARTBOARD_TYPES = (NodeType.FRAME, NodeType.SECTION, NodeType.COMPONENT)


def find_artboards(node: Node) -> List[Node]:
    """
    Return the top-level frames/sections/components sitting directly under
    a canvas, in source order. Canvases are searched depth-first from
    ``node``; an empty list means the caller should render ``node`` itself.
    """
    if node.type == NodeType.CANVAS:
        return [child for child in node.children or [] if child.type in ARTBOARD_TYPES]

    artboards: List[Node] = []
    for child in node.children or []:
        artboards.extend(find_artboards(child))
    return artboards
