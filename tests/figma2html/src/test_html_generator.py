import re

import pytest

from figma2html.core.exception.exceptions import InvalidInputException
from figma2html.src.figma_types import (
    BoundingBox,
    Color,
    ImagePaint,
    LinearGradientPaint,
    Node,
    NodeType,
    SolidPaint,
)
from figma2html.src.html_generator import (
    ARTBOARDS_CONTAINER_CLASS,
    BASE_CSS,
    EmissionContext,
    HtmlGenerator,
    convert,
)


def artboard(node_id: str, children=None, **kwargs) -> Node:
    kwargs.setdefault("absolute_bounding_box", BoundingBox(x=0, y=0, width=200, height=100))
    return Node(id=node_id, name=f"Frame {node_id}", type=NodeType.FRAME, children=children, **kwargs)


def canvas(*children: Node) -> Node:
    return Node(id="0:1", name="Page", type=NodeType.CANVAS, children=list(children))


def rule_for(css: str, class_name: str) -> str:
    match = re.search(rf"^\.{re.escape(class_name)} \{{ (.*) \}}$", css, re.MULTILINE)
    assert match, f"no rule for {class_name}"
    return match.group(1)


class TestConvert:
    def test_single_node(self) -> None:
        result = convert(artboard("1:1"))

        assert result.html == '<div class="node-1-1"></div>'
        assert result.css.startswith(BASE_CSS)
        assert ".node-1-1 { width: 200px; height: 100px; position: relative;" in result.css

    def test_none_root_is_rejected(self) -> None:
        with pytest.raises(InvalidInputException):
            convert(None)

    def test_nested_children(self) -> None:
        child = Node(
            id="1:2",
            type=NodeType.RECTANGLE,
            absolute_bounding_box=BoundingBox(x=50, y=75, width=10, height=10),
        )

        result = convert(artboard("1:1", [child]))

        assert result.html == '<div class="node-1-1"><div class="node-1-2"></div></div>'
        assert rule_for(result.css, "node-1-2") == (
            "width: 10px; height: 10px; position: absolute; left: 50px; top: 75px;"
        )

    def test_hidden_nodes_produce_no_markup_or_css(self) -> None:
        hidden = Node(id="1:2", type=NodeType.FRAME, visible=False, children=[Node(id="1:3")])

        result = convert(artboard("1:1", [hidden]))

        assert "node-1-2" not in result.html
        assert "node-1-2" not in result.css
        assert "node-1-3" not in result.css

    def test_text_content_is_escaped(self, text_node: Node) -> None:
        label = Node(
            id=text_node.id,
            type=NodeType.TEXT,
            characters="Tom & Jerry\n<3",
            style=text_node.style,
        )

        result = convert(artboard("1:1", [label]))

        assert '<div class="node-1-3">Tom &amp; Jerry<br/>&lt;3</div>' in result.html

    def test_text_rule(self, text_node: Node) -> None:
        result = convert(artboard("1:1", [text_node]))

        assert rule_for(result.css, "node-1-3") == (
            "width: 120px; height: 24px; position: absolute; left: 50px; top: 75px; "
            "font-family: 'Inter', sans-serif; font-size: 16px; font-weight: 400; "
            "line-height: 24px; text-align: center; color: rgba(255, 0, 0, 1);"
        )
        # 단일 텍스트 자식의 정렬이 부모로 전달됨
        assert "display: flex; align-items: center; justify-content: center;" in rule_for(
            result.css, "node-1-1"
        )

    def test_text_without_characters(self) -> None:
        result = convert(artboard("1:1", [Node(id="1:2", type=NodeType.TEXT)]))
        assert '<div class="node-1-2"></div>' in result.html

    def test_auto_layout_children_are_static(self, auto_layout_frame: Node) -> None:
        result = convert(auto_layout_frame)

        root_rule = rule_for(result.css, "node-2-1")
        assert "display: flex; flex-direction: row; gap: 16px;" in root_rule
        assert rule_for(result.css, "node-2-2") == "width: 50px; height: 50px; position: static;"

    def test_fill_variants(self) -> None:
        children = [
            Node(id="1:2", fills=[ImagePaint(image_ref="ref")]),
            Node(id="1:3", fills=[LinearGradientPaint()]),
            Node(
                id="1:4",
                fills=[
                    SolidPaint(color=Color(r=1, g=0, b=0)),
                    SolidPaint(color=Color(r=0, g=0, b=1), visible=False),
                ],
            ),
        ]

        result = convert(artboard("1:1", children))

        assert "background: #d9d9d9;" in rule_for(result.css, "node-1-2")
        assert "background" not in rule_for(result.css, "node-1-3")
        assert "background: rgba(255, 0, 0, 1);" in rule_for(result.css, "node-1-4")

    def test_rules_follow_emission_order(self) -> None:
        tree = artboard("1:1", [artboard("1:2", [Node(id="1:3")]), Node(id="1:4")])

        css = convert(tree).css

        positions = [css.index(f".node-{n} ") for n in ("1-1", "1-2", "1-3", "1-4")]
        assert positions == sorted(positions)


class TestArtboards:
    def test_multiple_artboards_are_wrapped(self, document_dict) -> None:
        from figma2html.src.figma_api_mapper import figma_api_to_domain

        result = convert(figma_api_to_domain(document_dict))

        assert result.html == (
            f'<div class="{ARTBOARDS_CONTAINER_CLASS}">'
            '<div class="node-1-1"></div><div class="node-1-2"></div><div class="node-1-3"></div>'
            "</div>"
        )
        assert (
            ".artboards-container { display: flex; flex-direction: column; gap: 32px; "
            "align-items: center; padding: 32px; }"
        ) in result.css
        for node_id in ("1-1", "1-2", "1-3"):
            assert "position: relative; overflow: hidden;" in rule_for(result.css, f"node-{node_id}")
        # 캔버스/문서 노드 자체는 출력되지 않음
        assert "node-0-1" not in result.css

    def test_single_artboard_is_not_wrapped(self) -> None:
        result = convert(canvas(artboard("1:1")))

        assert result.html == '<div class="node-1-1"></div>'
        assert ARTBOARDS_CONTAINER_CLASS not in result.css

    def test_canvas_without_artboards_renders_itself(self) -> None:
        lonely = Node(id="1:9", type=NodeType.RECTANGLE)
        result = convert(canvas(lonely))

        assert result.html == '<div class="node-0-1"><div class="node-1-9"></div></div>'

    def test_custom_gap(self) -> None:
        result = HtmlGenerator(artboard_gap=10).convert(canvas(artboard("1:1"), artboard("1:2")))
        assert "gap: 10px; align-items: center; padding: 10px;" in result.css


class TestReentrancy:
    def test_repeated_conversions_do_not_accumulate_rules(self) -> None:
        generator = HtmlGenerator()
        tree = artboard("1:1", [Node(id="1:2")])

        first = generator.convert(tree)
        second = generator.convert(tree)

        assert first == second
        assert second.css.count(".node-1-2 ") == 1

    def test_emission_context_render(self) -> None:
        context = EmissionContext()
        context.add_rule("node-a", "width: 1px;")
        context.add_rule("node-b", "height: 2px;")

        assert context.render() == ".node-a { width: 1px; }\n.node-b { height: 2px; }"
