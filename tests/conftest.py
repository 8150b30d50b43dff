import os
import tempfile

# 테스트 중 생성되는 로그 파일은 임시 디렉토리에 기록
os.environ.setdefault("DATA_PATH", os.path.join(tempfile.gettempdir(), "figma2html-test"))
os.environ.setdefault("ENVIRONMENT", "LOCAL")

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from figma2html.src.figma_types import (  # noqa: E402
    BoundingBox,
    Color,
    LayoutMode,
    Node,
    NodeType,
    SolidPaint,
    TypeStyle,
)
from figma2html.web.router import register_exception_handlers, router  # noqa: E402


@pytest.fixture(scope="session")
def client() -> TestClient:
    # main.py의 lifespan 없이 라우터만 직접 마운트
    test_app = FastAPI()
    test_app.include_router(router)
    register_exception_handlers(test_app)
    return TestClient(test_app)


@pytest.fixture
def text_node() -> Node:
    """Centered 16px Inter label at (50, 75)."""
    return Node(
        id="1:3",
        name="Label",
        type=NodeType.TEXT,
        absolute_bounding_box=BoundingBox(x=50, y=75, width=120, height=24),
        characters="Hello",
        fills=[SolidPaint(color=Color(r=1, g=0, b=0, a=1))],
        style=TypeStyle(
            font_family="Inter",
            font_weight=400,
            font_size=16,
            text_align_horizontal="CENTER",
            text_align_vertical="CENTER",
            line_height_px=24,
        ),
    )


@pytest.fixture
def auto_layout_frame() -> Node:
    """Horizontal auto-layout frame with two rectangles."""
    return Node(
        id="2:1",
        name="Row",
        type=NodeType.FRAME,
        absolute_bounding_box=BoundingBox(x=0, y=0, width=300, height=100),
        layout_mode=LayoutMode.HORIZONTAL,
        item_spacing=16,
        padding_top=10,
        padding_right=20,
        padding_bottom=10,
        padding_left=20,
        children=[
            Node(
                id="2:2",
                name="A",
                type=NodeType.RECTANGLE,
                absolute_bounding_box=BoundingBox(x=20, y=10, width=50, height=50),
            ),
            Node(
                id="2:3",
                name="B",
                type=NodeType.RECTANGLE,
                absolute_bounding_box=BoundingBox(x=86, y=10, width=50, height=50),
            ),
        ],
    )


@pytest.fixture
def document_dict() -> dict:
    """Figma REST document with one canvas holding three artboards."""

    def frame(node_id: str, x: float) -> dict:
        return {
            "id": node_id,
            "name": f"Frame {node_id}",
            "type": "FRAME",
            "absoluteBoundingBox": {"x": x, "y": 0, "width": 100, "height": 100},
            "fills": [
                {"type": "SOLID", "visible": True, "color": {"r": 1, "g": 1, "b": 1, "a": 1}}
            ],
            "children": [],
        }

    return {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "backgroundColor": {"r": 0.9, "g": 0.9, "b": 0.9, "a": 1},
                "children": [frame("1:1", 0), frame("1:2", 150), frame("1:3", 300)],
            }
        ],
    }
