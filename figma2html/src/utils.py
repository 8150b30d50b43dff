"""
Common utility functions for Figma to HTML conversion
"""

import math
import re

CLASS_NAME_PREFIX = "node-"
LINE_BREAK = "<br/>"

_UNSAFE_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_identifier(node_id: str) -> str:
    """
    노드 ID를 CSS 클래스에 안전한 문자열로 변환

    Every character outside ``[A-Za-z0-9_-]`` becomes ``-``, so the mapping
    is deterministic and sanitizing twice changes nothing.
    """
    return _UNSAFE_IDENTIFIER_CHARS.sub("-", node_id)


def class_name_for(node_id: str) -> str:
    return f"{CLASS_NAME_PREFIX}{sanitize_identifier(node_id)}"


def escape_text(text: str) -> str:
    """
    텍스트를 HTML 본문에 넣을 수 있도록 이스케이프

    ``&`` must be replaced first, otherwise the entities produced for ``<``
    and ``>`` would be encoded a second time.
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("\n", LINE_BREAK)
    )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Print integral values without a decimal part, others with at most 4 decimals"""
    rounded = round(float(value), 4)
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


def px(value: float) -> str:
    return f"{format_number(value)}px"


def sanitize_filename(filename: str) -> str:
    """
    파일명을 안전하게 변환

    Args:
        filename: 원본 파일명

    Returns:
        안전한 파일명
    """
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", filename)
    sanitized = re.sub(r"\s+", "_", sanitized)
    sanitized = sanitized.strip("._")

    if not sanitized:
        sanitized = "figma_design"

    return sanitized
