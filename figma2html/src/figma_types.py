"""
Figma Domain Types
Figma 문서 트리를 표현하는 읽기 전용 도메인 모델

Paint / Effect are modelled as one dataclass per variant so that a node can
only carry the fields that make sense for its variant (a solid paint never
has gradient stops, a blur never has a shadow color).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class NodeType(str, Enum):
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    FRAME = "FRAME"
    SECTION = "SECTION"
    GROUP = "GROUP"
    VECTOR = "VECTOR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    STAR = "STAR"
    LINE = "LINE"
    ELLIPSE = "ELLIPSE"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    SLICE = "SLICE"
    COMPONENT = "COMPONENT"
    INSTANCE = "INSTANCE"
    COMPONENT_SET = "COMPONENT_SET"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: Optional[str]) -> "NodeType":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class LayoutMode(str, Enum):
    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class LayoutPositioning(str, Enum):
    AUTO = "AUTO"
    ABSOLUTE = "ABSOLUTE"


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass(frozen=True)
class Vector:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ColorStop:
    position: float = 0.0
    color: Color = field(default_factory=Color)


# --- Paints ---


@dataclass(frozen=True)
class SolidPaint:
    color: Color = field(default_factory=Color)
    visible: bool = True
    opacity: Optional[float] = None


@dataclass(frozen=True)
class LinearGradientPaint:
    gradient_handle_positions: List[Vector] = field(default_factory=list)
    gradient_stops: List[ColorStop] = field(default_factory=list)
    visible: bool = True
    opacity: Optional[float] = None


@dataclass(frozen=True)
class RadialGradientPaint:
    gradient_handle_positions: List[Vector] = field(default_factory=list)
    gradient_stops: List[ColorStop] = field(default_factory=list)
    visible: bool = True
    opacity: Optional[float] = None


@dataclass(frozen=True)
class ImagePaint:
    image_ref: Optional[str] = None
    scale_mode: Optional[str] = None
    visible: bool = True
    opacity: Optional[float] = None


@dataclass(frozen=True)
class UnsupportedPaint:
    """Paint variant outside the known set; kept so stacking order survives"""

    type: str = ""
    visible: bool = True
    opacity: Optional[float] = None


Paint = Union[
    SolidPaint, LinearGradientPaint, RadialGradientPaint, ImagePaint, UnsupportedPaint
]


# --- Effects ---


@dataclass(frozen=True)
class DropShadowEffect:
    radius: float = 0.0
    offset: Vector = field(default_factory=Vector)
    spread: float = 0.0
    color: Color = field(default_factory=Color)
    visible: bool = True


@dataclass(frozen=True)
class InnerShadowEffect:
    radius: float = 0.0
    offset: Vector = field(default_factory=Vector)
    spread: float = 0.0
    color: Color = field(default_factory=Color)
    visible: bool = True


@dataclass(frozen=True)
class LayerBlurEffect:
    radius: float = 0.0
    visible: bool = True


@dataclass(frozen=True)
class BackgroundBlurEffect:
    radius: float = 0.0
    visible: bool = True


@dataclass(frozen=True)
class UnsupportedEffect:
    type: str = ""
    visible: bool = True


Effect = Union[
    DropShadowEffect,
    InnerShadowEffect,
    LayerBlurEffect,
    BackgroundBlurEffect,
    UnsupportedEffect,
]


@dataclass(frozen=True)
class TypeStyle:
    font_family: Optional[str] = None
    font_post_script_name: Optional[str] = None
    font_weight: Optional[float] = None
    font_size: Optional[float] = None
    text_align_horizontal: Optional[str] = None  # LEFT | RIGHT | CENTER | JUSTIFIED
    text_align_vertical: Optional[str] = None  # TOP | CENTER | BOTTOM
    letter_spacing: Optional[float] = None
    line_height_px: Optional[float] = None
    line_height_percent: Optional[float] = None


@dataclass(frozen=True)
class Node:
    id: str
    name: str = ""
    type: NodeType = NodeType.FRAME
    children: Optional[List["Node"]] = None
    absolute_bounding_box: Optional[BoundingBox] = None
    fills: Optional[List[Paint]] = None
    strokes: Optional[List[Paint]] = None
    stroke_weight: Optional[float] = None
    stroke_align: Optional[str] = None
    effects: Optional[List[Effect]] = None
    characters: Optional[str] = None
    style: Optional[TypeStyle] = None
    layout_mode: LayoutMode = LayoutMode.NONE
    layout_positioning: LayoutPositioning = LayoutPositioning.AUTO
    primary_axis_align_items: Optional[str] = None
    counter_axis_align_items: Optional[str] = None
    padding_left: Optional[float] = None
    padding_right: Optional[float] = None
    padding_top: Optional[float] = None
    padding_bottom: Optional[float] = None
    item_spacing: Optional[float] = None
    background_color: Optional[Color] = None
    opacity: Optional[float] = None
    visible: bool = True
    corner_radius: Optional[float] = None
    rectangle_corner_radii: Optional[List[float]] = None

    @property
    def is_text(self) -> bool:
        return self.type == NodeType.TEXT

    @property
    def has_auto_layout(self) -> bool:
        return self.layout_mode != LayoutMode.NONE

    @property
    def is_forced_absolute(self) -> bool:
        return self.layout_positioning == LayoutPositioning.ABSOLUTE

    def visible_children(self) -> List["Node"]:
        return [child for child in self.children or [] if child.visible]


@dataclass(frozen=True)
class ConversionResult:
    html: str
    css: str
