import pytest

from figma2html.src.figma_types import (
    Color,
    ColorStop,
    ImagePaint,
    LinearGradientPaint,
    RadialGradientPaint,
    SolidPaint,
    UnsupportedPaint,
    Vector,
)
from figma2html.src.paint import (
    IMAGE_PLACEHOLDER,
    gradient_angle,
    linear_gradient_to_css,
    resolve_background,
    resolve_border,
    topmost_visible_paint,
)

RED = Color(r=1, g=0, b=0, a=1)
BLUE = Color(r=0, g=0, b=1, a=1)


def horizontal_gradient(**kwargs) -> LinearGradientPaint:
    return LinearGradientPaint(
        gradient_handle_positions=[Vector(0, 0), Vector(1, 0), Vector(0, 1)],
        gradient_stops=[ColorStop(0, RED), ColorStop(1, BLUE)],
        **kwargs,
    )


class TestResolveBackground:
    def test_solid_fill(self) -> None:
        assert resolve_background([SolidPaint(color=RED)]) == "rgba(255, 0, 0, 1)"

    def test_paint_opacity_overrides_color_alpha(self) -> None:
        fills = [SolidPaint(color=Color(r=0, g=0, b=0, a=1), opacity=0.5)]
        assert resolve_background(fills) == "rgba(0, 0, 0, 0.5)"

    def test_last_visible_fill_wins(self) -> None:
        # Given: 위쪽 fill이 숨겨진 경우
        fills = [
            SolidPaint(color=RED),
            SolidPaint(color=BLUE),
            SolidPaint(color=Color(r=0, g=1, b=0), visible=False),
        ]

        # When / Then
        assert resolve_background(fills) == "rgba(0, 0, 255, 1)"

    @pytest.mark.parametrize("fills", [None, [], [SolidPaint(color=RED, visible=False)]])
    def test_no_visible_fill(self, fills) -> None:
        assert resolve_background(fills) is None

    def test_linear_gradient(self) -> None:
        assert resolve_background([horizontal_gradient()]) == (
            "linear-gradient(90deg, rgba(255, 0, 0, 1) 0%, rgba(0, 0, 255, 1) 100%)"
        )

    def test_image_uses_placeholder(self) -> None:
        assert resolve_background([ImagePaint(image_ref="abc")]) == IMAGE_PLACEHOLDER

    @pytest.mark.parametrize(
        "paint",
        [
            RadialGradientPaint(
                gradient_handle_positions=[Vector(0.5, 0.5), Vector(1, 0.5)],
                gradient_stops=[ColorStop(0, RED), ColorStop(1, BLUE)],
            ),
            UnsupportedPaint(type="VIDEO"),
        ],
    )
    def test_unsupported_paints_emit_nothing(self, paint) -> None:
        assert resolve_background([paint]) is None

    def test_topmost_visible_paint(self) -> None:
        top = SolidPaint(color=BLUE)
        assert topmost_visible_paint([SolidPaint(color=RED), top]) is top


class TestLinearGradient:
    @pytest.mark.parametrize(
        "end, expected",
        [(Vector(1, 0), 90), (Vector(0, 1), 180), (Vector(1, 1), 135), (Vector(-1, 0), 270)],
    )
    def test_gradient_angle(self, end: Vector, expected: float) -> None:
        assert gradient_angle(Vector(0, 0), end) == pytest.approx(expected)

    def test_stop_positions_are_rounded_percentages(self) -> None:
        paint = LinearGradientPaint(
            gradient_handle_positions=[Vector(0, 0), Vector(1, 0)],
            gradient_stops=[ColorStop(0.333, RED), ColorStop(0.675, BLUE)],
        )
        assert linear_gradient_to_css(paint) == (
            "linear-gradient(90deg, rgba(255, 0, 0, 1) 33%, rgba(0, 0, 255, 1) 68%)"
        )

    def test_missing_handles_or_stops(self) -> None:
        assert (
            linear_gradient_to_css(
                LinearGradientPaint(
                    gradient_handle_positions=[Vector(0, 0)],
                    gradient_stops=[ColorStop(0, RED)],
                )
            )
            is None
        )
        assert (
            linear_gradient_to_css(
                LinearGradientPaint(gradient_handle_positions=[Vector(0, 0), Vector(1, 0)])
            )
            is None
        )


class TestResolveBorder:
    def test_solid_stroke(self) -> None:
        assert resolve_border([SolidPaint(color=RED)], 2) == "2px solid rgba(255, 0, 0, 1)"

    @pytest.mark.parametrize("weight", [None, 0, -1])
    def test_requires_positive_weight(self, weight) -> None:
        assert resolve_border([SolidPaint(color=RED)], weight) is None

    def test_non_solid_stroke_is_ignored(self) -> None:
        assert resolve_border([horizontal_gradient()], 1) is None

    def test_hidden_stroke_is_ignored(self) -> None:
        assert resolve_border([SolidPaint(color=RED, visible=False)], 1) is None
