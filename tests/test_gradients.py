"""Tests for easing, interpolation, gradient sequencing and color-level palettes."""

import pytest

from blockpalette.color.color import Color
from blockpalette.color.gradients import (
    gradient_colors,
    gradient_from_config,
    multi_gradient_colors,
    segment_step_counts,
)
from blockpalette.color.interpolation import apply_easing, interpolate, interpolate_hue
from blockpalette.color.palettes import (
    complementary_colors,
    distinct_colors,
    monochrome_colors,
    sort_by_hue,
    sort_by_lightness,
    theme_gradient_colors,
    theme_gradient_names,
)
from blockpalette.models import ColorSpace, EasingFunction, GradientConfig

RED = Color((255, 0, 0))
GREEN = Color((0, 255, 0))
BLUE = Color((0, 0, 255))


class TestEasing:
    @pytest.mark.parametrize("easing", list(EasingFunction))
    def test_boundaries(self, easing):
        assert apply_easing(0.0, easing) == pytest.approx(0.0)
        assert apply_easing(1.0, easing) == pytest.approx(1.0)

    def test_exponential_starts_at_zero(self):
        assert apply_easing(0.0, EasingFunction.EXPONENTIAL) == 0.0

    def test_ease_in_is_slow_at_start(self):
        assert apply_easing(0.25, EasingFunction.EASE_IN) < 0.25
        assert apply_easing(0.25, EasingFunction.EASE_OUT) > 0.25

    def test_ease_in_out_midpoint(self):
        assert apply_easing(0.5, EasingFunction.EASE_IN_OUT) == pytest.approx(0.5)


class TestInterpolation:
    def test_hue_takes_short_arc(self):
        assert interpolate_hue(350.0, 10.0, 0.5) == pytest.approx(0.0)
        assert interpolate_hue(10.0, 350.0, 0.5) == pytest.approx(0.0)

    def test_hue_result_normalized(self):
        assert 0.0 <= interpolate_hue(340.0, 30.0, 0.9) < 360.0

    def test_hsl_wraparound_stays_red(self):
        start = Color.from_hsl(350, 1.0, 0.5)
        end = Color.from_hsl(10, 1.0, 0.5)
        hue = interpolate(start, end, 0.5, ColorSpace.HSL).hue
        assert min(hue, 360.0 - hue) < 5.0

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_endpoints(self, space):
        assert interpolate(RED, BLUE, 0.0, space) == RED
        assert interpolate(RED, BLUE, 1.0, space) == BLUE

    def test_rgb_midpoint(self):
        assert interpolate(Color((0, 0, 0)), Color((200, 100, 50)), 0.5, ColorSpace.RGB).rgb == (
            100,
            50,
            25,
        )


class TestGradientColors:
    def test_zero_steps(self):
        assert gradient_colors(RED, BLUE, 0) == []

    def test_one_step_is_start(self):
        assert gradient_colors(RED, BLUE, 1) == [RED]

    def test_two_steps_are_endpoints(self):
        result = gradient_colors(RED, BLUE, 2, easing=EasingFunction.EXPONENTIAL)
        assert result == [RED, BLUE]

    @pytest.mark.parametrize("steps", [3, 5, 10])
    def test_length_and_endpoints(self, steps):
        result = gradient_colors(RED, BLUE, steps, ColorSpace.RGB)
        assert len(result) == steps
        assert result[0] == RED
        assert result[-1] == BLUE

    def test_from_config(self):
        config = GradientConfig(steps=4, color_space=ColorSpace.RGB)
        assert len(gradient_from_config(RED, BLUE, config)) == 4


class TestMultiGradient:
    def test_segment_counts_cover_steps(self):
        for segments in range(1, 6):
            for steps in range(2, 30):
                counts = segment_step_counts(segments, steps)
                assert sum(counts) - (segments - 1) == steps

    def test_empty(self):
        assert multi_gradient_colors([], 5) == []
        assert multi_gradient_colors([RED, BLUE], 0) == []

    def test_single_anchor_repeats(self):
        assert multi_gradient_colors([RED], 3) == [RED, RED, RED]

    @pytest.mark.parametrize("steps", [2, 3, 7, 10, 11])
    def test_exact_length_and_endpoints(self, steps):
        anchors = [RED, GREEN, BLUE]
        result = multi_gradient_colors(anchors, steps, ColorSpace.RGB)
        assert len(result) == steps
        assert result[0] == RED
        assert result[-1] == BLUE

    def test_passes_through_middle_anchor(self):
        result = multi_gradient_colors([RED, GREEN, BLUE], 5, ColorSpace.RGB)
        assert GREEN in result


class TestColorPalettes:
    def test_complementary(self):
        palette = complementary_colors(RED)
        assert len(palette) == 4
        assert palette[0] == RED
        assert palette[1].rgb == (0, 255, 255)

    def test_monochrome_lengths(self):
        assert monochrome_colors(RED, 0) == []
        assert monochrome_colors(RED, 1) == [RED]
        for steps in range(2, 10):
            assert len(monochrome_colors(RED, steps)) == steps

    def test_monochrome_dark_to_light(self):
        colors = monochrome_colors(Color((161, 39, 35)), 7)
        assert colors[0] == Color((0, 0, 0))
        assert colors[-1] == Color((255, 255, 255))
        assert colors[3] == Color((161, 39, 35))

    def test_distinct_colors(self):
        colors = [RED, Color((250, 5, 5)), BLUE, Color((5, 5, 250)), GREEN]
        picked = distinct_colors(colors, 3)
        assert picked[0] == RED
        assert set(picked) == {RED, BLUE, GREEN}

    def test_distinct_colors_short_input(self):
        assert distinct_colors([RED], 5) == [RED]

    def test_sorts(self):
        assert sort_by_hue([BLUE, GREEN, RED]) == [RED, GREEN, BLUE]
        grey = Color((128, 128, 128))
        assert sort_by_lightness([Color((255, 255, 255)), grey, Color((0, 0, 0))])[1] == grey

    def test_theme_gradients(self):
        assert set(theme_gradient_names()) == {"sunset", "ocean", "forest", "fire"}
        fire = theme_gradient_colors("fire", 9)
        assert len(fire) == 9
        assert fire[0] == Color((255, 255, 0))
        assert fire[-1] == Color((139, 0, 0))

    def test_unknown_theme(self):
        assert theme_gradient_colors("volcano", 5) is None
