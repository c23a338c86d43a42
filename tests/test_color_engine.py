# tests/test_color_engine.py
import pytest

from motionkit.engine.color_engine import (
    InvalidColorFormat,
    animated_gradient_stops,
    assert_legible_text,
    complement,
    contrast_color,
    contrast_ratio,
    darken,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    interpolate_color,
    interpolate_colors,
    lighten,
    mix,
    normalize_hex,
    palette_ramp,
    pulsing_gradient,
    rgb_to_hex,
    rotating_gradient,
    with_alpha,
)
from motionkit.engine.sdk import MotionConfigError


def _hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


def test_hex_parsing_variants():
    assert hex_to_rgb("#ff8000") == (255, 128, 0)
    assert hex_to_rgb("FF8000") == (255, 128, 0)
    assert hex_to_rgb("#FFF") == (255, 255, 255)
    assert hex_to_rgb("abc") == (170, 187, 204)


@pytest.mark.parametrize("bad", ["#ff00", "#gggggg", "", "#1234567", "red", None, 0xFF0000])
def test_invalid_hex_raises(bad):
    with pytest.raises(InvalidColorFormat):
        hex_to_rgb(bad)


def test_invalid_color_is_a_config_error():
    assert issubclass(InvalidColorFormat, MotionConfigError)
    with pytest.raises(ValueError):
        interpolate_color("nope", "#000000", 0.5)


def test_rgb_to_hex_clamps_rounds_and_lowercases():
    assert rgb_to_hex(300, -5, 127.5) == "#ff0080"
    assert rgb_to_hex(171, 205, 239) == "#abcdef"


def test_rgb_round_trip_for_brand_colors(brand_colors):
    for color in brand_colors:
        assert rgb_to_hex(*hex_to_rgb(color)) == normalize_hex(color)
    assert normalize_hex("#ABC") == "#aabbcc"


def test_hsl_round_trip_for_brand_colors(brand_colors):
    for color in brand_colors:
        assert hsl_to_hex(*hex_to_hsl(color)) == normalize_hex(color)


def test_interpolate_color_endpoints_are_exact():
    assert interpolate_color("#FF0000", "#0000FF", 0) == "#ff0000"
    assert interpolate_color("#FF0000", "#0000FF", 1) == "#0000ff"
    assert interpolate_color("#FF0000", "#0000FF", -3) == "#ff0000"
    assert interpolate_color("#FF0000", "#0000FF", 7) == "#0000ff"


def test_interpolate_color_rgb_midpoint():
    assert interpolate_color("#000000", "#ffffff", 0.5) == "#808080"
    assert interpolate_color("#ff0000", "#0000ff", 0.5, "rgb") == "#800080"


def test_hsl_interpolation_takes_shortest_hue_path():
    start = hsl_to_hex(350, 100, 50)
    end = hsl_to_hex(10, 100, 50)
    mid = interpolate_color(start, end, 0.5, mode="hsl")
    h, s, _ = hex_to_hsl(mid)
    assert _hue_distance(h, 0) < 3
    assert s > 90


def test_unknown_mode_raises():
    with pytest.raises(MotionConfigError):
        interpolate_color("#000000", "#ffffff", 0.5, mode="lab")


def test_interpolate_colors_multi_stop():
    colors = ["#ff0000", "#00ff00", "#0000ff"]
    assert interpolate_colors(colors, 0) == "#ff0000"
    assert interpolate_colors(colors, 0.5) == "#00ff00"
    assert interpolate_colors(colors, 1) == "#0000ff"
    assert interpolate_colors(colors, 0.25) == interpolate_color("#ff0000", "#00ff00", 0.5)


def test_interpolate_colors_single_and_empty():
    assert interpolate_colors(["#ABCDEF"], 0.3) == "#abcdef"
    with pytest.raises(MotionConfigError):
        interpolate_colors([], 0.5)


def test_lighten_and_darken_clamp():
    assert lighten("#808080", 200) == "#ffffff"
    assert darken("#808080", 200) == "#000000"
    assert hex_to_hsl(lighten("#808080", 10))[2] > hex_to_hsl("#808080")[2]


def test_mix_weight_is_share_of_first_color():
    assert mix("#ff0000", "#0000ff", 1.0) == "#ff0000"
    assert mix("#ff0000", "#0000ff", 0.0) == "#0000ff"
    assert mix("#000000", "#ffffff") == "#808080"


def test_complement_and_alpha():
    assert complement("#ff0000") == "#00ffff"
    assert with_alpha("#ff8000", 0.5) == "rgba(255, 128, 0, 0.5)"
    assert with_alpha("#ff8000", 2) == "rgba(255, 128, 0, 1)"


def test_contrast_helpers():
    assert contrast_color("#ffffff") == "#000000"
    assert contrast_color("#000000") == "#ffffff"
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)


def test_assert_legible_text():
    assert_legible_text("#000000", "#ffffff")
    with pytest.raises(ValueError):
        assert_legible_text("#777777", "#888888")


def test_gradient_helpers():
    assert rotating_gradient(["#ff0000", "#0000ff"], 0.25) == "linear-gradient(90deg, #ff0000, #0000ff)"
    assert pulsing_gradient(["#a", "#b", "#c"], 0.4, angle=45) == "linear-gradient(45deg, #b, #c, #a)"
    assert animated_gradient_stops(["#ff0000", "#0000ff"], 0) == "#ff0000 0%, #0000ff 100%"
    assert animated_gradient_stops([], 0.3) == "transparent"


def test_palette_ramp():
    ramp = palette_ramp(["#000000", "#ffffff"], 3, mode="rgb")
    assert ramp == ["#000000", "#808080", "#ffffff"]
    with pytest.raises(MotionConfigError):
        palette_ramp(["#000000"], 0)
