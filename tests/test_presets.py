# tests/test_presets.py
import pytest

from motionkit.engine.presets import (
    SHADOW_DEPTHS,
    animate,
    apply_preset,
    blur_in,
    blur_out,
    combine,
    fade_in,
    fade_in_down,
    fade_in_eased,
    fade_in_left,
    fade_in_right,
    fade_in_up,
    glow_in,
    pop_in,
    rotate_in,
    scale_in,
    scale_in_eased,
    shadow_in,
    slide_in_eased,
    staggered_styles,
)
from motionkit.engine.progress import DEFAULT_SPRING
from motionkit.engine.sdk import (
    AnimationConfig,
    AnimationPreset,
    MotionConfigError,
    PropertyRange,
    SpringConfig,
)


def test_fade_in_up_midpoint_style():
    style = apply_preset(0.5, fade_in_up(distance=30).preset)
    assert style["opacity"] == 0.5
    assert style["translate_y"] == 15
    assert style["transform"] == "translateY(15px)"


def test_directional_fades_start_offsets():
    assert fade_in_down(20).preset.translate_y.start == -20
    assert fade_in_left(20).preset.translate_x.start == -20
    assert fade_in_right(20).preset.translate_x.start == 20


def test_transform_composition_order():
    preset = AnimationPreset(
        translate_x=PropertyRange(start=5, end=5),
        translate_y=PropertyRange(start=10, end=10),
        scale=PropertyRange(start=0.9, end=0.9),
        rotate=PropertyRange(start=3, end=3),
    )
    style = apply_preset(0.3, preset)
    assert style["transform"] == "translateY(10px) translateX(5px) scale(0.9) rotate(3deg)"
    assert "opacity" not in style


def test_blur_and_rotate_styles():
    style = apply_preset(0.5, blur_in(10).preset)
    assert style["blur"] == 5
    assert style["filter"] == "blur(5px)"
    assert apply_preset(1, blur_out(10).preset)["opacity"] == 0
    assert apply_preset(0, rotate_in(12).preset)["transform"] == "rotate(12deg)"
    assert apply_preset(0, scale_in(0.8).preset)["transform"] == "scale(0.8)"


def test_shadow_and_glow_switch_at_midpoint():
    shadow = shadow_in(depth=2).preset
    assert apply_preset(0.49, shadow)["box_shadow"] == SHADOW_DEPTHS[2].start
    assert apply_preset(0.5, shadow)["box_shadow"] == SHADOW_DEPTHS[2].end
    glow = glow_in("red").preset
    assert apply_preset(1, glow)["box_shadow"] == "0 0 20px 5px red"


def test_shadow_depth_is_clamped():
    assert shadow_in(depth=7).preset.box_shadow == SHADOW_DEPTHS[3]
    assert shadow_in(depth=0).preset.box_shadow == SHADOW_DEPTHS[1]


def test_spring_overrides_on_factories():
    assert fade_in().spring == DEFAULT_SPRING
    pop = pop_in()
    assert (pop.spring.damping, pop.spring.mass, pop.spring.stiffness) == (60, 0.4, 300)
    assert pop_in(damping=20).spring.damping == 20
    with pytest.raises(MotionConfigError):
        fade_in(mass=0)


def test_combine_is_last_writer_wins():
    merged = combine([fade_in_up(distance=30), fade_in_down(distance=10), scale_in(0.5)])
    assert merged.preset.translate_y.start == -10
    assert merged.preset.scale.start == 0.5
    assert merged.preset.opacity == PropertyRange(start=0, end=1)


def test_combine_merges_explicit_spring_fields():
    a = AnimationConfig(preset=AnimationPreset(opacity=PropertyRange(start=0, end=1)), spring=SpringConfig(mass=2))
    b = AnimationConfig(preset=AnimationPreset(scale=PropertyRange(start=0, end=1)), spring=SpringConfig(damping=10))
    merged = combine([a, b])
    assert merged.spring.mass == 2
    assert merged.spring.damping == 10
    assert merged.spring.stiffness == DEFAULT_SPRING.stiffness
    assert merged.preset.opacity is not None and merged.preset.scale is not None


def test_combine_of_nothing_is_default():
    merged = combine([])
    assert merged.spring == DEFAULT_SPRING
    assert apply_preset(0.5, merged.preset) == {}


def test_eased_factories():
    cfg = slide_in_eased("left", easing="ease_in", distance=40, duration_in_frames=10)
    assert cfg.preset.translate_x.start == 40
    assert animate(5, 0, cfg)["translate_x"] == pytest.approx(40 - 40 * 0.25)
    assert slide_in_eased("down").preset.translate_y.start == -50
    assert animate(30, 0, fade_in_eased())["opacity"] == 1
    assert animate(0, 0, scale_in_eased(start_scale=0.5))["scale"] == 0.5
    with pytest.raises(MotionConfigError):
        slide_in_eased("diagonal")


def test_animate_spring_config():
    cfg = fade_in_up()
    before = animate(4, 5, cfg)
    assert before["opacity"] == 0
    assert before["translate_y"] == 30
    settled = animate(500, 5, cfg)
    assert settled["opacity"] == 1
    assert settled["translate_y"] == 0


def test_animate_rejects_unknown_config():
    with pytest.raises(MotionConfigError):
        animate(0, 0, {"preset": {}})


def test_staggered_fade_in_up_list():
    """5 items, 3 frames apart, each sliding up over 20 frames."""
    cfg = slide_in_eased("up", easing="linear", distance=30, duration_in_frames=20)

    at_start = staggered_styles(0, 5, cfg, base_delay_frames=3, distribution="linear")
    assert [s["opacity"] for s in at_start] == [0, 0, 0, 0, 0]

    at_three = staggered_styles(3, 5, cfg, base_delay_frames=3, distribution="linear")
    assert 0 < at_three[0]["opacity"] < 1
    assert [s["opacity"] for s in at_three[1:]] == [0, 0, 0, 0]

    # Last item starts at frame 12 and runs 20 frames
    for frame in (32, 40):
        done = staggered_styles(frame, 5, cfg, base_delay_frames=3, distribution="linear")
        assert [s["opacity"] for s in done] == [1, 1, 1, 1, 1]
        assert [s["translate_y"] for s in done] == [0, 0, 0, 0, 0]


def test_staggered_spring_list_settles():
    styles = staggered_styles(1000, 5, fade_in_up(), base_delay_frames=3, start_frame=10)
    assert all(s["opacity"] == 1 and s["translate_y"] == 0 for s in styles)
    early = staggered_styles(12, 5, fade_in_up(), base_delay_frames=3, start_frame=10)
    assert early[0]["opacity"] > 0
    assert early[1]["opacity"] == 0
