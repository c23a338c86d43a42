#!/usr/bin/env python3
"""
Animation Preset Composer

Declarative presets are flat records of optional property ranges. `combine`
merges them last-writer-wins, `apply_preset` turns a progress value into a plain
style dict, and `animate` / `staggered_styles` drive presets from a frame index.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from motionkit.core import get_logger

from .progress import DEFAULT_SPRING, eased_progress, spring_progress
from .sdk import (
    FPS,
    AnimationConfig,
    AnimationPreset,
    EasedAnimationConfig,
    EasingFunction,
    MotionConfigError,
    PropertyRange,
    ShadowRange,
    SlideDirection,
    SpringConfig,
    StaggerDistribution,
    build_model,
    coerce_enum,
    format_number,
    spring_overrides,
)
from .stagger import calculate_stagger_delay

log = get_logger("motionkit.presets")

Style = Dict[str, Any]

# Numeric properties in the order their transforms are composed
_TRANSFORM_PROPERTIES = ("translate_y", "translate_x", "scale", "rotate")

SHADOW_DEPTHS = {
    1: ShadowRange(start="0 0 0 0 rgba(0, 0, 0, 0)", end="0 2px 4px 0 rgba(0, 0, 0, 0.1)"),
    2: ShadowRange(start="0 0 0 0 rgba(0, 0, 0, 0)", end="0 4px 8px 0 rgba(0, 0, 0, 0.15)"),
    3: ShadowRange(start="0 0 0 0 rgba(0, 0, 0, 0)", end="0 8px 16px 0 rgba(0, 0, 0, 0.2)"),
}


def _span(start: float, end: float) -> PropertyRange:
    return PropertyRange(start=start, end=end)


def _with_spring(preset: AnimationPreset, base: Optional[Dict] = None, **overrides) -> AnimationConfig:
    fields = dict(DEFAULT_SPRING.model_dump())
    if base:
        fields.update(base)
    fields.update(overrides)
    return AnimationConfig(preset=preset, spring=build_model(SpringConfig, **fields))


# ---------------------------------------------------------------------------
# Spring-driven presets
# ---------------------------------------------------------------------------

def fade_in(**spring) -> AnimationConfig:
    return _with_spring(AnimationPreset(opacity=_span(0, 1)), **spring)


def fade_in_up(distance: float = 30, **spring) -> AnimationConfig:
    preset = AnimationPreset(opacity=_span(0, 1), translate_y=_span(distance, 0))
    return _with_spring(preset, **spring)


def fade_in_down(distance: float = 30, **spring) -> AnimationConfig:
    preset = AnimationPreset(opacity=_span(0, 1), translate_y=_span(-distance, 0))
    return _with_spring(preset, **spring)


def fade_in_left(distance: float = 30, **spring) -> AnimationConfig:
    preset = AnimationPreset(opacity=_span(0, 1), translate_x=_span(-distance, 0))
    return _with_spring(preset, **spring)


def fade_in_right(distance: float = 30, **spring) -> AnimationConfig:
    preset = AnimationPreset(opacity=_span(0, 1), translate_x=_span(distance, 0))
    return _with_spring(preset, **spring)


def scale_in(start_scale: float = 0.8, **spring) -> AnimationConfig:
    return _with_spring(AnimationPreset(opacity=_span(0, 1), scale=_span(start_scale, 1)), **spring)


def blur_in(blur_amount: float = 10, **spring) -> AnimationConfig:
    return _with_spring(AnimationPreset(opacity=_span(0, 1), blur=_span(blur_amount, 0)), **spring)


def pop_in(**spring) -> AnimationConfig:
    preset = AnimationPreset(opacity=_span(0, 1), scale=_span(0.5, 1))
    return _with_spring(preset, base={"damping": 60, "mass": 0.4, "stiffness": 300}, **spring)


def rotate_in(degrees: float = 10, **spring) -> AnimationConfig:
    return _with_spring(AnimationPreset(opacity=_span(0, 1), rotate=_span(degrees, 0)), **spring)


def glow_in(color: str = "rgba(100, 150, 255, 0.6)", **spring) -> AnimationConfig:
    preset = AnimationPreset(
        opacity=_span(0, 1),
        glow=ShadowRange(start="0 0 0 0 transparent", end=f"0 0 20px 5px {color}"),
    )
    return _with_spring(preset, **spring)


def shadow_in(depth: int = 1, **spring) -> AnimationConfig:
    """Fade in with a growing box shadow; depth 1 (subtle) to 3 (deep)."""
    clamped = min(3, max(1, int(depth)))
    if clamped != depth:
        log.debug(f"shadow_in depth {depth} clamped to {clamped}")
    preset = AnimationPreset(opacity=_span(0, 1), box_shadow=SHADOW_DEPTHS[clamped])
    return _with_spring(preset, **spring)


def blur_out(blur_amount: float = 10, **spring) -> AnimationConfig:
    return _with_spring(AnimationPreset(opacity=_span(1, 0), blur=_span(0, blur_amount)), **spring)


# ---------------------------------------------------------------------------
# Eased presets
# ---------------------------------------------------------------------------

def fade_in_eased(
    easing: Union[str, EasingFunction] = "linear",
    duration_in_frames: float = 30,
) -> EasedAnimationConfig:
    return build_model(
        EasedAnimationConfig,
        preset=AnimationPreset(opacity=_span(0, 1)),
        easing=easing,
        duration_in_frames=duration_in_frames,
    )


def slide_in_eased(
    direction: Union[str, SlideDirection] = SlideDirection.UP,
    easing: Union[str, EasingFunction] = "linear",
    distance: float = 50,
    duration_in_frames: float = 30,
) -> EasedAnimationConfig:
    """Fade in while sliding from `direction` over `distance` pixels."""
    direction = coerce_enum(SlideDirection, direction)
    fields = {"opacity": _span(0, 1)}
    if direction is SlideDirection.UP:
        fields["translate_y"] = _span(distance, 0)
    elif direction is SlideDirection.DOWN:
        fields["translate_y"] = _span(-distance, 0)
    elif direction is SlideDirection.LEFT:
        fields["translate_x"] = _span(distance, 0)
    else:
        fields["translate_x"] = _span(-distance, 0)
    return build_model(
        EasedAnimationConfig,
        preset=AnimationPreset(**fields),
        easing=easing,
        duration_in_frames=duration_in_frames,
    )


def scale_in_eased(
    easing: Union[str, EasingFunction] = "linear",
    start_scale: float = 0.8,
    duration_in_frames: float = 30,
) -> EasedAnimationConfig:
    return build_model(
        EasedAnimationConfig,
        preset=AnimationPreset(opacity=_span(0, 1), scale=_span(start_scale, 1)),
        easing=easing,
        duration_in_frames=duration_in_frames,
    )


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def merge_presets(presets: Sequence[AnimationPreset]) -> AnimationPreset:
    """Later presets win on every property they declare."""
    fields: Dict[str, Any] = {}
    for preset in presets:
        fields.update({k: v for k, v in preset if v is not None})
    return AnimationPreset(**fields)


def combine(animations: Sequence[AnimationConfig]) -> AnimationConfig:
    """
    Merge spring-driven animations into one.

    Property ranges merge last-writer-wins; spring configs merge shallowly on top
    of DEFAULT_SPRING, taking only the fields each config explicitly set.
    """
    spring_fields = dict(DEFAULT_SPRING.model_dump())
    for anim in animations:
        spring_fields.update(spring_overrides(anim.spring))
    return AnimationConfig(
        preset=merge_presets([anim.preset for anim in animations]),
        spring=build_model(SpringConfig, **spring_fields),
    )


def apply_preset(progress: float, preset: AnimationPreset) -> Style:
    """
    Concrete style values for a preset at a progress value.

    Numeric properties are interpolated start + (end - start) * progress and
    reported both as raw numbers and composed into "transform" / "filter"
    strings. Shadow and glow switch discretely at progress 0.5; glow wins over
    box_shadow when both are declared.
    """
    style: Style = {}

    if preset.opacity is not None:
        style["opacity"] = preset.opacity.at(progress)

    transforms: List[str] = []
    for name in _TRANSFORM_PROPERTIES:
        rng = getattr(preset, name)
        if rng is None:
            continue
        value = rng.at(progress)
        style[name] = value
        if name == "translate_y":
            transforms.append(f"translateY({format_number(value)}px)")
        elif name == "translate_x":
            transforms.append(f"translateX({format_number(value)}px)")
        elif name == "scale":
            transforms.append(f"scale({format_number(value)})")
        else:
            transforms.append(f"rotate({format_number(value)}deg)")
    if transforms:
        style["transform"] = " ".join(transforms)

    if preset.blur is not None:
        value = preset.blur.at(progress)
        style["blur"] = value
        style["filter"] = f"blur({format_number(value)}px)"

    if preset.box_shadow is not None:
        style["box_shadow"] = preset.box_shadow.at(progress)
    if preset.glow is not None:
        style["box_shadow"] = preset.glow.at(progress)

    return style


def animate(
    frame: float,
    start_frame: float,
    config: Union[AnimationConfig, EasedAnimationConfig],
    fps: float = FPS,
) -> Style:
    """Evaluate a spring- or easing-driven animation at a frame."""
    if isinstance(config, EasedAnimationConfig):
        value = eased_progress(frame, start_frame, config.duration_in_frames, config.easing)
    elif isinstance(config, AnimationConfig):
        value = spring_progress(frame, fps=fps, config=config.spring, delay=start_frame)
    else:
        raise MotionConfigError(f"Unsupported animation config: {type(config).__name__}")
    return apply_preset(value, config.preset)


def staggered_styles(
    frame: float,
    total_items: int,
    config: Union[AnimationConfig, EasedAnimationConfig],
    base_delay_frames: float = 3,
    distribution: Union[str, StaggerDistribution] = StaggerDistribution.LINEAR,
    start_frame: float = 0,
    fps: float = FPS,
) -> List[Style]:
    """One style per item, each item starting at start_frame + its stagger delay."""
    return [
        animate(
            frame,
            start_frame + calculate_stagger_delay(i, total_items, base_delay_frames, distribution),
            config,
            fps=fps,
        )
        for i in range(total_items)
    ]
