"""
Motionkit Engine Package

Frame-deterministic animation math: easings, colour interpolation, progress
calculators, stagger scheduling, SVG stroke math and preset composition.
"""

from typing import Any, Dict, Optional

from motionkit.core import GlobalCfg, load_config

from .color_engine import (
    InvalidColorFormat,
    animated_gradient_stops,
    complement,
    contrast_color,
    contrast_ratio,
    darken,
    desaturate,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    interpolate_color,
    interpolate_colors,
    lighten,
    mix,
    palette_ramp,
    pulsing_gradient,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    rotating_gradient,
    saturate,
    with_alpha,
)
from .easings import BEZIER_PRESETS, EASING_PRESETS, cubic_bezier, get_easing
from .presets import (
    animate,
    apply_preset,
    combine,
    fade_in,
    fade_in_eased,
    fade_in_up,
    pop_in,
    scale_in,
    slide_in_eased,
    staggered_styles,
)
from .progress import (
    DEFAULT_SPRING,
    SPRING_PRESETS,
    eased_progress,
    get_spring_preset,
    interpolate,
    measure_spring,
    progress,
    spring_progress,
)
from .sdk import (  # Constants; Enums; Models; Errors
    FPS,
    AnimationConfig,
    AnimationPreset,
    ColorMode,
    EasedAnimationConfig,
    EasedProgressConfig,
    Keyframe,
    MotionConfigError,
    PropertyRange,
    SpringConfig,
    StaggerDistribution,
    StrokeDrawResult,
    coerce_enum,
)
from .stagger import calculate_stagger_delay, create_stagger_delays, stagger_total_duration
from .svg_anim import (
    animated_circle,
    calculate_stroke_draw,
    combine_transforms,
    interpolate_path,
    progress_ring,
    stroke_draw_style,
)
from .transforms import interpolate_keyframes, make_transform


def engine_defaults(cfg: Optional[GlobalCfg] = None) -> Dict[str, Any]:
    """
    Engine-level defaults resolved from configuration.

    Engine functions never read config themselves; callers that want the
    configured defaults fetch them here and pass them in explicitly.
    """
    cfg = cfg or load_config()
    return {
        "fps": cfg.render.fps,
        "spring": SpringConfig(**cfg.spring.model_dump()),
        "easing": get_easing(cfg.easing.default),
        "bezier_tolerance": cfg.easing.bezier_tolerance,
        "stagger_base_delay_frames": cfg.stagger.base_delay_frames,
        "stagger_distribution": coerce_enum(StaggerDistribution, cfg.stagger.distribution),
        "item_duration_frames": cfg.stagger.item_duration_frames,
    }


__version__ = "0.1.0"
__all__ = [
    "FPS",
    "ColorMode",
    "StaggerDistribution",
    "MotionConfigError",
    "InvalidColorFormat",
    "SpringConfig",
    "EasedProgressConfig",
    "PropertyRange",
    "AnimationPreset",
    "AnimationConfig",
    "EasedAnimationConfig",
    "StrokeDrawResult",
    "Keyframe",
    "EASING_PRESETS",
    "BEZIER_PRESETS",
    "cubic_bezier",
    "get_easing",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "interpolate_color",
    "interpolate_colors",
    "animated_gradient_stops",
    "rotating_gradient",
    "pulsing_gradient",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "with_alpha",
    "mix",
    "complement",
    "contrast_color",
    "relative_luminance",
    "contrast_ratio",
    "palette_ramp",
    "DEFAULT_SPRING",
    "SPRING_PRESETS",
    "get_spring_preset",
    "eased_progress",
    "spring_progress",
    "measure_spring",
    "interpolate",
    "progress",
    "calculate_stagger_delay",
    "create_stagger_delays",
    "stagger_total_duration",
    "calculate_stroke_draw",
    "stroke_draw_style",
    "animated_circle",
    "progress_ring",
    "interpolate_path",
    "combine_transforms",
    "combine",
    "apply_preset",
    "animate",
    "staggered_styles",
    "fade_in",
    "fade_in_up",
    "scale_in",
    "pop_in",
    "fade_in_eased",
    "slide_in_eased",
    "make_transform",
    "interpolate_keyframes",
    "engine_defaults",
]
