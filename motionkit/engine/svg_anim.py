#!/usr/bin/env python3
"""
SVG Animation Math

Stroke-draw dash patterns, circular progress rings, naive path morphing, filter
values and SVG transform strings. Every function takes a progress value and
returns plain numbers or strings for the renderer.
"""

import math
import re
from typing import Dict, List, Optional, Union

from motionkit.core import get_logger

from .sdk import (
    ArcDrawResult,
    MotionConfigError,
    StrokeDrawResult,
    clamp,
    format_number,
    lerp,
)

log = get_logger("motionkit.svg_anim")

RING_START_ROTATION = "rotate(-90deg)"
RING_TRANSFORM_ORIGIN = "50% 50%"

_PATH_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _require_non_negative(name: str, value: float) -> None:
    if value < 0 or math.isnan(value):
        raise MotionConfigError(f"{name} must be >= 0, got {value}")


# ---------------------------------------------------------------------------
# Stroke draw
# ---------------------------------------------------------------------------

def calculate_stroke_draw(path_length: float, progress: float, reverse: bool = False) -> StrokeDrawResult:
    """
    Dash properties that reveal `progress` of a path.

    At progress 0 nothing is visible (offset == path_length); at progress 1 the
    whole path is drawn (offset == 0). With reverse=True the path undraws by
    sliding the dash backwards instead.

    Raises:
        MotionConfigError: If path_length is negative
    """
    _require_non_negative("path_length", path_length)
    t = clamp(progress)
    offset = -path_length * t if reverse else path_length * (1 - t)
    return StrokeDrawResult(dash_array=path_length, dash_offset=offset)


def stroke_draw_style(progress: float, path_length: float, reverse: bool = False) -> Dict[str, Union[str, float]]:
    result = calculate_stroke_draw(path_length, progress, reverse)
    return {
        "stroke_dasharray": format_number(result.dash_array),
        "stroke_dashoffset": result.dash_offset,
        "fill": "none",
    }


# ---------------------------------------------------------------------------
# Circles and rings
# ---------------------------------------------------------------------------

def animated_circle(
    progress: float,
    radius: float,
    start_angle: float = 0.0,
    end_angle: float = 360.0,
) -> ArcDrawResult:
    """Dash pattern that grows an arc from start_angle toward end_angle."""
    _require_non_negative("radius", radius)
    circumference = 2 * math.pi * radius
    arc_length = (end_angle - start_angle) / 360 * circumference
    t = clamp(progress)
    transform = f"rotate({format_number(start_angle)}deg)" if start_angle != 0 else None
    return ArcDrawResult(dash_pattern=(arc_length * t, circumference), dash_offset=0.0, transform=transform)


def progress_ring(progress: float, radius: float) -> StrokeDrawResult:
    """
    Circular stroke draw that starts at 12 o'clock.

    Raises:
        MotionConfigError: If radius is negative
    """
    _require_non_negative("radius", radius)
    circumference = 2 * math.pi * radius
    t = clamp(progress)
    return StrokeDrawResult(
        dash_array=circumference,
        dash_offset=circumference * (1 - t),
        transform=RING_START_ROTATION,
        transform_origin=RING_TRANSFORM_ORIGIN,
    )


# ---------------------------------------------------------------------------
# Path morphing
# ---------------------------------------------------------------------------

def extract_path_numbers(path: str) -> List[float]:
    return [float(m) for m in _PATH_NUMBER_RE.findall(path)]


def _rebuild_path(template: str, numbers: List[float]) -> str:
    values = iter(numbers)
    return _PATH_NUMBER_RE.sub(lambda _m: f"{next(values):.2f}", template)


def interpolate_path(path_a: str, path_b: str, progress: float) -> str:
    """
    Positional interpolation between two SVG path strings.

    Numeric tokens are paired by position and blended; commands come from path_a.
    Paths with a different number of numeric tokens cannot be paired, so the
    result switches from path_a to path_b at progress 0.5.
    """
    t = clamp(progress)
    numbers_a = extract_path_numbers(path_a)
    numbers_b = extract_path_numbers(path_b)

    if len(numbers_a) != len(numbers_b):
        log.debug(f"Path token count mismatch ({len(numbers_a)} vs {len(numbers_b)}); switching at 0.5")
        return path_a if t < 0.5 else path_b

    blended = [lerp(a, b, t) for a, b in zip(numbers_a, numbers_b)]
    return _rebuild_path(path_a, blended)


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def animated_blur(progress: float, max_blur: float, invert: bool = False) -> str:
    t = clamp(progress)
    amount = max_blur * (1 - t) if invert else max_blur * t
    return f"blur({format_number(amount)}px)"


def animated_gaussian_blur(progress: float, max_deviation: float) -> Dict[str, float]:
    return {"std_deviation": max_deviation * clamp(progress)}


def animated_drop_shadow(
    progress: float,
    max_offset_x: float = 0.0,
    max_offset_y: float = 4.0,
    max_blur: float = 8.0,
    color: str = "rgba(0, 0, 0, 0.25)",
) -> str:
    t = clamp(progress)
    return (
        f"drop-shadow({format_number(max_offset_x * t)}px {format_number(max_offset_y * t)}px "
        f"{format_number(max_blur * t)}px {color})"
    )


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------

def animated_rotation(
    progress: float,
    start_angle: float = 0.0,
    end_angle: float = 360.0,
    center_x: float = 0.0,
    center_y: float = 0.0,
) -> str:
    angle = lerp(start_angle, end_angle, clamp(progress))
    return f"rotate({format_number(angle)}, {format_number(center_x)}, {format_number(center_y)})"


def animated_scale(
    progress: float,
    start_scale: float = 0.0,
    end_scale: float = 1.0,
    center_x: Optional[float] = None,
    center_y: Optional[float] = None,
) -> str:
    """
    Scale transform, optionally about a pivot.

    With both center_x and center_y the scale is wrapped in a
    translate-scale-translate so the pivot stays fixed.
    """
    value = format_number(lerp(start_scale, end_scale, clamp(progress)))
    if center_x is not None and center_y is not None:
        return (
            f"translate({format_number(center_x)}, {format_number(center_y)}) "
            f"scale({value}) "
            f"translate({format_number(-center_x)}, {format_number(-center_y)})"
        )
    return f"scale({value})"


def combine_transforms(*transforms: Optional[str]) -> str:
    return " ".join(t for t in transforms if t)
