#!/usr/bin/env python3
"""
CSS Transform Helpers

Small builders for CSS transform strings plus a handful of composed effects
(entrance, pop, shake, flip, tilt, parallax, zoom, Ken Burns) and keyframe
interpolation. All inputs are explicit; nothing reads the clock.
"""

import math
from typing import Dict, Iterable, Optional, Sequence, Union

from .sdk import Keyframe, MotionConfigError, clamp, format_number, lerp

POP_PEAK = 0.7


def translate_x(px: float) -> str:
    return f"translateX({format_number(px)}px)"


def translate_y(px: float) -> str:
    return f"translateY({format_number(px)}px)"


def scale(factor: float) -> str:
    return f"scale({format_number(factor)})"


def rotate(deg: float) -> str:
    return f"rotate({format_number(deg)}deg)"


def rotate_x(deg: float) -> str:
    return f"rotateX({format_number(deg)}deg)"


def rotate_y(deg: float) -> str:
    return f"rotateY({format_number(deg)}deg)"


def make_transform(transforms: Iterable[Optional[str]]) -> str:
    """Join transform fragments in order, skipping empty ones."""
    return " ".join(t for t in transforms if t)


def entrance_transform(progress: float, direction: str = "up", distance: float = 50) -> Dict[str, Union[str, float]]:
    """
    Transform + opacity for an element entering from a direction.

    direction is one of up, down, left, right or fade (a slight scale-up).
    """
    offset = (1 - progress) * distance
    if direction == "up":
        transform = translate_y(offset)
    elif direction == "down":
        transform = translate_y(-offset)
    elif direction == "left":
        transform = translate_x(offset)
    elif direction == "right":
        transform = translate_x(-offset)
    elif direction == "fade":
        transform = scale(0.95 + progress * 0.05)
    else:
        raise MotionConfigError(f"Unknown entrance direction '{direction}'")
    return {"transform": transform, "opacity": progress}


def pop_transform(progress: float, overshoot: float = 0.1) -> Dict[str, Union[str, float]]:
    # 0 -> 1 + overshoot at POP_PEAK, then settle back to 1
    if progress < POP_PEAK:
        value = progress / POP_PEAK * (1 + overshoot)
    else:
        value = 1 + overshoot * (1 - (progress - POP_PEAK) / (1 - POP_PEAK))
    return {"transform": scale(value), "opacity": min(progress * 2, 1.0)}


def shake_transform(intensity: float, frame: float) -> str:
    """Deterministic shake; the same frame always shakes the same way."""
    x = math.sin(frame * 0.5) * intensity
    y = math.cos(frame * 0.7) * intensity * 0.5
    rotation = math.sin(frame * 0.3) * intensity * 0.1
    return make_transform([translate_x(x), translate_y(y), rotate(rotation)])


def flip_transform(progress: float, axis: str = "y") -> str:
    angle = progress * 180
    if axis == "x":
        return rotate_x(angle)
    if axis == "y":
        return rotate_y(angle)
    raise MotionConfigError(f"Unknown flip axis '{axis}'")


def tilt_3d_transform(position_x: float, position_y: float, max_angle: float = 15) -> str:
    """Tilt toward a pointer position given as ratios in [-1, 1]."""
    return make_transform([rotate_y(position_x * max_angle), rotate_x(-position_y * max_angle)])


def parallax_transform(progress: float, speed: float, direction: str = "vertical") -> str:
    distance = progress * 100 * speed
    if direction == "horizontal":
        return translate_x(distance)
    if direction == "vertical":
        return translate_y(distance)
    raise MotionConfigError(f"Unknown parallax direction '{direction}'")


def zoom_transform(scale_value: float, origin_x: float = 50, origin_y: float = 50) -> Dict[str, str]:
    return {
        "transform": scale(scale_value),
        "transform_origin": f"{format_number(origin_x)}% {format_number(origin_y)}%",
    }


def ken_burns_transform(
    progress: float,
    start_scale: float = 1.0,
    end_scale: float = 1.2,
    start_x: float = 50,
    end_x: float = 50,
    start_y: float = 50,
    end_y: float = 50,
) -> Dict[str, str]:
    """Slow zoom plus a pan of the transform origin (percentages)."""
    return zoom_transform(
        lerp(start_scale, end_scale, progress),
        origin_x=lerp(start_x, end_x, progress),
        origin_y=lerp(start_y, end_y, progress),
    )


def interpolate_keyframes(frame: float, keyframes: Sequence[Keyframe]) -> Optional[Keyframe]:
    """
    Keyframe state at an arbitrary frame.

    Opacity is interpolated linearly when both neighbours define it; transform
    strings cannot be blended, so the nearer neighbour's transform is used
    (switching at the midpoint). Frames outside the keyframe span hold the first or
    last keyframe. Returns None for an empty sequence.
    """
    if not keyframes:
        return None
    ordered = sorted(keyframes, key=lambda k: k.frame)
    if len(ordered) == 1 or frame <= ordered[0].frame:
        return ordered[0]
    if frame >= ordered[-1].frame:
        return ordered[-1]

    prev_kf, next_kf = ordered[0], ordered[-1]
    for a, b in zip(ordered, ordered[1:]):
        if a.frame <= frame <= b.frame:
            prev_kf, next_kf = a, b
            break

    span = next_kf.frame - prev_kf.frame
    if span == 0:
        return prev_kf
    t = clamp((frame - prev_kf.frame) / span)

    opacity = None
    if prev_kf.opacity is not None and next_kf.opacity is not None:
        opacity = clamp(lerp(prev_kf.opacity, next_kf.opacity, t))

    if t < 0.5 and prev_kf.transform:
        transform = prev_kf.transform
    else:
        transform = next_kf.transform

    return Keyframe(frame=frame, opacity=opacity, transform=transform)
