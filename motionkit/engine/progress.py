#!/usr/bin/env python3
"""
Progress Calculators

Two interchangeable models turn "frames since an element started" into a progress
value:

- Duration + easing: easing(clamp((frame - start) / duration, 0, 1))
- Spring: closed-form damped harmonic oscillator released from 0 toward 1

Both are pure functions of their arguments. The spring is evaluated analytically
at the requested frame, so frames can be asked for in any order.
"""

import math
from typing import Optional, Sequence, Union

from motionkit.core import get_logger

from .easings import get_easing, linear
from .sdk import (
    FPS,
    SPRING_MEASURE_THRESHOLD,
    SPRING_REST_THRESHOLD,
    EasedProgressConfig,
    EasingFunction,
    MotionConfigError,
    ProgressConfig,
    SpringConfig,
    clamp,
    lerp,
)

log = get_logger("motionkit.progress")

DEFAULT_SPRING = SpringConfig(mass=0.5, stiffness=200, damping=80, overshoot_clamping=False)

# Spring config presets for different animation feels
SPRING_PRESETS = {
    # Subtle, gentle animation for secondary elements
    "subtle": SpringConfig(damping=100, mass=0.8, stiffness=150),
    "moderate": SpringConfig(damping=80, mass=0.5, stiffness=200),
    # Snappy, for titles and emphasis
    "snappy": SpringConfig(damping=100, mass=0.5, stiffness=300),
    "energetic": SpringConfig(damping=60, mass=0.4, stiffness=300),
    "bouncy": SpringConfig(damping=50, mass=0.3, stiffness=200),
    "gentle": SpringConfig(damping=200, mass=0.5, stiffness=80, overshoot_clamping=True),
    "smooth": SpringConfig(damping=25, mass=1, stiffness=100),
    "quick": SpringConfig(damping=15, mass=0.2, stiffness=400, overshoot_clamping=True),
    # Visible overshoot for emphasis
    "elastic": SpringConfig(damping=8, mass=0.3, stiffness=180),
    "heavy": SpringConfig(damping=40, mass=2, stiffness=200),
    "crisp": SpringConfig(damping=30, mass=0.4, stiffness=350, overshoot_clamping=True),
}


def get_spring_preset(name: str) -> SpringConfig:
    try:
        return SPRING_PRESETS[name]
    except KeyError:
        raise MotionConfigError(f"Unknown spring preset '{name}' (expected one of: {', '.join(SPRING_PRESETS)})")


# ---------------------------------------------------------------------------
# Duration + easing
# ---------------------------------------------------------------------------

def eased_progress(
    frame: float,
    start_frame: float,
    duration_in_frames: float,
    easing: Union[str, EasingFunction, None] = linear,
) -> float:
    """
    Eased progress of an animation that runs for a fixed number of frames.

    Before start_frame this is easing(0); from start_frame + duration on it holds
    at easing(1). A zero duration is an instantaneous step at start_frame.

    Raises:
        MotionConfigError: If duration_in_frames is negative
    """
    if duration_in_frames < 0:
        raise MotionConfigError(f"duration_in_frames must be >= 0, got {duration_in_frames}")
    ease = get_easing(easing)
    elapsed = frame - start_frame
    if duration_in_frames == 0:
        return ease(1.0) if elapsed >= 0 else ease(0.0)
    return ease(clamp(elapsed / duration_in_frames))


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    easing: Union[str, EasingFunction, None] = linear,
    extrapolate_left: str = "clamp",
    extrapolate_right: str = "clamp",
) -> float:
    """
    Map value through a piecewise-linear input -> output range.

    Each segment is reshaped by easing. Outside the input range the result is
    clamped ("clamp"), continued linearly ("extend") or returned as-is
    ("identity").

    Raises:
        MotionConfigError: For mismatched or non-increasing ranges, or an unknown
            extrapolation mode
    """
    if len(input_range) != len(output_range) or len(input_range) < 2:
        raise MotionConfigError("input_range and output_range must have the same length (>= 2)")
    for a, b in zip(input_range, input_range[1:]):
        if b <= a:
            raise MotionConfigError(f"input_range must be strictly increasing, got {list(input_range)}")
    for mode in (extrapolate_left, extrapolate_right):
        if mode not in ("clamp", "extend", "identity"):
            raise MotionConfigError(f"Unknown extrapolation '{mode}'")

    ease = get_easing(easing)

    if value < input_range[0]:
        if extrapolate_left == "clamp":
            return float(output_range[0])
        if extrapolate_left == "identity":
            return float(value)
        seg = 0
    elif value > input_range[-1]:
        if extrapolate_right == "clamp":
            return float(output_range[-1])
        if extrapolate_right == "identity":
            return float(value)
        seg = len(input_range) - 2
    else:
        seg = 0
        while seg < len(input_range) - 2 and value > input_range[seg + 1]:
            seg += 1

    in_lo, in_hi = input_range[seg], input_range[seg + 1]
    out_lo, out_hi = output_range[seg], output_range[seg + 1]
    t = (value - in_lo) / (in_hi - in_lo)
    if 0.0 <= t <= 1.0:
        t = ease(t)
    return lerp(out_lo, out_hi, t)


# ---------------------------------------------------------------------------
# Spring
# ---------------------------------------------------------------------------

def _spring_terms(config: SpringConfig):
    omega0 = math.sqrt(config.stiffness / config.mass)
    zeta = config.damping / (2 * math.sqrt(config.stiffness * config.mass))
    return omega0, zeta


def _displacement(t: float, config: SpringConfig) -> float:
    """Position at time t (seconds) of a spring released at rest from 0 toward 1."""
    omega0, zeta = _spring_terms(config)
    if abs(zeta - 1.0) < 1e-6:
        return 1 - math.exp(-omega0 * t) * (1 + omega0 * t)
    if zeta < 1.0:
        omega1 = omega0 * math.sqrt(1 - zeta * zeta)
        decay = math.exp(-zeta * omega0 * t)
        return 1 - decay * (math.cos(omega1 * t) + (zeta * omega0 / omega1) * math.sin(omega1 * t))
    root = math.sqrt(zeta * zeta - 1)
    r1 = -omega0 / (zeta + root)
    r2 = -omega0 * (zeta + root)
    return 1 - (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r2 - r1)


def _error_bound(t: float, config: SpringConfig) -> float:
    """Monotone non-increasing bound on |1 - displacement(t)|."""
    omega0, zeta = _spring_terms(config)
    if zeta < 1.0 and abs(zeta - 1.0) >= 1e-6:
        # Envelope of the oscillation
        return math.exp(-zeta * omega0 * t) / math.sqrt(1 - zeta * zeta)
    return abs(1 - _displacement(t, config))


def _settle_time(config: SpringConfig, threshold: float) -> float:
    """Earliest time (seconds) after which the spring stays within threshold of 1."""
    if _error_bound(0.0, config) <= threshold:
        return 0.0
    omega0, zeta = _spring_terms(config)
    hi = 1.0 / (min(zeta, 1.0) * omega0)
    for _ in range(200):
        if _error_bound(hi, config) <= threshold:
            break
        hi *= 2
    lo = 0.0
    for _ in range(60):
        mid = (lo + hi) / 2
        if _error_bound(mid, config) <= threshold:
            hi = mid
        else:
            lo = mid
    return hi


def measure_spring(
    fps: float = FPS,
    config: SpringConfig = DEFAULT_SPRING,
    threshold: float = SPRING_MEASURE_THRESHOLD,
) -> int:
    """
    Number of frames the spring needs to settle within threshold of its target.

    Raises:
        MotionConfigError: For a non-positive fps or threshold
    """
    if fps <= 0:
        raise MotionConfigError(f"fps must be positive, got {fps}")
    if threshold <= 0:
        raise MotionConfigError(f"threshold must be positive, got {threshold}")
    return int(math.ceil(_settle_time(config, threshold) * fps))


def spring_progress(
    frame: float,
    fps: float = FPS,
    config: SpringConfig = DEFAULT_SPRING,
    from_value: float = 0.0,
    to_value: float = 1.0,
    delay: float = 0.0,
    duration_in_frames: Optional[float] = None,
    reverse: bool = False,
) -> float:
    """
    Spring-driven value at a frame.

    Args:
        frame: Current frame
        fps: Frame rate used to convert frames to seconds
        config: Physical spring parameters
        from_value, to_value: Output mapped from the 0 -> 1 displacement
        delay: Frames to hold at from_value before release
        duration_in_frames: Stretch the natural settle time to this many frames
        reverse: Play backwards, ending at from_value after the duration

    Returns:
        from_value before release, exactly to_value once settled.
    """
    if fps <= 0:
        raise MotionConfigError(f"fps must be positive, got {fps}")
    if duration_in_frames is not None and duration_in_frames <= 0:
        raise MotionConfigError(f"duration_in_frames must be positive, got {duration_in_frames}")

    settle = _settle_time(config, SPRING_REST_THRESHOLD)
    natural_frames = settle * fps
    elapsed = frame - delay

    if reverse:
        span = duration_in_frames if duration_in_frames is not None else natural_frames
        elapsed = span - elapsed
    if duration_in_frames is not None and natural_frames > 0:
        elapsed = elapsed * natural_frames / duration_in_frames

    if elapsed <= 0:
        x = 0.0
    elif elapsed / fps >= settle:
        x = 1.0
    else:
        x = _displacement(elapsed / fps, config)
        if config.overshoot_clamping:
            x = clamp(x)

    return lerp(from_value, to_value, x)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def progress(
    frame: float,
    start_frame: float,
    config: ProgressConfig,
    fps: float = FPS,
) -> float:
    """Evaluate whichever progress model config describes."""
    if isinstance(config, SpringConfig):
        return spring_progress(frame, fps=fps, config=config, delay=start_frame)
    if isinstance(config, EasedProgressConfig):
        return eased_progress(frame, start_frame, config.duration_in_frames, config.easing)
    raise MotionConfigError(f"Unsupported progress config: {type(config).__name__}")
