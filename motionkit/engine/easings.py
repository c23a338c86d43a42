#!/usr/bin/env python3
"""
Easing Functions

Every easing takes a progress value t and returns a reshaped value. Input is
clamped to [0, 1] and the endpoints are pinned, so f(0) == 0.0 and f(1) == 1.0
exactly for every named curve. Overshoot curves (back, elastic) may leave [0, 1]
strictly between the endpoints.
"""

import math
from functools import wraps
from typing import Callable, Dict, Union

from motionkit.core import get_logger

from .sdk import EasingFunction, MotionConfigError, clamp

log = get_logger("motionkit.easings")

BACK_OVERSHOOT = 1.70158
BACK_IN_OUT_FACTOR = 1.525
ELASTIC_PERIOD = 0.3
ELASTIC_IN_OUT_PERIOD = 0.45

BOUNCE_N1 = 7.5625
BOUNCE_D1 = 2.75


def _pinned(curve: Callable[[float], float]) -> EasingFunction:
    """Clamp input and pin the endpoints of a raw curve."""

    @wraps(curve)
    def eased(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return curve(t)

    return eased


# -----------------------------------------------------------------------------
# Linear / polynomial
# -----------------------------------------------------------------------------

@_pinned
def linear(t: float) -> float:
    return t


@_pinned
def ease_in(t: float) -> float:
    """Quadratic: slow start."""
    return t * t


@_pinned
def ease_out(t: float) -> float:
    """Quadratic: slow end."""
    return t * (2 - t)


@_pinned
def ease_in_out(t: float) -> float:
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


@_pinned
def ease_in_cubic(t: float) -> float:
    return t * t * t


@_pinned
def ease_out_cubic(t: float) -> float:
    t1 = t - 1
    return t1 * t1 * t1 + 1


@_pinned
def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return (t - 1) * (2 * t - 2) * (2 * t - 2) + 1


@_pinned
def ease_in_quart(t: float) -> float:
    return t ** 4


@_pinned
def ease_out_quart(t: float) -> float:
    return 1 - (t - 1) ** 4


@_pinned
def ease_in_out_quart(t: float) -> float:
    return 8 * t ** 4 if t < 0.5 else 1 - 8 * (t - 1) ** 4


@_pinned
def ease_in_quint(t: float) -> float:
    return t ** 5


@_pinned
def ease_out_quint(t: float) -> float:
    return 1 + (t - 1) ** 5


@_pinned
def ease_in_out_quint(t: float) -> float:
    return 16 * t ** 5 if t < 0.5 else 1 + 16 * (t - 1) ** 5


# -----------------------------------------------------------------------------
# Sinusoidal / exponential / circular
# -----------------------------------------------------------------------------

@_pinned
def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


@_pinned
def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


@_pinned
def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


@_pinned
def ease_in_expo(t: float) -> float:
    return 2 ** (10 * (t - 1))


@_pinned
def ease_out_expo(t: float) -> float:
    return 1 - 2 ** (-10 * t)


@_pinned
def ease_in_out_expo(t: float) -> float:
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return (2 - 2 ** (-20 * t + 10)) / 2


@_pinned
def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


@_pinned
def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - (t - 1) * (t - 1))


@_pinned
def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - 4 * t * t)) / 2
    return (math.sqrt(1 - (-2 * t + 2) ** 2) + 1) / 2


# -----------------------------------------------------------------------------
# Back (anticipation / overshoot)
# -----------------------------------------------------------------------------

def make_back_in(overshoot: float = BACK_OVERSHOOT) -> EasingFunction:
    """Pulls back below 0 before moving forward."""
    c = overshoot

    @_pinned
    def back_in(t: float) -> float:
        return (c + 1) * t * t * t - c * t * t

    return back_in


def make_back_out(overshoot: float = BACK_OVERSHOOT) -> EasingFunction:
    """Overshoots past 1 before settling."""
    c = overshoot

    @_pinned
    def back_out(t: float) -> float:
        t1 = t - 1
        return 1 + (c + 1) * t1 * t1 * t1 + c * t1 * t1

    return back_out


def make_back_in_out(overshoot: float = BACK_OVERSHOOT) -> EasingFunction:
    c = overshoot * BACK_IN_OUT_FACTOR

    @_pinned
    def back_in_out(t: float) -> float:
        if t < 0.5:
            return ((2 * t) ** 2 * ((c + 1) * 2 * t - c)) / 2
        return ((2 * t - 2) ** 2 * ((c + 1) * (t * 2 - 2) + c) + 2) / 2

    return back_in_out


ease_in_back = make_back_in()
ease_out_back = make_back_out()
ease_in_out_back = make_back_in_out()


# -----------------------------------------------------------------------------
# Bounce
# -----------------------------------------------------------------------------

def _bounce_out(t: float) -> float:
    # Four parabolic arcs, each landing at 1 with a lower rebound.
    if t < 1 / BOUNCE_D1:
        return BOUNCE_N1 * t * t
    if t < 2 / BOUNCE_D1:
        t1 = t - 1.5 / BOUNCE_D1
        return BOUNCE_N1 * t1 * t1 + 0.75
    if t < 2.5 / BOUNCE_D1:
        t1 = t - 2.25 / BOUNCE_D1
        return BOUNCE_N1 * t1 * t1 + 0.9375
    t1 = t - 2.625 / BOUNCE_D1
    return BOUNCE_N1 * t1 * t1 + 0.984375


ease_out_bounce = _pinned(_bounce_out)
ease_out_bounce.__name__ = "ease_out_bounce"


@_pinned
def ease_in_bounce(t: float) -> float:
    return 1 - _bounce_out(1 - t)


@_pinned
def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1 - _bounce_out(1 - 2 * t)) / 2
    return (1 + _bounce_out(2 * t - 1)) / 2


# -----------------------------------------------------------------------------
# Elastic
# -----------------------------------------------------------------------------

def _elastic_shape(amplitude: float, period: float):
    if period <= 0:
        raise MotionConfigError(f"Elastic period must be positive, got {period}")
    if amplitude < 1:
        # Amplitudes below 1 cannot reach the target; fall back to the classic shape.
        return 1.0, period / 4
    return amplitude, period / (2 * math.pi) * math.asin(1 / amplitude)


def make_elastic_in(amplitude: float = 1.0, period: float = ELASTIC_PERIOD) -> EasingFunction:
    a, s = _elastic_shape(amplitude, period)

    @_pinned
    def elastic_in(t: float) -> float:
        u = t - 1
        return -(a * 2 ** (10 * u) * math.sin((u - s) * 2 * math.pi / period))

    return elastic_in


def make_elastic_out(amplitude: float = 1.0, period: float = ELASTIC_PERIOD) -> EasingFunction:
    a, s = _elastic_shape(amplitude, period)

    @_pinned
    def elastic_out(t: float) -> float:
        return a * 2 ** (-10 * t) * math.sin((t - s) * 2 * math.pi / period) + 1

    return elastic_out


def make_elastic_in_out(amplitude: float = 1.0, period: float = ELASTIC_IN_OUT_PERIOD) -> EasingFunction:
    a, s = _elastic_shape(amplitude, period)

    @_pinned
    def elastic_in_out(t: float) -> float:
        u = 2 * t - 1
        wave = math.sin((u - s) * 2 * math.pi / period)
        if t < 0.5:
            return -0.5 * a * 2 ** (10 * u) * wave
        return 0.5 * a * 2 ** (-10 * u) * wave + 1

    return elastic_in_out


ease_in_elastic = make_elastic_in()
ease_out_elastic = make_elastic_out()
ease_in_out_elastic = make_elastic_in_out()


# -----------------------------------------------------------------------------
# Cubic Bezier
# -----------------------------------------------------------------------------

NEWTON_ITERATIONS = 8
BISECTION_ITERATIONS = 64
BEZIER_EPSILON = 1e-7


def cubic_bezier(x1: float, y1: float, x2: float, y2: float, epsilon: float = BEZIER_EPSILON) -> EasingFunction:
    """
    Build a CSS-style cubic-bezier(x1, y1, x2, y2) easing.

    The curve is parametric in s, so for a requested x we solve X(s) = x with
    Newton's method and fall back to bisection when the slope is too flat.

    Args:
        x1, x2: Control point X values, must lie in [0, 1]
        y1, y2: Control point Y values, may leave [0, 1] for overshoot
        epsilon: Solver tolerance on X

    Raises:
        MotionConfigError: If an X control point is outside [0, 1]
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise MotionConfigError(f"cubic_bezier x control points must be in [0, 1], got x1={x1}, x2={x2}")

    cx = 3 * x1
    bx = 3 * (x2 - x1) - cx
    ax = 1 - cx - bx
    cy = 3 * y1
    by = 3 * (y2 - y1) - cy
    ay = 1 - cy - by

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def slope_x(s: float) -> float:
        return (3 * ax * s + 2 * bx) * s + cx

    def solve_s(x: float) -> float:
        s = x
        for _ in range(NEWTON_ITERATIONS):
            err = sample_x(s) - x
            if abs(err) < epsilon:
                return s
            d = slope_x(s)
            if abs(d) < 1e-6:
                break
            s -= err / d

        lo, hi = 0.0, 1.0
        s = x
        for _ in range(BISECTION_ITERATIONS):
            cur = sample_x(s)
            if abs(cur - x) < epsilon:
                return s
            if x > cur:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        log.debug(f"cubic_bezier({x1}, {y1}, {x2}, {y2}) did not converge at x={x}; using s={s}")
        return clamp(s)

    @_pinned
    def bezier(x: float) -> float:
        return sample_y(solve_s(x))

    bezier.__name__ = f"cubic_bezier({x1}, {y1}, {x2}, {y2})"
    return bezier


# -----------------------------------------------------------------------------
# Registries
# -----------------------------------------------------------------------------

EASING_PRESETS: Dict[str, EasingFunction] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_in_quart": ease_in_quart,
    "ease_out_quart": ease_out_quart,
    "ease_in_out_quart": ease_in_out_quart,
    "ease_in_quint": ease_in_quint,
    "ease_out_quint": ease_out_quint,
    "ease_in_out_quint": ease_in_out_quint,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_expo": ease_in_expo,
    "ease_out_expo": ease_out_expo,
    "ease_in_out_expo": ease_in_out_expo,
    "ease_in_circ": ease_in_circ,
    "ease_out_circ": ease_out_circ,
    "ease_in_out_circ": ease_in_out_circ,
    "ease_in_back": ease_in_back,
    "ease_out_back": ease_out_back,
    "ease_in_out_back": ease_in_out_back,
    "ease_in_bounce": ease_in_bounce,
    "ease_out_bounce": ease_out_bounce,
    "ease_in_out_bounce": ease_in_out_bounce,
    "ease_in_elastic": ease_in_elastic,
    "ease_out_elastic": ease_out_elastic,
    "ease_in_out_elastic": ease_in_out_elastic,
}

BEZIER_PRESETS: Dict[str, EasingFunction] = {
    "ease": cubic_bezier(0.25, 0.1, 0.25, 1.0),
    "css_ease_in": cubic_bezier(0.42, 0.0, 1.0, 1.0),
    "css_ease_out": cubic_bezier(0.0, 0.0, 0.58, 1.0),
    "css_ease_in_out": cubic_bezier(0.42, 0.0, 0.58, 1.0),
    "material_standard": cubic_bezier(0.4, 0.0, 0.2, 1.0),
    "material_decelerate": cubic_bezier(0.0, 0.0, 0.2, 1.0),
    "material_accelerate": cubic_bezier(0.4, 0.0, 1.0, 1.0),
}


def get_easing(easing: Union[str, EasingFunction, None]) -> EasingFunction:
    """
    Resolve a registry name or callable to an easing function.

    None resolves to linear. Names are looked up in EASING_PRESETS first, then
    BEZIER_PRESETS.
    """
    if easing is None:
        return linear
    if callable(easing):
        return easing
    if easing in EASING_PRESETS:
        return EASING_PRESETS[easing]
    if easing in BEZIER_PRESETS:
        return BEZIER_PRESETS[easing]
    raise MotionConfigError(f"Unknown easing '{easing}'")
