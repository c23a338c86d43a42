#!/usr/bin/env python3
"""
Color Engine for Frame-Deterministic Animation

Provides hex/RGB/HSL conversion, two- and N-stop interpolation, gradient helpers
and derived utilities (lighten, darken, saturate, mix, complement, contrast).

Canonical color form is a lowercase "#rrggbb" string. RGB channels are 0-255,
HSL is (h 0-360, s 0-100, l 0-100). Rounding is half-up so results match across
renderers regardless of the host language's rounding rules.
"""

import math
import re
from typing import List, Optional, Sequence, Tuple, Union

from motionkit.core import get_logger

from .sdk import ColorMode, MotionConfigError, clamp, coerce_enum, format_number

log = get_logger("motionkit.color_engine")

# WCAG AA contrast ratio requirements
WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0

# Perceptual luminance threshold for picking black or white text
CONTRAST_THRESHOLD = 0.5

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]


class InvalidColorFormat(MotionConfigError):
    """Raised for a hex color string that is not #rgb or #rrggbb."""


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color into an (r, g, b) tuple.

    Accepts "#rgb", "#rrggbb" and the same without the leading '#'.

    Raises:
        InvalidColorFormat: For any other input
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(f"Invalid hex color: {hex_color!r}")
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        raise InvalidColorFormat(f"Invalid hex color: {hex_color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB channels (clamped and rounded) to "#rrggbb"."""

    def channel(v: float) -> int:
        return max(0, min(255, _round_half_up(v)))

    return f"#{channel(r):02x}{channel(g):02x}{channel(b):02x}"


def normalize_hex(hex_color: str) -> str:
    """Validate a hex color and return it as lowercase "#rrggbb"."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    r, g, b = r / 255.0, g / 255.0, b / 255.0

    max_val = max(r, g, b)
    min_val = min(r, g, b)
    delta = max_val - min_val

    l = (max_val + min_val) / 2.0

    if delta == 0:
        h = s = 0.0
    else:
        s = delta / (2.0 - max_val - min_val) if l > 0.5 else delta / (max_val + min_val)

        if max_val == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_val == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6.0

    return (h * 360.0) % 360.0, s * 100.0, l * 100.0


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (h 0-360, s/l 0-100) to rounded RGB channels."""
    h = (h % 360.0) / 360.0
    s = clamp(s, 0.0, 100.0) / 100.0
    l = clamp(l, 0.0, 100.0) / 100.0

    def hue_to_rgb(m1: float, m2: float, hue: float) -> float:
        hue = hue % 1.0
        if hue < 1 / 6:
            return m1 + (m2 - m1) * 6 * hue
        if hue < 1 / 2:
            return m2
        if hue < 2 / 3:
            return m1 + (m2 - m1) * (2 / 3 - hue) * 6
        return m1

    if s == 0:
        r = g = b = l
    else:
        m2 = l * (1 + s) if l < 0.5 else l + s - l * s
        m1 = 2 * l - m2
        r = hue_to_rgb(m1, m2, h + 1 / 3)
        g = hue_to_rgb(m1, m2, h)
        b = hue_to_rgb(m1, m2, h - 1 / 3)

    return _round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255)


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------

def _interpolate_rgb(color1: str, color2: str, t: float) -> str:
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)
    return rgb_to_hex(r1 + (r2 - r1) * t, g1 + (g2 - g1) * t, b1 + (b2 - b1) * t)


def _interpolate_hsl(color1: str, color2: str, t: float) -> str:
    h1, s1, l1 = hex_to_hsl(color1)
    h2, s2, l2 = hex_to_hsl(color2)

    # Shortest way around the wheel
    h_diff = h2 - h1
    if h_diff > 180:
        h_diff -= 360
    elif h_diff < -180:
        h_diff += 360

    h = (h1 + h_diff * t) % 360
    return hsl_to_hex(h, s1 + (s2 - s1) * t, l1 + (l2 - l1) * t)


def interpolate_color(
    color1: str,
    color2: str,
    progress: float,
    mode: Union[str, ColorMode] = ColorMode.RGB,
) -> str:
    """
    Blend two colors.

    Args:
        color1: Start color (hex)
        color2: End color (hex)
        progress: Blend factor, clamped to [0, 1]
        mode: "rgb" blends channels, "hsl" blends components with shortest-path hue

    Returns:
        Interpolated color as "#rrggbb". Exactly color1 at progress 0 and color2
        at progress 1 (case-normalised).
    """
    mode = coerce_enum(ColorMode, mode)
    start = normalize_hex(color1)
    end = normalize_hex(color2)
    t = clamp(progress)
    if t == 0.0:
        return start
    if t == 1.0:
        return end
    if mode is ColorMode.RGB:
        return _interpolate_rgb(start, end, t)
    return _interpolate_hsl(start, end, t)


def interpolate_colors(
    colors: Sequence[str],
    progress: float,
    mode: Union[str, ColorMode] = ColorMode.RGB,
) -> str:
    """
    Interpolate through N color stops spaced evenly over [0, 1].

    Raises:
        MotionConfigError: If colors is empty
    """
    if not colors:
        raise MotionConfigError("Colors list must not be empty")
    if len(colors) == 1:
        return normalize_hex(colors[0])

    t = clamp(progress)
    segments = len(colors) - 1
    scaled = t * segments
    index = min(int(math.floor(scaled)), segments - 1)
    return interpolate_color(colors[index], colors[index + 1], scaled - index, mode)


# ---------------------------------------------------------------------------
# Gradient helpers
# ---------------------------------------------------------------------------

def animated_gradient_stops(colors: Sequence[str], progress: float) -> str:
    """Color stops (without the linear-gradient() wrapper) shifted by progress."""
    if not colors:
        return "transparent"
    if len(colors) == 1:
        return normalize_hex(colors[0])

    shift = progress % 1
    stops = [normalize_hex(c) for c in colors]
    if shift > 0:
        lead = interpolate_colors(list(colors) + [colors[0]], shift, ColorMode.HSL)
        stops = [lead] + stops + [lead]

    last = len(stops) - 1
    return ", ".join(f"{color} {format_number(i / last * 100)}%" for i, color in enumerate(stops))


def rotating_gradient(colors: Sequence[str], progress: float, stops: Optional[str] = None) -> str:
    angle = progress * 360
    color_stops = stops or ", ".join(colors)
    return f"linear-gradient({format_number(angle)}deg, {color_stops})"


def pulsing_gradient(colors: Sequence[str], progress: float, angle: float = 135) -> str:
    if len(colors) < 2:
        only = colors[0] if colors else "transparent"
        return f"linear-gradient({format_number(angle)}deg, {only})"

    cycle = int(math.floor(progress * len(colors))) % len(colors)
    cycled = list(colors[cycle:]) + list(colors[:cycle])
    return f"linear-gradient({format_number(angle)}deg, {', '.join(cycled)})"


# ---------------------------------------------------------------------------
# Derived utilities
# ---------------------------------------------------------------------------

def lighten(hex_color: str, amount: float) -> str:
    """Raise HSL lightness by amount (0-100), clamped."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, clamp(l + amount, 0.0, 100.0))


def darken(hex_color: str, amount: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, clamp(l - amount, 0.0, 100.0))


def saturate(hex_color: str, amount: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, clamp(s + amount, 0.0, 100.0), l)


def desaturate(hex_color: str, amount: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, clamp(s - amount, 0.0, 100.0), l)


def with_alpha(hex_color: str, alpha: float) -> str:
    r, g, b = hex_to_rgb(hex_color)
    return f"rgba({r}, {g}, {b}, {format_number(clamp(alpha))})"


def mix(color1: str, color2: str, weight: float = 0.5) -> str:
    """Mix two colors in RGB; weight is the share of color1."""
    return interpolate_color(color1, color2, 1 - weight, ColorMode.RGB)


def complement(hex_color: str) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex((h + 180) % 360, s, l)


def contrast_color(hex_color: str) -> str:
    """Black or white, whichever reads better on hex_color."""
    r, g, b = hex_to_rgb(hex_color)
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > CONTRAST_THRESHOLD else "#ffffff"


def relative_luminance(hex_color: str) -> float:
    """
    Relative luminance for contrast ratio calculation.

    Uses the WCAG 2.1 formula.
    """
    r, g, b = hex_to_rgb(hex_color)

    def gamma_correct(c: int) -> float:
        c = c / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * gamma_correct(r) + 0.7152 * gamma_correct(g) + 0.0722 * gamma_correct(b)


def contrast_ratio(fg_hex: str, bg_hex: str) -> float:
    """
    Contrast ratio between foreground and background colors.

    Returns:
        Ratio from 1.0 to 21.0, higher is better
    """
    l1 = relative_luminance(fg_hex)
    l2 = relative_luminance(bg_hex)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def assert_legible_text(text_color: str, bg_color: str, large_text: bool = False) -> None:
    """
    Assert that text color provides sufficient contrast against background.

    Raises:
        ValueError: If contrast ratio is insufficient for legibility
    """
    ratio = contrast_ratio(text_color, bg_color)
    required = WCAG_AA_LARGE if large_text else WCAG_AA_NORMAL

    if ratio < required:
        raise ValueError(
            f"Insufficient contrast: {ratio:.2f}:1 (need {required}:1) "
            f"for text {text_color} on background {bg_color}"
        )


def palette_ramp(colors: List[str], steps: int, mode: Union[str, ColorMode] = ColorMode.HSL) -> List[str]:
    """Sample `steps` evenly spaced colors across the given stops."""
    if steps < 1:
        raise MotionConfigError(f"steps must be >= 1, got {steps}")
    if steps == 1:
        return [interpolate_colors(colors, 0.0, mode)]
    return [interpolate_colors(colors, i / (steps - 1), mode) for i in range(steps)]
