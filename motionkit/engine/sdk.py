#!/usr/bin/env python3
"""
Core SDK for the Frame-Deterministic Animation Engine

This module provides the single source of truth for types, constants and shared
helpers. Every engine module imports from here to avoid drift.

All models are immutable: a config is built once per animated element and reused
for every frame of that element's lifetime.
"""

import math
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from motionkit.core import get_logger

log = get_logger("motionkit.sdk")


# ============================================================================
# CONSTANTS
# ============================================================================

FPS = 30
DEFAULT_STAGGER_DELAY_FRAMES = 3
DEFAULT_ITEM_DURATION_FRAMES = 20

# Spring snaps to its target once the displacement envelope is below this.
SPRING_REST_THRESHOLD = 0.001
# Threshold used when measuring how long a spring takes to settle.
SPRING_MEASURE_THRESHOLD = 0.005

EasingFunction = Callable[[float], float]


class MotionConfigError(ValueError):
    """Raised when an engine call receives malformed configuration."""


class ColorMode(str, Enum):
    RGB = "rgb"
    HSL = "hsl"


class StaggerDistribution(str, Enum):
    LINEAR = "linear"
    EASE_OUT = "ease-out"
    EASE_IN = "ease-in"
    CENTER_OUT = "center-out"
    EDGES_IN = "edges-in"
    REVERSE = "reverse"
    RANDOM = "random"


class SlideDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def coerce_enum(enum_cls, value):
    """Resolve a raw string (or enum member) to enum_cls, raising MotionConfigError."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(m.value for m in enum_cls)
        raise MotionConfigError(f"Unknown {enum_cls.__name__} '{value}' (expected one of: {valid})")


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def format_number(value: float, places: int = 4) -> str:
    """Render a number for CSS/SVG strings: 90.0 -> '90', 0.12500 -> '0.125'."""
    rounded = round(value, places)
    if rounded == 0:
        return "0"
    if rounded == math.floor(rounded):
        return str(int(rounded))
    return f"{rounded:.{places}f}".rstrip("0").rstrip(".")


# ============================================================================
# PYDANTIC MODELS
# ============================================================================

class SpringConfig(BaseModel):
    """Physical parameters of a damped spring released from 0 toward 1."""

    model_config = ConfigDict(frozen=True)

    mass: float = Field(0.5, gt=0, description="Mass of the simulated body")
    stiffness: float = Field(200.0, gt=0, description="Spring constant")
    damping: float = Field(80.0, gt=0, description="Damping coefficient")
    overshoot_clamping: bool = Field(False, description="Clamp output to [0, 1]")


class EasedProgressConfig(BaseModel):
    """Linear duration reshaped by an easing curve."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    duration_in_frames: float = Field(..., ge=0, description="Animation length in frames")
    easing: Union[str, EasingFunction] = Field("linear", description="Registry name or callable")


ProgressConfig = Union[EasedProgressConfig, SpringConfig]


class PropertyRange(BaseModel):
    """Numeric from/to pair for one animated property."""

    model_config = ConfigDict(frozen=True)

    start: float = Field(..., description="Value at progress 0")
    end: float = Field(..., description="Value at progress 1")

    def at(self, progress: float) -> float:
        return lerp(self.start, self.end, progress)


class ShadowRange(BaseModel):
    """Discrete from/to pair for shadow strings; switches at progress 0.5."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str

    def at(self, progress: float) -> str:
        return self.start if progress < 0.5 else self.end


class AnimationPreset(BaseModel):
    """Flat set of optional property deltas."""

    model_config = ConfigDict(frozen=True)

    opacity: Optional[PropertyRange] = None
    translate_x: Optional[PropertyRange] = None
    translate_y: Optional[PropertyRange] = None
    scale: Optional[PropertyRange] = None
    rotate: Optional[PropertyRange] = None
    blur: Optional[PropertyRange] = None
    box_shadow: Optional[ShadowRange] = None
    glow: Optional[ShadowRange] = None


class AnimationConfig(BaseModel):
    """Preset driven by a spring."""

    model_config = ConfigDict(frozen=True)

    preset: AnimationPreset
    spring: SpringConfig = Field(default_factory=SpringConfig)


class EasedAnimationConfig(BaseModel):
    """Preset driven by duration + easing."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    preset: AnimationPreset
    easing: Union[str, EasingFunction] = "linear"
    duration_in_frames: float = Field(30, ge=0)


class StrokeDrawResult(BaseModel):
    """Dash pattern revealing a path of known length."""

    model_config = ConfigDict(frozen=True)

    dash_array: float
    dash_offset: float
    transform: Optional[str] = None
    transform_origin: Optional[str] = None


class ArcDrawResult(BaseModel):
    """Dash pattern for a partial circle: (visible arc, circumference)."""

    model_config = ConfigDict(frozen=True)

    dash_pattern: Tuple[float, float]
    dash_offset: float = 0.0
    transform: Optional[str] = None

    @property
    def dash_array(self) -> str:
        return " ".join(format_number(v) for v in self.dash_pattern)


class Keyframe(BaseModel):
    """Keyframe for frame-indexed interpolation."""

    model_config = ConfigDict(frozen=True)

    frame: float = Field(..., description="Frame index")
    opacity: Optional[float] = Field(None, description="Opacity 0.0-1.0")
    transform: Optional[str] = Field(None, description="CSS transform string")

    @field_validator("opacity")
    @classmethod
    def validate_opacity(cls, v):
        if v is not None and (v < 0.0 or v > 1.0):
            raise ValueError("Opacity must be between 0.0 and 1.0")
        return v


def build_model(model_cls, **fields):
    """Construct a pydantic model, re-raising validation failures as MotionConfigError."""
    try:
        return model_cls(**fields)
    except ValidationError as e:
        log.error(f"Invalid {model_cls.__name__}: {e.error_count()} validation error(s)")
        raise MotionConfigError(f"Invalid {model_cls.__name__}: {e}") from e


def spring_overrides(config: Optional[Union[SpringConfig, Dict]]) -> Dict:
    """Fields explicitly set on a spring config (or a raw partial dict)."""
    if config is None:
        return {}
    if isinstance(config, SpringConfig):
        return config.model_dump(exclude_unset=True)
    return dict(config)
