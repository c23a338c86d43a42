#!/usr/bin/env python3
"""
Stagger Scheduler

Per-index start delays for a sequence of elements. Every distribution is a pure
function of (index, total, base delay); the "random" distribution uses a fixed
linear-congruential step on the index, so the same index always gets the same
delay in every process.
"""

from typing import List, Union

from motionkit.core import get_logger

from .sdk import (
    DEFAULT_STAGGER_DELAY_FRAMES,
    MotionConfigError,
    StaggerDistribution,
    coerce_enum,
)

log = get_logger("motionkit.stagger")

# Seeded pseudo-random step
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

EASE_OUT_POWER = 0.5
EASE_IN_POWER = 2.0


def seeded_random(index: int) -> float:
    """Deterministic value in [0, 1) for an index."""
    seed = index * LCG_MULTIPLIER + LCG_INCREMENT
    return (seed % LCG_MODULUS) / LCG_MODULUS


def calculate_stagger_delay(
    index: int,
    total_items: int,
    base_delay_frames: float = DEFAULT_STAGGER_DELAY_FRAMES,
    distribution: Union[str, StaggerDistribution] = StaggerDistribution.LINEAR,
) -> float:
    """
    Delay in frames for one item of a staggered sequence.

    Args:
        index: Item index (0-based)
        total_items: Number of items in the sequence
        base_delay_frames: Gap between consecutive items for the linear case
        distribution: How delays are spread over the sequence

    Returns:
        Non-negative delay in frames; 0 when total_items <= 1

    Raises:
        MotionConfigError: For a negative index or base delay, or unknown distribution
    """
    distribution = coerce_enum(StaggerDistribution, distribution)
    if index < 0:
        raise MotionConfigError(f"Stagger index must be >= 0, got {index}")
    if base_delay_frames < 0:
        raise MotionConfigError(f"base_delay_frames must be >= 0, got {base_delay_frames}")
    if total_items <= 1:
        return 0.0

    last = total_items - 1
    span = base_delay_frames * last
    normalized = index / last

    if distribution is StaggerDistribution.EASE_OUT:
        # Early items bunch up, later ones spread out
        return normalized ** EASE_OUT_POWER * span
    if distribution is StaggerDistribution.EASE_IN:
        return normalized ** EASE_IN_POWER * span
    if distribution is StaggerDistribution.CENTER_OUT:
        return abs(index - last / 2) * base_delay_frames
    if distribution is StaggerDistribution.EDGES_IN:
        return (last / 2 - abs(index - last / 2)) * base_delay_frames
    if distribution is StaggerDistribution.REVERSE:
        return max(0, last - index) * base_delay_frames
    if distribution is StaggerDistribution.RANDOM:
        return seeded_random(index) * span
    return index * base_delay_frames


def create_stagger_delays(
    total_items: int,
    base_delay_frames: float = DEFAULT_STAGGER_DELAY_FRAMES,
    distribution: Union[str, StaggerDistribution] = StaggerDistribution.LINEAR,
) -> List[float]:
    return [
        calculate_stagger_delay(i, total_items, base_delay_frames, distribution)
        for i in range(max(0, total_items))
    ]


def stagger_total_duration(
    total_items: int,
    base_delay_frames: float,
    item_duration_frames: float,
    distribution: Union[str, StaggerDistribution] = StaggerDistribution.LINEAR,
) -> float:
    """Frames from the first item's start until the last item finishes."""
    delays = create_stagger_delays(total_items, base_delay_frames, distribution)
    max_delay = max(delays) if delays else 0.0
    return max_delay + item_duration_frames
