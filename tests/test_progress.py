# tests/test_progress.py
import random

import pytest

from motionkit.engine.progress import (
    DEFAULT_SPRING,
    SPRING_PRESETS,
    eased_progress,
    get_spring_preset,
    interpolate,
    measure_spring,
    progress,
    spring_progress,
)
from motionkit.engine.sdk import EasedProgressConfig, MotionConfigError, SpringConfig, build_model

UNDERDAMPED = SpringConfig(mass=0.3, stiffness=180, damping=8)
CRITICAL = SpringConfig(mass=1, stiffness=100, damping=20)


# ---------------- duration + easing ----------------

def test_eased_progress_before_during_after():
    assert eased_progress(-5, 0, 30) == 0.0
    assert eased_progress(15, 0, 30) == 0.5
    assert eased_progress(30, 0, 30) == 1.0
    assert eased_progress(300, 0, 30) == 1.0


def test_eased_progress_applies_easing():
    assert eased_progress(15, 0, 30, "ease_in") == 0.25
    assert eased_progress(25, 10, 30, lambda t: 1 - t) == pytest.approx(0.5)


def test_eased_progress_zero_duration_is_a_step():
    assert eased_progress(9, 10, 0) == 0.0
    assert eased_progress(10, 10, 0) == 1.0
    assert eased_progress(11, 10, 0) == 1.0


def test_eased_progress_negative_duration_raises():
    with pytest.raises(MotionConfigError):
        eased_progress(0, 0, -1)


# ---------------- spring ----------------

def test_spring_holds_zero_until_release():
    for frame in (-10, 0, 4, 5):
        assert spring_progress(frame, config=DEFAULT_SPRING, delay=5) == 0.0


def test_spring_reaches_exact_target():
    assert spring_progress(1000, config=DEFAULT_SPRING) == 1.0
    assert spring_progress(1000, config=UNDERDAMPED) == 1.0
    assert spring_progress(1000, config=CRITICAL, from_value=10, to_value=20) == 20.0


def test_spring_settles_at_measured_frame():
    frames = measure_spring(30, DEFAULT_SPRING)
    assert frames > 0
    assert abs(spring_progress(frames, config=DEFAULT_SPRING) - 1.0) <= 0.005


def test_tighter_threshold_takes_longer():
    assert measure_spring(30, UNDERDAMPED, threshold=0.001) >= measure_spring(30, UNDERDAMPED, threshold=0.01)


def test_overdamped_spring_is_monotone():
    values = [spring_progress(f, config=DEFAULT_SPRING) for f in range(0, 60)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert 0.0 < values[3] < 1.0


def test_critically_damped_spring_stays_in_range():
    values = [spring_progress(f, config=CRITICAL) for f in range(0, 90)]
    assert all(0.0 <= v <= 1.0 + 1e-9 for v in values)
    assert values[-1] == 1.0


def test_underdamped_spring_overshoots_unless_clamped():
    free = [spring_progress(f, config=UNDERDAMPED) for f in range(0, 90)]
    assert max(free) > 1.0

    clamped_cfg = SpringConfig(mass=0.3, stiffness=180, damping=8, overshoot_clamping=True)
    clamped = [spring_progress(f, config=clamped_cfg) for f in range(0, 90)]
    assert max(clamped) <= 1.0


def test_spring_is_order_independent():
    frames = list(range(0, 45))
    forward = {f: spring_progress(f, config=UNDERDAMPED, delay=3) for f in frames}
    shuffled = frames[:]
    random.Random(7).shuffle(shuffled)
    for f in shuffled:
        assert spring_progress(f, config=UNDERDAMPED, delay=3) == forward[f]


def test_spring_duration_stretches_settle_time():
    assert spring_progress(0, config=DEFAULT_SPRING, duration_in_frames=60) == 0.0
    assert spring_progress(61, config=DEFAULT_SPRING, duration_in_frames=60) == 1.0
    natural = spring_progress(5, config=DEFAULT_SPRING)
    stretched = spring_progress(5, config=DEFAULT_SPRING, duration_in_frames=600)
    assert stretched < natural


def test_spring_reverse_plays_backwards():
    assert spring_progress(0, config=DEFAULT_SPRING, duration_in_frames=30, reverse=True) == pytest.approx(1.0, abs=1e-2)
    assert spring_progress(30, config=DEFAULT_SPRING, duration_in_frames=30, reverse=True) == 0.0
    assert spring_progress(100, config=DEFAULT_SPRING, duration_in_frames=30, reverse=True) == 0.0


def test_spring_rejects_bad_arguments():
    with pytest.raises(MotionConfigError):
        spring_progress(5, fps=0)
    with pytest.raises(MotionConfigError):
        spring_progress(5, duration_in_frames=0)
    with pytest.raises(MotionConfigError):
        build_model(SpringConfig, mass=0)


def test_spring_presets():
    assert set(SPRING_PRESETS) >= {"subtle", "moderate", "snappy", "bouncy", "elastic", "crisp"}
    assert get_spring_preset("moderate") == DEFAULT_SPRING
    with pytest.raises(MotionConfigError):
        get_spring_preset("floppy")


# ---------------- interpolate ----------------

def test_interpolate_piecewise():
    assert interpolate(5, [0, 10], [0, 100]) == 50.0
    assert interpolate(15, [0, 10, 20], [0, 100, 0]) == 50.0
    assert interpolate(5, [0, 10], [0, 100], easing="ease_in") == 25.0


def test_interpolate_extrapolation_modes():
    assert interpolate(15, [0, 10], [0, 100]) == 100.0
    assert interpolate(-5, [0, 10], [0, 100]) == 0.0
    assert interpolate(15, [0, 10], [0, 100], extrapolate_right="extend") == 150.0
    assert interpolate(-5, [0, 10], [0, 100], extrapolate_left="extend") == -50.0
    assert interpolate(15, [0, 10], [0, 100], extrapolate_right="identity") == 15.0


@pytest.mark.parametrize(
    "input_range,output_range,kwargs",
    [
        ([0, 10], [0], {}),
        ([0], [0], {}),
        ([10, 0], [0, 1], {}),
        ([0, 10], [0, 1], {"extrapolate_left": "wrap"}),
    ],
)
def test_interpolate_rejects_bad_ranges(input_range, output_range, kwargs):
    with pytest.raises(MotionConfigError):
        interpolate(1, input_range, output_range, **kwargs)


# ---------------- dispatch ----------------

def test_progress_dispatches_on_config_type():
    eased = EasedProgressConfig(duration_in_frames=20, easing="linear")
    assert progress(20, 10, eased) == 0.5
    assert progress(5, 10, DEFAULT_SPRING) == 0.0
    assert progress(500, 10, DEFAULT_SPRING) == 1.0
    with pytest.raises(MotionConfigError):
        progress(0, 0, {"duration_in_frames": 10})
