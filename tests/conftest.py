"""
Test configuration and fixtures for the motion engine.

Keeps tests independent of any local conf/motion.yaml or MOTIONKIT_* environment.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from motionkit.engine.easings import BEZIER_PRESETS, EASING_PRESETS


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Strip MOTIONKIT_* overrides so config resolution is predictable"""
    for key in list(os.environ):
        if key.startswith("MOTIONKIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def all_easings():
    """Every named easing from both registries"""
    return {**EASING_PRESETS, **BEZIER_PRESETS}


@pytest.fixture
def brand_colors():
    """Representative colour set covering primaries, greys and short hex"""
    return ["#ff0000", "#00ff00", "#0000ff", "#808080", "#FFF", "#000000", "#1e90ff"]


@pytest.fixture
def write_config(tmp_path):
    """Write a motion YAML config and return its path"""
    import yaml

    def _write(obj, name="motion.yaml"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(obj, f, sort_keys=False)
        return str(path)

    return _write
