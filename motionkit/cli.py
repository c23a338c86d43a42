#!/usr/bin/env python3
"""
Command-line sampler for the motion engine.

Each sub-command evaluates the engine over a range and prints one JSON object per
line, e.g.:

    python -m motionkit.cli easing ease_out_cubic --samples 5
    python -m motionkit.cli spring --preset bouncy --frames 30
    python -m motionkit.cli stagger --count 5 --distribution center-out
    python -m motionkit.cli color "#ff0000" "#0000ff" --steps 5 --mode hsl
"""

import argparse
import json
import sys
from typing import Iterator, List, Optional

from pydantic import ValidationError

from motionkit.core import get_logger, load_config
from motionkit.engine import (
    SpringConfig,
    StaggerDistribution,
    calculate_stagger_delay,
    get_easing,
    get_spring_preset,
    measure_spring,
    palette_ramp,
    spring_progress,
    stagger_total_duration,
)
from motionkit.engine.sdk import MotionConfigError, build_model

log = get_logger("motionkit.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="motionkit", description="Sample the motion engine as JSON lines")
    ap.add_argument("--config", default=None, help="Path to motion YAML config")
    sub = ap.add_subparsers(dest="command", required=True)

    ep = sub.add_parser("easing", help="Sample an easing curve over [0, 1]")
    ep.add_argument("name", nargs="?", default=None, help="Easing name (default from config)")
    ep.add_argument("--samples", type=int, default=11, help="Number of evenly spaced samples (>= 2)")

    sp = sub.add_parser("spring", help="Sample spring progress per frame")
    sp.add_argument("--preset", default=None, help="Named spring preset")
    sp.add_argument("--mass", type=float, default=None)
    sp.add_argument("--stiffness", type=float, default=None)
    sp.add_argument("--damping", type=float, default=None)
    sp.add_argument("--frames", type=int, default=None, help="Frames to sample (default: settle time)")
    sp.add_argument("--fps", type=int, default=None, help="Frame rate (default from config)")
    sp.add_argument("--delay", type=float, default=0.0, help="Frames before release")

    gp = sub.add_parser("stagger", help="Print per-item stagger delays")
    gp.add_argument("--count", type=int, required=True, help="Number of items")
    gp.add_argument("--base-delay", type=float, default=None, help="Frames between items")
    gp.add_argument(
        "--distribution",
        choices=[d.value for d in StaggerDistribution],
        default=None,
        help="Delay distribution (default from config)",
    )

    cp = sub.add_parser("color", help="Interpolate a palette ramp")
    cp.add_argument("colors", nargs="+", help="Hex colour stops")
    cp.add_argument("--steps", type=int, default=5, help="Number of output colours")
    cp.add_argument("--mode", choices=["rgb", "hsl"], default="hsl")
    return ap


def _easing_rows(args, cfg) -> Iterator[dict]:
    if args.samples < 2:
        raise MotionConfigError(f"--samples must be >= 2, got {args.samples}")
    name = args.name or cfg.easing.default
    ease = get_easing(name)
    for i in range(args.samples):
        t = i / (args.samples - 1)
        yield {"easing": name, "t": t, "value": ease(t)}


def _spring_rows(args, cfg) -> Iterator[dict]:
    if args.preset:
        fields = get_spring_preset(args.preset).model_dump()
    else:
        fields = cfg.spring.model_dump()
    for key in ("mass", "stiffness", "damping"):
        value = getattr(args, key)
        if value is not None:
            fields[key] = value
    spring = build_model(SpringConfig, **fields)
    fps = args.fps or cfg.render.fps
    frames = args.frames if args.frames is not None else int(args.delay) + measure_spring(fps, spring)
    for frame in range(frames + 1):
        yield {"frame": frame, "value": spring_progress(frame, fps=fps, config=spring, delay=args.delay)}


def _stagger_rows(args, cfg) -> Iterator[dict]:
    base = args.base_delay if args.base_delay is not None else cfg.stagger.base_delay_frames
    distribution = args.distribution or cfg.stagger.distribution
    for i in range(args.count):
        yield {"index": i, "delay": calculate_stagger_delay(i, args.count, base, distribution)}
    yield {
        "total_duration": stagger_total_duration(
            args.count, base, cfg.stagger.item_duration_frames, distribution
        )
    }


def _color_rows(args, cfg) -> Iterator[dict]:
    for i, color in enumerate(palette_ramp(args.colors, args.steps, args.mode)):
        yield {"step": i, "color": color}


COMMANDS = {
    "easing": _easing_rows,
    "spring": _spring_rows,
    "stagger": _stagger_rows,
    "color": _color_rows,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config)
        for row in COMMANDS[args.command](args, cfg):
            sys.stdout.write(json.dumps(row) + "\n")
    except (ValidationError, ValueError, FileNotFoundError) as e:
        log.error(f"{args.command} failed: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
