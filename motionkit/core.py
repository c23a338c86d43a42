import logging
import logging.handlers
import os
import sys
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ---------------- Logging ----------------

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'


def get_logger(name="motionkit", log_file=None):
    """JSON-line logger on stdout; a rotating file handler is added once per path."""
    logger = logging.getLogger(name)
    if name.startswith("motionkit."):
        # Module loggers inherit level and handlers from the package logger
        get_logger("motionkit", log_file)
        return logger
    fmt = logging.Formatter(LOG_FORMAT)
    if not logger.handlers:
        logger.setLevel(os.environ.get("MOTIONKIT_LOG_LEVEL", "INFO").upper())
        sh = logging.StreamHandler(sys.stdout)
        sh.setFormatter(fmt)
        logger.addHandler(sh)
        logger.propagate = False
    if log_file:
        target = os.path.abspath(log_file)
        if not any(getattr(h, "baseFilename", None) == target for h in logger.handlers):
            os.makedirs(os.path.dirname(target), exist_ok=True)
            fh = logging.handlers.RotatingFileHandler(target, maxBytes=5_000_000, backupCount=5)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
    return logger


log = get_logger("motionkit")

# ---------------- Config Models ----------------


class SpringCfg(BaseModel):
    mass: float = Field(0.5, gt=0)
    stiffness: float = Field(200.0, gt=0)
    damping: float = Field(80.0, gt=0)
    overshoot_clamping: bool = False


class StaggerCfg(BaseModel):
    base_delay_frames: float = Field(3.0, ge=0)
    distribution: str = "linear"
    item_duration_frames: int = Field(20, ge=0)


class EasingCfg(BaseModel):
    default: str = "linear"
    bezier_tolerance: float = Field(1e-7, gt=0, le=1e-4)


class RenderCfg(BaseModel):
    fps: int = Field(30, ge=1, le=240)


class LoggingCfg(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


class GlobalCfg(BaseModel):
    render: RenderCfg = Field(default_factory=RenderCfg)
    spring: SpringCfg = Field(default_factory=SpringCfg)
    stagger: StaggerCfg = Field(default_factory=StaggerCfg)
    easing: EasingCfg = Field(default_factory=EasingCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Motion config {path} must be a YAML mapping, got {type(data).__name__}")
    return data


def load_env() -> dict:
    """MOTIONKIT_* settings from the process environment, after reading .env."""
    load_dotenv(os.path.join(BASE, ".env"))
    return {k: v for k, v in os.environ.items() if k.startswith("MOTIONKIT_")}


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    if path:
        return path
    env_path = load_env().get("MOTIONKIT_CONFIG")
    if env_path:
        return env_path
    for candidate in ("motion.yaml", "motion.example.yaml"):
        p = os.path.join(BASE, "conf", candidate)
        if os.path.exists(p):
            return p
    return None


def load_config(path: Optional[str] = None) -> GlobalCfg:
    """
    Load engine defaults from YAML.

    Resolution order: explicit path, MOTIONKIT_CONFIG, conf/motion.yaml,
    conf/motion.example.yaml. With no file at all every section takes its defaults.
    """
    resolved = _resolve_config_path(path)
    raw = {}
    if resolved:
        if not os.path.exists(resolved):
            raise FileNotFoundError(f"Config file not found: {resolved}")
        raw = load_yaml(resolved)

    try:
        cfg = GlobalCfg(**raw)
    except ValidationError as e:
        log.error(f"Invalid motion config {resolved or '<defaults>'}: {e}")
        raise

    log.setLevel(cfg.logging.level)
    if cfg.logging.file:
        get_logger("motionkit", log_file=os.path.join(BASE, cfg.logging.file))
    return cfg
