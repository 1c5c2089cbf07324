"""
Configuration & Tuning Constants
================================
This module serves as the central registry for global constants and the
navigation tuning values.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (stick rates, dead zone, geo base)
   from being scattered throughout the engine and the UI.
2. Tuning: The values can be overridden from a JSON file without touching
   code, which is handy when trying a different stick feel.

Exports:
    NavigationConfig: Frozen dataclass with every kinematic constant.
    DEFAULT_CONFIG: The stock tuning.
    load_config: Read a JSON override file.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Application identity (used by QCoreApplication / QSettings)
ORG_ID = "oinride"
APP_ID = "teleopdash"
VISIBLE_APP_NAME = "ControlWire Dashboard"

LOG_LEVEL_ENV = "TELEOPDASH_LOG_LEVEL"
LOG_FILE_ENV = "TELEOPDASH_LOG_FILE"
CONFIG_PATH_ENV = "TELEOPDASH_CONFIG"


@dataclass(frozen=True)
class NavigationConfig:
    """
    Every constant the navigation engine and telemetry depend on.

    Rates are fixed per-frame increments, not per-second values.
    """
    # Input filtering
    dead_zone: float = 0.1
    indicator_threshold: float = 0.2

    # Right stick (look + slow travel)
    look_rate: float = 0.02            # rad per frame at full deflection
    right_move_speed: float = 0.05     # units per frame
    pitch_limit: float = math.pi / 3   # |pitch| never exceeds this

    # Left stick (travel + strafe)
    left_move_speed: float = 0.1
    strafe_yaw_coupling: float = 0.01  # yaw drift while strafing

    # Home pose
    home_position: tuple[float, float, float] = (0.0, 2.0, 10.0)

    # Zoom / field of view
    base_fov: float = 75.0
    zoom_min: float = 0.5
    zoom_max: float = 2.0
    zoom_step: float = 0.5
    zoom_default: float = 1.0

    # Simulated geolocation
    base_latitude: float = 60.2828
    base_longitude: float = 25.0267
    geo_scale: float = 1e-4            # degrees per scene unit
    base_elevation: float = 127.0
    elevation_scale: float = 10.0      # metres per scene unit

    # Host loop
    frame_interval_ms: int = 16

    def __post_init__(self) -> None:
        if self.dead_zone < 0.0 or self.dead_zone >= 1.0:
            raise ValueError("dead_zone must be in [0, 1)")
        if self.pitch_limit <= 0.0:
            raise ValueError("pitch_limit must be > 0")
        if not (0.0 < self.zoom_min <= self.zoom_default <= self.zoom_max):
            raise ValueError("zoom range must satisfy 0 < min <= default <= max")
        if self.zoom_step <= 0.0:
            raise ValueError("zoom_step must be > 0")
        if self.frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be > 0")
        if len(self.home_position) != 3:
            raise ValueError("home_position must have three components")
        # JSON gives lists; keep the hashable tuple form
        object.__setattr__(self, "home_position", tuple(float(v) for v in self.home_position))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NavigationConfig:
        """Build a config from a (partial) mapping. Unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown navigation config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["home_position"] = list(self.home_position)
        return d


DEFAULT_CONFIG = NavigationConfig()


def load_config(path: str | Path | None) -> NavigationConfig:
    """
    Load a JSON override file on top of the defaults.

    Args:
        path: Path to a JSON object with any subset of NavigationConfig fields.
              None returns DEFAULT_CONFIG.
    """
    if path is None:
        return DEFAULT_CONFIG

    p = Path(path)
    logger.info(f"Loading navigation config from: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Navigation config file must contain a JSON object")

    return NavigationConfig.from_dict(data)
