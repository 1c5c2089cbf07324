"""
HUD attitude estimate.

The gauges show a heading/pitch/roll readout that is fed directly by stick
events, not by the per-frame pose. It is an independent display estimate: it
is updated once per input event (so it moves faster the more events the
pointer produces) and it is not kept in lockstep with the engine's yaw.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

INITIAL_HEADING = 35
INITIAL_ROLL = 10
HEADING_RATE = 2.0     # degrees per right-stick event at full deflection
PITCH_RANGE = 180.0    # degrees at full deflection
ROLL_RANGE = 180.0
MOVING_THRESHOLD = 0.1


def round_half_up(value: float) -> int:
    """Round .5 towards +inf (Python's round() uses banker's rounding)."""
    return int(math.floor(value + 0.5))


def wrap_degrees(value: float) -> float:
    return ((value % 360.0) + 360.0) % 360.0


@dataclass
class HudAttitude:
    heading: int = INITIAL_HEADING
    pitch: int = 0
    roll: int = INITIAL_ROLL
    speed: float = 0.0
    moving: bool = False

    def on_right_stick(self, x: float, y: float) -> None:
        """Look stick: turns the heading and tilts the pitch readout."""
        self.heading = round_half_up(wrap_degrees(self.heading - x * HEADING_RATE)) % 360
        self.pitch = round_half_up(max(-PITCH_RANGE, min(PITCH_RANGE, self.pitch - y * PITCH_RANGE)))

    def on_left_stick(self, x: float, y: float) -> None:
        """Travel stick: speed from the forward axis, roll from the side axis."""
        self.speed = abs(y)
        self.roll = round_half_up(x * ROLL_RANGE)
        self.moving = abs(x) > MOVING_THRESHOLD or abs(y) > MOVING_THRESHOLD

    def reset(self) -> None:
        self.heading = INITIAL_HEADING
        self.pitch = 0
        self.roll = INITIAL_ROLL
        self.speed = 0.0
        self.moving = False
        logger.debug("HUD attitude reset.")
