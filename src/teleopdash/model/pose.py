"""
Navigation Pose (Data Model)
============================
The camera pose driven by the two sticks.

Classes:
    NavigationPose: position + yaw + pitch.
    EngineState: Idle/Active/Resetting phases of the engine.
    DirectionIndicators: display-only movement flags.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from teleopdash.model.primitives import Vector3

TWO_PI = 2.0 * math.pi


def default_position() -> Vector3:
    return Vector3(0.0, 2.0, 10.0)


@dataclass(frozen=True)
class NavigationPose:
    """
    Camera placement.

    yaw is an unwrapped accumulator in radians (rotation about the vertical
    axis); use `heading` for a value in [0, 2π). pitch is kept in
    [-π/3, π/3] by the update loop.
    """
    position: Vector3 = field(default_factory=default_position)
    yaw: float = 0.0
    pitch: float = 0.0

    @property
    def heading(self) -> float:
        """yaw wrapped to [0, 2π)."""
        h = math.fmod(self.yaw, TWO_PI)
        if h < 0.0:
            h += TWO_PI
        # fmod of a tiny negative can round up to exactly 2π
        return 0.0 if h >= TWO_PI else h


class EngineState(Enum):
    """Engine-level phase."""
    IDLE = "idle"
    ACTIVE = "active"
    RESETTING = "resetting"


@dataclass(frozen=True)
class DirectionIndicators:
    """Which way the most recently touched stick is pushed. Display only."""
    left: bool = False
    right: bool = False
    forward: bool = False
    backward: bool = False

    @property
    def any(self) -> bool:
        return self.left or self.right or self.forward or self.backward
