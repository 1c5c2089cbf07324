"""
Per-frame pose integration.

`step_pose` is pure: same inputs, same output, no hidden state. It is called
once per rendered frame with fixed increments (no elapsed-time scaling).

Order of application:
    1. dead zone on every axis of both sticks
    2. right stick: yaw, pitch, then travel along the *updated* yaw
    3. left stick: travel, then strafe (strafing also nudges yaw)

The right-before-left order changes the numbers when both sticks are held, so
it must not be rearranged.
"""
from __future__ import annotations

import math

from teleopdash.config import DEFAULT_CONFIG, NavigationConfig
from teleopdash.model.pose import DirectionIndicators, NavigationPose
from teleopdash.model.primitives import InputVector, Vector3

HALF_PI = math.pi / 2.0


def apply_dead_zone(value: float, threshold: float = DEFAULT_CONFIG.dead_zone) -> float:
    return 0.0 if abs(value) < threshold else value


def filter_input(vector: InputVector, threshold: float = DEFAULT_CONFIG.dead_zone) -> InputVector:
    """Dead zone applied per axis."""
    return InputVector(apply_dead_zone(vector.x, threshold), apply_dead_zone(vector.y, threshold))


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def direction_indicators(
    vector: InputVector,
    threshold: float = DEFAULT_CONFIG.indicator_threshold,
) -> DirectionIndicators:
    """Movement flags for the HUD; up on the stick (negative y) is forward."""
    return DirectionIndicators(
        left=vector.x < -threshold,
        right=vector.x > threshold,
        forward=vector.y < -threshold,
        backward=vector.y > threshold,
    )


def _translate(x: float, z: float, angle: float, amount: float) -> tuple[float, float]:
    """Move `amount` along the ground direction given by `angle`."""
    return x + math.sin(angle) * amount, z - math.cos(angle) * amount


def step_pose(
    pose: NavigationPose,
    left: InputVector,
    right: InputVector,
    config: NavigationConfig = DEFAULT_CONFIG,
) -> NavigationPose:
    """
    Advance the pose by one frame.

    Args:
        pose: pose at the start of the frame.
        left: left stick (travel/strafe).
        right: right stick (look + slow travel).
        config: tuning constants.

    Returns:
        The pose at the end of the frame.
    """
    lx = apply_dead_zone(left.x, config.dead_zone)
    ly = apply_dead_zone(left.y, config.dead_zone)
    rx = apply_dead_zone(right.x, config.dead_zone)
    ry = apply_dead_zone(right.y, config.dead_zone)

    x, y, z = pose.position.x, pose.position.y, pose.position.z
    yaw = pose.yaw
    pitch = pose.pitch

    # --- right stick ---
    if rx != 0.0:
        yaw -= rx * config.look_rate

    pitch = clamp(pitch - ry * config.look_rate, -config.pitch_limit, config.pitch_limit)

    d = -ry * config.right_move_speed
    if d != 0.0:
        x, z = _translate(x, z, yaw, d)

    # --- left stick ---
    d = -ly * config.left_move_speed
    if d != 0.0:
        x, z = _translate(x, z, yaw, d)

    s = lx * config.left_move_speed
    if s != 0.0:
        x, z = _translate(x, z, yaw + HALF_PI, s)
        # strafing drifts the heading slightly
        yaw -= lx * config.strafe_yaw_coupling

    return NavigationPose(position=Vector3(x, y, z), yaw=yaw, pitch=pitch)
