"""
Camera placement from a navigation pose.

The scene camera uses an Euler XYZ convention: pitch about the lateral axis
applied after yaw about the vertical axis, looking down -Z at rest.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from teleopdash.model.pose import NavigationPose

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class CameraPlacement:
    position: npt.NDArray[np.float64]
    focal_point: npt.NDArray[np.float64]
    view_up: npt.NDArray[np.float64]
    view_angle: float


def look_direction(yaw: float, pitch: float) -> npt.NDArray[np.float64]:
    """Unit vector the camera looks along."""
    return np.array(
        [
            -math.sin(yaw),
            math.sin(pitch) * math.cos(yaw),
            -math.cos(pitch) * math.cos(yaw),
        ],
        dtype=np.float64,
    )


def view_up(pitch: float) -> npt.NDArray[np.float64]:
    return np.array([0.0, math.cos(pitch), math.sin(pitch)], dtype=np.float64)


def camera_placement(pose: NavigationPose, fov: float, focus_distance: float = 1.0) -> CameraPlacement:
    position = pose.position.to_array()
    direction = look_direction(pose.heading, pose.pitch)
    return CameraPlacement(
        position=position,
        focal_point=position + direction * focus_distance,
        view_up=view_up(pose.pitch),
        view_angle=fov,
    )
