"""
Geometric Primitives for the navigation engine.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class InputVector:
    """
    A normalized stick deflection.

    x grows to the right, y grows downwards (screen convention), so pushing a
    stick "up" gives a negative y.
    """
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> InputVector:
        return InputVector(0.0, 0.0)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def clamped(self) -> InputVector:
        """Scale back onto the unit circle if the vector lies outside it."""
        mag = self.magnitude
        if not math.isfinite(mag):
            return InputVector.zero()
        if mag > 1.0:
            return InputVector(self.x / mag, self.y / mag)
        return self


@dataclass(frozen=True)
class Vector3:
    """A position in scene units (x right, y up, z towards the viewer)."""
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def distance_to(self, other: Vector3) -> float:
        return (self - other).magnitude

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_sequence(cls, values) -> Vector3:
        x, y, z = values
        return cls(float(x), float(y), float(z))
