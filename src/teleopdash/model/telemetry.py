"""
Telemetry derived from the camera position.

The geolocation is simulated: scene units are mapped linearly onto degrees
around a fixed base point. There is no geodesy here.
"""
from __future__ import annotations

from dataclasses import dataclass

from teleopdash.config import DEFAULT_CONFIG, NavigationConfig
from teleopdash.model.primitives import Vector3


@dataclass(frozen=True)
class TelemetrySnapshot:
    """
    Display summary of the current position.

    Attributes:
        distance: straight-line distance from the origin reference (scene units, shown as m).
        latitude, longitude: simulated degrees.
        elevation: simulated metres.
    """
    distance: float
    latitude: float
    longitude: float
    elevation: float


def derive_telemetry(
    position: Vector3,
    origin: Vector3,
    config: NavigationConfig = DEFAULT_CONFIG,
) -> TelemetrySnapshot:
    return TelemetrySnapshot(
        distance=position.distance_to(origin),
        latitude=config.base_latitude + position.z * config.geo_scale,
        longitude=config.base_longitude + position.x * config.geo_scale,
        elevation=config.base_elevation + position.y * config.elevation_scale,
    )
