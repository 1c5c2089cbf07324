"""
Text formatting for the HUD.
"""
from __future__ import annotations

import math

from teleopdash.controller.attitude import round_half_up

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def format_distance(distance: float) -> str:
    return f"{distance:.3f} m"


def format_elevation(elevation: float) -> str:
    return f"{round_half_up(elevation)} m"


def format_dms(decimal: float, is_latitude: bool) -> str:
    """
    Degrees, minutes, seconds with a hemisphere letter, e.g. 60°16'58" N.

    Minutes and seconds are truncated, not rounded.
    """
    absolute = abs(decimal)
    degrees = math.floor(absolute)
    minutes_full = (absolute - degrees) * 60.0
    minutes = math.floor(minutes_full)
    seconds = math.floor((minutes_full - minutes) * 60.0)

    if is_latitude:
        hemisphere = "N" if decimal >= 0 else "S"
    else:
        hemisphere = "E" if decimal >= 0 else "W"

    return f"{degrees}°{minutes}'{seconds}\" {hemisphere}"


def format_runtime(seconds: int) -> str:
    """Elapsed time as 'Xh MMm SSs'."""
    seconds = max(0, int(seconds))
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours}h {minutes:02d}m {secs:02d}s"


def compass_direction(degrees: float) -> str:
    index = round_half_up(degrees / 45.0) % 8
    return COMPASS_POINTS[index]


def zoom_percentage(zoom: float) -> int:
    return round_half_up(zoom * 100.0)
