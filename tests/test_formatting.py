"""
Tests for the HUD text helpers
"""
import pytest

from teleopdash.app.formatting import (
    compass_direction,
    format_distance,
    format_dms,
    format_elevation,
    format_runtime,
    zoom_percentage,
)


class TestDistanceAndElevation:
    def test_distance_three_decimals(self):
        assert format_distance(0.0) == "0.000 m"
        assert format_distance(1.23456) == "1.235 m"

    def test_elevation_rounded(self):
        assert format_elevation(147.0) == "147 m"
        assert format_elevation(146.5) == "147 m"
        assert format_elevation(146.4) == "146 m"


class TestDms:
    def test_base_latitude(self):
        assert format_dms(60.2828, True) == "60°16'58\" N"

    def test_base_longitude(self):
        assert format_dms(25.0267, False) == "25°1'36\" E"

    def test_southern_and_western(self):
        assert format_dms(-60.2828, True) == "60°16'58\" S"
        assert format_dms(-25.0267, False) == "25°1'36\" W"

    def test_whole_degrees(self):
        assert format_dms(10.0, True) == "10°0'0\" N"


class TestRuntime:
    @pytest.mark.parametrize("seconds, text", [
        (0, "0h 00m 00s"),
        (9240, "2h 34m 00s"),
        (3661, "1h 01m 01s"),
        (-5, "0h 00m 00s"),
        (36000, "10h 00m 00s"),
    ])
    def test_format(self, seconds, text):
        assert format_runtime(seconds) == text


class TestCompass:
    @pytest.mark.parametrize("degrees, point", [
        (0, "N"),
        (22, "N"),
        (22.5, "NE"),
        (35, "NE"),
        (90, "E"),
        (180, "S"),
        (270, "W"),
        (337.5, "N"),
        (350, "N"),
    ])
    def test_points(self, degrees, point):
        assert compass_direction(degrees) == point


def test_zoom_percentage():
    assert zoom_percentage(1.0) == 100
    assert zoom_percentage(0.5) == 50
    assert zoom_percentage(1.5) == 150
