"""
Tests for the gauge attitude estimate
"""
import pytest

from teleopdash.controller.attitude import HudAttitude, round_half_up, wrap_degrees


class TestHelpers:
    @pytest.mark.parametrize("value, expected", [
        (2.5, 3),
        (3.5, 4),
        (-2.5, -2),
        (0.49, 0),
        (359.6, 360),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (-1.0, 359.0),
        (360.0, 0.0),
        (725.0, 5.0),
        (35.0, 35.0),
    ])
    def test_wrap_degrees(self, value, expected):
        assert wrap_degrees(value) == pytest.approx(expected)


class TestRightStick:
    def test_initial_values(self):
        a = HudAttitude()
        assert (a.heading, a.pitch, a.roll, a.speed, a.moving) == (35, 0, 10, 0.0, False)

    def test_heading_turns_per_event(self):
        a = HudAttitude()
        a.on_right_stick(1.0, 0.0)
        assert a.heading == 33
        a.on_right_stick(-0.5, 0.0)
        assert a.heading == 34

    def test_heading_wraps(self):
        a = HudAttitude(heading=1)
        a.on_right_stick(1.0, 0.0)
        assert a.heading == 359
        a = HudAttitude(heading=359)
        a.on_right_stick(-1.0, 0.0)
        assert a.heading == 1

    def test_pitch_accumulates_and_saturates(self):
        a = HudAttitude()
        a.on_right_stick(0.0, -0.5)
        assert a.pitch == 90
        a.on_right_stick(0.0, -0.5)
        assert a.pitch == 180
        a.on_right_stick(0.0, -0.5)
        assert a.pitch == 180
        a.on_right_stick(0.0, 1.0)
        assert a.pitch == 0


class TestLeftStick:
    def test_speed_roll_and_moving(self):
        a = HudAttitude()
        a.on_left_stick(0.5, -0.8)
        assert a.speed == pytest.approx(0.8)
        assert a.roll == 90
        assert a.moving

    def test_small_deflection_is_not_moving(self):
        a = HudAttitude()
        a.on_left_stick(0.05, 0.05)
        assert not a.moving
        assert a.roll == 9

    def test_release_zeroes_roll(self):
        a = HudAttitude()
        a.on_left_stick(0.0, 0.0)
        assert a.roll == 0
        assert a.speed == 0.0

    def test_left_stick_leaves_heading_alone(self):
        a = HudAttitude()
        a.on_left_stick(1.0, 0.0)
        assert a.heading == 35


def test_reset_restores_initial_values():
    a = HudAttitude()
    a.on_right_stick(1.0, -1.0)
    a.on_left_stick(-1.0, 1.0)
    a.reset()
    assert a == HudAttitude()
