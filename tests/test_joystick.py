"""
Tests for the Qt stick widget and its mouse-grab capture surface
"""
import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication, QWidget

from teleopdash.app.ui.joystick import JoystickWidget
from teleopdash.controller.capture import Bounds
from teleopdash.model.primitives import InputVector

# 208 px widget -> 200 px base circle at (4, 4), centre (104, 104)
SIZE = 208
CENTER = 104.0
ZERO = InputVector(0.0, 0.0)


def send_mouse(widget, etype, x, y, button=Qt.MouseButton.LeftButton, buttons=None):
    if buttons is None:
        buttons = Qt.MouseButton.NoButton if etype == QEvent.Type.MouseButtonRelease else Qt.MouseButton.LeftButton
    pos = QPointF(x, y)
    event = QMouseEvent(etype, pos, widget.mapToGlobal(pos), button, buttons, Qt.KeyboardModifier.NoModifier)
    QApplication.sendEvent(widget, event)


def press(widget, x, y, button=Qt.MouseButton.LeftButton):
    send_mouse(widget, QEvent.Type.MouseButtonPress, x, y, button, button)


def drag(widget, x, y):
    send_mouse(widget, QEvent.Type.MouseMove, x, y, Qt.MouseButton.NoButton)


def lift(widget, x, y):
    send_mouse(widget, QEvent.Type.MouseButtonRelease, x, y)


@pytest.fixture
def stick(qt_app):
    widget = JoystickWidget("left_stick")
    widget.resize(SIZE, SIZE)
    widget.show()
    yield widget
    widget.dispose()
    widget.close()
    widget.deleteLater()


@pytest.fixture
def emitted(stick):
    seen = []
    stick.vector_changed.connect(lambda v: seen.append(v))
    return seen


class TestMouseGrab:
    """The mouse is grabbed for exactly the lifetime of a gesture"""

    def test_press_grabs_mouse(self, stick, emitted):
        assert QWidget.mouseGrabber() is None
        press(stick, CENTER, CENTER)
        assert QWidget.mouseGrabber() is stick
        assert stick.capture.active
        assert emitted == [ZERO]

    def test_release_ungrabs_and_emits_zero(self, stick, emitted):
        press(stick, CENTER, CENTER)
        drag(stick, CENTER + 50.0, CENTER)
        lift(stick, CENTER + 50.0, CENTER)
        assert QWidget.mouseGrabber() is None
        assert not stick.capture.active
        assert emitted[-1] == ZERO
        assert stick.vector == ZERO

    def test_right_button_does_not_start_a_gesture(self, stick, emitted):
        press(stick, CENTER, CENTER, Qt.MouseButton.RightButton)
        assert QWidget.mouseGrabber() is None
        assert emitted == []

    def test_hidden_widget_ignores_press(self, qt_app):
        widget = JoystickWidget("hidden_stick")
        widget.resize(SIZE, SIZE)
        seen = []
        widget.vector_changed.connect(lambda v: seen.append(v))
        press(widget, CENTER, CENTER)
        assert seen == []
        assert QWidget.mouseGrabber() is None
        widget.dispose()
        widget.deleteLater()


class TestDrag:
    def test_drag_to_painted_rim_is_full_deflection(self, stick, emitted):
        press(stick, CENTER, CENTER)
        drag(stick, CENTER + 100.0, CENTER)
        assert emitted[-1] == InputVector(1.0, 0.0)
        drag(stick, CENTER, CENTER - 50.0)
        assert emitted[-1] == InputVector(0.0, -0.5)

    def test_drag_outside_widget_is_still_tracked_and_clamped(self, stick, emitted):
        press(stick, CENTER, CENTER)
        drag(stick, 400.0, CENTER)
        assert emitted[-1] == InputVector(1.0, 0.0)
        drag(stick, CENTER, -500.0)
        assert emitted[-1] == InputVector(0.0, -1.0)
        drag(stick, CENTER + 300.0, CENTER + 400.0)
        assert emitted[-1].x == pytest.approx(0.6)
        assert emitted[-1].y == pytest.approx(0.8)
        assert QWidget.mouseGrabber() is stick

    def test_move_without_press_is_ignored(self, stick, emitted):
        drag(stick, CENTER + 30.0, CENTER)
        assert emitted == []

    def test_bounds_match_painted_circle(self, stick):
        assert stick._bounds() == Bounds(4.0, 4.0, 200.0, 200.0)


class TestTeardown:
    """Hide, close and reset all end a gesture and drop the grab"""

    def test_hide_mid_gesture_emits_zero_and_ungrabs(self, stick, emitted):
        press(stick, CENTER, CENTER)
        drag(stick, CENTER + 60.0, CENTER + 20.0)
        stick.hide()
        assert emitted[-1] == ZERO
        assert QWidget.mouseGrabber() is None
        assert not stick.capture.active

    def test_release_blocks_trailing_signal(self, stick, emitted):
        press(stick, CENTER, CENTER)
        drag(stick, CENTER + 60.0, CENTER)
        count = len(emitted)

        stick.release()
        assert len(emitted) == count
        assert stick.vector == ZERO
        assert QWidget.mouseGrabber() is None
        assert not stick.signalsBlocked()

    def test_new_gesture_after_release(self, stick, emitted):
        press(stick, CENTER, CENTER)
        stick.release()
        press(stick, CENTER, CENTER + 100.0)
        assert emitted[-1] == InputVector(0.0, 1.0)
        assert QWidget.mouseGrabber() is stick

    def test_close_mid_gesture_disposes(self, stick, emitted):
        press(stick, CENTER, CENTER)
        stick.close()
        assert stick.capture.disposed
        assert QWidget.mouseGrabber() is None
        assert emitted[-1] == ZERO

        count = len(emitted)
        stick.show()
        press(stick, CENTER, CENTER)
        assert len(emitted) == count
        assert QWidget.mouseGrabber() is None
