from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QEvent, QPointF, QRectF, QSignalBlocker, Signal
from PySide6.QtGui import QColor, QPainter, QPen, QBrush, QEventPoint
from PySide6.QtWidgets import QWidget

from teleopdash.controller.capture import Bounds, InputCapture
from teleopdash.model.primitives import InputVector

logger = logging.getLogger(__name__)

MOUSE_CONTACT = -1
KNOB_TRAVEL = 0.4  # knob centre moves up to 40% of the widget size
RIM_MARGIN = 8     # room for the rim pen outside the base circle
ACCENT = QColor("#F59E0B")


class QtCaptureSurface:
    """
    Keeps receiving mouse events while a gesture is in flight by grabbing the
    mouse for the stick widget. Touch points stay with the widget that got
    TouchBegin anyway, so touch needs no extra work here.
    """
    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    def attach(self, capture: InputCapture) -> None:
        self._widget.grabMouse()
        logger.debug(f"[{capture.name}] mouse grabbed")

    def detach(self, capture: InputCapture) -> None:
        if QWidget.mouseGrabber() is self._widget:
            self._widget.releaseMouse()
            logger.debug(f"[{capture.name}] mouse released")


class JoystickWidget(QWidget):
    """
    Round virtual stick.

    Emits `vector_changed(InputVector)` on press, drag and release. The release
    always emits (0, 0).
    """
    vector_changed = Signal(object)

    def __init__(self, name: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName(name)
        self.setMinimumSize(128, 128)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.capture = InputCapture(
            on_change=self._on_vector,
            surface=QtCaptureSurface(self),
            name=name,
        )

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def vector(self) -> InputVector:
        return self.capture.vector

    def release(self) -> None:
        """
        Drop the current gesture without notifying listeners. Used on reset,
        where the engine has already zeroed its inputs.
        """
        blocker = QSignalBlocker(self)
        try:
            self.capture.cancel()
        finally:
            blocker.unblock()

    def dispose(self) -> None:
        self.capture.dispose()

    def sizeHint(self):
        return self.minimumSize() * 1.25

    # ------------------------------------------------------------------------------
    # Gesture plumbing
    # ------------------------------------------------------------------------------

    def _bounds(self) -> Bounds | None:
        if not self.isVisible():
            return None
        side = self._circle_side()
        if side <= 0:
            return None
        rect = self._circle_rect(side)
        return Bounds(rect.left(), rect.top(), rect.width(), rect.height())

    def _on_vector(self, vector: InputVector) -> None:
        self.update()
        self.vector_changed.emit(vector)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.capture.begin(pos.x(), pos.y(), self._bounds(), MOUSE_CONTACT)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        pos = event.position()
        self.capture.move(pos.x(), pos.y(), MOUSE_CONTACT)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.capture.end(MOUSE_CONTACT)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def event(self, event) -> bool:
        etype = event.type()
        if etype == QEvent.Type.TouchBegin:
            points = event.points()
            if points:
                p = points[0]
                self.capture.begin(p.position().x(), p.position().y(), self._bounds(), p.id())
            event.accept()
            return True

        if etype in (QEvent.Type.TouchUpdate, QEvent.Type.TouchEnd):
            for p in event.points():
                if p.state() == QEventPoint.State.Released or etype == QEvent.Type.TouchEnd:
                    self.capture.end(p.id())
                else:
                    self.capture.move(p.position().x(), p.position().y(), p.id())
            event.accept()
            return True

        if etype == QEvent.Type.TouchCancel:
            self.capture.cancel()
            event.accept()
            return True

        return super().event(event)

    def hideEvent(self, event) -> None:
        self.capture.cancel()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:
        self.capture.dispose()
        super().closeEvent(event)

    # ------------------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------------------

    def _circle_side(self) -> int:
        """Diameter of the painted base circle; gestures normalise against it too."""
        return min(self.width(), self.height()) - RIM_MARGIN

    def _circle_rect(self, side: float) -> QRectF:
        return QRectF(
            (self.width() - side) / 2.0,
            (self.height() - side) / 2.0,
            side,
            side,
        )

    def paintEvent(self, event) -> None:
        side = self._circle_side()
        if side <= 0:
            return
        rect = self._circle_rect(side)
        center = rect.center()

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # base
        painter.setPen(QPen(QColor("#374151"), 4))
        painter.setBrush(QBrush(QColor(31, 41, 55, 180)))
        painter.drawEllipse(rect)

        # direction markers
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor("white"))
        inset = side * 0.08
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            marker = QPointF(
                center.x() + dx * (side / 2.0 - inset),
                center.y() + dy * (side / 2.0 - inset),
            )
            painter.drawEllipse(marker, 3, 3)

        # knob
        v = self.capture.vector
        knob_center = QPointF(
            center.x() + v.x * KNOB_TRAVEL * side,
            center.y() + v.y * KNOB_TRAVEL * side,
        )
        knob_r = side * 0.25
        painter.setBrush(QColor("#111827"))
        painter.setPen(QPen(ACCENT, 2))
        painter.drawEllipse(knob_center, knob_r, knob_r)
        inner = QColor(ACCENT)
        inner.setAlpha(128)
        painter.setPen(QPen(inner, 4))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(knob_center, knob_r - 4, knob_r - 4)
        painter.end()
