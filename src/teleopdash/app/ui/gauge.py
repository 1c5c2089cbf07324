from __future__ import annotations

import math

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QColor, QPainter, QPen, QFont
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout

ACCENT = QColor("#F59E0B")


class GaugeDisplay(QWidget):
    """
    Round dial with eight ticks and a needle rotated by `value` degrees.
    The centre shows |value|°, an optional direction and a label.
    """
    def __init__(self, label: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(96, 96)
        self._value: float = 0.0
        self._label = label
        self._direction = ""

    def set_value(self, value: float, direction: str = "") -> None:
        self._value = value
        self._direction = direction
        self.update()

    def paintEvent(self, event) -> None:
        side = min(self.width(), self.height())
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        # draw in a 100x100 box like an SVG viewBox
        painter.translate((self.width() - side) / 2.0, (self.height() - side) / 2.0)
        painter.scale(side / 100.0, side / 100.0)

        dashed = QPen(QColor("#4B5563"), 2)
        dashed.setDashPattern([2, 2])
        painter.setPen(dashed)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(QPointF(50, 50), 45, 45)

        painter.setPen(QPen(QColor("#6B7280"), 2))
        for i in range(8):
            angle = math.radians(i * 45)
            painter.drawLine(
                QPointF(50 + 38 * math.sin(angle), 50 - 38 * math.cos(angle)),
                QPointF(50 + 45 * math.sin(angle), 50 - 45 * math.cos(angle)),
            )

        painter.setPen(QPen(QColor("#374151"), 1))
        painter.drawEllipse(QPointF(50, 50), 35, 35)

        painter.save()
        painter.translate(50, 50)
        painter.rotate(self._value)
        painter.setPen(QPen(ACCENT, 3))
        painter.drawLine(QPointF(0, 0), QPointF(0, -40))
        painter.restore()

        font = QFont(painter.font())
        font.setPointSizeF(9)
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor("white"))
        painter.drawText(QRectF(0, 30, 100, 20), Qt.AlignmentFlag.AlignCenter, f"{abs(self._value):g}°")

        font.setBold(False)
        font.setPointSizeF(6)
        painter.setFont(font)
        if self._direction:
            painter.setPen(ACCENT)
            painter.drawText(QRectF(0, 48, 100, 12), Qt.AlignmentFlag.AlignCenter, self._direction)
        if self._label:
            painter.setPen(QColor("#9CA3AF"))
            painter.drawText(QRectF(0, 60, 100, 12), Qt.AlignmentFlag.AlignCenter, self._label)
        painter.end()


class SpeedDisplay(QWidget):
    """Large speed readout in m/s."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)
        self.value = QLabel("0.0", self)
        self.value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.value.setStyleSheet("color:white; font-size:48px; font-weight:bold;")
        unit = QLabel("m/s", self)
        unit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        unit.setStyleSheet("color:white;")
        v.addWidget(self.value)
        v.addWidget(unit)

    def set_speed(self, speed: float) -> None:
        self.value.setText(f"{speed:.1f}")
