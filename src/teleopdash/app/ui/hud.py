from __future__ import annotations

from PySide6.QtCore import Qt, QDateTime
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame

from teleopdash.app.formatting import format_distance, format_dms, format_elevation, format_runtime
from teleopdash.config import VISIBLE_APP_NAME
from teleopdash.model.telemetry import TelemetrySnapshot

STATUS_STYLES = {
    "OK": "background:#16a34a; color:white;",
    "Warning": "background:#ca8a04; color:white;",
    "Error": "background:#dc2626; color:white;",
}


class _Field(QWidget):
    """Small caption above a value."""
    def __init__(self, caption: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        v = QVBoxLayout(self)
        v.setContentsMargins(12, 2, 12, 2)
        v.setSpacing(0)
        self.caption = QLabel(caption, self)
        self.caption.setStyleSheet("color:#9ca3af; font-size:10px;")
        self.value = QLabel("—", self)
        self.value.setStyleSheet("color:white;")
        v.addWidget(self.caption)
        v.addWidget(self.value)

    def set_text(self, text: str) -> None:
        self.value.setText(text)


class TopHud(QFrame):
    """Status bar across the top of the dashboard."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setStyleSheet("TopHud { background: rgba(0,0,0,200); border-bottom: 1px solid #1f2937; }")
        h = QHBoxLayout(self)
        h.setContentsMargins(8, 4, 8, 4)

        title = QLabel(VISIBLE_APP_NAME, self)
        title.setStyleSheet("color:white; font-weight:bold;")
        h.addWidget(title)

        self.distance = _Field(self.tr("Distance"), self)
        self.runtime = _Field(self.tr("Running"), self)
        self.latitude = _Field(self.tr("Latitude"), self)
        self.longitude = _Field(self.tr("Longitude"), self)
        self.elevation = _Field(self.tr("Elevation"), self)
        self.temperature = _Field(self.tr("Temperature"), self)
        self.temperature.set_text("21 °C")

        self.status = QLabel(self)
        self.status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status.setMinimumWidth(80)

        for w in (self.distance, self.runtime, self.latitude):
            h.addWidget(w)
        h.addStretch(1)
        h.addWidget(self.status)
        h.addStretch(1)
        for w in (self.longitude, self.elevation, self.temperature):
            h.addWidget(w)

        self.clock = QLabel(self)
        self.clock.setStyleSheet("color:#d1d5db;")
        h.addWidget(self.clock)

        self.set_status("OK")
        self.refresh_clock()

    def set_telemetry(self, telemetry: TelemetrySnapshot) -> None:
        self.distance.set_text(format_distance(telemetry.distance))
        self.latitude.set_text(format_dms(telemetry.latitude, is_latitude=True))
        self.longitude.set_text(format_dms(telemetry.longitude, is_latitude=False))
        self.elevation.set_text(format_elevation(telemetry.elevation))

    def set_runtime(self, seconds: int) -> None:
        self.runtime.set_text(format_runtime(seconds))
        self.refresh_clock()

    def set_status(self, status: str) -> None:
        self.status.setText(status)
        self.status.setStyleSheet(STATUS_STYLES.get(status, STATUS_STYLES["OK"]) + " padding:2px 12px;")

    def refresh_clock(self) -> None:
        now = QDateTime.currentDateTime()
        self.clock.setText(now.toString("ddd dd MMM\nHH:mm"))
