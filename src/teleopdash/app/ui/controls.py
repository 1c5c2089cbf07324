from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QPushButton, QButtonGroup, QLabel,
)

from teleopdash.app.formatting import zoom_percentage
from teleopdash.app.state import DriveMode, LightsModel, Store, SPEED_MULTIPLIERS
from teleopdash.app.ui.base import BasePanel

LIGHT_LABELS = {
    "light": "Light",
    "spot_light": "Spot",
    "laser": "Laser",
}


def _speed_label(value: float) -> str:
    return f"{value:g}x"


class ModePanel(BasePanel):
    """
    Left side: drive mode and speed multiplier selectors.

    Neither has any effect on the navigation engine.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        root = QVBoxLayout(self)

        box_mode = QGroupBox(self.tr("Drive Mode"), self)
        v = QVBoxLayout(box_mode)
        self.mode_group = QButtonGroup(self)
        self.mode_group.setExclusive(True)
        self._mode_buttons: dict[DriveMode, QPushButton] = {}
        for mode in DriveMode:
            btn = self._checkable_button(self.tr(mode.value), lambda m=mode: self.store.set_drive_mode(m), box_mode)
            self.mode_group.addButton(btn)
            self._mode_buttons[mode] = btn
            v.addWidget(btn)
        root.addWidget(box_mode)

        box_speed = QGroupBox(self.tr("Speed"), self)
        v = QVBoxLayout(box_speed)
        self.speed_group = QButtonGroup(self)
        self.speed_group.setExclusive(True)
        self._speed_buttons: dict[float, QPushButton] = {}
        for value in SPEED_MULTIPLIERS:
            btn = self._checkable_button(_speed_label(value), lambda s=value: self.store.set_speed_multiplier(s), box_speed)
            self.speed_group.addButton(btn)
            self._speed_buttons[value] = btn
            v.addWidget(btn)
        root.addWidget(box_speed)
        root.addStretch()

        self.store.drive_mode_changed.connect(self._on_drive_mode)
        self.store.speed_multiplier_changed.connect(self._on_speed_multiplier)
        self._on_drive_mode(self.store.drive_mode)
        self._on_speed_multiplier(self.store.speed_multiplier)

    @Slot(object)
    def _on_drive_mode(self, mode: DriveMode) -> None:
        self._mode_buttons[mode].setChecked(True)

    @Slot(float)
    def _on_speed_multiplier(self, value: float) -> None:
        btn = self._speed_buttons.get(value)
        if btn is not None:
            btn.setChecked(True)


class ActionPanel(BasePanel):
    """Right side: light toggles, zoom, stop and reset."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        root = QVBoxLayout(self)

        lights_row = QHBoxLayout()
        self._light_buttons: dict[str, QPushButton] = {}
        for key, label in LIGHT_LABELS.items():
            btn = self._checkable_button(self.tr(label), lambda k=key: self.store.toggle_light(k))
            self._light_buttons[key] = btn
            lights_row.addWidget(btn)
        root.addLayout(lights_row)

        zoom_row = QHBoxLayout()
        self.btn_zoom_out = QPushButton("−", self)
        self.btn_zoom_in = QPushButton("+", self)
        self.lbl_zoom = QLabel(self)
        self.btn_zoom_out.clicked.connect(self.store.zoom_out)
        self.btn_zoom_in.clicked.connect(self.store.zoom_in)
        zoom_row.addWidget(self.btn_zoom_out)
        zoom_row.addWidget(self.lbl_zoom)
        zoom_row.addWidget(self.btn_zoom_in)
        root.addLayout(zoom_row)

        self.btn_stop = QPushButton(self.tr("Stop"), self)
        self.btn_stop.setStyleSheet("background:#dc2626; color:white; font-weight:bold;")
        self.btn_stop.clicked.connect(self.store.stop)
        root.addWidget(self.btn_stop)

        self.btn_reset = QPushButton(self.tr("Reset"), self)
        self.btn_reset.clicked.connect(self.store.reset)
        root.addWidget(self.btn_reset)
        root.addStretch()

        self.store.lights_changed.connect(self._on_lights)
        self.store.zoom_changed.connect(self._on_zoom)
        self._on_lights(self.store.lights_store)
        self._on_zoom(self.store.engine.zoom)

    @Slot(object)
    def _on_lights(self, lights: LightsModel) -> None:
        for key, btn in self._light_buttons.items():
            btn.setChecked(getattr(lights, key))

    @Slot(float)
    def _on_zoom(self, zoom: float) -> None:
        cfg = self.store.engine.config
        self.lbl_zoom.setText(f"{zoom_percentage(zoom)}%")
        self.btn_zoom_in.setEnabled(zoom < cfg.zoom_max)
        self.btn_zoom_out.setEnabled(zoom > cfg.zoom_min)
