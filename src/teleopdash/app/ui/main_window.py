from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout

from teleopdash.app.formatting import compass_direction
from teleopdash.app.frame_loop import FrameLoop
from teleopdash.app.state import Store
from teleopdash.config import VISIBLE_APP_NAME
from teleopdash.controller.attitude import HudAttitude
from teleopdash.controller.engine import FrameOutput
from teleopdash.app.ui.controls import ActionPanel, ModePanel
from teleopdash.app.ui.gauge import GaugeDisplay, SpeedDisplay
from teleopdash.app.ui.hud import TopHud
from teleopdash.app.ui.joystick import JoystickWidget
from teleopdash.app.ui.scene import SceneView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # Global store
        self.store = store or Store()

        central = QWidget(self)
        central.setStyleSheet("background:#000000;")
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        # ---- Top: HUD ----
        self.hud = TopHud(central)
        v.addWidget(self.hud, 0)

        # ---- Middle: side panels around the scene ----
        middle = QHBoxLayout()
        self.mode_panel = ModePanel(self.store, central)
        self.scene = SceneView(central)
        self.action_panel = ActionPanel(self.store, central)
        middle.addWidget(self.mode_panel, 0)
        middle.addWidget(self.scene, 1)
        middle.addWidget(self.action_panel, 0)
        v.addLayout(middle, 1)

        # ---- Bottom: sticks and gauges ----
        bottom = QGridLayout()
        self.stick_left = JoystickWidget("left_stick", central)
        self.stick_right = JoystickWidget("right_stick", central)
        self.gauge_heading = GaugeDisplay(self.tr("Heading"), central)
        self.gauge_pitch = GaugeDisplay(self.tr("Pitch"), central)
        self.gauge_roll = GaugeDisplay(self.tr("Roll"), central)
        self.speed = SpeedDisplay(central)

        bottom.addWidget(self.stick_left, 0, 0, Qt.AlignmentFlag.AlignLeft)
        bottom.addWidget(self.gauge_pitch, 0, 1)
        bottom.addWidget(self.speed, 0, 2)
        bottom.addWidget(self.gauge_heading, 0, 3)
        bottom.addWidget(self.gauge_roll, 0, 4)
        bottom.addWidget(self.stick_right, 0, 5, Qt.AlignmentFlag.AlignRight)
        bottom.setColumnStretch(2, 1)
        v.addLayout(bottom, 0)

        self.setCentralWidget(central)

        # ---- Wiring ----
        self.stick_left.vector_changed.connect(self.store.set_left_input)
        self.stick_right.vector_changed.connect(self.store.set_right_input)

        self.store.frame_updated.connect(self._on_frame)
        self.store.attitude_changed.connect(self._on_attitude)
        self.store.runtime_changed.connect(self.hud.set_runtime)
        self.store.lights_changed.connect(self.scene.set_lights)
        self.store.reset_done.connect(self._on_reset)
        self.store.engine.add_reset_listener(self._release_sticks)

        self.frame_loop = FrameLoop(self.store, self)

        self.hud.set_telemetry(self.store.engine.telemetry())
        self.hud.set_runtime(self.store.runtime_s)
        self._on_attitude(self.store.attitude)

    def start(self) -> None:
        self.frame_loop.start()

    @Slot(object)
    def _on_frame(self, frame: FrameOutput) -> None:
        self.hud.set_telemetry(frame.telemetry)
        self.scene.update_frame(frame)

    @Slot(object)
    def _on_attitude(self, attitude: HudAttitude) -> None:
        self.gauge_heading.set_value(attitude.heading, compass_direction(attitude.heading))
        self.gauge_pitch.set_value(attitude.pitch)
        self.gauge_roll.set_value(attitude.roll)
        self.speed.set_speed(attitude.speed)

    def _release_sticks(self) -> None:
        # Runs inside the engine reset, after its inputs were zeroed
        self.stick_left.release()
        self.stick_right.release()

    @Slot()
    def _on_reset(self) -> None:
        self.hud.set_telemetry(self.store.engine.telemetry())

    def closeEvent(self, event) -> None:
        self.frame_loop.stop()
        self.stick_left.dispose()
        self.stick_right.dispose()
        self.scene.close_plotter()
        super().closeEvent(event)
