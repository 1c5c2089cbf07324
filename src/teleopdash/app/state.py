from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QObject, Signal

from teleopdash.config import DEFAULT_CONFIG, NavigationConfig
from teleopdash.controller.attitude import HudAttitude
from teleopdash.controller.engine import FrameOutput, NavigationEngine
from teleopdash.model.primitives import InputVector

logger = logging.getLogger(__name__)

SPEED_MULTIPLIERS = (2.0, 1.0, 0.5)
DEFAULT_SPEED_MULTIPLIER = 0.5

# Runtime counter starts where the vehicle's session clock already is
INITIAL_RUNTIME_S = 2 * 3600 + 34 * 60


class DriveMode(str, Enum):
    """Drive mode selector. Display state only."""
    AUTO = "Auto"
    SEMI_AUTO = "Semi-Auto"
    MANUAL = "Manual"


@dataclass
class LightsModel:
    """Light toggles. They tint the scene and nothing else."""
    light: bool = False
    spot_light: bool = False
    laser: bool = False


class Store(QObject):
    """Central dashboard state with signals for widget sync."""
    frame_updated = Signal(object)
    zoom_changed = Signal(float)
    lights_changed = Signal(object)
    attitude_changed = Signal(object)
    drive_mode_changed = Signal(object)
    speed_multiplier_changed = Signal(float)
    runtime_changed = Signal(int)
    reset_done = Signal()

    def __init__(self, config: NavigationConfig = DEFAULT_CONFIG, runtime_s: int = INITIAL_RUNTIME_S) -> None:
        super().__init__()
        self.engine = NavigationEngine(config)
        self.attitude = HudAttitude()
        self.lights_store = LightsModel()
        self.drive_mode = DriveMode.MANUAL
        self.speed_multiplier = DEFAULT_SPEED_MULTIPLIER
        self.runtime_s = runtime_s
        self.last_frame: FrameOutput | None = None

        self.engine.add_step_listener(self._publish_frame)

    # ---- sticks ----

    def set_left_input(self, vector: InputVector) -> None:
        self.engine.set_left_input(vector)
        v = self.engine.left_input
        self.attitude.on_left_stick(v.x, v.y)
        self.attitude_changed.emit(self.attitude)

    def set_right_input(self, vector: InputVector) -> None:
        self.engine.set_right_input(vector)
        v = self.engine.right_input
        self.attitude.on_right_stick(v.x, v.y)
        self.attitude_changed.emit(self.attitude)

    # ---- frame ----

    def advance_frame(self) -> FrameOutput:
        """One host-loop tick. The frame is published from inside the step."""
        return self.engine.step()

    def _publish_frame(self, out: FrameOutput) -> None:
        self.last_frame = out
        self.frame_updated.emit(out)

    def tick_runtime(self, seconds: int = 1) -> None:
        self.runtime_s += seconds
        self.runtime_changed.emit(self.runtime_s)

    # ---- zoom ----

    def zoom_in(self) -> None:
        self.zoom_changed.emit(self.engine.zoom_in())

    def zoom_out(self) -> None:
        self.zoom_changed.emit(self.engine.zoom_out())

    def set_zoom(self, zoom: float) -> None:
        self.zoom_changed.emit(self.engine.set_zoom(zoom))

    # ---- toggles ----

    def toggle_light(self, name: str) -> None:
        if not hasattr(self.lights_store, name):
            raise ValueError(f"Unknown light '{name}'.")
        setattr(self.lights_store, name, not getattr(self.lights_store, name))
        self.lights_changed.emit(self.lights_store)

    def set_drive_mode(self, mode: DriveMode | str) -> None:
        self.drive_mode = DriveMode(mode)
        logger.info(f"Drive mode set to {self.drive_mode.value}.")
        self.drive_mode_changed.emit(self.drive_mode)

    def set_speed_multiplier(self, value: float) -> None:
        if value not in SPEED_MULTIPLIERS:
            raise ValueError(f"Speed multiplier must be one of {SPEED_MULTIPLIERS}.")
        self.speed_multiplier = float(value)
        self.speed_multiplier_changed.emit(self.speed_multiplier)

    # ---- reset ----

    def stop(self) -> None:
        """Emergency stop: home pose, default zoom, lights off, gauges reset."""
        self._reset_common()
        logger.info("Emergency stop.")
        self.reset_done.emit()

    def reset(self) -> None:
        """Full reset: like stop(), and the speed multiplier goes back to default."""
        self._reset_common()
        self.speed_multiplier = DEFAULT_SPEED_MULTIPLIER
        self.speed_multiplier_changed.emit(self.speed_multiplier)
        logger.info("Dashboard reset.")
        self.reset_done.emit()

    def _reset_common(self) -> None:
        self.engine.request_reset()
        if self.engine.reset_pending:
            logger.info("Pose reset queued for the start of the next frame.")
        self.zoom_changed.emit(self.engine.set_zoom(self.engine.config.zoom_default))

        self.lights_store = LightsModel()
        self.lights_changed.emit(self.lights_store)

        self.attitude.reset()
        self.attitude_changed.emit(self.attitude)
