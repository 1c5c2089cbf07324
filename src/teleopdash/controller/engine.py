"""
Navigation Engine
=================
Owns the camera pose and everything that may write to it.

Why is this file needed?
------------------------
1. Single writer: The pose is only changed by `step` (once per frame) and by
   `request_reset`. Both run on the host's thread, so no locking is needed.
2. Atomic reset: A reset asked for while a frame is being computed (e.g. by a
   listener called from inside `step`) is held back and applied as the first
   thing of the next frame. Outside a frame it is applied immediately. Either
   way position, rotation and origin change together.
3. Explicit ordering: The host calls `step` itself, which keeps the frame
   order visible and testable.

Classes:
    FrameOutput: Everything the presentation layer needs for one frame.
    NavigationEngine: The engine object.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from teleopdash.config import DEFAULT_CONFIG, NavigationConfig
from teleopdash.controller.update_loop import (
    clamp,
    direction_indicators,
    filter_input,
    step_pose,
)
from teleopdash.model.pose import DirectionIndicators, EngineState, NavigationPose
from teleopdash.model.primitives import InputVector, Vector3
from teleopdash.model.telemetry import TelemetrySnapshot, derive_telemetry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameOutput:
    pose: NavigationPose
    telemetry: TelemetrySnapshot
    fov: float
    state: EngineState
    indicators: DirectionIndicators


class NavigationEngine:
    """
    Dual-stick navigation engine.

    Typical host loop:
        engine.set_left_input(left_vec)     # from input events
        engine.set_right_input(right_vec)
        out = engine.step()                 # once per rendered frame
    """

    def __init__(self, config: NavigationConfig = DEFAULT_CONFIG) -> None:
        self.config = config

        home = Vector3.from_sequence(config.home_position)
        self._pose = NavigationPose(position=home, yaw=0.0, pitch=0.0)
        self._origin: Vector3 = home
        self._zoom: float = config.zoom_default

        self._left = InputVector.zero()
        self._right = InputVector.zero()
        self._indicators = DirectionIndicators()

        self._state = EngineState.IDLE
        self._in_step = False
        self._reset_pending = False
        self._resetting = False
        self._frame_count = 0

        self._step_listeners: list[Callable[[FrameOutput], None]] = []
        self._reset_listeners: list[Callable[[], None]] = []

    # ------------------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------------------

    @property
    def pose(self) -> NavigationPose:
        return self._pose

    @property
    def origin(self) -> Vector3:
        return self._origin

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def indicators(self) -> DirectionIndicators:
        return self._indicators

    @property
    def left_input(self) -> InputVector:
        return self._left

    @property
    def right_input(self) -> InputVector:
        return self._right

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def fov(self) -> float:
        return self.config.base_fov / self._zoom

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def reset_pending(self) -> bool:
        return self._reset_pending

    def telemetry(self) -> TelemetrySnapshot:
        return derive_telemetry(self._pose.position, self._origin, self.config)

    # ------------------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------------------

    def set_left_input(self, vector: InputVector) -> None:
        self._left = vector.clamped()
        self._indicators = direction_indicators(self._left, self.config.indicator_threshold)

    def set_right_input(self, vector: InputVector) -> None:
        self._right = vector.clamped()
        self._indicators = direction_indicators(self._right, self.config.indicator_threshold)

    # ------------------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------------------

    def set_zoom(self, zoom: float) -> float:
        """Clamp to the configured range. Returns the zoom actually applied."""
        z = clamp(float(zoom), self.config.zoom_min, self.config.zoom_max)
        if z != self._zoom:
            logger.debug(f"Zoom {self._zoom:g} -> {z:g} (fov {self.config.base_fov / z:.1f})")
        self._zoom = z
        return z

    def zoom_in(self) -> float:
        return self.set_zoom(self._zoom + self.config.zoom_step)

    def zoom_out(self) -> float:
        return self.set_zoom(self._zoom - self.config.zoom_step)

    # ------------------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------------------

    def add_step_listener(self, listener: Callable[[FrameOutput], None]) -> None:
        self._step_listeners.append(listener)

    def add_reset_listener(self, listener: Callable[[], None]) -> None:
        self._reset_listeners.append(listener)

    def step(
        self,
        left: Optional[InputVector] = None,
        right: Optional[InputVector] = None,
    ) -> FrameOutput:
        """
        Compute one frame.

        Args:
            left, right: optional stick vectors for this frame. When given they
                replace the stored inputs (as if set_*_input had been called).
        """
        # A reset deferred from the previous frame goes first
        if self._reset_pending:
            self._apply_reset()

        if left is not None:
            self.set_left_input(left)
        if right is not None:
            self.set_right_input(right)

        self._in_step = True
        try:
            self._pose = step_pose(self._pose, self._left, self._right, self.config)
            self._update_state()
            self._frame_count += 1
            output = self._output()
            for listener in list(self._step_listeners):
                listener(output)
        finally:
            self._in_step = False

        return output

    def _update_state(self) -> None:
        threshold = self.config.dead_zone
        moving = not (filter_input(self._left, threshold).is_zero and filter_input(self._right, threshold).is_zero)

        if self._state is EngineState.IDLE and moving:
            self._set_state(EngineState.ACTIVE)
        elif self._state is EngineState.ACTIVE and not moving:
            self._set_state(EngineState.IDLE)

    def _set_state(self, state: EngineState) -> None:
        if state is not self._state:
            logger.info(f"Engine state {self._state.value} -> {state.value}")
            self._state = state

    def _output(self) -> FrameOutput:
        return FrameOutput(
            pose=self._pose,
            telemetry=self.telemetry(),
            fov=self.fov,
            state=self._state,
            indicators=self._indicators,
        )

    # ------------------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------------------

    def request_reset(self) -> bool:
        """
        Return to the home pose and rebase the distance origin.

        Returns:
            True if the reset was applied now, False if it was deferred to the
            start of the next frame (called from inside `step`).
            A request made by a reset listener joins the reset in progress
            and returns True.
        """
        if self._resetting:
            logger.debug("Reset requested while resetting, ignored.")
            return True
        if self._in_step:
            logger.debug("Reset requested mid-frame, deferring to next frame.")
            self._reset_pending = True
            return False
        self._apply_reset()
        return True

    def _apply_reset(self) -> None:
        self._resetting = True
        try:
            self._reset_pose()
            for listener in list(self._reset_listeners):
                listener()
        finally:
            self._resetting = False

    def _reset_pose(self) -> None:
        self._set_state(EngineState.RESETTING)

        home = Vector3.from_sequence(self.config.home_position)
        self._pose = NavigationPose(position=home, yaw=0.0, pitch=0.0)
        self._origin = home
        self._left = InputVector.zero()
        self._right = InputVector.zero()
        self._indicators = DirectionIndicators()
        self._reset_pending = False

        self._set_state(EngineState.IDLE)
        logger.info("Navigation pose reset to home position.")
