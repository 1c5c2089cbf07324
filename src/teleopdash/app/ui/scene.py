"""
3D Scene Widget (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pyvista as pv
from pyvistaqt import QtInteractor
from PySide6.QtWidgets import QWidget, QVBoxLayout

from teleopdash.app.camera import camera_placement
from teleopdash.app.state import LightsModel
from teleopdash.controller.engine import FrameOutput
from teleopdash.model.pose import DirectionIndicators

logger = logging.getLogger(__name__)

BACKGROUND = "#111111"
INDICATOR_ON = "#F59E0B"
INDICATOR_OFF = "#9CA3AF"

# Indicator spheres sit in a small cross in front of the start position
INDICATOR_OFFSETS = {
    "left": (-0.5, 0.0, 0.0),
    "right": (0.5, 0.0, 0.0),
    "forward": (0.0, 0.0, -0.5),
    "backward": (0.0, 0.0, 0.5),
}
INDICATOR_ORIGIN = np.array([0.0, 0.0, -3.0])


class SceneView(QWidget):
    """
    Tunnel + floor scene. The camera is placed from the engine pose each frame;
    the user cannot orbit it.
    """
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        layout.addWidget(self.plotter)

        self._indicator_actors: dict[str, pv.Actor] = {}
        self._laser_actor: Optional[pv.Actor] = None
        self._tunnel_actor: Optional[pv.Actor] = None
        self._lights = LightsModel()

        self._init_plotter()
        self._build_scene()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_frame(self, frame: FrameOutput) -> None:
        placement = camera_placement(frame.pose, frame.fov)
        cam = self.plotter.camera
        cam.position = tuple(placement.position)
        cam.focal_point = tuple(placement.focal_point)
        cam.up = tuple(placement.view_up)
        cam.view_angle = placement.view_angle

        self._update_indicators(frame.indicators)
        if self._lights.laser:
            self._update_laser(placement.position, placement.focal_point - placement.position)

        self.plotter.render()

    def set_lights(self, lights: LightsModel) -> None:
        self._lights = LightsModel(**vars(lights))
        if self._tunnel_actor is not None:
            self._tunnel_actor.prop.color = "#ffffff" if lights.light else "#e5e7eb"
            self._tunnel_actor.prop.ambient = 0.6 if lights.spot_light else 0.3
        if self._laser_actor is not None:
            self._laser_actor.SetVisibility(lights.laser)
        self.plotter.render()

    def close_plotter(self) -> None:
        self.plotter.close()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(BACKGROUND)
        # camera is driven by the sticks only
        self.plotter.disable()
        self.plotter.enable_anti_aliasing()

    def _build_scene(self) -> None:
        tunnel = pv.Cylinder(
            center=(0.0, 0.0, 0.0),
            direction=(1.0, 0.0, 0.0),
            radius=5.0,
            height=100.0,
            resolution=32,
            capping=False,
        )
        self._tunnel_actor = self.plotter.add_mesh(
            tunnel,
            color="#e5e7eb",
            style="wireframe",
            line_width=1.0,
            ambient=0.3,
            pickable=False,
        )

        floor = pv.Plane(
            center=(0.0, -0.5, 0.0),
            direction=(0.0, 1.0, 0.0),
            i_size=100.0,
            j_size=100.0,
            i_resolution=100,
            j_resolution=100,
        )
        self.plotter.add_mesh(floor, color="white", show_edges=True, edge_color="#9ca3af", pickable=False)

        for key, offset in INDICATOR_OFFSETS.items():
            sphere = pv.Sphere(radius=0.1, center=INDICATOR_ORIGIN + np.array(offset))
            self._indicator_actors[key] = self.plotter.add_mesh(sphere, color=INDICATOR_OFF, pickable=False)

        laser = pv.Line((0.0, 0.0, 0.0), (0.0, 0.0, -1.0))
        self._laser_actor = self.plotter.add_mesh(laser, color="red", line_width=2.0, pickable=False)
        self._laser_actor.SetVisibility(False)

        logger.info("Scene built.")

    def _update_indicators(self, indicators: DirectionIndicators) -> None:
        for key, actor in self._indicator_actors.items():
            actor.prop.color = INDICATOR_ON if getattr(indicators, key) else INDICATOR_OFF

    def _update_laser(self, origin: np.ndarray, direction: np.ndarray) -> None:
        # start a little below the eye so the beam is visible
        start = origin + np.array([0.0, -0.3, 0.0])
        end = start + direction * 50.0
        self._laser_actor.mapper.dataset.points = np.vstack([start, end])
