"""
Host render loop.

A QTimer drives `Store.advance_frame` once per tick on the GUI thread, so
input events and frames never interleave mid-call. A second, one-second timer
advances the runtime counter shown in the HUD.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer

from teleopdash.app.state import Store

logger = logging.getLogger(__name__)


class FrameLoop(QObject):
    def __init__(self, store: Store, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(store.engine.config.frame_interval_ms)
        self._frame_timer.timeout.connect(self._on_frame)

        self._clock_timer = QTimer(self)
        self._clock_timer.setInterval(1000)
        self._clock_timer.timeout.connect(self.store.tick_runtime)

    @property
    def running(self) -> bool:
        return self._frame_timer.isActive()

    def start(self) -> None:
        logger.info(f"Frame loop started ({self._frame_timer.interval()} ms per frame).")
        self._frame_timer.start()
        self._clock_timer.start()

    def stop(self) -> None:
        self._frame_timer.stop()
        self._clock_timer.stop()
        logger.info(f"Frame loop stopped after {self.store.engine.frame_count} frames.")

    def _on_frame(self) -> None:
        self.store.advance_frame()
