"""
Input Capture (one per stick)
=============================
Converts raw pointer/touch gestures on a circular stick widget into a
normalized InputVector.

Why is this file needed?
------------------------
1. Normalization: A press anywhere in the widget maps onto [-1, 1] x [-1, 1]
   relative to the widget centre, and the result never leaves the unit circle.
2. Gesture lifetime: Once a gesture starts, moves and the release must still
   be observed when the pointer leaves the widget. The capture registers
   itself on a CaptureSurface for exactly the lifetime of the gesture.

The class does not know about Qt. The widget supplies its bounding box at
`begin` time and a surface implementation (mouse grab in the Qt app, a fake in
the tests).

Classes:
    Bounds: Widget rectangle in the coordinates used for the gesture.
    CaptureSurface: Protocol for the global input surface.
    InputCapture: The gesture state machine.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from teleopdash.model.primitives import InputVector

logger = logging.getLogger(__name__)

VectorCallback = Callable[[InputVector], None]


@dataclass(frozen=True)
class Bounds:
    """Axis aligned widget rectangle."""
    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def is_valid(self) -> bool:
        values = (self.left, self.top, self.width, self.height)
        return all(math.isfinite(v) for v in values) and self.width > 0.0 and self.height > 0.0


class CaptureSurface(Protocol):
    """Where move/end events are delivered while a gesture is in flight."""
    def attach(self, capture: InputCapture) -> None: ...
    def detach(self, capture: InputCapture) -> None: ...


class InputCapture:
    """
    Gesture tracker for a single stick.

    Only one contact is tracked at a time; a second `begin` while a gesture is
    active is ignored, and moves/ends from other contacts are ignored too.
    No method raises: invalid geometry, a disposed capture or a failing
    callback all degrade to a no-op (failures are logged).
    """

    def __init__(
        self,
        on_change: Optional[VectorCallback] = None,
        surface: Optional[CaptureSurface] = None,
        name: str = "stick",
    ) -> None:
        self.name = name
        self._on_change = on_change
        self._surface = surface

        self._active: bool = False
        self._attached: bool = False
        self._disposed: bool = False
        self._contact_id: Optional[int] = None
        self._center: tuple[float, float] = (0.0, 0.0)
        self._half_size: tuple[float, float] = (1.0, 1.0)
        self._vector: InputVector = InputVector.zero()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self._active

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def vector(self) -> InputVector:
        """The last emitted vector."""
        return self._vector

    def set_callback(self, on_change: Optional[VectorCallback]) -> None:
        self._on_change = on_change

    def begin(
        self,
        px: float,
        py: float,
        bounds: Optional[Bounds],
        contact_id: int = 0,
    ) -> Optional[InputVector]:
        """
        Start a gesture at (px, py).

        The centre and size of `bounds` are frozen for the whole gesture.
        Returns the emitted vector, or None if the call was ignored.
        """
        if self._disposed or self._active:
            return None
        if bounds is None or not bounds.is_valid:
            logger.debug(f"[{self.name}] begin ignored: widget has no usable bounds")
            return None
        if not (math.isfinite(px) and math.isfinite(py)):
            return None

        self._center = bounds.center
        self._half_size = (bounds.width / 2.0, bounds.height / 2.0)
        self._contact_id = contact_id
        self._active = True
        self._attach()

        return self._emit(self._relative_vector(px, py))

    def move(self, px: float, py: float, contact_id: int = 0) -> Optional[InputVector]:
        """Update the gesture. Ignored unless this contact owns an active gesture."""
        if not self._owns(contact_id):
            return None
        if not (math.isfinite(px) and math.isfinite(py)):
            return None
        return self._emit(self._relative_vector(px, py))

    def end(self, contact_id: int = 0) -> Optional[InputVector]:
        """Release: always emits exactly (0, 0) for the owning contact."""
        if not self._owns(contact_id):
            return None
        return self._release()

    def cancel(self) -> Optional[InputVector]:
        """End the current gesture whichever contact owns it (reset, focus loss)."""
        if not self._active:
            return None
        return self._release()

    def dispose(self) -> None:
        """
        Tear the capture down. Listeners are detached unconditionally and every
        later call becomes a no-op.
        """
        if self._disposed:
            return
        if self._active:
            self._release()
        else:
            self._detach()
        self._disposed = True

    def __enter__(self) -> InputCapture:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _owns(self, contact_id: int) -> bool:
        return self._active and not self._disposed and contact_id == self._contact_id

    def _relative_vector(self, px: float, py: float) -> InputVector:
        cx, cy = self._center
        hw, hh = self._half_size
        return InputVector((px - cx) / hw, (py - cy) / hh).clamped()

    def _release(self) -> InputVector:
        self._active = False
        self._contact_id = None
        self._detach()
        return self._emit(InputVector.zero())

    def _attach(self) -> None:
        if self._surface is None or self._attached:
            return
        try:
            self._surface.attach(self)
            self._attached = True
        except Exception:
            # Gesture still works inside the widget, just not outside it
            logger.exception(f"[{self.name}] could not attach to capture surface")

    def _detach(self) -> None:
        if self._surface is None or not self._attached:
            return
        self._attached = False
        try:
            self._surface.detach(self)
        except Exception:
            logger.exception(f"[{self.name}] could not detach from capture surface")

    def _emit(self, vector: InputVector) -> InputVector:
        self._vector = vector
        if self._on_change is not None:
            try:
                self._on_change(vector)
            except Exception:
                logger.exception(f"[{self.name}] stick callback failed")
        return vector
