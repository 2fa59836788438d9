"""Gesture state machine for placing the photo.

States: IDLE, DRAGGING, PINCHING (see gesture_events.GestureState).

- One contact (mouse button or finger) drags: display deltas are mapped to
  output pixels and added to the offset.
- Two fingers pinch: scale is multiplied by current/previous distance and
  the baseline re-bases on every sample.
- Wheel notches scale by a fixed factor. Wheel input is stateless.

Scaling always anchors at the canvas centre, so only drags move the offset.
"""

import logging

from constants import WHEEL_ZOOM_IN_FACTOR, WHEEL_ZOOM_OUT_FACTOR
from models.transform import TransformState, Vec2
from utils.coordinate_transforms import CoordinateMapper
from .gesture_events import (
    GestureState, GestureSession,
    PointerDown, PointerMove, PointerUp,
    TouchStart, TouchMove, TouchEnd, Wheel,
    pinch_distance,
)


class TransformController:
    """Sole writer of a photo's TransformState.

    handle() takes a typed gesture input plus the width the canvas is shown
    at right now, and returns True when the transform changed.
    """

    _logger = logging.getLogger('TransformController')

    def __init__(self, mapper=None):
        self.mapper = mapper or CoordinateMapper()
        self._transform = TransformState.identity()
        self._session = GestureSession.idle()
        self._handlers = {
            PointerDown: self._on_pointer_down,
            PointerMove: self._on_pointer_move,
            PointerUp: self._on_pointer_up,
            TouchStart: self._on_touch_change,
            TouchEnd: self._on_touch_change,
            TouchMove: self._on_touch_move,
            Wheel: self._on_wheel,
        }

    # ========================================
    # Public API
    # ========================================

    @property
    def transform(self):
        return self._transform

    @property
    def state(self):
        return self._session.state

    @property
    def session(self):
        return self._session

    def handle(self, event, displayed_width):
        """Apply one gesture input.

        Args:
            event: PointerDown/Move/Up, TouchStart/Move/End or Wheel
            displayed_width: current on-screen width of the canvas surface

        Returns:
            True if the TransformState was replaced
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            self._logger.warning(f"Unhandled gesture input {event!r}")
            return False
        return handler(event, displayed_width)

    def reset(self):
        """Back to identity transform and IDLE."""
        self._session = GestureSession.idle()
        return self._commit(TransformState.identity())

    # ========================================
    # Pointer
    # ========================================

    def _on_pointer_down(self, event, displayed_width):
        if self._session.state is GestureState.PINCHING:
            return False
        self._enter(GestureSession.dragging(Vec2(event.x, event.y)))
        return False

    def _on_pointer_move(self, event, displayed_width):
        if self._session.state is not GestureState.DRAGGING:
            return False
        return self._drag_to(Vec2(event.x, event.y), displayed_width)

    def _on_pointer_up(self, event, displayed_width):
        if self._session.state is GestureState.DRAGGING:
            self._enter(GestureSession.idle())
        return False

    # ========================================
    # Touch
    # ========================================

    def _on_touch_change(self, event, displayed_width):
        """Contact count changed: start a clean session for the new count."""
        points = tuple(event.points)
        if len(points) == 1:
            self._enter(GestureSession.dragging(points[0]))
        elif len(points) == 2:
            self._enter(GestureSession.pinching(pinch_distance(points)))
        else:
            self._enter(GestureSession.idle())
        return False

    def _on_touch_move(self, event, displayed_width):
        points = tuple(event.points)
        state = self._session.state

        if state is GestureState.DRAGGING and len(points) == 1:
            return self._drag_to(points[0], displayed_width)
        if state is GestureState.PINCHING and len(points) == 2:
            return self._pinch_to(pinch_distance(points))

        # Count does not match the session (e.g. one finger left mid-pinch):
        # ignore until TouchStart/TouchEnd reports the new contact set.
        self._logger.debug(f"Ignoring {len(points)}-point move while {state.value}")
        return False

    # ========================================
    # Wheel
    # ========================================

    def _on_wheel(self, event, displayed_width):
        if event.direction > 0:
            factor = WHEEL_ZOOM_IN_FACTOR
        elif event.direction < 0:
            factor = WHEEL_ZOOM_OUT_FACTOR
        else:
            return False
        return self._commit(self._transform.scaled(factor))

    # ========================================
    # Helpers
    # ========================================

    def _drag_to(self, point, displayed_width):
        display_delta = point - self._session.last_point
        self._session = GestureSession.dragging(point)
        delta = self.mapper.to_output_vector(display_delta, displayed_width)
        return self._commit(self._transform.translated(delta))

    def _pinch_to(self, distance):
        baseline = self._session.pinch_baseline
        self._session = GestureSession.pinching(distance)
        if not baseline:
            # First usable sample becomes the baseline
            return False
        return self._commit(self._transform.scaled(distance / baseline))

    def _enter(self, session):
        if session.state is not self._session.state:
            self._logger.debug(f"{self._session.state.value} -> {session.state.value}")
        self._session = session

    def _commit(self, transform):
        if transform == self._transform:
            return False
        self._transform = transform
        return True
