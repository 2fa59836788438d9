"""
RunSnap Story Editor - Photo Transform Components

This package contains the gesture handling for placing the photo:
- gesture_events.py: typed gesture inputs and the per-gesture session
- gesture_controller.py: TransformController state machine (drag / pinch / wheel)
"""

from .gesture_events import (
    GestureState, GestureSession,
    PointerDown, PointerMove, PointerUp,
    TouchStart, TouchMove, TouchEnd, Wheel,
)
from .gesture_controller import TransformController

__all__ = [
    'GestureState', 'GestureSession',
    'PointerDown', 'PointerMove', 'PointerUp',
    'TouchStart', 'TouchMove', 'TouchEnd', 'Wheel',
    'TransformController',
]
