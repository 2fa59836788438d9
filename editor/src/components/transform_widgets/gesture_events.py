"""Gesture inputs and per-gesture session state.

Typed inputs replace branching on raw Qt event shapes: the canvas widget
turns mouse/touch/wheel events into these values, and the controller only
ever sees these.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from models.transform import Vec2


class GestureState(Enum):
    IDLE = 'idle'
    DRAGGING = 'dragging'
    PINCHING = 'pinching'


# ========================================
# Pointer (mouse / pen)
# ========================================

@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    pass


# ========================================
# Touch (all currently active contact points)
# ========================================

@dataclass(frozen=True)
class TouchStart:
    points: Tuple[Vec2, ...]


@dataclass(frozen=True)
class TouchMove:
    points: Tuple[Vec2, ...]


@dataclass(frozen=True)
class TouchEnd:
    points: Tuple[Vec2, ...] = ()  # contacts still down after the release


# ========================================
# Wheel
# ========================================

@dataclass(frozen=True)
class Wheel:
    direction: int  # > 0 zoom in, < 0 zoom out, 0 ignored


@dataclass(frozen=True)
class GestureSession:
    """Ephemeral state for one gesture.

    Rebuilt from scratch whenever the number of contacts changes, so data
    from a pinch can never leak into a following drag.
    """
    state: GestureState = GestureState.IDLE
    last_point: Optional[Vec2] = None
    pinch_baseline: Optional[float] = None

    @classmethod
    def idle(cls):
        return cls()

    @classmethod
    def dragging(cls, point):
        return cls(GestureState.DRAGGING, last_point=point)

    @classmethod
    def pinching(cls, baseline):
        return cls(GestureState.PINCHING, pinch_baseline=baseline)


def pinch_distance(points):
    """Distance between the first two contact points."""
    return (points[0] - points[1]).length()
