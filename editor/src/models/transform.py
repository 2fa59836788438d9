"""Transform data structures for coordinate and photo placement state."""
import math
from dataclasses import dataclass, replace

from constants import SCALE_MIN, SCALE_MAX, DEFAULT_SCALE


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y pair across the two spaces we deal with:
    - Display space: widget pixels as seen by the user
    - Output space: pixels of the fixed 1080x1920 story canvas
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def length(self):
        return math.hypot(self.x, self.y)


def clamp_scale(scale):
    """Clamp a scale factor into [SCALE_MIN, SCALE_MAX].

    Monotonic and idempotent: clamp_scale(clamp_scale(x)) == clamp_scale(x).
    NaN collapses to the default scale.
    """
    if scale != scale:
        return DEFAULT_SCALE
    return max(SCALE_MIN, min(SCALE_MAX, scale))


@dataclass(frozen=True)
class TransformState:
    """Scale and translation applied to the photo before compositing.

    Offsets are in output-canvas pixels and perturb the centred position;
    they never replace the centring. Instances are immutable: every change
    produces a whole new value.
    """
    scale: float = DEFAULT_SCALE
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'scale', clamp_scale(float(self.scale)))

    @classmethod
    def identity(cls):
        return cls()

    @property
    def offset(self):
        return Vec2(self.offset_x, self.offset_y)

    def translated(self, delta):
        """Return a copy moved by delta (Vec2, output pixels)."""
        return replace(self, offset_x=self.offset_x + delta.x, offset_y=self.offset_y + delta.y)

    def scaled(self, factor):
        """Return a copy with scale multiplied by factor (clamped, offset untouched)."""
        return replace(self, scale=clamp_scale(self.scale * factor))
