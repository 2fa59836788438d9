"""Overlay geometry for the story canvas.

Every measurement is derived from the canvas size. Changing the output
resolution rescales the frame, margins, fonts, border and shadow with no
other code changes.
"""

import math
from dataclasses import dataclass

from constants import (
    OUTPUT_WIDTH, OUTPUT_HEIGHT,
    FRAME_SIDE_RATIO, FRAME_MARGIN_RATIO,
    DATE_FONT_DIVISOR, STATS_FONT_DIVISOR, STATS_COLUMNS,
    FRAME_BORDER_RATIO, SHADOW_BLUR_RATIO, SHADOW_OFFSET_RATIO,
)


@dataclass(frozen=True)
class OverlayLayout:
    """Frame and text placement for one canvas size.

    The frame is a centred square; text sits inside it:
    - top-left: secondary metrics (heart rate, temperature)
    - top-right: date
    - bottom: time / distance / pace in equal-width columns
    Text y values are baselines.
    """
    canvas_width: int
    canvas_height: int
    side: float
    frame_x: float
    frame_y: float
    margin: float
    date_font_size: int
    stats_font_size: int
    border_width: int
    shadow_blur: float
    shadow_offset: int

    @classmethod
    def for_canvas(cls, width=OUTPUT_WIDTH, height=OUTPUT_HEIGHT):
        side = width * FRAME_SIDE_RATIO
        return cls(
            canvas_width=width,
            canvas_height=height,
            side=side,
            frame_x=(width - side) / 2,
            frame_y=(height - side) / 2,
            margin=side * FRAME_MARGIN_RATIO,
            date_font_size=max(1, math.floor(side / DATE_FONT_DIVISOR)),
            stats_font_size=max(1, math.floor(side / STATS_FONT_DIVISOR)),
            border_width=max(1, round(width * FRAME_BORDER_RATIO)),
            shadow_blur=width * SHADOW_BLUR_RATIO,
            shadow_offset=max(1, round(width * SHADOW_OFFSET_RATIO)),
        )

    @property
    def canvas_size(self):
        return (self.canvas_width, self.canvas_height)

    @property
    def column_width(self):
        return self.side / STATS_COLUMNS

    @property
    def frame_box(self):
        """Outer (x0, y0, x1, y1) of the border stroke, centred on the frame edge."""
        half = self.border_width / 2
        return (
            round(self.frame_x - half),
            round(self.frame_y - half),
            round(self.frame_x + self.side + half) - 1,
            round(self.frame_y + self.side + half) - 1,
        )

    @property
    def top_text_y(self):
        return self.frame_y + self.margin + self.date_font_size

    @property
    def date_anchor(self):
        """Right end of the date baseline."""
        return (self.frame_x + self.side - self.margin, self.top_text_y)

    @property
    def secondary_anchor(self):
        """Left end of the heart rate / temperature baseline."""
        return (self.frame_x + self.margin, self.top_text_y)

    @property
    def stats_y(self):
        return self.frame_y + self.side - self.margin

    def column_center(self, index):
        """Centre x of stats column 0, 1 or 2."""
        return self.frame_x + self.column_width * (index + 0.5)
