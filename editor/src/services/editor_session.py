"""Editing session: one photo, one set of stats, one rendered frame.

EditorSession is the single place where inputs change. Every change
re-renders synchronously and only then publishes the finished frame to
listeners, so a listener never sees a frame mixing old and new inputs.
"""

import logging

from constants import DEFAULT_DATE_FORMAT
from models.filters import get_filter
from models.workout import WorkoutStats
from services.overlay_layout import OverlayLayout
from services.photo_document import PhotoDocument
from services.render_pipeline import render_story, TextStyle

logger = logging.getLogger(__name__)


class EditorSession:
    """Holds the current PhotoDocument, WorkoutStats and latest frame."""

    def __init__(self, stats=None, style=None, layout=None):
        self.document = None
        self.stats = stats or WorkoutStats()
        self.style = style or TextStyle()
        self.layout = layout or OverlayLayout.for_canvas()
        self.frame = None
        self._listeners = []  # Callbacks receiving each finished frame

    @classmethod
    def from_config(cls, config, stats=None):
        style = TextStyle(
            font_path=config.get('font_path'),
            bold_font_path=config.get('bold_font_path'),
            date_format=config.get('date_format') or DEFAULT_DATE_FORMAT,
        )
        return cls(stats=stats, style=style)

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        """Register callback(frame) for every published frame"""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in self._listeners:
            callback(self.frame)

    # ========================================
    # Inputs
    # ========================================

    @property
    def has_photo(self):
        return self.document is not None

    @property
    def transform(self):
        return self.document.transform if self.document else None

    @property
    def filter_spec(self):
        return get_filter(self.stats.filter_id)

    def load_photo(self, source):
        """Swap in a new photo together with a fresh identity transform"""
        self.document = PhotoDocument.open(source)
        logger.debug("New photo %dx%d", source.width, source.height)
        self.render()

    def set_stats(self, stats):
        if stats == self.stats:
            return
        self.stats = stats
        self.render()

    def handle_gesture(self, event, displayed_width):
        """Route a gesture input to the photo's controller

        Returns:
            True if the transform changed (and a new frame was rendered)
        """
        if self.document is None:
            return False
        if self.document.controller.handle(event, displayed_width):
            self.render()
            return True
        return False

    def reset_position(self):
        """Put the photo back at scale 1, centred"""
        if self.document is None:
            return False
        if self.document.controller.reset():
            self.render()
            return True
        return False

    def pace_text(self):
        return self.stats.pace_text

    # ========================================
    # Rendering
    # ========================================

    def render(self):
        """Re-render from the current inputs and publish the frame"""
        if self.document is None:
            return None
        frame = render_story(
            self.document.source,
            self.document.transform,
            self.stats,
            self.filter_spec,
            layout=self.layout,
            style=self.style,
        )
        self.frame = frame
        self._notify_listeners()
        return frame
