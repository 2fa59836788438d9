"""Story render pipeline.

render_story() composes the photo and the stat overlay into the fixed-size
output raster. It is a pure function: identical inputs give byte-identical
pixels, and nothing is kept between calls apart from a font cache.

Composition order:
1. Clear canvas (transparent)
2. Photo, scaled and centred, offset on top of centring, filter applied
3. Overlay layer (frame, date, secondary metrics, stats row), drawn on its
   own transparent layer, composited over its blurred drop shadow

Each compositing step gets an explicit DrawConfig. The overlay config never
carries a filter, so photo filtering cannot reach the frame or the text.
"""

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from PIL import Image, ImageDraw, ImageFilter, ImageFont

from constants import (
    CANVAS_CLEAR_COLOR, OVERLAY_COLOR, SHADOW_COLOR, SHADOW_OPACITY,
    STAT_ICONS, SECONDARY_SEPARATOR, DEFAULT_DATE_FORMAT,
)
from models.filters import FilterSpec, NO_FILTER
from models.workout import format_date
from services.image_filters import apply_filter
from services.overlay_layout import OverlayLayout

logger = logging.getLogger(__name__)


# ======================================================================
# Per-draw configuration
# ======================================================================

@dataclass(frozen=True)
class ShadowSpec:
    offset: int
    blur: float
    opacity: float = SHADOW_OPACITY
    color: tuple = SHADOW_COLOR


@dataclass(frozen=True)
class DrawConfig:
    """Everything one compositing step may use besides its pixels."""
    filter_spec: FilterSpec = NO_FILTER
    shadow: Optional[ShadowSpec] = None


@dataclass(frozen=True)
class TextStyle:
    """Where overlay text comes from: font files and the date template."""
    font_path: Optional[str] = None
    bold_font_path: Optional[str] = None
    date_format: str = DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class OverlayLabels:
    date: str
    secondary: Optional[str]
    time: str
    distance: str
    pace: str

    @property
    def columns(self):
        return (self.time, self.distance, self.pace)


# ======================================================================
# Geometry and labels
# ======================================================================

def photo_draw_rect(source_size, transform, canvas_size):
    """Float (x, y, width, height) of the photo on the canvas.

    width/height are the natural size times scale; the photo is centred and
    the offset is added on top of the centring.
    """
    natural_w, natural_h = source_size
    canvas_w, canvas_h = canvas_size
    width = natural_w * transform.scale
    height = natural_h * transform.scale
    x = (canvas_w - width) / 2 + transform.offset_x
    y = (canvas_h - height) / 2 + transform.offset_y
    return (x, y, width, height)


def _icon(key, show_emojis):
    return STAT_ICONS[key] if show_emojis else ''


def build_labels(stats, date_format=DEFAULT_DATE_FORMAT):
    """All overlay strings for a WorkoutStats. One flag controls every icon."""
    icons = stats.show_emojis
    parts = []
    if stats.heart_rate_text:
        parts.append(_icon('heart_rate', icons) + stats.heart_rate_text)
    if stats.temperature_text:
        parts.append(_icon('temperature', icons) + stats.temperature_text)

    return OverlayLabels(
        date=format_date(stats.run_date, date_format),
        secondary=SECONDARY_SEPARATOR.join(parts) if parts else None,
        time=_icon('time', icons) + stats.time_text,
        distance=_icon('distance', icons) + stats.distance_text + 'km',
        pace=_icon('pace', icons) + stats.pace_text,
    )


# ======================================================================
# Fonts
# ======================================================================

@lru_cache(maxsize=32)
def load_font(font_path, size):
    """TrueType font at a pixel size, Pillow's built-in font if unavailable."""
    if font_path:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError:
            logger.warning("Font '%s' could not be loaded, using built-in font", font_path)
    return ImageFont.load_default(size=size)


# ======================================================================
# Steps
# ======================================================================

def clear_canvas(layout):
    return Image.new('RGBA', layout.canvas_size, CANVAS_CLEAR_COLOR)


def draw_photo(canvas, source, transform, config):
    """Draw the visible part of the photo onto canvas, filtered per config.

    Only the on-canvas region is resampled, so large zoom factors never
    allocate the full scaled photo.
    """
    x, y, width, height = photo_draw_rect(source.size, transform, canvas.size)
    canvas_w, canvas_h = canvas.size

    left = max(0, math.floor(x))
    top = max(0, math.floor(y))
    right = min(canvas_w, math.ceil(x + width))
    bottom = min(canvas_h, math.ceil(y + height))
    if right <= left or bottom <= top:
        return canvas

    scale = transform.scale
    box = (
        max(0.0, (left - x) / scale),
        max(0.0, (top - y) / scale),
        min(float(source.width), (right - x) / scale),
        min(float(source.height), (bottom - y) / scale),
    )
    if box[2] <= box[0] or box[3] <= box[1]:
        return canvas

    patch = source.image.resize((right - left, bottom - top), Image.Resampling.BILINEAR, box=box)
    patch = apply_filter(patch, config.filter_spec)
    canvas.alpha_composite(patch, dest=(left, top))
    return canvas


def draw_overlay(layout, labels, style=TextStyle()):
    """Frame and text on a transparent layer the size of the canvas."""
    layer = Image.new('RGBA', layout.canvas_size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)

    draw.rectangle(layout.frame_box, outline=OVERLAY_COLOR, width=layout.border_width)

    date_font = load_font(style.font_path, layout.date_font_size)
    draw.text(layout.date_anchor, labels.date, fill=OVERLAY_COLOR, font=date_font, anchor='rs')
    if labels.secondary:
        draw.text(layout.secondary_anchor, labels.secondary, fill=OVERLAY_COLOR,
                  font=date_font, anchor='ls')

    stats_font = load_font(style.bold_font_path or style.font_path, layout.stats_font_size)
    for index, text in enumerate(labels.columns):
        draw.text((layout.column_center(index), layout.stats_y), text,
                  fill=OVERLAY_COLOR, font=stats_font, anchor='ms')
    return layer


def composite_layer(canvas, layer, config):
    """Composite a layer, preceded by its drop shadow when config has one."""
    shadow = config.shadow
    if shadow is not None:
        alpha = layer.getchannel('A').point(lambda v: round(v * shadow.opacity))
        if shadow.blur > 0:
            alpha = alpha.filter(ImageFilter.GaussianBlur(shadow.blur / 2))
        shifted = Image.new('L', canvas.size, 0)
        shifted.paste(alpha, (shadow.offset, shadow.offset))
        shadow_layer = Image.new('RGBA', canvas.size, shadow.color + (255,))
        shadow_layer.putalpha(shifted)
        canvas.alpha_composite(shadow_layer)
    canvas.alpha_composite(layer)
    return canvas


# ======================================================================
# Pipeline
# ======================================================================

def render_story(source, transform, stats, filter_spec=NO_FILTER, layout=None, style=TextStyle()):
    """Render the story image.

    Args:
        source: SourceImage, or None when no photo is loaded
        transform: TransformState for that photo
        stats: WorkoutStats
        filter_spec: FilterSpec for the photo layer
        layout: OverlayLayout, defaults to the fixed output canvas
        style: TextStyle (fonts and date template)

    Returns:
        RGBA PIL image of the canvas size, or None without a photo
    """
    if source is None:
        logger.debug("No photo loaded, nothing to render")
        return None
    layout = layout or OverlayLayout.for_canvas()

    canvas = clear_canvas(layout)
    draw_photo(canvas, source, transform, DrawConfig(filter_spec=filter_spec))

    overlay = draw_overlay(layout, build_labels(stats, style.date_format), style)
    overlay_config = DrawConfig(shadow=ShadowSpec(layout.shadow_offset, layout.shadow_blur))
    composite_layer(canvas, overlay, overlay_config)
    return canvas
