"""
RunSnap Story Editor - File Operations Service

Photo decoding in, JPEG story export out.
Separates file operations from UI logic.
"""

import io
import logging
import os

from PIL import Image, ImageOps, UnidentifiedImageError

from constants import JPEG_QUALITY, EXPORT_BACKGROUND
from models.photo import SourceImage

logger = logging.getLogger(__name__)


class PhotoLoadError(ValueError):
    """Raised when a file cannot be decoded as a photo."""


def decode_source_image(data):
    """Decode photo bytes into a SourceImage

    Args:
        data: Encoded image bytes (JPEG, PNG, ...)

    Returns:
        SourceImage with EXIF orientation applied

    Raises:
        PhotoLoadError: If the bytes are not a readable image
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            upright = ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, OSError) as e:
        raise PhotoLoadError(f"Not a readable image: {e}") from e
    return SourceImage.from_image(upright)


def load_source_image(filename):
    """Load and decode a photo from disk

    Raises:
        PhotoLoadError: If the file is missing or not an image
    """
    try:
        with open(filename, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise PhotoLoadError(f"Cannot read {filename}: {e}") from e

    source = decode_source_image(data)
    logger.info("Photo loaded from %s (%dx%d)", filename, source.width, source.height)
    return source


def flatten(image, background=EXPORT_BACKGROUND):
    """Composite an RGBA story onto an opaque background (RGB)."""
    base = Image.new('RGB', image.size, background)
    base.paste(image, mask=image.getchannel('A'))
    return base


def encode_jpeg(image, quality=JPEG_QUALITY):
    """Encode the rendered story as JPEG bytes

    Transparent areas come out as the export background (black).
    """
    buffer = io.BytesIO()
    flatten(image).save(buffer, 'JPEG', quality=quality)
    return buffer.getvalue()


def export_story(image, filename, quality=JPEG_QUALITY):
    """Write the rendered story to a JPEG file

    Returns:
        The path written
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filename, 'wb') as f:
        f.write(encode_jpeg(image, quality))
    logger.info("Story exported to %s", filename)
    return filename
