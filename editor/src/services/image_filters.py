"""Photo filter effects.

Applies the steps of a FilterSpec to an RGBA image. Colour-matrix effects
(grayscale, sepia, saturation, hue rotation) use the W3C filter-effects
matrices via numpy; contrast is a lookup table pivoting at mid-grey and
brightness uses PIL.ImageEnhance (a plain per-channel multiply). Alpha is
carried through untouched.
"""

import logging
import math

import numpy as np
from PIL import Image, ImageEnhance

logger = logging.getLogger(__name__)


# ========================================
# Colour matrices (rows produce R, G, B)
# ========================================

def _grayscale_matrix(amount):
    a = 1.0 - min(1.0, max(0.0, amount))
    return np.array([
        [0.2126 + 0.7874 * a, 0.7152 - 0.7152 * a, 0.0722 - 0.0722 * a],
        [0.2126 - 0.2126 * a, 0.7152 + 0.2848 * a, 0.0722 - 0.0722 * a],
        [0.2126 - 0.2126 * a, 0.7152 - 0.7152 * a, 0.0722 + 0.9278 * a],
    ], dtype=np.float32)


def _sepia_matrix(amount):
    a = 1.0 - min(1.0, max(0.0, amount))
    return np.array([
        [0.393 + 0.607 * a, 0.769 - 0.769 * a, 0.189 - 0.189 * a],
        [0.349 - 0.349 * a, 0.686 + 0.314 * a, 0.168 - 0.168 * a],
        [0.272 - 0.272 * a, 0.534 - 0.534 * a, 0.131 + 0.869 * a],
    ], dtype=np.float32)


def _hue_rotate_matrix(degrees):
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    return np.array([
        [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
        [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
        [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
    ], dtype=np.float32)


def _saturate_matrix(amount):
    s = max(0.0, amount)
    return np.array([
        [0.213 + 0.787 * s, 0.715 - 0.715 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 + 0.285 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 - 0.715 * s, 0.072 + 0.928 * s],
    ], dtype=np.float32)


def _apply_matrix(rgb, matrix):
    arr = np.asarray(rgb, dtype=np.float32)
    out = arr @ matrix.T
    return Image.fromarray(np.clip(np.rint(out), 0, 255).astype(np.uint8), 'RGB')


def _contrast(rgb, amount):
    """Per-channel linear contrast about mid-grey: (v - 127.5) * amount + 127.5."""
    levels = np.arange(256, dtype=np.float32)
    table = np.clip(np.rint((levels - 127.5) * amount + 127.5), 0, 255).astype(np.uint8)
    return rgb.point(table.tolist() * 3)


# ========================================
# Operations: (RGB image, amount) -> RGB image
# ========================================
# All operations are per-pixel: output depends only on the input pixel.

_MATRIX_OPS = {
    'grayscale': _grayscale_matrix,
    'sepia': _sepia_matrix,
    'hue_rotate': _hue_rotate_matrix,
    'saturate': _saturate_matrix,
}

_POINT_OPS = {
    'contrast': _contrast,
}

_ENHANCE_OPS = {
    'brightness': ImageEnhance.Brightness,
}


def apply_step(rgb, operation, amount):
    """Apply one filter step to an RGB image."""
    if operation in _MATRIX_OPS:
        return _apply_matrix(rgb, _MATRIX_OPS[operation](amount))
    if operation in _POINT_OPS:
        return _POINT_OPS[operation](rgb, amount)
    if operation in _ENHANCE_OPS:
        return _ENHANCE_OPS[operation](rgb).enhance(amount)
    logger.warning("Unknown filter operation '%s' skipped", operation)
    return rgb


def apply_filter(image, spec):
    """Return a filtered copy of an RGBA image. The input is never modified."""
    if spec.is_identity:
        return image.copy()

    rgb = image.convert('RGB')
    for operation, amount in spec.steps:
        rgb = apply_step(rgb, operation, amount)

    result = rgb.convert('RGBA')
    result.putalpha(image.getchannel('A'))
    return result
