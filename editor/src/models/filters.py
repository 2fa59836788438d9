"""Photo filter presets.

A FilterSpec names an effect as an ordered list of (operation, amount)
steps. The operations themselves live in services/image_filters.py; this
module is only the static lookup table.

Operations:
    grayscale, sepia   amount 0..1 (fraction of the full effect)
    saturate           amount 1.0 = unchanged
    brightness         amount 1.0 = unchanged
    contrast           amount 1.0 = unchanged
    hue_rotate         amount in degrees
"""

import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSpec:
    id: str
    name: str
    steps: Tuple[Tuple[str, float], ...] = ()

    @property
    def is_identity(self):
        return not self.steps


NO_FILTER = FilterSpec('none', 'Original')

FILTERS = (
    NO_FILTER,
    FilterSpec('grayscale', 'B&W', (('grayscale', 1.0),)),
    FilterSpec('sepia', 'Classic', (('sepia', 0.6),)),
    FilterSpec('vivid', 'Vivid', (('saturate', 1.6), ('brightness', 1.1))),
    FilterSpec('dim', 'Moody', (('brightness', 0.7), ('contrast', 1.2))),
    FilterSpec('warm', 'Warm', (('sepia', 0.3), ('saturate', 1.4), ('brightness', 1.05))),
    FilterSpec('cool', 'Cool', (('hue_rotate', 180.0), ('saturate', 0.8), ('brightness', 1.1))),
    FilterSpec('high-contrast', 'Hard', (('contrast', 1.5), ('brightness', 0.9))),
)

_FILTERS_BY_ID = {spec.id: spec for spec in FILTERS}


def get_filter(filter_id):
    """Look up a preset by id. Unknown ids fall back to the identity filter."""
    spec = _FILTERS_BY_ID.get(filter_id)
    if spec is None:
        logger.warning("Unknown filter '%s', using '%s'", filter_id, NO_FILTER.id)
        return NO_FILTER
    return spec


def filter_ids():
    return [spec.id for spec in FILTERS]
