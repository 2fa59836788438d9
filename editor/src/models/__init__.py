"""
RunSnap Story Editor - Data Models

This module contains the data model classes for a story:
- transform.py: Vec2, TransformState and scale clamping
- workout.py: WorkoutStats and stat label formatting
- filters.py: FilterSpec presets
- photo.py: SourceImage (the decoded photo)
"""

from .transform import Vec2, TransformState, clamp_scale
from .workout import WorkoutStats, format_time, calculate_pace
from .filters import FilterSpec, FILTERS, NO_FILTER, get_filter

__all__ = [
    'Vec2', 'TransformState', 'clamp_scale',
    'WorkoutStats', 'format_time', 'calculate_pace',
    'FilterSpec', 'FILTERS', 'NO_FILTER', 'get_filter',
]
