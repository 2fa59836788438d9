"""
RunSnap Story Editor - Workout Stats Model

Holds the run numbers shown on the story overlay and derives the
formatted labels (time, distance, pace, heart rate, temperature, date).

Form values arrive as raw strings; WorkoutStats.from_form() parses them
defensively. Nothing here raises on bad input: unparseable numbers become
zero (time, distance) or absent (heart rate, temperature).
"""

import calendar
import logging
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from constants import (
    PACE_NO_DISTANCE, PACE_OUT_OF_RANGE, PACE_MAX_MINUTES,
    DEFAULT_DATE_FORMAT, EMPTY_DISTANCE_TEXT,
)

logger = logging.getLogger(__name__)


# ======================================================================
# Parsing helpers
# ======================================================================

def parse_int(text) -> int:
    """Parse a non-negative integer from form text, 0 on anything invalid."""
    value = parse_float(text)
    if value is None or value <= 0:
        return 0
    return int(value)


def parse_float(text) -> Optional[float]:
    """Parse a finite float from form text, None when empty or invalid."""
    if text is None:
        return None
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        text = str(text).strip().replace(',', '.')
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            logger.debug("Ignoring non-numeric stat value %r", text)
            return None
    if value != value or value in (float('inf'), float('-inf')):
        return None
    return value


def format_number(value: float) -> str:
    """Compact number text: 21.0 -> '21', 21.5 -> '21.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


# ======================================================================
# Formatting
# ======================================================================

def format_time(hours: int, minutes: int, seconds: int) -> str:
    """Format elapsed time as MM:SS, prefixed with HH: only when hours > 0.

    >>> format_time(0, 5, 3)
    '05:03'
    >>> format_time(1, 5, 3)
    '01:05:03'
    """
    text = f"{minutes:02d}:{seconds:02d}"
    if hours > 0:
        text = f"{hours:02d}:{text}"
    return text


def calculate_pace(total_seconds: float, distance_km: float) -> str:
    """Pace in minutes'seconds" per km.

    Distance <= 0 gives the "-'--\"" placeholder; a pace of 100 minutes or
    more is treated as nonsense and gives "--'--\"".
    """
    if distance_km <= 0:
        return PACE_NO_DISTANCE

    try:
        pace_seconds = total_seconds / distance_km
    except OverflowError:
        return PACE_OUT_OF_RANGE
    if not math.isfinite(pace_seconds):
        return PACE_OUT_OF_RANGE

    pace_minutes = int(pace_seconds // 60)
    pace_rest = int(pace_seconds % 60)

    if pace_minutes >= PACE_MAX_MINUTES:
        return PACE_OUT_OF_RANGE
    return f"{pace_minutes}'{pace_rest:02d}\""


def format_distance(distance_km: float) -> str:
    """Distance text with at least one decimal: 5 -> '5.0', 5.25 -> '5.25'."""
    if distance_km <= 0:
        return EMPTY_DISTANCE_TEXT
    text = f"{distance_km:.2f}".rstrip('0')
    if text.endswith('.'):
        text += '0'
    return text


def format_date(day: date, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Month/day label rendered from a template.

    Template fields: {month}, {day}, {month_name}, {month_abbr}. A template
    that cannot be filled falls back to DEFAULT_DATE_FORMAT.
    """
    fields = dict(
        month=day.month,
        day=day.day,
        month_name=calendar.month_name[day.month],
        month_abbr=calendar.month_abbr[day.month],
    )
    try:
        return date_format.format(**fields)
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        logger.warning("Bad date format %r (%s), using %r", date_format, e, DEFAULT_DATE_FORMAT)
        return DEFAULT_DATE_FORMAT.format(**fields)


# ======================================================================
# Model
# ======================================================================

@dataclass(frozen=True)
class WorkoutStats:
    """Run numbers for the overlay.

    Invariants (enforced by from_form): all values non-negative,
    minutes and seconds below 60. The run date is captured when the stats
    are built so rendering stays a pure function of its inputs.
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    distance: float = 0.0
    heart_rate: Optional[int] = None
    temperature: Optional[float] = None
    show_emojis: bool = True
    filter_id: str = 'none'
    run_date: date = field(default_factory=date.today)

    @classmethod
    def from_form(cls, hours='', minutes='', seconds='', distance='',
                  heart_rate='', temperature='', show_emojis=True,
                  filter_id='none', run_date=None):
        """Build stats from raw form strings.

        Minutes/seconds of 60 or more carry into the larger unit.
        """
        total = parse_int(hours) * 3600 + parse_int(minutes) * 60 + parse_int(seconds)
        h, rest = divmod(total, 3600)
        m, s = divmod(rest, 60)

        dist = parse_float(distance)
        hr = parse_float(heart_rate)
        temp = parse_float(temperature)

        return cls(
            hours=h,
            minutes=m,
            seconds=s,
            distance=dist if dist is not None and dist > 0 else 0.0,
            heart_rate=int(hr) if hr is not None and hr >= 0 else None,
            temperature=temp,
            show_emojis=bool(show_emojis),
            filter_id=filter_id or 'none',
            run_date=run_date or date.today(),
        )

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def time_text(self) -> str:
        return format_time(self.hours, self.minutes, self.seconds)

    @property
    def distance_text(self) -> str:
        return format_distance(self.distance)

    @property
    def pace_text(self) -> str:
        return calculate_pace(self.total_seconds, self.distance)

    @property
    def heart_rate_text(self) -> Optional[str]:
        if self.heart_rate is None:
            return None
        return f"{self.heart_rate} bpm"

    @property
    def temperature_text(self) -> Optional[str]:
        if self.temperature is None:
            return None
        return f"{format_number(self.temperature)}°C"
