# File: conflict_engine/models/common.py
"""
Parsing and formatting helpers shared by the models and processors.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Optional, Tuple, Union

from .errors import MalformedTimeError, ConfigurationError

MINUTES_PER_DAY = 24 * 60

_HHMM_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
NUMBER_PATTERN = re.compile(r"^[+-]?\d+(\.\d+)?$")
# "1.5 hours", "2 hrs", "1h", "45 min", "30 minutes"
_DURATION_TEXT_PATTERN = re.compile(
    r"^(\d+(?:\.\d+)?)\s*(h|hr|hrs|hour|hours|m|min|mins|minute|minutes)$",
    re.IGNORECASE,
)


def parse_hhmm(value: Any, appointment_id: Any = None) -> int:
    """Convert a 24-hour 'HH:MM' string to minutes since midnight."""
    if not isinstance(value, str):
        raise MalformedTimeError(
            f"Start time must be an 'HH:MM' string, got {value!r}",
            appointment_id=appointment_id, field='start_time', value=value,
        )
    match = _HHMM_PATTERN.match(value.strip())
    if not match:
        raise MalformedTimeError(
            f"Invalid time format: {value!r}",
            appointment_id=appointment_id, field='start_time', value=value,
        )
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise MalformedTimeError(
            f"Invalid time value: {value!r}",
            appointment_id=appointment_id, field='start_time', value=value,
        )
    return hours * 60 + minutes


def parse_duration(value: Any, appointment_id: Any = None) -> Optional[int]:
    """
    Parse a duration into whole minutes.

    Accepts ints/floats and numeric strings (minutes) as well as free-text
    hour or minute strings like "1.5 hours" or "45 min". Returns None when
    the value is absent so the caller can apply its default.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None

    # bool is an int subclass
    if isinstance(value, bool):
        raise MalformedTimeError(
            f"Duration must be numeric, got {value!r}",
            appointment_id=appointment_id, field='duration_minutes', value=value,
        )

    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedTimeError(
            f"Duration must be a finite number, got {value!r}",
            appointment_id=appointment_id, field='duration_minutes', value=value,
        )

    if isinstance(value, (int, float)):
        return int(round(value))

    if isinstance(value, str):
        text = value.strip()
        if NUMBER_PATTERN.match(text):
            return int(round(float(text)))

        match = _DURATION_TEXT_PATTERN.match(text)
        if match:
            amount = float(match.group(1))
            unit = match.group(2).lower()
            if unit.startswith('h'):
                amount *= 60
            return int(round(amount))

    raise MalformedTimeError(
        f"Duration must be numeric, got {value!r}",
        appointment_id=appointment_id, field='duration_minutes', value=value,
    )


def parse_date(value: Union[date, str, None]) -> date:
    """Parse a calendar date given as a date object or 'YYYY-MM-DD'."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            pass
    raise ConfigurationError(f"Invalid date: {value!r}")


def format_hhmm(minute: int) -> str:
    """Format minutes since midnight as 'HH:MM'."""
    hours, minutes = divmod(minute, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_time_12h(time24: str) -> str:
    """'13:30' -> '1:30 PM'."""
    hours, minutes = divmod(parse_hhmm(time24), 60)
    period = 'PM' if hours >= 12 else 'AM'
    display_hour = 12 if hours % 12 == 0 else hours % 12
    return f"{display_hour}:{minutes:02d} {period}"


def format_hour_label(hour: int) -> str:
    """Label for an hour row in the timeline gutter, e.g. '6:00 AM'."""
    return format_time_12h(f"{hour % 24:02d}:00")


def id_sort_key(value: Any) -> Tuple[int, Any]:
    """
    Total order over appointment ids.

    Integers compare numerically and sort before everything else, which is
    compared by its string form.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value))
