# File: conflict_engine/processors/time_range.py
"""
Time-range model.
Turns an appointment's start time and duration into a half-open minute
interval and a pixel position on a fixed-scale day timeline.
"""

from datetime import datetime
from typing import Optional

import pytz

from conflict_engine.models import (
    Appointment, TimeInterval, TimelinePosition, EngineConfig, ViewConfig, DAY_VIEW,
    parse_hhmm, parse_duration,
)
from conflict_engine.utils.logger import setup_logger

logger = setup_logger(__name__)


def resolve_duration(appointment: Appointment, config: Optional[EngineConfig] = None) -> int:
    """
    Duration in minutes, with the configured default when absent.

    Zero or negative durations are clamped to the default.
    """
    config = config or EngineConfig()
    duration = parse_duration(appointment.duration_minutes, appointment.id)

    if duration is None:
        return config.default_duration_minutes

    if duration <= 0:
        logger.warning(
            f"Appointment {appointment.id} has non-positive duration {duration}; "
            f"using default {config.default_duration_minutes} minutes"
        )
        return config.default_duration_minutes

    return duration


def to_interval(appointment: Appointment, config: Optional[EngineConfig] = None) -> TimeInterval:
    """Compute the [start, end) minute interval. Raises MalformedTimeError."""
    start = parse_hhmm(appointment.start_time, appointment.id)
    return TimeInterval(start, start + resolve_duration(appointment, config))


def interval_position(
    interval: TimeInterval,
    view: ViewConfig = DAY_VIEW,
    config: Optional[EngineConfig] = None
) -> TimelinePosition:
    config = config or EngineConfig()
    pixels_per_minute = view.pixels_per_hour / 60

    top = max(0.0, (interval.start_minute - config.window_start_minute) * pixels_per_minute)
    raw_height = interval.duration_minutes * pixels_per_minute

    return TimelinePosition(
        top=top,
        height=max(view.min_content_height, raw_height),
        raw_height=raw_height,
    )


def position(
    appointment: Appointment,
    view: ViewConfig = DAY_VIEW,
    config: Optional[EngineConfig] = None
) -> TimelinePosition:
    """
    Pixel placement of an appointment.

    `top` is clamped to zero for appointments starting before the visible
    window; `height` has the view's minimum content height applied while
    `raw_height` keeps the true duration-derived value.
    """
    return interval_position(to_interval(appointment, config), view, config)


def current_time_position(
    now: datetime,
    view: ViewConfig = DAY_VIEW,
    config: Optional[EngineConfig] = None
) -> Optional[float]:
    """
    Pixel offset of the current-time line, or None outside the visible window.

    Naive datetimes are taken to be in the business timezone.
    """
    config = config or EngineConfig()
    tz = pytz.timezone(config.timezone)

    if now.tzinfo is None:
        local = tz.localize(now)
    else:
        local = now.astimezone(tz)

    minute = local.hour * 60 + local.minute
    if minute < config.window_start_minute or minute > config.window_end_minute:
        return None

    return (minute - config.window_start_minute) / 60 * view.pixels_per_hour
