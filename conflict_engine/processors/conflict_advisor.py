# File: conflict_engine/processors/conflict_advisor.py
"""
Conflict resolution advisor.
Suggests alternative start times for a conflicted appointment and lists
fixed-granularity slots of a day with their availability.
"""

import dataclasses
from datetime import date
from typing import Any, List, Optional, Union

from conflict_engine.models import (
    Appointment, TimeInterval, SlotAvailability, EngineConfig,
    parse_hhmm, parse_date, format_hhmm, validate_granularity,
)
from conflict_engine.processors.layout_processor import parse_day
from conflict_engine.processors.time_range import to_interval
from conflict_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

# One hour before, one hour after, two hours after
SUGGESTION_OFFSETS = (-60, 60, 120)


def suggest_times(
    conflicted: Appointment,
    peers: List[Appointment],
    config: Optional[EngineConfig] = None
) -> List[str]:
    """
    Candidate 'HH:MM' start times that would resolve a conflict.

    Candidates are generated around the conflicted appointment and each of
    its peers, kept only when the conflicted appointment's full duration
    fits inside the business-day window, then deduplicated and sorted. A
    candidate may still overlap a peer. If nothing survives, the configured
    fallback times are returned.

    Args:
        conflicted: The appointment to move
        peers: Appointments it currently overlaps
        config: Engine configuration (window, fallback times)

    Returns:
        Sorted, deduplicated list of 'HH:MM' strings
    """
    config = config or EngineConfig()
    target = to_interval(conflicted, config)
    duration = target.duration_minutes

    sources = [target] + [
        interval for peer, interval in parse_day(peers, config)
        if peer.id != conflicted.id
    ]

    candidates = set()
    for source in sources:
        for offset in SUGGESTION_OFFSETS:
            start = source.start_minute + offset
            if start < config.window_start_minute or start + duration > config.window_end_minute:
                continue
            candidates.add(start)

    if not candidates:
        logger.info(
            f"No candidate times for appointment {conflicted.id}; using fallback list"
        )
        candidates = {parse_hhmm(value) for value in config.fallback_times}

    return [format_hhmm(minute) for minute in sorted(candidates)]


def list_available_slots(
    day: Union[date, str],
    existing: List[Appointment],
    granularity_minutes: Optional[int] = None,
    config: Optional[EngineConfig] = None
) -> List[SlotAvailability]:
    """
    Every granularity-aligned slot of the business day, flagged free or taken.

    Raises:
        ConfigurationError: invalid date, granularity, or day window
    """
    config = config or EngineConfig()
    config.validate()
    slot_date = parse_date(day)
    granularity = validate_granularity(
        config.granularity_minutes if granularity_minutes is None else granularity_minutes
    )

    booked = [
        (appointment, interval) for appointment, interval in parse_day(existing, config)
        if appointment.date is None or appointment.date == slot_date
    ]

    slots: List[SlotAvailability] = []
    last_start = config.window_end_minute - granularity
    for start in range(config.window_start_minute, last_start + 1, granularity):
        probe = TimeInterval(start, start + granularity)
        blocked_by = [appointment.id for appointment, interval in booked if probe.overlaps(interval)]
        slots.append(SlotAvailability(
            date=slot_date,
            time=format_hhmm(start),
            start_minute=probe.start_minute,
            end_minute=probe.end_minute,
            available=not blocked_by,
            blocked_by=blocked_by,
        ))

    logger.debug(
        f"{sum(1 for s in slots if s.available)}/{len(slots)} slots free on {slot_date}"
    )
    return slots


def reschedule(appointment: Appointment, new_time: str) -> Appointment:
    """Copy of the appointment moved to a new 'HH:MM' start time."""
    minute = parse_hhmm(new_time, appointment.id)
    return dataclasses.replace(appointment, start_time=format_hhmm(minute))


def apply_reschedule(
    appointments: List[Appointment],
    appointment_id: Any,
    new_time: str
) -> List[Appointment]:
    """
    Return the day's appointments with one of them moved.

    Raises:
        KeyError: no appointment has `appointment_id`
    """
    updated = []
    found = False
    for appointment in appointments:
        if appointment.id == appointment_id:
            updated.append(reschedule(appointment, new_time))
            found = True
        else:
            updated.append(appointment)

    if not found:
        raise KeyError(appointment_id)

    logger.info(f"Rescheduled appointment {appointment_id} to {new_time}")
    return updated
