# File: conflict_engine/processors/layout_processor.py
"""
Overlap and layout engine.
Detects overlapping appointments for a day, assigns each one a rendering
column, and decides which appointment of an overlapping pair owns the
conflict warning.
"""

from typing import Any, List, Optional, Tuple

from conflict_engine.models import (
    Appointment, TimeInterval, LayoutAssignment, ConflictGroup, Diagnostic,
    EngineConfig, ViewConfig, DAY_VIEW, MalformedTimeError, id_sort_key,
)
from conflict_engine.processors.time_range import to_interval, interval_position
from conflict_engine.utils.logger import setup_logger

logger = setup_logger(__name__)

ParsedAppointment = Tuple[Appointment, TimeInterval]


def order_key(appointment: Appointment, interval: TimeInterval) -> Tuple[int, Tuple[int, Any]]:
    """Total order used everywhere: start minute, then id."""
    return (interval.start_minute, id_sort_key(appointment.id))


def parse_day(
    appointments: List[Appointment],
    config: Optional[EngineConfig] = None,
    diagnostics: Optional[List[Diagnostic]] = None
) -> List[ParsedAppointment]:
    """
    Compute intervals for a day's appointments.

    Malformed appointments are skipped, logged, and appended to
    `diagnostics` when a list is given.
    """
    parsed: List[ParsedAppointment] = []
    for appointment in appointments:
        try:
            interval = to_interval(appointment, config)
        except MalformedTimeError as e:
            logger.warning(f"Excluding appointment {appointment.id}: {e}")
            if diagnostics is not None:
                diagnostics.append(Diagnostic.from_error(e))
            continue
        parsed.append((appointment, interval))
    return parsed


def _same_day(a: Appointment, b: Appointment) -> bool:
    return a.date is None or b.date is None or a.date == b.date


def compute_day_layout(
    appointments: List[Appointment],
    config: Optional[EngineConfig] = None,
    view: ViewConfig = DAY_VIEW,
    diagnostics: Optional[List[Diagnostic]] = None
) -> List[LayoutAssignment]:
    """
    Assign a column, width and offsets to every appointment of one day.

    Appointments are swept in (start, id) order. Each one takes the lowest
    column not used by an already-placed appointment it overlaps, capped at
    `config.max_columns`; when every lane is busy it is stacked into the
    last column and flagged as overflow. Only already-placed appointments
    are considered, so this is a greedy interval colouring, not a minimum
    one.

    Args:
        appointments: All appointments for the day
        config: Engine configuration (window, max_columns)
        view: Pixel scale of the timeline
        diagnostics: Optional list collecting excluded appointments

    Returns:
        One LayoutAssignment per well-formed appointment, in sweep order
    """
    config = config or EngineConfig()
    entries = sorted(parse_day(appointments, config, diagnostics), key=lambda e: order_key(*e))

    layouts: List[LayoutAssignment] = []

    for index, (appointment, interval) in enumerate(entries):
        # Placed appointments are looked up by index; the list only grows
        overlapping = [i for i in range(index) if entries[i][1].overlaps(interval)]
        used_columns = {layouts[i].column for i in overlapping}

        column = 0
        while column in used_columns and column < config.max_columns:
            column += 1

        overflow = column >= config.max_columns
        if overflow:
            column = config.max_columns - 1

        group_size = min(len(overlapping) + 1, config.max_columns)
        column_width = 100 / max(1, group_size)
        placement = interval_position(interval, view, config)

        layouts.append(LayoutAssignment(
            appointment_id=appointment.id,
            top_offset=placement.top,
            height=placement.height,
            column=column,
            column_width_percent=column_width - view.column_gap_percent,
            left_offset_percent=column * column_width,
            start_minute=interval.start_minute,
            end_minute=interval.end_minute,
            overflow=overflow,
        ))

    logger.debug(
        f"Laid out {len(layouts)} appointments "
        f"({sum(1 for a in layouts if a.overflow)} stacked)"
    )
    return layouts


def _overlapping_peers(
    appointment: Appointment,
    interval: TimeInterval,
    parsed: List[ParsedAppointment]
) -> List[ParsedAppointment]:
    peers = [
        (other, other_interval) for other, other_interval in parsed
        if other.id != appointment.id
        and _same_day(appointment, other)
        and interval.overlaps(other_interval)
    ]
    return sorted(peers, key=lambda e: order_key(*e))


def get_overlapping(
    appointment: Appointment,
    day_appointments: List[Appointment],
    config: Optional[EngineConfig] = None
) -> List[Appointment]:
    """
    Every other appointment whose interval overlaps this one, in (start, id) order.

    Raises MalformedTimeError if `appointment` itself cannot be parsed;
    malformed peers are ignored.
    """
    interval = to_interval(appointment, config)
    parsed = parse_day(day_appointments, config)
    return [other for other, _ in _overlapping_peers(appointment, interval, parsed)]


def is_conflicted(
    appointment: Appointment,
    day_appointments: List[Appointment],
    config: Optional[EngineConfig] = None
) -> bool:
    """True if any other appointment overlaps this one."""
    return len(get_overlapping(appointment, day_appointments, config)) > 0


def should_show_conflict_warning(
    appointment: Appointment,
    day_appointments: List[Appointment],
    config: Optional[EngineConfig] = None
) -> bool:
    """
    True if an overlapping peer comes strictly earlier in (start, id) order.

    The later appointment of an overlapping pair carries the warning. For
    identical start times the larger id is the later one, so exactly one of
    the two shows it.
    """
    interval = to_interval(appointment, config)
    own_key = order_key(appointment, interval)
    parsed = parse_day(day_appointments, config)

    return any(
        order_key(other, other_interval) < own_key
        for other, other_interval in _overlapping_peers(appointment, interval, parsed)
    )


def find_conflicts(
    day_appointments: List[Appointment],
    config: Optional[EngineConfig] = None,
    diagnostics: Optional[List[Diagnostic]] = None
) -> List[ConflictGroup]:
    """One ConflictGroup per conflicted appointment, in (start, id) order."""
    parsed = sorted(parse_day(day_appointments, config, diagnostics), key=lambda e: order_key(*e))
    groups: List[ConflictGroup] = []

    for appointment, interval in parsed:
        peers = _overlapping_peers(appointment, interval, parsed)
        if not peers:
            continue
        own_key = order_key(appointment, interval)
        groups.append(ConflictGroup(
            appointment_id=appointment.id,
            peer_ids=[other.id for other, _ in peers],
            shows_warning=any(order_key(*peer) < own_key for peer in peers),
        ))

    if groups:
        logger.info(f"Found {len(groups)} conflicted appointments")
    return groups


def occupied_hours(
    day_appointments: List[Appointment],
    config: Optional[EngineConfig] = None
) -> List[int]:
    """Hour rows of the visible window that hold at least one appointment."""
    config = config or EngineConfig()
    parsed = parse_day(day_appointments, config)

    hours = []
    for hour in range(config.day_start_hour, config.day_end_hour + 1):
        row = TimeInterval(hour * 60, (hour + 1) * 60)
        if any(row.overlaps(interval) for _, interval in parsed):
            hours.append(hour)
    return hours


def is_hour_occupied(
    hour: int,
    day_appointments: List[Appointment],
    config: Optional[EngineConfig] = None
) -> bool:
    row = TimeInterval(hour * 60, (hour + 1) * 60)
    return any(row.overlaps(interval) for _, interval in parse_day(day_appointments, config))
