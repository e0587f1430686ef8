"""
Calendar conflict engine: overlap detection, column layout and
reschedule suggestions for a single day of appointments.
"""

from conflict_engine.models import (
    Appointment,
    AppointmentStatus,
    TimeInterval,
    LayoutAssignment,
    DayLayout,
    ConflictGroup,
    SlotAvailability,
    TimelinePosition,
    EngineConfig,
    ViewConfig,
    DAY_VIEW,
    WEEK_VIEW,
    Diagnostic,
    EngineError,
    MalformedTimeError,
    ConfigurationError,
    appointment_from_dict,
)
from conflict_engine.processors.time_range import to_interval, position, current_time_position
from conflict_engine.processors.layout_processor import (
    compute_day_layout,
    is_conflicted,
    should_show_conflict_warning,
    get_overlapping,
    find_conflicts,
    occupied_hours,
    is_hour_occupied,
)
from conflict_engine.processors.conflict_advisor import (
    suggest_times,
    list_available_slots,
    reschedule,
    apply_reschedule,
)
from conflict_engine.core.engine import CalendarEngine

__version__ = "0.1.0"

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "TimeInterval",
    "LayoutAssignment",
    "DayLayout",
    "ConflictGroup",
    "SlotAvailability",
    "TimelinePosition",
    "EngineConfig",
    "ViewConfig",
    "DAY_VIEW",
    "WEEK_VIEW",
    "Diagnostic",
    "EngineError",
    "MalformedTimeError",
    "ConfigurationError",
    "appointment_from_dict",
    "to_interval",
    "position",
    "current_time_position",
    "compute_day_layout",
    "is_conflicted",
    "should_show_conflict_warning",
    "get_overlapping",
    "find_conflicts",
    "occupied_hours",
    "is_hour_occupied",
    "suggest_times",
    "list_available_slots",
    "reschedule",
    "apply_reschedule",
    "CalendarEngine",
]
