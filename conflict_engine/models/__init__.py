from .enums import AppointmentStatus
from .errors import EngineError, MalformedTimeError, ConfigurationError, Diagnostic
from .common import (
    parse_hhmm, parse_duration, parse_date,
    format_hhmm, format_time_12h, format_hour_label, id_sort_key,
)
from .appointment import Appointment, TimeInterval, appointment_from_dict
from .layout import LayoutAssignment, DayLayout, ConflictGroup, TimelinePosition
from .slots import SlotAvailability
from .config import EngineConfig, ViewConfig, DAY_VIEW, WEEK_VIEW, validate_granularity

__all__ = [
    "AppointmentStatus",
    "EngineError",
    "MalformedTimeError",
    "ConfigurationError",
    "Diagnostic",
    "parse_hhmm",
    "parse_duration",
    "parse_date",
    "format_hhmm",
    "format_time_12h",
    "format_hour_label",
    "id_sort_key",
    "Appointment",
    "TimeInterval",
    "appointment_from_dict",
    "LayoutAssignment",
    "DayLayout",
    "ConflictGroup",
    "TimelinePosition",
    "SlotAvailability",
    "EngineConfig",
    "ViewConfig",
    "DAY_VIEW",
    "WEEK_VIEW",
    "validate_granularity",
]
