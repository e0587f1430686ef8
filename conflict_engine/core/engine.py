# File: conflict_engine/core/engine.py
"""
Calendar engine facade.
Binds an injected configuration and view to the layout engine and the
conflict advisor. Holds no appointment state: callers pass the full day
on every call and call again after each change.
"""

from datetime import date, datetime
from typing import Any, List, Optional, Union

from conflict_engine.models import (
    Appointment, DayLayout, ConflictGroup, SlotAvailability, Diagnostic,
    EngineConfig, ViewConfig, DAY_VIEW,
)
from conflict_engine.processors import layout_processor, conflict_advisor, time_range
from conflict_engine.utils.logger import LoggerMixin


class CalendarEngine(LoggerMixin):
    """Conflict engine for a single business calendar."""

    def __init__(self, config: Optional[EngineConfig] = None, view: ViewConfig = DAY_VIEW):
        """
        Args:
            config: Engine configuration; validated on construction
            view: Timeline scale used for pixel placement
        """
        self.config = (config or EngineConfig()).validate()
        self.view = view

    def layout_day(self, appointments: List[Appointment]) -> DayLayout:
        """Lay out a day, collecting excluded appointments as diagnostics."""
        diagnostics: List[Diagnostic] = []
        assignments = layout_processor.compute_day_layout(
            appointments, self.config, self.view, diagnostics
        )
        if diagnostics:
            self.logger.warning(
                f"{len(diagnostics)} of {len(appointments)} appointments excluded from layout"
            )
        return DayLayout(assignments=assignments, diagnostics=diagnostics)

    def is_conflicted(self, appointment: Appointment, day_appointments: List[Appointment]) -> bool:
        return layout_processor.is_conflicted(appointment, day_appointments, self.config)

    def should_show_conflict_warning(
        self, appointment: Appointment, day_appointments: List[Appointment]
    ) -> bool:
        return layout_processor.should_show_conflict_warning(
            appointment, day_appointments, self.config
        )

    def overlapping(
        self, appointment: Appointment, day_appointments: List[Appointment]
    ) -> List[Appointment]:
        return layout_processor.get_overlapping(appointment, day_appointments, self.config)

    def conflicts(self, day_appointments: List[Appointment]) -> List[ConflictGroup]:
        return layout_processor.find_conflicts(day_appointments, self.config)

    def suggest_times(
        self, appointment: Appointment, day_appointments: List[Appointment]
    ) -> List[str]:
        """Alternative start times for `appointment` given the rest of its day."""
        peers = self.overlapping(appointment, day_appointments)
        return conflict_advisor.suggest_times(appointment, peers, self.config)

    def available_slots(
        self,
        day: Union[date, str],
        day_appointments: List[Appointment],
        granularity_minutes: Optional[int] = None
    ) -> List[SlotAvailability]:
        return conflict_advisor.list_available_slots(
            day, day_appointments, granularity_minutes, self.config
        )

    def reschedule(
        self, day_appointments: List[Appointment], appointment_id: Any, new_time: str
    ) -> List[Appointment]:
        return conflict_advisor.apply_reschedule(day_appointments, appointment_id, new_time)

    def occupied_hours(self, day_appointments: List[Appointment]) -> List[int]:
        return layout_processor.occupied_hours(day_appointments, self.config)

    def now_line(self, now: Optional[datetime] = None) -> Optional[float]:
        """Pixel offset of the current-time line, or None when off-screen."""
        return time_range.current_time_position(now or datetime.now(), self.view, self.config)
