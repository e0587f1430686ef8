# File: conflict_engine/models/layout.py

from dataclasses import dataclass, field
from typing import Any, List

from .errors import Diagnostic


@dataclass
class LayoutAssignment:
    """Where one appointment is drawn on the day timeline."""
    appointment_id: Any
    top_offset: float
    height: float
    column: int
    column_width_percent: float
    left_offset_percent: float
    start_minute: int
    end_minute: int
    # Forced into the last column because every lane was taken
    overflow: bool = False

    def horizontal_range(self) -> tuple:
        return (self.left_offset_percent, self.left_offset_percent + self.column_width_percent)

    def overlaps_in_time(self, other: 'LayoutAssignment') -> bool:
        return self.start_minute < other.end_minute and self.end_minute > other.start_minute

    def to_dict(self) -> dict:
        return {
            'appointment_id': self.appointment_id,
            'top': self.top_offset,
            'height': self.height,
            'column': self.column,
            'width': self.column_width_percent,
            'left': self.left_offset_percent,
            'overflow': self.overflow,
        }


@dataclass
class DayLayout:
    """Layout for one day plus the appointments that could not be placed."""
    assignments: List[LayoutAssignment] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def get(self, appointment_id: Any) -> LayoutAssignment:
        for assignment in self.assignments:
            if assignment.appointment_id == appointment_id:
                return assignment
        raise KeyError(appointment_id)

    def to_dict(self) -> dict:
        return {
            'assignments': [a.to_dict() for a in self.assignments],
            'diagnostics': [str(d) for d in self.diagnostics],
        }


@dataclass
class ConflictGroup:
    """An appointment and every peer whose interval overlaps it."""
    appointment_id: Any
    peer_ids: List[Any]
    shows_warning: bool

    def to_dict(self) -> dict:
        return {
            'appointment_id': self.appointment_id,
            'peer_ids': list(self.peer_ids),
            'shows_warning': self.shows_warning,
        }


@dataclass
class TimelinePosition:
    """Vertical placement of an appointment on a timeline, in pixels."""
    top: float
    height: float
    # Duration-derived height before the legibility floor is applied
    raw_height: float
