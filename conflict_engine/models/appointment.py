# File: conflict_engine/models/appointment.py

from dataclasses import dataclass
import datetime as dt
from typing import Any, Optional, Union

from .enums import AppointmentStatus
from .common import parse_date, parse_duration, format_hhmm, NUMBER_PATTERN
from .errors import ConfigurationError, MalformedTimeError


@dataclass
class Appointment:
    """
    A booked appointment on one business calendar.

    Owned by the caller; the engine never mutates it. `start_time` and
    `duration_minutes` are kept as given and only parsed when an interval is
    needed, so a malformed appointment can still be reported by id.
    """
    id: Any
    start_time: str  # "HH:MM" 24-hour
    duration_minutes: Optional[Union[int, float, str]] = None
    date: Optional[dt.date] = None
    status: AppointmentStatus = AppointmentStatus.PENDING
    title: Optional[str] = None

    def __post_init__(self):
        """Convert string status and date values."""
        if isinstance(self.status, str):
            try:
                self.status = AppointmentStatus(self.status)
            except ValueError:
                self.status = AppointmentStatus.PENDING

        if isinstance(self.date, str):
            try:
                self.date = parse_date(self.date)
            except ConfigurationError as e:
                raise MalformedTimeError(
                    str(e), appointment_id=self.id, field='date', value=self.date
                ) from e

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'id': self.id,
            'date': self.date.isoformat() if self.date else None,
            'start_time': self.start_time,
            'duration_minutes': self.duration_minutes,
            'status': self.status.value,
            'title': self.title,
        }


@dataclass(frozen=True)
class TimeInterval:
    """Half-open minute range [start_minute, end_minute)."""
    start_minute: int
    end_minute: int

    def __post_init__(self):
        if self.end_minute <= self.start_minute:
            raise ValueError(
                f"Interval end must be after start: "
                f"[{self.start_minute}, {self.end_minute})"
            )

    @property
    def duration_minutes(self) -> int:
        return self.end_minute - self.start_minute

    def overlaps(self, other: 'TimeInterval') -> bool:
        """Touching endpoints do not overlap."""
        return self.start_minute < other.end_minute and self.end_minute > other.start_minute

    def __str__(self) -> str:
        return f"{format_hhmm(self.start_minute)}-{format_hhmm(self.end_minute)}"


def _estimated_duration_minutes(value: Any, appointment_id: Any) -> Optional[int]:
    """Estimated durations are entered in hours ("1.5" or "1.5 hours")."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return parse_duration(value * 60, appointment_id)
    if isinstance(value, str) and NUMBER_PATTERN.match(value.strip()):
        return parse_duration(float(value.strip()) * 60, appointment_id)
    return parse_duration(value, appointment_id)


def appointment_from_dict(data: dict) -> Appointment:
    """Create an Appointment from a dictionary (JSON input or datastore row)."""
    appointment_id = data.get('id')

    if 'duration_minutes' in data:
        duration = data.get('duration_minutes')
    elif data.get('estimated_duration') is not None:
        duration = _estimated_duration_minutes(data['estimated_duration'], appointment_id)
    else:
        duration = None

    return Appointment(
        id=appointment_id,
        start_time=data.get('start_time', data.get('time')),
        duration_minutes=duration,
        date=data.get('date'),
        status=data.get('status', AppointmentStatus.PENDING.value),
        title=data.get('title', data.get('client_name')),
    )
