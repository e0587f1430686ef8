# File: conflict_engine/models/slots.py

from dataclasses import dataclass, field
import datetime as dt
from typing import Any, List


@dataclass
class SlotAvailability:
    """A fixed-width probe slot and whether it is free."""
    date: dt.date
    time: str  # "HH:MM"
    start_minute: int
    end_minute: int
    available: bool
    blocked_by: List[Any] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'date': self.date.isoformat(),
            'time': self.time,
            'available': self.available,
            'blocked_by': list(self.blocked_by),
        }
