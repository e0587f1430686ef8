# File: conflict_engine/models/enums.py

from enum import Enum

class AppointmentStatus(Enum):
    """Lifecycle status of an appointment. Only used for display colour."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
