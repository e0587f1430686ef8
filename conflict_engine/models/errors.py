# File: conflict_engine/models/errors.py
"""
Error types and diagnostics for the conflict engine.
"""

from dataclasses import dataclass
from typing import Any, Optional


class EngineError(Exception):
    """Base class for all conflict engine errors."""


class MalformedTimeError(EngineError, ValueError):
    """An appointment's start time or duration could not be parsed."""

    def __init__(self, message: str, appointment_id: Any = None,
                 field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.appointment_id = appointment_id
        self.field = field
        self.value = value


class ConfigurationError(EngineError, ValueError):
    """Invalid engine or advisor parameters."""


@dataclass
class Diagnostic:
    """An appointment that was left out of a computation."""
    appointment_id: Any
    field: str
    message: str

    @classmethod
    def from_error(cls, error: MalformedTimeError) -> 'Diagnostic':
        return cls(
            appointment_id=error.appointment_id,
            field=error.field or 'appointment',
            message=str(error),
        )

    def __str__(self) -> str:
        return f"Appointment {self.appointment_id} - {self.field}: {self.message}"
