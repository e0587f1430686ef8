# File: conflict_engine/models/config.py
"""
Data models for conflict engine configuration.
"""

from dataclasses import dataclass, field
from typing import List

from .common import parse_hhmm
from .errors import ConfigurationError, MalformedTimeError

DEFAULT_FALLBACK_TIMES = ['09:00', '09:30', '13:00', '13:30', '14:00', '15:00']


def validate_granularity(granularity_minutes) -> int:
    """Slot granularity must be a positive divisor of 60."""
    if isinstance(granularity_minutes, bool) or not isinstance(granularity_minutes, int):
        raise ConfigurationError(
            f"Granularity must be an integer number of minutes, got {granularity_minutes!r}"
        )
    if granularity_minutes <= 0:
        raise ConfigurationError(f"Granularity must be positive, got {granularity_minutes}")
    if 60 % granularity_minutes != 0:
        raise ConfigurationError(
            f"Granularity must divide 60 evenly, got {granularity_minutes}"
        )
    return granularity_minutes


@dataclass
class EngineConfig:
    """Business-day window and layout policy injected by the caller."""
    day_start_hour: int = 6
    day_end_hour: int = 22
    max_columns: int = 2
    granularity_minutes: int = 30
    default_duration_minutes: int = 60
    fallback_times: List[str] = field(default_factory=lambda: list(DEFAULT_FALLBACK_TIMES))
    timezone: str = "UTC"

    @property
    def window_start_minute(self) -> int:
        return self.day_start_hour * 60

    @property
    def window_end_minute(self) -> int:
        return self.day_end_hour * 60

    def validate(self) -> 'EngineConfig':
        """Raise ConfigurationError on any inconsistent setting."""
        if not 0 <= self.day_start_hour <= 24 or not 0 <= self.day_end_hour <= 24:
            raise ConfigurationError(
                f"Day window hours must be within 0-24, got "
                f"{self.day_start_hour}-{self.day_end_hour}"
            )
        if self.day_start_hour >= self.day_end_hour:
            raise ConfigurationError(
                f"Day window start ({self.day_start_hour}) must be before end ({self.day_end_hour})"
            )
        if self.max_columns < 1:
            raise ConfigurationError(f"max_columns must be at least 1, got {self.max_columns}")
        if self.default_duration_minutes <= 0:
            raise ConfigurationError(
                f"default_duration_minutes must be positive, got {self.default_duration_minutes}"
            )
        validate_granularity(self.granularity_minutes)
        for value in self.fallback_times:
            try:
                parse_hhmm(value)
            except MalformedTimeError as e:
                raise ConfigurationError(f"Invalid fallback time: {e}") from e
        return self

    @classmethod
    def from_dict(cls, data: dict) -> 'EngineConfig':
        """Create EngineConfig from dictionary (e.g., loaded from JSON)."""
        defaults = cls()
        try:
            config = cls(
                day_start_hour=int(data.get('day_start_hour', defaults.day_start_hour)),
                day_end_hour=int(data.get('day_end_hour', defaults.day_end_hour)),
                max_columns=int(data.get('max_columns', defaults.max_columns)),
                granularity_minutes=int(data.get('granularity_minutes', defaults.granularity_minutes)),
                default_duration_minutes=int(
                    data.get('default_duration_minutes', defaults.default_duration_minutes)
                ),
                fallback_times=list(data.get('fallback_times', defaults.fallback_times)),
                timezone=data.get('timezone', defaults.timezone),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid engine configuration: {e}") from e
        return config.validate()

    def to_dict(self) -> dict:
        return {
            'day_start_hour': self.day_start_hour,
            'day_end_hour': self.day_end_hour,
            'max_columns': self.max_columns,
            'granularity_minutes': self.granularity_minutes,
            'default_duration_minutes': self.default_duration_minutes,
            'fallback_times': list(self.fallback_times),
            'timezone': self.timezone,
        }


@dataclass(frozen=True)
class ViewConfig:
    """Pixel scale of a timeline view. Rendering only."""
    name: str
    pixels_per_hour: float
    min_content_height: float
    column_gap_percent: float = 0.0


DAY_VIEW = ViewConfig(name="day", pixels_per_hour=80, min_content_height=95, column_gap_percent=2.0)
WEEK_VIEW = ViewConfig(name="week", pixels_per_hour=60, min_content_height=50)
