# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable appointment sets and configurations for all tests.
"""

import pytest
from datetime import date
from pathlib import Path
import sys

# Make the package importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from conflict_engine.models import (
    Appointment, AppointmentStatus, EngineConfig, ViewConfig
)


# ==================== Configuration Fixtures ====================

@pytest.fixture
def engine_config():
    """Default business day: 06:00-22:00, two columns, 30-minute slots."""
    return EngineConfig()


@pytest.fixture
def flat_view():
    """Day-view scale without the column gap, so widths are exact."""
    return ViewConfig(name="test", pixels_per_hour=80, min_content_height=95)


@pytest.fixture
def sample_engine_json():
    """Engine configuration as stored in config/engine.json."""
    return {
        'day_start_hour': 7,
        'day_end_hour': 20,
        'max_columns': 3,
        'granularity_minutes': 15,
        'default_duration_minutes': 45,
        'fallback_times': ['10:00', '14:00'],
        'timezone': 'Europe/Amsterdam',
    }


# ==================== Appointment Fixtures ====================

@pytest.fixture
def day():
    return date(2025, 11, 18)


@pytest.fixture
def overlapping_pair(day):
    """09:00-10:00 and 09:30-10:00."""
    return [
        Appointment(id=1, start_time="09:00", duration_minutes=60, date=day),
        Appointment(id=2, start_time="09:30", duration_minutes=30, date=day),
    ]


@pytest.fixture
def touching_pair(day):
    """09:00-10:00 and 10:00-10:30; back to back, not overlapping."""
    return [
        Appointment(id=1, start_time="09:00", duration_minutes=60, date=day),
        Appointment(id=2, start_time="10:00", duration_minutes=30, date=day),
    ]


@pytest.fixture
def triple_booking(day):
    """Three one-hour appointments all starting at 09:00."""
    return [
        Appointment(id=3, start_time="09:00", duration_minutes=60, date=day),
        Appointment(id=1, start_time="09:00", duration_minutes=60, date=day),
        Appointment(id=2, start_time="09:00", duration_minutes=60, date=day),
    ]


@pytest.fixture
def busy_day(day):
    """A realistic day with a chain of overlaps and one malformed entry."""
    return [
        Appointment(id="a", start_time="08:00", duration_minutes=90, date=day,
                    status=AppointmentStatus.COMPLETE, title="Boiler service"),
        Appointment(id="b", start_time="09:00", duration_minutes=60, date=day,
                    status=AppointmentStatus.IN_PROGRESS, title="Leak repair"),
        Appointment(id="c", start_time="09:30", duration_minutes=30, date=day,
                    title="Quote visit"),
        Appointment(id="d", start_time="13:00", date=day, title="Site survey"),
        Appointment(id="e", start_time="9am", duration_minutes=30, date=day,
                    title="Bad import"),
    ]


# ==================== Helper Fixtures ====================

@pytest.fixture
def assert_no_visual_collision():
    """Assert no two time-overlapping assignments share column and horizontal range."""
    def _assert(assignments):
        for i, first in enumerate(assignments):
            for second in assignments[i + 1:]:
                if not first.overlaps_in_time(second):
                    continue
                if first.overflow or second.overflow:
                    continue
                a_left, a_right = first.horizontal_range()
                b_left, b_right = second.horizontal_range()
                disjoint = a_right <= b_left or b_right <= a_left
                assert first.column != second.column or disjoint, (
                    f"{first.appointment_id} and {second.appointment_id} collide"
                )

    return _assert


@pytest.fixture
def create_appointment(day):
    """Factory fixture for creating test appointments."""
    def _create(appointment_id, start_time: str, duration_minutes=60) -> Appointment:
        return Appointment(
            id=appointment_id,
            start_time=start_time,
            duration_minutes=duration_minutes,
            date=day,
        )

    return _create


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
