# File: tests/integration/test_engine.py
"""
Integration tests for the CalendarEngine facade.
Runs the full detect -> suggest -> reschedule -> re-layout round trip.
"""

import pytest
from datetime import datetime

from conflict_engine import (
    CalendarEngine, Appointment, EngineConfig, ConfigurationError, WEEK_VIEW,
)


@pytest.fixture
def engine():
    return CalendarEngine(EngineConfig(max_columns=2))


@pytest.mark.integration
class TestCalendarEngine:
    """Tests for the engine facade."""

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigurationError):
            CalendarEngine(EngineConfig(day_start_hour=23, day_end_hour=6))

    def test_layout_day_collects_diagnostics(self, engine, busy_day):
        layout = engine.layout_day(busy_day)

        assert len(layout.assignments) == 4
        assert [d.appointment_id for d in layout.diagnostics] == ["e"]
        assert layout.get("b").column == 1

        with pytest.raises(KeyError):
            layout.get("e")

    def test_layout_to_dict(self, engine, overlapping_pair):
        result = engine.layout_day(overlapping_pair).to_dict()

        assert [a['appointment_id'] for a in result['assignments']] == [1, 2]
        assert result['diagnostics'] == []

    def test_resolve_conflict_round_trip(self, engine, overlapping_pair):
        conflicted = next(
            a for a in overlapping_pair
            if engine.should_show_conflict_warning(a, overlapping_pair)
        )
        assert conflicted.id == 2

        suggestions = engine.suggest_times(conflicted, overlapping_pair)
        assert suggestions == sorted(set(suggestions))

        updated = engine.reschedule(overlapping_pair, conflicted.id, suggestions[-1])

        assert engine.conflicts(updated) == []
        assert all(a.column == 0 for a in engine.layout_day(updated).assignments)

    def test_available_slots_after_reschedule(self, engine, overlapping_pair, day):
        before = {s.time: s.available for s in engine.available_slots(day, overlapping_pair)}
        updated = engine.reschedule(overlapping_pair, 2, "14:00")
        after = {s.time: s.available for s in engine.available_slots(day, updated)}

        assert before["14:00"] is True
        assert after["14:00"] is False
        assert after["09:30"] is False  # still held by appointment 1

    def test_week_view_scale(self, overlapping_pair):
        engine = CalendarEngine(view=WEEK_VIEW)

        layout = engine.layout_day(overlapping_pair)

        assert layout.assignments[0].top_offset == pytest.approx(180)
        assert layout.assignments[0].column_width_percent == pytest.approx(100)

    def test_occupied_hours(self, engine, busy_day):
        assert engine.occupied_hours(busy_day) == [8, 9, 13]

    def test_now_line(self, engine):
        assert engine.now_line(datetime(2025, 11, 18, 7, 0)) == pytest.approx(80)
        assert engine.now_line(datetime(2025, 11, 18, 23, 0)) is None

    def test_engine_is_stateless(self, engine, overlapping_pair, touching_pair):
        engine.layout_day(overlapping_pair)

        assert engine.conflicts(touching_pair) == []
        assert len(engine.conflicts(overlapping_pair)) == 2

    def test_overlapping(self, engine, triple_booking):
        peers = engine.overlapping(triple_booking[0], triple_booking)
        assert [a.id for a in peers] == [1, 2]

    def test_is_conflicted(self, engine, touching_pair):
        assert not engine.is_conflicted(touching_pair[0], touching_pair)
        moved = engine.reschedule(touching_pair, 2, "09:45")
        assert engine.is_conflicted(moved[0], moved)
