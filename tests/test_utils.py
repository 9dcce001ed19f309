"""Tests for shared utility functions."""

from datetime import date, time

import pytest
from pydantic import ValidationError

from training_scheduler.schemas.slot_schema import TimeSlot
from training_scheduler.utils import format_slot, parse_calendar_date, parse_wall_time


class TestParseCalendarDate:
    def test_iso_date(self):
        assert parse_calendar_date("2025-04-01") == date(2025, 4, 1)

    def test_strips_whitespace(self):
        assert parse_calendar_date("  2025-04-01 ") == date(2025, 4, 1)

    def test_rejects_other_formats(self):
        with pytest.raises(ValueError):
            parse_calendar_date("01/04/2025")


class TestParseWallTime:
    def test_hh_mm(self):
        assert parse_wall_time("09:30") == time(9, 30)

    def test_single_digit_hour(self):
        assert parse_wall_time("9:05") == time(9, 5)

    def test_rejects_words(self):
        with pytest.raises(ValueError):
            parse_wall_time("ten am")


class TestFormatSlot:
    def test_format(self):
        slot = TimeSlot(date=date(2025, 4, 1), start_time=time(9), end_time=time(10, 30))
        assert format_slot(slot) == "2025-04-01 09:00-10:30"


class TestTimeSlotModel:
    def test_parses_strings(self):
        slot = TimeSlot(date="2025-04-01", start_time="09:00", end_time="10:00")
        assert slot.date == date(2025, 4, 1)
        assert slot.start_time == time(9)

    def test_rejects_timezone_aware_times(self):
        with pytest.raises(ValidationError, match="zone-naive"):
            TimeSlot(date="2025-04-01", start_time="09:00:00+02:00", end_time="10:00")

    def test_malformed_order_allowed_at_model_level(self):
        slot = TimeSlot(date="2025-04-01", start_time="11:00", end_time="10:00")
        assert slot.start_time > slot.end_time
