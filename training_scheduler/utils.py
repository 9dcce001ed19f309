"""Shared utilities used across the training scheduler."""

from datetime import date, datetime, time

from training_scheduler.schemas.slot_schema import TimeSlot


def parse_calendar_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date.

    Examples:
        >>> parse_calendar_date("2025-04-01")
        datetime.date(2025, 4, 1)
    """
    return datetime.strptime(value.strip(), "%Y-%m-%d").date()


def parse_wall_time(value: str) -> time:
    """Parse an ``HH:MM`` wall-clock time.

    Examples:
        >>> parse_wall_time("9:30")
        datetime.time(9, 30)
    """
    return datetime.strptime(value.strip(), "%H:%M").time()


def format_slot(slot: TimeSlot) -> str:
    """Render a slot as ``YYYY-MM-DD HH:MM-HH:MM`` for logs and messages.

    Examples:
        >>> format_slot(TimeSlot(date="2025-04-01", start_time="09:00", end_time="10:30"))
        '2025-04-01 09:00-10:30'
    """
    return (
        f"{slot.date.isoformat()} "
        f"{slot.start_time.strftime('%H:%M')}-{slot.end_time.strftime('%H:%M')}"
    )
