"""
Overlap predicate for training slots.

Slots are compared as half-open intervals on a single calendar day:
touching endpoints (one session ending at 10:00, the next starting at
10:00) do not overlap, so back-to-back sessions are allowed.
"""

from datetime import datetime

from training_scheduler.schemas.slot_schema import TimeSlot
from training_scheduler.utils import format_slot


class InvalidSlotError(ValueError):
    """Raised when a slot does not start strictly before it ends."""

    def __init__(self, slot: TimeSlot) -> None:
        self.slot = slot
        super().__init__(f"Slot {format_slot(slot)} must start before it ends")


def validate_slot(slot: TimeSlot) -> TimeSlot:
    """Return ``slot`` unchanged, or raise InvalidSlotError if start >= end."""
    if slot.start_time >= slot.end_time:
        raise InvalidSlotError(slot)
    return slot


def slot_bounds(slot: TimeSlot) -> tuple[datetime, datetime]:
    """Absolute (start, end) of a slot as naive wall-clock datetimes."""
    return (
        datetime.combine(slot.date, slot.start_time),
        datetime.combine(slot.date, slot.end_time),
    )


def overlaps(a: TimeSlot, b: TimeSlot) -> bool:
    """True if the two slots share any time on the same calendar date."""
    validate_slot(a)
    validate_slot(b)
    if a.date != b.date:
        return False

    a_start, a_end = slot_bounds(a)
    b_start, b_end = slot_bounds(b)
    return a_start < b_end and b_start < a_end


def contains(outer: TimeSlot, inner: TimeSlot) -> bool:
    """True if ``inner`` lies entirely within ``outer`` on the same date."""
    if outer.date != inner.date:
        return False

    outer_start, outer_end = slot_bounds(outer)
    inner_start, inner_end = slot_bounds(inner)
    return outer_start <= inner_start and inner_end <= outer_end
