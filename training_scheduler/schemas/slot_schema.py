"""Time slot value types.

Times are zone-naive wall-clock values in the trainer's local time.
Ordering of start and end is not enforced here: records arrive as
snapshots and may be malformed, so the scheduling entry points check
it with ``validate_slot`` instead.
"""

from datetime import date, time

from pydantic import BaseModel, field_validator


class TimeSlot(BaseModel):
    """A (date, start, end) interval on a single calendar day."""

    date: date
    start_time: time
    end_time: time

    @field_validator("start_time", "end_time")
    @classmethod
    def wall_clock_only(cls, value: time) -> time:
        if value.tzinfo is not None:
            raise ValueError("slot times must be zone-naive wall-clock times")
        return value


class TrainerSlot(TimeSlot):
    """A slot tied to a specific trainer."""

    trainer_id: str
