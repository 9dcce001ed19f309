"""Input file model for the scheduler CLI."""

from pydantic import BaseModel, Field

from training_scheduler.schemas.booking_schema import (
    AvailabilityWindow,
    Booking,
    ClientPriority,
    TrainingRequest,
)


class SchedulingSnapshot(BaseModel):
    """Point-in-time copy of the data the scheduler decides over."""

    bookings: list[Booking] = Field(default_factory=list)
    requests: list[TrainingRequest] = Field(default_factory=list)
    availability: list[AvailabilityWindow] = Field(default_factory=list)
    clients: list[ClientPriority] = Field(default_factory=list)
