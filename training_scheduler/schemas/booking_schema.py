"""Booking, request, availability and client priority data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from training_scheduler.schemas.slot_schema import TimeSlot


class BookingStatus(str, Enum):
    """Lifecycle status of a training session or request."""

    PENDING = "pending"
    APPROVED = "approved"
    RESCHEDULED = "rescheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    REJECTED = "rejected"
    ADMIN_APPROVED = "admin_approved"
    IN_PROGRESS = "in-progress"


class AvailabilityStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Booking(TimeSlot):
    """A scheduled or requested training session."""

    id: str
    client_id: str
    trainer_id: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    title: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Cancelled bookings never take part in conflict checks."""
        return self.status != BookingStatus.CANCELLED


class TrainingRequest(TimeSlot):
    """A new training request submitted by a client.

    ``id`` is absent while the request has not been stored yet.
    """

    client_id: str
    id: Optional[str] = None
    trainer_id: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    title: Optional[str] = None


class AvailabilityWindow(TimeSlot):
    """A trainer-declared interval during which bookings are accepted."""

    trainer_id: str
    max_trainees: int = Field(default=1, ge=1)
    status: AvailabilityStatus = AvailabilityStatus.OPEN


class ClientPriority(BaseModel):
    """Admin-assigned scheduling precedence for a client (higher wins)."""

    client_id: str
    priority_score: int = 0
