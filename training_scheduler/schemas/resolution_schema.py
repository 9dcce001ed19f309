"""Computed scheduling decisions. None of these are persisted."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from training_scheduler.schemas.booking_schema import Booking, BookingStatus, TrainingRequest


class Winner(str, Enum):
    NEW = "new"
    EXISTING = "existing"


class ConflictResolution(BaseModel):
    """Outcome of applying the priority rule to a request and its conflicts."""

    winner: Winner
    new_request: TrainingRequest
    affected_trainings: list[Booking] = Field(default_factory=list)
    reason: str
    new_priority: int = 0
    max_conflict_priority: int = 0


class UnavailableReason(str, Enum):
    NOT_AVAILABLE = "not available"
    ALREADY_BOOKED = "already booked"


class AvailabilityResult(BaseModel):
    """Verdict of a trainer availability check."""

    available: bool
    reason: Optional[UnavailableReason] = None
    message: Optional[str] = None
    conflicts: list[Booking] = Field(default_factory=list)


class ConflictType(str, Enum):
    OVERLAP = "overlap"
    REQUEST_CONFLICT = "request_conflict"


class ConflictReport(BaseModel):
    """A conflict found by the admin scan.

    For ``overlap`` reports ``bookings`` holds the overlapping pair; for
    ``request_conflict`` reports it holds the bookings the request collides with.
    """

    type: ConflictType
    bookings: list[Booking]
    request: Optional[TrainingRequest] = None


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"


class StatusUpdate(BaseModel):
    booking_id: str
    status: BookingStatus


class Notification(BaseModel):
    user_id: str
    type: NotificationType
    message: str


class ResolutionEffects(BaseModel):
    """Mutations and notifications a caller should apply for a resolution."""

    status_updates: list[StatusUpdate] = Field(default_factory=list)
    notifications: list[Notification] = Field(default_factory=list)
