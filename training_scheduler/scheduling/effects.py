"""
Translate a conflict resolution into the changes a caller should apply.

Nothing here touches storage or sends anything. The returned
ResolutionEffects lists the status transitions to persist and the
notifications to deliver. Re-validating conflicts at commit time is the
caller's job.
"""

from training_scheduler.logging_context import get_run_logger
from training_scheduler.schemas.booking_schema import BookingStatus
from training_scheduler.schemas.resolution_schema import (
    ConflictResolution,
    Notification,
    NotificationType,
    ResolutionEffects,
    StatusUpdate,
    Winner,
)

logger = get_run_logger(__name__)

RESCHEDULED_MESSAGE = "Your training on {date} has been rescheduled due to priority conflict."
REJECTED_MESSAGE = "Your training request was rejected due to scheduling conflict."


def plan_effects(resolution: ConflictResolution) -> ResolutionEffects:
    """Build the status updates and notifications implied by ``resolution``.

    The request only gets a status update when it has already been stored
    (it has an ID).
    """
    request = resolution.new_request
    effects = ResolutionEffects()

    if resolution.winner == Winner.NEW:
        if request.id is not None:
            effects.status_updates.append(
                StatusUpdate(booking_id=request.id, status=BookingStatus.APPROVED)
            )
        for booking in resolution.affected_trainings:
            effects.status_updates.append(
                StatusUpdate(booking_id=booking.id, status=BookingStatus.RESCHEDULED)
            )
            effects.notifications.append(
                Notification(
                    user_id=booking.client_id,
                    type=NotificationType.WARNING,
                    message=RESCHEDULED_MESSAGE.format(date=booking.date.isoformat()),
                )
            )
    else:
        if request.id is not None:
            effects.status_updates.append(
                StatusUpdate(booking_id=request.id, status=BookingStatus.REJECTED)
            )
        effects.notifications.append(
            Notification(
                user_id=request.client_id,
                type=NotificationType.INFO,
                message=REJECTED_MESSAGE,
            )
        )

    logger.debug(
        "Planned %d status update(s) and %d notification(s)",
        len(effects.status_updates),
        len(effects.notifications),
    )
    return effects
