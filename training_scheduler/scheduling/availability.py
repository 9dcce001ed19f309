"""
Trainer availability checks and alternative slot suggestions.

A slot is bookable when it sits entirely inside one open availability
window the trainer declared for that date and does not collide with any
of the trainer's active bookings. Containment is checked first, so a
slot outside every window is reported as "not available" even when
nothing is booked there.
"""

from typing import Optional, Sequence

from training_scheduler.config import settings
from training_scheduler.logging_context import get_run_logger
from training_scheduler.scheduling.conflicts import find_conflicts
from training_scheduler.scheduling.overlap import contains, validate_slot
from training_scheduler.schemas.booking_schema import (
    AvailabilityStatus,
    AvailabilityWindow,
    Booking,
)
from training_scheduler.schemas.resolution_schema import AvailabilityResult, UnavailableReason
from training_scheduler.schemas.slot_schema import TrainerSlot
from training_scheduler.utils import format_slot

logger = get_run_logger(__name__)


def _is_declared_available(slot: TrainerSlot, availability: Sequence[AvailabilityWindow]) -> bool:
    for window in availability:
        if window.trainer_id != slot.trainer_id or window.date != slot.date:
            continue
        if window.status != AvailabilityStatus.OPEN:
            continue
        validate_slot(window)
        if contains(window, slot):
            return True
    return False


def check_availability(
    slot: TrainerSlot,
    availability: Sequence[AvailabilityWindow],
    bookings: Sequence[Booking],
) -> AvailabilityResult:
    """Check that a trainer has declared the slot open and it is not booked.

    Only windows with status ``open`` count as declared availability; a
    closed window never makes a slot available, even when it covers it.
    """
    validate_slot(slot)

    if not _is_declared_available(slot, availability):
        logger.debug("Trainer %s has no window covering %s", slot.trainer_id, format_slot(slot))
        return AvailabilityResult(
            available=False,
            reason=UnavailableReason.NOT_AVAILABLE,
            message="Trainer not available for this time slot",
        )

    conflicts = find_conflicts(slot, bookings, slot.trainer_id)
    if conflicts:
        logger.debug(
            "Trainer %s already booked at %s (%d conflict(s))",
            slot.trainer_id,
            format_slot(slot),
            len(conflicts),
        )
        return AvailabilityResult(
            available=False,
            reason=UnavailableReason.ALREADY_BOOKED,
            message="Time slot already booked",
            conflicts=conflicts,
        )

    return AvailabilityResult(available=True)


def generate_alternatives(
    original: TrainerSlot,
    availability: Sequence[AvailabilityWindow],
    bookings: Sequence[Booking],
    count: Optional[int] = None,
) -> list[TrainerSlot]:
    """Suggest up to ``count`` replacement slots for ``original``.

    Each of the trainer's windows (on any date) is offered whole, in the
    order given, if it passes ``check_availability``. First fit, not
    closest fit; two free windows on the same day yield two suggestions.
    """
    if count is None:
        count = settings.scheduling.default_alternative_count
    validate_slot(original)

    alternatives: list[TrainerSlot] = []
    if count <= 0:
        return alternatives

    for window in availability:
        if len(alternatives) >= count:
            break
        if window.trainer_id != original.trainer_id:
            continue
        if window.status != AvailabilityStatus.OPEN:
            continue

        candidate = TrainerSlot(
            date=window.date,
            start_time=window.start_time,
            end_time=window.end_time,
            trainer_id=original.trainer_id,
        )
        if check_availability(candidate, availability, bookings).available:
            alternatives.append(candidate)

    logger.info(
        "Generated %d alternative(s) for trainer %s instead of %s",
        len(alternatives),
        original.trainer_id,
        format_slot(original),
    )
    return alternatives
