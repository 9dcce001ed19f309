"""
Conflict detection against existing bookings.

``find_conflicts`` answers "what does this slot collide with?" for a
single candidate. ``scan_conflicts`` is the admin-side sweep over every
booking and pending request. It reports overlaps only and applies no
priority rule; resolving what it finds is left to ``resolve_by_priority``.
"""

from typing import Iterable, Optional, Sequence

from training_scheduler.logging_context import get_run_logger
from training_scheduler.scheduling.overlap import overlaps, validate_slot
from training_scheduler.schemas.booking_schema import Booking, BookingStatus, TrainingRequest
from training_scheduler.schemas.resolution_schema import ConflictReport, ConflictType
from training_scheduler.schemas.slot_schema import TimeSlot
from training_scheduler.utils import format_slot

logger = get_run_logger(__name__)


def find_conflicts(
    candidate: TimeSlot,
    bookings: Iterable[Booking],
    trainer_id: Optional[str] = None,
) -> list[Booking]:
    """Return active bookings overlapping ``candidate``, in input order.

    When ``trainer_id`` is given only that trainer's bookings are considered;
    bookings with no trainer assigned never match a trainer filter.
    """
    validate_slot(candidate)

    conflicts = []
    for booking in bookings:
        if not booking.is_active:
            continue
        if trainer_id is not None and booking.trainer_id != trainer_id:
            continue
        if overlaps(candidate, booking):
            conflicts.append(booking)

    logger.debug(
        "Found %d conflict(s) for %s (trainer=%s)",
        len(conflicts),
        format_slot(candidate),
        trainer_id,
    )
    return conflicts


def scan_conflicts(
    bookings: Sequence[Booking],
    requests: Iterable[TrainingRequest] = (),
) -> list[ConflictReport]:
    """Sweep all bookings and pending requests for conflicts.

    Two passes, reported in this order:
    1. every pair of active bookings held by the same trainer that overlap
       (bookings with no trainer are never paired);
    2. every pending request that collides with an active booking, restricted
       to the request's trainer when it names one.
    """
    active = [b for b in bookings if b.is_active]
    reports: list[ConflictReport] = []

    for i, first in enumerate(active):
        if first.trainer_id is None:
            continue
        for second in active[i + 1:]:
            if second.trainer_id != first.trainer_id:
                continue
            if overlaps(first, second):
                reports.append(
                    ConflictReport(type=ConflictType.OVERLAP, bookings=[first, second])
                )

    for request in requests:
        if request.status != BookingStatus.PENDING:
            continue
        request_conflicts = find_conflicts(request, active, request.trainer_id)
        if request_conflicts:
            reports.append(
                ConflictReport(
                    type=ConflictType.REQUEST_CONFLICT,
                    bookings=request_conflicts,
                    request=request,
                )
            )

    logger.info(
        "Conflict scan over %d active booking(s): %d report(s)", len(active), len(reports)
    )
    return reports
