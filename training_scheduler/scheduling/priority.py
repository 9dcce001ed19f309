"""
Priority-based conflict resolution.

Decision rule, evaluated in order:
1. No conflicts: the new request wins and nothing is displaced.
2. New request's client priority strictly above every conflicting client's:
   the new request wins and ALL conflicting bookings are displaced.
3. Otherwise the incumbents win (ties included). Only the conflicts at the
   highest conflicting priority are reported as blocking the request.

Clients missing from the priority map count as priority 0. Multi-way
conflicts are not resolved transitively: lower-priority conflicts left
over in case 3 are the caller's to handle.
"""

from typing import Iterable, Mapping, Sequence

from training_scheduler.logging_context import get_run_logger
from training_scheduler.scheduling.overlap import validate_slot
from training_scheduler.schemas.booking_schema import Booking, ClientPriority, TrainingRequest
from training_scheduler.schemas.resolution_schema import ConflictResolution, Winner

logger = get_run_logger(__name__)

DEFAULT_PRIORITY = 0


def build_priority_map(clients: Iterable[ClientPriority]) -> dict[str, int]:
    """Index priority scores by client ID. Later records override earlier ones."""
    return {client.client_id: client.priority_score for client in clients}


def priority_of(client_id: str, client_priorities: Mapping[str, int]) -> int:
    return client_priorities.get(client_id, DEFAULT_PRIORITY)


def resolve_by_priority(
    new_request: TrainingRequest,
    conflicts: Sequence[Booking],
    client_priorities: Mapping[str, int],
) -> ConflictResolution:
    """Decide whether a new request or the bookings it conflicts with win."""
    validate_slot(new_request)
    new_priority = priority_of(new_request.client_id, client_priorities)

    if not conflicts:
        logger.info("Request from %s has no conflicts", new_request.client_id)
        return ConflictResolution(
            winner=Winner.NEW,
            new_request=new_request,
            affected_trainings=[],
            reason="No conflicts",
            new_priority=new_priority,
            max_conflict_priority=DEFAULT_PRIORITY,
        )

    ranked = [(booking, priority_of(booking.client_id, client_priorities)) for booking in conflicts]
    max_conflict_priority = max(priority for _, priority in ranked)

    if new_priority > max_conflict_priority:
        resolution = ConflictResolution(
            winner=Winner.NEW,
            new_request=new_request,
            affected_trainings=[booking for booking, _ in ranked],
            reason=f"Higher priority client ({new_priority} vs {max_conflict_priority})",
            new_priority=new_priority,
            max_conflict_priority=max_conflict_priority,
        )
    else:
        resolution = ConflictResolution(
            winner=Winner.EXISTING,
            new_request=new_request,
            affected_trainings=[
                booking for booking, priority in ranked if priority == max_conflict_priority
            ],
            reason=(
                "Existing client has equal or higher priority "
                f"({max_conflict_priority} vs {new_priority})"
            ),
            new_priority=new_priority,
            max_conflict_priority=max_conflict_priority,
        )

    logger.info(
        "Resolved request from %s against %d conflict(s): winner=%s, affected=%s",
        new_request.client_id,
        len(conflicts),
        resolution.winner.value,
        [booking.id for booking in resolution.affected_trainings],
    )
    return resolution


def order_by_priority(
    requests: Iterable[TrainingRequest],
    client_priorities: Mapping[str, int],
) -> list[TrainingRequest]:
    """Sort requests for review, highest client priority first.

    The sort is stable, so equal-priority requests keep their input order.
    """
    return sorted(
        requests,
        key=lambda request: priority_of(request.client_id, client_priorities),
        reverse=True,
    )
