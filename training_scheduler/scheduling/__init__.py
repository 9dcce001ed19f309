from training_scheduler.scheduling.overlap import InvalidSlotError, overlaps, validate_slot
from training_scheduler.scheduling.conflicts import find_conflicts, scan_conflicts
from training_scheduler.scheduling.priority import (
    build_priority_map,
    order_by_priority,
    resolve_by_priority,
)
from training_scheduler.scheduling.availability import check_availability, generate_alternatives
from training_scheduler.scheduling.effects import plan_effects

__all__ = [
    "InvalidSlotError", "overlaps", "validate_slot",
    "find_conflicts", "scan_conflicts",
    "build_priority_map", "order_by_priority", "resolve_by_priority",
    "check_availability", "generate_alternatives",
    "plan_effects",
]
