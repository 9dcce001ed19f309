"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_slot_schema(self):
        from training_scheduler.schemas.slot_schema import TimeSlot, TrainerSlot
        assert issubclass(TrainerSlot, TimeSlot)

    def test_import_booking_schema(self):
        from training_scheduler.schemas.booking_schema import (
            AvailabilityWindow, Booking, BookingStatus, ClientPriority, TrainingRequest,
        )
        assert BookingStatus.IN_PROGRESS == "in-progress"
        assert ClientPriority(client_id="C-1").priority_score == 0

    def test_import_resolution_schema(self):
        from training_scheduler.schemas.resolution_schema import (
            ConflictResolution, UnavailableReason, Winner,
        )
        assert Winner.NEW == "new"
        assert UnavailableReason.ALREADY_BOOKED == "already booked"

    def test_import_snapshot_schema(self):
        from training_scheduler.schemas.snapshot_schema import SchedulingSnapshot
        assert SchedulingSnapshot().bookings == []


class TestSchedulingImports:
    def test_package_re_exports(self):
        from training_scheduler.scheduling import (
            InvalidSlotError, build_priority_map, check_availability, find_conflicts,
            generate_alternatives, order_by_priority, overlaps, plan_effects,
            resolve_by_priority, scan_conflicts, validate_slot,
        )
        assert issubclass(InvalidSlotError, ValueError)
        assert callable(resolve_by_priority)

    def test_import_cli(self):
        from training_scheduler.run_scheduler import build_parser, main
        assert callable(main)
        assert build_parser().prog == "training-scheduler"
