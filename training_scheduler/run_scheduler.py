"""
CLI entry point for running scheduling decisions over a snapshot file.

Usage:
    python -m training_scheduler.run_scheduler resolve --snapshot data.json --request-id REQ-1
    python -m training_scheduler.run_scheduler check --snapshot data.json \\
        --trainer-id T-1 --date 2025-04-01 --start 09:00 --end 10:00
    python -m training_scheduler.run_scheduler alternatives --snapshot data.json \\
        --trainer-id T-1 --date 2025-04-01 --start 09:00 --end 10:00 --count 2
    python -m training_scheduler.run_scheduler scan --snapshot data.json --verbose

Every command prints its result as JSON on stdout.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from training_scheduler.config import settings
from training_scheduler.logging_context import RunIdFilter, get_run_logger, new_run_id, set_run_id
from training_scheduler.scheduling import (
    build_priority_map,
    check_availability,
    find_conflicts,
    generate_alternatives,
    plan_effects,
    resolve_by_priority,
    scan_conflicts,
)
from training_scheduler.schemas.booking_schema import BookingStatus
from training_scheduler.schemas.slot_schema import TrainerSlot
from training_scheduler.schemas.snapshot_schema import SchedulingSnapshot
from training_scheduler.utils import parse_calendar_date, parse_wall_time

logger = get_run_logger(__name__)


class SnapshotError(Exception):
    """Raised when a snapshot cannot be loaded or lacks a referenced record."""


def load_snapshot(path: Path) -> SchedulingSnapshot:
    """Load a scheduling snapshot from a JSON file."""
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return SchedulingSnapshot(**data)


def _slot_from_args(args: argparse.Namespace) -> TrainerSlot:
    return TrainerSlot(
        date=parse_calendar_date(args.date),
        start_time=parse_wall_time(args.start),
        end_time=parse_wall_time(args.end),
        trainer_id=args.trainer_id,
    )


def _run_resolve(snapshot: SchedulingSnapshot, args: argparse.Namespace) -> dict[str, Any]:
    request = next((r for r in snapshot.requests if r.id == args.request_id), None)
    if request is None:
        raise SnapshotError(f"Request {args.request_id} not found in snapshot")
    if request.status != BookingStatus.PENDING:
        raise SnapshotError(f"Request {args.request_id} is not pending")

    conflicts = find_conflicts(request, snapshot.bookings, request.trainer_id)
    resolution = resolve_by_priority(request, conflicts, build_priority_map(snapshot.clients))
    effects = plan_effects(resolution)
    return {
        "resolution": resolution.model_dump(mode="json"),
        "effects": effects.model_dump(mode="json"),
    }


def _run_check(snapshot: SchedulingSnapshot, args: argparse.Namespace) -> dict[str, Any]:
    result = check_availability(_slot_from_args(args), snapshot.availability, snapshot.bookings)
    return result.model_dump(mode="json")


def _run_alternatives(snapshot: SchedulingSnapshot, args: argparse.Namespace) -> list[dict[str, Any]]:
    alternatives = generate_alternatives(
        _slot_from_args(args), snapshot.availability, snapshot.bookings, args.count
    )
    return [slot.model_dump(mode="json") for slot in alternatives]


def _run_scan(snapshot: SchedulingSnapshot, args: argparse.Namespace) -> list[dict[str, Any]]:
    reports = scan_conflicts(snapshot.bookings, snapshot.requests)
    return [report.model_dump(mode="json") for report in reports]


COMMANDS = {
    "resolve": _run_resolve,
    "check": _run_check,
    "alternatives": _run_alternatives,
    "scan": _run_scan,
}


def _add_slot_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--trainer-id", type=str, required=True, help="Trainer to check.")
    parser.add_argument("--date", type=str, required=True, help="Slot date, YYYY-MM-DD.")
    parser.add_argument("--start", type=str, required=True, help="Slot start, HH:MM.")
    parser.add_argument("--end", type=str, required=True, help="Slot end, HH:MM.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="training-scheduler",
        description="Resolve training scheduling conflicts over a data snapshot.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--snapshot",
        type=str,
        required=True,
        help="Path to a JSON snapshot with bookings, requests, availability and clients.",
    )
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging output.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser(
        "resolve", parents=[common], help="Resolve a pending request by client priority."
    )
    resolve.add_argument("--request-id", type=str, required=True, help="Request to resolve.")

    check = subparsers.add_parser(
        "check", parents=[common], help="Check whether a trainer can take a slot."
    )
    _add_slot_arguments(check)

    alternatives = subparsers.add_parser(
        "alternatives", parents=[common], help="Suggest replacement slots for a trainer."
    )
    _add_slot_arguments(alternatives)
    alternatives.add_argument(
        "--count",
        type=int,
        default=settings.scheduling.default_alternative_count,
        help="Maximum number of alternatives (default: %(default)s).",
    )

    subparsers.add_parser("scan", parents=[common], help="Report every conflict in the snapshot.")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(run_id)s] [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(RunIdFilter())


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    set_run_id(new_run_id())

    try:
        snapshot = load_snapshot(Path(args.snapshot))
        logger.info(
            "Loaded snapshot %s: %d booking(s), %d request(s), %d window(s), %d client(s)",
            args.snapshot,
            len(snapshot.bookings),
            len(snapshot.requests),
            len(snapshot.availability),
            len(snapshot.clients),
        )
        output = COMMANDS[args.command](snapshot, args)
    except (SnapshotError, ValueError) as e:
        # InvalidSlotError, pydantic ValidationError and JSONDecodeError are ValueErrors
        logger.error("%s failed: %s", args.command, e)
        sys.exit(1)

    sys.stdout.write(json.dumps(output, indent=2) + "\n")


if __name__ == "__main__":
    main()
