"""Shared test fixtures and helpers."""

from datetime import date
from typing import Optional

import pytest

from training_scheduler.schemas.booking_schema import (
    AvailabilityStatus,
    AvailabilityWindow,
    Booking,
    BookingStatus,
    ClientPriority,
    TrainingRequest,
)
from training_scheduler.schemas.slot_schema import TimeSlot, TrainerSlot

DAY = date(2025, 4, 1)
NEXT_DAY = date(2025, 4, 2)


def make_slot(start: str, end: str, day: date = DAY) -> TimeSlot:
    """Helper to create a TimeSlot from HH:MM strings."""
    return TimeSlot(date=day, start_time=start, end_time=end)


def make_trainer_slot(
    start: str, end: str, trainer_id: str = "T-1", day: date = DAY
) -> TrainerSlot:
    return TrainerSlot(date=day, start_time=start, end_time=end, trainer_id=trainer_id)


def make_booking(
    booking_id: str,
    start: str,
    end: str,
    client_id: str = "C-1",
    trainer_id: Optional[str] = "T-1",
    status: BookingStatus = BookingStatus.APPROVED,
    day: date = DAY,
) -> Booking:
    """Helper to create a Booking with sensible defaults."""
    return Booking(
        id=booking_id,
        date=day,
        start_time=start,
        end_time=end,
        client_id=client_id,
        trainer_id=trainer_id,
        status=status,
    )


def make_request(
    start: str,
    end: str,
    client_id: str = "C-NEW",
    request_id: Optional[str] = "REQ-1",
    trainer_id: Optional[str] = "T-1",
    status: BookingStatus = BookingStatus.PENDING,
    day: date = DAY,
) -> TrainingRequest:
    return TrainingRequest(
        id=request_id,
        date=day,
        start_time=start,
        end_time=end,
        client_id=client_id,
        trainer_id=trainer_id,
        status=status,
    )


def make_window(
    start: str,
    end: str,
    trainer_id: str = "T-1",
    day: date = DAY,
    status: AvailabilityStatus = AvailabilityStatus.OPEN,
) -> AvailabilityWindow:
    return AvailabilityWindow(
        trainer_id=trainer_id,
        date=day,
        start_time=start,
        end_time=end,
        status=status,
    )


@pytest.fixture
def priorities() -> dict[str, int]:
    return {"C-VIP": 80, "C-MID": 50, "C-LOW": 30}


@pytest.fixture
def client_records() -> list[ClientPriority]:
    return [
        ClientPriority(client_id="C-VIP", priority_score=80),
        ClientPriority(client_id="C-MID", priority_score=50),
        ClientPriority(client_id="C-LOW", priority_score=30),
    ]


@pytest.fixture
def morning_windows() -> list[AvailabilityWindow]:
    """Three open windows for T-1 plus one for another trainer."""
    return [
        make_window("08:00", "09:00"),
        make_window("09:00", "10:00"),
        make_window("10:00", "11:00"),
        make_window("08:00", "12:00", trainer_id="T-2"),
    ]
