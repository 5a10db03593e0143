"""Passenger booking records."""

from __future__ import annotations
from tracking import t

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Gender(Enum):
    """Accepted passenger gender codes"""
    MALE = "M"
    FEMALE = "F"
    OTHER = "O"

    @classmethod
    def from_code(cls, code: str) -> Optional["Gender"]:
        """Return the member for ``code`` (case-insensitive) or None."""
        t('reservations.models.booking.Gender.from_code')
        normalised = (code or "").strip().upper()
        for member in cls:
            if member.value == normalised:
                return member
        return None


class BookingStatus(Enum):
    """Which ledger collection a booking currently sits in"""
    CONFIRMED = "confirmed"   # Holds a seat
    WAITING = "waiting"       # Queued for a freed seat


@dataclass(frozen=True)
class Booking:
    """A single passenger booking, immutable once issued."""

    ticket_no: int
    name: str
    age: int
    gender: str
    booked_at: str
    requested_at: str = ""

    def with_booked_at(self, timestamp: str) -> "Booking":
        """Return a copy holding a new booking time; the request time is kept."""
        t('reservations.models.booking.Booking.with_booked_at')
        return replace(self, booked_at=timestamp)
