"""Domain model definitions for railway reservations."""

from .booking import Booking, BookingStatus, Gender
from .outcomes import (
    BookOutcome,
    CancelOutcome,
    CancelledConfirmed,
    CancelledWaiting,
    Confirmed,
    LedgerSnapshot,
    NotFound,
    Waitlisted,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "Gender",
    "BookOutcome",
    "CancelOutcome",
    "CancelledConfirmed",
    "CancelledWaiting",
    "Confirmed",
    "LedgerSnapshot",
    "NotFound",
    "Waitlisted",
]
