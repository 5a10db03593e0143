"""Reservation ledger and its persistence helpers."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .reservation_ledger import ReservationLedger
    from .booking_repository import BookingRepository
    from .booking_codec import BookingRecordSerializer

__all__ = [
    "ReservationLedger",
    "BookingRepository",
    "BookingRecordSerializer",
]


def __getattr__(name: str):
    if name == "ReservationLedger":
        module = import_module("reservations.ledger.reservation_ledger")
    elif name == "BookingRepository":
        module = import_module("reservations.ledger.booking_repository")
    elif name == "BookingRecordSerializer":
        module = import_module("reservations.ledger.booking_codec")
    else:
        raise AttributeError(name)
    return getattr(module, name)
