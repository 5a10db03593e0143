"""State transition helpers for ledger bookings."""

from __future__ import annotations
from tracking import t

from dataclasses import replace
from typing import List, Tuple

from reservations.models import Booking


def issue_booking(ticket_no: int, name: str, age: int, gender: str, timestamp: str) -> Booking:
    """Create a fresh booking whose booking and request times are both ``timestamp``."""

    t('reservations.ledger.ledger_transitions.issue_booking')
    return Booking(
        ticket_no=ticket_no,
        name=name,
        age=age,
        gender=gender,
        booked_at=timestamp,
        requested_at=timestamp,
    )


def promote_booking(booking: Booking, timestamp: str) -> Booking:
    """Stamp a waiting-list booking with the moment it received a seat."""

    t('reservations.ledger.ledger_transitions.promote_booking')
    if not booking.requested_at:
        # Records from older stores have no request time; keep the queue time.
        booking = replace(booking, requested_at=booking.booked_at)
    return booking.with_booked_at(timestamp)


def split_overflow(
    confirmed: List[Booking],
    waiting: List[Booking],
    capacity: int,
) -> Tuple[List[Booking], List[Booking], List[Booking]]:
    """
    Enforce the seat limit on loaded data.

    Confirmed bookings past ``capacity`` move to the head of the waiting list,
    ahead of bookings that were already waiting.

    Returns:
        ``(confirmed, waiting, overflow)``
    """
    t('reservations.ledger.ledger_transitions.split_overflow')
    overflow = confirmed[capacity:]
    return confirmed[:capacity], overflow + waiting, overflow
