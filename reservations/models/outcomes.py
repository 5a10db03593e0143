"""Result values returned by ledger operations.

Outcomes are plain values rather than exceptions: a full train sends a booking
to the waiting list and an unknown ticket on cancel is reported as
:class:`NotFound`, neither is an error.
"""

from __future__ import annotations
from tracking import t

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .booking import Booking


@dataclass(frozen=True)
class Confirmed:
    """Booking received a seat."""

    ticket_no: int


@dataclass(frozen=True)
class Waitlisted:
    """Train was full; booking joined the waiting list at ``position`` (1-based)."""

    ticket_no: int
    position: int


@dataclass(frozen=True)
class CancelledConfirmed:
    """A confirmed booking was cancelled, possibly promoting the waiting-list head."""

    removed_ticket: int
    promoted_ticket: Optional[int] = None


@dataclass(frozen=True)
class CancelledWaiting:
    """A waiting-list booking was cancelled."""

    removed_ticket: int


@dataclass(frozen=True)
class NotFound:
    """No booking carries the requested ticket number."""

    ticket_no: int


BookOutcome = Union[Confirmed, Waitlisted]
CancelOutcome = Union[CancelledConfirmed, CancelledWaiting, NotFound]


@dataclass(frozen=True)
class LedgerSnapshot:
    """Read-only view of the ledger at one point in time."""

    confirmed: Tuple[Booking, ...]
    waiting: Tuple[Tuple[int, Booking], ...]
    capacity: int
    next_ticket_no: int

    @property
    def seats_available(self) -> int:
        t('reservations.models.outcomes.LedgerSnapshot.seats_available')
        return max(self.capacity - len(self.confirmed), 0)

    @property
    def is_full(self) -> bool:
        t('reservations.models.outcomes.LedgerSnapshot.is_full')
        return len(self.confirmed) >= self.capacity

    @property
    def waiting_bookings(self) -> Tuple[Booking, ...]:
        t('reservations.models.outcomes.LedgerSnapshot.waiting_bookings')
        return tuple(booking for _, booking in self.waiting)
