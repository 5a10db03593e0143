"""
Reservation Ledger Module

This module provides the ReservationLedger class, the single owner of a
train's seat allocation: the confirmed list, the FIFO waiting list and the
ticket counter. Persistence is delegated to a source/sink collaborator
(normally :class:`~reservations.ledger.booking_repository.BookingRepository`).
"""
from tracking import t

import logging
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from infrastructure.constants import FIRST_TICKET_NUMBER
from infrastructure.settings import make_clock
from reservations.ledger.ledger_transitions import (
    issue_booking,
    promote_booking,
    split_overflow,
)
from reservations.ledger.ledger_validation import (
    drop_duplicate_tickets,
    ensure_valid_booking,
)
from reservations.models import (
    Booking,
    BookingStatus,
    BookOutcome,
    CancelOutcome,
    CancelledConfirmed,
    CancelledWaiting,
    Confirmed,
    LedgerSnapshot,
    NotFound,
    Waitlisted,
)


class ReservationLedger:
    """
    Tracks confirmed seats and the waiting list for one train.

    Attributes:
        capacity (int): Number of seats, fixed for the ledger's lifetime
        logger (logging.Logger): Logger instance for this class
    """

    def __init__(
        self,
        capacity: int,
        *,
        clock: Optional[Callable[[], str]] = None,
        logger: Optional[Any] = None,
    ) -> None:
        """
        Initialize an empty ledger.

        Args:
            capacity: Number of seats on the train, must be positive
            clock: Zero-argument callable returning the current timestamp string
            logger: Optional logger, defaults to the 'ReservationLedger' logger
        """
        t('reservations.ledger.reservation_ledger.ReservationLedger.__init__')
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")

        self.logger = logger or logging.getLogger('ReservationLedger')
        self._capacity = capacity
        self._clock = clock or make_clock()
        self._confirmed: List[Booking] = []
        self._waiting: Deque[Booking] = deque()
        self._next_ticket_no = FIRST_TICKET_NUMBER

    @property
    def capacity(self) -> int:
        t('reservations.ledger.reservation_ledger.ReservationLedger.capacity')
        return self._capacity

    @property
    def next_ticket_no(self) -> int:
        t('reservations.ledger.reservation_ledger.ReservationLedger.next_ticket_no')
        return self._next_ticket_no

    @property
    def confirmed(self) -> Tuple[Booking, ...]:
        t('reservations.ledger.reservation_ledger.ReservationLedger.confirmed')
        return tuple(self._confirmed)

    @property
    def waiting(self) -> Tuple[Booking, ...]:
        t('reservations.ledger.reservation_ledger.ReservationLedger.waiting')
        return tuple(self._waiting)

    def book(self, name: str, age: int, gender: str) -> BookOutcome:
        """
        Book a seat, or a waiting-list place when the train is full.

        Args:
            name: Passenger name, surrounding whitespace is trimmed
            age: Passenger age
            gender: One of the accepted gender codes (case-insensitive)

        Returns:
            Confirmed with the ticket number, or Waitlisted with the ticket
            number and the 1-based waiting-list position

        Raises:
            ValidationError: if name, age or gender is invalid
        """
        t('reservations.ledger.reservation_ledger.ReservationLedger.book')
        clean_name, age, gender_code = ensure_valid_booking(name, age, gender)

        ticket_no = self._next_ticket_no
        self._next_ticket_no += 1
        booking = issue_booking(ticket_no, clean_name, age, gender_code, self._clock())

        if len(self._confirmed) < self._capacity:
            self._confirmed.append(booking)
            self.logger.info(f"""SEAT CONFIRMED
        Ticket: {ticket_no}
        Passenger: {clean_name} ({age}, {gender_code})
        Booked at: {booking.booked_at}
        Seats used: {len(self._confirmed)}/{self._capacity}
        """)
            return Confirmed(ticket_no=ticket_no)

        self._waiting.append(booking)
        position = len(self._waiting)
        self.logger.info(f"""ADDED TO WAITING LIST
        Ticket: {ticket_no}
        Passenger: {clean_name} ({age}, {gender_code})
        Waiting List Position: {position}
        """)
        return Waitlisted(ticket_no=ticket_no, position=position)

    def cancel(self, ticket_no: int) -> CancelOutcome:
        """
        Cancel a booking by ticket number.

        A cancelled confirmed booking frees its seat for the head of the
        waiting list, which is promoted with a fresh booking time.

        Returns:
            CancelledConfirmed, CancelledWaiting or NotFound
        """
        t('reservations.ledger.reservation_ledger.ReservationLedger.cancel')
        index = self._confirmed_index(ticket_no)
        if index is not None:
            removed = self._confirmed.pop(index)
            promoted_ticket: Optional[int] = None
            if self._waiting:
                promoted = promote_booking(self._waiting.popleft(), self._clock())
                self._confirmed.append(promoted)
                promoted_ticket = promoted.ticket_no
                self.logger.info(f"""PROMOTED FROM WAITING LIST
        Ticket: {promoted.ticket_no}
        Passenger: {promoted.name}
        Requested at: {promoted.requested_at}
        Confirmed at: {promoted.booked_at}
        Remaining waiting: {len(self._waiting)}
        """)
            self.logger.info(
                "Cancelled confirmed ticket %s (%s)", removed.ticket_no, removed.name
            )
            return CancelledConfirmed(removed_ticket=removed.ticket_no, promoted_ticket=promoted_ticket)

        position = self.waiting_position(ticket_no)
        if position is not None:
            removed = self._waiting[position - 1]
            del self._waiting[position - 1]
            self.logger.info(
                "Removed ticket %s (%s) from waiting list position %s",
                removed.ticket_no,
                removed.name,
                position,
            )
            return CancelledWaiting(removed_ticket=removed.ticket_no)

        self.logger.warning(f"Ticket {ticket_no} not found for cancellation")
        return NotFound(ticket_no=ticket_no)

    def waiting_position(self, ticket_no: int) -> Optional[int]:
        """Return the 1-based waiting-list position of ``ticket_no``, or None."""
        t('reservations.ledger.reservation_ledger.ReservationLedger.waiting_position')
        for position, booking in enumerate(self._waiting, start=1):
            if booking.ticket_no == ticket_no:
                return position
        return None

    def find(self, ticket_no: int) -> Optional[Tuple[BookingStatus, Booking]]:
        """Return the status and booking for ``ticket_no`` if it exists."""
        t('reservations.ledger.reservation_ledger.ReservationLedger.find')
        index = self._confirmed_index(ticket_no)
        if index is not None:
            return BookingStatus.CONFIRMED, self._confirmed[index]
        for booking in self._waiting:
            if booking.ticket_no == ticket_no:
                return BookingStatus.WAITING, booking
        return None

    def list_all(self) -> LedgerSnapshot:
        """Return a read-only snapshot of both collections."""
        t('reservations.ledger.reservation_ledger.ReservationLedger.list_all')
        return LedgerSnapshot(
            confirmed=tuple(self._confirmed),
            waiting=tuple(enumerate(self._waiting, start=1)),
            capacity=self._capacity,
            next_ticket_no=self._next_ticket_no,
        )

    def status_counts(self) -> Dict[str, int]:
        t('reservations.ledger.reservation_ledger.ReservationLedger.status_counts')
        return {
            BookingStatus.CONFIRMED.value: len(self._confirmed),
            BookingStatus.WAITING.value: len(self._waiting),
        }

    def load(self, source: Any) -> None:
        """
        Replace the in-memory state with bookings read from ``source``.

        ``source.load()`` must return ``(confirmed, waiting)`` booking lists.
        Duplicate tickets are dropped, confirmed bookings beyond capacity move
        to the head of the waiting list and the ticket counter resumes after
        the highest ticket seen.
        """
        t('reservations.ledger.reservation_ledger.ReservationLedger.load')
        confirmed, waiting = source.load()
        confirmed, waiting = drop_duplicate_tickets(confirmed, waiting, logger=self.logger)
        confirmed, waiting, overflow = split_overflow(confirmed, waiting, self._capacity)
        if overflow:
            self.logger.warning(
                "Stored confirmed bookings exceed capacity %s; moved tickets %s to the waiting list",
                self._capacity,
                [booking.ticket_no for booking in overflow],
            )

        self._confirmed = list(confirmed)
        self._waiting = deque(waiting)
        highest = max(
            (booking.ticket_no for booking in self._confirmed + list(self._waiting)),
            default=FIRST_TICKET_NUMBER - 1,
        )
        self._next_ticket_no = max(self._next_ticket_no, highest + 1)

        self.logger.info(f"""RESERVATION LEDGER LOADED
        Capacity: {self._capacity}
        Existing bookings: {self.status_counts()}
        Next ticket: {self._next_ticket_no}
        """)

    def save(self, sink: Any) -> None:
        """Write the current state to ``sink.save(confirmed, waiting)``."""
        t('reservations.ledger.reservation_ledger.ReservationLedger.save')
        sink.save(list(self._confirmed), list(self._waiting))
        self.logger.debug(f"Ledger saved: {self.status_counts()}")

    def _confirmed_index(self, ticket_no: int) -> Optional[int]:
        t('reservations.ledger.reservation_ledger.ReservationLedger._confirmed_index')
        for index, booking in enumerate(self._confirmed):
            if booking.ticket_no == ticket_no:
                return index
        return None
