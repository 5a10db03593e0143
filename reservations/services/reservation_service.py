"""Domain service tying the reservation ledger to its backing store."""

from __future__ import annotations
from tracking import t

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional, Tuple

from infrastructure.settings import AppSettings, get_settings, make_clock
from reservations.exceptions import PersistenceError
from reservations.ledger.booking_repository import BookingRepository
from reservations.ledger.reservation_ledger import ReservationLedger
from reservations.models import (
    Booking,
    BookingStatus,
    BookOutcome,
    CancelOutcome,
    LedgerSnapshot,
    NotFound,
)


class ReservationService:
    """High-level API for booking and cancelling seats with durable state."""

    def __init__(
        self,
        ledger: ReservationLedger,
        repository: BookingRepository,
        *,
        autosave: bool = True,
    ) -> None:
        t('reservations.services.reservation_service.ReservationService.__init__')
        self.logger = logging.getLogger(self.__class__.__name__)
        self.ledger = ledger
        self.repository = repository
        self.autosave = autosave

    @property
    def capacity(self) -> int:
        t('reservations.services.reservation_service.ReservationService.capacity')
        return self.ledger.capacity

    def load(self) -> None:
        """Replace the ledger state with the persisted bookings."""
        t('reservations.services.reservation_service.ReservationService.load')
        self.ledger.load(self.repository)

    def book(self, name: str, age: int, gender: str) -> BookOutcome:
        """Book a seat and persist the result when autosave is on."""
        t('reservations.services.reservation_service.ReservationService.book')

        outcome = self.ledger.book(name, age, gender)
        self.logger.info("Booked ticket %s: %s", outcome.ticket_no, type(outcome).__name__)
        if self.autosave:
            self.flush()
        return outcome

    def cancel(self, ticket_no: int) -> CancelOutcome:
        """Cancel a ticket and persist the result when anything changed."""
        t('reservations.services.reservation_service.ReservationService.cancel')

        outcome = self.ledger.cancel(ticket_no)
        if isinstance(outcome, NotFound):
            return outcome
        self.logger.info("Cancelled ticket %s: %s", ticket_no, outcome)
        if self.autosave:
            self.flush()
        return outcome

    def list_bookings(self) -> LedgerSnapshot:
        t('reservations.services.reservation_service.ReservationService.list_bookings')
        return self.ledger.list_all()

    def waiting_position(self, ticket_no: int) -> Optional[int]:
        t('reservations.services.reservation_service.ReservationService.waiting_position')
        return self.ledger.waiting_position(ticket_no)

    def find(self, ticket_no: int) -> Optional[Tuple[BookingStatus, Booking]]:
        t('reservations.services.reservation_service.ReservationService.find')
        return self.ledger.find(ticket_no)

    def status_counts(self) -> Dict[str, int]:
        t('reservations.services.reservation_service.ReservationService.status_counts')
        return self.ledger.status_counts()

    def flush(self) -> None:
        """
        Write the ledger to the repository.

        Raises:
            PersistenceError: if the store cannot be written
        """
        t('reservations.services.reservation_service.ReservationService.flush')
        self.ledger.save(self.repository)


def build_reservation_service(
    settings: AppSettings,
    *,
    clock: Optional[Callable[[], str]] = None,
) -> ReservationService:
    """Wire a ledger and repository from configuration without loading data."""
    t('reservations.services.reservation_service.build_reservation_service')

    ledger = ReservationLedger(
        settings.train_capacity,
        clock=clock or make_clock(settings.timezone),
    )
    repository = BookingRepository(
        settings.confirmed_file,
        settings.waiting_file,
        logger=logging.getLogger('BookingRepository'),
    )
    return ReservationService(ledger, repository, autosave=settings.autosave)


@contextmanager
def open_reservation_service(
    settings: Optional[AppSettings] = None,
    *,
    clock: Optional[Callable[[], str]] = None,
) -> Iterator[ReservationService]:
    """
    Load a reservation service and flush it on every exit path.

    Usage:
        with open_reservation_service(settings) as service:
            service.book("Alice", 30, "F")
    """
    t('reservations.services.reservation_service.open_reservation_service')

    service = build_reservation_service(settings or get_settings(), clock=clock)
    service.load()
    try:
        yield service
    except BaseException:
        # Save what we have, but never mask the original failure.
        try:
            service.flush()
        except PersistenceError as exc:
            service.logger.error("Final save after failure did not complete: %s", exc)
        raise
    else:
        service.flush()
