"""Plain-text message builders for the reservation console."""

from __future__ import annotations
from tracking import t

from typing import List, Optional

from reservations.models import (
    Booking,
    CancelledConfirmed,
    CancelledWaiting,
    CancelOutcome,
    Confirmed,
    BookOutcome,
    LedgerSnapshot,
    NotFound,
    Waitlisted,
)


class ReservationMessageFactory:
    """Produces the strings shown by the console menu."""

    _STATIC_MESSAGES = {
        "menu": (
            "\n=== Railway Reservation System ===\n"
            "1. Book seat\n"
            "2. Cancel booking\n"
            "3. List all bookings\n"
            "0. Exit"
        ),
        "book_heading": "\n--- Book a Seat ---",
        "cancel_heading": "\n--- Cancel Booking ---",
        "confirmed_heading": "\n--- Confirmed Bookings ---",
        "waiting_heading": "\n--- Waiting List ---",
        "empty_list": "(none)",
        "invalid_option": "Invalid option. Try again.",
        "ticket_not_found": "❌ Ticket not found.",
        "exiting": "Exiting...",
        "fatal_error": (
            "❌ The booking data could not be saved or loaded.\n"
            "The session has been stopped; details are in the error log."
        ),
    }

    MENU = _STATIC_MESSAGES["menu"]
    BOOK_HEADING = _STATIC_MESSAGES["book_heading"]
    CANCEL_HEADING = _STATIC_MESSAGES["cancel_heading"]
    CONFIRMED_HEADING = _STATIC_MESSAGES["confirmed_heading"]
    WAITING_HEADING = _STATIC_MESSAGES["waiting_heading"]
    EMPTY_LIST = _STATIC_MESSAGES["empty_list"]
    INVALID_OPTION = _STATIC_MESSAGES["invalid_option"]
    TICKET_NOT_FOUND = _STATIC_MESSAGES["ticket_not_found"]
    EXITING = _STATIC_MESSAGES["exiting"]
    FATAL_ERROR = _STATIC_MESSAGES["fatal_error"]

    def capacity_summary(self, confirmed: int, capacity: int, waiting: int) -> str:
        t('consoleapp.messages.ReservationMessageFactory.capacity_summary')
        return f"Confirmed seats: {confirmed}/{capacity} | Waiting list: {waiting}"

    def booking_result(self, outcome: BookOutcome) -> str:
        """Return the confirmation or waiting-list text for a booking."""
        t('consoleapp.messages.ReservationMessageFactory.booking_result')

        if isinstance(outcome, Waitlisted):
            return (
                "⚠️ No seats available. Added to waiting list. "
                f"Ticket No: {outcome.ticket_no} | Position: {outcome.position}"
            )
        if isinstance(outcome, Confirmed):
            return f"✅ Seat confirmed! Ticket No: {outcome.ticket_no}"
        raise TypeError(f"Unexpected booking outcome: {outcome!r}")

    def cancellation_result(self, outcome: CancelOutcome, passenger_name: Optional[str] = None) -> str:
        """Return the text for a cancellation, including any promotion."""
        t('consoleapp.messages.ReservationMessageFactory.cancellation_result')

        if isinstance(outcome, NotFound):
            return self.TICKET_NOT_FOUND
        if isinstance(outcome, CancelledWaiting):
            return f"✅ Removed from waiting list: Ticket {outcome.removed_ticket}"
        if isinstance(outcome, CancelledConfirmed):
            label = f" ({passenger_name})" if passenger_name else ""
            lines = [f"✅ Cancelled ticket {outcome.removed_ticket}{label}"]
            if outcome.promoted_ticket is not None:
                lines.append(f"🔄 Promoted from waiting: Ticket {outcome.promoted_ticket}")
            return "\n".join(lines)
        raise TypeError(f"Unexpected cancellation outcome: {outcome!r}")

    def passenger_line(self, booking: Booking, *, confirmed: bool) -> str:
        t('consoleapp.messages.ReservationMessageFactory.passenger_line')
        return (
            f"Ticket: {booking.ticket_no}"
            f" | Name: {booking.name}"
            f" | Age: {booking.age}"
            f" | Gender: {booking.gender}"
            f" | Booked At: {booking.booked_at}"
            f" | Status: {'Confirmed' if confirmed else 'Waiting'}"
        )

    def booking_listing(self, snapshot: LedgerSnapshot) -> str:
        """Render confirmed bookings followed by the numbered waiting list."""
        t('consoleapp.messages.ReservationMessageFactory.booking_listing')

        lines: List[str] = [self.CONFIRMED_HEADING]
        if not snapshot.confirmed:
            lines.append(self.EMPTY_LIST)
        for booking in snapshot.confirmed:
            lines.append(self.passenger_line(booking, confirmed=True))

        lines.append(self.WAITING_HEADING)
        if not snapshot.waiting:
            lines.append(self.EMPTY_LIST)
        for position, booking in snapshot.waiting:
            lines.append(f"[{position}] {self.passenger_line(booking, confirmed=False)}")
        return "\n".join(lines)
