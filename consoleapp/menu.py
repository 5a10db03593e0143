"""Interactive request/response loop over the reservation service."""

from __future__ import annotations
from tracking import t

import logging
from typing import Any, Callable, Optional, Tuple

from consoleapp.messages import ReservationMessageFactory
from consoleapp.validation import ValidationHelpers
from infrastructure.constants import MENU_BOOK, MENU_CANCEL, MENU_EXIT, MENU_LIST
from reservations.models import BookingStatus
from reservations.services import ReservationService


class ConsoleMenu:
    """
    Text menu offering book, cancel, list and exit.

    Each menu action maps to exactly one service call. Input is validated here
    and re-prompted until usable, so the service only sees valid bookings.
    End of input is treated like choosing Exit.
    """

    def __init__(
        self,
        service: ReservationService,
        *,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        pause: bool = True,
        messages: Optional[ReservationMessageFactory] = None,
    ) -> None:
        t('consoleapp.menu.ConsoleMenu.__init__')
        self.service = service
        self.logger = logging.getLogger('ConsoleMenu')
        self._input = input_func or input
        self._output = output_func or print
        self._pause = pause
        self.messages = messages or ReservationMessageFactory()

    def run(self) -> None:
        """Show the menu until the operator exits or input ends."""
        t('consoleapp.menu.ConsoleMenu.run')

        actions = {
            MENU_BOOK: self.book_seat,
            MENU_CANCEL: self.cancel_booking,
            MENU_LIST: self.list_bookings,
        }
        try:
            while True:
                self._output(self.messages.MENU)
                choice = self._read_validated("Choose an option: ", ValidationHelpers.parse_int)
                if choice == MENU_EXIT:
                    self._output(self.messages.EXITING)
                    return
                action = actions.get(choice)
                if action is None:
                    self._output(self.messages.INVALID_OPTION)
                else:
                    action()
                if self._pause:
                    self._input("Press Enter to continue...")
        except EOFError:
            self.logger.info("Input closed; leaving menu")
            self._output(self.messages.EXITING)

    def book_seat(self) -> None:
        t('consoleapp.menu.ConsoleMenu.book_seat')

        counts = self.service.status_counts()
        self._output(self.messages.BOOK_HEADING)
        self._output(self.messages.capacity_summary(
            counts[BookingStatus.CONFIRMED.value],
            self.service.capacity,
            counts[BookingStatus.WAITING.value],
        ))

        is_valid, name = ValidationHelpers.validate_name(self._input("Enter passenger name: "))
        if not is_valid:
            self._output(name)
            return

        age = self._read_validated("Enter age (number): ", ValidationHelpers.validate_age)
        gender = self._read_validated("Enter gender (M/F/O): ", ValidationHelpers.validate_gender)

        outcome = self.service.book(name, age, gender)
        self._output(self.messages.booking_result(outcome))

    def cancel_booking(self) -> None:
        t('consoleapp.menu.ConsoleMenu.cancel_booking')

        self._output(self.messages.CANCEL_HEADING)
        ticket_no = self._read_validated("Enter ticket number to cancel: ", ValidationHelpers.parse_int)

        found = self.service.find(ticket_no)
        passenger_name = found[1].name if found else None
        outcome = self.service.cancel(ticket_no)
        self._output(self.messages.cancellation_result(outcome, passenger_name))

    def list_bookings(self) -> None:
        t('consoleapp.menu.ConsoleMenu.list_bookings')
        self._output(self.messages.booking_listing(self.service.list_bookings()))

    def _read_validated(self, prompt: str, validator: Callable[[str], Tuple[bool, Any]]) -> Any:
        """Prompt until ``validator`` accepts the answer, echoing its error text."""
        t('consoleapp.menu.ConsoleMenu._read_validated')
        while True:
            is_valid, value = validator(self._input(prompt))
            if is_valid:
                return value
            self._output(value)
