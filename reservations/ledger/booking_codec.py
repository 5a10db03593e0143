"""Serialize and hydrate booking records for the CSV backing files.

Records hold, in order: ticket number, name, age, gender, booking time and
request time. Fields containing the delimiter or a quote are quoted with
doubled-quote escaping. Parsing is lenient per record: missing trailing fields
fall back to empty text or zero so that one short line never aborts a load.
"""

from __future__ import annotations
from tracking import t

import csv
import io
import logging
from typing import Any, List, Optional, Sequence

from reservations.exceptions import MalformedRecordError
from reservations.models import Booking


class BookingRecordSerializer:
    """Convert :class:`Booking` objects to and from CSV rows."""

    def __init__(self, *, logger: Optional[Any] = None) -> None:
        t('reservations.ledger.booking_codec.BookingRecordSerializer.__init__')
        self._logger = logger or logging.getLogger('BookingRepository')

    def to_row(self, booking: Booking) -> List[str]:
        t('reservations.ledger.booking_codec.BookingRecordSerializer.to_row')
        return [
            str(booking.ticket_no),
            booking.name,
            str(booking.age),
            booking.gender,
            booking.booked_at,
            booking.requested_at,
        ]

    def from_row(self, fields: Sequence[str]) -> Booking:
        """
        Build a booking from parsed CSV fields.

        Raises:
            MalformedRecordError: the ticket number is missing or not a positive integer
        """
        t('reservations.ledger.booking_codec.BookingRecordSerializer.from_row')

        def field(index: int) -> str:
            return fields[index] if len(fields) > index else ""

        raw_ticket = field(0).strip()
        if not raw_ticket:
            raise MalformedRecordError("record has no ticket number")
        try:
            ticket_no = int(raw_ticket)
        except ValueError as exc:
            raise MalformedRecordError(f"invalid ticket number {raw_ticket!r}") from exc
        if ticket_no <= 0:
            raise MalformedRecordError(f"ticket number must be positive, got {ticket_no}")

        raw_age = field(2).strip()
        age = 0
        if raw_age:
            try:
                age = int(raw_age)
            except ValueError:
                self._logger.warning(
                    "Ticket %s has invalid age %r; defaulting to 0",
                    ticket_no,
                    raw_age,
                )

        return Booking(
            ticket_no=ticket_no,
            name=field(1),
            age=age,
            gender=field(3),
            booked_at=field(4),
            requested_at=field(5),
        )

    def encode_line(self, booking: Booking) -> str:
        """Return one CSV line (without terminator) for ``booking``."""
        t('reservations.ledger.booking_codec.BookingRecordSerializer.encode_line')
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="\n").writerow(self.to_row(booking))
        return buffer.getvalue().rstrip("\n")

    def decode_line(self, line: str) -> Booking:
        """Parse a single CSV line into a booking."""
        t('reservations.ledger.booking_codec.BookingRecordSerializer.decode_line')
        try:
            rows = list(csv.reader([line]))
        except csv.Error as exc:
            raise MalformedRecordError(f"unreadable record: {exc}") from exc
        return self.from_row(rows[0] if rows else [])
