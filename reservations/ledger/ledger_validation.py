"""Validation helpers for ledger operations."""

from __future__ import annotations
from tracking import t

from typing import Any, Iterable, List, Set, Tuple

from reservations.exceptions import ValidationError
from reservations.models import Booking, Gender


def ensure_valid_booking(name: Any, age: Any, gender: Any) -> Tuple[str, int, str]:
    """
    Check booking input and return it normalised.

    Returns:
        ``(trimmed_name, age, upper_case_gender_code)``

    Raises:
        ValidationError: empty name, non-integer or negative age, unknown gender
    """
    t('reservations.ledger.ledger_validation.ensure_valid_booking')

    clean_name = name.strip() if isinstance(name, str) else ""
    if not clean_name:
        raise ValidationError("name", "Name cannot be empty")
    if "\n" in clean_name or "\r" in clean_name:
        raise ValidationError("name", "Name must fit on a single line")

    # bool is an int subclass but never a meaningful age
    if isinstance(age, bool) or not isinstance(age, int):
        raise ValidationError("age", f"Age must be a whole number, got {age!r}")
    if age < 0:
        raise ValidationError("age", f"Age cannot be negative, got {age}")

    member = Gender.from_code(gender) if isinstance(gender, str) else None
    if member is None:
        codes = "/".join(g.value for g in Gender)
        raise ValidationError("gender", f"Gender must be one of {codes}, got {gender!r}")

    return clean_name, age, member.value


def drop_duplicate_tickets(
    confirmed: Iterable[Booking],
    waiting: Iterable[Booking],
    *,
    logger: Any,
) -> Tuple[List[Booking], List[Booking]]:
    """Keep the first booking seen for each ticket number across both streams."""

    t('reservations.ledger.ledger_validation.drop_duplicate_tickets')
    seen: Set[int] = set()

    def _keep(bookings: Iterable[Booking], label: str) -> List[Booking]:
        kept: List[Booking] = []
        for booking in bookings:
            if booking.ticket_no in seen:
                logger.warning(
                    "Dropping duplicate ticket %s (%s) from %s list",
                    booking.ticket_no,
                    booking.name,
                    label,
                )
                continue
            seen.add(booking.ticket_no)
            kept.append(booking)
        return kept

    return _keep(confirmed, "confirmed"), _keep(waiting, "waiting")
