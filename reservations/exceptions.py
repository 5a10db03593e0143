"""Error hierarchy for the reservation domain."""

from __future__ import annotations
from tracking import t

from typing import Optional


class ReservationError(Exception):
    """Base error for reservation failures."""


class ValidationError(ReservationError, ValueError):
    """Raised when booking input (name, age or gender) is invalid."""

    def __init__(self, field: str, message: str) -> None:
        t('reservations.exceptions.ValidationError.__init__')
        super().__init__(message)
        self.field = field


class PersistenceError(ReservationError, RuntimeError):
    """Raised when the booking store cannot be read or written."""

    def __init__(self, path: object, message: str, *, cause: Optional[BaseException] = None) -> None:
        t('reservations.exceptions.PersistenceError.__init__')
        super().__init__(f"{message}: {path}")
        self.path = path
        self.cause = cause


class MalformedRecordError(ReservationError, ValueError):
    """Raised by the codec for a stored record that cannot be recovered."""
