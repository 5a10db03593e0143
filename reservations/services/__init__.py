"""Reservation services."""

from .reservation_service import ReservationService, open_reservation_service

__all__ = ["ReservationService", "open_reservation_service"]
