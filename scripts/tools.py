"""Utility entrypoints for the reservation system.

Provides quick CLI hooks into the stored bookings for manual inspection
without starting the interactive menu.
"""

from __future__ import annotations
from tracking import t

import argparse

from consoleapp.messages import ReservationMessageFactory
from infrastructure.settings import get_settings
from reservations.services.reservation_service import (
    ReservationService,
    build_reservation_service,
)


def _build_service() -> ReservationService:
    t('scripts.tools._build_service')
    service = build_reservation_service(get_settings())
    service.load()
    return service


def list_bookings() -> None:
    t('scripts.tools.list_bookings')
    service = _build_service()
    print(ReservationMessageFactory().booking_listing(service.list_bookings()))


def show_stats() -> None:
    t('scripts.tools.show_stats')
    service = _build_service()
    snapshot = service.list_bookings()
    print(f"Capacity: {snapshot.capacity}")
    print(f"Confirmed: {len(snapshot.confirmed)}")
    print(f"Seats available: {snapshot.seats_available}")
    print(f"Waiting: {len(snapshot.waiting)}")
    print(f"Next ticket: {snapshot.next_ticket_no}")


def main() -> None:
    t('scripts.tools.main')
    parser = argparse.ArgumentParser(description="Reservation utility helpers")
    parser.add_argument("command", choices=["list-bookings", "stats"], help="Command to execute")
    args = parser.parse_args()

    if args.command == "list-bookings":
        list_bookings()
    elif args.command == "stats":
        show_stats()


if __name__ == "__main__":
    main()
