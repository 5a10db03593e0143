"""Unit tests for the reservation service save policy and scoped sessions."""

import pytest

from infrastructure.settings import load_settings
from reservations.exceptions import PersistenceError
from reservations.ledger.booking_repository import BookingRepository
from reservations.ledger.reservation_ledger import ReservationLedger
from reservations.models import Confirmed, NotFound, Waitlisted
from reservations.services import ReservationService, open_reservation_service
from tests.helpers import DummyLogger, FakeClock, InMemoryStore


def _settings(tmp_path, **overrides):
    env = {
        "DATA_DIRECTORY": str(tmp_path / "data"),
        "TRAIN_CAPACITY": "2",
        "LOG_DIRECTORY": str(tmp_path / "logs"),
    }
    env.update(overrides)
    return load_settings(env)


def _service(store, autosave=True, capacity=2):
    ledger = ReservationLedger(capacity, clock=FakeClock(), logger=DummyLogger())
    return ReservationService(ledger, store, autosave=autosave)


def test_book_and_cancel_save_after_each_mutation():
    store = InMemoryStore()
    service = _service(store)

    service.book("Alice", 30, "F")
    service.book("Bob", 25, "M")
    service.cancel(1)

    assert store.saves == 3
    assert [b.name for b in store.confirmed] == ["Bob"]


def test_not_found_cancel_does_not_save():
    store = InMemoryStore()
    service = _service(store)

    assert service.cancel(5) == NotFound(ticket_no=5)
    assert store.saves == 0


def test_autosave_disabled_defers_writes():
    store = InMemoryStore()
    service = _service(store, autosave=False)

    service.book("Alice", 30, "F")
    assert store.saves == 0

    service.flush()
    assert store.saves == 1
    assert [b.ticket_no for b in store.confirmed] == [1]


def test_service_exposes_queries():
    service = _service(InMemoryStore(), capacity=1)
    service.book("Alice", 30, "F")
    outcome = service.book("Bob", 25, "M")

    assert outcome == Waitlisted(ticket_no=2, position=1)
    assert service.waiting_position(2) == 1
    assert service.find(1)[1].name == "Alice"
    assert service.status_counts() == {"confirmed": 1, "waiting": 1}
    assert service.capacity == 1
    assert len(service.list_bookings().confirmed) == 1


def test_session_persists_between_runs(tmp_path):
    settings = _settings(tmp_path)

    with open_reservation_service(settings, clock=FakeClock()) as service:
        service.book("Alice", 30, "F")
        service.book("Bob", 25, "M")
        service.book('Carol "CJ", Sr', 40, "F")

    with open_reservation_service(settings, clock=FakeClock()) as service:
        snapshot = service.list_bookings()
        assert [b.name for b in snapshot.confirmed] == ["Alice", "Bob"]
        assert [b.name for b in snapshot.waiting_bookings] == ['Carol "CJ", Sr']
        assert service.book("Dan", 50, "M") == Waitlisted(ticket_no=4, position=2)


def test_session_flushes_on_error_exit(tmp_path):
    settings = _settings(tmp_path, AUTOSAVE="false")

    with pytest.raises(RuntimeError):
        with open_reservation_service(settings, clock=FakeClock()) as service:
            service.book("Alice", 30, "F")
            raise RuntimeError("boom")

    with open_reservation_service(settings, clock=FakeClock()) as service:
        assert [b.name for b in service.list_bookings().confirmed] == ["Alice"]


def test_session_flushes_on_clean_exit_without_autosave(tmp_path):
    settings = _settings(tmp_path, AUTOSAVE="false")

    with open_reservation_service(settings, clock=FakeClock()) as service:
        assert service.book("Alice", 30, "F") == Confirmed(ticket_no=1)
        assert not (tmp_path / "data" / "confirmed.csv").exists()

    assert (tmp_path / "data" / "confirmed.csv").exists()


def test_write_failure_surfaces_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    repository = BookingRepository(
        str(blocker / "confirmed.csv"),
        str(blocker / "waiting.csv"),
        logger=DummyLogger(),
    )
    service = ReservationService(
        ReservationLedger(2, clock=FakeClock(), logger=DummyLogger()),
        repository,
    )

    with pytest.raises(PersistenceError):
        service.book("Alice", 30, "F")
