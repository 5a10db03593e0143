import pytest

from reservations.exceptions import PersistenceError
from reservations.ledger.booking_repository import BookingRepository
from tests.helpers import DummyLogger, make_booking


def _repository(tmp_path, logger=None):
    return BookingRepository(
        str(tmp_path / "data" / "confirmed.csv"),
        str(tmp_path / "data" / "waiting.csv"),
        logger=logger or DummyLogger(),
    )


def test_repository_round_trip(tmp_path):
    repository = _repository(tmp_path)
    confirmed = [make_booking(1, "Alice"), make_booking(2, 'Bob "B", Jr')]
    waiting = [make_booking(3, "Carol", gender="O"), make_booking(5, "Dan", age=7)]

    repository.save(confirmed, waiting)

    reloaded = _repository(tmp_path).load()
    assert reloaded == (confirmed, waiting)


def test_missing_files_load_as_empty(tmp_path):
    logger = DummyLogger()

    assert _repository(tmp_path, logger).load() == ([], [])
    assert "error" not in logger.levels()


def test_save_overwrites_previous_contents(tmp_path):
    repository = _repository(tmp_path)
    repository.save([make_booking(1), make_booking(2)], [make_booking(3)])

    repository.save([make_booking(2)], [])

    confirmed_path, waiting_path = repository.paths
    assert confirmed_path.read_text(encoding="utf-8").count("\n") == 1
    assert waiting_path.read_text(encoding="utf-8") == ""
    assert not [p for p in confirmed_path.parent.iterdir() if p.name.startswith(".")]


def test_load_skips_malformed_and_blank_lines(tmp_path):
    logger = DummyLogger()
    repository = _repository(tmp_path, logger)
    confirmed_path, _ = repository.paths
    confirmed_path.parent.mkdir(parents=True)
    confirmed_path.write_text(
        "1,Alice,30,F,2024-01-01 08:00:00\n"
        "\n"
        "oops,Broken,1,M,\n"
        "2,Bob\n",
        encoding="utf-8",
    )

    confirmed, waiting = repository.load()

    assert [b.ticket_no for b in confirmed] == [1, 2]
    assert confirmed[1].age == 0
    assert waiting == []
    assert "warning" in logger.levels()


def test_unwritable_location_raises_persistence_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file in the way", encoding="utf-8")
    repository = BookingRepository(
        str(blocker / "confirmed.csv"),
        str(blocker / "waiting.csv"),
        logger=DummyLogger(),
    )

    with pytest.raises(PersistenceError):
        repository.save([make_booking(1)], [])


def test_unreadable_file_raises_persistence_error(tmp_path):
    repository = _repository(tmp_path)
    confirmed_path, _ = repository.paths
    confirmed_path.mkdir(parents=True)

    with pytest.raises(PersistenceError):
        repository.load()


def test_unbalanced_quote_does_not_swallow_following_records(tmp_path):
    repository = _repository(tmp_path)
    confirmed_path, _ = repository.paths
    confirmed_path.parent.mkdir(parents=True)
    confirmed_path.write_text(
        '1,"Alice,30,F,2024-01-01 08:00:00\n'
        "2,Bob,25,M,2024-01-01 08:05:00\n"
        "3,Carol,40,F,2024-01-01 08:10:00\n",
        encoding="utf-8",
    )

    confirmed, _ = repository.load()

    assert [b.ticket_no for b in confirmed] == [1, 2, 3]
    assert [b.name for b in confirmed[1:]] == ["Bob", "Carol"]
    assert all("\n" not in b.name for b in confirmed)


def test_undecodable_bytes_only_affect_their_own_record(tmp_path):
    repository = _repository(tmp_path)
    confirmed_path, _ = repository.paths
    confirmed_path.parent.mkdir(parents=True)
    confirmed_path.write_bytes(
        b"1,Jos\xe9,30,M,2024-01-01 08:00:00\n"
        b"2,Bob,25,M,2024-01-01 08:05:00\n"
    )

    confirmed, _ = repository.load()

    assert [b.ticket_no for b in confirmed] == [1, 2]
    assert confirmed[0].name.startswith("Jos")
    assert confirmed[1].name == "Bob"


def test_saved_files_hold_one_record_per_line(tmp_path):
    repository = _repository(tmp_path)
    repository.save([make_booking(1, 'Ann "A", Sr'), make_booking(2, "Ben")], [])

    confirmed_path, _ = repository.paths
    lines = confirmed_path.read_text(encoding="utf-8").splitlines()

    assert len(lines) == 2
    assert lines[0].startswith('1,"Ann ""A"", Sr",')
