import pytest

from reservations.exceptions import MalformedRecordError
from reservations.ledger.booking_codec import BookingRecordSerializer
from tests.helpers import DummyLogger, make_booking


def test_encode_plain_record():
    serializer = BookingRecordSerializer(logger=DummyLogger())
    booking = make_booking(7, "Alice", age=30, gender="F", booked_at="2024-03-01 10:00:00", requested_at="2024-03-01 09:00:00")

    assert serializer.encode_line(booking) == "7,Alice,30,F,2024-03-01 10:00:00,2024-03-01 09:00:00"


def test_encode_quotes_delimiter_and_doubles_quotes():
    serializer = BookingRecordSerializer(logger=DummyLogger())

    line = serializer.encode_line(make_booking(1, 'Smith, "Jo"'))

    assert line.startswith('1,"Smith, ""Jo""",30,')


@pytest.mark.parametrize("name", ['Smith, Jo', 'The "Rock"', '",,"', "plain"])
def test_decode_recovers_names_with_special_characters(name):
    serializer = BookingRecordSerializer(logger=DummyLogger())
    booking = make_booking(3, name)

    assert serializer.decode_line(serializer.encode_line(booking)) == booking


def test_decode_defaults_missing_trailing_fields():
    serializer = BookingRecordSerializer(logger=DummyLogger())

    booking = serializer.decode_line("4,Bob")

    assert booking.ticket_no == 4
    assert booking.name == "Bob"
    assert booking.age == 0
    assert booking.gender == ""
    assert booking.booked_at == ""
    assert booking.requested_at == ""


def test_decode_five_field_record_from_older_store():
    serializer = BookingRecordSerializer(logger=DummyLogger())

    booking = serializer.decode_line("2,Carol,40,F,2024-01-01 08:00:00")

    assert booking.booked_at == "2024-01-01 08:00:00"
    assert booking.requested_at == ""


def test_decode_bad_age_defaults_to_zero_and_warns():
    logger = DummyLogger()
    serializer = BookingRecordSerializer(logger=logger)

    booking = serializer.decode_line("5,Dan,old,M,2024-01-01 08:00:00")

    assert booking.age == 0
    assert booking.gender == "M"
    assert logger.levels() == ["warning"]


@pytest.mark.parametrize("line", ["", ",Nameless,30", "abc,Eve,30", "0,Zero,1", "-4,Neg,1"])
def test_decode_rejects_records_without_usable_ticket(line):
    serializer = BookingRecordSerializer(logger=DummyLogger())

    with pytest.raises(MalformedRecordError):
        serializer.decode_line(line)
