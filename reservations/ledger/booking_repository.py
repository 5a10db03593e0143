"""Persistence helpers for ledger storage."""

from __future__ import annotations
from tracking import t

from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Iterable, List, Optional, Tuple

from reservations.exceptions import MalformedRecordError, PersistenceError
from reservations.ledger.booking_codec import BookingRecordSerializer
from reservations.models import Booking


class BookingRepository:
    """Read/write confirmed and waiting bookings to two CSV backing files."""

    def __init__(
        self,
        confirmed_path: str,
        waiting_path: str,
        *,
        logger: Any,
        serializer: Optional[BookingRecordSerializer] = None,
    ) -> None:
        t('reservations.ledger.booking_repository.BookingRepository.__init__')
        self._confirmed_path = Path(confirmed_path)
        self._waiting_path = Path(waiting_path)
        self._logger = logger
        self._serializer = serializer or BookingRecordSerializer(logger=logger)

    @property
    def paths(self) -> Tuple[Path, Path]:
        t('reservations.ledger.booking_repository.BookingRepository.paths')
        return self._confirmed_path, self._waiting_path

    def load(self) -> Tuple[List[Booking], List[Booking]]:
        """Load both streams from disk. A missing file is an empty stream."""

        t('reservations.ledger.booking_repository.BookingRepository.load')
        return (
            self._load_stream(self._confirmed_path),
            self._load_stream(self._waiting_path),
        )

    def save(self, confirmed: Iterable[Booking], waiting: Iterable[Booking]) -> None:
        """Overwrite both backing files with the given bookings."""

        t('reservations.ledger.booking_repository.BookingRepository.save')
        self._save_stream(self._confirmed_path, confirmed)
        self._save_stream(self._waiting_path, waiting)

    def _load_stream(self, path: Path) -> List[Booking]:
        t('reservations.ledger.booking_repository.BookingRepository._load_stream')
        if not path.exists():
            self._logger.debug("Booking file %s does not exist; starting empty", path)
            return []

        bookings: List[Booking] = []
        skipped = 0
        try:
            # One record per line; undecodable bytes only damage their own field
            with path.open('r', encoding='utf-8', errors='replace', newline='') as handle:
                for line_no, line in enumerate(handle, start=1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue
                    try:
                        bookings.append(self._serializer.decode_line(line))
                    except MalformedRecordError as exc:
                        skipped += 1
                        self._logger.warning(
                            "Skipping malformed record at %s:%s: %s",
                            path,
                            line_no,
                            exc,
                        )
        except OSError as exc:
            self._logger.error("Failed to load bookings from %s: %s", path, exc)
            raise PersistenceError(path, "Unable to read booking file", cause=exc) from exc

        self._logger.debug(
            "Loaded %s bookings from %s (%s skipped)",
            len(bookings),
            path,
            skipped,
        )
        return bookings

    def _save_stream(self, path: Path, bookings: Iterable[Booking]) -> None:
        """Write to a temporary sibling file, then replace the target in one step."""

        t('reservations.ledger.booking_repository.BookingRepository._save_stream')
        tmp_path: Optional[Path] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                'w',
                encoding='utf-8',
                newline='',
                dir=path.parent,
                prefix=f".{path.name}.",
                delete=False,
            ) as handle:
                tmp_path = Path(handle.name)
                count = 0
                for booking in bookings:
                    handle.write(self._serializer.encode_line(booking) + "\n")
                    count += 1
                handle.flush()
            tmp_path.replace(path)
        except OSError as exc:
            self._logger.error("Failed to save bookings to %s: %s", path, exc)
            if tmp_path is not None and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    pass
            raise PersistenceError(path, "Unable to write booking file", cause=exc) from exc

        self._logger.debug("Saved %s bookings to %s", count, path)
