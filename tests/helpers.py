"""Shared fakes and utilities for unit tests."""

from __future__ import annotations
from tracking import t

from typing import Any, Dict, Iterable, List, Sequence, Tuple

from reservations.models import Booking


class DummyLogger:
    """Lightweight stand-in for ``logging.Logger`` that records calls."""

    def __init__(self) -> None:
        t('tests.helpers.DummyLogger.__init__')
        self.records: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []

    def _record(self, level: str, *args: Any, **kwargs: Any) -> None:
        self.records.append((level, args, kwargs))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self._record("debug", *args, **kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:
        self._record("info", *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        self._record("warning", *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        self._record("error", *args, **kwargs)

    def exception(self, *args: Any, **kwargs: Any) -> None:
        self._record("exception", *args, **kwargs)

    @property
    def messages(self) -> List[Tuple[str, Any]]:
        """Return formatted messages for quick assertions."""
        t('tests.helpers.DummyLogger.messages')

        formatted: List[Tuple[str, Any]] = []
        for level, args, kwargs in self.records:
            message: Any = kwargs.get("msg")
            if args:
                template = args[0]
                if isinstance(template, str) and len(args) > 1:
                    try:
                        message = template % args[1:]
                    except (TypeError, ValueError):
                        message = template
                else:
                    message = template
            formatted.append((level, message))
        return formatted

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


class FakeClock:
    """Returns scripted timestamps, repeating the last one when exhausted."""

    def __init__(self, *timestamps: str) -> None:
        t('tests.helpers.FakeClock.__init__')
        self._timestamps = list(timestamps) or ["2024-01-01 09:00:00"]
        self.calls = 0

    def __call__(self) -> str:
        index = min(self.calls, len(self._timestamps) - 1)
        self.calls += 1
        return self._timestamps[index]


class ScriptedInput:
    """Feeds canned answers to ``input``-style prompts, then raises EOFError."""

    def __init__(self, answers: Iterable[str]) -> None:
        t('tests.helpers.ScriptedInput.__init__')
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


class OutputRecorder:
    """Collects everything written through a ``print``-style callable."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class InMemoryStore:
    """Source/sink pair for ledger load/save without touching disk."""

    def __init__(
        self,
        confirmed: Sequence[Booking] = (),
        waiting: Sequence[Booking] = (),
    ) -> None:
        t('tests.helpers.InMemoryStore.__init__')
        self.confirmed = list(confirmed)
        self.waiting = list(waiting)
        self.saves = 0

    def load(self) -> Tuple[List[Booking], List[Booking]]:
        return list(self.confirmed), list(self.waiting)

    def save(self, confirmed: Iterable[Booking], waiting: Iterable[Booking]) -> None:
        self.confirmed = list(confirmed)
        self.waiting = list(waiting)
        self.saves += 1


def make_booking(ticket_no: int, name: str = "Passenger", **overrides: Any) -> Booking:
    """Build a booking with sensible defaults for tests."""
    fields: Dict[str, Any] = {
        "ticket_no": ticket_no,
        "name": name,
        "age": 30,
        "gender": "F",
        "booked_at": "2024-01-01 09:00:00",
        "requested_at": "2024-01-01 09:00:00",
    }
    fields.update(overrides)
    return Booking(**fields)
