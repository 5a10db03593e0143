"""Record which functions actually execute while the reservation system runs.

Every function calls :func:`t` with its dotted name on entry. The first call
per name in a process appends the name to a plain text file so that unused
code paths can be spotted across sessions.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import FrozenSet, Set

_LOCK = threading.RLock()
_DEFAULT_FILE = Path(__file__).resolve().parents[1] / "logs" / "functions_in_use.txt"
_SEEN: Set[str] = set()


def _tracking_file() -> Path:
    override = os.getenv("TRACKING_FILE")
    return Path(override) if override else _DEFAULT_FILE


def _tracking_disabled() -> bool:
    return os.getenv("TRACKING_DISABLED", "false").strip().lower() in {"1", "true", "yes", "on"}


def _initialize_seen_cache() -> None:
    """Populate the cache with names recorded by previous runs."""
    path = _tracking_file()
    if not path.exists():
        return
    try:
        with path.open("r", encoding="utf-8") as handle:
            _SEEN.update(line.strip() for line in handle if line.strip())
    except OSError:
        pass


_initialize_seen_cache()


def t(func_name: str) -> None:
    """Record ``func_name`` the first time it runs in this process."""
    if not func_name or _tracking_disabled():
        return

    with _LOCK:
        if func_name in _SEEN:
            return

        path = _tracking_file()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as handle:
                handle.write(f"{func_name}\n")
        except OSError:
            return

        _SEEN.add(func_name)


def tracked_functions() -> FrozenSet[str]:
    """Return the names recorded so far."""
    with _LOCK:
        return frozenset(_SEEN)
