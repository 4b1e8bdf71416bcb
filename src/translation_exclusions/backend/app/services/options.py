"""Key/value option storage with per-key sanitisers.

Options behave like a host platform's settings table: values are read with a
default, written wholesale, and any sanitiser registered for a key runs on
every write to that key before the value is persisted.
"""

from __future__ import annotations

import json
import logging
import os
import sqlite3
from abc import ABC, abstractmethod
from copy import deepcopy
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

Sanitizer = Callable[[Any], Any]


class OptionStore(ABC):
    """Shared sanitiser bookkeeping for option backends."""

    def __init__(self) -> None:
        self._sanitizers: Dict[str, Sanitizer] = {}
        self._lock = Lock()

    def register(self, key: str, sanitizer: Sanitizer | None = None) -> None:
        """Declare ``key`` as a known option, optionally with a sanitiser."""

        with self._lock:
            self._sanitizers[key] = sanitizer or _identity

    def registered(self, key: str) -> bool:
        with self._lock:
            return key in self._sanitizers

    def _sanitize(self, key: str, value: Any) -> Any:
        with self._lock:
            sanitizer = self._sanitizers.get(key, _identity)
        return sanitizer(value)

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key`` or ``default``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> Any:
        """Sanitise and persist ``value``, returning what was stored."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key``, reporting whether it existed."""


def _identity(value: Any) -> Any:
    return value


class InMemoryOptionStore(OptionStore):
    """Thread-safe, process-local option storage."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        super().__init__()
        self._values: Dict[str, Any] = deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            if key not in self._values:
                return default
            return deepcopy(self._values[key])

    def set(self, key: str, value: Any) -> Any:
        sanitized = self._sanitize(key, value)
        with self._lock:
            self._values[key] = deepcopy(sanitized)
        return sanitized

    def delete(self, key: str) -> bool:
        with self._lock:
            if key not in self._values:
                return False
            del self._values[key]
            return True


class SQLiteOptionStore(OptionStore):
    """SQLite-backed option storage that survives process restarts."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__()
        self._path = str(path)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._write_lock = Lock()
        self._initialise()

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._path, check_same_thread=False)
        connection.execute("PRAGMA journal_mode=WAL")
        connection.execute("PRAGMA synchronous=NORMAL")
        return connection

    def _initialise(self) -> None:
        with self._connect() as connection:
            connection.execute(
                """
                CREATE TABLE IF NOT EXISTS options (
                    name TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )

    def get(self, key: str, default: Any = None) -> Any:
        with self._connect() as connection:
            row = connection.execute(
                "SELECT value FROM options WHERE name = ?",
                (key,),
            ).fetchone()

        if row is None:
            return default

        try:
            return json.loads(row[0])
        except json.JSONDecodeError:
            logger.warning("Ignoring undecodable value stored for option %s", key)
            return default

    def set(self, key: str, value: Any) -> Any:
        sanitized = self._sanitize(key, value)
        encoded = json.dumps(sanitized, ensure_ascii=False)
        with self._write_lock:
            with self._connect() as connection:
                connection.execute(
                    "INSERT INTO options (name, value, updated_at) VALUES (?, ?, ?)"
                    " ON CONFLICT(name) DO UPDATE SET"
                    " value = excluded.value, updated_at = excluded.updated_at",
                    (key, encoded, self._clock().isoformat()),
                )
        return sanitized

    def delete(self, key: str) -> bool:
        with self._write_lock:
            with self._connect() as connection:
                cursor = connection.execute("DELETE FROM options WHERE name = ?", (key,))
                return cursor.rowcount > 0


__all__ = [
    "InMemoryOptionStore",
    "OptionStore",
    "SQLiteOptionStore",
    "Sanitizer",
]
