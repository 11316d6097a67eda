"""A thread-safe, time-limited cache for raw response bodies."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Byte cache whose entries expire after ``interval`` seconds.

    A background daemon thread removes expired entries every ``interval``
    seconds until :meth:`close` is called.
    """

    def __init__(
        self,
        interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = interval
        self._clock = clock
        self._data: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, stamping it with the current time."""
        entry = _Entry(created_at=self._clock(), val=bytes(val))
        with self._lock:
            self._data[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the cached value for ``key``, or ``None`` if absent."""
        with self._lock:
            entry = self._data.get(key)
        return None if entry is None else entry.val

    def reap(self) -> None:
        """Remove every entry older than the cache interval."""
        now = self._clock()
        with self._lock:
            expired = [
                key
                for key, entry in self._data.items()
                if now - entry.created_at > self.interval
            ]
            for key in expired:
                del self._data[key]

    def close(self) -> None:
        """Stop the background reaper thread."""
        self._stop.set()
        if self._reaper.is_alive() and self._reaper is not threading.current_thread():
            self._reaper.join()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.reap()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()