"""Reader/writer lock for thread-parallel callers.

Readers share the lock; a writer holds it alone. Once a writer is waiting, new
readers queue behind it so a steady stream of readers cannot starve writers.
The lock is *not* reentrant: a thread that already holds it must not acquire
it again.
"""
from __future__ import annotations

import contextlib
import threading
from collections.abc import Iterator

__all__ = ["RWLock"]


class RWLock:
    """Blocking shared/exclusive lock built on a single condition variable."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    # ------------------------------------------------------------------
    # Shared side
    # ------------------------------------------------------------------
    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if not self._readers:
                raise RuntimeError("release of unlocked read lock")
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    # ------------------------------------------------------------------
    # Exclusive side
    # ------------------------------------------------------------------
    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            except BaseException:
                # readers may be parked behind this writer
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release of unlocked write lock")
            self._writer = False
            self._cond.notify_all()

    # ------------------------------------------------------------------
    # Context managers
    # ------------------------------------------------------------------
    @contextlib.contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextlib.contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
