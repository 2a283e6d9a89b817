"""Reader/writer lock for in-process shared state.

Many readers may hold the lock at once; a writer holds it alone. Once a
writer is waiting, new readers queue behind it so writers are not starved.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Many-reader/single-writer lock built on a condition variable."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._condition:
            while self._writer or self._waiting_writers:
                self._condition.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._condition:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a held read lock")
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def acquire_write(self) -> None:
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            except BaseException:
                # Readers queued behind this writer must not stay blocked
                self._waiting_writers -= 1
                self._condition.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._condition:
            if not self._writer:
                raise RuntimeError("release_write() called without a held write lock")
            self._writer = False
            self._condition.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
