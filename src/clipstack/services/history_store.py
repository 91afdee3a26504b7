import logging
import threading
from collections import deque
from datetime import datetime
from typing import Deque, Optional, Tuple

from clipstack.errors import InvalidConfiguration
from clipstack.models import Entry

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


class HistoryStore:
    """
    Capacity-bounded clipboard history, newest entry first.

    Inserting text that is already stored promotes it to the front with a
    fresh timestamp instead of keeping a duplicate. When the store is full the
    oldest entry (the tail) is dropped.

    Every public method holds the store lock for its whole duration, so the
    poller thread and the UI thread can share one instance.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidConfiguration(
                f"History capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._entries: Deque[Entry] = deque()
        self._lock = threading.RLock()
        self._revision = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def revision(self) -> int:
        """Counter bumped on every mutation."""
        with self._lock:
            return self._revision

    def insert(self, content: str, now: Optional[datetime] = None) -> Optional[Entry]:
        if not content or not content.strip():
            return None

        with self._lock:
            for existing in self._entries:
                if existing.content == content:
                    self._entries.remove(existing)
                    break

            entry = Entry.capture(content, now)
            self._entries.appendleft(entry)

            while len(self._entries) > self._capacity:
                evicted = self._entries.pop()
                logger.debug(f"Evicted history entry {evicted.entry_id}")

            self._revision += 1
            return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._revision += 1

    def all(self) -> Tuple[Entry, ...]:
        with self._lock:
            return tuple(self._entries)

    def newest(self) -> Optional[Entry]:
        with self._lock:
            return self._entries[0] if self._entries else None

    def get(self, entry_id: str) -> Optional[Entry]:
        with self._lock:
            for entry in self._entries:
                if entry.entry_id == entry_id:
                    return entry
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
