#!/usr/bin/env python3
# easyconsole/interface/history.py
from __future__ import annotations

"""
Bounded command history with a navigation cursor.

The cursor is an offset from the newest entry: -1 means "not navigating",
0 is the newest entry and len-1 the oldest one still retained.

Storage is safe for concurrent appends. The cursor belongs to the single
console that owns the ring and is not locked.
"""

import threading
from collections import deque
from typing import Iterable, Iterator

from prompt_toolkit.history import History

from easyconsole.errors import ConfigurationError


class HistoryRing:
    """Fixed-capacity, insertion-ordered history; the oldest entry is evicted first."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigurationError(
                f"History capacity must be a positive integer, got {capacity!r}")
        self._entries: deque[str] = deque(maxlen=capacity)
        self._lock = threading.Lock()
        self._cursor = -1

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries())

    def entries(self) -> list[str]:
        """Snapshot of the retained entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def append(self, entry: str) -> None:
        """Add `entry` as the newest item and stop navigating."""
        with self._lock:
            # deque(maxlen=...) drops exactly one item from the left when full
            self._entries.append(entry)
        self._cursor = -1

    def previous(self) -> str:
        """Step toward older entries; "" when already at the oldest (or empty)."""
        snapshot = self.entries()
        if not snapshot or self._cursor >= len(snapshot) - 1:
            return ""
        self._cursor += 1
        return snapshot[len(snapshot) - 1 - self._cursor]

    def next(self) -> str:
        """Step toward newer entries; "" once back at the empty prompt."""
        if self._cursor <= -1:
            return ""
        self._cursor -= 1
        if self._cursor == -1:
            return ""
        snapshot = self.entries()
        # Entries may have been cleared underneath the cursor.
        if self._cursor >= len(snapshot):
            self._cursor = -1
            return ""
        return snapshot[len(snapshot) - 1 - self._cursor]

    def clear(self) -> None:
        """Forget all entries and reset the cursor."""
        with self._lock:
            self._entries.clear()
        self._cursor = -1


class RingHistory(History):
    """
    prompt_toolkit history view over a HistoryRing.

    The console records input itself, so accepted lines are not stored
    again here; the view always reflects the ring's current content.
    """

    def __init__(self, ring: HistoryRing) -> None:
        super().__init__()
        self._ring = ring

    def load_history_strings(self) -> Iterable[str]:
        # prompt_toolkit expects newest first
        return list(reversed(self._ring.entries()))

    def get_strings(self) -> list[str]:
        return self._ring.entries()

    def append_string(self, string: str) -> None:
        pass

    def store_string(self, string: str) -> None:
        pass
