"""Bounded, oldest-first log of admitted joystick events"""
import itertools
import json
import logging
from collections import deque
from typing import List

from core.state import LogEntry, Source, Vector2

LOG = logging.getLogger("petleash.logstore")

DEFAULT_CAPACITY = 10


class LogStore:
    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"log capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries = deque()
        self._ids = itertools.count(1)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def next_id(self) -> int:
        return next(self._ids)

    def append(self, entry: LogEntry):
        self._entries.append(entry)
        while len(self._entries) > self.capacity:
            dropped = self._entries.popleft()
            LOG.debug("evicted entry %d", dropped.id)

    def record(self, source: Source, vector: Vector2, timestamp: str) -> LogEntry:
        entry = LogEntry(self.next_id(), timestamp, source, vector)
        self.append(entry)
        LOG.debug("logged #%d %s (%.3f, %.3f) at %s",
                  entry.id, source.value, vector.x, vector.y, timestamp)
        return entry

    def entries(self) -> List[LogEntry]:
        """Snapshot in display order (oldest first)."""
        return list(self._entries)

    def clear(self):
        self._entries.clear()

    def to_records(self) -> List[dict]:
        return [e.to_record() for e in self._entries]

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_records(), indent=indent)
