"""Keyed client-side query cache with stale marking and snapshots."""

import copy
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CacheEntry:
    data: Any
    stale: bool = False
    updated_at: float = field(default_factory=time.monotonic)


class QueryCache:
    """In-memory cache of query results keyed by endpoint path.

    Invalidation marks an entry stale but keeps its data, so views keep
    rendering the last known list until the refetch lands.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        return entry.data if entry else None

    def is_stale(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.stale

    def set(self, key: str, data: Any) -> None:
        self._entries[key] = CacheEntry(data=data)

    def invalidate(self, key: str) -> None:
        entry = self._entries.get(key)
        if entry:
            entry.stale = True

    def fetch(self, key: str, loader: Callable[[], Any], force: bool = False) -> Any:
        """Return cached data, calling the loader when missing, stale or forced."""
        if not force and not self.is_stale(key):
            return self._entries[key].data
        data = loader()
        self.set(key, data)
        return data

    def snapshot(self, key: str) -> Any | None:
        """Deep copy of the current data, for rollback."""
        return copy.deepcopy(self.get(key))

    def restore(self, key: str, data: Any) -> None:
        """Put a snapshot back exactly as it was taken."""
        self._entries[key] = CacheEntry(data=copy.deepcopy(data))

    def clear(self) -> None:
        self._entries.clear()
