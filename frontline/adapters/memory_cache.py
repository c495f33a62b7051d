"""
In-memory request cache.

Process-local; lost on restart. Mutations are serialized with a lock so the
cache can be shared by concurrently served requests.
"""

from __future__ import annotations

from threading import Lock


class InMemoryCache:
    """Dict-backed implementation of RequestCachePort."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
