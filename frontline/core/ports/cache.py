"""
Request cache port.

Keys are short ASCII strings; values are opaque text payloads the dispatcher
never interprets. ``None`` means absent, so ``None`` is never stored.

Backends must serialize their own mutations when shared between threads.
"""

from __future__ import annotations

from typing import Protocol


class RequestCachePort(Protocol):
    """Cache backend interface."""

    def get(self, key: str) -> str | None:
        """Return the cached value, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any existing one."""
        ...

    def has(self, key: str) -> bool:
        ...

    def delete(self, key: str) -> None:
        """Remove a key. No error if absent."""
        ...

    def clear(self) -> None:
        ...
