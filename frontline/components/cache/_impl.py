"""
CacheManager - ordered collection of request caches.

Caches are assumed to be ordered fastest first. Reads fall through the tiers
until one hits; writes go to exactly one backend.

Invariants:
- The name -> backend mapping is fixed at construction
- ``set()`` with no configured backends is a no-op
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from frontline.core.ports.cache import RequestCachePort

logger = logging.getLogger(__name__)


class CacheManager:
    """Fallback reads and single-target writes across named backends."""

    def __init__(self, caches: Mapping[str, RequestCachePort] | None = None) -> None:
        self._caches: dict[str, RequestCachePort] = dict(caches or {})

    @property
    def names(self) -> list[str]:
        return list(self._caches)

    def get_cache_by_name(self, name: str) -> RequestCachePort | None:
        return self._caches.get(name)

    def get(self, key: str) -> str | None:
        """Return the first hit in configured order, or None."""
        for name, cache in self._caches.items():
            value = cache.get(key)
            if value is not None:
                logger.debug(f"Cache hit for {key!r} in {name!r}")
                return value
        return None

    def set(self, key: str, value: str, target: str | None = None) -> None:
        """
        Store a value.

        Writes to ``target`` when it names a configured backend, otherwise to
        the first configured backend.
        """
        if target is not None and target in self._caches:
            self._caches[target].set(key, value)
            return

        if not self._caches:
            return

        first = next(iter(self._caches.values()))
        first.set(key, value)

    def has(self, key: str) -> bool:
        return any(cache.has(key) for cache in self._caches.values())

    def which_has(self, key: str) -> str | None:
        """Name of the first backend holding ``key``, or None."""
        for name, cache in self._caches.items():
            if cache.has(key):
                return name
        return None

    def __len__(self) -> int:
        return len(self._caches)
