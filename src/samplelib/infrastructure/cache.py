"""In-memory CacheAdapter with lazy TTL eviction.

TTL semantics:
- ``ttl_ms=None``: the entry never expires.
- ``ttl_ms <= 0``: the entry is stored already expired; the next ``get`` or
  ``has`` evicts it and reports a miss.
- otherwise the entry expires once ``ttl_ms`` milliseconds have elapsed.

Expired entries are only removed when accessed, so :meth:`size` can count
entries that are already stale.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class _Entry:
    value: Any
    expires_at: float | None = None


class MemoryCacheAdapter:
    """Dict-backed cache. Not thread-safe; callers own synchronization.

    Args:
        initial: Entries stored up front; these never expire.
        default_ttl_ms: TTL applied when ``set`` is called without one.
        clock: Monotonic time source in seconds (injectable for tests).
    """

    def __init__(
        self,
        initial: Mapping[str, Any] | None = None,
        *,
        default_ttl_ms: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store: dict[str, _Entry] = {
            key: _Entry(value) for key, value in (initial or {}).items()
        }
        self._default_ttl_ms = default_ttl_ms
        self._clock = clock

    def _live(self, key: str) -> _Entry | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._store[key]
            return None
        return entry

    def get(self, key: str) -> Any | None:
        entry = self._live(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any, ttl_ms: int | None = None) -> None:
        if ttl_ms is None:
            ttl_ms = self._default_ttl_ms
        expires_at = None if ttl_ms is None else self._clock() + ttl_ms / 1000
        self._store[key] = _Entry(value=value, expires_at=expires_at)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def has(self, key: str) -> bool:
        return self._live(key) is not None

    def clear(self) -> None:
        self._store.clear()

    def size(self) -> int:
        """Stored entry count, including expired entries not yet evicted."""
        return len(self._store)


def create_memory_cache(
    initial: Mapping[str, Any] | None = None,
    *,
    default_ttl_ms: int | None = None,
) -> MemoryCacheAdapter:
    """Build a cache pre-seeded with *initial* (seeded entries never expire)."""
    return MemoryCacheAdapter(initial, default_ttl_ms=default_ttl_ms)
