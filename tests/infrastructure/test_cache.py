"""Tests for MemoryCacheAdapter TTL and lazy eviction."""

from __future__ import annotations

import pytest

from samplelib.infrastructure.cache import MemoryCacheAdapter, create_memory_cache
from tests.conftest import FakeClock


@pytest.fixture
def cache(fake_clock: FakeClock) -> MemoryCacheAdapter:
    return MemoryCacheAdapter(clock=fake_clock)


class TestBasicOperations:
    def test_set_and_get(self, cache: MemoryCacheAdapter) -> None:
        cache.set("key", "value")
        assert cache.get("key") == "value"
        assert cache.has("key") is True

    def test_missing_key(self, cache: MemoryCacheAdapter) -> None:
        assert cache.get("missing") is None
        assert cache.has("missing") is False

    def test_value_types(self, cache: MemoryCacheAdapter) -> None:
        cache.set("s", "text")
        cache.set("n", 42)
        cache.set("o", {"a": 1})
        assert cache.get("s") == "text"
        assert cache.get("n") == 42
        assert cache.get("o") == {"a": 1}

    def test_overwrite(self, cache: MemoryCacheAdapter) -> None:
        cache.set("k", 1)
        cache.set("k", 2)
        assert cache.get("k") == 2
        assert cache.size() == 1

    def test_delete(self, cache: MemoryCacheAdapter) -> None:
        cache.set("k", 1)
        cache.delete("k")
        assert cache.has("k") is False

    def test_delete_missing_is_noop(self, cache: MemoryCacheAdapter) -> None:
        cache.delete("nope")
        assert cache.size() == 0

    def test_clear(self, cache: MemoryCacheAdapter) -> None:
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert cache.size() == 0


class TestTtl:
    def test_live_before_expiry(self, cache: MemoryCacheAdapter, fake_clock: FakeClock) -> None:
        cache.set("k", "v", ttl_ms=100)
        fake_clock.advance_ms(99)
        assert cache.get("k") == "v"

    def test_expired_at_deadline(self, cache: MemoryCacheAdapter, fake_clock: FakeClock) -> None:
        cache.set("k", "v", ttl_ms=100)
        fake_clock.advance_ms(100)
        assert cache.get("k") is None

    def test_no_ttl_never_expires(self, cache: MemoryCacheAdapter, fake_clock: FakeClock) -> None:
        cache.set("k", "v")
        fake_clock.advance_ms(10**9)
        assert cache.has("k") is True

    @pytest.mark.parametrize("ttl", [0, -5])
    def test_non_positive_ttl_expires_immediately(
        self, cache: MemoryCacheAdapter, ttl: int
    ) -> None:
        cache.set("k", "v", ttl_ms=ttl)
        assert cache.has("k") is False
        assert cache.get("k") is None

    def test_lazy_eviction_on_has(self, cache: MemoryCacheAdapter, fake_clock: FakeClock) -> None:
        cache.set("k", "v", ttl_ms=10)
        fake_clock.advance_ms(20)
        assert cache.size() == 1  # stale entry still stored
        assert cache.has("k") is False
        assert cache.size() == 0

    def test_lazy_eviction_on_get(self, cache: MemoryCacheAdapter, fake_clock: FakeClock) -> None:
        cache.set("k", "v", ttl_ms=10)
        fake_clock.advance_ms(20)
        assert cache.get("k") is None
        assert cache.size() == 0

    def test_default_ttl(self, fake_clock: FakeClock) -> None:
        cache = MemoryCacheAdapter(default_ttl_ms=50, clock=fake_clock)
        cache.set("k", "v")
        fake_clock.advance_ms(60)
        assert cache.has("k") is False

    def test_explicit_ttl_overrides_default(self, fake_clock: FakeClock) -> None:
        cache = MemoryCacheAdapter(default_ttl_ms=50, clock=fake_clock)
        cache.set("k", "v", ttl_ms=500)
        fake_clock.advance_ms(60)
        assert cache.has("k") is True


class TestCreateMemoryCache:
    def test_seeded(self) -> None:
        cache = create_memory_cache({"a": 1, "b": "two"})
        assert cache.get("a") == 1
        assert cache.get("b") == "two"
        assert cache.size() == 2

    def test_empty(self) -> None:
        assert create_memory_cache().size() == 0

    def test_seeded_entries_ignore_default_ttl(self, fake_clock: FakeClock) -> None:
        cache = MemoryCacheAdapter({"a": 1}, default_ttl_ms=10, clock=fake_clock)
        cache.set("b", 2)
        fake_clock.advance_ms(1_000)
        assert cache.get("a") == 1
        assert cache.has("b") is False

    def test_seed_is_copied(self) -> None:
        initial = {"a": 1}
        cache = create_memory_cache(initial)
        initial["b"] = 2
        assert cache.has("b") is False
        cache.delete("a")
        assert initial == {"a": 1, "b": 2}
