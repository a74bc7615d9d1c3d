"""Tests for infrastructure.i18n.cache module."""

import math
from unittest.mock import MagicMock

import pytest

from infrastructure.i18n.cache import (
    DEFAULT_MAX_CACHE_SIZE_BYTES,
    TranslationCache,
    entry_size,
)
from infrastructure.i18n.models import TranslationKey

pytestmark = pytest.mark.unit


def _key(text: str, plural_index: int = 1) -> TranslationKey:
    return TranslationKey(text, "en-US", plural_index)


class TestEntrySize:
    """Tests for entry_size()."""

    def test_counts_key_and_value(self):
        assert entry_size(_key("file"), "plik") == 8

    def test_ignores_language_and_namespace(self):
        key = TranslationKey("file", "pl-PL", 3, "admin")
        assert entry_size(key, "") == 4


class TestCacheBasics:
    """Tests for get / put / invalidate."""

    def test_default_budget(self, cache):
        assert cache.max_size_bytes == DEFAULT_MAX_CACHE_SIZE_BYTES == 8192 * 1024

    def test_get_miss(self, cache):
        assert cache.get(_key("file")) is None

    def test_put_then_get(self, cache):
        cache.put(_key("file"), "plik")
        assert cache.get(_key("file")) == "plik"
        assert cache.size_bytes == 8
        assert cache.count == 1
        assert _key("file") in cache

    def test_plural_indices_are_separate(self, cache):
        cache.put(_key("file", 1), "plik")
        cache.put(_key("file", 2), "pliki")
        assert cache.get(_key("file", 1)) == "plik"
        assert cache.get(_key("file", 2)) == "pliki"
        assert len(cache) == 2

    def test_overwrite_replaces_size(self, cache):
        cache.put(_key("file"), "plik")
        cache.put(_key("file"), "pliki")
        assert cache.get(_key("file")) == "pliki"
        assert cache.size_bytes == 9
        assert cache.count == 1

    def test_invalidate(self, cache):
        cache.put(_key("file"), "plik")
        assert cache.invalidate(_key("file")) is True
        assert cache.get(_key("file")) is None
        assert cache.size_bytes == 0

    def test_invalidate_absent_key(self, cache):
        assert cache.invalidate(_key("file")) is False
        assert cache.size_bytes == 0

    def test_empty_value_is_cached(self, cache):
        cache.put(_key("file"), "")
        assert cache.get(_key("file")) == ""


class TestCacheStatistics:
    """Tests for hit accounting."""

    def test_hit_ratio_before_queries_is_nan(self, cache):
        assert math.isnan(cache.hit_ratio())

    def test_hit_ratio(self, cache):
        cache.get(_key("file"))
        cache.put(_key("file"), "plik")
        cache.get(_key("file"))
        cache.get(_key("file"))
        cache.get(_key("other"))
        assert cache.total_queries == 4
        assert cache.total_hits == 2
        assert cache.hit_ratio() == 0.5

    def test_clear_keeps_counters(self, cache):
        cache.put(_key("file"), "plik")
        cache.get(_key("file"))
        cache.clear()
        assert cache.count == 0
        assert cache.size_bytes == 0
        assert cache.total_queries == 1
        assert cache.total_hits == 1

    def test_reset_zeroes_counters(self, cache):
        cache.put(_key("file"), "plik")
        cache.get(_key("file"))
        cache.reset()
        assert cache.count == 0
        assert cache.size_bytes == 0
        assert cache.total_queries == 0
        assert math.isnan(cache.hit_ratio())

    def test_get_stats(self, cache):
        cache.put(_key("file"), "plik")
        cache.get(_key("file"))
        stats = cache.get_stats()
        assert stats["entries"] == 1
        assert stats["size_bytes"] == 8
        assert stats["total_hits"] == 1
        assert stats["total_queries"] == 1
        assert stats["hit_ratio"] == 1.0


class TestCacheCapacity:
    """Tests for the clear-on-overflow policy."""

    def test_budget_may_be_exceeded_by_one_entry(self, small_cache):
        small_cache.put(_key("a" * 10), "b" * 11)
        assert small_cache.size_bytes == 21
        assert small_cache.count == 1

    def test_overflow_clears_before_insert(self, small_cache):
        on_full = MagicMock()
        small_cache.on_full = on_full
        small_cache.put(_key("a" * 10), "b" * 11)

        small_cache.put(_key("c"), "d")

        on_full.assert_called_once_with()
        assert small_cache.count == 1
        assert small_cache.size_bytes == 2
        assert small_cache.get(_key("c")) == "d"
        assert small_cache.get(_key("a" * 10)) is None

    def test_at_budget_does_not_clear(self, small_cache):
        on_full = MagicMock()
        small_cache.on_full = on_full
        small_cache.put(_key("a" * 10), "b" * 10)

        small_cache.put(_key("c"), "d")

        on_full.assert_not_called()
        assert small_cache.count == 2
        assert small_cache.size_bytes == 22

    def test_hook_runs_before_clear(self, small_cache):
        seen = []
        small_cache.on_full = lambda: seen.append(small_cache.count)
        small_cache.put(_key("a" * 10), "b" * 11)
        small_cache.put(_key("c"), "d")
        assert seen == [1]

    def test_hook_errors_are_not_propagated(self, small_cache):
        small_cache.on_full = MagicMock(side_effect=RuntimeError("monitor down"))
        small_cache.put(_key("a" * 10), "b" * 11)

        small_cache.put(_key("c"), "d")

        assert small_cache.count == 1
        assert small_cache.get(_key("c")) == "d"

    def test_zero_budget_clears_on_every_insert(self):
        cache = TranslationCache(max_size_bytes=0)
        cache.put(_key("a"), "b")
        cache.put(_key("c"), "d")
        assert cache.count == 1
        assert cache.get(_key("c")) == "d"
