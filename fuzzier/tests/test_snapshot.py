"""Tests for the snapshot cache."""

from unittest.mock import MagicMock

import pytest

from fuzzier.models.candidate import Candidate
from fuzzier.services.snapshot import SnapshotCache


@pytest.fixture
def cache() -> SnapshotCache:
    return SnapshotCache()


@pytest.fixture
def enumerate_fn() -> MagicMock:
    return MagicMock(return_value=[Candidate.from_text("hello"), Candidate.from_text("help")])


class TestRefresh:
    """When the cache enumerates."""

    def test_first_use_enumerates(self, cache, enumerate_fn):
        result = cache.get_or_refresh("S", "h", enumerate_fn)
        enumerate_fn.assert_called_once_with("h")
        assert [c.id for c in result] == ["hello", "help"]

    def test_narrowing_reuses_snapshot(self, cache, enumerate_fn):
        """h, he, hel enumerate once."""
        for query in ["h", "he", "hel"]:
            cache.get_or_refresh("S", query, enumerate_fn)
        assert enumerate_fn.call_count == 1

    def test_unrelated_query_refreshes(self, cache, enumerate_fn):
        """h, x enumerate twice."""
        cache.get_or_refresh("S", "h", enumerate_fn)
        cache.get_or_refresh("S", "x", enumerate_fn)
        assert enumerate_fn.call_count == 2
        assert cache.get("S").prefix == "x"

    def test_backspace_refreshes(self, cache, enumerate_fn):
        """A shorter query is not a continuation of the stored prefix."""
        cache.get_or_refresh("S", "hel", enumerate_fn)
        cache.get_or_refresh("S", "he", enumerate_fn)
        assert enumerate_fn.call_count == 2

    def test_sources_cached_independently(self, cache, enumerate_fn):
        cache.get_or_refresh("A", "h", enumerate_fn)
        cache.get_or_refresh("B", "he", enumerate_fn)
        cache.get_or_refresh("A", "he", enumerate_fn)
        assert enumerate_fn.call_count == 2
        assert len(cache) == 2

    def test_empty_query_uses_existing_snapshot(self, cache, enumerate_fn):
        cache.get_or_refresh("S", "h", enumerate_fn)
        cache.get_or_refresh("S", "", enumerate_fn)
        assert enumerate_fn.call_count == 1

    def test_empty_query_without_snapshot_is_not_stored(self, cache, enumerate_fn):
        result = cache.get_or_refresh("S", "", enumerate_fn)
        assert len(result) == 2
        assert "S" not in cache

    def test_returned_list_is_a_copy(self, cache, enumerate_fn):
        first = cache.get_or_refresh("S", "h", enumerate_fn)
        first.clear()
        assert len(cache.get_or_refresh("S", "he", enumerate_fn)) == 2


class TestLifecycle:
    """Explicit clearing."""

    def test_clear_source(self, cache, enumerate_fn):
        cache.get_or_refresh("A", "h", enumerate_fn)
        cache.get_or_refresh("B", "h", enumerate_fn)
        cache.clear_source("A")
        assert "A" not in cache
        assert "B" in cache

    def test_clear_unknown_source(self, cache):
        cache.clear_source("missing")

    def test_reset(self, cache, enumerate_fn):
        cache.get_or_refresh("A", "h", enumerate_fn)
        cache.reset()
        assert len(cache) == 0
        cache.get_or_refresh("A", "he", enumerate_fn)
        assert enumerate_fn.call_count == 2

    def test_needs_refresh(self, cache, enumerate_fn):
        assert cache.needs_refresh("S", "h")
        assert not cache.needs_refresh("S", "")
        cache.get_or_refresh("S", "h", enumerate_fn)
        assert not cache.needs_refresh("S", "ha")
        assert cache.needs_refresh("S", "x")
