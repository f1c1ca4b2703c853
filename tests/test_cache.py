"""Unit tests for ExpressionCache.

Tests cover:
- Cache hits (cached texts bypass the parser on subsequent lookups)
- LRU eviction (silent eviction at max_size; evicted texts re-parse)
- Instance isolation (separate ExpressionCache instances do not share state)
- Syntax errors are never cached
- Properties (max_size and curr_size return correct values)
- max_size validation
"""

from __future__ import annotations

import pytest

from json_search_path.cache import ExpressionCache
from json_search_path.errors import PathSyntaxError
from json_search_path.path.parser import PathParser
from json_search_path.path.segments import PathExpression

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


class _SpyParser(PathParser):
    """PathParser that records every text it is asked to parse."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def parse(self, text: str) -> PathExpression:
        self.calls.append(text)
        return super().parse(text)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCachedTextsNotReParsed:
    """Cached texts must never reach the parser again."""

    def test_no_parser_call_on_second_lookup(self) -> None:
        spy = _SpyParser()
        cache = ExpressionCache(parser=spy)
        first = cache.compile("a.b[*]")
        second = cache.compile("a.b[*]")

        assert spy.calls == ["a.b[*]"]
        assert first is second

    def test_distinct_texts_parse_separately(self) -> None:
        spy = _SpyParser()
        cache = ExpressionCache(parser=spy)
        cache.compile("a")
        cache.compile("$.a")

        assert spy.calls == ["a", "$.a"]
        assert cache.compile("a") == cache.compile("$.a")


class TestLRUEviction:
    """Least-recently-used texts are evicted silently at max_size."""

    def test_eviction_at_max_size(self) -> None:
        cache = ExpressionCache(max_size=2)
        cache.compile("a")
        cache.compile("b")
        cache.compile("c")

        assert cache.curr_size == 2
        assert "a" not in cache
        assert "b" in cache
        assert "c" in cache

    def test_recent_use_protects_entry(self) -> None:
        cache = ExpressionCache(max_size=2)
        cache.compile("a")
        cache.compile("b")
        cache.compile("a")  # "a" is now most recently used
        cache.compile("c")

        assert "a" in cache
        assert "b" not in cache

    def test_evicted_text_is_parsed_again(self) -> None:
        spy = _SpyParser()
        cache = ExpressionCache(max_size=1, parser=spy)
        cache.compile("a")
        cache.compile("b")
        cache.compile("a")

        assert spy.calls == ["a", "b", "a"]


class TestInstanceIsolation:
    def test_separate_instances_do_not_share(self) -> None:
        first = ExpressionCache()
        second = ExpressionCache()
        first.compile("a")

        assert "a" in first
        assert "a" not in second
        assert second.curr_size == 0


class TestSyntaxErrorsNotCached:
    def test_error_propagates_every_time(self) -> None:
        cache = ExpressionCache()
        for _ in range(2):
            with pytest.raises(PathSyntaxError):
                cache.compile("a.")
        assert cache.curr_size == 0


class TestProperties:
    def test_default_max_size(self) -> None:
        assert ExpressionCache().max_size == 256

    def test_custom_max_size(self) -> None:
        assert ExpressionCache(max_size=8).max_size == 8

    def test_curr_size_counts_entries(self) -> None:
        cache = ExpressionCache()
        assert cache.curr_size == 0
        cache.compile("a")
        cache.compile("b[0]")
        assert cache.curr_size == 2

    def test_clear(self) -> None:
        cache = ExpressionCache()
        cache.compile("a")
        cache.clear()
        assert cache.curr_size == 0
        assert "a" not in cache


class TestValidation:
    @pytest.mark.parametrize("size", [0, -1])
    def test_too_small_raises(self, size: int) -> None:
        with pytest.raises(ValueError, match="max_size must be >= 1"):
            ExpressionCache(max_size=size)

    @pytest.mark.parametrize("size", [True, 2.5, "8"])
    def test_non_int_raises(self, size: object) -> None:
        with pytest.raises(TypeError):
            ExpressionCache(max_size=size)  # type: ignore[arg-type]
