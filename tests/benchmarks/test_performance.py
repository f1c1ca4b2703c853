"""Performance benchmark suite for json-search-path.

Timing tiers:
- 100-element flat array: wildcard fan-out with a key step
- 1,000-record catalogue: optional steps and nested wildcards
- 10,000-leaf nested tree: full fan-out over three wildcard levels

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

import copy

from json_search_path import Searcher, find_values, parse


class TestParsing:
    """Parser and expression cache throughput."""

    def test_parse_long_path(self, benchmark):  # type: ignore[no-untyped-def]
        text = ".".join(f"k{i}" for i in range(50)) + '[*]["quoted key"][3]?'
        expr = benchmark(parse, text)
        assert len(expr) == 53

    def test_cached_compile(self, benchmark):  # type: ignore[no-untyped-def]
        searcher = Searcher()
        expr = benchmark(searcher.compile, "catalogue.records[*].discount?.percent")
        assert searcher.cache.curr_size == 1
        assert len(expr) == 5


class TestResolve100Items:
    def test_wildcard_key(self, benchmark, doc_100_items):  # type: ignore[no-untyped-def]
        values = benchmark(find_values, doc_100_items, "items[*].id")
        assert values == list(range(100))


class TestResolve1000Records:
    def test_optional_discount(self, benchmark, doc_1000_records):  # type: ignore[no-untyped-def]
        values = benchmark(
            find_values, doc_1000_records, "catalogue.records[*].discount?.percent"
        )
        assert len(values) == 334

    def test_nested_wildcards(self, benchmark, doc_1000_records):  # type: ignore[no-untyped-def]
        values = benchmark(find_values, doc_1000_records, "catalogue.records[*].tags[*]")
        assert len(values) == 2000


class TestResolve10000Leaves:
    def test_full_fan_out(self, benchmark, doc_10000_leaves):  # type: ignore[no-untyped-def]
        searcher = Searcher()
        result = benchmark(searcher.resolve, doc_10000_leaves, "*.*[*].*")
        assert len(result) == 10_000

    def test_bulk_set(self, benchmark, doc_10000_leaves):  # type: ignore[no-untyped-def]
        searcher = Searcher()

        def run() -> None:
            doc = copy.deepcopy(doc_10000_leaves)
            for match in searcher.resolve(doc, "*.*[*].leaf_0"):
                searcher.set(doc, match.path, 0)

        benchmark(run)
