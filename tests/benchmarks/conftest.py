"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 100-element flat array, 1,000-record catalogue, and a
10,000-leaf deeply nested tree.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_array(num_items: int) -> dict[str, Any]:
    """Generate ``{"items": [...]}`` with small objects."""
    return {"items": [{"id": i, "value": f"value_{i}"} for i in range(num_items)]}


def _make_catalogue(num_records: int) -> dict[str, Any]:
    """Generate a catalogue where every third record has a discount."""
    records: list[dict[str, Any]] = []
    for i in range(num_records):
        record: dict[str, Any] = {
            "sku": f"sku_{i}",
            "price": i * 3,
            "tags": [f"tag_{i % 7}", f"tag_{i % 11}"],
        }
        if i % 3 == 0:
            record["discount"] = {"percent": i % 50}
        records.append(record)
    return {"catalogue": {"records": records}}


def _make_nested_tree() -> dict[str, Any]:
    """Generate 10 sections x 10 groups x 10 rows x 10 leaves = 10,000 leaves."""
    return {
        f"section_{i}": {
            f"group_{j}": [
                {f"leaf_{k}": i * 1000 + j * 100 + r * 10 + k for k in range(10)}
                for r in range(10)
            ]
            for j in range(10)
        }
        for i in range(10)
    }


# --- Fixtures for each size tier ---


@pytest.fixture
def doc_100_items() -> dict[str, Any]:
    """100-element flat array."""
    return generate_flat_array(100)


@pytest.fixture
def doc_1000_records() -> dict[str, Any]:
    """1,000-record catalogue with optional discount members."""
    return _make_catalogue(1000)


@pytest.fixture
def doc_10000_leaves() -> dict[str, Any]:
    """10,000-leaf nested tree (objects of arrays of objects)."""
    return _make_nested_tree()
