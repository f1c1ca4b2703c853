"""Integration tests for the json-search-path pytest plugin.

These tests verify that the assert_json_search fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-search-path to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_search_path import SearchConfig


def test_fixture_passes_matching_values(assert_json_search: Any) -> None:
    """Values matched in traversal order should pass."""
    doc = {"users": [{"email": "a@x"}, {"name": "b"}, {"email": "c@x"}]}
    assert_json_search(doc, "users[*].email?", ["a@x", "c@x"])


def test_fixture_fails_on_different_values(assert_json_search: Any) -> None:
    """Different values should raise AssertionError."""
    with pytest.raises(AssertionError, match=r"did not match"):
        assert_json_search({"a": [1, 2]}, "a[*]", [2, 1])


def test_fixture_fails_on_no_match(assert_json_search: Any) -> None:
    """An empty result against non-empty expectations should fail."""
    with pytest.raises(AssertionError, match=r"\(none\)"):
        assert_json_search({"a": 1}, "b", [1])


def test_fixture_accepts_empty_expectation(assert_json_search: Any) -> None:
    """Expecting no values passes when nothing matches."""
    assert_json_search({"a": {}}, "a.c?", [])


def test_fixture_custom_config(assert_json_search: Any) -> None:
    """Custom SearchConfig parameter should be forwarded to resolve()."""
    doc = {"a": [1, None, 3]}
    assert_json_search(doc, "a[*]", [1, None, 3])
    assert_json_search(doc, "a[*]", [1, 3], config=SearchConfig(null_as_missing=True))


def test_fixture_error_message_contents(assert_json_search: Any) -> None:
    """AssertionError message should list the expected values and every match."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_search({"a": {"b": [5, 6]}}, "a.b[*]", [5])

    error_message = str(exc_info.value)
    assert "'a.b[*]'" in error_message
    assert "expected: [5]" in error_message
    assert "actual:   [5, 6]" in error_message
    assert "a.b[0]: 5" in error_message
    assert "a.b[1]: 6" in error_message


def test_fixture_returns_callable(assert_json_search: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_json_search), (
        "assert_json_search fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_search appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_search" in result.stdout, (
        f"assert_json_search not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
