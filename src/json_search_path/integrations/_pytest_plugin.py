"""pytest plugin for json-search-path.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_search_path import SearchConfig, resolve


@pytest.fixture(scope="session")
def assert_json_search() -> Any:
    """Fixture that returns a callable search-path asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to resolve() which creates a fresh Searcher per call).

    Usage in tests::

        def test_emails(assert_json_search):
            doc = {"users": [{"email": "a@x"}, {"name": "b"}]}
            assert_json_search(doc, "users[*].email?", ["a@x"])

        def test_missing(assert_json_search):
            with pytest.raises(AssertionError, match=r"matched:"):
                assert_json_search({"a": 1}, "b", [1])

    Returns:
        A callable ``_assert(document, path, expected_values, config=None) -> None``
        that raises ``AssertionError`` when the matched values differ from
        ``expected_values`` (compared in order).
    """

    def _assert(
        document: Any,
        path: str,
        expected_values: list[Any],
        config: SearchConfig | None = None,
    ) -> None:
        """Assert that ``path`` matches exactly ``expected_values`` in ``document``.

        Args:
            document:        The JSON value produced by the code under test.
            path:            Search-path text.
            expected_values: The values every match should have, in traversal
                             order.
            config:          Optional SearchConfig for strict / null handling.

        Raises:
            AssertionError: When the matched values differ, with a message
                listing the path, the expected values and every match found.
        """
        result = resolve(document, path, config=config)
        actual = result.values()
        if actual != list(expected_values):
            found = "\n".join(
                f"    {match.path}: {match.value!r}" for match in result
            ) or "    (none)"
            raise AssertionError(
                f"Search path {path!r} did not match the expected values\n"
                f"  expected: {list(expected_values)!r}\n"
                f"  actual:   {actual!r}\n"
                f"  matched:\n{found}"
            )

    return _assert
