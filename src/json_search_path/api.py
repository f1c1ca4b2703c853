"""Public API functions for json-search-path.

This module provides the user-facing functions: parse, resolve, find_values,
first_match, get, set_value and remove.  Each call creates a fresh Searcher
to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from json_search_path.path.parser import parse as _parse
from json_search_path.searcher import Searcher

if TYPE_CHECKING:
    from json_search_path.algorithm.config import SearchConfig
    from json_search_path.path.resolved import ResolvedPath
    from json_search_path.path.segments import PathExpression
    from json_search_path.protocols import ValueAdapter
    from json_search_path.result import Match, ResolutionResult

__all__ = [
    "find_values",
    "first_match",
    "get",
    "parse",
    "remove",
    "resolve",
    "set_value",
]

_MISSING = object()


def parse(text: str) -> PathExpression:
    """Parse search-path text into a PathExpression.

    Args:
        text: Path text such as ``"a.b[*].c?"``.  A leading ``$`` is optional;
              ``""`` and ``"$"`` both denote the root.

    Returns:
        The parsed ``PathExpression``.

    Raises:
        PathSyntaxError: If ``text`` does not follow the path grammar.  The
            error carries the character ``position`` and what was ``expected``.
    """
    return _parse(text)


def resolve(
    tree: Any,
    path: str | PathExpression,
    config: SearchConfig | None = None,
    adapter: ValueAdapter | None = None,
) -> ResolutionResult:
    """Return every location in ``tree`` matched by ``path``.

    Matches come in a deterministic order: depth-first, arrays in ascending
    index order, objects in insertion order.

    Args:
        tree:    Root of the value tree (e.g. the output of ``json.loads``).
        path:    Path text or an already parsed PathExpression.
        config:  Resolution parameters.  Defaults to ``SearchConfig()``.
        adapter: ValueAdapter for non-native trees.  Defaults to
                 ``NativeAdapter()``.

    Returns:
        A ``ResolutionResult``; empty when nothing matched.
    """
    return Searcher(adapter=adapter, config=config).resolve(tree, path)


def find_values(
    tree: Any,
    path: str | PathExpression,
    config: SearchConfig | None = None,
    adapter: ValueAdapter | None = None,
) -> list[Any]:
    """Return the value of every match of ``path`` in ``tree``."""
    return resolve(tree, path, config=config, adapter=adapter).values()


def first_match(
    tree: Any,
    path: str | PathExpression,
    config: SearchConfig | None = None,
    adapter: ValueAdapter | None = None,
) -> Match | None:
    """Return the first match of ``path`` in ``tree``, or None."""
    return resolve(tree, path, config=config, adapter=adapter).first()


def get(
    tree: Any,
    path: ResolvedPath | str | Sequence[str | int],
    default: Any = _MISSING,
    adapter: ValueAdapter | None = None,
) -> Any:
    """Return the value at a concrete path.

    Args:
        tree:    Root of the value tree.
        path:    A ResolvedPath, concrete path text (``"a.b[0]"``) or a
                 sequence of steps (``["a", "b", 0]``).
        default: Returned when the path does not exist.  When omitted a
                 ``PathNotFoundError`` is raised instead.
        adapter: ValueAdapter for non-native trees.

    Raises:
        PathNotFoundError: If the path does not exist and no default is given.
    """
    searcher = Searcher(adapter=adapter)
    if default is _MISSING:
        return searcher.get(tree, path)
    return searcher.get(tree, path, default=default)


def set_value(
    tree: Any,
    path: ResolvedPath | str | Sequence[str | int],
    value: Any,
    adapter: ValueAdapter | None = None,
) -> None:
    """Replace the value at a concrete path with ``value``.

    The path must already exist: missing members or containers are never
    created.

    Raises:
        PathNotFoundError: If the path does not exist.
        RootMutationError: If the path is the root.
    """
    Searcher(adapter=adapter).set(tree, path, value)


def remove(
    tree: Any,
    path: ResolvedPath | str | Sequence[str | int],
    adapter: ValueAdapter | None = None,
) -> Any:
    """Delete the member or element at a concrete path and return it.

    Removing an array element shifts every later element down by one.  When
    removing several matches of one result, iterate ``reversed(result)`` so
    earlier removals do not shift the indices of later ones.

    Raises:
        PathNotFoundError: If the path does not exist.
        RootMutationError: If the path is the root.
    """
    return Searcher(adapter=adapter).remove(tree, path)
