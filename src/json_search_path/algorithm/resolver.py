"""Resolver: depth-first expansion of a PathExpression over a value tree.

Walks the tree one segment at a time, carrying the concrete prefix walked so
far:

- Segments exhausted: the current node is a match at the current prefix.
- KEY / OPTIONAL_KEY:     descend into the named member of an object.
- INDEX / OPTIONAL_INDEX: descend into the indexed element of an array.
- WILDCARD:               descend into every member (insertion order) or
                          every element (ascending index), one branch each.

Branch results are concatenated in traversal order, so the same tree and
expression always produce the same ordered result.

In the default (lenient) mode a segment that cannot be satisfied simply ends
its branch.  In strict mode a required segment that cannot be satisfied
raises a ResolveError; a failing branch under a wildcard is dropped and the
sibling branches are kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from json_search_path.adapters import NativeAdapter
from json_search_path.algorithm.config import SearchConfig
from json_search_path.errors import (
    MissingIndexError,
    MissingKeyError,
    NotAContainerError,
    NotAnArrayError,
    NotAnObjectError,
    ResolveError,
)
from json_search_path.path.resolved import ResolvedPath, Step
from json_search_path.result import Match, ResolutionResult

if TYPE_CHECKING:
    from json_search_path.path.segments import PathExpression, Segment
    from json_search_path.protocols import ValueAdapter

logger = logging.getLogger(__name__)

_ABSENT = object()


class Resolver:
    """Resolves PathExpressions against value trees.

    The resolver holds no per-call state; one instance can resolve any number
    of expressions against any number of trees.

    Example::

        from json_search_path.algorithm import Resolver
        from json_search_path.path import parse

        resolver = Resolver()
        result = resolver.resolve({"a": {"b": [10, 20]}}, parse("a.b[*]"))
        [str(p) for p in result.paths()]   # ["a.b[0]", "a.b[1]"]
        result.values()                    # [10, 20]
    """

    def __init__(
        self,
        adapter: ValueAdapter | None = None,
        config: SearchConfig | None = None,
    ) -> None:
        """Initialise the resolver.

        Args:
            adapter: A ValueAdapter-conformant object.  Defaults to
                ``NativeAdapter()`` when None.
            config:  Resolution parameters.  Defaults to ``SearchConfig()``.
        """
        self._adapter: Any = adapter if adapter is not None else NativeAdapter()
        self._config = config if config is not None else SearchConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, tree: Any, expression: PathExpression) -> ResolutionResult:
        """Return every location in ``tree`` matched by ``expression``.

        Args:
            tree:       Root of the value tree.  Only read, never mutated.
            expression: The parsed search path.

        Returns:
            A ResolutionResult; empty when nothing matched.

        Raises:
            ResolveError: Only in strict mode, when a required segment outside
                any wildcard fan-out cannot be satisfied.
        """
        matches: list[Match] = []
        self._walk(expression.segments, 0, tree, (), matches)
        logger.debug("Resolved '%s': %d match(es)", expression, len(matches))
        return ResolutionResult(expression=expression, matches=tuple(matches))

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def _walk(
        self,
        segments: tuple[Segment, ...],
        position: int,
        node: Any,
        prefix: tuple[Step, ...],
        out: list[Match],
    ) -> None:
        """Expand ``segments[position:]`` from ``node``, appending to ``out``."""
        if position == len(segments):
            out.append(Match(path=ResolvedPath(prefix), value=node))
            return

        segment = segments[position]

        if segment.is_key:
            self._walk_key(segments, position, node, prefix, out)
            return

        if segment.is_index:
            self._walk_index(segments, position, node, prefix, out)
            return

        # WILDCARD (the final SegmentKind variant)
        self._walk_wildcard(segments, position, node, prefix, out)

    def _walk_key(
        self,
        segments: tuple[Segment, ...],
        position: int,
        node: Any,
        prefix: tuple[Step, ...],
        out: list[Match],
    ) -> None:
        segment = segments[position]
        name = segment.name
        assert name is not None

        if not self._adapter.is_object(node):
            if self._raises(segment):
                raise NotAnObjectError(ResolvedPath(prefix))
            return

        child = _ABSENT
        if self._adapter.has_member(node, name):
            child = self._adapter.get_member(node, name)

        if child is _ABSENT or self._is_skipped_null(child):
            if self._raises(segment):
                raise MissingKeyError(ResolvedPath(prefix), name)
            return

        self._walk(segments, position + 1, child, (*prefix, name), out)

    def _walk_index(
        self,
        segments: tuple[Segment, ...],
        position: int,
        node: Any,
        prefix: tuple[Step, ...],
        out: list[Match],
    ) -> None:
        segment = segments[position]
        index = segment.index
        assert index is not None

        if not self._adapter.is_array(node):
            if self._raises(segment):
                raise NotAnArrayError(ResolvedPath(prefix))
            return

        child = _ABSENT
        if index < self._adapter.length(node):
            child = self._adapter.get_element(node, index)

        if child is _ABSENT or self._is_skipped_null(child):
            if self._raises(segment):
                raise MissingIndexError(ResolvedPath(prefix), index)
            return

        self._walk(segments, position + 1, child, (*prefix, index), out)

    def _walk_wildcard(
        self,
        segments: tuple[Segment, ...],
        position: int,
        node: Any,
        prefix: tuple[Step, ...],
        out: list[Match],
    ) -> None:
        children: Iterable[tuple[Step, Any]]
        if self._adapter.is_object(node):
            children = self._adapter.iter_members(node)
        elif self._adapter.is_array(node):
            children = enumerate(self._adapter.iter_elements(node))
        else:
            if self._config.strict:
                raise NotAContainerError(ResolvedPath(prefix))
            return

        for step, child in children:
            if self._is_skipped_null(child):
                continue
            try:
                self._walk(segments, position + 1, child, (*prefix, step), out)
            except ResolveError as exc:
                # A branch raises before it appends anything: every nested
                # wildcard catches its own branches.
                logger.debug("Dropping wildcard branch: %s", exc)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _raises(self, segment: Segment) -> bool:
        return self._config.strict and not segment.is_optional

    def _is_skipped_null(self, value: Any) -> bool:
        return self._config.null_as_missing and value is None
