"""Searcher: orchestrator that wires ExpressionCache + Resolver + executor.

This is the wiring layer between the path language, the resolver and the
executor on one side and the public API on the other.

Architecture:
- compile() turns path text into a PathExpression through a per-instance
  ExpressionCache, so a text used repeatedly is parsed once.
- resolve() / find_values() / first_match() compile the path and delegate to
  the Resolver configured with this instance's adapter and SearchConfig.
- get() / set() / remove() coerce their path argument to a ResolvedPath and
  delegate to the executor functions, which re-walk the tree on every call.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from json_search_path.adapters import NativeAdapter
from json_search_path.algorithm.config import SearchConfig
from json_search_path.algorithm.executor import get_value, remove_value, set_value
from json_search_path.algorithm.resolver import Resolver
from json_search_path.cache import ExpressionCache
from json_search_path.path.resolved import ResolvedPath
from json_search_path.path.segments import PathExpression

if TYPE_CHECKING:
    from json_search_path.protocols import ValueAdapter
    from json_search_path.result import Match, ResolutionResult

__all__ = ["Searcher"]

# Sentinel distinguishing "no default" from a default of None
_MISSING = object()


class Searcher:
    """Orchestrator for searching and editing JSON-like value trees.

    Two separate ``Searcher`` instances never share cache state; each owns
    its own ``ExpressionCache``.  The cache is not thread-safe: use one
    Searcher per thread, or the module-level functions in ``api``.

    Example::

        from json_search_path.searcher import Searcher

        searcher = Searcher()
        doc = {"users": [{"name": "Ada"}, {"name": "Linus", "email": "l@x"}]}
        searcher.find_values(doc, "users[*].email?")   # ["l@x"]

        for match in reversed(searcher.resolve(doc, "users[*]")):
            searcher.remove(doc, match.path)
        # doc == {"users": []}
    """

    def __init__(
        self,
        adapter: ValueAdapter | None = None,
        config: SearchConfig | None = None,
        max_cache_size: int = 256,
    ) -> None:
        """Initialise the searcher.

        Args:
            adapter: A ValueAdapter-conformant object.  Defaults to
                ``NativeAdapter()`` when None.
            config:  Resolution parameters.  Defaults to ``SearchConfig()``.
            max_cache_size: Maximum number of parsed expressions held in the
                per-instance LRU cache.  Must be >= 1.  Defaults to 256.
                This is an infrastructure parameter; it is NOT part of
                ``SearchConfig`` (which governs resolution behaviour only).

        Raises:
            ValueError: If ``max_cache_size`` is smaller than 1.
        """
        self._adapter: Any = adapter if adapter is not None else NativeAdapter()
        self._config: SearchConfig = config if config is not None else SearchConfig()
        self._cache = ExpressionCache(max_size=max_cache_size)
        self._resolver = Resolver(adapter=self._adapter, config=self._config)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def cache(self) -> ExpressionCache:
        return self._cache

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def compile(self, path: str | PathExpression) -> PathExpression:
        """Return ``path`` as a PathExpression, parsing text through the cache.

        Raises:
            PathSyntaxError: If ``path`` is text that does not parse.
            TypeError: If ``path`` is neither text nor a PathExpression.
        """
        if isinstance(path, PathExpression):
            return path
        if isinstance(path, str):
            return self._cache.compile(path)
        msg = f"Expected path text or a PathExpression, got {type(path).__name__}"
        raise TypeError(msg)

    def resolve(self, tree: Any, path: str | PathExpression) -> ResolutionResult:
        """Return every match of ``path`` in ``tree``, in traversal order."""
        return self._resolver.resolve(tree, self.compile(path))

    def find_values(self, tree: Any, path: str | PathExpression) -> list[Any]:
        """Return the value of every match of ``path`` in ``tree``."""
        return self.resolve(tree, path).values()

    def first_match(self, tree: Any, path: str | PathExpression) -> Match | None:
        """Return the first match of ``path`` in ``tree``, or None."""
        return self.resolve(tree, path).first()

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def get(
        self,
        tree: Any,
        path: ResolvedPath | str | Sequence[str | int],
        default: Any = _MISSING,
    ) -> Any:
        """Return the value at a concrete ``path``.

        Raises:
            PathNotFoundError: If the path does not exist and no ``default``
                is given.
        """
        resolved = self._to_resolved(path)
        if default is _MISSING:
            return get_value(tree, resolved, adapter=self._adapter)
        return get_value(tree, resolved, adapter=self._adapter, default=default)

    def set(
        self,
        tree: Any,
        path: ResolvedPath | str | Sequence[str | int],
        value: Any,
    ) -> None:
        """Replace the value at a concrete ``path`` with ``value``."""
        set_value(tree, self._to_resolved(path), value, adapter=self._adapter)

    def remove(
        self,
        tree: Any,
        path: ResolvedPath | str | Sequence[str | int],
    ) -> Any:
        """Delete the member or element at a concrete ``path`` and return it."""
        return remove_value(tree, self._to_resolved(path), adapter=self._adapter)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_resolved(path: ResolvedPath | str | Sequence[str | int]) -> ResolvedPath:
        """Coerce a path argument to ResolvedPath.

        Text is parsed as a concrete path (no wildcards or optional steps);
        any other sequence is taken as a list of key/index steps.
        """
        if isinstance(path, ResolvedPath):
            return path
        if isinstance(path, str):
            return ResolvedPath.parse(path)
        if isinstance(path, Sequence):
            return ResolvedPath.from_steps(path)
        msg = f"Expected a ResolvedPath, path text or steps, got {type(path).__name__}"
        raise TypeError(msg)
