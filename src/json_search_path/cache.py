"""ExpressionCache: LRU cache of parsed search paths.

Maps path text to its parsed ``PathExpression``.  A text that is already
cached skips the parser on subsequent lookups.  LRU eviction happens silently
when ``max_size`` is exceeded.

Each ``ExpressionCache`` instance owns its own ``LRUCache``; there is no
class-level shared state, so two instances never interfere with each other.
Texts that fail to parse are not cached: the ``PathSyntaxError`` propagates
on every lookup.

Example::

    from json_search_path.cache import ExpressionCache

    cache = ExpressionCache(max_size=128)
    expr = cache.compile("a.b[*]")        # parsed
    expr_again = cache.compile("a.b[*]")  # served from memory
    assert expr is expr_again
"""

from __future__ import annotations

import logging

from cachetools import LRUCache

from json_search_path.path.parser import PathParser
from json_search_path.path.segments import PathExpression

__all__ = ["ExpressionCache"]

logger = logging.getLogger(__name__)


class ExpressionCache:
    """LRU-backed cache from path text to ``PathExpression``.

    Args:
        max_size: Maximum number of parsed expressions to hold in memory.
            Defaults to 256.  Must be at least 1.
        parser: Parser used on cache misses.  Defaults to a fresh
            ``PathParser()``.

    Raises:
        ValueError: If ``max_size`` is smaller than 1.
    """

    def __init__(self, max_size: int = 256, parser: PathParser | None = None) -> None:
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            msg = f"max_size must be an int, got {max_size!r}"
            raise TypeError(msg)
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._parser = parser if parser is not None else PathParser()
        self._cache: LRUCache[str, PathExpression] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def compile(self, text: str) -> PathExpression:
        """Return the parsed expression for ``text``, parsing only on a miss.

        Raises:
            PathSyntaxError: If ``text`` is not a valid path.
        """
        expression = self._cache.get(text)
        if expression is None:
            logger.debug("Expression cache miss for %r", text)
            expression = self._parser.parse(text)
            self._cache[text] = expression
        return expression

    def __contains__(self, text: object) -> bool:
        return text in self._cache

    def clear(self) -> None:
        """Drop every cached expression."""
        self._cache.clear()
