"""JSON search paths: find, read, replace and remove values in JSON-like trees."""

from __future__ import annotations

import logging

from json_search_path.algorithm.config import SearchConfig
from json_search_path.api import (
    find_values,
    first_match,
    get,
    parse,
    remove,
    resolve,
    set_value,
)
from json_search_path.errors import (
    PathNotFoundError,
    PathSyntaxError,
    ResolveError,
    RootMutationError,
    SearchPathError,
)
from json_search_path.path import PathExpression, ResolvedPath, Segment, SegmentKind
from json_search_path.result import Match, ResolutionResult
from json_search_path.searcher import Searcher

# Library logging: emit nothing unless the application configures a handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "Match",
    "PathExpression",
    "PathNotFoundError",
    "PathSyntaxError",
    "ResolutionResult",
    "ResolveError",
    "ResolvedPath",
    "RootMutationError",
    "SearchConfig",
    "SearchPathError",
    "Searcher",
    "Segment",
    "SegmentKind",
    "find_values",
    "first_match",
    "get",
    "parse",
    "remove",
    "resolve",
    "set_value",
]
