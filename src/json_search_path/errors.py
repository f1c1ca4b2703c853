"""Exception hierarchy for json-search-path.

Every error raised by the library derives from ``SearchPathError`` and also
from the builtin it specialises, so callers can catch either:

- ``PathSyntaxError``   (``ValueError``)  : malformed path text, parser only.
- ``ResolveError``      (``LookupError``) : strict-mode resolution failures.
- ``PathNotFoundError`` (``LookupError``) : a ResolvedPath no longer exists.
- ``RootMutationError`` (``ValueError``)  : set/remove addressed at the root.

In the default (lenient) mode the resolver never raises; an expression that
matches nothing produces an empty ``ResolutionResult``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_search_path.path.resolved import ResolvedPath

__all__ = [
    "MissingIndexError",
    "MissingKeyError",
    "NotAContainerError",
    "NotAnArrayError",
    "NotAnObjectError",
    "PathNotFoundError",
    "PathSyntaxError",
    "ResolveError",
    "RootMutationError",
    "SearchPathError",
]


class SearchPathError(Exception):
    """Base exception for all json-search-path errors."""


class PathSyntaxError(SearchPathError, ValueError):
    """Raised when path text does not follow the path grammar.

    Attributes:
        text:     The full text that was being parsed.
        position: Zero-based character offset of the offending character
                  (``len(text)`` when the text ended too early).
        expected: Human-readable description of what the parser expected.
    """

    def __init__(self, text: str, position: int, expected: str) -> None:
        self.text = text
        self.position = position
        self.expected = expected
        super().__init__(
            f"Invalid path {text!r} at position {position}: expected {expected}"
        )


class ResolveError(SearchPathError, LookupError):
    """Base class for strict-mode resolution failures.

    Attributes:
        path: Concrete prefix that was successfully walked before the failing
              segment.
    """

    def __init__(self, path: ResolvedPath, message: str) -> None:
        self.path = path
        super().__init__(message)


class NotAnObjectError(ResolveError):
    """A required key segment met a node that is not an object."""

    def __init__(self, path: ResolvedPath) -> None:
        super().__init__(path, f"Expected an object at '{path}'")


class NotAnArrayError(ResolveError):
    """A required index segment met a node that is not an array."""

    def __init__(self, path: ResolvedPath) -> None:
        super().__init__(path, f"Expected an array at '{path}'")


class NotAContainerError(ResolveError):
    """A wildcard segment met a scalar or null node."""

    def __init__(self, path: ResolvedPath) -> None:
        super().__init__(path, f"Expected an array or an object at '{path}'")


class MissingKeyError(ResolveError):
    """A required key segment named a member the object does not have."""

    def __init__(self, path: ResolvedPath, key: str) -> None:
        self.key = key
        super().__init__(path, f"Missing required key {key!r} at '{path}'")


class MissingIndexError(ResolveError):
    """A required index segment is outside the array bounds (or null-as-missing)."""

    def __init__(self, path: ResolvedPath, index: int) -> None:
        self.index = index
        super().__init__(path, f"Missing required index {index} at '{path}'")


class PathNotFoundError(SearchPathError, LookupError):
    """Raised by the executor when a ResolvedPath no longer addresses a value.

    This is the stale-path condition: the tree was mutated after resolution,
    or the path was never valid for this tree.

    Attributes:
        path:  The ResolvedPath that could not be walked.
        depth: Number of leading steps that were walked successfully.
    """

    def __init__(self, path: ResolvedPath, depth: int) -> None:
        self.path = path
        self.depth = depth
        step = path.steps[depth] if depth < len(path) else None
        super().__init__(
            f"Path '{path}' not found: step {depth} ({step!r}) is missing"
        )


class RootMutationError(SearchPathError, ValueError):
    """Raised when set/remove is asked to replace or delete the root value."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation} the root value in place; "
            "the root is owned by the caller"
        )
