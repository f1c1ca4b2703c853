"""SearchConfig: immutable resolver configuration.

SearchConfig is a frozen dataclass holding the resolution parameters.  It
governs algorithm behaviour only; infrastructure parameters such as the
expression cache size live on ``Searcher``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Immutable configuration for path resolution.

    Attributes:
        strict: When False (default) a required key or index that cannot be
            satisfied yields no match, exactly like an optional one.  When
            True it raises a ``ResolveError`` subclass naming the prefix where
            the walk stopped.  Optional segments never raise.
        null_as_missing: When True, a member or element whose value is JSON
            null is treated as absent by key and index steps, and wildcard
            expansion skips null children.  Default False.
    """

    strict: bool = False
    null_as_missing: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            msg = f"strict must be a bool, got {self.strict!r}"
            raise TypeError(msg)
        if not isinstance(self.null_as_missing, bool):
            msg = f"null_as_missing must be a bool, got {self.null_as_missing!r}"
            raise TypeError(msg)
