"""Match and ResolutionResult dataclasses for resolver output.

A ResolutionResult is only valid for the tree state it was produced from:
after a structural mutation of that tree its paths may point elsewhere or
nowhere, and its values may be detached from the tree.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from json_search_path.path.resolved import ResolvedPath
from json_search_path.path.segments import PathExpression

__all__ = ["Match", "ResolutionResult"]


@dataclass(frozen=True, slots=True)
class Match:
    """One matched location.

    Attributes:
        path:  Concrete path of the matched node.
        value: The matched node itself (a live reference, not a copy).
    """

    path: ResolvedPath
    value: Any


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Ordered matches of a PathExpression against one tree.

    Order is depth-first and left-to-right over the segments; wildcards
    expand arrays in ascending index order and objects in insertion order.
    An empty result is the normal "nothing matched" outcome.

    Attributes:
        expression: The expression that was resolved.
        matches:    The matches, in traversal order.
    """

    expression: PathExpression
    matches: tuple[Match, ...] = field(default=())

    def paths(self) -> list[ResolvedPath]:
        return [m.path for m in self.matches]

    def values(self) -> list[Any]:
        return [m.value for m in self.matches]

    def first(self) -> Match | None:
        return self.matches[0] if self.matches else None

    def __len__(self) -> int:
        return len(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self.matches)

    def __reversed__(self) -> Iterator[Match]:
        return reversed(self.matches)

    def __getitem__(self, position: int) -> Match:
        return self.matches[position]
