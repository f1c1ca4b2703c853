"""Segment model: SegmentKind StrEnum, Segment and PathExpression dataclasses.

A search path is an ordered sequence of segments.  Each segment is one step
of the walk and is one of five kinds:

- KEY            -> "key"            : object member, required
- OPTIONAL_KEY   -> "optional_key"   : object member that may be absent
- INDEX          -> "index"          : array element, required
- OPTIONAL_INDEX -> "optional_index" : array element that may be out of range
- WILDCARD       -> "wildcard"       : every member / every element

Whether a segment applies to an object or an array is decided while walking
a tree, never while parsing.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["IDENTIFIER_RE", "PathExpression", "Segment", "SegmentKind"]

# Keys matching this pattern serialize bare ("a.b"); everything else is
# written in the quoted bracket form (["a b"]).
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")


class SegmentKind(StrEnum):
    """Enumeration of the five segment kinds of a search path."""

    KEY = auto()
    OPTIONAL_KEY = auto()
    INDEX = auto()
    OPTIONAL_INDEX = auto()
    WILDCARD = auto()


_KEY_KINDS = frozenset({SegmentKind.KEY, SegmentKind.OPTIONAL_KEY})
_INDEX_KINDS = frozenset({SegmentKind.INDEX, SegmentKind.OPTIONAL_INDEX})
_OPTIONAL_KINDS = frozenset({SegmentKind.OPTIONAL_KEY, SegmentKind.OPTIONAL_INDEX})


def quote_key(key: str) -> str:
    """Return ``key`` as a double-quoted bracket body with escapes applied."""
    escaped = key.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True, slots=True)
class Segment:
    """One typed step of a search path.

    Attributes:
        kind:  Which kind of step this is (see SegmentKind).
        name:  Member name for KEY / OPTIONAL_KEY; None for all others.
        index: Element position for INDEX / OPTIONAL_INDEX; None for all others.

    Prefer the ``key``, ``idx`` and ``wildcard`` constructors over calling the
    class directly.
    """

    kind: SegmentKind
    name: str | None = None
    index: int | None = None

    def __post_init__(self) -> None:
        if self.kind in _KEY_KINDS:
            if not isinstance(self.name, str):
                msg = f"{self.kind} segment requires a str name, got {self.name!r}"
                raise TypeError(msg)
            if self.index is not None:
                msg = f"{self.kind} segment cannot carry an index"
                raise ValueError(msg)
        elif self.kind in _INDEX_KINDS:
            # bool is a subclass of int and must not be accepted as an index
            if not isinstance(self.index, int) or isinstance(self.index, bool):
                msg = f"{self.kind} segment requires an int index, got {self.index!r}"
                raise TypeError(msg)
            if self.index < 0:
                msg = f"{self.kind} segment index must be >= 0, got {self.index}"
                raise ValueError(msg)
            if self.name is not None:
                msg = f"{self.kind} segment cannot carry a name"
                raise ValueError(msg)
        elif self.name is not None or self.index is not None:
            msg = "wildcard segment carries neither a name nor an index"
            raise ValueError(msg)

    @classmethod
    def key(cls, name: str, optional: bool = False) -> Segment:
        kind = SegmentKind.OPTIONAL_KEY if optional else SegmentKind.KEY
        return cls(kind=kind, name=name)

    @classmethod
    def idx(cls, index: int, optional: bool = False) -> Segment:
        kind = SegmentKind.OPTIONAL_INDEX if optional else SegmentKind.INDEX
        return cls(kind=kind, index=index)

    @classmethod
    def wildcard(cls) -> Segment:
        return cls(kind=SegmentKind.WILDCARD)

    @property
    def is_key(self) -> bool:
        return self.kind in _KEY_KINDS

    @property
    def is_index(self) -> bool:
        return self.kind in _INDEX_KINDS

    @property
    def is_wildcard(self) -> bool:
        return self.kind == SegmentKind.WILDCARD

    @property
    def is_optional(self) -> bool:
        return self.kind in _OPTIONAL_KINDS

    def __str__(self) -> str:
        """Canonical text of this single step, without any leading separator."""
        suffix = "?" if self.is_optional else ""
        if self.is_key:
            assert self.name is not None
            if IDENTIFIER_RE.fullmatch(self.name):
                return f"{self.name}{suffix}"
            return f"[{quote_key(self.name)}]{suffix}"
        if self.is_index:
            return f"[{self.index}]{suffix}"
        return "[*]"


@dataclass(frozen=True, slots=True)
class PathExpression:
    """An immutable, ordered sequence of segments.

    The empty expression denotes the root value itself.  Expressions are
    hashable and can be reused against any number of documents.

    Example::

        expr = PathExpression.parse("users[*].email?")
        len(expr)    # 3
        str(expr)    # "users[*].email?"
    """

    segments: tuple[Segment, ...] = ()

    @classmethod
    def parse(cls, text: str) -> PathExpression:
        """Parse path text; raises PathSyntaxError on malformed input."""
        from json_search_path.path.parser import parse

        return parse(text)

    @classmethod
    def from_steps(cls, steps: Iterable[str | int]) -> PathExpression:
        """Build a required KEY/INDEX expression from concrete steps.

        ``str`` steps become KEY segments and ``int`` steps INDEX segments.
        """
        segments: list[Segment] = []
        for step in steps:
            if isinstance(step, str):
                segments.append(Segment.key(step))
            else:
                segments.append(Segment.idx(step))
        return cls(tuple(segments))

    @property
    def is_concrete(self) -> bool:
        """True when no segment is a wildcard or optional."""
        return not any(s.is_wildcard or s.is_optional for s in self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, position: int) -> Segment:
        return self.segments[position]

    def __str__(self) -> str:
        return format_segments(self.segments)


def format_segments(segments: Iterable[Segment]) -> str:
    """Join segments into canonical path text.

    Bare key steps are separated by ``.``; bracket steps attach directly to
    the previous step.
    """
    parts: list[str] = []
    for segment in segments:
        text = str(segment)
        if parts and not text.startswith("["):
            parts.append(".")
        parts.append(text)
    return "".join(parts)
