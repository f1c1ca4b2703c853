"""ResolvedPath: a concrete, wildcard-free location inside one document.

A ResolvedPath is a plain tuple of owned steps (``str`` keys and ``int``
indices).  It holds no reference into the tree, so it stays safe to keep
after the tree is mutated; it just may no longer address anything, which the
executor reports as PathNotFoundError.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from json_search_path.path.parser import parse_concrete
from json_search_path.path.segments import PathExpression, Segment, format_segments

__all__ = ["ResolvedPath", "Step"]

Step = str | int


def _check_step(step: object) -> Step:
    # bool is a subclass of int and is not a valid index
    if isinstance(step, bool) or not isinstance(step, (str, int)):
        msg = f"Path steps must be str or int, got {step!r}"
        raise TypeError(msg)
    if isinstance(step, int) and step < 0:
        msg = f"Index steps must be >= 0, got {step}"
        raise ValueError(msg)
    return step


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """Ordered sequence of concrete key/index steps.

    Attributes:
        steps: ``str`` steps address object members, ``int`` steps address
               array elements.  The empty tuple addresses the root.

    Example::

        path = ResolvedPath(("a", "b", 0))
        str(path)            # "a.b[0]"
        path.to_pointer()    # "/a/b/0"
        path.parent          # ResolvedPath(steps=('a', 'b'))
    """

    steps: tuple[Step, ...] = ()

    def __post_init__(self) -> None:
        for step in self.steps:
            _check_step(step)

    @classmethod
    def from_steps(cls, steps: Iterable[Step]) -> ResolvedPath:
        return cls(tuple(steps))

    @classmethod
    def parse(cls, text: str) -> ResolvedPath:
        """Parse concrete path text such as ``"a.b[0]"``.

        Only required keys and indices are allowed; wildcards and optional
        markers raise PathSyntaxError.
        """
        steps: list[Step] = []
        for segment in parse_concrete(text):
            step = segment.name if segment.is_key else segment.index
            assert step is not None
            steps.append(step)
        return cls(tuple(steps))

    @property
    def parent(self) -> ResolvedPath | None:
        """The path one step up, or None for the root."""
        if not self.steps:
            return None
        return ResolvedPath(self.steps[:-1])

    @property
    def last(self) -> Step | None:
        """The final step, or None for the root."""
        return self.steps[-1] if self.steps else None

    def child(self, step: Step) -> ResolvedPath:
        """Return a new path extended by ``step``."""
        return ResolvedPath((*self.steps, _check_step(step)))

    def to_expression(self) -> PathExpression:
        """Return the equivalent required KEY/INDEX PathExpression."""
        return PathExpression.from_steps(self.steps)

    def to_pointer(self) -> str:
        """Return the RFC 6901 JSON Pointer for this path ("" for the root)."""
        tokens = (
            str(step).replace("~", "~0").replace("/", "~1") for step in self.steps
        )
        return "".join(f"/{token}" for token in tokens)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __getitem__(self, position: int) -> Step:
        return self.steps[position]

    def __str__(self) -> str:
        return format_segments(
            Segment.key(step) if isinstance(step, str) else Segment.idx(step)
            for step in self.steps
        )
