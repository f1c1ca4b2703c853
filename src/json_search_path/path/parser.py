"""PathParser: converts search-path text into a PathExpression.

Hand-written single-pass scanner over the dot/bracket grammar::

    a.b          KEY("a"), KEY("b")
    a.c?         KEY("a"), OPTIONAL_KEY("c")
    a[0]         KEY("a"), INDEX(0)
    a[5]?        KEY("a"), OPTIONAL_INDEX(5)
    a.*  a[*]    KEY("a"), WILDCARD
    ["a b"]      KEY("a b")        quoted form for keys that are not identifiers
    $.a  $       optional root marker; "" and "$" both denote the root

No whitespace is accepted.  Every failure raises PathSyntaxError carrying the
character offset and a description of what was expected there.
"""

from __future__ import annotations

import re

from json_search_path.errors import PathSyntaxError
from json_search_path.path.segments import IDENTIFIER_RE, PathExpression, Segment

__all__ = ["PathParser", "parse", "parse_concrete"]

_DIGITS = re.compile(r"[0-9]+")
_QUOTES = frozenset({'"', "'"})
_ESCAPABLE = frozenset({'"', "'", "\\"})

_STEP_START = "a key name, '*' or '['"


class PathParser:
    """Stateless parser for search-path text.

    Args:
        concrete_only: When True, wildcard and optional steps are rejected so
            that only paths addressing exactly one location are accepted.
            Used by ``ResolvedPath.parse``.

    Example::

        parser = PathParser()
        expr = parser.parse("a.b[*]")
        # expr.segments == (KEY("a"), KEY("b"), WILDCARD)
    """

    def __init__(self, concrete_only: bool = False) -> None:
        self._concrete_only = concrete_only

    def parse(self, text: str) -> PathExpression:
        """Parse ``text`` into a PathExpression.

        Args:
            text: Path text.  The empty string and ``"$"`` parse to the root.

        Returns:
            The parsed, immutable PathExpression.

        Raises:
            PathSyntaxError: If ``text`` does not follow the grammar.
            TypeError: If ``text`` is not a str.
        """
        if not isinstance(text, str):
            msg = f"Path text must be a str, got {type(text).__name__}"
            raise TypeError(msg)

        end = len(text)
        pos = 0
        need_separator = False

        if text.startswith("$"):
            pos = 1
            need_separator = True

        segments: list[Segment] = []
        while pos < end:
            if need_separator:
                ch = text[pos]
                if ch == ".":
                    pos += 1
                    if pos == end:
                        raise PathSyntaxError(text, pos, "a step after '.'")
                elif ch != "[":
                    raise PathSyntaxError(text, pos, "'.', '[' or end of path")

            segment, pos = self._parse_step(text, pos)
            segments.append(segment)
            need_separator = True

        return PathExpression(tuple(segments))

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _parse_step(self, text: str, pos: int) -> tuple[Segment, int]:
        """Parse one step starting at ``pos``; return it and the next offset."""
        ch = text[pos]

        if ch == "[":
            return self._parse_bracket(text, pos)

        if ch == "*":
            self._check_concrete(text, pos)
            pos += 1
            self._reject_optional_wildcard(text, pos)
            return Segment.wildcard(), pos

        match = IDENTIFIER_RE.match(text, pos)
        if match is not None:
            name = match.group()
            pos = match.end()
            optional, pos = self._optional_marker(text, pos)
            return Segment.key(name, optional=optional), pos

        if "0" <= ch <= "9":
            raise PathSyntaxError(
                text, pos, f"{_STEP_START} (write array indices as [n])"
            )
        raise PathSyntaxError(text, pos, _STEP_START)

    def _parse_bracket(self, text: str, pos: int) -> tuple[Segment, int]:
        """Parse ``[n]``, ``[*]`` or ``["key"]`` (each optionally followed by ?)."""
        pos += 1  # consume "["
        if pos == len(text):
            raise PathSyntaxError(text, pos, "an index, '*' or a quoted key")

        ch = text[pos]

        if ch == "*":
            self._check_concrete(text, pos)
            pos = self._expect_close(text, pos + 1)
            self._reject_optional_wildcard(text, pos)
            return Segment.wildcard(), pos

        if "0" <= ch <= "9":
            match = _DIGITS.match(text, pos)
            assert match is not None
            digits = match.group()
            if len(digits) > 1 and digits.startswith("0"):
                raise PathSyntaxError(text, pos, "an index without leading zeros")
            pos = self._expect_close(text, match.end())
            optional, pos = self._optional_marker(text, pos)
            return Segment.idx(int(digits), optional=optional), pos

        if ch == "-":
            raise PathSyntaxError(text, pos, "a non-negative index")

        if ch in _QUOTES:
            name, pos = self._parse_quoted(text, pos)
            pos = self._expect_close(text, pos)
            optional, pos = self._optional_marker(text, pos)
            return Segment.key(name, optional=optional), pos

        raise PathSyntaxError(text, pos, "an index, '*' or a quoted key")

    def _parse_quoted(self, text: str, pos: int) -> tuple[str, int]:
        """Parse a quoted key body starting at the opening quote."""
        quote = text[pos]
        pos += 1
        chars: list[str] = []
        while pos < len(text):
            ch = text[pos]
            if ch == quote:
                return "".join(chars), pos + 1
            if ch == "\\":
                pos += 1
                if pos == len(text) or text[pos] not in _ESCAPABLE:
                    raise PathSyntaxError(
                        text, pos, "an escaped quote or backslash after '\\'"
                    )
                ch = text[pos]
            chars.append(ch)
            pos += 1
        raise PathSyntaxError(text, pos, f"closing {quote}")

    # ------------------------------------------------------------------
    # Small token helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _expect_close(text: str, pos: int) -> int:
        if pos == len(text) or text[pos] != "]":
            raise PathSyntaxError(text, pos, "']'")
        return pos + 1

    def _optional_marker(self, text: str, pos: int) -> tuple[bool, int]:
        if pos < len(text) and text[pos] == "?":
            self._check_concrete(text, pos)
            return True, pos + 1
        return False, pos

    def _check_concrete(self, text: str, pos: int) -> None:
        if self._concrete_only:
            raise PathSyntaxError(
                text, pos, "a concrete key or index (no wildcard or optional step)"
            )

    @staticmethod
    def _reject_optional_wildcard(text: str, pos: int) -> None:
        if pos < len(text) and text[pos] == "?":
            raise PathSyntaxError(
                text, pos, "'.', '[' or end of path (a wildcard cannot be optional)"
            )


# Module-level parsers (stateless, safe to share)
_parser = PathParser()
_concrete_parser = PathParser(concrete_only=True)


def parse(text: str) -> PathExpression:
    """Parse ``text`` into a PathExpression (see PathParser.parse)."""
    return _parser.parse(text)


def parse_concrete(text: str) -> PathExpression:
    """Parse ``text`` accepting only required keys and indices."""
    return _concrete_parser.parse(text)
