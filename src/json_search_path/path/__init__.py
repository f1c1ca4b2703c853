"""Path subpackage: the search-path language and its in-memory model.

Re-exports the public API for the path module:
- SegmentKind: StrEnum of the five segment kinds
- Segment: one typed step (key, index, wildcard, or optional key/index)
- PathExpression: immutable ordered sequence of segments
- PathParser / parse: text to PathExpression
- ResolvedPath: concrete key/index steps addressing one location
"""

from json_search_path.path.parser import PathParser, parse
from json_search_path.path.resolved import ResolvedPath
from json_search_path.path.segments import PathExpression, Segment, SegmentKind

__all__ = [
    "PathExpression",
    "PathParser",
    "ResolvedPath",
    "Segment",
    "SegmentKind",
    "parse",
]
