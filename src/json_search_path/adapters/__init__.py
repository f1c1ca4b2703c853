"""Adapters subpackage for json-search-path.

The base install provides ``NativeAdapter``, which serves the dict/list trees
produced by ``json.loads``.  Other tree types plug in by implementing the
``ValueAdapter`` Protocol from ``json_search_path.protocols``; no inheritance
is required.
"""

from json_search_path.adapters.native import NativeAdapter

__all__ = ["NativeAdapter"]
