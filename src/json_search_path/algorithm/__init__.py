"""algorithm subpackage: public API for path resolution and execution.

Provides the resolver, its configuration, and the get/set/remove executor.
Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from json_search_path.algorithm import Resolver, SearchConfig, set_value
    from json_search_path.path import parse

    doc = {"a": {"b": [10, 20]}}
    result = Resolver(config=SearchConfig()).resolve(doc, parse("a.b[*]"))
    for match in result:
        set_value(doc, match.path, match.value + 1)
    # doc == {"a": {"b": [11, 21]}}
"""

from __future__ import annotations

from json_search_path.algorithm.config import SearchConfig
from json_search_path.algorithm.executor import get_value, remove_value, set_value
from json_search_path.algorithm.resolver import Resolver

__all__ = ["Resolver", "SearchConfig", "get_value", "remove_value", "set_value"]
