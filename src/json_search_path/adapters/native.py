"""NativeAdapter: ValueAdapter over plain Python JSON values.

Serves the trees produced by ``json.loads`` and anything shaped like them:

- any ``collections.abc.Mapping`` is an object,
- any ``collections.abc.Sequence`` except ``str``, ``bytes`` and
  ``bytearray`` is an array,
- everything else (str, int, float, bool, None, ...) is a scalar.

Reads work on the read-only ABCs; mutations require ``MutableMapping`` /
``MutableSequence`` and raise ``TypeError`` on immutable containers such as
tuples or ``MappingProxyType``.

This adapter satisfies the ValueAdapter Protocol structurally without
inheriting from it.
"""

from __future__ import annotations

from collections.abc import (
    Iterator,
    Mapping,
    MutableMapping,
    MutableSequence,
    Sequence,
)
from typing import Any

_STRING_TYPES = (str, bytes, bytearray)


class NativeAdapter:
    """ValueAdapter for dict/list trees.

    Stateless; a single instance may be shared across threads and trees.

    Example::

        from json_search_path.adapters import NativeAdapter

        adapter = NativeAdapter()
        adapter.is_object({"a": 1})        # True
        adapter.is_array("abc")            # False, strings are scalars
        adapter.get_element([10, 20], 1)   # 20
    """

    # ------------------------------------------------------------------
    # Node kinds
    # ------------------------------------------------------------------

    def is_object(self, node: Any) -> bool:
        return isinstance(node, Mapping)

    def is_array(self, node: Any) -> bool:
        return isinstance(node, Sequence) and not isinstance(node, _STRING_TYPES)

    def is_scalar(self, node: Any) -> bool:
        return not self.is_object(node) and not self.is_array(node)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def has_member(self, node: Any, key: str) -> bool:
        return key in node

    def get_member(self, node: Any, key: str) -> Any:
        return node[key]

    def get_element(self, node: Any, index: int) -> Any:
        # Sequences accept negative indices; array steps never do.
        if index < 0:
            msg = f"negative index {index}"
            raise IndexError(msg)
        return node[index]

    def length(self, node: Any) -> int:
        return len(node)

    def iter_members(self, node: Any) -> Iterator[tuple[str, Any]]:
        return iter(node.items())

    def iter_elements(self, node: Any) -> Iterator[Any]:
        return iter(node)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_member(self, node: Any, key: str, value: Any) -> None:
        _require(node, MutableMapping)
        node[key] = value

    def set_element(self, node: Any, index: int, value: Any) -> None:
        _require(node, MutableSequence)
        node[index] = value

    def remove_member(self, node: Any, key: str) -> Any:
        _require(node, MutableMapping)
        return node.pop(key)

    def remove_element(self, node: Any, index: int) -> Any:
        _require(node, MutableSequence)
        return node.pop(index)


def _require(node: Any, abc: type) -> None:
    if not isinstance(node, abc):
        msg = f"Cannot mutate {type(node).__name__!r}: expected a {abc.__name__}"
        raise TypeError(msg)
