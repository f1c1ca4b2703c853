"""ValueAdapter Protocol: the capability surface the core needs from a tree.

The resolver and executor never touch a concrete JSON type directly; they go
through an adapter.  Users can plug in their own tree types without inheriting
from any base class: any class with conformant methods passes ``isinstance``
checks.

Example::

    from json_search_path.protocols import ValueAdapter
    from json_search_path.adapters import NativeAdapter

    assert isinstance(NativeAdapter(), ValueAdapter)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueAdapter(Protocol):
    """Structural protocol for JSON-like value trees.

    Node-kind queries:
    - ``is_object`` / ``is_array`` / ``is_scalar`` are mutually exclusive and
      exhaustive; null counts as a scalar.

    Lookups (only called after the matching kind query returned True):
    - ``has_member`` / ``get_member`` address object members by key;
      ``get_member`` raises ``KeyError`` when the key is absent.
    - ``get_element`` addresses array elements by non-negative index and
      raises ``IndexError`` when out of range.
    - ``length`` is the member count of an object or element count of an array.
    - ``iter_members`` yields ``(key, value)`` pairs in insertion order;
      ``iter_elements`` yields elements in ascending index order.

    Mutations:
    - ``set_member`` / ``set_element`` replace an existing slot.
    - ``remove_member`` / ``remove_element`` delete a slot and return the
      removed value; arrays compact so no hole is left.
    """

    def is_object(self, node: Any) -> bool: ...

    def is_array(self, node: Any) -> bool: ...

    def is_scalar(self, node: Any) -> bool: ...

    def has_member(self, node: Any, key: str) -> bool: ...

    def get_member(self, node: Any, key: str) -> Any: ...

    def get_element(self, node: Any, index: int) -> Any: ...

    def length(self, node: Any) -> int: ...

    def iter_members(self, node: Any) -> Iterator[tuple[str, Any]]: ...

    def iter_elements(self, node: Any) -> Iterator[Any]: ...

    def set_member(self, node: Any, key: str, value: Any) -> None: ...

    def set_element(self, node: Any, index: int, value: Any) -> None: ...

    def remove_member(self, node: Any, key: str) -> Any: ...

    def remove_element(self, node: Any, index: int) -> Any: ...
