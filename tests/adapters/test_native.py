"""Tests for NativeAdapter: the ValueAdapter over dict/list trees."""

from __future__ import annotations

from collections import OrderedDict
from types import MappingProxyType

import pytest

from json_search_path.adapters import NativeAdapter


@pytest.fixture
def adapter() -> NativeAdapter:
    return NativeAdapter()


class TestNodeKinds:
    @pytest.mark.parametrize(
        "node", [{}, {"a": 1}, OrderedDict(), MappingProxyType({})]
    )
    def test_objects(self, adapter: NativeAdapter, node: object) -> None:
        assert adapter.is_object(node)
        assert not adapter.is_array(node)
        assert not adapter.is_scalar(node)

    @pytest.mark.parametrize("node", [[], [1, 2], (1,), range(3)])
    def test_arrays(self, adapter: NativeAdapter, node: object) -> None:
        assert adapter.is_array(node)
        assert not adapter.is_object(node)
        assert not adapter.is_scalar(node)

    @pytest.mark.parametrize(
        "node", ["abc", b"abc", bytearray(b"x"), 1, 1.5, True, None]
    )
    def test_scalars(self, adapter: NativeAdapter, node: object) -> None:
        assert adapter.is_scalar(node)
        assert not adapter.is_object(node)
        assert not adapter.is_array(node)


class TestLookups:
    def test_members(self, adapter: NativeAdapter) -> None:
        node = {"b": 2, "a": 1}
        assert adapter.has_member(node, "a")
        assert not adapter.has_member(node, "c")
        assert adapter.get_member(node, "b") == 2
        assert list(adapter.iter_members(node)) == [("b", 2), ("a", 1)]
        assert adapter.length(node) == 2

    def test_missing_member_raises_key_error(self, adapter: NativeAdapter) -> None:
        with pytest.raises(KeyError):
            adapter.get_member({}, "a")

    def test_elements(self, adapter: NativeAdapter) -> None:
        node = [10, 20, 30]
        assert adapter.get_element(node, 2) == 30
        assert list(adapter.iter_elements(node)) == [10, 20, 30]
        assert adapter.length(node) == 3

    def test_out_of_range_raises_index_error(self, adapter: NativeAdapter) -> None:
        with pytest.raises(IndexError):
            adapter.get_element([1], 1)

    def test_negative_index_raises_index_error(self, adapter: NativeAdapter) -> None:
        with pytest.raises(IndexError):
            adapter.get_element([1, 2], -1)


class TestMutations:
    def test_set_member(self, adapter: NativeAdapter) -> None:
        node = {"a": 1}
        adapter.set_member(node, "a", 2)
        assert node == {"a": 2}

    def test_set_element(self, adapter: NativeAdapter) -> None:
        node = [1, 2]
        adapter.set_element(node, 0, 9)
        assert node == [9, 2]

    def test_remove_member_keeps_order(self, adapter: NativeAdapter) -> None:
        node = {"x": 1, "y": 2, "z": 3}
        assert adapter.remove_member(node, "y") == 2
        assert list(node) == ["x", "z"]

    def test_remove_element_compacts(self, adapter: NativeAdapter) -> None:
        node = [1, 2, 3]
        assert adapter.remove_element(node, 0) == 1
        assert node == [2, 3]

    def test_read_only_mapping_rejected(self, adapter: NativeAdapter) -> None:
        node = MappingProxyType({"a": 1})
        with pytest.raises(TypeError, match="MutableMapping"):
            adapter.set_member(node, "a", 2)
        with pytest.raises(TypeError):
            adapter.remove_member(node, "a")

    def test_tuple_rejected(self, adapter: NativeAdapter) -> None:
        with pytest.raises(TypeError, match="MutableSequence"):
            adapter.set_element((1, 2), 0, 3)
        with pytest.raises(TypeError):
            adapter.remove_element((1, 2), 0)
