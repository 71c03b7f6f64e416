"""Unit tests for value classification and the recursive merge."""

from collections import OrderedDict
from types import MappingProxyType

import pytest

from flux_minimal.core.state.merge import ValueKind, classify, is_patch, merge_patch


class TestClassify:
    """ValueKind classification."""

    @pytest.mark.parametrize(
        "value",
        [{}, {"a": 1}, OrderedDict(a=1), MappingProxyType({"a": 1})],
    )
    def test_mappings(self, value) -> None:
        assert classify(value) is ValueKind.MAPPING

    @pytest.mark.parametrize("value", [[], [1, 2, 3], (1, 2)])
    def test_sequences(self, value) -> None:
        assert classify(value) is ValueKind.SEQUENCE

    @pytest.mark.parametrize("value", [None, 0, 42, 1.5, True, "text", b"bytes", {1, 2}])
    def test_leaves(self, value) -> None:
        """Strings and bytes are leaves even though they are sequences."""
        assert classify(value) is ValueKind.LEAF

    def test_is_patch(self) -> None:
        assert is_patch({"a": 1})
        assert not is_patch([{"a": 1}])
        assert not is_patch(None)


class TestMergePatch:
    """merge_patch behaviour on plain dicts."""

    def test_disjoint_keys_union(self) -> None:
        stem = {"a": 1}
        merge_patch({"b": 2}, stem)
        assert stem == {"a": 1, "b": 2}

    def test_none_deletes(self) -> None:
        stem = {"a": 1, "b": 2}
        merge_patch({"a": None}, stem)
        assert stem == {"b": 2}

    def test_none_for_missing_key_is_noop(self) -> None:
        stem = {"a": 1}
        merge_patch({"missing": None}, stem)
        assert stem == {"a": 1}

    def test_nested_merge_preserves_siblings(self) -> None:
        stem = {"a": {"x": 1, "y": 2}}
        merge_patch({"a": {"x": 10}}, stem)
        assert stem == {"a": {"x": 10, "y": 2}}

    def test_nested_merge_keeps_identity(self) -> None:
        """Nested mappings are merged in place, not replaced."""
        inner = {"x": 1}
        stem = {"a": inner}
        merge_patch({"a": {"y": 2}}, stem)
        assert stem["a"] is inner
        assert inner == {"x": 1, "y": 2}

    def test_deep_nesting(self) -> None:
        stem = {"a": {"b": {"c": {"d": 1, "e": 2}}}}
        merge_patch({"a": {"b": {"c": {"d": None, "f": 3}}}}, stem)
        assert stem == {"a": {"b": {"c": {"e": 2, "f": 3}}}}

    def test_lists_are_replaced_not_merged(self) -> None:
        stem = {"items": [1, 2, 3]}
        new_items = [4]
        merge_patch({"items": new_items}, stem)
        assert stem["items"] is new_items

    def test_mapping_replaces_list(self) -> None:
        stem = {"a": [1, 2]}
        merge_patch({"a": {"x": 1}}, stem)
        assert stem == {"a": {"x": 1}}

    def test_leaf_replaces_mapping(self) -> None:
        stem = {"a": {"x": 1}}
        merge_patch({"a": "flat"}, stem)
        assert stem == {"a": "flat"}

    def test_mapping_over_immutable_mapping_is_replaced(self) -> None:
        frozen = MappingProxyType({"x": 1})
        stem = {"a": frozen}
        merge_patch({"a": {"y": 2}}, stem)
        assert stem == {"a": {"y": 2}}

    def test_falsy_values_are_written(self) -> None:
        """Only None deletes; 0, False and empty strings are ordinary values."""
        stem = {"a": 1, "b": True, "c": "text"}
        merge_patch({"a": 0, "b": False, "c": ""}, stem)
        assert stem == {"a": 0, "b": False, "c": ""}

    def test_patch_is_the_stem(self) -> None:
        """A stem merged into itself drops its None keys without resizing errors."""
        stem = {"user": None, "a": 1, "b": None}
        merge_patch(stem, stem)
        assert stem == {"a": 1}

    def test_patch_is_a_subtree_of_the_stem(self) -> None:
        prefs = {"theme": "dark", "draft": "x"}
        stem = {"prefs": prefs}
        prefs["draft"] = None
        merge_patch({"prefs": prefs}, stem)
        assert stem == {"prefs": {"theme": "dark"}}
        assert stem["prefs"] is prefs
