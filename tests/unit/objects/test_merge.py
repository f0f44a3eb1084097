"""Tests for sundries.objects.merge."""
from datetime import datetime

from sundries.objects import merge


class TestMerge:
    """Deep merge of keyed values."""

    def test_no_inputs(self) -> None:
        assert merge() == {}

    def test_single_input_is_copied(self) -> None:
        source = {"a": {"b": [1]}}
        result = merge(source)
        assert result == source
        assert result["a"] is not source["a"]
        assert result["a"]["b"] is not source["a"]["b"]

    def test_nested_mappings_merge(self) -> None:
        result = merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "e": 4})
        assert result == {"a": 1, "b": {"c": 2, "d": 3}, "e": 4}

    def test_later_values_win(self) -> None:
        assert merge({"a": 1}, {"a": 2}, {"a": 3}) == {"a": 3}

    def test_lists_are_replaced_not_merged(self) -> None:
        assert merge({"l": [1, 2, 3]}, {"l": [4]}) == {"l": [4]}

    def test_none_overwrites(self) -> None:
        assert merge({"a": {"b": 1}}, {"a": None}) == {"a": None}

    def test_mapping_replaces_primitive(self) -> None:
        assert merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}

    def test_deeply_nested(self) -> None:
        result = merge(
            {"x": {"y": {"z": 1, "keep": True}}},
            {"x": {"y": {"z": 2}}},
        )
        assert result == {"x": {"y": {"z": 2, "keep": True}}}

    def test_inputs_not_mutated(self) -> None:
        first = {"a": {"b": 1}}
        second = {"a": {"c": 2}}
        merge(first, second)
        assert first == {"a": {"b": 1}}
        assert second == {"a": {"c": 2}}

    def test_result_shares_no_structure(self) -> None:
        moment = datetime(2024, 1, 1)
        second = {"when": moment, "items": [1]}
        result = merge({}, second)
        assert result["when"] == moment
        assert result["when"] is not moment
        assert result["items"] is not second["items"]

    def test_keys_never_removed(self) -> None:
        assert merge({"a": 1, "b": 2}, {}) == {"a": 1, "b": 2}
