"""Tests for the keyed-value helpers: entries, keys, values, defaults, omit, pick, transform_keys."""
from dataclasses import dataclass

from sundries.core.types import MISSING
from sundries.objects import (
    defaults,
    entries,
    keys,
    omit,
    own_items,
    pick,
    transform_keys,
    values,
)


@dataclass
class Account:
    owner: str
    limits: dict[str, int]


class TestOwnData:
    """entries, keys and values over different keyed values."""

    def test_entries_of_dict(self) -> None:
        assert entries({"a": 1, "b": 2}) == [("a", 1), ("b", 2)]

    def test_entries_are_cloned(self) -> None:
        source = {"a": [1]}
        (_, value), = entries(source)
        assert value == [1]
        assert value is not source["a"]

    def test_keys_and_values_keep_insertion_order(self) -> None:
        source = {"z": 1, "a": 2, "m": 3}
        assert keys(source) == ["z", "a", "m"]
        assert values(source) == [1, 2, 3]

    def test_object_attributes(self) -> None:
        account = Account("ada", {"daily": 10})
        assert keys(account) == ["owner", "limits"]
        assert values(account) == ["ada", {"daily": 10}]

    def test_non_keyed_values_have_no_data(self) -> None:
        assert entries(42) == []
        assert keys([1, 2]) == []
        assert values("text") == []
        assert own_items(None) == []


class TestDefaults:
    """defaults fills only absent keys."""

    def test_fills_missing_keys(self) -> None:
        assert defaults({"a": 1}, {"a": 9, "b": 2}) == {"a": 1, "b": 2}

    def test_missing_marker_counts_as_absent(self) -> None:
        assert defaults({"a": MISSING}, {"a": 5}) == {"a": 5}

    def test_falsy_values_are_kept(self) -> None:
        result = defaults(
            {"a": None, "b": 0, "c": False, "d": ""},
            {"a": 1, "b": 1, "c": True, "d": "x"},
        )
        assert result == {"a": None, "b": 0, "c": False, "d": ""}

    def test_inputs_untouched(self) -> None:
        obj = {"a": 1}
        fallback = {"b": [2]}
        result = defaults(obj, fallback)
        assert obj == {"a": 1}
        assert result["b"] is not fallback["b"]


class TestOmitAndPick:
    """Key selection."""

    def test_omit(self) -> None:
        assert omit({"a": 1, "b": 2, "c": 3}, ["b"]) == {"a": 1, "c": 3}

    def test_omit_unknown_key(self) -> None:
        assert omit({"a": 1}, ["zzz"]) == {"a": 1}

    def test_omit_deep_copies(self) -> None:
        source = {"a": {"nested": 1}, "b": 2}
        result = omit(source, ["b"])
        assert result["a"] is not source["a"]

    def test_pick(self) -> None:
        assert pick({"a": 1, "b": 2, "c": 3}, ["a", "c"]) == {"a": 1, "c": 3}

    def test_pick_skips_absent_keys(self) -> None:
        assert pick({"a": 1}, ["a", "b"]) == {"a": 1}

    def test_pick_from_object(self) -> None:
        assert pick(Account("ada", {}), ["owner"]) == {"owner": "ada"}


class TestTransformKeys:
    """Recursive key renaming."""

    def test_renames_nested_keys(self) -> None:
        result = transform_keys({"a": 1, "b": {"c": 2}}, str.upper)
        assert result == {"A": 1, "B": {"C": 2}}

    def test_sequences_are_not_descended(self) -> None:
        result = transform_keys({"items": [{"x": 1}]}, str.upper)
        assert result == {"ITEMS": [{"x": 1}]}

    def test_objects_are_descended(self) -> None:
        result = transform_keys({"acct": Account("ada", {"daily": 1})}, str.upper)
        assert result == {"ACCT": {"OWNER": "ada", "LIMITS": {"DAILY": 1}}}

    def test_input_untouched(self) -> None:
        source = {"a": {"b": 1}}
        transform_keys(source, str.upper)
        assert source == {"a": {"b": 1}}
