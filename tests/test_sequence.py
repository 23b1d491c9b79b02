# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import json
from decimal import Decimal
from fractions import Fraction

import pytest

from fluentkit import (
    FluentMap,
    FluentSequence,
    FluentText,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NonContiguousIndexError,
    SortFlag,
    TypeMismatchError,
    override_settings,
)
from fluentkit.sequence import UnsupportedInputError

pytestmark = pytest.mark.unit


def test_filter_keeps_matches_and_reindexes() -> None:
    seq = FluentSequence([1, 2, 3, 4])
    evens = seq.filter(lambda value: value % 2 == 0)
    assert evens == [2, 4]
    assert evens.keys() == [0, 1]
    assert seq == [1, 2, 3, 4]


def test_map_returns_new_wrapper() -> None:
    seq = FluentSequence([1, 2, 3])
    doubled = seq.map(lambda value: value * 2)
    assert doubled == [2, 4, 6]
    assert doubled is not seq


def test_constructor_copies_input() -> None:
    raw = [1, 2]
    seq = FluentSequence(raw)
    raw.append(3)
    assert seq == [1, 2]
    out = seq.to_raw()
    out.append(9)
    assert len(seq) == 2


def test_constructor_accepts_tuple_wrapper_and_list_shaped_mapping() -> None:
    assert FluentSequence((1, 2)) == [1, 2]
    assert FluentSequence(FluentSequence(["a"])) == ["a"]
    assert FluentSequence({1: "b", 0: "a"}) == ["a", "b"]
    assert FluentSequence() == []


def test_constructor_rejects_non_contiguous_mapping() -> None:
    with pytest.raises(NonContiguousIndexError) as excinfo:
        _ = FluentSequence({0: "x", 2: "y"})
    assert excinfo.value.keys == (0, 2)
    assert isinstance(excinfo.value, InvalidArgumentError)


def test_constructor_rejects_string_keys_and_scalars() -> None:
    with pytest.raises(NonContiguousIndexError):
        _ = FluentSequence({"a": 1})
    with pytest.raises(UnsupportedInputError) as excinfo:
        _ = FluentSequence("abc")  # type: ignore[arg-type]
    assert isinstance(excinfo.value, TypeMismatchError)
    assert "str" in str(excinfo.value)


@pytest.mark.parametrize(
    "data",
    [range(3), (value for value in [1, 2]), {1, 2}, 7],
    ids=["range", "generator", "set", "int"],
)
def test_constructor_rejects_non_list_collections(data: object) -> None:
    with pytest.raises(UnsupportedInputError):
        _ = FluentSequence(data)  # type: ignore[arg-type]


def test_splice_mutates_receiver_and_returns_copy() -> None:
    seq = FluentSequence([1, 2, 3, 4])
    result = seq.splice(1, 2, [5, 6])
    assert seq == [1, 5, 6, 4]
    assert result == [1, 5, 6, 4]
    _ = result.push(7)
    assert seq == [1, 5, 6, 4]


def test_splice_negative_length_and_scalar_replacement() -> None:
    seq = FluentSequence([1, 2, 3, 4, 5])
    assert seq.splice(1, -1) == [1, 5]
    assert seq.splice(0, 0, "z") == ["z", 1, 5]
    assert seq.splice(-1) == ["z", 1]


def test_to_spliced_leaves_receiver_untouched() -> None:
    seq = FluentSequence([1, 2, 3])
    assert seq.to_spliced(1, 1, ["x", "y"]) == [1, "x", "y", 3]
    assert seq == [1, 2, 3]


def test_fill_overwrites_range() -> None:
    seq = FluentSequence([1, 2, 3])
    result = seq.fill(0, 1)
    assert seq == [1, 0, 0]
    assert result == [1, 0, 0]
    assert FluentSequence([1, 2, 3]).fill(9, 0, 1) == [9, 2, 3]


def test_fill_out_of_range_raises_without_mutating() -> None:
    seq = FluentSequence([1, 2, 3])
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        _ = seq.fill(0, 2, 5)
    assert isinstance(excinfo.value, IndexError)
    assert excinfo.value.operation == "fill"
    assert seq == [1, 2, 3]
    with pytest.raises(IndexOutOfRangeError):
        _ = seq.fill(0, 2, 1)


def test_push_unshift_return_new_length() -> None:
    seq = FluentSequence([1, 2, 3])
    assert seq.push(4, 5) == 5
    assert seq.unshift(-1, 0) == 7
    assert seq == [-1, 0, 1, 2, 3, 4, 5]


def test_pop_and_shift() -> None:
    seq = FluentSequence([1, 2, 3])
    assert seq.pop() == 3
    assert seq.shift() == 1
    assert seq == [2]
    empty: FluentSequence[int] = FluentSequence([])
    assert empty.pop() is None
    assert empty.shift() is None


def test_with_replaces_one_position() -> None:
    seq = FluentSequence([1, 2, 3])
    assert seq.with_(-1, 9) == [1, 2, 9]
    assert seq.with_(0, 0) == [0, 2, 3]
    assert seq == [1, 2, 3]
    with pytest.raises(IndexOutOfRangeError):
        _ = seq.with_(3, 9)


def test_flat_flattens_to_any_depth() -> None:
    seq = FluentSequence([1, [2, [3, [4]]], (5,), FluentSequence([6])])
    assert seq.flat() == [1, 2, 3, 4, 5, 6]


def test_flat_keeps_mappings_and_strings_as_leaves() -> None:
    seq = FluentSequence([{"a": 1}, "bc"])
    assert seq.flat() == [{"a": 1}, "bc"]


def test_flat_map_deep_flattens_mapped_values() -> None:
    seq = FluentSequence([1, 2])
    assert seq.flat_map(lambda value: [value, [value]]) == [1, 1, 2, 2]


def test_search_helpers() -> None:
    seq = FluentSequence([1, 5, 8, 5])
    assert seq.find(lambda value: value > 4) == 5
    assert seq.find_index(lambda value: value > 4) == 1
    assert seq.find_last(lambda value: value > 4) == 5
    assert seq.find_last_index(lambda value: value > 4) == 3
    assert seq.find(lambda value: value > 10) is None
    assert seq.find_index(lambda value: value > 10) == -1
    assert seq.find_last_index(lambda value: value > 10) == -1


def test_index_of_uses_strict_equality() -> None:
    seq = FluentSequence([1, 1.0, True, 1])
    assert seq.index_of(True) == 2
    assert seq.index_of(1.0) == 1
    assert seq.last_index_of(1) == 3
    assert seq.index_of("1") == -1
    assert seq.includes(1.0)
    assert not seq.includes("1")


def test_every_some_and_folds() -> None:
    seq = FluentSequence([1, 2, 3, 4])
    assert seq.every(lambda value: value > 0)
    assert not seq.every(lambda value: value > 1)
    assert seq.some(lambda value: value == 4)
    assert seq.reduce(lambda acc, value: acc + value, 0) == 10
    letters = FluentSequence(["a", "b", "c"])
    assert letters.reduce_right(lambda acc, value: acc + value, "") == "cba"


def test_for_each_visits_in_order() -> None:
    seen: list[int] = []
    FluentSequence([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_reverse_and_slice() -> None:
    seq = FluentSequence([1, 2, 3, 4])
    assert seq.reverse() == [4, 3, 2, 1]
    assert seq.slice(1, 3) == [2, 3]
    assert seq.slice(-2) == [3, 4]
    assert seq.slice(5) == []
    assert seq[1:] == [2, 3, 4]


def test_sort_is_non_mutating_and_matches_to_sorted() -> None:
    seq = FluentSequence([3, 1, 2])
    assert seq.sort() == [1, 2, 3]
    assert seq.to_sorted() == seq.sort()
    assert seq == [3, 1, 2]


def test_sort_with_comparator() -> None:
    seq = FluentSequence([3, 1, 2])
    assert seq.sort(lambda left, right: right - left) == [3, 2, 1]


def test_sort_regular_orders_mixed_types() -> None:
    seq = FluentSequence(["b", 2, None, "a", 1])
    assert seq.sort() == [None, 1, 2, "a", "b"]


def test_sort_regular_ranks_all_real_numbers_together() -> None:
    seq = FluentSequence([Decimal("0.5"), 2, Fraction(1, 3), "a", 0.25])
    assert seq.sort().to_raw() == [0.25, Fraction(1, 3), Decimal("0.5"), 2, "a"]


def test_sort_numeric_converts_decimal_and_fraction() -> None:
    seq = FluentSequence(["1", Fraction(1, 2), Decimal("0.75")])
    assert seq.sort(flag=SortFlag.NUMERIC).to_raw() == [Fraction(1, 2), Decimal("0.75"), "1"]


@pytest.mark.parametrize(
    ("flag", "data", "expected"),
    [
        (SortFlag.NUMERIC, ["10", "9", "2"], ["2", "9", "10"]),
        (SortFlag.STRING, [10, 9, 2], [10, 2, 9]),
        (SortFlag.STRING_CASE_INSENSITIVE, ["b", "A", "c"], ["A", "b", "c"]),
        (SortFlag.NATURAL, ["img10", "img2", "img1"], ["img1", "img2", "img10"]),
        ("natural-case-insensitive", ["IMG10", "img2"], ["img2", "IMG10"]),
    ],
)
def test_sort_flags(flag: SortFlag | str, data: list[object], expected: list[object]) -> None:
    assert FluentSequence(data).sort(flag=flag) == expected


def test_sort_uses_default_flag_setting() -> None:
    seq = FluentSequence(["img10", "img2"])
    assert seq.sort() == ["img10", "img2"]
    with override_settings(default_sort_flag="natural"):
        assert seq.sort() == ["img2", "img10"]


def test_join_and_to_string() -> None:
    seq = FluentSequence([1, None, "a"])
    joined = seq.join("-")
    assert isinstance(joined, FluentText)
    assert joined == "1--a"
    assert FluentSequence([1, 2, 3]).to_string() == "1,2,3"
    assert str(FluentSequence(["x", "y"])) == "x,y"


def test_to_json_compact_and_pretty() -> None:
    seq = FluentSequence([1, "a", None])
    assert seq.to_json() == '[1,"a",null]'
    assert seq.to_json(pretty=True).to_raw() == json.dumps([1, "a", None], indent=4)


def test_keys_values_and_to_array() -> None:
    seq = FluentSequence(["a", "b"])
    assert seq.keys() == [0, 1]
    assert seq.values() == ["a", "b"]
    assert seq.to_array() == ["a", "b"]


def test_getitem_wraps_nested_collections() -> None:
    seq = FluentSequence([1, [2, 3], {"a": 1}])
    assert seq[0] == 1
    assert isinstance(seq[1], FluentSequence)
    assert isinstance(seq[2], FluentMap)
    assert seq[5] is None
    assert seq[-1] is None


def test_setitem_appends_or_replaces() -> None:
    seq = FluentSequence([1, 2])
    seq[None] = 3
    seq[3] = 4
    seq[0] = 0
    assert seq == [0, 2, 3, 4]
    with pytest.raises(IndexOutOfRangeError):
        seq[10] = 5


def test_delitem_shifts_and_ignores_missing() -> None:
    seq = FluentSequence(["a", "b", "c"])
    del seq[0]
    assert seq == ["b", "c"]
    assert seq[0] == "b"
    del seq[10]
    assert seq == ["b", "c"]


def test_has_rejects_bool_and_non_int() -> None:
    seq = FluentSequence(["a", "b"])
    assert seq.has(1)
    assert not seq.has(2)
    assert not seq.has(True)
    assert not seq.has("0")  # type: ignore[arg-type]


def test_iteration_is_over_a_snapshot() -> None:
    seq = FluentSequence([1, 2])
    for value in seq:
        _ = seq.push(value)
    assert seq == [1, 2, 1, 2]


def test_protocols() -> None:
    seq = FluentSequence([1, 2])
    assert len(seq) == 2
    assert repr(seq) == "FluentSequence([1, 2])"
    assert seq == (1, 2)
    assert seq != [2, 1]
    with pytest.raises(TypeError):
        _ = hash(seq)
