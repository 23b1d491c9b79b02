# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Property-based tests for FluentSequence."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fluentkit import FluentSequence
from tests.property_based.strategies import int_lists

pytestmark = pytest.mark.property


@given(int_lists())
def test_filter_keeps_exactly_matching_elements(values: list[int]) -> None:
    result = FluentSequence(values).filter(lambda value: value % 3 == 0)
    assert result.to_raw() == [value for value in values if value % 3 == 0]
    assert result.keys().to_raw() == list(range(len(result)))


@given(int_lists())
def test_reverse_twice_is_identity(values: list[int]) -> None:
    seq = FluentSequence(values)
    assert seq.reverse().reverse() == seq


@given(int_lists())
def test_sort_is_non_decreasing_and_non_mutating(values: list[int]) -> None:
    seq = FluentSequence(values)
    ordered = seq.sort().to_raw()
    assert all(left <= right for left, right in zip(ordered, ordered[1:], strict=False))
    assert sorted(ordered) == sorted(values)
    assert seq.to_raw() == values


@given(int_lists(), st.integers(min_value=-40, max_value=40), st.integers(min_value=-40, max_value=40))
def test_slice_matches_python_slicing(values: list[int], start: int, end: int) -> None:
    assert FluentSequence(values).slice(start, end).to_raw() == values[start:end]


@given(int_lists(), st.integers(min_value=-40, max_value=40), st.integers(min_value=0, max_value=40))
def test_splice_and_to_spliced_agree(values: list[int], offset: int, length: int) -> None:
    preview = FluentSequence(values).to_spliced(offset, length, [0])
    seq = FluentSequence(values)
    returned = seq.splice(offset, length, [0])
    assert returned == preview
    assert seq == preview
