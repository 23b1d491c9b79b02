# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "int_lists",
    "json_scalars",
    "string_maps",
    "trimmed_text",
]


def int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy that yields short lists of bounded integers."""
    return st.lists(st.integers(min_value=-1000, max_value=1000), max_size=max_size)


def json_scalars() -> st.SearchStrategy[object]:
    """Scalars that survive a JSON round trip unchanged.

    Returns:
        Hypothesis strategy emitting ``None``, booleans, integers, finite
        floats, and text.
    """
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-(2**53), max_value=2**53),
        st.floats(allow_nan=False, allow_infinity=False),
        st.text(max_size=10),
    )


def string_maps(max_size: int = 10) -> st.SearchStrategy[dict[str, object]]:
    """Return a strategy for string-keyed maps of JSON scalars."""
    return st.dictionaries(st.text(max_size=8), json_scalars(), max_size=max_size)


def trimmed_text(max_size: int = 20) -> st.SearchStrategy[str]:
    """Text padded with arbitrary whitespace on either side."""
    padding = st.text(alphabet=" \t\n", max_size=3)
    core = st.text(max_size=max_size)
    return st.tuples(padding, core, padding).map(lambda parts: "".join(parts))
