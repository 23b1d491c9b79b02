# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from fluentkit.core.type_aliases import RawConvertible


def is_list_shaped(data: Mapping[object, object]) -> bool:
    """Return whether ``data``'s keys are exactly ``0..len(data) - 1``.

    Args:
        data: Mapping whose keys should form a contiguous zero-based range.

    Returns:
        ``True`` when every key is a non-boolean ``int`` and together they
        cover the range without gaps, otherwise ``False``.
    """
    expected = set(range(len(data)))
    for key in data:
        if isinstance(key, bool) or not isinstance(key, int) or key not in expected:
            return False
    return True


def flatten_deep(values: Iterable[object]) -> Iterator[object]:
    """Yield leaves of arbitrarily nested lists, tuples, and wrapped sequences.

    Traversal is depth-first and left to right. Strings, mappings, and any
    other object that is not a list, tuple, or raw-convertible list are
    yielded unchanged.
    """
    for value in values:
        nested = _nested_items(value)
        if nested is None:
            yield value
        else:
            yield from flatten_deep(nested)


def _nested_items(value: object) -> list[object] | tuple[object, ...] | None:
    if isinstance(value, list | tuple):
        return value
    if isinstance(value, RawConvertible):
        raw = value.to_raw()
        if isinstance(raw, list):
            return raw
    return None


def strict_equals(left: object, right: object) -> bool:
    """Compare two values by identity, or by type and equality.

    ``1`` does not strictly equal ``1.0`` or ``True``.
    """
    if left is right:
        return True
    return type(left) is type(right) and left == right


def stringify(value: object) -> str:
    """Render a value the way ``join`` and ``to_string`` concatenate it."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, RawConvertible):
        raw = value.to_raw()
        if isinstance(raw, str):
            return raw
    return str(value)


def splice_bounds(size: int, offset: int, length: int | None) -> tuple[int, int]:
    """Resolve splice ``offset``/``length`` arguments to a ``[start, stop)`` range.

    Args:
        size: Length of the list being spliced.
        offset: Start position; negative values count back from the end.
        length: Number of elements to remove. ``None`` removes through the end;
            a negative value stops that many elements before the end.

    Returns:
        Clamped ``(start, stop)`` indices with ``0 <= start <= stop <= size``.
    """
    start = offset if offset >= 0 else max(size + offset, 0)
    start = min(start, size)
    if length is None:
        stop = size
    elif length >= 0:
        stop = min(start + length, size)
    else:
        stop = max(size + length, start)
    return start, stop


def spread(items: object) -> list[object]:
    """Normalise a splice replacement into the list of elements to insert."""
    if items is None:
        return []
    if isinstance(items, list | tuple):
        return list(items)
    if isinstance(items, RawConvertible):
        raw = items.to_raw()
        if isinstance(raw, list):
            return list(raw)
    return [items]


__all__ = [
    "flatten_deep",
    "is_list_shaped",
    "splice_bounds",
    "spread",
    "strict_equals",
    "stringify",
]
