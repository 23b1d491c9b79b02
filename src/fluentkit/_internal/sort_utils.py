# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Sort-key builders for the ``SortFlag`` orderings."""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal
from functools import cmp_to_key
from numbers import Real
from typing import TYPE_CHECKING, Final

from fluentkit.core.model_types import SortFlag

if TYPE_CHECKING:
    from fluentkit.core.type_aliases import Comparator

type SortKey = Callable[[object], object]

_DIGITS: Final[re.Pattern[str]] = re.compile(r"(\d+)")


def _regular_key(value: object) -> tuple[int, object]:
    # None < numbers < strings < everything else
    if value is None:
        return (0, 0)
    if isinstance(value, Real | Decimal):
        return (1, value)
    if isinstance(value, str):
        return (2, value)
    return (3, value)


def _numeric_key(value: object) -> float:
    if isinstance(value, Real | Decimal):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return 0.0


def natural_key(value: object, *, casefold: bool = False) -> tuple[tuple[int, int, str], ...]:
    """Split ``value`` into digit and text chunks so ``"img10"`` sorts after ``"img2"``.

    Args:
        value: Value to order; non-strings are converted with ``str()``.
        casefold: Whether text chunks are compared case-insensitively.

    Returns:
        A tuple of comparable chunks. Digit runs compare numerically and
        always before text chunks at the same position.
    """
    text = str(value)
    if casefold:
        text = text.casefold()
    chunks: list[tuple[int, int, str]] = []
    for part in _DIGITS.split(text):
        if not part:
            continue
        if part.isdigit():
            chunks.append((0, int(part), ""))
        else:
            chunks.append((1, 0, part))
    return tuple(chunks)


def sort_key_for(flag: SortFlag) -> SortKey:
    """Return the key function implementing ``flag``."""
    match flag:
        case SortFlag.NUMERIC:
            return _numeric_key
        case SortFlag.STRING:
            return str
        case SortFlag.STRING_CASE_INSENSITIVE:
            return lambda value: str(value).casefold()
        case SortFlag.NATURAL:
            return natural_key
        case SortFlag.NATURAL_CASE_INSENSITIVE:
            return lambda value: natural_key(value, casefold=True)
        case _:
            return _regular_key


def resolve_sort_key[T](comparator: Comparator[T] | None, flag: SortFlag) -> Callable[[T], object]:
    """Prefer an explicit three-way ``comparator`` over the ``flag`` ordering."""
    if comparator is not None:
        return cmp_to_key(comparator)
    return sort_key_for(flag)


__all__ = ["natural_key", "resolve_sort_key", "sort_key_for"]
