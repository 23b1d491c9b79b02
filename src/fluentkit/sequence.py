# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Chainable wrapper around a contiguous, zero-based list.

``FluentSequence`` exposes the JavaScript ``Array`` vocabulary (``map``,
``filter``, ``splice``, ``find_last`` ...) as methods. Transformations return
new wrappers; ``fill``, ``splice``, ``push``, ``unshift``, ``pop``, ``shift``,
and subscript assignment/deletion mutate the receiver in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import reduce
from typing import TYPE_CHECKING, cast, overload, override

from fluentkit._internal.collection_utils import (
    flatten_deep,
    is_list_shaped,
    splice_bounds,
    spread,
    strict_equals,
    stringify,
)
from fluentkit._internal.exceptions import InvalidArgumentError, TypeMismatchError
from fluentkit._internal.logging_utils import structured_extra
from fluentkit._internal.sort_utils import resolve_sort_key
from fluentkit.config.state import current_settings
from fluentkit.core.model_types import LogComponent, SortFlag
from fluentkit.core.type_aliases import RawConvertible
from fluentkit.json import dump_json

if TYPE_CHECKING:
    from fluentkit.core.type_aliases import Comparator, Mapper, Predicate, Reducer
    from fluentkit.mapping import FluentMap
    from fluentkit.text import FluentText

logger: logging.Logger = logging.getLogger("fluentkit.sequence")


class NonContiguousIndexError(InvalidArgumentError):
    """Raised when a mapping used to build a sequence is not list-shaped."""

    def __init__(self, keys: Iterable[object]) -> None:
        """Initialize the exception with the offending keys.

        Args:
            keys: The keys of the rejected input, in iteration order.
        """
        self.keys = tuple(keys)
        preview = ", ".join(repr(key) for key in self.keys[:10])
        super().__init__(f"Expected contiguous zero-based integer keys, got [{preview}]")


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """Raised when an index or range falls outside the sequence."""

    def __init__(self, operation: str, index: object, size: int) -> None:
        self.operation = operation
        self.index = index
        self.size = size
        super().__init__(f"{operation}: index {index!r} out of range for length {size}")


class UnsupportedInputError(TypeMismatchError):
    """Raised when a wrapper is built from a value of an unsupported type."""

    def __init__(self, wrapper: str, value: object) -> None:
        self.wrapper = wrapper
        self.value_type = type(value).__name__
        super().__init__(f"{wrapper} cannot wrap a value of type {self.value_type}")


def _coerce_items[T](data: object) -> list[T]:
    if isinstance(data, RawConvertible):
        raw = data.to_raw()
        if isinstance(raw, list | dict):
            return _coerce_items(raw)
    if isinstance(data, list | tuple):
        return list(cast("list[T] | tuple[T, ...]", data))
    if isinstance(data, Mapping):
        mapping = cast("Mapping[object, T]", data)
        if not is_list_shaped(mapping):
            logger.debug(
                "Rejected non-contiguous input",
                extra=structured_extra(
                    component=LogComponent.SEQUENCE,
                    operation="construct",
                    size=len(mapping),
                ),
            )
            raise NonContiguousIndexError(mapping.keys())
        return [mapping[index] for index in range(len(mapping))]
    raise UnsupportedInputError("FluentSequence", data)


class FluentSequence[T]:
    """Ordered, contiguously indexed collection wrapper.

    Args:
        data: A list, tuple, another ``FluentSequence``, or a mapping whose
            keys are exactly ``0..n-1``. The input is copied.

    Raises:
        NonContiguousIndexError: If a mapping input has gaps, non-integer keys,
            or does not start at zero.
        UnsupportedInputError: If ``data`` is not a collection.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: list[T] | tuple[T, ...] | FluentSequence[T] | Mapping[int, T] | None = None,
    ) -> None:
        self._data: list[T] = [] if data is None else _coerce_items(data)

    @classmethod
    def _adopt(cls, items: list[T]) -> FluentSequence[T]:
        instance = cls.__new__(cls)
        instance._data = items
        return instance

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def map[U](self, callback: Mapper[T, U]) -> FluentSequence[U]:
        return FluentSequence._adopt([callback(value) for value in self._data])

    def filter(self, predicate: Predicate[T]) -> FluentSequence[T]:
        """Keep the elements for which ``predicate`` is truthy, re-indexed from 0."""
        return FluentSequence._adopt([value for value in self._data if predicate(value)])

    def reduce[A](self, callback: Reducer[A, T], initial: A) -> A:
        return reduce(callback, self._data, initial)

    def reduce_right[A](self, callback: Reducer[A, T], initial: A) -> A:
        """Fold from the last element to the first."""
        return reduce(callback, reversed(self._data), initial)

    def every(self, predicate: Predicate[T]) -> bool:
        return all(predicate(value) for value in self._data)

    def some(self, predicate: Predicate[T]) -> bool:
        return any(predicate(value) for value in self._data)

    def find(self, predicate: Predicate[T]) -> T | None:
        for value in self._data:
            if predicate(value):
                return value
        return None

    def find_index(self, predicate: Predicate[T]) -> int:
        for index, value in enumerate(self._data):
            if predicate(value):
                return index
        return -1

    def find_last(self, predicate: Predicate[T]) -> T | None:
        for value in reversed(self._data):
            if predicate(value):
                return value
        return None

    def find_last_index(self, predicate: Predicate[T]) -> int:
        for index in range(len(self._data) - 1, -1, -1):
            if predicate(self._data[index]):
                return index
        return -1

    def includes(self, needle: object) -> bool:
        return needle in self._data

    def index_of(self, needle: object) -> int:
        """Return the first position strictly equal to ``needle``, else ``-1``."""
        for index, value in enumerate(self._data):
            if strict_equals(value, needle):
                return index
        return -1

    def last_index_of(self, needle: object) -> int:
        """Return the last position strictly equal to ``needle``, else ``-1``."""
        for index in range(len(self._data) - 1, -1, -1):
            if strict_equals(self._data[index], needle):
                return index
        return -1

    def flat(self) -> FluentSequence[object]:
        """Flatten nested lists, tuples, and sequences to any depth."""
        return FluentSequence._adopt(list(flatten_deep(self._data)))

    def flat_map(self, callback: Mapper[T, object]) -> FluentSequence[object]:
        """Map each element, then deep-flatten the mapped result.

        Nested values returned by ``callback`` are flattened to any depth, not
        only the level ``callback`` introduced.
        """
        return self.map(callback).flat()

    def for_each(self, callback: Mapper[T, object]) -> None:
        for value in self._data:
            _ = callback(value)

    def reverse(self) -> FluentSequence[T]:
        return FluentSequence._adopt(self._data[::-1])

    def sort(
        self,
        comparator: Comparator[T] | None = None,
        *,
        flag: SortFlag | str | None = None,
    ) -> FluentSequence[T]:
        """Return a stably sorted copy; the receiver is left unchanged.

        Args:
            comparator: Optional three-way comparison returning a negative,
                zero, or positive integer. Takes precedence over ``flag``.
            flag: Ordering to use without a comparator. Defaults to the
                ``default_sort_flag`` setting.

        Returns:
            A new sequence in ascending order.
        """
        selected = SortFlag.coerce(flag) if flag is not None else current_settings().default_sort_flag
        key = resolve_sort_key(comparator, selected)
        return FluentSequence._adopt(sorted(self._data, key=key))

    def to_sorted(
        self,
        comparator: Comparator[T] | None = None,
        *,
        flag: SortFlag | str | None = None,
    ) -> FluentSequence[T]:
        return self.sort(comparator, flag=flag)

    def slice(self, start: int = 0, end: int | None = None) -> FluentSequence[T]:
        """Return the half-open range ``[start, end)``; negative offsets count from the end."""
        return FluentSequence._adopt(self._data[start:end])

    def to_spliced(
        self,
        start: int,
        delete_count: int | None = None,
        items: object = None,
    ) -> FluentSequence[T]:
        """Return a copy with ``delete_count`` elements at ``start`` replaced by ``items``."""
        data = list(self._data)
        lower, upper = splice_bounds(len(data), start, delete_count)
        data[lower:upper] = cast("list[T]", spread(items))
        return FluentSequence._adopt(data)

    def with_(self, index: int, value: T) -> FluentSequence[T]:
        """Return a copy with the element at ``index`` replaced.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``-len <= index < len``.
        """
        size = len(self._data)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexOutOfRangeError("with", index, size)
        data = list(self._data)
        data[position] = value
        return FluentSequence._adopt(data)

    # ------------------------------------------------------------------
    # In-place mutation
    # ------------------------------------------------------------------

    def fill(self, value: T, start: int = 0, end: int | None = None) -> FluentSequence[T]:
        """Overwrite ``[start, end)`` with ``value`` in place.

        Args:
            value: Value written into every slot of the range.
            start: First index to overwrite.
            end: Index one past the last overwritten slot; defaults to the
                current length.

        Returns:
            A new wrapper over a copy of the mutated data.

        Raises:
            IndexOutOfRangeError: Unless ``0 <= start <= end <= len``. The
                receiver is not modified in that case.
        """
        size = len(self._data)
        stop = size if end is None else end
        if not 0 <= start <= stop <= size:
            logger.debug(
                "Rejected fill range [%s, %s)",
                start,
                stop,
                extra=structured_extra(component=LogComponent.SEQUENCE, operation="fill", size=size),
            )
            raise IndexOutOfRangeError("fill", (start, stop), size)
        self._data[start:stop] = [value] * (stop - start)
        return FluentSequence._adopt(list(self._data))

    def splice(
        self,
        offset: int,
        length: int | None = None,
        replacement: object = None,
    ) -> FluentSequence[T]:
        """Remove ``length`` elements at ``offset`` and insert ``replacement`` in place.

        Args:
            offset: Start position; negative values count back from the end.
            length: Number of elements to remove. ``None`` removes through the
                end; a negative value keeps that many elements at the end.
            replacement: Elements to insert. Lists, tuples, and sequences are
                spread; any other non-``None`` value is inserted as one element.

        Returns:
            A new wrapper over a copy of the mutated data.
        """
        lower, upper = splice_bounds(len(self._data), offset, length)
        self._data[lower:upper] = cast("list[T]", spread(replacement))
        return FluentSequence._adopt(list(self._data))

    def push(self, *values: T) -> int:
        """Append ``values`` and return the new length."""
        self._data.extend(values)
        return len(self._data)

    def unshift(self, *values: T) -> int:
        """Prepend ``values`` (keeping their order) and return the new length."""
        self._data[0:0] = values
        return len(self._data)

    def pop(self) -> T | None:
        return self._data.pop() if self._data else None

    def shift(self) -> T | None:
        return self._data.pop(0) if self._data else None

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def join(self, glue: str = ",") -> FluentText:
        from fluentkit.text import FluentText

        return FluentText(glue.join(stringify(value) for value in self._data))

    def to_string(self) -> FluentText:
        return self.join(",")

    def keys(self) -> FluentSequence[int]:
        return FluentSequence._adopt(list(range(len(self._data))))

    def values(self) -> FluentSequence[T]:
        return FluentSequence._adopt(list(self._data))

    def to_raw(self) -> list[T]:
        """Return a shallow copy of the wrapped list."""
        return list(self._data)

    def to_array(self) -> list[T]:
        return self.to_raw()

    def to_json(self, *, pretty: bool = False) -> FluentText:
        from fluentkit.text import FluentText

        return FluentText(dump_json(self._data, pretty=pretty))

    # ------------------------------------------------------------------
    # Subscript access
    # ------------------------------------------------------------------

    def has(self, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._data)

    @overload
    def __getitem__(self, index: int) -> T | FluentSequence[object] | FluentMap[object] | None: ...

    @overload
    def __getitem__(self, index: slice) -> FluentSequence[T]: ...

    def __getitem__(
        self,
        index: int | slice,
    ) -> T | FluentSequence[T] | FluentSequence[object] | FluentMap[object] | None:
        if isinstance(index, slice):
            return FluentSequence._adopt(self._data[index])
        if not self.has(index):
            return None
        return _wrap_child(self._data[index])

    def __setitem__(self, index: int | None, value: T) -> None:
        size = len(self._data)
        if index is None or index == size:
            self._data.append(value)
            return
        if not self.has(index):
            raise IndexOutOfRangeError("set", index, size)
        self._data[index] = value

    def __delitem__(self, index: int) -> None:
        if self.has(index):
            del self._data[index]

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, FluentSequence):
            return self._data == cast("FluentSequence[object]", other).to_raw()
        if isinstance(other, list | tuple):
            return self._data == list(cast("list[object] | tuple[object, ...]", other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]  # JUSTIFIED: mutable container

    @override
    def __repr__(self) -> str:
        return f"FluentSequence({self._data!r})"

    @override
    def __str__(self) -> str:
        return self.to_string().to_raw()


def _wrap_child(value: object) -> object:
    if isinstance(value, list | tuple):
        return FluentSequence(cast("list[object]", value))
    if isinstance(value, Mapping):
        from fluentkit.mapping import FluentMap

        return FluentMap(cast("Mapping[object, object]", value))
    return value


__all__ = [
    "FluentSequence",
    "IndexOutOfRangeError",
    "NonContiguousIndexError",
    "UnsupportedInputError",
]
