# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Chainable wrapper around an insertion-ordered key/value mapping.

Callbacks receive ``(key, value)`` pairs. Transformations return new
``FluentMap`` instances; subscript assignment, deletion, and ``append``
mutate the receiver.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from types import GenericAlias
from typing import TYPE_CHECKING, Any, cast, override

from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter, ValidationError

from fluentkit._internal.collection_utils import strict_equals, stringify
from fluentkit._internal.exceptions import InvalidArgumentError, TypeMismatchError
from fluentkit._internal.logging_utils import structured_extra
from fluentkit._internal.sort_utils import sort_key_for
from fluentkit.config.state import current_settings
from fluentkit.core.model_types import LogComponent, SortFlag, SortOrder, ValueKind
from fluentkit.core.type_aliases import RawConvertible
from fluentkit.json import dump_json
from fluentkit.sequence import FluentSequence, UnsupportedInputError
from fluentkit.text import FluentText

if TYPE_CHECKING:
    from collections.abc import ItemsView

    from fluentkit.core.type_aliases import (
        EntryCallback,
        EntryMapper,
        EntryPredicate,
        EntryReducer,
        MapKey,
    )

logger: logging.Logger = logging.getLogger("fluentkit.mapping")


class ValueTypeMismatchError(TypeMismatchError):
    """Raised when a stored value does not have the type the caller expected."""

    def __init__(self, key: object, expected: object, actual: object) -> None:
        """Initialize the exception with the key and the mismatching types.

        Args:
            key: The key whose value was checked.
            expected: The expected ``ValueKind``, class, or annotation.
            actual: The value actually stored under ``key``.
        """
        self.key = key
        self.expected = expected
        self.actual_kind = ValueKind.of(actual)
        expected_text = expected.value if isinstance(expected, ValueKind) else _describe(expected)
        super().__init__(
            f"Value for key {key!r} is {self.actual_kind.value} "
            f"({type(actual).__name__}), expected {expected_text}",
        )


def _describe(expected: object) -> str:
    if isinstance(expected, type) and not isinstance(expected, GenericAlias):
        return expected.__name__
    return repr(expected)


def _coerce_entries(data: object) -> dict[MapKey, object]:
    if isinstance(data, RawConvertible):
        raw = data.to_raw()
        if isinstance(raw, dict | list):
            return _coerce_entries(raw)
    if isinstance(data, Mapping):
        return dict(cast("Mapping[MapKey, object]", data))
    if isinstance(data, list | tuple):
        return dict(enumerate(cast("list[object]", data)))
    if isinstance(data, BaseModel):
        return cast("dict[MapKey, object]", data.model_dump())
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return cast("dict[MapKey, object]", dataclasses.asdict(data))
    if hasattr(data, "__dict__") and not isinstance(data, type | str | bytes):
        return {key: value for key, value in vars(data).items() if not key.startswith("_")}
    raise UnsupportedInputError("FluentMap", data)


@lru_cache(maxsize=128)
def _adapter_for(annotation: object) -> TypeAdapter[Any]:
    return TypeAdapter(annotation)


def _matches(value: object, expected: object) -> bool:
    if isinstance(expected, ValueKind):
        return ValueKind.of(value) is expected
    if isinstance(expected, type) and not isinstance(expected, GenericAlias):
        if expected is int and isinstance(value, bool):
            return False
        try:
            return isinstance(value, expected)
        except TypeError:
            # Any and non-runtime Protocols: validate as an annotation instead
            pass
    try:
        _ = _adapter_for(expected).validate_python(value, strict=True)
    except ValidationError:
        return False
    except (PydanticSchemaGenerationError, TypeError) as exc:
        msg = f"Unsupported expected type {expected!r}"
        raise InvalidArgumentError(msg) from exc
    return True


def _coerce_expected(expected: object) -> object:
    if isinstance(expected, str) and not isinstance(expected, ValueKind):
        try:
            return ValueKind.from_str(expected)
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc
    return expected


class FluentMap[V]:
    """String-keyed, insertion-ordered collection wrapper.

    Args:
        data: A mapping, another ``FluentMap``, a list or tuple (positions
            become keys), a pydantic model, a dataclass instance, or any object
            with public attributes. The input is copied.

    Raises:
        UnsupportedInputError: If ``data`` cannot be viewed as key/value pairs.
    """

    __slots__ = ("_data",)

    def __init__(self, data: object = None) -> None:
        self._data: dict[MapKey, V] = (
            {} if data is None else cast("dict[MapKey, V]", _coerce_entries(data))
        )

    @classmethod
    def _adopt(cls, entries: dict[MapKey, V]) -> FluentMap[V]:
        instance = cls.__new__(cls)
        instance._data = entries
        return instance

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def map[U](self, callback: EntryMapper[V, U]) -> FluentMap[U]:
        """Rebuild the map from the ``(key, value)`` pairs returned by ``callback``.

        When two entries produce the same key the later one wins.
        """
        result: dict[MapKey, U] = {}
        for key, value in self._data.items():
            new_key, new_value = callback(key, value)
            result[new_key] = new_value
        return FluentMap._adopt(result)

    def filter(self, predicate: EntryPredicate[V]) -> FluentMap[V]:
        """Keep entries for which ``predicate(key, value)`` is truthy; keys are preserved."""
        return FluentMap._adopt(
            {key: value for key, value in self._data.items() if predicate(key, value)},
        )

    def reduce[A](self, callback: EntryReducer[A, V], initial: A) -> A:
        accumulator = initial
        for key, value in self._data.items():
            accumulator = callback(accumulator, key, value)
        return accumulator

    def every(self, predicate: EntryPredicate[V]) -> bool:
        return all(predicate(key, value) for key, value in self._data.items())

    def some(self, predicate: EntryPredicate[V]) -> bool:
        return any(predicate(key, value) for key, value in self._data.items())

    def for_each(self, callback: EntryCallback[V]) -> None:
        for key, value in list(self._data.items()):
            _ = callback(key, value)

    def find(self, needle: object) -> MapKey | None:
        """Return the first key whose value strictly equals ``needle``, else ``None``."""
        for key, value in self._data.items():
            if strict_equals(value, needle):
                return key
        return None

    def ksort(
        self,
        order: SortOrder | str = SortOrder.ASC,
        *,
        flag: SortFlag | str | None = None,
    ) -> FluentMap[V]:
        """Return a copy with entries reordered by key.

        Args:
            order: ``asc`` or ``desc``.
            flag: Key ordering; defaults to the ``default_sort_flag`` setting.

        Returns:
            A new map; ties keep their original relative order.

        Raises:
            InvalidArgumentError: If ``order`` or ``flag`` is an unknown token.
        """
        try:
            selected_order = SortOrder.coerce(order)
            selected_flag = (
                SortFlag.coerce(flag) if flag is not None else current_settings().default_sort_flag
            )
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc
        key_fn = sort_key_for(selected_flag)
        ordered = sorted(
            self._data.items(),
            key=lambda item: key_fn(item[0]),
            reverse=selected_order is SortOrder.DESC,
        )
        return FluentMap._adopt(dict(ordered))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def has(self, key: MapKey) -> bool:
        return key in self._data

    def key(
        self,
        key: MapKey,
        expected: object = None,
        default: object = None,
    ) -> V | object:
        """Return the value stored under ``key``.

        Args:
            key: Key to look up.
            expected: Optional type the value must have: a ``ValueKind`` or its
                string tag (``"string"``, ``"int"``, ``"list"`` ...), a class,
                or a type annotation such as ``list[int]`` checked strictly.
            default: Returned when ``key`` is absent.

        Returns:
            The stored value, or ``default`` when absent.

        Raises:
            ValueTypeMismatchError: If the value does not match ``expected``.
        """
        if key not in self._data:
            return default
        value = self._data[key]
        if expected is not None:
            expected = _coerce_expected(expected)
            if not _matches(value, expected):
                logger.debug(
                    "Type mismatch for key %r",
                    key,
                    extra=structured_extra(
                        component=LogComponent.MAPPING,
                        operation="key",
                        details={"expected": _describe(expected), "actual": ValueKind.of(value)},
                    ),
                )
                raise ValueTypeMismatchError(key, expected, value)
        return value

    def key_to_string(self, key: MapKey) -> FluentText | None:
        """Return the text stored under ``key`` wrapped, or ``None`` when absent.

        Raises:
            ValueTypeMismatchError: If the stored value is not a string.
        """
        if key not in self._data:
            return None
        return FluentText(cast("str", self.key(key, ValueKind.STRING)))

    def keys(self) -> FluentSequence[MapKey]:
        return FluentSequence(list(self._data))

    def values(self) -> FluentSequence[V]:
        return FluentSequence(list(self._data.values()))

    def items(self) -> ItemsView[MapKey, V]:
        return dict(self._data).items()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, value: V) -> MapKey:
        """Store ``value`` under the next free integer key and return that key."""
        int_keys = [key for key in self._data if isinstance(key, int) and not isinstance(key, bool)]
        next_key = max(int_keys) + 1 if int_keys else 0
        self._data[next_key] = value
        return next_key

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_string(self) -> FluentText:
        """Render entries as ``key:value`` pairs joined by commas."""
        return FluentText(
            ",".join(f"{stringify(key)}:{stringify(value)}" for key, value in self._data.items()),
        )

    def to_json(self, *, pretty: bool = False) -> FluentText:
        return FluentText(dump_json(self._data, pretty=pretty))

    def to_raw(self) -> dict[MapKey, V]:
        """Return a shallow copy of the wrapped dict."""
        return dict(self._data)

    def to_array(self) -> dict[MapKey, V]:
        return self.to_raw()

    # ------------------------------------------------------------------
    # Subscript access
    # ------------------------------------------------------------------

    def __getitem__(self, key: MapKey) -> FluentMap[object] | V | None:
        if key not in self._data:
            return None
        value = self._data[key]
        if isinstance(value, Mapping | list | tuple):
            return FluentMap(value)
        return value

    def __setitem__(self, key: MapKey | None, value: V) -> None:
        if key is None or key == "":
            _ = self.append(value)
            return
        self._data[key] = value

    def __delitem__(self, key: MapKey) -> None:
        _ = self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[MapKey]:
        return iter(list(self._data))

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, FluentMap):
            return self._data == cast("FluentMap[object]", other).to_raw()
        if isinstance(other, Mapping):
            return self._data == dict(cast("Mapping[object, object]", other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]  # JUSTIFIED: mutable container

    @override
    def __repr__(self) -> str:
        return f"FluentMap({self._data!r})"

    @override
    def __str__(self) -> str:
        return self.to_string().to_raw()


__all__ = ["FluentMap", "ValueTypeMismatchError"]
