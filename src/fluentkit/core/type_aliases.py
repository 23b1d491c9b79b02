# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Typed aliases for the callbacks and keys accepted by the wrappers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

type MapKey = str | int

type Predicate[T] = Callable[[T], object]
type Mapper[T, U] = Callable[[T], U]
type Reducer[A, T] = Callable[[A, T], A]
type Comparator[T] = Callable[[T, T], int]

type EntryPredicate[V] = Callable[[MapKey, V], object]
type EntryMapper[V, U] = Callable[[MapKey, V], tuple[MapKey, U]]
type EntryReducer[A, V] = Callable[[A, MapKey, V], A]
type EntryCallback[V] = Callable[[MapKey, V], object]


@runtime_checkable
class RawConvertible(Protocol):
    """Anything that can hand back the plain value it wraps."""

    def to_raw(self) -> object: ...


__all__ = [
    "Comparator",
    "EntryCallback",
    "EntryMapper",
    "EntryPredicate",
    "EntryReducer",
    "MapKey",
    "Mapper",
    "Predicate",
    "RawConvertible",
    "Reducer",
]
