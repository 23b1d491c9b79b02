# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Free constructor functions, the entry points for obtaining a wrapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .mapping import FluentMap
from .sequence import FluentSequence
from .text import FluentText

if TYPE_CHECKING:
    from collections.abc import Mapping


def fluent_list[T](
    data: list[T] | tuple[T, ...] | FluentSequence[T] | Mapping[int, T],
) -> FluentSequence[T]:
    """Wrap a list (or list-shaped mapping) in a ``FluentSequence``.

    Example:
        >>> fluent_list([1, 2, 3, 4]).map(lambda v: v * 2).to_raw()
        [2, 4, 6, 8]
    """
    return FluentSequence(data)


def fluent_map(data: object) -> FluentMap[object]:
    """Wrap a mapping or an object's public attributes in a ``FluentMap``.

    Example:
        >>> fluent_map({"a": 1, "b": 2}).find(1)
        'a'
    """
    return FluentMap(data)


def fluent_text(data: str) -> FluentText:
    """Wrap a string in a ``FluentText``.

    Example:
        >>> fluent_text("hello world").substring(0, 5).to_raw()
        'hello'
    """
    return FluentText(data)


__all__ = ["fluent_list", "fluent_map", "fluent_text"]
