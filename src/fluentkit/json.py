# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Canonical JSON types and helpers used across fluentkit.

This module defines the JSON value shapes and the normalisation used by
``to_json`` and the structured log formatter. It depends only on the core
enums and protocols so the wrappers, settings, and logging layers can all
import it without cycles.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, cast

from fluentkit.core.type_aliases import RawConvertible

if TYPE_CHECKING:
    from fluentkit.config.models import Settings

__all__ = [
    "JSONList",
    "JSONMapping",
    "JSONValue",
    "dump_json",
    "normalise_for_json",
]

type JSONValue = str | int | float | bool | dict[str, JSONValue] | list[JSONValue] | None
type JSONMapping = dict[str, JSONValue]
type JSONList = list[JSONValue]


def normalise_for_json(value: object) -> JSONValue:
    """Recursively convert a Python value into a JSON-compatible structure.

    Args:
        value: Arbitrary object hierarchy that may include ``Enum`` members,
            fluentkit wrappers, mappings, tuples, or sets.

    Returns:
        A structure built from ``dict``/``list``/primitives. Enums become their
        ``.value``, wrappers their raw payload, mapping keys strings, and
        anything else unknown its ``str()`` form.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return _convert(obj.value)
        if isinstance(obj, RawConvertible):
            return _convert(obj.to_raw())
        if isinstance(obj, Mapping):
            mapping_obj = cast("Mapping[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, str):
                    norm_key = key
                else:
                    norm_key = str(key)
                result[norm_key] = _convert(raw_val)
            return result
        if isinstance(obj, list | tuple):
            items = cast("list[object] | tuple[object, ...]", obj)
            return [_convert(item) for item in items]
        if isinstance(obj, set | frozenset):
            return [_convert(item) for item in cast("set[object]", obj)]
        if isinstance(obj, str | int | float | bool) or obj is None:
            return obj
        return str(obj)

    return _convert(value)


def dump_json(value: object, *, pretty: bool = False, settings: Settings | None = None) -> str:
    """Encode ``value`` as JSON text using the active settings.

    Args:
        value: Data to encode; it is normalised first.
        pretty: Indent the output by ``settings.json_indent`` spaces. Compact
            output uses no whitespace between tokens.
        settings: Settings to apply; defaults to the active settings.

    Returns:
        The encoded JSON document.
    """
    if settings is None:
        from fluentkit.config.state import current_settings

        settings = current_settings()
    payload = normalise_for_json(value)
    if pretty:
        return json.dumps(
            payload,
            indent=settings.json_indent,
            ensure_ascii=settings.json_ensure_ascii,
            sort_keys=settings.json_sort_keys,
        )
    return json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=settings.json_ensure_ascii,
        sort_keys=settings.json_sort_keys,
    )
