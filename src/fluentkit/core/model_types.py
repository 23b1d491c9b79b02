# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""String-valued enums shared by the wrappers, settings, and logging layers."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class SortFlag(StrEnum):
    REGULAR = "regular"
    NUMERIC = "numeric"
    STRING = "string"
    STRING_CASE_INSENSITIVE = "string_case_insensitive"
    NATURAL = "natural"
    NATURAL_CASE_INSENSITIVE = "natural_case_insensitive"

    @classmethod
    def from_str(cls, raw: str) -> SortFlag:
        value = raw.strip().lower().replace("-", "_")
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown sort flag '{raw}'") from exc

    @classmethod
    def coerce(cls, raw: SortFlag | str) -> SortFlag:
        if isinstance(raw, SortFlag):
            return raw
        return cls.from_str(raw)


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_str(cls, raw: str) -> SortOrder:
        value = raw.strip().lower()
        value = {"ascending": "asc", "descending": "desc"}.get(value, value)
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown sort order '{raw}'") from exc

    @classmethod
    def coerce(cls, raw: SortOrder | str) -> SortOrder:
        if isinstance(raw, SortOrder):
            return raw
        return cls.from_str(raw)


class ValueKind(StrEnum):
    """Runtime type tags accepted by ``FluentMap.key``."""

    STRING = "string"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    LIST = "list"
    MAPPING = "map"
    NULL = "null"
    OBJECT = "object"

    @classmethod
    def from_str(cls, raw: str) -> ValueKind:
        value = raw.strip().lower()
        value = _VALUE_KIND_ALIASES.get(value, value)
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown value kind '{raw}'") from exc

    @classmethod
    def of(cls, value: object) -> ValueKind:
        """Return the tag describing ``value``'s runtime type."""
        # bool first: it is a subclass of int
        if value is None:
            return cls.NULL
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, list | tuple):
            return cls.LIST
        if isinstance(value, dict):
            return cls.MAPPING
        return cls.OBJECT


_VALUE_KIND_ALIASES: Final[dict[str, str]] = {
    "str": "string",
    "integer": "int",
    "double": "float",
    "boolean": "bool",
    "array": "list",
    "dict": "map",
    "mapping": "map",
    "none": "null",
}


class LengthUnit(StrEnum):
    CODEPOINTS = "codepoints"
    BYTES = "bytes"

    @classmethod
    def from_str(cls, raw: str) -> LengthUnit:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown length unit '{raw}'") from exc


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    TEXT = "text"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


__all__ = [
    "LengthUnit",
    "LogComponent",
    "LogFormat",
    "SortFlag",
    "SortOrder",
    "ValueKind",
]
