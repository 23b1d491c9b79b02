# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core enums and type aliases for fluentkit."""

from __future__ import annotations

from .model_types import LengthUnit, LogComponent, LogFormat, SortFlag, SortOrder, ValueKind
from .type_aliases import MapKey, RawConvertible

__all__ = [
    "LengthUnit",
    "LogComponent",
    "LogFormat",
    "MapKey",
    "RawConvertible",
    "SortFlag",
    "SortOrder",
    "ValueKind",
]
