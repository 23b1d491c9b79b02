# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""fluentkit - chainable wrappers for lists, mappings, and strings.

Provides ``FluentSequence``, ``FluentMap``, and ``FluentText``: thin,
method-chaining facades over Python's built-in collections that follow the
JavaScript ``Array``/``String`` vocabulary (``map``, ``filter``, ``splice``,
``find_last``, ``substring`` ...).
"""

from __future__ import annotations

from fluentkit._internal.exceptions import (
    FluentError,
    InvalidArgumentError,
    TypeMismatchError,
)

from .api import fluent_list, fluent_map, fluent_text
from .config import Settings, configure, current_settings, load_settings, override_settings
from .core.model_types import LengthUnit, SortFlag, SortOrder, ValueKind
from .mapping import FluentMap, ValueTypeMismatchError
from .sequence import FluentSequence, IndexOutOfRangeError, NonContiguousIndexError
from .text import FluentText

__all__ = [
    "__version__",
    "FluentError",
    "FluentMap",
    "FluentSequence",
    "FluentText",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "LengthUnit",
    "NonContiguousIndexError",
    "Settings",
    "SortFlag",
    "SortOrder",
    "TypeMismatchError",
    "ValueKind",
    "ValueTypeMismatchError",
    "configure",
    "current_settings",
    "fluent_list",
    "fluent_map",
    "fluent_text",
    "load_settings",
    "override_settings",
]

__version__ = "0.1.0"
