"""Public exception types re-exported from the internal package and wrappers."""

from __future__ import annotations

from fluentkit._internal.exceptions import FluentError, InvalidArgumentError, TypeMismatchError
from fluentkit.config.models import (
    ConfigFieldChoiceError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
)
from fluentkit.mapping import ValueTypeMismatchError
from fluentkit.sequence import IndexOutOfRangeError, NonContiguousIndexError, UnsupportedInputError
from fluentkit.text import EmptyDelimiterError, InvalidPatternError, NegativeRepeatCountError

__all__ = [
    "ConfigFieldChoiceError",
    "ConfigReadError",
    "ConfigValidationError",
    "EmptyDelimiterError",
    "FluentError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidConfigFileError",
    "InvalidPatternError",
    "NegativeRepeatCountError",
    "NonContiguousIndexError",
    "TypeMismatchError",
    "UnsupportedInputError",
    "ValueTypeMismatchError",
]
