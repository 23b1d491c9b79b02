# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from fluentkit._internal.exceptions import FluentError, InvalidArgumentError, TypeMismatchError

from ..config import (
    ConfigFieldChoiceError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
)
from ..mapping import ValueTypeMismatchError
from ..sequence import IndexOutOfRangeError, NonContiguousIndexError, UnsupportedInputError
from ..text import EmptyDelimiterError, InvalidPatternError, NegativeRepeatCountError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    FluentError: ErrorCode("FK000"),
    InvalidArgumentError: ErrorCode("FK100"),
    TypeMismatchError: ErrorCode("FK101"),
    NonContiguousIndexError: ErrorCode("FK110"),
    IndexOutOfRangeError: ErrorCode("FK111"),
    UnsupportedInputError: ErrorCode("FK112"),
    ValueTypeMismatchError: ErrorCode("FK120"),
    EmptyDelimiterError: ErrorCode("FK130"),
    InvalidPatternError: ErrorCode("FK131"),
    NegativeRepeatCountError: ErrorCode("FK132"),
    ConfigValidationError: ErrorCode("FK200"),
    ConfigFieldChoiceError: ErrorCode("FK201"),
    ConfigReadError: ErrorCode("FK202"),
    InvalidConfigFileError: ErrorCode("FK203"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured fluentkit exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("FK000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Intended for diagnostics, tests, and documentation generation - avoids
    exposing the private mapping while keeping a single source of truth.
    """

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
