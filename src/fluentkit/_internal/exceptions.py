# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for fluentkit."""

from __future__ import annotations

__all__ = ["FluentError", "InvalidArgumentError", "TypeMismatchError"]


class FluentError(Exception):
    """Base error for all fluentkit exceptions."""


class InvalidArgumentError(FluentError, ValueError):
    """Raised when an argument or input collection fails validation checks."""


class TypeMismatchError(FluentError, TypeError):
    """Raised when a value has a different type than the caller expected."""
