# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Immutable, chainable string wrapper."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, cast, override

from fluentkit._internal.exceptions import InvalidArgumentError
from fluentkit._internal.logging_utils import structured_extra
from fluentkit.config.state import current_settings
from fluentkit.core.model_types import LengthUnit, LogComponent
from fluentkit.sequence import FluentSequence, UnsupportedInputError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: logging.Logger = logging.getLogger("fluentkit.text")

type Pattern = str | re.Pattern[str]


class EmptyDelimiterError(InvalidArgumentError):
    """Raised when ``explode``/``split`` is given an empty delimiter."""

    def __init__(self) -> None:
        super().__init__("Delimiter must be a non-empty string")


class InvalidPatternError(InvalidArgumentError):
    """Raised when a regular expression cannot be compiled."""

    def __init__(self, pattern: str, error: re.error) -> None:
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid regular expression {pattern!r}: {error}")


class NegativeRepeatCountError(InvalidArgumentError):
    """Raised when ``repeat`` is asked for a negative number of copies."""

    def __init__(self, times: int) -> None:
        self.times = times
        super().__init__(f"Repeat count must be non-negative (got {times})")


def _compile(pattern: Pattern, flags: int) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return cast("re.Pattern[str]", pattern)
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        logger.debug(
            "Rejected pattern %r",
            pattern,
            extra=structured_extra(component=LogComponent.TEXT, operation="compile"),
        )
        raise InvalidPatternError(pattern, exc) from exc


class FluentText:
    """Immutable string value wrapper.

    Every transformation returns a new ``FluentText``. Instances hash and
    compare like the string they hold, so ``FluentText("a") == "a"``.

    Args:
        data: The string to wrap, or another ``FluentText``.

    Raises:
        UnsupportedInputError: If ``data`` is not a string.
    """

    __slots__ = ("_data",)

    def __init__(self, data: str | FluentText = "") -> None:
        if isinstance(data, FluentText):
            data = data.to_raw()
        if not isinstance(data, str):
            raise UnsupportedInputError("FluentText", data)
        self._data: str = data

    # ------------------------------------------------------------------
    # Splitting and matching
    # ------------------------------------------------------------------

    def explode(self, delimiter: str, limit: int | None = None) -> FluentSequence[str]:
        """Split on a literal ``delimiter``, keeping empty segments.

        Args:
            delimiter: Non-empty separator.
            limit: ``None`` splits everywhere. A positive value returns at most
                ``limit`` parts, the last holding the remainder; ``0`` acts as
                ``1``. A negative value drops that many parts from the end.

        Returns:
            The parts as plain strings.

        Raises:
            EmptyDelimiterError: If ``delimiter`` is empty.
        """
        if not delimiter:
            raise EmptyDelimiterError
        if limit is None:
            parts = self._data.split(delimiter)
        elif limit >= 0:
            parts = self._data.split(delimiter, max(limit, 1) - 1)
        else:
            parts = self._data.split(delimiter)[:limit]
        return FluentSequence(parts)

    def split(self, delimiter: str, limit: int | None = None) -> FluentSequence[str]:
        return self.explode(delimiter, limit)

    def regex_replace(
        self,
        pattern: Pattern,
        replacement: str,
        count: int = 0,
        flags: int = 0,
    ) -> FluentText:
        r"""Replace every match of ``pattern``; ``replacement`` may use ``\1`` or ``\g<name>``."""
        compiled = _compile(pattern, flags)
        try:
            return FluentText(compiled.sub(replacement, self._data, count=count))
        except re.error as exc:
            raise InvalidPatternError(replacement, exc) from exc

    def regex_match(self, pattern: Pattern, flags: int = 0) -> FluentSequence[str]:
        """Return all non-overlapping full matches, left to right."""
        compiled = _compile(pattern, flags)
        return FluentSequence([match.group(0) for match in compiled.finditer(self._data)])

    def replace(self, search: str, replacement: str) -> FluentText:
        """Replace every literal occurrence of ``search``; an empty search is a no-op."""
        if not search:
            return FluentText(self._data)
        return FluentText(self._data.replace(search, replacement))

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def trim(self, chars: str | None = None) -> FluentText:
        return FluentText(self._data.strip(chars))

    def ltrim(self, chars: str | None = None) -> FluentText:
        return FluentText(self._data.lstrip(chars))

    def rtrim(self, chars: str | None = None) -> FluentText:
        return FluentText(self._data.rstrip(chars))

    def to_upper(self) -> FluentText:
        return FluentText(self._data.upper())

    def to_lower(self) -> FluentText:
        return FluentText(self._data.lower())

    def substring(self, start: int, length: int | None = None) -> FluentText:
        """Return ``length`` characters from ``start``.

        A negative ``start`` counts back from the end. ``length=None`` runs to
        the end and a negative ``length`` stops that many characters before
        it. A ``start`` past the end yields an empty text.
        """
        size = len(self._data)
        begin = max(size + start, 0) if start < 0 else start
        if begin > size:
            return FluentText("")
        if length is None:
            end = size
        elif length < 0:
            end = size + length
        else:
            end = min(begin + length, size)
        if end <= begin:
            return FluentText("")
        return FluentText(self._data[begin:end])

    def repeat(self, times: int) -> FluentText:
        if times < 0:
            raise NegativeRepeatCountError(times)
        return FluentText(self._data * times)

    # ------------------------------------------------------------------
    # Predicates and measurements
    # ------------------------------------------------------------------

    def includes(self, needle: str) -> bool:
        return needle in self._data

    def starts_with(self, needle: str) -> bool:
        return self._data.startswith(needle)

    def ends_with(self, needle: str) -> bool:
        return self._data.endswith(needle)

    def length(self) -> int:
        """Return the length in the unit selected by ``text_length_unit``.

        Code points by default; with ``bytes`` the length of the text encoded
        with ``text_encoding``.
        """
        settings = current_settings()
        if settings.text_length_unit is LengthUnit.BYTES:
            return len(self._data.encode(settings.text_encoding))
        return len(self._data)

    # ------------------------------------------------------------------
    # Conversions and Python protocols
    # ------------------------------------------------------------------

    def to_raw(self) -> str:
        return self._data

    def to_string(self) -> str:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __contains__(self, needle: object) -> bool:
        return isinstance(needle, str) and needle in self._data

    def __add__(self, other: object) -> FluentText:
        if isinstance(other, FluentText):
            return FluentText(self._data + other.to_raw())
        if isinstance(other, str):
            return FluentText(self._data + other)
        return NotImplemented

    def __radd__(self, other: object) -> FluentText:
        if isinstance(other, str):
            return FluentText(other + self._data)
        return NotImplemented

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, FluentText):
            return self._data == other.to_raw()
        if isinstance(other, str):
            return self._data == other
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self._data)

    @override
    def __repr__(self) -> str:
        return f"FluentText({self._data!r})"

    @override
    def __str__(self) -> str:
        return self._data


__all__ = [
    "EmptyDelimiterError",
    "FluentText",
    "InvalidPatternError",
    "NegativeRepeatCountError",
]
