# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Settings models and validation for fluentkit.

This module defines the pydantic model used to validate settings read from
TOML files and the dataclass the wrappers consult at runtime, plus the
conversion between the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from fluentkit._internal.exceptions import InvalidArgumentError
from fluentkit.core.model_types import LengthUnit, SortFlag

if TYPE_CHECKING:
    from pathlib import Path

SORT_FLAG_ALLOWED_VALUES: Final[tuple[str, ...]] = tuple(flag.value for flag in SortFlag)
LENGTH_UNIT_ALLOWED_VALUES: Final[tuple[str, ...]] = tuple(unit.value for unit in LengthUnit)


class ConfigValidationError(InvalidArgumentError):
    """Raised when settings data contains invalid values."""


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a settings field is provided with an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        """Initialize the exception with the field name and allowed values.

        Args:
            field: The name of the settings field with an invalid value.
            allowed: Tuple of allowed values for this field.
        """
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class ConfigReadError(ConfigValidationError):
    """Raised when a settings file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a settings file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with the settings file path and validation error.

        Args:
            path: The path to the settings file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid fluentkit configuration in {path}: {error}")


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime settings consulted by the wrappers.

    Attributes:
        json_indent: Spaces per indentation level for pretty JSON output.
        json_ensure_ascii: Escape non-ASCII characters in JSON output.
        json_sort_keys: Sort object keys in JSON output.
        text_length_unit: Unit reported by ``FluentText.length()``.
        text_encoding: Encoding used when the length unit is ``bytes``.
        default_sort_flag: Ordering used by ``sort``/``ksort`` without an
            explicit flag or comparator.
    """

    json_indent: int = 4
    json_ensure_ascii: bool = False
    json_sort_keys: bool = False
    text_length_unit: LengthUnit = LengthUnit.CODEPOINTS
    text_encoding: str = "utf-8"
    default_sort_flag: SortFlag = SortFlag.REGULAR


class SettingsModel(BaseModel):
    """Pydantic model for validating settings loaded from TOML.

    After validation it is converted to a ``Settings`` dataclass with
    ``settings_from_model``. Omitted fields keep the ``Settings`` defaults.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    json_indent: int | None = None
    json_ensure_ascii: bool | None = None
    json_sort_keys: bool | None = None
    text_length_unit: LengthUnit | None = None
    text_encoding: str | None = None
    default_sort_flag: SortFlag | None = None

    @field_validator("json_indent", mode="before")
    @classmethod
    def _validate_indent(cls, value: object, info: ValidationInfo) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"{info.field_name} must be an integer"
            raise ConfigValidationError(msg)
        if value < 0:
            msg = f"{info.field_name} must be non-negative (got {value})"
            raise ConfigValidationError(msg)
        return value

    @field_validator("text_length_unit", mode="before")
    @classmethod
    def _normalise_length_unit(cls, value: object) -> LengthUnit | None:
        if value is None or isinstance(value, LengthUnit):
            return value
        try:
            return LengthUnit.from_str(str(value))
        except ValueError as exc:
            msg = "text_length_unit"
            raise ConfigFieldChoiceError(msg, LENGTH_UNIT_ALLOWED_VALUES) from exc

    @field_validator("default_sort_flag", mode="before")
    @classmethod
    def _normalise_sort_flag(cls, value: object) -> SortFlag | None:
        if value is None or isinstance(value, SortFlag):
            return value
        try:
            return SortFlag.from_str(str(value))
        except ValueError as exc:
            msg = "default_sort_flag"
            raise ConfigFieldChoiceError(msg, SORT_FLAG_ALLOWED_VALUES) from exc

    @field_validator("text_encoding", mode="before")
    @classmethod
    def _check_encoding(cls, value: object) -> str | None:
        if value is None:
            return None
        encoding = str(value).strip()
        try:
            _ = "".encode(encoding)
        except LookupError as exc:
            msg = f"text_encoding '{encoding}' is not a known codec"
            raise ConfigValidationError(msg) from exc
        return encoding


def settings_from_model(model: SettingsModel, base: Settings | None = None) -> Settings:
    """Overlay the fields set on ``model`` onto ``base`` (or the defaults)."""
    base = base or Settings()
    return Settings(
        json_indent=model.json_indent if model.json_indent is not None else base.json_indent,
        json_ensure_ascii=(
            model.json_ensure_ascii
            if model.json_ensure_ascii is not None
            else base.json_ensure_ascii
        ),
        json_sort_keys=(
            model.json_sort_keys if model.json_sort_keys is not None else base.json_sort_keys
        ),
        text_length_unit=model.text_length_unit or base.text_length_unit,
        text_encoding=model.text_encoding or base.text_encoding,
        default_sort_flag=model.default_sort_flag or base.default_sort_flag,
    )


__all__ = [
    "ConfigFieldChoiceError",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "Settings",
    "SettingsModel",
    "settings_from_model",
]
