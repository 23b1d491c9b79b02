# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Process-wide active settings."""

from __future__ import annotations

import dataclasses
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from pydantic import ValidationError

from fluentkit._internal.logging_utils import structured_extra
from fluentkit.core.model_types import LogComponent

from .models import ConfigValidationError, Settings, SettingsModel, settings_from_model

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: logging.Logger = logging.getLogger("fluentkit.config")

_active: Settings = Settings()


def current_settings() -> Settings:
    """Return the settings the wrappers currently use."""
    return _active


def configure(settings: Settings) -> Settings:
    """Replace the active settings and return the previous ones."""
    global _active  # noqa: PLW0603
    previous = _active
    _active = settings
    logger.debug(
        "Active settings replaced",
        extra=structured_extra(
            component=LogComponent.CONFIG,
            operation="configure",
            details=dataclasses.asdict(settings),
        ),
    )
    return previous


def reset_settings() -> Settings:
    """Restore the default settings and return the previous ones."""
    return configure(Settings())


@contextmanager
def override_settings(**changes: object) -> Iterator[Settings]:
    """Temporarily apply ``changes`` on top of the active settings.

    Values are validated through ``SettingsModel`` so strings such as
    ``text_length_unit="bytes"`` are accepted.

    Yields:
        The settings in effect inside the block.

    Raises:
        ConfigValidationError: If a change names an unknown field or carries
            an invalid value.
    """
    try:
        overlay = SettingsModel.model_validate(changes)
    except ValidationError as exc:
        msg = f"Invalid settings override: {exc}"
        raise ConfigValidationError(msg) from exc
    updated = settings_from_model(overlay, base=_active)
    previous = configure(updated)
    try:
        yield updated
    finally:
        _ = configure(previous)


__all__ = ["configure", "current_settings", "override_settings", "reset_settings"]
