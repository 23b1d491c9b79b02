# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Settings discovery and loading for fluentkit.

Settings are read from ``fluentkit.toml`` or ``.fluentkit.toml``, or from a
``[tool.fluentkit]`` table in ``pyproject.toml``. Either file format may nest
its keys under ``[tool.fluentkit]``.
"""

from __future__ import annotations

import logging
import tomllib as toml
from pathlib import Path
from typing import Final, Literal, cast

from pydantic import ValidationError

from fluentkit._internal.logging_utils import structured_extra
from fluentkit.core.model_types import LogComponent

from .models import (
    ConfigReadError,
    InvalidConfigFileError,
    Settings,
    SettingsModel,
    settings_from_model,
)

logger: logging.Logger = logging.getLogger("fluentkit.config")

type ConfigFilename = Literal["fluentkit.toml", ".fluentkit.toml", "pyproject.toml"]
CONFIG_FILENAMES: Final[tuple[ConfigFilename, ...]] = (
    "fluentkit.toml",
    ".fluentkit.toml",
    "pyproject.toml",
)


def _tool_section(raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        section = cast("dict[str, object]", tool_obj).get("fluentkit")
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    return None


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return toml.loads(path.read_text(encoding="utf-8"))
    except (OSError, toml.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc


def load_settings(explicit_path: Path | None = None, *, search_dir: Path | None = None) -> Settings:
    """Load fluentkit settings from a TOML file or return the defaults.

    When ``explicit_path`` is given only that file is considered. Otherwise
    ``search_dir`` (default: the current directory) is searched for
    ``fluentkit.toml``, ``.fluentkit.toml``, and ``pyproject.toml`` in that
    order. A ``pyproject.toml`` without a ``[tool.fluentkit]`` table is
    skipped.

    Args:
        explicit_path: Optional path to a settings file.
        search_dir: Directory to search when no explicit path is provided.

    Returns:
        The loaded ``Settings``, or defaults when no settings file was found.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If the settings fail validation.
    """
    if explicit_path is not None:
        candidates = [explicit_path]
    else:
        base = search_dir or Path.cwd()
        candidates = [base / name for name in CONFIG_FILENAMES]

    for candidate in candidates:
        if not candidate.is_file():
            continue
        raw_map = _read_toml(candidate)
        section = _tool_section(raw_map)
        if section is None:
            if candidate.name == "pyproject.toml":
                continue
            section = raw_map
        try:
            model = SettingsModel.model_validate(section)
        except ValidationError as exc:
            raise InvalidConfigFileError(candidate, exc) from exc
        settings = settings_from_model(model)
        logger.info(
            "Loaded settings from %s",
            candidate,
            extra=structured_extra(component=LogComponent.CONFIG, operation="load"),
        )
        return settings

    logger.debug(
        "No settings file found; using defaults",
        extra=structured_extra(component=LogComponent.CONFIG, operation="load"),
    )
    return Settings()


__all__ = ["CONFIG_FILENAMES", "load_settings"]
