# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Settings management for fluentkit.

This package provides the settings models, TOML loading, and the process-wide
active settings that control JSON output, text length, and default ordering.
"""

from __future__ import annotations

from .loader import CONFIG_FILENAMES, load_settings
from .models import (
    ConfigFieldChoiceError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    Settings,
    SettingsModel,
    settings_from_model,
)
from .state import configure, current_settings, override_settings, reset_settings

__all__ = [
    "CONFIG_FILENAMES",
    "ConfigFieldChoiceError",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "Settings",
    "SettingsModel",
    "configure",
    "current_settings",
    "load_settings",
    "override_settings",
    "reset_settings",
    "settings_from_model",
]
