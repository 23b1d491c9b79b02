# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common Hypothesis strategies."""

from __future__ import annotations

from .common import int_lists, json_scalars, string_maps, trimmed_text

__all__ = [
    "int_lists",
    "json_scalars",
    "string_maps",
    "trimmed_text",
]
