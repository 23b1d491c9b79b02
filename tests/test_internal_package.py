# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import importlib

import pytest

import fluentkit._internal as internal


def test_internal_lazy_imports_cache_module() -> None:
    sort_mod = internal.__getattr__("sort_utils")
    assert sort_mod is internal.__getattr__("sort_utils")
    assert importlib.import_module("fluentkit._internal.sort_utils") is sort_mod


def test_internal_dir_and_invalid_attribute() -> None:
    listing = dir(internal)
    assert "error_codes" in listing
    with pytest.raises(AttributeError):
        _ = internal.__getattr__("not_real")
