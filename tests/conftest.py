# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings

if TYPE_CHECKING:
    from collections.abc import Iterator

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# settings are reset per test, not per generated example
settings.register_profile("fluentkit", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("fluentkit")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")


@pytest.fixture(autouse=True)
def _default_settings() -> Iterator[None]:
    """Run every test against the default settings."""
    from fluentkit.config import reset_settings

    _ = reset_settings()
    yield
    _ = reset_settings()
