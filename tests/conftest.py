"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs with a clean settings environment: no GABI_* variables,
no user settings file, and no forced terminal colors.
"""

import logging
from collections.abc import Generator

import pytest

from gabi_cli.core import config as config_module


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch) -> None:
    """Keep the developer's environment out of settings resolution."""
    import os

    for name in list(os.environ):
        if name.startswith("GABI_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_SETTINGS_PATH", tmp_path / "no-settings.yaml")


@pytest.fixture(autouse=True)
def _reset_root_handlers() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging so they don't outlive their streams."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
