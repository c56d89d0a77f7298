"""
Pytest configuration and shared fixtures for Savant Sample tests.
"""

import os
import tempfile
from pathlib import Path

import pytest

pytest_plugins = ["pytester", "savant_sample.testing.plugin"]

SAVANT_ENV_VARS = [
    "SAVANT_LOG_ENABLED", "SAVANT_LOG_LEVEL", "SAVANT_LOG_FORMAT",
    "SAVANT_LOG_OUTPUT", "SAVANT_LOG_FILE",
    "SAVANT_CATEGORIES", "SAVANT_EXCLUDE_CATEGORIES",
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    """Path of a config file inside a fresh config directory."""
    config_dir = temp_dir / ".config" / "savant-sample"
    config_dir.mkdir(parents=True)
    return config_dir / "config.toml"


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure no SAVANT_* variables leak into the test."""
    for var in SAVANT_ENV_VARS:
        if var in os.environ:
            monkeypatch.delenv(var)
    yield monkeypatch


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    import logging

    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)
