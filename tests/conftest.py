"""Pytest fixtures for tests."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from argbcolor.models import AppConfig, Color


@pytest.fixture
def red():
    """Opaque pure red."""
    return Color.from_argb(255, 255, 0, 0)


@pytest.fixture
def brand_config():
    """Config with one custom palette color."""
    return AppConfig(palette={"Brand": "#ff112233"})


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config file location inside the test's temp directory (not created)."""
    return tmp_path / "config.json"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path, config_path):
    """Invoke the CLI with config and log file isolated in tmp_path."""
    from argbcolor.cli.main import cli

    def _invoke(*args: str):
        return runner.invoke(
            cli,
            ["--config", str(config_path), "--log-file", str(tmp_path / "argbcolor.log"), *args],
        )

    return _invoke


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Drop any log handlers the CLI installs during a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
