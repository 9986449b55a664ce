"""Tests for CLI logging setup (-v/-vv, --debug, --log-file, --log-level)."""

import logging
from pathlib import Path

import pytest

from argbcolor.cli.main import cli, setup_logging


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Point the home directory at tmp_path so the default log stays isolated."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


class TestSetupLogging:

    @pytest.mark.unit
    @pytest.mark.parametrize("verbose,level", [
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (3, logging.DEBUG),
    ])
    def test_verbosity_levels(self, home, verbose, level):
        log_path = setup_logging(verbose, debug=False, log_file=None, log_level="INFO")

        assert logging.getLogger().level == level
        assert log_path == home / ".argbcolor" / "logs" / "argbcolor.log"
        assert log_path.exists()

    @pytest.mark.unit
    def test_debug_logs_to_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        log_path = setup_logging(0, debug=True, log_file=None, log_level="INFO")

        assert logging.getLogger().level == logging.DEBUG
        assert log_path == tmp_path / "argbcolor-debug.log"
        assert log_path.exists()

    @pytest.mark.unit
    def test_log_file_uses_log_level(self, tmp_path):
        log_file = tmp_path / "custom.log"

        log_path = setup_logging(2, debug=False, log_file=log_file, log_level="error")

        assert logging.getLogger().level == logging.ERROR
        assert log_path == log_file
        assert log_file.exists()

    @pytest.mark.unit
    def test_handler_installed_on_root_logger(self, tmp_path):
        log_file = tmp_path / "custom.log"

        setup_logging(0, debug=False, log_file=log_file, log_level="DEBUG")

        handler_files = [
            Path(handler.baseFilename)
            for handler in logging.getLogger().handlers
            if isinstance(handler, logging.FileHandler)
        ]
        assert log_file.resolve() in [path.resolve() for path in handler_files]


@pytest.mark.integration
class TestLoggingOptions:

    def test_debug_flag_writes_debug_log(self, runner, tmp_path, monkeypatch, config_path):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ['--config', str(config_path), '--debug', 'parse', 'red'])

        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.DEBUG
        debug_log = tmp_path / "argbcolor-debug.log"
        assert debug_log.exists()
        assert "Logging configured: level=DEBUG" in debug_log.read_text()

    @pytest.mark.parametrize("flags,level", [
        ([], logging.WARNING),
        (['-v'], logging.INFO),
        (['-vv'], logging.DEBUG),
    ])
    def test_verbose_flags(self, runner, home, config_path, flags, level):
        result = runner.invoke(cli, ['--config', str(config_path), *flags, 'parse', 'red'])

        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == level
        assert (home / ".argbcolor" / "logs" / "argbcolor.log").exists()

    def test_log_level_option(self, invoke, tmp_path):
        result = invoke('--log-level', 'ERROR', 'parse', 'red')

        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.ERROR
        assert "Logging configured" not in (tmp_path / "argbcolor.log").read_text()
