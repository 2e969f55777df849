"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging

import pytest

from actionwire.core.config import Settings
from actionwire.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler():
    return next(
        (
            h
            for h in logging.getLogger().handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ),
        None,
    )


def _file_handler():
    return next((h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)), None)


@pytest.fixture
def quiet_settings(tmp_path) -> Settings:
    return Settings(_env_file=None, log_file_dir=str(tmp_path / "logs"), enable_file_logging=False)


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),  # Test lowercase
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level, quiet_settings):
        """Test setup_logging configures correct log level."""
        setup_logging(log_level=log_level, settings=quiet_settings)

        console_handler = _console_handler()
        assert console_handler is not None
        assert console_handler.level == expected_level

    def test_setup_logging_level_from_settings(self, quiet_settings):
        """Test setup_logging falls back to the settings level."""
        quiet_settings.log_level = "WARNING"

        setup_logging(settings=quiet_settings)

        assert _console_handler().level == logging.WARNING


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format, quiet_settings):
        """Test setup_logging configures correct format."""
        setup_logging(log_format=log_format, settings=quiet_settings)

        assert _console_handler().formatter._fmt == expected_format

    def test_setup_logging_format_with_timestamp(self, quiet_settings):
        """Test that formatter includes timestamp."""
        setup_logging(settings=quiet_settings)

        assert _console_handler().formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_file_logging_disabled_by_default(self, quiet_settings):
        setup_logging(settings=quiet_settings)

        assert _file_handler() is None

    def test_file_handler_created_and_always_debug(self, quiet_settings, tmp_path):
        setup_logging(log_level="ERROR", enable_file=True, settings=quiet_settings)

        file_handler = _file_handler()
        try:
            assert file_handler is not None
            assert file_handler.level == logging.DEBUG
            assert (tmp_path / "logs" / LOG_FILE_NAME).exists()
        finally:
            logging.getLogger().removeHandler(file_handler)
            file_handler.close()

    def test_file_logging_from_settings(self, quiet_settings, tmp_path):
        quiet_settings.enable_file_logging = True

        setup_logging(settings=quiet_settings)

        file_handler = _file_handler()
        try:
            assert file_handler is not None
        finally:
            logging.getLogger().removeHandler(file_handler)
            file_handler.close()


class TestSetupLoggingHandlerManagement:
    """Test setup_logging handler management."""

    def test_setup_logging_removes_existing_handlers(self, quiet_settings):
        """Test setup_logging removes existing handlers to avoid duplicates."""
        setup_logging(settings=quiet_settings)
        setup_logging(settings=quiet_settings)

        assert len(logging.getLogger().handlers) == 1

    def test_module_log_levels_applied(self, quiet_settings):
        setup_logging(settings=quiet_settings)

        for module_name, module_level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == logging.getLevelName(module_level)


def test_get_logger_returns_named_logger():
    logger = get_logger("actionwire.test")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "actionwire.test"
