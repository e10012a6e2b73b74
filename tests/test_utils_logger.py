"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from ifupdown.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")


def test_logger_unconfigured_is_silent():
    """Test the direct logging methods are no-ops before configuration."""
    Logger._configured = False

    Logger.debug("parser.block", "dropped")
    Logger.warning("parser.multi", "dropped")

    assert not Logger.is_configured()


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[ifupdown.test_config]" in content
    assert "Debug message" in content


def test_logger_direct_methods():
    """Test the class-level shortcuts once configured."""
    output = StringIO()
    Logger.configure(level="INFO", output=output)

    Logger.debug("parser.block", "too quiet")
    Logger.info("parser.multi", "parsed 2 interfaces")
    Logger.error("cli.parse", "broken")

    content = output.getvalue()
    assert "too quiet" not in content
    assert "INFO [ifupdown.parser.multi] parsed 2 interfaces" in content
    assert "ERROR [ifupdown.cli.parse] broken" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_invalid_level():
    """Test that an unknown level name is rejected."""
    with pytest.raises(ValueError):
        Logger.configure(level="LOUD", output=StringIO())


def test_logger_file_output(tmp_path):
    """Test logging to a file path, with timestamps."""
    path = tmp_path / "ifupdown.log"
    Logger.configure(level="WARNING", output=path, timestamps=True)

    Logger.warning("parser.multi", "eth1: invalid interface data provided")
    for handler in Logger.get().handlers:
        handler.flush()

    line = path.read_text().strip()
    assert line.endswith(
        "WARNING [ifupdown.parser.multi] eth1: invalid interface data provided"
    )
    assert not line.startswith("WARNING")
