"""Class-level logging for ifupdown.

The command-line tools call ``Logger.configure()`` once; library modules log
through ``Logger.debug()`` and friends, which stay silent until then so that
importing ifupdown never writes to stderr on its own.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Loggers named under ``ifupdown``, sharing one handler."""

    _configured: bool = False
    _root_name: str = "ifupdown"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "WARNING",
        output: str | Path | TextIO | None = None,
        timestamps: bool = False,
    ) -> None:
        """Install the handler, replacing any earlier one.

        Args:
            level: Level name or LogLevel.
            output: None or "stderr", "stdout", a file path, or any object
                with a ``write`` method. Stdout is kept for converted output,
                so the tools log to stderr.
            timestamps: Prefix messages with the time.

        Raises:
            ValueError: If ``level`` is not a known level name.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        handler: logging.Handler
        if output is None or output == "stderr":
            handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            handler = logging.StreamHandler(sys.stdout)
        elif isinstance(output, str | Path):
            handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        fmt = "%(levelname)s [%(name)s] %(message)s"
        if timestamps:
            fmt = "%(asctime)s " + fmt
        handler.setLevel(level.to_logging_level())
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get ``ifupdown.<name>``, or the root ``ifupdown`` logger.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    # Silent until configured

    @classmethod
    def debug(cls, name: str, message: str) -> None:
        if cls._configured:
            cls.get(name).debug(message)

    @classmethod
    def info(cls, name: str, message: str) -> None:
        if cls._configured:
            cls.get(name).info(message)

    @classmethod
    def warning(cls, name: str, message: str) -> None:
        if cls._configured:
            cls.get(name).warning(message)

    @classmethod
    def error(cls, name: str, message: str) -> None:
        if cls._configured:
            cls.get(name).error(message)
