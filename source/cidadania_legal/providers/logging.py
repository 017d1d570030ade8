"""This module sets up a centralized, context-aware logging system.

It provides a `LoggingProvider` singleton that configures and dispenses a
logger. The `ContextualFilter` uses thread-local storage to inject a
`correlation_id` into every log message. The web layer sets it to the
visitor's session id, so every line emitted while serving a visitor (and by
the timers their screens schedule) can be traced back to that visitor.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Generator
from contextlib import contextmanager
from logging import Filter, Formatter, Logger, LogRecord, StreamHandler, _nameToLevel, getLogger

from cidadania_legal.providers.config import ConfigProvider

__all__ = ["ContextualFilter", "Logger", "LoggingProvider", "current_correlation_id"]

_log_context = threading.local()


def current_correlation_id() -> str | None:
    """Returns the correlation ID bound to the current thread, if any."""
    return getattr(_log_context, "correlation_id", None)


class ContextualFilter(Filter):
    """A logging filter that makes a correlation ID available to the log formatter."""

    def filter(self, record: LogRecord) -> bool:
        """Adds the correlation ID to the log record from thread-local context.

        Args:
            record: The log record to be filtered.

        Returns:
            Always True to ensure the log record is processed.
        """
        record.correlation_id = getattr(_log_context, "correlation_id", None) or "-"
        return True


class LoggingProvider:
    """Provides a configured logger instance for the application.

    This class uses a Singleton pattern to ensure that there is only one
    instance of the logger throughout the application's lifecycle, configured
    once based on settings from the config provider.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Implements the Singleton pattern.

        Returns:
            The singleton instance of the LoggingProvider.
        """
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    def _configure_logger(self, level_override: str | None = None) -> Logger:
        """Private method to configure the logger. This is called only once.

        Args:
            level_override: A level name that takes precedence over LOG_LEVEL.

        Returns:
            The configured logger instance.
        """
        logger = getLogger("cidadania_legal")

        if self._is_configured:  # pragma: no cover
            return logger

        config = ConfigProvider.get_config()
        log_level_str = level_override or config.LOG_LEVEL
        numeric_level = _nameToLevel.get(log_level_str.upper(), _nameToLevel["INFO"])
        logger.setLevel(numeric_level)

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] [%(correlation_id)s] - " "%(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            handler.addFilter(ContextualFilter())
            logger.addHandler(handler)

        self._is_configured = True
        logger.info(f"Logger configured with level: {log_level_str}")
        return logger

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the configured logger instance.

        The first call triggers the configuration. A later call carrying a
        `level_override` only adjusts the level of the existing logger.

        Args:
            level_override: An optional level name, as passed by the CLI.

        Returns:
            The configured logger instance.
        """
        if not self._logger:
            self._logger = self._configure_logger(level_override)
        elif level_override:
            self._logger.setLevel(_nameToLevel.get(level_override.upper(), self._logger.level))
        return self._logger

    @contextmanager
    def set_correlation_id(self, correlation_id: str | None) -> Generator[None, None, None]:
        """A context manager to set and automatically restore the correlation ID.

        Args:
            correlation_id: The correlation ID to set for the context.

        Yields:
            None.
        """
        previous = getattr(_log_context, "correlation_id", None)
        try:
            _log_context.correlation_id = correlation_id
            yield
        finally:
            _log_context.correlation_id = previous
