"""
Logging handler setup and teardown.

LoggingManager installs console and file handlers on the root logger as
described by LoggingSettings. Shutting down removes exactly those handlers
and puts back the logger levels it changed.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .. import __version__
from ..config import LoggingSettings
from .formatters import CaseFormatter, StructuredFormatter, create_rich_handler

SERVICE_NAME = "savant-sample"
DEFAULT_LOG_FILE = Path("logs/savant-sample.log")

# Loggers whose level follows the configured one.
_MANAGED_LOGGERS = ("", "savant_sample")


class LoggingManager:
    """Installs and removes the handlers described by LoggingSettings."""

    def __init__(self):
        self.settings: Optional[LoggingSettings] = None
        self.handlers: List[logging.Handler] = []
        self._saved_levels: Dict[str, int] = {}

    def configure(self, settings: LoggingSettings):
        """Apply settings, undoing anything an earlier call installed."""
        self.shutdown()
        self.settings = settings
        level = logging.getLevelName(settings.level.value)

        for name in _MANAGED_LOGGERS:
            logger = logging.getLogger(name)
            self._saved_levels[name] = logger.level
            logger.setLevel(level)

        for output in settings.output:
            if output == "console":
                self._install(self._console_handler(settings), level)
            elif output == "file":
                self._install(self._file_handler(settings), level)

    def _formatter(self, settings: LoggingSettings) -> logging.Formatter:
        if settings.format == "json":
            return StructuredFormatter(SERVICE_NAME, __version__)
        return CaseFormatter()

    def _console_handler(self, settings: LoggingSettings) -> logging.Handler:
        if settings.format == "rich":
            return create_rich_handler()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(settings))
        return handler

    def _file_handler(self, settings: LoggingSettings) -> logging.Handler:
        file_path = settings.file_path or DEFAULT_LOG_FILE
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=settings.max_file_size,
            backupCount=settings.backup_count,
        )
        handler.setFormatter(self._formatter(settings))
        return handler

    def _install(self, handler: logging.Handler, level: int):
        handler.setLevel(level)
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)

    def shutdown(self):
        """Remove this manager's handlers and restore the levels it changed."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        for name, level in self._saved_levels.items():
            logging.getLogger(name).setLevel(level)
        self._saved_levels.clear()
        self.settings = None


def configure_logging(settings: LoggingSettings) -> LoggingManager:
    """Configure logging with a fresh manager and return it."""
    manager = LoggingManager()
    manager.configure(settings)
    return manager
