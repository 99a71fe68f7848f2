from __future__ import annotations

import logging
import sys
from typing import Optional, Dict, Union

from ..Config.settings import settings

LogContext = Dict[str, Union[str, int, float, bool, None]]


class LaravelStyleLogger:
    """Laravel-style logger implementation."""

    def __init__(self, name: str = __name__, channel: Optional[str] = None) -> None:
        self.name = name
        self.channel = channel or settings.LOG_CHANNEL
        self.logger = logging.getLogger(name)

        if not self.logger.handlers:
            self._setup_default_handler()

    def _setup_default_handler(self) -> None:
        """Set up the handler for the configured channel; unknown channels write to stderr."""
        channel_config = settings.LOG_CHANNELS.get(self.channel, settings.LOG_CHANNELS['stderr'])
        driver = channel_config.get('driver', 'stderr')

        handler: logging.Handler
        if driver == 'null':
            handler = logging.NullHandler()
        else:
            stream = sys.stdout if driver == 'stdout' else sys.stderr
            handler = logging.StreamHandler(stream)
            formatter = logging.Formatter(
                settings.LOG_FORMAT,
                datefmt=settings.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(self._resolve_level(channel_config.get('level', settings.LOG_LEVEL)))

    @staticmethod
    def _resolve_level(level: str) -> int:
        """Map a configured level name onto a logging level."""
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.WARNING

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        self.logger.debug(self._format_message(message, context))

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message, context))

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, context))

    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log error message."""
        self.logger.error(self._format_message(message, context))

    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        """Format message with context."""
        if context:
            context_str = " | ".join(f"{k}={v}" for k, v in context.items())
            return f"{message} | {context_str}"
        return message


def get_logger(name: Optional[str] = None) -> LaravelStyleLogger:
    """Get a Laravel-style logger instance."""
    if name is None:
        name = __name__
    return LaravelStyleLogger(name)
