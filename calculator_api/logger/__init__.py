"""Logger module for calculator-api

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from calculator_api.logger import Logger, StructuredLogger

    logger = StructuredLogger(json_format=True)
    logger.info("Application started", port=3000)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

from calculator_api.config import LogSettings
from calculator_api.logger.base import Logger
from calculator_api.logger.structured_logger import StructuredLogger

_log_settings = LogSettings.from_env()

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=_log_settings.level,
    log_file=_log_settings.file,
    json_format=_log_settings.json_format,
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
