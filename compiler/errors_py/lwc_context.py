"""
Runtime options for the LWC error layer.

This module defines the ErrorContext dataclass which holds the options that
affect how errors and diagnostics are logged.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Optional


class LogLevel(IntEnum):
    """Hierarchical logging levels for the LWC error layer."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages
    DEBUG = 30      # Normalization details


ENV_LOG_LEVEL = "LWC_LOG_LEVEL"
ENV_LOG_RICH = "LWC_LOG_RICH"


def _parse_log_level(raw: Optional[str]) -> Optional[LogLevel]:
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    if raw.isdigit():
        try:
            return LogLevel(int(raw))
        except ValueError:
            return None
    return LogLevel.__members__.get(raw.upper())


@dataclass
class ErrorContext:
    """
    Holds the options shared by the normalizers and the logger.

    Attributes:
        log_rich_format:    If True, emit logs in rich format: timestamp and log level prefix.
        log_level:          Current logging level.
    """
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'ErrorContext':
        """Create an ErrorContext with default settings."""
        return ErrorContext(log_level=LogLevel.WARNING)

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> 'ErrorContext':
        """
        Create an ErrorContext from `LWC_LOG_LEVEL` and `LWC_LOG_RICH`.

        Unset or invalid values keep the defaults.
        """
        if environ is None:
            environ = os.environ
        context = ErrorContext.default()
        level = _parse_log_level(environ.get(ENV_LOG_LEVEL))
        if level is not None:
            context.log_level = level
        rich = environ.get(ENV_LOG_RICH)
        if rich is not None:
            context.log_rich_format = rich.strip().lower() in ("1", "true", "yes")
        return context
