"""
Logging utilities for the LWC error layer.

This module provides logging functions that respect the ErrorContext
settings (log level and rich format).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time
from typing import Optional

from lwc_context import ErrorContext, LogLevel


def log(context: Optional[ErrorContext], log_level: LogLevel, message: str) -> None:
    """
    Log a message to stderr if the context's logging level allows it.

    Args:
        context:    The error context containing the logging level, or None for defaults.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        context = ErrorContext.default()
    if context.log_level < log_level:
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    print(f"{prefix}{message}", file=sys.stderr)


def log_error(context: Optional[ErrorContext], message: str) -> None:
    """
    Log an error-level message if logging level is ERROR or higher.

    Args:
        context: The error context containing the logging level.
        message: The message to log.
    """
    log(context, LogLevel.ERROR, message)


def log_warning(context: Optional[ErrorContext], message: str) -> None:
    """
    Log a warning-level message if logging level is WARNING or higher.

    Args:
        context: The error context containing the logging level.
        message: The message to log.
    """
    log(context, LogLevel.WARNING, message)


def log_info(context: Optional[ErrorContext], message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: Optional[ErrorContext], message: str) -> None:
    log(context, LogLevel.DEBUG, message)
