#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from lwc_context import ErrorContext, LogLevel
from lwc_types import DiagnosticLevel, ErrorInfo


ERROR_INFO = ErrorInfo(
    code=4,
    message="Test Error {0} with message {1}",
    level=DiagnosticLevel.Error,
)

GENERIC_ERROR = ErrorInfo(
    code=100,
    message="Unexpected error: {0}",
    level=DiagnosticLevel.Error,
)


class CustomError(Exception):
    """Foreign error carrying optional origin fields and an optional `lwc_code`."""

    def __init__(
            self,
            message: str,
            filename: Optional[str] = None,
            line: Optional[int] = None,
            column: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column
        self.lwc_code: Optional[int] = None


@pytest.fixture
def debug_context() -> ErrorContext:
    return ErrorContext(log_level=LogLevel.DEBUG)
