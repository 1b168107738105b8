#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from typing import Iterable, Optional

from lwc_types import DiagnosticLevel, Location


def format_header(
        level: DiagnosticLevel,
        message: str,
        filename: Optional[str],
        location: Optional[Location],
) -> str:
    loc = ""
    if filename is not None:
        loc += filename
        if location is not None:
            loc += f":{location.line}:{location.column}"
    if loc:
        loc += ": "
    return f"{loc}{level.name.lower()}: {message}"


@dataclass
class Diagnostic:
    """
    Plain record for one reportable issue.

    Diagnostics are collected and reported; CompilerErrors are raised.
    """
    code: int
    message: str
    level: DiagnosticLevel
    filename: Optional[str] = None
    location: Optional[Location] = None

    @property
    def is_error(self) -> bool:
        return self.level <= DiagnosticLevel.Error

    def to_dict(self) -> dict:
        # Absent origin fields are left out, not set to None
        result = {
            "code": self.code,
            "message": self.message,
            "level": int(self.level),
        }
        if self.filename is not None:
            result["filename"] = self.filename
        if self.location is not None:
            result["location"] = self.location.to_dict()
        return result

    # One-line header for terminal output
    def format(self) -> str:
        return format_header(self.level, self.message, self.filename, self.location)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)
