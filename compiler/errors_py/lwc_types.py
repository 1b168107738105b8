#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Tuple


class DiagnosticLevel(IntEnum):
    """Severity of a diagnostic. Lower values are more severe."""
    Fatal = 0
    Error = 1
    Warning = 2
    Info = 3


@dataclass(frozen=True)
class Location:
    line: int
    column: int

    def to_dict(self) -> dict:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class Origin:
    """Where in the source an error or diagnostic comes from."""
    filename: Optional[str] = None
    location: Optional[Location] = None

    def is_empty(self) -> bool:
        return self.filename is None and self.location is None


@dataclass(frozen=True)
class ErrorInfo:
    """
    Static template for one kind of compiler error.

    `message` may contain positional placeholders `{0}`, `{1}`, ...
    that are filled in by `lwc_errors.generate_error_message`.
    """
    code: int
    message: str
    level: DiagnosticLevel = DiagnosticLevel.Error

    def __post_init__(self):
        if isinstance(self.code, bool) or not isinstance(self.code, int) or self.code < 0:
            raise ValueError(f"error code must be a non-negative integer, got {self.code!r}")


def as_message_args(args: Any) -> Tuple[Any, ...]:
    """Turn message arguments into a tuple; a lone string counts as one argument."""
    if args is None:
        return ()
    if isinstance(args, (str, bytes)):
        return (args,)
    return tuple(args)


@dataclass(frozen=True)
class DiagnosticConfig:
    message_args: Tuple[Any, ...] = field(default_factory=tuple)
    origin: Optional[Origin] = None

    def __post_init__(self):
        # Accept any sequence, store an immutable copy
        object.__setattr__(self, "message_args", as_message_args(self.message_args))
