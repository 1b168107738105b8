#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# lwc_internal_error.py
from __future__ import annotations

from typing import Iterable, Tuple

from lwc_types import ErrorInfo


class InternalCompilerError(RuntimeError):
    """
    ICE = bug in the error tables themselves.
    Not for user mistakes (those are Diagnostics or CompilerErrors).

    `infos` holds the ErrorInfo templates involved, e.g. both sides of a code clash.
    """

    def __init__(self, message: str, infos: Iterable[ErrorInfo] = ()):
        super().__init__(message)
        self.message = message
        self.infos: Tuple[ErrorInfo, ...] = tuple(infos)

    def format(self) -> str:
        message = self.message
        if "[ICE-" not in message:
            message = f"[ICE-9999] {message}"
        lines = [f"internal compiler error: {message}"]
        for info in self.infos:
            lines.append(f"  LWC{info.code} ({info.level.name.lower()}): {info.message}")
        return "\n".join(lines)
