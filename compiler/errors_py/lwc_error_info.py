#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from lwc_internal_error import InternalCompilerError
from lwc_types import DiagnosticLevel, ErrorInfo


GENERIC_COMPILER_ERROR = ErrorInfo(
    code=1001,
    message="Unexpected compilation error: {0}",
    level=DiagnosticLevel.Error,
)

GENERIC_TRANSFORMER_ERROR = ErrorInfo(
    code=1002,
    message="Unexpected transformer error: {0}",
    level=DiagnosticLevel.Error,
)

GENERIC_TEMPLATE_ERROR = ErrorInfo(
    code=1003,
    message="Unexpected template error: {0}",
    level=DiagnosticLevel.Error,
)

GENERIC_STYLE_ERROR = ErrorInfo(
    code=1004,
    message="Unexpected style error: {0}",
    level=DiagnosticLevel.Error,
)

UNKNOWN_WARNING = ErrorInfo(
    code=1005,
    message="Unexpected warning: {0}",
    level=DiagnosticLevel.Warning,
)


class ErrorInfoRegistry(Mapping[int, ErrorInfo]):
    """
    Read-only table of ErrorInfo templates keyed by code.

    Built once and handed to whoever needs to look up error kinds.
    """

    def __init__(self, infos: Iterable[ErrorInfo]):
        table: Dict[int, ErrorInfo] = {}
        for info in infos:
            existing = table.get(info.code)
            if existing is not None:
                raise InternalCompilerError(
                    f"[ICE-0001] duplicate error code {info.code}",
                    infos=(existing, info),
                )
            table[info.code] = info
        self._table = MappingProxyType(dict(sorted(table.items())))

    def __getitem__(self, code: int) -> ErrorInfo:
        return self._table[code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ErrorInfoRegistry({list(self._table.values())!r})"

    def get(self, code: int, default: Optional[ErrorInfo] = None) -> Optional[ErrorInfo]:
        return self._table.get(code, default)

    def lookup(self, code: int) -> ErrorInfo:
        info = self._table.get(code)
        if info is None:
            raise InternalCompilerError(f"[ICE-0002] unknown error code {code}")
        return info


DEFAULT_REGISTRY = ErrorInfoRegistry([
    GENERIC_COMPILER_ERROR,
    GENERIC_TRANSFORMER_ERROR,
    GENERIC_TEMPLATE_ERROR,
    GENERIC_STYLE_ERROR,
    UNKNOWN_WARNING,
])
