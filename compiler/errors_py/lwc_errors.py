#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# lwc_errors.py
from __future__ import annotations

import copy
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from lwc_context import ErrorContext
from lwc_diagnostics import Diagnostic, format_header
from lwc_logger import log_debug
from lwc_types import DiagnosticConfig, DiagnosticLevel, ErrorInfo, Location, Origin, as_message_args

_PLACEHOLDER_RE = re.compile(r"\{([0-9]+)\}")


def generate_error_message(error_info: ErrorInfo, args: Optional[Sequence[Any]] = None) -> str:
    """
    Render `error_info.message` with positional arguments, prefixed with `LWC<code>: `.

    Placeholders without a matching argument are kept as literal `{n}` text.
    """
    values = as_message_args(args)

    def _substitute(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(values):
            return str(values[index])
        return match.group(0)

    return f"LWC{error_info.code}: {_PLACEHOLDER_RE.sub(_substitute, error_info.message)}"


class CompilerError(Exception):
    """
    Raisable form of a compiler error.

    Compared by value, so two errors built from the same info and origin are equal.
    """

    def __init__(
            self,
            code: int,
            message: str,
            filename: Optional[str] = None,
            location: Optional[Location] = None,
            level: DiagnosticLevel = DiagnosticLevel.Error,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.filename = filename
        self.location = location
        self.level = level

    @classmethod
    def from_error_info(cls, error_info: ErrorInfo, config: Optional[DiagnosticConfig] = None) -> CompilerError:
        config = config or DiagnosticConfig()
        origin = config.origin or Origin()
        return cls(
            error_info.code,
            generate_error_message(error_info, config.message_args),
            filename=origin.filename,
            location=origin.location,
            level=error_info.level,
        )

    def _key(self) -> Tuple:
        return self.code, self.message, self.filename, self.location, self.level

    def __eq__(self, other):
        if not isinstance(other, CompilerError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __copy__(self) -> CompilerError:
        # Subclasses may take other constructor args; copy state, not args
        clone = type(self).__new__(type(self), *self.args)
        clone.__dict__.update(self.__dict__)
        clone.__cause__ = self.__cause__
        clone.__context__ = self.__context__
        return clone.with_traceback(self.__traceback__)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, "
            f"filename={self.filename!r}, location={self.location!r}, level={self.level!r})"
        )

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=self.code,
            message=self.message,
            level=self.level,
            filename=self.filename,
            location=self.location,
        )

    def format(self) -> str:
        return format_header(self.level, self.message, self.filename, self.location)


def generate_compiler_diagnostic(error_info: ErrorInfo, config: Optional[DiagnosticConfig] = None) -> Diagnostic:
    config = config or DiagnosticConfig()
    origin = config.origin or Origin()
    return Diagnostic(
        code=error_info.code,
        message=generate_error_message(error_info, config.message_args),
        level=error_info.level,
        filename=origin.filename,
        location=origin.location,
    )


def generate_compiler_error(error_info: ErrorInfo, config: Optional[DiagnosticConfig] = None) -> CompilerError:
    return CompilerError.from_error_info(error_info, config)


def invariant(condition: Any, error_info: ErrorInfo, args: Optional[Sequence[Any]] = None) -> None:
    """Raise the CompilerError described by `error_info` if `condition` is falsy."""
    if not condition:
        raise generate_compiler_error(error_info, DiagnosticConfig(message_args=args))


# -------------------------
# Classification of caught errors
# -------------------------


class ErrorKind(Enum):
    COMPILER = "compiler"   # already a CompilerError
    CODED = "coded"         # foreign error carrying its own `lwc_code`
    FOREIGN = "foreign"     # anything else


@dataclass(frozen=True)
class ErrorView:
    kind: ErrorKind
    kind_name: str
    message: str
    code: Optional[int]
    level: Optional[DiagnosticLevel]
    origin: Origin

    @property
    def has_code(self) -> bool:
        return self.code is not None

    @property
    def has_origin(self) -> bool:
        return not self.origin.is_empty()


# Caught errors are arbitrary objects; reading them must not raise.
def _safe_attr(error: Any, name: str) -> Any:
    try:
        return getattr(error, name, None)
    except Exception:
        return None


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _int_attr(error: Any, *names: str) -> Optional[int]:
    for name in names:
        value = _safe_attr(error, name)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _read_code(error: Any) -> Optional[int]:
    code = _int_attr(error, "lwc_code")
    if code is None or code < 0:
        return None
    return code


def _read_message(error: Any) -> str:
    message = _safe_attr(error, "message")
    if isinstance(message, str):
        return message
    if isinstance(error, SyntaxError):
        msg = _safe_attr(error, "msg")
        if isinstance(msg, str):
            return msg
    return _safe_str(error)


def _read_origin(error: Any) -> Origin:
    filename = _safe_attr(error, "filename")
    if not isinstance(filename, str):
        filename = None
    line = _int_attr(error, "line", "lineno")
    column = _int_attr(error, "column", "offset")
    location = Location(line, column) if line is not None and column is not None else None
    return Origin(filename=filename, location=location)


def classify_error(error: Any) -> ErrorView:
    if isinstance(error, CompilerError):
        return ErrorView(
            kind=ErrorKind.COMPILER,
            kind_name=type(error).__name__,
            message=error.message,
            code=error.code,
            level=error.level,
            origin=Origin(filename=error.filename, location=error.location),
        )
    code = _read_code(error)
    level = _safe_attr(error, "level")
    return ErrorView(
        kind=ErrorKind.CODED if code is not None else ErrorKind.FOREIGN,
        kind_name=type(error).__name__,
        message=_read_message(error),
        code=code,
        level=level if isinstance(level, DiagnosticLevel) else None,
        origin=_read_origin(error),
    )


def _merge_origin(own: Origin, supplied: Optional[Origin]) -> Origin:
    # Supplied origin wins field by field
    if supplied is None:
        return own
    return Origin(
        filename=supplied.filename if supplied.filename is not None else own.filename,
        location=supplied.location if supplied.location is not None else own.location,
    )


def _resolve_code_and_message(view: ErrorView, fallback_error_info: ErrorInfo) -> Tuple[int, str]:
    if view.has_code:
        return view.code, view.message
    return fallback_error_info.code, generate_error_message(fallback_error_info, [view.message])


def _resolve_level(view: ErrorView, fallback_error_info: ErrorInfo) -> DiagnosticLevel:
    # Only uncoded errors borrow the fallback's level
    if view.level is not None:
        return view.level
    if view.kind is ErrorKind.FOREIGN:
        return fallback_error_info.level
    return DiagnosticLevel.Error


# -------------------------
# Normalization
# -------------------------


def normalize_to_compiler_error(
        fallback_error_info: ErrorInfo,
        error: Any,
        origin: Optional[Origin] = None,
        *,
        context: Optional[ErrorContext] = None,
) -> CompilerError:
    """
    Convert any caught error into a CompilerError.

    An existing CompilerError is returned as-is unless `origin` is given, in which
    case a copy is returned whose filename/location are replaced by the ones the
    origin provides. Errors carrying their own `lwc_code` keep their code and
    message; everything else is formatted with `fallback_error_info`. Wrapped
    errors get their class name as message prefix.
    """
    view = classify_error(error)
    log_debug(context, f"Normalizing {view.kind.value} error '{view.kind_name}' (fallback LWC{fallback_error_info.code})")

    if view.kind is ErrorKind.COMPILER:
        if origin is None or origin.is_empty():
            return error
        merged = _merge_origin(view.origin, origin)
        normalized = copy.copy(error)
        normalized.filename = merged.filename
        normalized.location = merged.location
        return normalized

    code, message = _resolve_code_and_message(view, fallback_error_info)
    merged = _merge_origin(view.origin, origin)
    normalized = CompilerError(
        code,
        f"{view.kind_name}: {message}",
        merged.filename,
        merged.location,
        _resolve_level(view, fallback_error_info),
    )
    if isinstance(error, BaseException):
        normalized.__cause__ = error
        normalized = normalized.with_traceback(error.__traceback__)
    return normalized


def normalize_to_diagnostic(
        fallback_error_info: ErrorInfo,
        error: Any,
        origin: Optional[Origin] = None,
        *,
        context: Optional[ErrorContext] = None,
) -> Diagnostic:
    """
    Convert any caught error into a Diagnostic.

    Same rules as `normalize_to_compiler_error`, except that wrapped errors are
    not prefixed with their class name.
    """
    view = classify_error(error)
    log_debug(context, f"Normalizing {view.kind.value} error '{view.kind_name}' to diagnostic (fallback LWC{fallback_error_info.code})")

    merged = _merge_origin(view.origin, origin)
    if view.kind is ErrorKind.COMPILER:
        code, message = view.code, view.message
    else:
        code, message = _resolve_code_and_message(view, fallback_error_info)
    return Diagnostic(
        code=code,
        message=message,
        level=_resolve_level(view, fallback_error_info),
        filename=merged.filename,
        location=merged.location,
    )
