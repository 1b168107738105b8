#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import json

from lwc_diagnostics import Diagnostic, has_errors
from lwc_types import DiagnosticLevel, Location


def test_to_dict_omits_absent_origin():
    diag = Diagnostic(code=4, message="LWC4: x", level=DiagnosticLevel.Error)

    assert diag.to_dict() == {"code": 4, "message": "LWC4: x", "level": 1}
    assert "filename" not in diag.to_dict()
    assert "location" not in diag.to_dict()


def test_to_dict_with_origin_is_json_serializable():
    diag = Diagnostic(
        code=4,
        message="LWC4: x",
        level=DiagnosticLevel.Warning,
        filename="test.js",
        location=Location(line=1, column=22),
    )

    assert json.loads(json.dumps(diag.to_dict())) == {
        "code": 4,
        "message": "LWC4: x",
        "level": 2,
        "filename": "test.js",
        "location": {"line": 1, "column": 22},
    }


def test_format_with_full_origin():
    diag = Diagnostic(4, "LWC4: x", DiagnosticLevel.Error, "test.js", Location(2, 5))

    assert diag.format() == "test.js:2:5: error: LWC4: x"


def test_format_with_filename_only():
    diag = Diagnostic(4, "LWC4: x", DiagnosticLevel.Warning, "test.js")

    assert diag.format() == "test.js: warning: LWC4: x"


def test_format_without_origin():
    diag = Diagnostic(4, "LWC4: x", DiagnosticLevel.Info)

    assert diag.format() == "info: LWC4: x"


def test_format_ignores_location_without_filename():
    diag = Diagnostic(4, "LWC4: x", DiagnosticLevel.Fatal, location=Location(2, 5))

    assert diag.format() == "fatal: LWC4: x"


def test_is_error_and_has_errors():
    fatal = Diagnostic(1, "a", DiagnosticLevel.Fatal)
    error = Diagnostic(2, "b", DiagnosticLevel.Error)
    warning = Diagnostic(3, "c", DiagnosticLevel.Warning)
    info = Diagnostic(4, "d", DiagnosticLevel.Info)

    assert fatal.is_error
    assert error.is_error
    assert not warning.is_error
    assert not info.is_error

    assert has_errors([warning, error])
    assert not has_errors([warning, info])
    assert not has_errors([])
