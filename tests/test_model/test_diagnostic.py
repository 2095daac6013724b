"""Tests for the Diagnostic model."""

from twconfig.model import Diagnostic, Severity


class TestDiagnostic:
    def test_str_with_path(self):
        d = Diagnostic(
            rule="check_content_shape",
            severity=Severity.ERROR,
            message="bad",
            path="content[0]",
        )
        assert str(d) == "ERROR [path=content[0]]: bad"

    def test_str_without_path(self):
        d = Diagnostic(rule="r", severity=Severity.INFO, message="note")
        assert str(d) == "INFO: note"

    def test_severity_flags(self):
        err = Diagnostic(rule="r", severity=Severity.ERROR, message="m")
        warn = Diagnostic(rule="r", severity=Severity.WARNING, message="m")
        assert err.is_error and not err.is_warning
        assert warn.is_warning and not warn.is_error
