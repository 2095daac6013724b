"""Error hierarchy for configuration loading and consumption."""

from __future__ import annotations

from twconfig.model.diagnostic import Diagnostic, Severity


class TwConfigError(Exception):
    """Base error for all twconfig errors."""


class ConfigValidationError(TwConfigError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Configuration invalid with {len(messages)} error(s): " + "; ".join(messages)
        )


class SchemaError(ConfigValidationError):
    """A recognized key holds a value of the wrong shape."""


class UnknownPluginError(ConfigValidationError):
    """A listed plugin identifier is not registered with the generator."""

    @property
    def identifiers(self) -> list[str]:
        return [d.subject for d in self.diagnostics if d.subject is not None]

    @classmethod
    def for_identifier(
        cls, identifier: str, known: list[str], path: str | None = None
    ) -> "UnknownPluginError":
        return cls(
            [
                Diagnostic(
                    rule="check_plugins_known",
                    severity=Severity.ERROR,
                    message=f"Unknown plugin '{identifier}'.",
                    path=path,
                    subject=identifier,
                    fix=f"Use one of: {', '.join(known)}.",
                )
            ]
        )


class EmptyMatchWarning(UserWarning):
    """Content patterns matched no files; no utility classes will be produced."""
