"""Config validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable, Mapping

from twconfig.config import GeneratorSettings
from twconfig.errors import SchemaError, UnknownPluginError
from twconfig.model.diagnostic import Diagnostic
from twconfig.validation.rules import ALL_RULES, PLUGIN_RULES

RuleFunc = Callable[[Mapping[str, object], GeneratorSettings], list[Diagnostic]]

_PLUGIN_RULE_NAMES = frozenset(rule.__name__ for rule in PLUGIN_RULES)


def validate(
    config: Mapping[str, object],
    settings: GeneratorSettings | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *config*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    settings = settings or GeneratorSettings()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(config, settings))
    return diagnostics


def validate_or_raise(
    config: Mapping[str, object],
    settings: GeneratorSettings | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raise if any ERROR diagnostics exist.

    Shape errors raise :class:`SchemaError`, which takes precedence; a
    document whose only errors are unregistered plugins raises
    :class:`UnknownPluginError`.  Returns the non-error diagnostics
    (warnings/info) when no errors are found.
    """
    diagnostics = validate(config, settings=settings, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if not errors:
        return diagnostics
    if all(d.rule in _PLUGIN_RULE_NAMES for d in errors):
        raise UnknownPluginError(errors)
    raise SchemaError(errors)
