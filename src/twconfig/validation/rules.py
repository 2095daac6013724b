"""Validation rules for configuration documents.

Each rule is a function taking the raw config mapping and the generator
settings, returning a list of Diagnostic objects describing any issues found.
Rules run on the raw mapping so that shape errors are reported before any
typed objects are built.
"""

from __future__ import annotations

from typing import Mapping

from twconfig.config import GeneratorSettings
from twconfig.model.diagnostic import Diagnostic, Severity
from twconfig.model.document import SUPPRESS_SENTINEL


# ---------------------------------------------------------------------------
# Known key sets
# ---------------------------------------------------------------------------

RECOGNIZED_KEYS = frozenset({"content", "plugins", "theme"})

# Keys the generator understands but this document model carries unread.
PASSTHROUGH_KEYS = frozenset({
    "presets",
    "darkMode",
    "prefix",
    "important",
    "separator",
    "corePlugins",
    "safelist",
    "blocklist",
    "future",
    "experimental",
})


def _is_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _type_name(value: object) -> str:
    return type(value).__name__


def _css_path(variant: str, selector: str | None = None) -> str:
    path = f"theme.extend.typography.{variant}.css"
    if selector is not None:
        path += f"[{selector!r}]"
    return path


def _typography_variants(config: Mapping[str, object]) -> dict[str, object]:
    """Return theme.extend.typography if every level is a mapping, else {}."""
    theme = config.get("theme")
    if not isinstance(theme, Mapping):
        return {}
    extend = theme.get("extend")
    if not isinstance(extend, Mapping):
        return {}
    typography = extend.get("typography")
    if not isinstance(typography, Mapping):
        return {}
    return dict(typography)


def _schema_error(rule: str, message: str, path: str, fix: str) -> Diagnostic:
    return Diagnostic(
        rule=rule, severity=Severity.ERROR, message=message, path=path, fix=fix
    )


# ---------------------------------------------------------------------------
# Shape rules (ERROR severity, SchemaError)
# ---------------------------------------------------------------------------


def check_content_shape(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """``content`` must be a sequence of glob strings."""
    if "content" not in config:
        return []
    content = config["content"]
    if not _is_sequence(content):
        return [
            _schema_error(
                "check_content_shape",
                f"'content' must be a list of glob strings, got {_type_name(content)}.",
                "content",
                'Use a list such as ["./src/**/*.html"].',
            )
        ]
    diagnostics: list[Diagnostic] = []
    for i, pattern in enumerate(content):  # type: ignore[arg-type]
        if not isinstance(pattern, str):
            diagnostics.append(
                _schema_error(
                    "check_content_shape",
                    f"Content pattern must be a string, got {_type_name(pattern)}.",
                    f"content[{i}]",
                    "Quote the glob pattern.",
                )
            )
    return diagnostics


def check_plugins_shape(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """``plugins`` must be a sequence of plugin identifiers."""
    if "plugins" not in config:
        return []
    plugins = config["plugins"]
    if not _is_sequence(plugins):
        return [
            _schema_error(
                "check_plugins_shape",
                f"'plugins' must be a list of plugin identifiers, got {_type_name(plugins)}.",
                "plugins",
                'Use a list such as [require("@tailwindcss/typography")].',
            )
        ]
    diagnostics: list[Diagnostic] = []
    for i, ident in enumerate(plugins):  # type: ignore[arg-type]
        if not isinstance(ident, str):
            diagnostics.append(
                _schema_error(
                    "check_plugins_shape",
                    f"Plugin identifier must be a string, got {_type_name(ident)}.",
                    f"plugins[{i}]",
                    "Reference the plugin by name or package.",
                )
            )
    return diagnostics


def check_theme_shape(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """Every theme level down to a selector directive must have the right shape.

    A directive is either the ``"none"`` sentinel or a mapping of CSS
    property to scalar value.
    """
    if "theme" not in config:
        return []
    theme = config["theme"]
    if not isinstance(theme, Mapping):
        return [
            _schema_error(
                "check_theme_shape",
                f"'theme' must be a mapping, got {_type_name(theme)}.",
                "theme",
                "Use an object literal.",
            )
        ]
    if "extend" not in theme:
        return []
    extend = theme["extend"]
    if not isinstance(extend, Mapping):
        return [
            _schema_error(
                "check_theme_shape",
                f"'theme.extend' must be a mapping, got {_type_name(extend)}.",
                "theme.extend",
                "Use an object literal.",
            )
        ]
    if "typography" not in extend:
        return []
    typography = extend["typography"]
    if not isinstance(typography, Mapping):
        return [
            _schema_error(
                "check_theme_shape",
                f"'theme.extend.typography' must be a mapping, got {_type_name(typography)}.",
                "theme.extend.typography",
                "Map variant names (DEFAULT, lg, ...) to {css: {...}}.",
            )
        ]

    diagnostics: list[Diagnostic] = []
    for variant, body in typography.items():
        if not isinstance(body, Mapping):
            diagnostics.append(
                _schema_error(
                    "check_theme_shape",
                    f"Typography variant '{variant}' must be a mapping, got {_type_name(body)}.",
                    f"theme.extend.typography.{variant}",
                    "Use {css: {...}}.",
                )
            )
            continue
        css = body.get("css", {})
        if not isinstance(css, Mapping):
            diagnostics.append(
                _schema_error(
                    "check_theme_shape",
                    f"Typography variant '{variant}' css must be a mapping, got {_type_name(css)}.",
                    _css_path(variant),
                    "Map CSS selectors to \"none\" or property objects.",
                )
            )
            continue
        for selector, directive in css.items():
            diagnostics.extend(_check_directive(variant, str(selector), directive))
    return diagnostics


def _check_directive(variant: str, selector: str, directive: object) -> list[Diagnostic]:
    path = _css_path(variant, selector)
    if isinstance(directive, str):
        if directive == SUPPRESS_SENTINEL:
            return []
        return [
            _schema_error(
                "check_theme_shape",
                f"Selector '{selector}' has string directive {directive!r}; "
                f"only {SUPPRESS_SENTINEL!r} is allowed.",
                path,
                f'Use "{SUPPRESS_SENTINEL}" or a property object.',
            )
        ]
    if not isinstance(directive, Mapping):
        return [
            _schema_error(
                "check_theme_shape",
                f"Selector '{selector}' directive must be \"{SUPPRESS_SENTINEL}\" "
                f"or a mapping, got {_type_name(directive)}.",
                path,
                f'Use "{SUPPRESS_SENTINEL}" or a property object.',
            )
        ]
    diagnostics: list[Diagnostic] = []
    for prop, value in directive.items():
        # bool is an int subclass but never a valid CSS value.
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            diagnostics.append(
                _schema_error(
                    "check_theme_shape",
                    f"Property '{prop}' of selector '{selector}' must be a scalar "
                    f"CSS value, got {_type_name(value)}.",
                    path,
                    "Nested selectors are not supported; add a separate selector key.",
                )
            )
    return diagnostics


def check_unknown_keys(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """Unrecognized top-level keys are ignored, or rejected under strict_keys."""
    severity = Severity.ERROR if settings.strict_keys else Severity.INFO
    diagnostics: list[Diagnostic] = []
    for key in config:
        if key in RECOGNIZED_KEYS or key in PASSTHROUGH_KEYS:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_unknown_keys",
                severity=severity,
                message=f"Unrecognized top-level key '{key}' is ignored.",
                path=str(key),
                subject=str(key),
                fix="Remove the key or check its spelling.",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Plugin rules (ERROR severity, UnknownPluginError)
# ---------------------------------------------------------------------------


def check_plugins_known(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """Every plugin identifier must be registered with the generator."""
    plugins = config.get("plugins", [])
    if not _is_sequence(plugins):
        return []  # check_plugins_shape will catch this
    known = settings.registry.identifiers()
    diagnostics: list[Diagnostic] = []
    for i, ident in enumerate(plugins):  # type: ignore[arg-type]
        if isinstance(ident, str) and ident not in settings.registry:
            diagnostics.append(
                Diagnostic(
                    rule="check_plugins_known",
                    severity=Severity.ERROR,
                    message=f"Unknown plugin '{ident}'.",
                    path=f"plugins[{i}]",
                    subject=ident,
                    fix=f"Use one of: {', '.join(known)}.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Semantic rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_content_nonempty(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """No content patterns means no generated utilities. WARNING."""
    content = config.get("content", [])
    if _is_sequence(content) and len(content) == 0:  # type: ignore[arg-type]
        return [
            Diagnostic(
                rule="check_content_nonempty",
                severity=Severity.WARNING,
                message="No content patterns configured; no utility classes will be generated.",
                path="content",
                fix="List the template files that use utility classes.",
            )
        ]
    return []


def check_content_duplicates(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """Duplicate content patterns are harmless but wasteful. WARNING."""
    content = config.get("content", [])
    if not _is_sequence(content):
        return []
    seen: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for i, pattern in enumerate(content):  # type: ignore[arg-type]
        if not isinstance(pattern, str):
            continue
        if pattern in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_content_duplicates",
                    severity=Severity.WARNING,
                    message=f"Content pattern '{pattern}' is listed more than once.",
                    path=f"content[{i}]",
                    subject=pattern,
                    fix="Remove the duplicate pattern.",
                )
            )
        seen.add(pattern)
    return diagnostics


def check_empty_patch(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """A property override with no properties has no effect. WARNING."""
    diagnostics: list[Diagnostic] = []
    for variant, body in _typography_variants(config).items():
        if not isinstance(body, Mapping):
            continue
        css = body.get("css", {})
        if not isinstance(css, Mapping):
            continue
        for selector, directive in css.items():
            if isinstance(directive, Mapping) and not directive:
                diagnostics.append(
                    Diagnostic(
                        rule="check_empty_patch",
                        severity=Severity.WARNING,
                        message=f"Selector '{selector}' override has no properties.",
                        path=_css_path(variant, str(selector)),
                        fix=f'Remove it, or use "{SUPPRESS_SENTINEL}" to disable the rule.',
                    )
                )
    return diagnostics


def check_typography_plugin_loaded(
    config: Mapping[str, object], settings: GeneratorSettings
) -> list[Diagnostic]:
    """Typography overrides need the typography plugin loaded. WARNING."""
    if not _typography_variants(config):
        return []
    plugins = config.get("plugins", [])
    if not _is_sequence(plugins):
        return []
    for ident in plugins:  # type: ignore[union-attr]
        if isinstance(ident, str) and ident in settings.registry:
            if settings.registry.resolve(ident).name == "typography":
                return []
    return [
        Diagnostic(
            rule="check_typography_plugin_loaded",
            severity=Severity.WARNING,
            message="Typography overrides are configured but the typography plugin is not loaded.",
            path="theme.extend.typography",
            fix='Add require("@tailwindcss/typography") to plugins.',
        )
    ]


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

SCHEMA_RULES = [
    check_content_shape,
    check_plugins_shape,
    check_theme_shape,
    check_unknown_keys,
]

PLUGIN_RULES = [
    check_plugins_known,
]

ALL_RULES = [
    *SCHEMA_RULES,
    *PLUGIN_RULES,
    check_content_nonempty,
    check_content_duplicates,
    check_empty_patch,
    check_typography_plugin_loaded,
]
