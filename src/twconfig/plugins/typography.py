"""The typography plugin and its default ``prose`` preset."""

from __future__ import annotations

from twconfig.plugins.registry import Plugin

# Default rich-text rules, keyed by selector, scoped under ``.prose``.
DEFAULT_CSS: dict[str, dict[str, str]] = {
    "p": {"margin-top": "1.25em", "margin-bottom": "1.25em"},
    "a": {
        "color": "var(--tw-prose-links)",
        "text-decoration": "underline",
        "font-weight": "500",
    },
    "strong": {"color": "var(--tw-prose-bold)", "font-weight": "600"},
    "blockquote": {
        "font-weight": "500",
        "font-style": "italic",
        "color": "var(--tw-prose-quotes)",
        "border-left-width": "0.25rem",
        "border-left-color": "var(--tw-prose-quote-borders)",
        "quotes": '"\\201C""\\201D""\\2018""\\2019"',
        "margin-top": "1.6em",
        "margin-bottom": "1.6em",
        "padding-left": "1em",
    },
    "h1": {
        "color": "var(--tw-prose-headings)",
        "font-weight": "800",
        "font-size": "2.25em",
        "margin-top": "0",
        "margin-bottom": "0.8888889em",
        "line-height": "1.1111111",
    },
    "h2": {
        "color": "var(--tw-prose-headings)",
        "font-weight": "700",
        "font-size": "1.5em",
        "margin-top": "2em",
        "margin-bottom": "1em",
        "line-height": "1.3333333",
    },
    "img": {"margin-top": "2em", "margin-bottom": "2em"},
    "figure": {"margin-top": "2em", "margin-bottom": "2em"},
    "figure > *": {"margin-top": "0", "margin-bottom": "0"},
    "figcaption": {
        "color": "var(--tw-prose-captions)",
        "font-size": "0.875em",
        "line-height": "1.4285714",
        "margin-top": "0.8571429em",
    },
    "code": {
        "color": "var(--tw-prose-code)",
        "font-weight": "600",
        "font-size": "0.875em",
    },
    "code::before": {"content": '"`"'},
    "code::after": {"content": '"`"'},
    "pre": {
        "color": "var(--tw-prose-pre-code)",
        "background-color": "var(--tw-prose-pre-bg)",
        "overflow-x": "auto",
        "font-weight": "400",
        "font-size": "0.875em",
        "line-height": "1.7142857",
        "margin-top": "1.7142857em",
        "margin-bottom": "1.7142857em",
        "border-radius": "0.375rem",
        "padding-top": "0.8571429em",
        "padding-right": "1.1428571em",
        "padding-bottom": "0.8571429em",
        "padding-left": "1.1428571em",
    },
    "pre code": {
        "background-color": "transparent",
        "border-width": "0",
        "border-radius": "0",
        "padding": "0",
        "font-weight": "inherit",
        "color": "inherit",
        "font-size": "inherit",
        "font-family": "inherit",
        "line-height": "inherit",
    },
    "pre code::before": {"content": "none"},
    "pre code::after": {"content": "none"},
}

LG_CSS: dict[str, dict[str, str]] = {
    "p": {"margin-top": "1.3333333em", "margin-bottom": "1.3333333em"},
    "code": {"font-size": "0.8888889em"},
    "pre": {
        "font-size": "0.8888889em",
        "line-height": "1.75",
        "border-radius": "0.375rem",
    },
    "img": {"margin-top": "1.7777778em", "margin-bottom": "1.7777778em"},
    "figure": {"margin-top": "1.7777778em", "margin-bottom": "1.7777778em"},
}

TYPOGRAPHY = Plugin(
    name="typography",
    aliases=("@tailwindcss/typography",),
    theme_defaults={
        "typography": {
            "DEFAULT": {"css": DEFAULT_CSS},
            "lg": {"css": LG_CSS},
        }
    },
    classes=frozenset({"prose", "not-prose"}),
    class_prefixes=("prose-",),
)
