"""Typography merge: apply a document's overrides on top of a preset."""

from __future__ import annotations

import logging
from typing import Mapping

from twconfig.model.document import (
    SUPPRESS_SENTINEL,
    ConfigurationDocument,
    Override,
    Patch,
    Suppress,
)

logger = logging.getLogger(__name__)

CssRules = dict[str, dict[str, str]]

_PSEUDO_ELEMENTS = ("::before", "::after")


def is_pseudo_element(selector: str) -> bool:
    """Return True if *selector* targets generated ``::before``/``::after`` content."""
    return selector.rstrip().endswith(_PSEUDO_ELEMENTS)


def _apply_patch(selector: str, base: Mapping[str, str], patch: Patch) -> dict[str, str]:
    merged = dict(base)
    for prop, value in patch.properties.items():
        if (
            prop == "content"
            and value == SUPPRESS_SENTINEL
            and is_pseudo_element(selector)
        ):
            merged.pop(prop, None)
            continue
        merged[prop] = value
    return merged


def merge_css(
    defaults: Mapping[str, Mapping[str, str]],
    overrides: Mapping[str, Override],
) -> CssRules:
    """Merge selector *overrides* into the *defaults* rule set.

    For every selector present in either tree:

    - ``Suppress`` drops the selector from the result, whatever the defaults say.
    - ``Patch`` keeps the default properties and replaces the patched ones.
      On ``::before``/``::after`` selectors, ``content: "none"`` removes the
      ``content`` property without touching its siblings.
    - No override leaves the default rule unchanged.

    Selectors keep the defaults' order; override-only selectors follow in
    override order.  The merge stops at selector granularity.
    """
    result: CssRules = {}
    for selector, props in defaults.items():
        override = overrides.get(selector)
        if isinstance(override, Suppress):
            logger.debug("Suppressing preset rule for %r", selector)
            continue
        if isinstance(override, Patch):
            result[selector] = _apply_patch(selector, props, override)
        else:
            result[selector] = dict(props)

    for selector, override in overrides.items():
        if selector in defaults:
            continue
        if isinstance(override, Patch):
            result[selector] = _apply_patch(selector, {}, override)
    return result


def preset_from_theme(theme_defaults: Mapping[str, object]) -> dict[str, CssRules]:
    """Extract ``{variant: css}`` from a plugin's ``typography`` theme defaults."""
    typography = theme_defaults.get("typography", {})
    presets: dict[str, CssRules] = {}
    if not isinstance(typography, Mapping):
        return presets
    for variant, body in typography.items():
        css = body.get("css", {}) if isinstance(body, Mapping) else {}
        presets[str(variant)] = {
            str(sel): {str(k): str(v) for k, v in props.items()}
            for sel, props in css.items()
        }
    return presets


def merge_typography(
    presets: Mapping[str, Mapping[str, Mapping[str, str]]],
    document: ConfigurationDocument,
) -> dict[str, CssRules]:
    """Merge the document's typography overrides into every preset variant.

    Variants only the document defines are merged against an empty preset.
    """
    variants = list(presets)
    variants.extend(v for v in document.theme.extend.typography if v not in presets)
    return {
        variant: merge_css(presets.get(variant, {}), document.overrides(variant))
        for variant in variants
    }
