"""Configuration document model: the document, its theme, and override variants."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

# The literal a config author writes to disable a preset's styling.
SUPPRESS_SENTINEL = "none"


@dataclass(frozen=True)
class Suppress:
    """Drop the preset's rule for a selector entirely."""

    def to_value(self) -> str:
        return SUPPRESS_SENTINEL


@dataclass(frozen=True)
class Patch:
    """Replace individual properties of the preset's rule for a selector."""

    properties: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy; callers keep their own dict.
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __hash__(self) -> int:
        return hash(frozenset(self.properties.items()))

    def to_value(self) -> dict[str, str]:
        return dict(self.properties)


SUPPRESS = Suppress()

Override = Union[Suppress, Patch]


def override_from_value(value: object) -> Override:
    """Build an :data:`Override` from a raw directive (``"none"`` or a mapping).

    Raises ``TypeError`` for any other value; callers are expected to have
    validated the document first.
    """
    if value == SUPPRESS_SENTINEL:
        return SUPPRESS
    if isinstance(value, Mapping):
        return Patch(properties={str(k): str(v) for k, v in value.items()})
    raise TypeError(f"Invalid override directive: {value!r}")


@dataclass(frozen=True)
class TypographyVariant:
    """Overrides for one typography modifier (``DEFAULT``, ``lg``, ...)."""

    css: dict[str, Override] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "css", MappingProxyType(dict(self.css)))

    def __hash__(self) -> int:
        return hash(frozenset(self.css.items()))

    def to_mapping(self) -> dict[str, object]:
        return {"css": {sel: o.to_value() for sel, o in self.css.items()}}


@dataclass(frozen=True)
class ThemeExtension:
    """The ``theme.extend`` subtree.

    Only ``typography`` is modelled; every other key is carried in *other*
    untouched.
    """

    typography: dict[str, TypographyVariant] = field(default_factory=dict)
    other: dict[str, object] = field(default_factory=dict)

    def __hash__(self) -> int:
        # *other* is free-form data and stays out of the hash.
        return hash(frozenset(self.typography.items()))

    def to_mapping(self) -> dict[str, object]:
        result: dict[str, object] = copy.deepcopy(self.other)
        if self.typography:
            result["typography"] = {
                name: variant.to_mapping() for name, variant in self.typography.items()
            }
        return result


@dataclass(frozen=True)
class Theme:
    """The ``theme`` subtree: an ``extend`` block plus keys that replace defaults."""

    extend: ThemeExtension = field(default_factory=ThemeExtension)
    replace: dict[str, object] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(self.extend)

    def to_mapping(self) -> dict[str, object]:
        result: dict[str, object] = copy.deepcopy(self.replace)
        extend = self.extend.to_mapping()
        if extend:
            result["extend"] = extend
        return result


@dataclass(frozen=True)
class ConfigurationDocument:
    """The configuration handed to the utility-class generator.

    Attributes:
        content: Glob patterns naming the files scanned for class usage.
        plugins: Plugin identifiers, in load order (last wins on conflict).
        theme: Theme overrides.
        extra: Unrecognized top-level keys, preserved but never interpreted.
    """

    content: tuple[str, ...] = ()
    plugins: tuple[str, ...] = ()
    theme: Theme = field(default_factory=Theme)
    extra: dict[str, object] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.content, self.plugins, self.theme))

    def overrides(self, variant: str = "DEFAULT") -> dict[str, Override]:
        """Return the typography overrides for *variant* (empty if none)."""
        found = self.theme.extend.typography.get(variant)
        return dict(found.css) if found else {}

    def to_mapping(self) -> dict[str, object]:
        """Serialize back into the nested mapping shape the generator consumes."""
        result: dict[str, object] = {
            "content": list(self.content),
            "plugins": list(self.plugins),
        }
        theme = self.theme.to_mapping()
        if theme:
            result["theme"] = theme
        result.update(copy.deepcopy(self.extra))
        return result
