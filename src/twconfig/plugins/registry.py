"""Plugin registry: maps plugin identifiers to the plugins the generator knows."""

from __future__ import annotations

from dataclasses import dataclass, field

from twconfig.errors import UnknownPluginError


@dataclass(frozen=True)
class Plugin:
    """A generator plugin.

    Attributes:
        name: Short registry name (``"typography"``).
        aliases: Other identifiers resolving to this plugin, such as the
            package name passed to ``require()``.
        theme_defaults: Default theme subtree this plugin contributes,
            keyed like ``theme`` (e.g. ``{"typography": {...}}``).
        classes: Exact class names the plugin owns.
        class_prefixes: Class-name prefixes the plugin owns.
    """

    name: str
    aliases: tuple[str, ...] = ()
    theme_defaults: dict[str, object] = field(default_factory=dict)
    classes: frozenset[str] = frozenset()
    class_prefixes: tuple[str, ...] = ()

    @property
    def identifiers(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    def owns(self, class_name: str) -> bool:
        """Return True if *class_name* is a utility generated by this plugin."""
        if class_name in self.classes:
            return True
        return any(class_name.startswith(p) for p in self.class_prefixes)


class PluginRegistry:
    """Registry of plugins addressable by name or alias."""

    def __init__(self) -> None:
        self._plugins: dict[str, Plugin] = {}
        self._by_identifier: dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        """Register *plugin*; a later registration under the same name replaces it."""
        previous = self._plugins.get(plugin.name)
        if previous is not None:
            for ident in previous.identifiers:
                self._by_identifier.pop(ident, None)
        self._plugins[plugin.name] = plugin
        for ident in plugin.identifiers:
            self._by_identifier[ident] = plugin

    def resolve(self, identifier: str) -> Plugin:
        """Return the plugin registered under *identifier*.

        Raises :class:`UnknownPluginError` if no plugin matches.
        """
        plugin = self._by_identifier.get(identifier)
        if plugin is None:
            raise UnknownPluginError.for_identifier(identifier, self.identifiers())
        return plugin

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def __len__(self) -> int:
        return len(self._plugins)

    def names(self) -> list[str]:
        return list(self._plugins)

    def identifiers(self) -> list[str]:
        return sorted(self._by_identifier)
