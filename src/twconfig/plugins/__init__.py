from twconfig.plugins.forms import FORMS
from twconfig.plugins.registry import Plugin, PluginRegistry
from twconfig.plugins.typography import TYPOGRAPHY

BUILTIN_PLUGINS = [FORMS, TYPOGRAPHY]


def default_registry() -> PluginRegistry:
    """Return a fresh registry holding the built-in plugins."""
    registry = PluginRegistry()
    for plugin in BUILTIN_PLUGINS:
        registry.register(plugin)
    return registry


__all__ = [
    "BUILTIN_PLUGINS",
    "FORMS",
    "TYPOGRAPHY",
    "Plugin",
    "PluginRegistry",
    "default_registry",
]
