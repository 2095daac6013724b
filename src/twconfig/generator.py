"""Consumer-side generator harness.

Runs the steps a utility-class generator performs with a configuration
document: resolve plugins, scan content, merge the typography preset with
the document's overrides, and keep only utilities observed in scanned files.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from twconfig.config import GeneratorSettings
from twconfig.errors import EmptyMatchWarning, UnknownPluginError
from twconfig.model.document import ConfigurationDocument
from twconfig.plugins import Plugin
from twconfig.scan import base_class, enumerate_files, extract_candidates
from twconfig.theme import CssRules, merge_typography, preset_from_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a generator run.

    Attributes:
        plugins: Resolved plugins, in load order.
        files: Files matched by the content patterns.
        candidates: Every class-name candidate extracted from *files*.
        utilities: Candidates owned by a loaded plugin, sorted.
        typography: Merged typography rules, ``{variant: {selector: props}}``.
    """

    plugins: tuple[Plugin, ...] = ()
    files: tuple[Path, ...] = ()
    candidates: frozenset[str] = frozenset()
    utilities: tuple[str, ...] = ()
    typography: dict[str, CssRules] = field(default_factory=dict)


class Generator:
    """Consume a :class:`ConfigurationDocument` the way the build tool does."""

    def __init__(
        self,
        document: ConfigurationDocument,
        settings: GeneratorSettings | None = None,
    ) -> None:
        self.document = document
        self.settings = settings or GeneratorSettings()

    def resolve_plugins(self) -> tuple[Plugin, ...]:
        """Resolve every plugin identifier in load order.

        All unknown identifiers are reported together in a single
        :class:`UnknownPluginError`.
        """
        registry = self.settings.registry
        resolved: list[Plugin] = []
        unknown: list[UnknownPluginError] = []
        for i, ident in enumerate(self.document.plugins):
            try:
                resolved.append(registry.resolve(ident))
            except UnknownPluginError as exc:
                unknown.append(exc)
                logger.error("Unknown plugin %r at plugins[%d]", ident, i)
        if unknown:
            raise UnknownPluginError([d for exc in unknown for d in exc.diagnostics])
        return tuple(resolved)

    def scan(self) -> tuple[list[Path], set[str]]:
        """Enumerate content files and extract class-name candidates."""
        files = enumerate_files(self.document.content, self.settings.base_dir)
        if not files:
            message = (
                f"Content patterns {list(self.document.content)!r} matched no files "
                f"under {self.settings.base_dir}; no utility classes will be generated"
            )
            logger.warning("%s", message)
            warnings.warn(message, EmptyMatchWarning, stacklevel=3)
        candidates: set[str] = set()
        for path in files:
            candidates |= extract_candidates(path.read_text(encoding="utf-8", errors="replace"))
        logger.info(
            "Scanned %d file(s), found %d candidate(s)", len(files), len(candidates)
        )
        return files, candidates

    def merged_typography(self, plugins: tuple[Plugin, ...]) -> dict[str, CssRules]:
        """Merge the loaded plugins' typography presets with the document's overrides.

        Later plugins win when two presets define the same variant selector.
        """
        presets: dict[str, CssRules] = {}
        for plugin in plugins:
            for variant, css in preset_from_theme(plugin.theme_defaults).items():
                presets.setdefault(variant, {}).update(css)
        if not presets:
            return {}
        return merge_typography(presets, self.document)

    def build(self) -> BuildResult:
        """Run plugin resolution, content scanning and the typography merge.

        Plugin resolution happens first, so an unknown plugin fails before
        any file is read.
        """
        plugins = self.resolve_plugins()
        files, candidates = self.scan()
        utilities = sorted(
            c for c in candidates if any(p.owns(base_class(c)) for p in plugins)
        )
        return BuildResult(
            plugins=plugins,
            files=tuple(files),
            candidates=frozenset(candidates),
            utilities=tuple(utilities),
            typography=self.merged_typography(plugins),
        )
