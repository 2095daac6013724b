from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from twconfig.plugins import PluginRegistry, default_registry


@dataclass(frozen=True)
class GeneratorSettings:
    base_dir: Path = Path(".")
    strict_keys: bool = False  # reject unrecognized top-level keys
    registry: PluginRegistry = field(
        default_factory=default_registry, compare=False, hash=False
    )
