"""twconfig - typed configuration documents for a utility-class CSS generator."""

__version__ = "0.1.0"

from twconfig.config import GeneratorSettings
from twconfig.errors import (
    ConfigValidationError,
    EmptyMatchWarning,
    SchemaError,
    TwConfigError,
    UnknownPluginError,
)
from twconfig.generator import BuildResult, Generator
from twconfig.loader import build_document, load_file, load_mapping, read_mapping
from twconfig.model import (
    SUPPRESS,
    ConfigurationDocument,
    Override,
    Patch,
    Suppress,
)
from twconfig.parser import ParseError

__all__ = [
    "__version__",
    "BuildResult",
    "ConfigValidationError",
    "ConfigurationDocument",
    "EmptyMatchWarning",
    "Generator",
    "GeneratorSettings",
    "Override",
    "ParseError",
    "Patch",
    "SUPPRESS",
    "SchemaError",
    "Suppress",
    "TwConfigError",
    "UnknownPluginError",
    "build_document",
    "load_file",
    "load_mapping",
    "read_mapping",
]
