from twconfig.model.diagnostic import Diagnostic, Severity
from twconfig.model.document import (
    SUPPRESS,
    SUPPRESS_SENTINEL,
    ConfigurationDocument,
    Override,
    Patch,
    Suppress,
    Theme,
    ThemeExtension,
    TypographyVariant,
    override_from_value,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "SUPPRESS",
    "SUPPRESS_SENTINEL",
    "ConfigurationDocument",
    "Override",
    "Patch",
    "Suppress",
    "Theme",
    "ThemeExtension",
    "TypographyVariant",
    "override_from_value",
]
