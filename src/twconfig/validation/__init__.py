from twconfig.validation.validator import validate, validate_or_raise
from twconfig.errors import ConfigValidationError, SchemaError, UnknownPluginError

__all__ = [
    "validate",
    "validate_or_raise",
    "ConfigValidationError",
    "SchemaError",
    "UnknownPluginError",
]
