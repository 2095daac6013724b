"""The forms plugin: reset styles for form controls plus ``form-*`` classes."""

from twconfig.plugins.registry import Plugin

FORMS = Plugin(
    name="forms",
    aliases=("@tailwindcss/forms",),
    classes=frozenset(
        {
            "form-input",
            "form-textarea",
            "form-select",
            "form-multiselect",
            "form-checkbox",
            "form-radio",
        }
    ),
)
