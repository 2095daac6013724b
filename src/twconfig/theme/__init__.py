from twconfig.theme.merge import (
    CssRules,
    is_pseudo_element,
    merge_css,
    merge_typography,
    preset_from_theme,
)

__all__ = [
    "CssRules",
    "is_pseudo_element",
    "merge_css",
    "merge_typography",
    "preset_from_theme",
]
