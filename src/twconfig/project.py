"""This project's configuration document.

Scans the Rust sources for class usage, loads the forms and typography
plugins, and switches off the typography preset's styling for inline
elements the templates style themselves.
"""

from twconfig.loader import load_mapping

RAW_CONFIG = {
    "content": ["./src/*.rs"],
    "plugins": ["@tailwindcss/forms", "@tailwindcss/typography"],
    "theme": {
        "extend": {
            "typography": {
                "DEFAULT": {
                    "css": {
                        "strong": "none",
                        "img": "none",
                        "figure": "none",
                        "a": "none",
                        "code": "none",
                        "code::before": {
                            "content": "none",
                        },
                        "code::after": {
                            "content": "none",
                        },
                        "pre": "none",
                        "pre code": {
                            "white-space": "pre-wrap",
                        },
                    },
                },
            },
        },
    },
}

CONFIG = load_mapping(RAW_CONFIG)
