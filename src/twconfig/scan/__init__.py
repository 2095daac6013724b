from twconfig.scan.content import (
    base_class,
    enumerate_files,
    expand_braces,
    extract_candidates,
)

__all__ = ["base_class", "enumerate_files", "expand_braces", "extract_candidates"]
