"""Content scanning: expand content globs and extract class-name candidates."""

from __future__ import annotations

import fnmatch
import glob
import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

# Innermost ``{a,b}`` group of a glob pattern.
_BRACE_RE = re.compile(r"\{([^{}]*)\}")

# Runs of characters that may form a class name, including variant and
# arbitrary-value syntax (``md:prose-lg``, ``w-[50%]``, ``w-1/2``).
_CANDIDATE_RE = re.compile(r"[A-Za-z0-9_\-:/.\[\]%#!@]+")

_HAS_LETTER_RE = re.compile(r"[A-Za-z]")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternations in a glob pattern.

    ``"src/*.{html,rs}"`` becomes ``["src/*.html", "src/*.rs"]``.
    """
    match = _BRACE_RE.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def _normalize(pattern: str) -> str:
    return pattern[2:] if pattern.startswith("./") else pattern


def enumerate_files(patterns: Iterable[str], base_dir: Path | str = ".") -> list[Path]:
    """Return the files matched by *patterns*, relative patterns resolved from *base_dir*.

    Patterns starting with ``!`` exclude previously matched files.  Results
    keep pattern order, each pattern's matches sorted, without duplicates.
    A pattern matching nothing is not an error.
    """
    base = Path(base_dir)
    includes: list[str] = []
    excludes: list[str] = []
    for pattern in patterns:
        if pattern.startswith("!"):
            excludes.extend(_normalize(p) for p in expand_braces(pattern[1:]))
        else:
            includes.extend(expand_braces(pattern))

    seen: set[Path] = set()
    files: list[Path] = []
    for pattern in includes:
        matches = sorted(glob.glob(pattern, root_dir=base, recursive=True))
        if not matches:
            logger.debug("Content pattern %r matched no files", pattern)
        for rel in matches:
            normalized = _normalize(rel)
            if any(fnmatch.fnmatch(normalized, ex) for ex in excludes):
                continue
            path = base / rel
            if not path.is_file():
                continue
            resolved = path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            files.append(path)
    return files


def extract_candidates(text: str) -> set[str]:
    """Extract class-name candidates from file *text*.

    Candidates are over-inclusive; the generator discards tokens that do not
    name a known utility.
    """
    candidates: set[str] = set()
    for raw in _CANDIDATE_RE.findall(text):
        token = raw.strip(".:/")
        if token and _HAS_LETTER_RE.search(token):
            candidates.add(token)
    return candidates


def base_class(candidate: str) -> str:
    """Strip variant prefixes and the important marker: ``md:!prose-lg`` -> ``prose-lg``."""
    return candidate.rsplit(":", 1)[-1].lstrip("!")
