"""Build a :class:`ConfigurationDocument` from a raw mapping or a config file."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Mapping

from twconfig.config import GeneratorSettings
from twconfig.model.diagnostic import Diagnostic
from twconfig.model.document import (
    ConfigurationDocument,
    Theme,
    ThemeExtension,
    TypographyVariant,
    override_from_value,
)
from twconfig.parser import ParseError, parse_config_source, parse_json_source
from twconfig.validation import validate, validate_or_raise

logger = logging.getLogger(__name__)

JS_SUFFIXES = frozenset({".js", ".cjs", ".mjs"})


def read_mapping(path: Path | str) -> dict[str, object]:
    """Read and parse a config file into a raw nested mapping (no validation)."""
    path = Path(path)
    data = path.read_bytes()
    try:
        source = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line_start = data.rfind(b"\n", 0, exc.start) + 1
        raise ParseError(
            f"Invalid UTF-8 in {path.name}: {exc.reason}",
            line=data.count(b"\n", 0, exc.start) + 1,
            column=exc.start - line_start + 1,
        ) from exc
    if path.suffix == ".json":
        return parse_json_source(source)
    if path.suffix in JS_SUFFIXES:
        return parse_config_source(source)
    raise ParseError(f"Unsupported config file type: {path.name}")


def _build_theme(raw: Mapping[str, object]) -> Theme:
    extend_raw = raw.get("extend", {})
    typography: dict[str, TypographyVariant] = {}
    other: dict[str, object] = {}
    for key, value in extend_raw.items():
        if key != "typography":
            other[key] = copy.deepcopy(value)
            continue
        for variant, body in value.items():
            css = body.get("css", {})
            typography[str(variant)] = TypographyVariant(
                css={str(sel): override_from_value(d) for sel, d in css.items()}
            )
    replace = {k: copy.deepcopy(v) for k, v in raw.items() if k != "extend"}
    return Theme(
        extend=ThemeExtension(typography=typography, other=other),
        replace=replace,
    )


def build_document(raw: Mapping[str, object]) -> ConfigurationDocument:
    """Build typed objects from an already-validated raw mapping."""
    theme_raw = raw.get("theme", {})
    extra = {
        k: copy.deepcopy(v)
        for k, v in raw.items()
        if k not in ("content", "plugins", "theme")
    }
    return ConfigurationDocument(
        content=tuple(raw.get("content", ())),  # type: ignore[arg-type]
        plugins=tuple(raw.get("plugins", ())),  # type: ignore[arg-type]
        theme=_build_theme(theme_raw),
        extra=extra,
    )


def load_mapping(
    raw: Mapping[str, object], settings: GeneratorSettings | None = None
) -> ConfigurationDocument:
    """Validate *raw* and build a document.

    Raises :class:`SchemaError` or :class:`UnknownPluginError` before any
    object is built.
    """
    diagnostics = validate_or_raise(raw, settings=settings)
    for diag in diagnostics:
        if diag.is_warning:
            logger.warning("%s", diag)
        else:
            logger.debug("%s", diag)
    return build_document(raw)


def load_file(
    path: Path | str, settings: GeneratorSettings | None = None
) -> ConfigurationDocument:
    """Read, validate and build the document stored at *path*."""
    logger.info("Loading config from %s", path)
    return load_mapping(read_mapping(path), settings=settings)


def check_file(
    path: Path | str, settings: GeneratorSettings | None = None
) -> list[Diagnostic]:
    """Read *path* and return every diagnostic without raising on errors."""
    return validate(read_mapping(path), settings=settings)
