"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import sys

import click

from twconfig.config import GeneratorSettings
from twconfig.errors import ConfigValidationError
from twconfig.loader import load_file
from twconfig.model.document import ConfigurationDocument
from twconfig.parser import ParseError


def load_or_exit(
    configfile: str | None, settings: GeneratorSettings
) -> ConfigurationDocument:
    """Load *configfile*, or the project document when none is given.

    Prints the error and exits with code 1 on parse or validation failure.
    """
    if configfile is None:
        from twconfig.project import CONFIG

        return CONFIG
    try:
        return load_file(configfile, settings=settings)
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)
    except ConfigValidationError as exc:
        click.echo(f"{type(exc).__name__}:", err=True)
        for diag in exc.diagnostics:
            click.echo(f"  {diag}", err=True)
        sys.exit(1)
