"""CLI command: twconfig validate -- parse and validate a config file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from twconfig.config import GeneratorSettings
from twconfig.loader import check_file
from twconfig.model.diagnostic import Severity
from twconfig.parser import ParseError


@click.command()
@click.argument("configfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Reject unrecognized top-level keys.")
def validate(configfile: str, strict: bool) -> None:
    """Parse and validate a tailwind.config.js or JSON config file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    config_path = Path(configfile)

    try:
        diagnostics = check_file(config_path, settings=GeneratorSettings(strict_keys=strict))
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)

    if not diagnostics:
        click.echo(f"OK: {config_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
