"""CLI command: twconfig build -- run the generator harness over a config."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from twconfig.cli.common import load_or_exit
from twconfig.config import GeneratorSettings
from twconfig.errors import UnknownPluginError
from twconfig.generator import Generator


@click.command()
@click.argument("configfile", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--base-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory content patterns are resolved from (default: config's directory).",
)
@click.option("--json", "as_json", is_flag=True, help="Emit the result as JSON.")
def build(configfile: str | None, base_dir: str | None, as_json: bool) -> None:
    """Scan content, resolve plugins and print the merged typography theme."""
    if base_dir is None:
        base_dir = str(Path(configfile).parent) if configfile else "."
    settings = GeneratorSettings(base_dir=Path(base_dir))
    document = load_or_exit(configfile, settings)

    try:
        result = Generator(document, settings).build()
    except UnknownPluginError as exc:
        click.echo(f"UnknownPluginError: {exc}", err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "plugins": [p.name for p in result.plugins],
            "files": [str(f) for f in result.files],
            "utilities": list(result.utilities),
            "typography": result.typography,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Plugins: {', '.join(p.name for p in result.plugins) or '(none)'}")
    click.echo(f"Files scanned: {len(result.files)}")
    for path in result.files:
        click.echo(f"  {path}")
    click.echo(f"Utilities: {len(result.utilities)}")
    for name in result.utilities:
        click.echo(f"  {name}")
    for variant, rules in result.typography.items():
        click.echo()
        click.echo(f"Typography {variant}:")
        for selector, props in rules.items():
            body = "; ".join(f"{k}: {v}" for k, v in props.items())
            click.echo(f"  {selector} {{ {body} }}")
