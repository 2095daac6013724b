"""CLI command: twconfig inspect -- display a config document's structure."""

from __future__ import annotations

import click

from twconfig.cli.common import load_or_exit
from twconfig.config import GeneratorSettings
from twconfig.model.document import Patch, Suppress


@click.command()
@click.argument("configfile", required=False, type=click.Path(exists=True, dir_okay=False))
def inspect(configfile: str | None) -> None:
    """Display content patterns, plugins and typography overrides.

    Without CONFIGFILE, shows the project's own document.
    """
    document = load_or_exit(configfile, GeneratorSettings())

    click.echo(f"Content: {len(document.content)} pattern(s)")
    for pattern in document.content:
        click.echo(f"  {pattern}")
    click.echo(f"Plugins: {len(document.plugins)}")
    for ident in document.plugins:
        click.echo(f"  {ident}")
    click.echo()

    click.echo("Typography overrides:")
    for variant, body in document.theme.extend.typography.items():
        click.echo(f"  {variant}:")
        for selector, override in body.css.items():
            if isinstance(override, Suppress):
                click.echo(f"    {selector}  suppress")
            elif isinstance(override, Patch):
                props = "; ".join(f"{k}: {v}" for k, v in override.properties.items())
                click.echo(f"    {selector}  patch {{{props}}}")

    if document.extra:
        click.echo()
        click.echo(f"Ignored keys: {', '.join(document.extra)}")
