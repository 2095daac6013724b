"""twconfig CLI entry point: Click group with subcommands."""

import logging

import click

from twconfig import __version__


@click.group()
@click.version_option(version=__version__, prog_name="twconfig")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """twconfig - validate and inspect utility-class generator configs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from twconfig.cli.build import build  # noqa: E402
from twconfig.cli.inspect import inspect  # noqa: E402
from twconfig.cli.validate import validate  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(build)
