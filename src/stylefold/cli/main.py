"""Stylefold CLI entry point: Click group with subcommands."""

import logging

import click

from stylefold import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylefold")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Stylefold - geometric fold compression and similarity for stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylefold.cli.inspect import inspect  # noqa: E402
from stylefold.cli.analyze import analyze  # noqa: E402
from stylefold.cli.compress import compress  # noqa: E402

cli.add_command(inspect)
cli.add_command(analyze)
cli.add_command(compress)
