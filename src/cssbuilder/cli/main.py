"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("-v", "--verbose", is_flag=True, help="Log builder activity to stderr")
@click.option(
    "--unique-id/--no-unique-id",
    default=False,
    help="Reject a second id fragment in one compound selector",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, unique_id: bool) -> None:
    """cssbuilder - build CSS3 selector strings from fragments."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = BuilderConfig(unique_id=unique_id)


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.kinds import kinds  # noqa: E402

cli.add_command(build)
cli.add_command(kinds)
