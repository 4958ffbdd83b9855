import logging
import os

import click

from bingo.cli.commands.add import cp_cmd, ln_cmd
from bingo.cli.commands.ls import ls_cmd
from bingo.cli.commands.mv import mv_cmd
from bingo.cli.commands.path import path_cmd
from bingo.cli.commands.rm import rm_cmd
from bingo.cli.commands.run import run_cmd
from bingo.cli.help_formatter import BingoGroup
from bingo.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if BINGO_DEBUG environment variable is set
if os.getenv("BINGO_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(cls=BingoGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="bingo")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Keep your own executables in one bin directory.

    Any registered NAME can also be run directly as `bingo NAME [ARGS]...`.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(cp_cmd)
cli.add_command(ln_cmd)
cli.add_command(rm_cmd)
cli.add_command(mv_cmd)
cli.add_command(ls_cmd)
cli.add_command(run_cmd)
cli.add_command(run_cmd, name="r")
cli.add_command(path_cmd)


def main() -> None:
    """CLI entry point used by the `bingo` console script."""
    cli()
