"""`bingo run`: execute a registered executable by name."""

import click

from bingo.cli.ensure import Ensure
from bingo.cli.error_boundary import cli_error_boundary
from bingo.cli.output import user_output
from bingo.core.context import BingoContext


@click.command(
    "run",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("name")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
@cli_error_boundary
def run_cmd(ctx: BingoContext, name: str, args: tuple[str, ...]) -> None:
    """Run executable NAME from the bin directory with ARGS.

    Exits with the executable's exit code.
    """
    registry = ctx.open_registry()
    entry = Ensure.not_none(registry.get(name), f"Executable {name} not found.")
    artifact = registry.artifact_path(entry.name)

    try:
        exit_code = ctx.launcher.run(artifact, args)
    except OSError as e:
        user_output(click.style("Error: ", fg="red") + f"failed to run {artifact}: {e}")
        raise SystemExit(1) from None

    raise SystemExit(exit_code)
