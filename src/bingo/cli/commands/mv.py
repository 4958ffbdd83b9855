import click

from bingo.cli.error_boundary import cli_error_boundary
from bingo.cli.output import user_output
from bingo.core.context import BingoContext


@click.command("mv")
@click.argument("old")
@click.argument("new")
@click.pass_obj
@cli_error_boundary
def mv_cmd(ctx: BingoContext, old: str, new: str) -> None:
    """Rename executable OLD to NEW in the bin directory."""
    registry = ctx.open_registry()
    if not registry.rename(old, new):
        user_output(click.style(f"{old} is not registered, nothing to rename", fg="yellow"))
        return

    registry.save()
    user_output(
        click.style("Renamed", fg="green") + f" {old} " + click.style("to", fg="green") + f" {new}"
    )
