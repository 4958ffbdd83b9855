import click

from bingo.cli.error_boundary import cli_error_boundary
from bingo.cli.output import user_output
from bingo.core.context import BingoContext


@click.command("rm")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def rm_cmd(ctx: BingoContext, name: str) -> None:
    """Remove executable NAME from the bin directory."""
    registry = ctx.open_registry()
    if not registry.remove(name):
        user_output(click.style(f"{name} is not registered, nothing to remove", fg="yellow"))
        return

    registry.save()
    user_output(click.style("Removed", fg="green") + f" {name}")
