import click

from bingo.cli.error_boundary import cli_error_boundary
from bingo.cli.output import machine_output
from bingo.core.context import BingoContext


@click.command("path")
@click.option("--export", "as_export", is_flag=True, help="Print a shell line adding it to PATH.")
@click.pass_obj
@cli_error_boundary
def path_cmd(ctx: BingoContext, as_export: bool) -> None:
    """Print the bin directory executables are installed to."""
    registry = ctx.open_registry()
    if as_export:
        machine_output(registry.path_export_hint())
        return
    machine_output(str(registry.bin_dir))
