import click

from bingo.cli.error_boundary import cli_error_boundary
from bingo.cli.json_output import emit_json, json_error_boundary
from bingo.cli.json_schemas import ExecutableInfo, ListCommandResponse
from bingo.cli.output import machine_output
from bingo.core.context import BingoContext
from bingo.core.registry import BingoRegistry
from bingo.core.types import InstallMode


def _emit_list_json(registry: BingoRegistry) -> None:
    response = ListCommandResponse(
        bin_dir=str(registry.bin_dir),
        executables=[
            ExecutableInfo.from_entry(entry, str(registry.artifact_path(entry.name)))
            for entry in registry.list()
        ],
    )
    emit_json(response.model_dump(mode="json"))


@click.command("ls")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
@cli_error_boundary
@json_error_boundary
def ls_cmd(ctx: BingoContext, output_json: bool) -> None:
    """List executables in the bin directory."""
    registry = ctx.open_registry()

    if output_json:
        _emit_list_json(registry)
        return

    entries = registry.list()
    if not entries:
        machine_output("No executables found.")
        return

    for index, entry in enumerate(entries, start=1):
        if entry.install_mode is InstallMode.COPY:
            line = f"{index}: {entry.name} => " + click.style(str(entry.source_path), fg="green")
        else:
            line = f"{index}: {entry.name} -> " + click.style(str(entry.source_path), fg="cyan")
        machine_output(line)
