"""`bingo cp` and `bingo ln`: register an executable."""

from pathlib import Path

import click

from bingo.cli.ensure import Ensure
from bingo.cli.error_boundary import cli_error_boundary
from bingo.cli.output import user_output
from bingo.core.context import BingoContext
from bingo.core.errors import RegistryError
from bingo.core.types import InstallMode


def derive_executable_name(path: Path) -> str:
    """Default registry name: the file name up to its first dot.

    ``tools/fmt.sh`` becomes ``fmt``; ``.hidden`` yields an empty string.
    """
    return path.name.split(".")[0]


def add_executable(ctx: BingoContext, path_arg: str, name: str | None, mode: InstallMode) -> None:
    """Register ``path_arg`` in ``mode``, save the manifest and report."""
    path = Path(path_arg)
    if not name:
        name = derive_executable_name(path)
        Ensure.invariant(
            bool(name),
            f"Cannot derive an executable name from {path_arg}; pass NAME explicitly",
        )

    registry = ctx.open_registry()
    replacing = registry.get(name) is not None
    try:
        entry = registry.add(path, name, mode)
    except RegistryError:
        # A failed overwrite has already uninstalled the old artifact and
        # dropped its entry; record that before reporting the error.
        if replacing and registry.get(name) is None:
            registry.save()
        raise
    registry.save()

    verb = "Copied" if mode is InstallMode.COPY else "Linked"
    user_output(
        click.style(verb, fg="green")
        + f" {entry.name} "
        + click.style("to", fg="green")
        + f" {registry.artifact_path(entry.name)}"
    )
    user_output(click.style(f"  from {entry.source_path}", dim=True))


@click.command("cp")
@click.argument("path")
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def cp_cmd(ctx: BingoContext, path: str, name: str | None) -> None:
    """Copy executable PATH into the bin directory as NAME."""
    add_executable(ctx, path, name, InstallMode.COPY)


@click.command("ln")
@click.argument("path")
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def ln_cmd(ctx: BingoContext, path: str, name: str | None) -> None:
    """Link executable PATH into the bin directory as NAME."""
    add_executable(ctx, path, name, InstallMode.LINK)
