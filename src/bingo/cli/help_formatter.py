"""Custom Click group for bingo's top-level command."""

import click

RUN_COMMAND_NAME = "run"

# alias -> command it stands for
COMMAND_ALIASES = {"r": RUN_COMMAND_NAME}


class BingoGroup(click.Group):
    """Click Group with run-by-name dispatch and sectioned help output.

    ``bingo NAME ARGS...`` where NAME is not a subcommand is resolved to
    ``bingo run NAME ARGS...``.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if (
            self.get_command(ctx, cmd_name) is None
            and not cmd_name.startswith("-")
            and not ctx.resilient_parsing
        ):
            run_cmd = self.get_command(ctx, RUN_COMMAND_NAME)
            if run_cmd is not None:
                return RUN_COMMAND_NAME, run_cmd, args
        return super().resolve_command(ctx, args)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        registry_names = ["cp", "ln", "rm", "mv", "ls"]

        registry_cmds = []
        other_cmds = []
        alias_rows = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            if subcommand in COMMAND_ALIASES:
                alias_rows.append((subcommand, f"Alias for `{COMMAND_ALIASES[subcommand]}`."))
            elif subcommand in registry_names:
                registry_cmds.append((subcommand, cmd))
            else:
                other_cmds.append((subcommand, cmd))

        registry_cmds.sort(key=lambda item: registry_names.index(item[0]))

        if registry_cmds:
            with formatter.section("Manage Executables"):
                self._format_command_list(formatter, registry_cmds)

        if other_cmds:
            with formatter.section("Run & Environment"):
                self._format_command_list(formatter, other_cmds)

        if alias_rows:
            with formatter.section("Quick Access (Aliases)"):
                formatter.write_dl(alias_rows)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        rows = [(name, cmd.get_short_help_str(limit=formatter.width)) for name, cmd in commands]
        if rows:
            formatter.write_dl(rows)
