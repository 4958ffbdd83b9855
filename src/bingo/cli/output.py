"""Output routing for CLI commands.

Human-facing messages go to stderr via user_output(); data meant for other
programs goes to stdout via machine_output().
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a message for the person at the terminal (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Print data for scripts and pipes (stdout)."""
    click.echo(message, nl=nl)
