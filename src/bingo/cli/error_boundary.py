"""Error boundary handling for CLI commands.

Registry failures are expected outcomes (missing files, bad manifests), so
commands report them as a single styled line instead of a stack trace.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from bingo.cli.output import user_output
from bingo.core.errors import RegistryError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns RegistryError into ``Error: <message>`` and exit 1.

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: BingoContext) -> None:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RegistryError as e:
            logger.debug("Command failed with %s", e.kind.name, exc_info=True)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
