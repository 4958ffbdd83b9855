"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bingo.cli.output import machine_output
from bingo.core.errors import RegistryError


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Registry error kind (e.g., "CONFIG_FILE_ERROR")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def _serialize_for_json(obj: Any) -> Any:
    """Recursively serialize Path values for JSON.

    For Pydantic models, use model.model_dump(mode='json') first.
    """
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {key: _serialize_for_json(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return type(obj)(_serialize_for_json(item) for item in obj)
    return obj


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    Args:
        data: Dictionary to serialize as JSON
    """
    serialized = _serialize_for_json(data)
    machine_output(json.dumps(serialized, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always raises to terminate with specified exit code
    """
    error_response = ErrorResponse(error=error, error_type=error_type, exit_code=exit_code)
    emit_json(error_response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def json_error_boundary(func: Callable) -> Callable:
    """Decorator that reports RegistryError as JSON when ``output_json`` is set.

    Without the flag the error is re-raised for normal error handling.

    Example:
        @click.command()
        @click.option("--json", "output_json", is_flag=True)
        @json_error_boundary
        def my_command(output_json: bool) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RegistryError as e:
            if kwargs.get("output_json", False):
                emit_json_error(str(e), e.kind.name, exit_code=1)
            raise

    return wrapper
