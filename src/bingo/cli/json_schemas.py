"""Pydantic models for JSON output schemas.

These models validate the structure printed by commands that support --json.
"""

from pydantic import BaseModel, ConfigDict, Field

from bingo.core.types import ExecutableEntry


class ExecutableInfo(BaseModel):
    """One registered executable in `bingo ls --json`.

    Attributes:
        name: Registry name
        path: Absolute source path
        executable_type: "Binary" (copy) or "LinkBinary" (symlink)
        artifact: Path of the materialized file inside the bin directory
    """

    model_config = ConfigDict(strict=True)

    name: str
    path: str
    executable_type: str = Field(..., pattern="^(Binary|LinkBinary)$")
    artifact: str

    @staticmethod
    def from_entry(entry: ExecutableEntry, artifact: str) -> "ExecutableInfo":
        return ExecutableInfo(
            name=entry.name,
            path=str(entry.source_path),
            executable_type=entry.install_mode.value,
            artifact=artifact,
        )


class ListCommandResponse(BaseModel):
    """JSON response schema for the `bingo ls --json` command."""

    model_config = ConfigDict(strict=True)

    bin_dir: str
    executables: list[ExecutableInfo]
