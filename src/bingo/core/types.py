"""Registry data types."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class InstallMode(Enum):
    """How an executable is materialized in the bin directory.

    Values are the ``executable_type`` strings used in the manifest file.
    """

    COPY = "Binary"
    LINK = "LinkBinary"


@dataclass(frozen=True)
class ExecutableEntry:
    """A single registered executable.

    ``source_path`` is absolute and frozen at registration time.
    """

    name: str
    source_path: Path
    install_mode: InstallMode


@dataclass
class Registry:
    """All registered executables plus the version that created the manifest.

    ``entries`` is keyed by name and keeps registration order.
    """

    version: str
    entries: dict[str, ExecutableEntry] = field(default_factory=dict)
