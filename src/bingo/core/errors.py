"""Registry error taxonomy.

Every failure the registry can surface is a RegistryError carrying an
ErrorKind and a descriptive string. Callers branch on ``kind`` rather than
on exception subclasses.
"""

import errno
import os
from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Closed set of registry failure kinds."""

    FILE_NOT_FOUND = "file not found"
    DUPLICATE_EXECUTABLE_NAME = "duplicate executable name"
    CONFIG_FILE_NOT_FOUND = "config file not found"
    CONFIG_FILE_ERROR = "config file error"
    EXECUTABLE_NOT_FILE = "executable must be a file"
    EXECUTABLE_NOT_EXECUTABLE = "executable cannot be executed"
    PERMISSION_DENIED = "Permission denied"
    INVALID_EXECUTABLE_NAME = "invalid executable name"
    INVALID_SOURCE_PATH = "source path is not valid UTF-8"
    INSTALL_FAILED = "install failed"


class RegistryError(Exception):
    """Raised by the installer, store and persistence layers.

    Attributes:
        kind: Which failure occurred
        detail: Path, name or underlying error text the failure refers to
    """

    def __init__(self, kind: ErrorKind, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}")


def registry_error_from_os_error(error: OSError, path: Path) -> RegistryError:
    """Translate a filesystem OSError into a RegistryError.

    The path the OS reported takes precedence over ``path``.
    """
    if error.filename is not None:
        path = Path(os.fsdecode(error.filename))
    if isinstance(error, FileNotFoundError) or error.errno == errno.ENOTDIR:
        return RegistryError(ErrorKind.FILE_NOT_FOUND, str(path))
    if isinstance(error, PermissionError):
        return RegistryError(ErrorKind.PERMISSION_DENIED, str(path))
    return RegistryError(ErrorKind.INSTALL_FAILED, f"{path}: {error.strerror or error}")
