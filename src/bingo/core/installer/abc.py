"""Installer abstraction for materializing executables in the bin directory.

The installer knows nothing about the manifest. It only creates, removes and
moves artifacts named ``<bin_dir>/<name>``.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from bingo.core.types import InstallMode


class Installer(ABC):
    """Abstract bin directory operations for dependency injection."""

    @property
    @abstractmethod
    def bin_dir(self) -> Path:
        """Managed bin directory that holds every artifact."""
        ...

    def artifact_path(self, name: str) -> Path:
        """Location of the artifact for ``name`` inside the bin directory."""
        return self.bin_dir / name

    @abstractmethod
    def install(self, source_path: Path, name: str, mode: InstallMode) -> None:
        """Materialize ``source_path`` as ``<bin_dir>/<name>``.

        Any existing file or link at the destination is replaced.

        Args:
            source_path: Absolute path of the original executable
            name: Artifact file name inside the bin directory
            mode: Copy the bytes or create a symbolic link

        Raises:
            RegistryError: PERMISSION_DENIED if the artifact's permission
                metadata cannot be read or set, FILE_NOT_FOUND or
                INSTALL_FAILED if materialization itself fails
        """
        ...

    @abstractmethod
    def uninstall(self, name: str) -> None:
        """Remove ``<bin_dir>/<name>`` if present. Absent artifacts are a no-op."""
        ...

    @abstractmethod
    def rename(self, old_name: str, new_name: str) -> None:
        """Move ``<bin_dir>/<old_name>`` to ``<bin_dir>/<new_name>``.

        Raises:
            RegistryError: FILE_NOT_FOUND if there is no artifact for old_name
        """
        ...
