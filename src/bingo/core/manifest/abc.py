"""Manifest persistence interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from bingo.core.types import Registry


class ManifestPersistence(ABC):
    """Loads and saves the whole Registry as a single manifest document.

    Provides dependency injection for manifest access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def initialize_if_absent(self) -> None:
        """Create the bin directory and an empty manifest on first run.

        An existing manifest is left untouched, whatever its version.

        Raises:
            RegistryError: CONFIG_FILE_ERROR if the manifest cannot be written
        """
        ...

    @abstractmethod
    def load(self) -> Registry:
        """Read the manifest.

        Raises:
            RegistryError: CONFIG_FILE_NOT_FOUND if the manifest cannot be read,
                CONFIG_FILE_ERROR if it cannot be parsed as a registry
        """
        ...

    @abstractmethod
    def save(self, registry: Registry) -> None:
        """Replace the manifest with ``registry``.

        Raises:
            RegistryError: CONFIG_FILE_ERROR on any write failure
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Manifest location (for error messages and debugging)."""
        ...
