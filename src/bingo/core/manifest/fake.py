"""In-memory manifest persistence for tests."""

from pathlib import Path

from bingo.core.errors import ErrorKind, RegistryError
from bingo.core.manifest.abc import ManifestPersistence
from bingo.core.manifest.schema import dump_registry, load_registry
from bingo.core.types import Registry
from bingo.version import __version__


class InMemoryManifestPersistence(ManifestPersistence):
    """Stores the manifest as a JSON string without touching the filesystem.

    Round-trips through the same serializer as the file implementation so
    saved registries are independent copies of the caller's object.
    """

    def __init__(
        self,
        registry: Registry | None = None,
        *,
        fail_save_with: str | None = None,
    ) -> None:
        """Initialize in-memory persistence.

        Args:
            registry: Initial manifest contents (None = manifest doesn't exist)
            fail_save_with: If set, save() raises CONFIG_FILE_ERROR with this text
        """
        self._content = dump_registry(registry) if registry is not None else None
        self._fail_save_with = fail_save_with
        self._save_count = 0

    @property
    def save_count(self) -> int:
        """Number of successful save() calls, for test assertions."""
        return self._save_count

    @property
    def saved(self) -> Registry | None:
        """Currently stored registry, or None if nothing was ever written."""
        if self._content is None:
            return None
        return load_registry(self._content)

    def path(self) -> Path:
        return Path("/fake/bingo/bingo.json")

    def initialize_if_absent(self) -> None:
        if self._content is None:
            self.save(Registry(version=__version__))

    def load(self) -> Registry:
        if self._content is None:
            raise RegistryError(ErrorKind.CONFIG_FILE_NOT_FOUND, str(self.path()))
        return load_registry(self._content)

    def save(self, registry: Registry) -> None:
        if self._fail_save_with is not None:
            raise RegistryError(ErrorKind.CONFIG_FILE_ERROR, self._fail_save_with)
        self._content = dump_registry(registry)
        self._save_count += 1
