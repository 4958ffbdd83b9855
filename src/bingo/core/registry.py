"""Registry facade: persisted state plus the store that mutates it."""

from pathlib import Path

from bingo.core.installer.abc import Installer
from bingo.core.manifest.abc import ManifestPersistence
from bingo.core.store import ManifestStore
from bingo.core.types import ExecutableEntry, InstallMode, Registry


class BingoRegistry:
    """The unit callers use: load on open, mutate in memory, save on demand.

    Mutations are not persisted automatically. Call save() after each
    mutating command, or once after a batch of them. Until save() succeeds,
    artifacts already written to the bin directory may be ahead of the
    manifest on disk.
    """

    def __init__(
        self,
        persistence: ManifestPersistence,
        installer: Installer,
        registry: Registry,
        cwd: Path,
    ) -> None:
        self._persistence = persistence
        self._installer = installer
        self._store = ManifestStore(registry, installer, cwd)

    @staticmethod
    def open(persistence: ManifestPersistence, installer: Installer, cwd: Path) -> "BingoRegistry":
        """Initialize the manifest on first run, then load it.

        Raises:
            RegistryError: CONFIG_FILE_NOT_FOUND or CONFIG_FILE_ERROR
        """
        persistence.initialize_if_absent()
        registry = persistence.load()
        return BingoRegistry(persistence, installer, registry, cwd)

    @property
    def registry(self) -> Registry:
        return self._store.registry

    @property
    def bin_dir(self) -> Path:
        return self._installer.bin_dir

    @property
    def manifest_path(self) -> Path:
        return self._persistence.path()

    def artifact_path(self, name: str) -> Path:
        return self._installer.artifact_path(name)

    def add(self, path: Path, name: str, mode: InstallMode) -> ExecutableEntry:
        return self._store.add(path, name, mode)

    def remove(self, name: str) -> bool:
        return self._store.remove(name)

    def rename(self, old_name: str, new_name: str) -> bool:
        return self._store.rename(old_name, new_name)

    def get(self, name: str) -> ExecutableEntry | None:
        return self._store.get(name)

    def list(self) -> list[ExecutableEntry]:
        return self._store.list()

    def save(self) -> None:
        """Persist the current registry, committing all prior mutations."""
        self._persistence.save(self._store.registry)

    def path_export_hint(self) -> str:
        """Shell line that puts the bin directory on PATH."""
        return f"export PATH={self.bin_dir}:$PATH"
