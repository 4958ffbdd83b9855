"""Fake Installer implementation for testing.

FakeInstaller keeps artifacts in memory so store and CLI tests can run
without touching a real bin directory.
"""

from pathlib import Path

from bingo.core.errors import ErrorKind, RegistryError
from bingo.core.installer.abc import Installer
from bingo.core.types import InstallMode


class FakeInstaller(Installer):
    """In-memory installer that records artifacts and calls.

    All state is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        *,
        bin_dir: Path | None = None,
        artifacts: dict[str, tuple[Path, InstallMode]] | None = None,
        fail_install_with: RegistryError | None = None,
    ) -> None:
        """Create FakeInstaller.

        Args:
            bin_dir: Reported bin directory (defaults to a sentinel path)
            artifacts: Pre-existing artifacts, name -> (source_path, mode)
            fail_install_with: Error raised by every install() call
        """
        self._bin_dir = bin_dir if bin_dir is not None else Path("/fake/bingo/bin")
        self._artifacts: dict[str, tuple[Path, InstallMode]] = dict(artifacts or {})
        self._fail_install_with = fail_install_with
        self._install_calls: list[tuple[Path, str, InstallMode]] = []
        self._uninstall_calls: list[str] = []

    @property
    def bin_dir(self) -> Path:
        return self._bin_dir

    @property
    def artifacts(self) -> dict[str, tuple[Path, InstallMode]]:
        """Current artifacts, for test assertions only."""
        return self._artifacts

    @property
    def install_calls(self) -> list[tuple[Path, str, InstallMode]]:
        return self._install_calls

    @property
    def uninstall_calls(self) -> list[str]:
        return self._uninstall_calls

    def install(self, source_path: Path, name: str, mode: InstallMode) -> None:
        self._install_calls.append((source_path, name, mode))
        if self._fail_install_with is not None:
            raise self._fail_install_with
        self._artifacts[name] = (source_path, mode)

    def uninstall(self, name: str) -> None:
        self._uninstall_calls.append(name)
        self._artifacts.pop(name, None)

    def rename(self, old_name: str, new_name: str) -> None:
        if old_name not in self._artifacts:
            raise RegistryError(ErrorKind.FILE_NOT_FOUND, str(self.artifact_path(old_name)))
        self._artifacts[new_name] = self._artifacts.pop(old_name)
