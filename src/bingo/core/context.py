"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click

from bingo.cli.output import user_output
from bingo.core.installer.abc import Installer
from bingo.core.installer.real import RealInstaller
from bingo.core.launcher import Launcher, RealLauncher
from bingo.core.manifest.abc import ManifestPersistence
from bingo.core.manifest.real import FileManifestPersistence
from bingo.core.paths import RegistryPaths, resolve_registry_paths
from bingo.core.registry import BingoRegistry


@dataclass(frozen=True)
class BingoContext:
    """Immutable context holding all dependencies for bingo commands.

    Created at CLI entry point and threaded through the application.
    """

    installer: Installer
    persistence: ManifestPersistence
    launcher: Launcher
    cwd: Path  # Current working directory at CLI invocation

    def open_registry(self) -> BingoRegistry:
        """Initialize (first run) and load the registry.

        Raises:
            RegistryError: If the manifest cannot be read or parsed
        """
        return BingoRegistry.open(self.persistence, self.installer, self.cwd)

    @staticmethod
    def for_test(
        installer: Installer | None = None,
        persistence: ManifestPersistence | None = None,
        launcher: Launcher | None = None,
        cwd: Path | None = None,
    ) -> "BingoContext":
        """Create test context with optional pre-configured implementations.

        Args:
            installer: If None, creates an empty FakeInstaller.
            persistence: If None, creates an InMemoryManifestPersistence with
                no manifest yet (first run).
            launcher: If None, creates a FakeLauncher.
            cwd: If None, uses Path("/test/default/cwd").

        Example:
            >>> installer = FakeInstaller()
            >>> ctx = BingoContext.for_test(installer=installer, cwd=tmp_path)
            >>> result = runner.invoke(cli, ["ls"], obj=ctx)
        """
        from tests.fakes.launcher import FakeLauncher

        from bingo.core.installer.fake import FakeInstaller
        from bingo.core.manifest.fake import InMemoryManifestPersistence

        if installer is None:
            installer = FakeInstaller()

        if persistence is None:
            persistence = InMemoryManifestPersistence()

        if launcher is None:
            launcher = FakeLauncher()

        return BingoContext(
            installer=installer,
            persistence=persistence,
            launcher=launcher,
            cwd=cwd or Path("/test/default/cwd"),
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        tuple[Path | None, str | None]: (path, error_message)
        - If successful: (Path, None)
        - If directory deleted: (None, error_message)
    """
    try:
        return (Path.cwd(), None)
    except OSError:
        return (None, "Current working directory no longer exists")


def create_context(paths: RegistryPaths | None = None) -> BingoContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        paths: Registry locations. If None, resolved from $BINGO_HOME or ~/.bingo.
    """
    cwd, error_msg = safe_cwd()
    if cwd is None:
        assert error_msg is not None
        user_output(click.style("Error: ", fg="red") + error_msg)
        user_output("\nThe directory you're running from has been deleted.")
        user_output("Please change to a valid directory and try again.")
        raise SystemExit(1)

    if paths is None:
        paths = resolve_registry_paths()

    return BingoContext(
        installer=RealInstaller(paths.bin_dir),
        persistence=FileManifestPersistence(paths),
        launcher=RealLauncher(),
        cwd=cwd,
    )
