"""Filesystem locations of the manifest and the managed bin directory."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

BINGO_HOME_ENV = "BINGO_HOME"
DEFAULT_DIR_NAME = ".bingo"
MANIFEST_FILE_NAME = "bingo.json"
BIN_DIR_NAME = "bin"


@dataclass(frozen=True)
class RegistryPaths:
    """Resolved registry locations.

    Built once at the CLI entry point and passed to the installer and
    persistence layers, so nothing below reads the environment.
    """

    manifest_path: Path
    bin_dir: Path

    @staticmethod
    def under(root: Path) -> "RegistryPaths":
        """Lay out the manifest and bin directory under ``root``."""
        return RegistryPaths(
            manifest_path=root / MANIFEST_FILE_NAME,
            bin_dir=root / BIN_DIR_NAME,
        )


def resolve_registry_paths(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> RegistryPaths:
    """Resolve registry paths from ``$BINGO_HOME`` or ``~/.bingo``.

    Args:
        environ: Environment mapping (defaults to os.environ)
        home: Home directory (defaults to Path.home())

    Returns:
        RegistryPaths rooted at the override or the default location
    """
    env = os.environ if environ is None else environ
    override = env.get(BINGO_HOME_ENV, "")
    if override:
        return RegistryPaths.under(Path(override).expanduser())

    home_dir = home if home is not None else Path.home()
    return RegistryPaths.under(home_dir / DEFAULT_DIR_NAME)
