"""Manifest persistence backed by a JSON file."""

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from bingo.core.errors import ErrorKind, RegistryError
from bingo.core.manifest.abc import ManifestPersistence
from bingo.core.manifest.schema import dump_registry, load_registry
from bingo.core.paths import RegistryPaths
from bingo.core.types import Registry
from bingo.version import __version__

logger = logging.getLogger(__name__)


class FileManifestPersistence(ManifestPersistence):
    """Reads and writes ``<root>/bingo.json``."""

    def __init__(self, paths: RegistryPaths) -> None:
        self._paths = paths

    def path(self) -> Path:
        return self._paths.manifest_path

    def initialize_if_absent(self) -> None:
        manifest_path = self._paths.manifest_path
        if manifest_path.exists():
            return

        try:
            self._paths.bin_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RegistryError(ErrorKind.CONFIG_FILE_ERROR, f"{self._paths.bin_dir}: {e}") from e

        self.save(Registry(version=__version__))
        logger.debug("Initialized manifest at %s", manifest_path)

    def load(self) -> Registry:
        manifest_path = self._paths.manifest_path
        try:
            content = manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryError(ErrorKind.CONFIG_FILE_NOT_FOUND, f"{manifest_path}: {e}") from e

        try:
            registry = load_registry(content)
        except ValidationError as e:
            raise RegistryError(ErrorKind.CONFIG_FILE_ERROR, f"{manifest_path}: {e}") from e

        logger.debug("Loaded %d executable(s) from %s", len(registry.entries), manifest_path)
        return registry

    def save(self, registry: Registry) -> None:
        manifest_path = self._paths.manifest_path
        content = dump_registry(registry)

        # Write a sibling temp file and swap it in, so a failed write never
        # truncates the existing manifest.
        tmp_name: str | None = None
        try:
            manifest_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=manifest_path.parent, prefix=f".{manifest_path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, manifest_path)
            tmp_name = None
        except OSError as e:
            raise RegistryError(ErrorKind.CONFIG_FILE_ERROR, f"{manifest_path}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Saved %d executable(s) to %s", len(registry.entries), manifest_path)
