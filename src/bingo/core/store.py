"""Manifest store: registration rules on top of the installer.

The store mutates an in-memory Registry and keeps the bin directory in step
with it. It never persists anything; a mutation is only committed once the
caller saves the registry.
"""

import logging
import os
import stat
from dataclasses import replace
from pathlib import Path

from bingo.core.errors import ErrorKind, RegistryError, registry_error_from_os_error
from bingo.core.installer.abc import Installer
from bingo.core.types import ExecutableEntry, InstallMode, Registry

logger = logging.getLogger(__name__)


def resolve_source_path(path: Path, cwd: Path) -> Path:
    """Make ``path`` absolute by joining it to ``cwd``. Symlinks are kept."""
    if path.is_absolute():
        return path
    return cwd / path


def validate_executable_name(name: str) -> None:
    """Reject names that cannot live as a single file in the bin directory.

    Raises:
        RegistryError: INVALID_EXECUTABLE_NAME for empty names, ``.``/``..``,
            names containing a path separator or NUL, or names that are not
            valid UTF-8
    """
    if not name or name in (".", "..") or "/" in name or os.sep in name or "\0" in name:
        raise RegistryError(ErrorKind.INVALID_EXECUTABLE_NAME, repr(name))
    if not _is_utf8(name):
        raise RegistryError(ErrorKind.INVALID_EXECUTABLE_NAME, repr(name))


def _is_utf8(value: str) -> bool:
    # Undecodable bytes from argv or the filesystem arrive as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _validate_source_encoding(path: Path) -> None:
    """The manifest is UTF-8 JSON, so every recorded path must encode."""
    if not _is_utf8(str(path)):
        printable = os.fsencode(path).decode("utf-8", errors="backslashreplace")
        raise RegistryError(ErrorKind.INVALID_SOURCE_PATH, printable)


def _validate_new_source(path: Path) -> None:
    try:
        target = path.stat()
        link = path.lstat()
    except OSError as e:
        raise registry_error_from_os_error(e, path) from e

    if not stat.S_ISREG(target.st_mode):
        raise RegistryError(ErrorKind.EXECUTABLE_NOT_FILE, str(path))
    # A symlink is judged by its own metadata, a regular path by its target's
    mode_source = link if stat.S_ISLNK(link.st_mode) else target
    if not stat.S_IMODE(mode_source.st_mode) & 0o111:
        raise RegistryError(ErrorKind.EXECUTABLE_NOT_EXECUTABLE, str(path))


class ManifestStore:
    """Validates and applies add/remove/rename against a Registry.

    Invariants maintained by construction:
    - names in ``registry.entries`` are unique
    - every entry has exactly one artifact ``<bin_dir>/<name>`` and vice versa
    """

    def __init__(self, registry: Registry, installer: Installer, cwd: Path) -> None:
        """Create a store.

        Args:
            registry: In-memory registry to mutate
            installer: Bin directory operations
            cwd: Directory relative source paths are resolved against
        """
        self._registry = registry
        self._installer = installer
        self._cwd = cwd

    @property
    def registry(self) -> Registry:
        return self._registry

    def add(self, path: Path, name: str, mode: InstallMode) -> ExecutableEntry:
        """Register ``path`` under ``name``, or overwrite an existing ``name``.

        Re-registering an existing name is a supported overwrite: the old
        artifact is replaced and the entry keeps its position, and the new
        source is not validated. A new name must point at an existing,
        executable regular file.

        Args:
            path: Source executable, absolute or relative to the store's cwd
            name: Registry name and artifact file name
            mode: Copy or link

        Returns:
            The entry now registered under ``name``

        Raises:
            RegistryError: INVALID_EXECUTABLE_NAME, INVALID_SOURCE_PATH,
                FILE_NOT_FOUND, EXECUTABLE_NOT_FILE, EXECUTABLE_NOT_EXECUTABLE,
                or any installer or filesystem failure. Entries are unchanged
                on validation failures.
        """
        validate_executable_name(name)
        source_path = resolve_source_path(path, self._cwd)
        _validate_source_encoding(source_path)
        entry = ExecutableEntry(name=name, source_path=source_path, install_mode=mode)
        entries = self._registry.entries

        if name in entries:
            self._installer.uninstall(name)
            try:
                self._installer.install(source_path, name, mode)
            except RegistryError:
                # The old artifact is gone, so the old entry would be an orphan
                del entries[name]
                raise
            entries[name] = entry
            logger.debug("Updated %s -> %s (%s)", name, source_path, mode.value)
            return entry

        _validate_new_source(source_path)
        self._installer.install(source_path, name, mode)
        entries[name] = entry
        logger.debug("Added %s -> %s (%s)", name, source_path, mode.value)
        return entry

    def remove(self, name: str) -> bool:
        """Unregister ``name`` and delete its artifact.

        Returns:
            True if an entry was removed, False if ``name`` was not registered
        """
        if name not in self._registry.entries:
            return False

        self._installer.uninstall(name)
        del self._registry.entries[name]
        logger.debug("Removed %s", name)
        return True

    def rename(self, old_name: str, new_name: str) -> bool:
        """Rename an entry and move its artifact.

        Returns:
            True if an entry was renamed, False if ``old_name`` was not
            registered or the names are equal

        Raises:
            RegistryError: DUPLICATE_EXECUTABLE_NAME if ``new_name`` is already
                registered, INVALID_EXECUTABLE_NAME, or FILE_NOT_FOUND if the
                artifact is missing. Entries are unchanged on failure.
        """
        entries = self._registry.entries
        if old_name not in entries or old_name == new_name:
            return False

        validate_executable_name(new_name)
        if new_name in entries:
            raise RegistryError(ErrorKind.DUPLICATE_EXECUTABLE_NAME, new_name)

        self._installer.rename(old_name, new_name)

        # Rebuild to keep the renamed entry in its original position
        self._registry.entries = {
            (new_name if key == old_name else key): (
                replace(entry, name=new_name) if key == old_name else entry
            )
            for key, entry in entries.items()
        }
        logger.debug("Renamed %s -> %s", old_name, new_name)
        return True

    def get(self, name: str) -> ExecutableEntry | None:
        return self._registry.entries.get(name)

    def list(self) -> list[ExecutableEntry]:
        """Entries in registration order."""
        return list(self._registry.entries.values())
