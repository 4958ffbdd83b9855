"""Production installer operating on the real filesystem."""

import logging
import os
import shutil
import stat
from pathlib import Path

from bingo.core.errors import ErrorKind, RegistryError, registry_error_from_os_error
from bingo.core.installer.abc import Installer
from bingo.core.types import InstallMode

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class RealInstaller(Installer):
    """Copies or links executables into a bin directory on disk."""

    def __init__(self, bin_dir: Path) -> None:
        self._bin_dir = bin_dir

    @property
    def bin_dir(self) -> Path:
        return self._bin_dir

    def install(self, source_path: Path, name: str, mode: InstallMode) -> None:
        dest = self.artifact_path(name)

        try:
            self._bin_dir.mkdir(parents=True, exist_ok=True)
            # lexists so a dangling symlink is replaced too
            if os.path.lexists(dest):
                dest.unlink()
            if mode is InstallMode.COPY:
                shutil.copyfile(source_path, dest)
            else:
                dest.symlink_to(source_path)
        except OSError as e:
            raise registry_error_from_os_error(e, dest) from e

        self._make_executable(dest, mode)
        logger.debug("Installed %s -> %s (%s)", dest, source_path, mode.value)

    def _make_executable(self, dest: Path, mode: InstallMode) -> None:
        """Set execute bits on the artifact itself, never on a link target."""
        try:
            if mode is InstallMode.COPY:
                current = stat.S_IMODE(dest.stat().st_mode)
                os.chmod(dest, current | EXECUTE_BITS)
                return

            current = stat.S_IMODE(dest.lstat().st_mode)
            if os.chmod in os.supports_follow_symlinks:
                os.chmod(dest, current | EXECUTE_BITS, follow_symlinks=False)
            # Otherwise the platform fixes link permissions (0o777 on Linux)
        except OSError as e:
            raise RegistryError(ErrorKind.PERMISSION_DENIED, str(dest)) from e

    def uninstall(self, name: str) -> None:
        dest = self.artifact_path(name)
        if not os.path.lexists(dest):
            return

        try:
            dest.unlink()
        except OSError as e:
            raise registry_error_from_os_error(e, dest) from e
        logger.debug("Uninstalled %s", dest)

    def rename(self, old_name: str, new_name: str) -> None:
        old_path = self.artifact_path(old_name)
        new_path = self.artifact_path(new_name)

        if not os.path.lexists(old_path):
            raise RegistryError(ErrorKind.FILE_NOT_FOUND, str(old_path))

        try:
            os.replace(old_path, new_path)
        except OSError as e:
            raise registry_error_from_os_error(e, old_path) from e
        logger.debug("Renamed %s -> %s", old_path, new_path)
