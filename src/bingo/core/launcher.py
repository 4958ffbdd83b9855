"""Process launching for registered executables."""

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class Launcher(ABC):
    """Abstract process launcher for dependency injection."""

    @abstractmethod
    def run(self, executable: Path, args: Sequence[str]) -> int:
        """Run ``executable`` with ``args`` attached to the current terminal.

        Returns:
            The process exit code

        Raises:
            OSError: If the executable cannot be started
        """
        ...


class RealLauncher(Launcher):
    """Production launcher using subprocess.run()."""

    def run(self, executable: Path, args: Sequence[str]) -> int:
        result = subprocess.run([str(executable), *args], check=False)
        return result.returncode
