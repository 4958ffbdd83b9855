from bingo.core.installer.abc import Installer
from bingo.core.installer.fake import FakeInstaller
from bingo.core.installer.real import RealInstaller

__all__ = [
    "FakeInstaller",
    "Installer",
    "RealInstaller",
]
