from bingo.core.manifest.abc import ManifestPersistence
from bingo.core.manifest.fake import InMemoryManifestPersistence
from bingo.core.manifest.real import FileManifestPersistence

__all__ = [
    "FileManifestPersistence",
    "InMemoryManifestPersistence",
    "ManifestPersistence",
]
