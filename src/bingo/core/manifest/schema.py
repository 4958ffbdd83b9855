"""Pydantic models for the on-disk manifest document.

The manifest is a JSON object of the form::

    {
      "version": "0.1.0",
      "executables": [
        {"name": "fmt", "path": "/opt/tools/fmt", "executable_type": "Binary"}
      ]
    }

Unknown ``executable_type`` values are read as ``Binary``.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from bingo.core.types import ExecutableEntry, InstallMode, Registry


class ManifestExecutable(BaseModel):
    """One ``executables`` row."""

    name: str = Field(min_length=1)
    path: str
    executable_type: str


class ManifestDocument(BaseModel):
    """The whole manifest file."""

    version: str
    executables: list[ManifestExecutable]

    @model_validator(mode="after")
    def _check_unique_names(self) -> "ManifestDocument":
        seen: set[str] = set()
        for executable in self.executables:
            if executable.name in seen:
                raise ValueError(f"duplicate executable name: {executable.name}")
            seen.add(executable.name)
        return self


def parse_install_mode(value: str) -> InstallMode:
    """Map an ``executable_type`` string to InstallMode, defaulting to COPY."""
    for mode in InstallMode:
        if mode.value == value:
            return mode
    return InstallMode.COPY


def registry_from_document(document: ManifestDocument) -> Registry:
    entries = {
        executable.name: ExecutableEntry(
            name=executable.name,
            source_path=Path(executable.path),
            install_mode=parse_install_mode(executable.executable_type),
        )
        for executable in document.executables
    }
    return Registry(version=document.version, entries=entries)


def document_from_registry(registry: Registry) -> ManifestDocument:
    return ManifestDocument(
        version=registry.version,
        executables=[
            ManifestExecutable(
                name=entry.name,
                path=str(entry.source_path),
                executable_type=entry.install_mode.value,
            )
            for entry in registry.entries.values()
        ],
    )


def dump_registry(registry: Registry) -> str:
    """Serialize a registry as pretty-printed manifest JSON."""
    document = document_from_registry(registry)
    return json.dumps(document.model_dump(mode="json"), indent=2) + "\n"


def load_registry(content: str) -> Registry:
    """Parse manifest JSON into a Registry.

    Raises:
        pydantic.ValidationError: If the content is not valid JSON or does not
            match the manifest document shape
    """
    return registry_from_document(ManifestDocument.model_validate_json(content))
