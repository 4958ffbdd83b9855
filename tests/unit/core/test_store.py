"""Tests for ManifestStore registration rules.

Most tests use RealInstaller on tmp_path so the bin directory can be checked
against the entries. FakeInstaller covers failure injection.
"""

import os
from pathlib import Path

import pytest

from bingo.core.errors import ErrorKind, RegistryError
from bingo.core.installer.fake import FakeInstaller
from bingo.core.installer.real import RealInstaller
from bingo.core.store import ManifestStore, resolve_source_path
from bingo.core.types import ExecutableEntry, InstallMode, Registry
from tests.test_utils.executables import write_executable


def _store(tmp_path: Path) -> ManifestStore:
    return ManifestStore(Registry(version="0.1.0"), RealInstaller(tmp_path / "bin"), tmp_path)


def _bin_names(tmp_path: Path) -> set[str]:
    bin_dir = tmp_path / "bin"
    if not bin_dir.exists():
        return set()
    return {p.name for p in bin_dir.iterdir()}


@pytest.mark.skipif(not Path("/usr/bin/true").is_file(), reason="needs /usr/bin/true")
def test_fresh_registration_of_system_binary(tmp_path: Path) -> None:
    store = _store(tmp_path)

    store.add(Path("/usr/bin/true"), "t", InstallMode.COPY)

    assert store.list() == [
        ExecutableEntry(name="t", source_path=Path("/usr/bin/true"), install_mode=InstallMode.COPY)
    ]
    assert (tmp_path / "bin" / "t").read_bytes() == Path("/usr/bin/true").read_bytes()


def test_add_copy_installs_artifact(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "src" / "fmt")
    store = _store(tmp_path)

    entry = store.add(source, "fmt", InstallMode.COPY)

    assert entry == ExecutableEntry("fmt", source, InstallMode.COPY)
    assert (tmp_path / "bin" / "fmt").read_bytes() == source.read_bytes()
    assert os.access(tmp_path / "bin" / "fmt", os.X_OK)


def test_add_link_installs_symlink(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "src" / "fmt")
    store = _store(tmp_path)

    store.add(source, "fmt", InstallMode.LINK)

    artifact = tmp_path / "bin" / "fmt"
    assert artifact.is_symlink()
    assert Path(os.readlink(artifact)) == source


def test_add_resolves_relative_path_against_cwd(tmp_path: Path) -> None:
    write_executable(tmp_path / "tools" / "fmt")
    store = _store(tmp_path)

    entry = store.add(Path("tools/fmt"), "fmt", InstallMode.LINK)

    assert entry.source_path == tmp_path / "tools" / "fmt"
    assert Path(os.readlink(tmp_path / "bin" / "fmt")) == tmp_path / "tools" / "fmt"


def test_resolve_source_path_keeps_absolute_paths() -> None:
    assert resolve_source_path(Path("/opt/x"), Path("/home/u")) == Path("/opt/x")
    assert resolve_source_path(Path("x"), Path("/home/u")) == Path("/home/u/x")


def test_add_missing_path_raises_file_not_found_with_resolved_path(tmp_path: Path) -> None:
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(Path("nonexistent/path"), "x", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.FILE_NOT_FOUND
    assert exc_info.value.detail == str(tmp_path / "nonexistent" / "path")
    assert store.list() == []
    assert _bin_names(tmp_path) == set()


def test_add_directory_raises_not_file(tmp_path: Path) -> None:
    (tmp_path / "somedir").mkdir()
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(tmp_path / "somedir", "d", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.EXECUTABLE_NOT_FILE
    assert store.list() == []


def test_add_non_executable_raises_not_executable(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "notes.txt", mode=0o644)
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(source, "notes", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.EXECUTABLE_NOT_EXECUTABLE
    assert str(exc_info.value) == f"executable cannot be executed: {source}"
    assert store.list() == []


def test_add_symlink_source_is_judged_by_link_metadata(tmp_path: Path) -> None:
    """A symlink source is checked with lstat, so its own mode decides."""
    target = write_executable(tmp_path / "real-tool", mode=0o644)
    link = tmp_path / "tool-link"
    link.symlink_to(target)
    store = _store(tmp_path)

    # On Linux symlinks always carry 0o777, so this passes even though the
    # target is not executable.
    entry = store.add(link, "tool", InstallMode.LINK)

    assert entry.source_path == link
    assert Path(os.readlink(tmp_path / "bin" / "tool")) == link


@pytest.mark.parametrize("bad_name", ["", ".", "..", "a/b", "../escape"])
def test_add_rejects_names_that_leave_the_bin_dir(tmp_path: Path, bad_name: str) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(source, bad_name, InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.INVALID_EXECUTABLE_NAME
    assert store.list() == []


def test_readd_same_name_overwrites_instead_of_duplicate_error(tmp_path: Path) -> None:
    """Re-registering a name replaces the entry and artifact in place."""
    path_a = write_executable(tmp_path / "a", body="echo a")
    path_b = write_executable(tmp_path / "b", body="echo b")
    store = _store(tmp_path)

    store.add(path_a, "foo", InstallMode.COPY)
    store.add(path_b, "foo", InstallMode.LINK)

    assert store.list() == [ExecutableEntry("foo", path_b, InstallMode.LINK)]
    artifact = tmp_path / "bin" / "foo"
    assert artifact.is_symlink()
    assert Path(os.readlink(artifact)) == path_b
    assert _bin_names(tmp_path) == {"foo"}


def test_readd_keeps_registration_order(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    other = write_executable(tmp_path / "other")
    store = _store(tmp_path)
    store.add(source, "first", InstallMode.COPY)
    store.add(source, "second", InstallMode.COPY)

    store.add(other, "first", InstallMode.LINK)

    assert [e.name for e in store.list()] == ["first", "second"]


def test_readd_skips_source_validation(tmp_path: Path) -> None:
    """An existing name bypasses the existence and executable checks."""
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "tool", InstallMode.COPY)

    store.add(tmp_path / "missing", "tool", InstallMode.LINK)

    assert store.get("tool") == ExecutableEntry("tool", tmp_path / "missing", InstallMode.LINK)
    assert (tmp_path / "bin" / "tool").is_symlink()


def test_readd_install_failure_drops_stale_entry() -> None:
    """When the replacement install fails, no entry is left without an artifact."""
    installer = FakeInstaller(
        artifacts={"tool": (Path("/src/tool"), InstallMode.COPY)},
        fail_install_with=RegistryError(ErrorKind.PERMISSION_DENIED, "/fake/bingo/bin/tool"),
    )
    registry = Registry(
        version="0.1.0",
        entries={"tool": ExecutableEntry("tool", Path("/src/tool"), InstallMode.COPY)},
    )
    store = ManifestStore(registry, installer, Path("/cwd"))

    with pytest.raises(RegistryError) as exc_info:
        store.add(Path("/src/new-tool"), "tool", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.PERMISSION_DENIED
    assert store.list() == []
    assert installer.artifacts == {}


def test_new_name_install_failure_adds_no_entry(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    installer = FakeInstaller(
        fail_install_with=RegistryError(ErrorKind.PERMISSION_DENIED, "/fake/bingo/bin/tool"),
    )
    store = ManifestStore(Registry(version="0.1.0"), installer, tmp_path)

    with pytest.raises(RegistryError):
        store.add(source, "tool", InstallMode.COPY)

    assert store.list() == []


def test_remove_uninstalls_and_deletes_entry(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "tool", InstallMode.COPY)

    assert store.remove("tool") is True

    assert store.list() == []
    assert _bin_names(tmp_path) == set()


def test_remove_twice_is_noop(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "tool", InstallMode.COPY)

    assert store.remove("tool") is True
    assert store.remove("tool") is False
    assert store.list() == []


def test_remove_unknown_name_is_noop(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.remove("ghost") is False


def test_rename_moves_artifact_and_entry(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool", body="echo a")
    store = _store(tmp_path)
    store.add(source, "a", InstallMode.COPY)

    assert store.rename("a", "b") is True

    assert not (tmp_path / "bin" / "a").exists()
    assert (tmp_path / "bin" / "b").read_bytes() == source.read_bytes()
    assert store.list() == [ExecutableEntry("b", source, InstallMode.COPY)]
    assert store.get("a") is None


def test_rename_keeps_position(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    for name in ("x", "y", "z"):
        store.add(source, name, InstallMode.LINK)

    store.rename("y", "w")

    assert [e.name for e in store.list()] == ["x", "w", "z"]


def test_rename_unknown_name_is_noop(tmp_path: Path) -> None:
    store = _store(tmp_path)

    assert store.rename("ghost", "other") is False
    assert store.list() == []


def test_rename_to_same_name_is_noop(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "a", InstallMode.COPY)

    assert store.rename("a", "a") is False
    assert _bin_names(tmp_path) == {"a"}


def test_rename_onto_existing_name_is_rejected(tmp_path: Path) -> None:
    """A colliding rename fails and leaves entries and artifacts untouched."""
    path_a = write_executable(tmp_path / "tool-a", body="echo a")
    path_b = write_executable(tmp_path / "tool-b", body="echo b")
    store = _store(tmp_path)
    store.add(path_a, "a", InstallMode.COPY)
    store.add(path_b, "b", InstallMode.COPY)

    with pytest.raises(RegistryError) as exc_info:
        store.rename("a", "b")

    assert exc_info.value.kind is ErrorKind.DUPLICATE_EXECUTABLE_NAME
    assert [e.name for e in store.list()] == ["a", "b"]
    assert (tmp_path / "bin" / "a").read_bytes() == path_a.read_bytes()
    assert (tmp_path / "bin" / "b").read_bytes() == path_b.read_bytes()


def test_rename_with_missing_artifact_leaves_entry(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "a", InstallMode.COPY)
    (tmp_path / "bin" / "a").unlink()

    with pytest.raises(RegistryError) as exc_info:
        store.rename("a", "b")

    assert exc_info.value.kind is ErrorKind.FILE_NOT_FOUND
    assert [e.name for e in store.list()] == ["a"]


def test_names_stay_unique_across_mixed_operations(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)

    store.add(source, "a", InstallMode.COPY)
    store.add(source, "b", InstallMode.LINK)
    store.add(source, "a", InstallMode.LINK)
    store.rename("b", "c")
    store.add(source, "b", InstallMode.COPY)
    store.remove("a")
    store.add(source, "a", InstallMode.COPY)

    names = [e.name for e in store.list()]
    assert len(names) == len(set(names))
    assert set(names) == _bin_names(tmp_path)


def test_list_is_empty_for_new_registry(tmp_path: Path) -> None:
    assert _store(tmp_path).list() == []


def test_add_rejects_source_path_that_is_not_utf8(tmp_path: Path) -> None:
    """Undecodable path bytes could not be written to the manifest."""
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(tmp_path / "tool\udcff", "tool", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.INVALID_SOURCE_PATH
    assert exc_info.value.detail == f"{tmp_path}/tool\\xff"
    assert store.list() == []
    assert _bin_names(tmp_path) == set()


def test_overwrite_rejects_source_path_that_is_not_utf8(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "tool", InstallMode.COPY)

    with pytest.raises(RegistryError) as exc_info:
        store.add(tmp_path / "new\udcff", "tool", InstallMode.LINK)

    assert exc_info.value.kind is ErrorKind.INVALID_SOURCE_PATH
    assert store.list() == [ExecutableEntry("tool", source, InstallMode.COPY)]
    assert (tmp_path / "bin" / "tool").read_bytes() == source.read_bytes()


def test_add_rejects_name_that_is_not_utf8(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(source, "t\udcff", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.INVALID_EXECUTABLE_NAME
    assert store.list() == []


def test_rename_rejects_name_that_is_not_utf8(tmp_path: Path) -> None:
    source = write_executable(tmp_path / "tool")
    store = _store(tmp_path)
    store.add(source, "a", InstallMode.COPY)

    with pytest.raises(RegistryError) as exc_info:
        store.rename("a", "b\udcff")

    assert exc_info.value.kind is ErrorKind.INVALID_EXECUTABLE_NAME
    assert [e.name for e in store.list()] == ["a"]


def test_add_source_with_overlong_component_raises_registry_error(tmp_path: Path) -> None:
    """Filesystem errors while inspecting the source surface as RegistryError."""
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(Path("x" * 300), "x", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.INSTALL_FAILED
    assert store.list() == []


def test_add_source_below_a_regular_file_is_file_not_found(tmp_path: Path) -> None:
    write_executable(tmp_path / "tool")
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(Path("tool/inner"), "inner", InstallMode.COPY)

    assert exc_info.value.kind is ErrorKind.FILE_NOT_FOUND
    assert exc_info.value.detail == str(tmp_path / "tool" / "inner")


def test_add_dangling_symlink_source_is_file_not_found(tmp_path: Path) -> None:
    (tmp_path / "dangling").symlink_to(tmp_path / "gone")
    store = _store(tmp_path)

    with pytest.raises(RegistryError) as exc_info:
        store.add(tmp_path / "dangling", "d", InstallMode.LINK)

    assert exc_info.value.kind is ErrorKind.FILE_NOT_FOUND
