"""End-to-end CLI tests against a real registry directory."""

import json
import os
from pathlib import Path

from click.testing import CliRunner

from bingo.cli.cli import cli
from bingo.core.context import create_context
from bingo.core.paths import RegistryPaths
from tests.test_utils.executables import write_executable


def test_first_run_creates_layout_and_round_trips(tmp_path: Path) -> None:
    paths = RegistryPaths.under(tmp_path / "home")
    source = write_executable(tmp_path / "tools" / "greet.sh", body="echo hi")
    runner = CliRunner()

    result = runner.invoke(cli, ["cp", str(source)], obj=create_context(paths))
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["ln", str(source), "g2"], obj=create_context(paths))
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["mv", "g2", "hello"], obj=create_context(paths))
    assert result.exit_code == 0, result.output

    manifest = json.loads(paths.manifest_path.read_text(encoding="utf-8"))
    assert manifest["executables"] == [
        {"name": "greet", "path": str(source), "executable_type": "Binary"},
        {"name": "hello", "path": str(source), "executable_type": "LinkBinary"},
    ]
    assert sorted(p.name for p in paths.bin_dir.iterdir()) == ["greet", "hello"]
    assert Path(os.readlink(paths.bin_dir / "hello")) == source

    result = runner.invoke(cli, ["rm", "greet"], obj=create_context(paths))
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["ls"], obj=create_context(paths))
    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"1: hello -> {source}"
    assert [p.name for p in paths.bin_dir.iterdir()] == ["hello"]


def test_run_executes_installed_copy(tmp_path: Path) -> None:
    paths = RegistryPaths.under(tmp_path / "home")
    source = write_executable(tmp_path / "fail", body='exit "$1"')
    runner = CliRunner()

    result = runner.invoke(cli, ["cp", str(source)], obj=create_context(paths))
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["fail", "4"], obj=create_context(paths))

    assert result.exit_code == 4
