"""CLI tests — drive every command through Click's CliRunner."""

import json
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from pinboard.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "project"
        (root / "Assets" / "Prefabs").mkdir(parents=True)
        (root / "Assets" / "Prefabs" / "Door.prefab").write_text("door")
        (root / "Assets" / "Prefabs" / "BigRock.prefab").write_text("rock")
        (root / "Assets" / "Readme.txt").write_text("readme")
        yield root, Path(tmpdir) / "pins.json"


def _invoke(runner, project, *args):
    root, data = project
    return runner.invoke(main, ["--root", str(root), "--data", str(data), *args])


def _stored(project) -> dict:
    return json.loads(project[1].read_text())


def test_pin_and_list(runner, project):
    result = _invoke(runner, project, "pin", "Assets/Prefabs/Door.prefab")
    assert result.exit_code == 0
    assert "Pinned Door" in result.output
    assert _stored(project)["pinned"] == ["Assets/Prefabs/Door.prefab"]

    result = _invoke(runner, project, "list")
    assert result.exit_code == 0
    assert "Door" in result.output


def test_pin_by_file_path(runner, project):
    root, _ = project
    result = _invoke(runner, project, "pin", str(root / "Assets" / "Prefabs" / "BigRock.prefab"))
    assert result.exit_code == 0
    assert "Pinned Big Rock" in result.output
    assert _stored(project)["pinned"] == ["Assets/Prefabs/BigRock.prefab"]


def test_pin_twice(runner, project):
    _invoke(runner, project, "pin", "Assets/Prefabs/Door.prefab")
    result = _invoke(runner, project, "pin", "Assets/Prefabs/Door.prefab")
    assert result.exit_code == 0
    assert "Already pinned" in result.output
    assert _stored(project)["pinned"] == ["Assets/Prefabs/Door.prefab"]


def test_pin_missing_asset_warns(runner, project):
    result = _invoke(runner, project, "pin", "Assets/Missing.prefab")
    assert result.exit_code == 0
    assert "Cannot pin" in result.output
    assert not project[1].exists()


def test_pin_wrong_type_warns(runner, project):
    result = _invoke(runner, project, "pin", "Assets/Readme.txt", "Assets/Prefabs/Door.prefab")
    assert result.exit_code == 0
    assert "Cannot pin" in result.output
    assert _stored(project)["pinned"] == ["Assets/Prefabs/Door.prefab"]


def test_unpin_restore_forget(runner, project):
    door = "Assets/Prefabs/Door.prefab"
    _invoke(runner, project, "pin", door)

    result = _invoke(runner, project, "unpin", door)
    assert result.exit_code == 0
    assert _stored(project) == {"version": 1, "pinned": [], "history": [door]}

    result = _invoke(runner, project, "restore", door)
    assert result.exit_code == 0
    assert _stored(project)["pinned"] == [door]
    assert _stored(project)["history"] == []

    _invoke(runner, project, "unpin", door)
    result = _invoke(runner, project, "forget", door)
    assert result.exit_code == 0
    assert _stored(project) == {"version": 1, "pinned": [], "history": []}


def test_noop_commands(runner, project):
    for command in ("unpin", "restore", "forget"):
        result = _invoke(runner, project, command, "Assets/Nothing.prefab")
        assert result.exit_code == 0
        assert "Not" in result.output
    assert not project[1].exists()


def test_clear_pinned_and_history(runner, project):
    _invoke(runner, project, "pin", "Assets/Prefabs/Door.prefab", "Assets/Prefabs/BigRock.prefab")

    result = _invoke(runner, project, "clear")
    assert result.exit_code == 0
    assert "Moved 2" in result.output
    assert _stored(project)["history"] == [
        "Assets/Prefabs/Door.prefab",
        "Assets/Prefabs/BigRock.prefab",
    ]

    result = _invoke(runner, project, "list", "--history")
    assert "Big Rock" in result.output

    result = _invoke(runner, project, "clear", "--history")
    assert result.exit_code == 0
    assert "Cleared 2" in result.output
    assert _stored(project)["history"] == []


def test_list_empty(runner, project):
    result = _invoke(runner, project, "list")
    assert result.exit_code == 0
    assert "empty" in result.output


def test_show_prints_path(runner, project):
    root, _ = project
    _invoke(runner, project, "pin", "Assets/Prefabs/Door.prefab")
    result = _invoke(runner, project, "show", "Assets/Prefabs/Door.prefab")
    assert result.exit_code == 0
    assert result.output.strip().endswith("Door.prefab")


def test_show_unknown(runner, project):
    result = _invoke(runner, project, "show", "Assets/Prefabs/Door.prefab")
    assert result.exit_code == 0
    assert "Not pinned" in result.output


def test_discover(runner, project):
    result = _invoke(runner, project, "discover")
    assert result.exit_code == 0
    assert "Assets/Prefabs/Door.prefab" in result.output
    assert "Readme.txt" not in result.output


def test_unwritable_store_exits_nonzero(runner, project):
    root, data = project
    data.mkdir()
    blocked = data / "blocker"
    blocked.write_text("file")
    result = runner.invoke(
        main,
        ["--root", str(root), "--data", str(blocked / "pins.json"), "pin", "Assets/Prefabs/Door.prefab"],
    )
    assert result.exit_code == 1
    assert "Could not save" in result.output


def test_missing_config_file(runner, project):
    result = _invoke(runner, project, "--config", "/nonexistent/pinboard.yaml", "list")
    assert result.exit_code != 0


def test_pin_spellings_of_same_asset_store_one_entry(runner, project):
    for spelling in (
        "Assets/Prefabs/Door.prefab",
        "./Assets/Prefabs/Door.prefab",
        "Assets//Prefabs/Door.prefab",
    ):
        result = _invoke(runner, project, "pin", spelling)
        assert result.exit_code == 0

    assert _stored(project)["pinned"] == ["Assets/Prefabs/Door.prefab"]
