import json

import pytest
from click.testing import CliRunner

from lavaboard.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_report_from_file(runner, tmp_path):
    path = _write(tmp_path, "report.json", {
        "title": "Debug",
        "width": 12,
        "sections": [{"title": "S", "items": ["hello"]}],
    })
    result = runner.invoke(cli, ["report", path])
    assert result.exit_code == 0, result.output
    assert "┃ hello      ┃" in result.output.splitlines()


def test_host_report(runner):
    result = runner.invoke(cli, ["report", "--width", "50"], env={"LAVABOARD_LOG_LEVEL": "ERROR"})
    assert result.exit_code == 0, result.output
    assert "lavaboard debug console" in result.output
    assert "Interpreter:" in result.output


def test_report_rejects_bad_document(runner, tmp_path):
    path = _write(tmp_path, "bad.json", {"title": "T", "buttons": ["help"]})
    result = runner.invoke(cli, ["report", path])
    assert result.exit_code == 1
    assert "unknown window button" in result.output


def test_report_rejects_invalid_json(runner, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    result = runner.invoke(cli, ["report", str(path)])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_board(runner, tmp_path):
    path = _write(tmp_path, "board.json", {
        "width": 4,
        "height": 2,
        "shapes": [{"kind": "nice_frame", "a": [0, 0], "b": [1, 3]}],
    })
    result = runner.invoke(cli, ["board", path])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["┌──┐", "└──┘"]


def test_board_height_override_pads_rows(runner, tmp_path):
    path = _write(tmp_path, "board.json", {"shapes": [{"kind": "point", "a": [0, 0], "glyph": "x"}]})
    result = runner.invoke(cli, ["board", path, "--height", "3", "--width", "2"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["x", "", ""]


def test_board_rejects_unknown_shape(runner, tmp_path):
    path = _write(tmp_path, "board.json", {"shapes": [{"kind": "blob"}]})
    result = runner.invoke(cli, ["board", path])
    assert result.exit_code == 1
    assert "unknown shape kind" in result.output


def test_bad_environment(runner):
    result = runner.invoke(cli, ["demo"], env={"LAVABOARD_WIDTH": "wide"})
    assert result.exit_code == 1
    assert "LAVABOARD_WIDTH" in result.output


def test_demo(runner):
    result = runner.invoke(cli, ["demo"])
    assert result.exit_code == 0, result.output
    out = result.output.splitlines()
    assert out[0].startswith("┏") and out[0].endswith("┓")
    assert any("canvas" in line for line in out)
    assert any(line.startswith("┗") for line in out[10:])
