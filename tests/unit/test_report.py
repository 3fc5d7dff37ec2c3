import os
import sys

import pytest

from lavaboard.renderer import (
    Canvas,
    DocumentError,
    FrameConsole,
    demo_board,
    draw_board,
    host_document,
    python_executables,
    render_report,
)
from lavaboard.renderer.text_layout import glyph_length


def test_render_report_document(console, lines):
    document = {
        "title": "Debug",
        "buttons": ["close"],
        "width": 20,
        "sections": [
            {"title": "Window:", "items": [
                {"frame": "Requested:", "items": ["Width:  800", "Height: 600"]},
                "plain",
            ]},
            {"title": "Devices:", "items": [
                {"columns": [[">", " "], ["gpu", "cpu"]], "framed": True, "fit": False, "fill": " "},
                {"vertical": "ab"},
            ]},
        ],
    }
    assert render_report(document, console) == 20
    assert not console.is_open

    out = lines()
    assert out[1] == "┃ Debug          │ X ┃"
    assert "┃┌─ Requested: ─────┐┃" in out
    assert "┃│ Width:  800      │┃" in out
    assert "┃│ > │ gpu          │┃" in out
    assert out[-3:-1] == ["┃ a                  ┃", "┃ b                  ┃"]
    assert {glyph_length(line) for line in out} == {22}


def test_render_report_default_width(console):
    assert render_report({"title": "T"}, console, default_width=30) == 30


@pytest.mark.parametrize("document", [
    ["not", "an", "object"],
    {"title": "T", "buttons": ["help"]},
    {"title": "T", "width": "wide"},
    {"title": "T", "sections": "nope"},
    {"title": "T", "sections": [{"title": "S", "items": [42]}]},
    {"title": "T", "sections": [{"title": "S", "items": [{"unknown": 1}]}]},
])
def test_bad_report_documents(console, document):
    with pytest.raises(DocumentError):
        render_report(document, console)
    assert not console.is_open


def _touch(directory, name, mode=0o755):
    directory.mkdir(exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(mode)
    return path


@pytest.fixture
def fake_path(tmp_path, monkeypatch):
    first, second = tmp_path / "first", tmp_path / "second"
    _touch(first, "python3")
    _touch(first, "python3.11")
    _touch(first, "python3.9", mode=0o644)
    _touch(first, "notpython")
    _touch(second, "python3")
    _touch(second, "python3.12")
    search_path = os.pathsep.join([str(first), str(tmp_path / "missing"), str(second)])
    monkeypatch.setenv("PATH", search_path)
    monkeypatch.setattr(sys, "executable", str(tmp_path / "elsewhere" / "python"))
    return first, second


def test_python_executables_ranked_by_version(fake_path):
    first, second = fake_path
    found = python_executables()
    assert [(e.name, e.version) for e in found] == [
        ("python3.12", (3, 12)), ("python3.11", (3, 11)), ("python3", (3,)),
    ]
    # the second python3 is shadowed by the first one on PATH
    assert found[-1].path == str(first / "python3")
    assert not any(e.current for e in found)


def test_running_interpreter_ranks_first(fake_path, monkeypatch):
    first, _ = fake_path
    monkeypatch.setattr(sys, "executable", str(first / "python3"))
    found = python_executables()
    assert [e.name for e in found] == ["python3", "python3.12", "python3.11"]
    assert found[0].current


def test_python_executables_empty_path(tmp_path):
    assert python_executables(str(tmp_path)) == []
    assert python_executables("") == []


def test_host_document_renders(console, lines, fake_path):
    document = host_document(48)
    assert [section["title"] for section in document["sections"]] == [
        "Terminal:", "Interpreter:", "Environment:", "Python executables:", "Module search path:",
    ]
    ranking = document["sections"][3]["items"][0]
    assert ranking["framed"]
    assert ranking["columns"][:3] == [
        [">", " ", " "],
        ["python3.12", "python3.11", "python3"],
        ["3.12", "3.11", "3"],
    ]
    variables = document["sections"][2]["items"][0]["items"]
    assert variables[0] == "PATH entries: 3"

    render_report(document, console)
    out = lines()
    assert {glyph_length(line) for line in out} == {50}
    assert any(line.startswith("┃│ > │ python3.12 │ 3.12 │") for line in out)


def test_host_document_without_executables(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    document = host_document(48)
    assert document["sections"][3]["items"] == ["No Python executable found on PATH"]


def test_draw_board():
    canvas = draw_board({
        "width": 6,
        "height": 3,
        "shapes": [
            {"kind": "nice_frame", "a": [0, 0], "b": [2, 5], "bold": True},
            {"kind": "text", "a": [1, 1], "text": "ok"},
            {"kind": "point", "a": [1, 4], "glyph": "!"},
        ],
    })
    assert canvas.width == 6
    assert canvas.height == 3
    assert canvas.lines() == ["┏━━━━┓", "┃ok !┃", "┗━━━━┛"]


def test_draw_board_onto_existing_canvas():
    canvas = Canvas(width=None)
    result = draw_board({"shapes": [
        {"kind": "filled", "a": [0, 0], "b": [2, 2], "glyph": "#"},
        {"kind": "frame", "a": [0, 3], "b": [1, 4], "glyph": "*"},
    ]}, canvas)
    assert result is canvas
    assert canvas.lines() == ["## **", "## **"]


def test_draw_board_defaults():
    canvas = draw_board({"shapes": []}, default_width=None)
    assert canvas.width is None
    assert canvas.height is None


@pytest.mark.parametrize("document", [
    "board",
    {"shapes": [{"kind": "circle", "a": [0, 0]}]},
    {"shapes": [{"kind": "point", "a": [-1, 0]}]},
    {"shapes": [{"kind": "frame", "a": [0, 0]}]},
    {"shapes": ["point"]},
    {"width": -3, "shapes": []},
])
def test_bad_board_documents(document):
    with pytest.raises(DocumentError):
        draw_board(document)


def test_demo_board_stays_inside_its_bounds():
    canvas = draw_board(demo_board())
    assert canvas.row_count == 9
    assert all(len(line) == 40 for line in canvas.lines())
    assert canvas.get(8, 39).character == "┛"
