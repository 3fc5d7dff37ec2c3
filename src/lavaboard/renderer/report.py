"""Render whole report and board documents.

Documents are plain dicts (usually loaded from JSON) describing a console
window or a canvas drawing, so a diagnostic screen can be kept as data and
replayed through the engines.
"""
from __future__ import annotations

import logging
import os
import platform
import re
import shutil
import sys
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from .canvas import UNBOUNDED, Canvas
from .console import FrameConsole
from .errors import DocumentError
from .glyphs import WindowButtons

logger = logging.getLogger(__name__)

# python, python3, python3.12, python.exe ...
_PYTHON_NAME = re.compile(r"^python(\d+(?:\.\d+)?)?(?:\.exe)?$", re.IGNORECASE)


# ----------------------------------------------------------------------
# Report documents
# ----------------------------------------------------------------------
def render_report(document: Mapping[str, Any], console: FrameConsole,
                  default_width: int = 0) -> int:
    """Draw a report document through ``console`` and return its content width."""
    if not isinstance(document, Mapping):
        raise DocumentError("report document must be an object")
    title = str(document.get("title", ""))
    try:
        buttons = WindowButtons.from_names(document.get("buttons", []))
    except ValueError as exc:
        raise DocumentError(str(exc)) from exc
    width = _as_int(document.get("width", default_width), "width")

    with console.window(title, buttons, width):
        for section in _as_list(document.get("sections", []), "sections"):
            if not isinstance(section, Mapping):
                raise DocumentError(f"section must be an object, got {type(section).__name__}")
            console.begin_section(str(section.get("title", "")))
            _render_items(console, _as_list(section.get("items", []), "items"))
    return console.content_width


def _render_items(console: FrameConsole, items: Iterable[Any]) -> None:
    for item in items:
        if isinstance(item, str):
            console.print(item)
        elif not isinstance(item, Mapping):
            raise DocumentError(f"unsupported report item: {item!r}")
        elif "frame" in item:
            with console.frame(str(item["frame"])):
                _render_items(console, _as_list(item.get("items", []), "items"))
        elif "vertical" in item:
            console.vertical_print(str(item["vertical"]))
        elif "columns" in item:
            for column in _as_list(item["columns"], "columns"):
                console.begin_column()
                for cell in _as_list(column, "column"):
                    console.print(str(cell))
            console.flush_columns(framed=bool(item.get("framed", False)),
                                  fit_to_width=bool(item.get("fit", True)),
                                  fill=str(item.get("fill", "-")))
        else:
            raise DocumentError(f"report item has no frame, vertical or columns key: {dict(item)!r}")


class Executable(NamedTuple):
    name: str
    path: str
    version: Tuple[int, ...]
    current: bool


def python_executables(search_path: Optional[str] = None) -> List[Executable]:
    """Python interpreters reachable through ``search_path``, best first.

    ``search_path`` defaults to ``$PATH``. Only the first file found for a
    name counts, as with ``shutil.which``. The running interpreter ranks
    first, then higher versions; ties keep their PATH order.
    """
    if search_path is None:
        search_path = os.environ.get("PATH", "")
    running = os.path.realpath(sys.executable) if sys.executable else None

    found: Dict[str, Executable] = {}
    for directory in search_path.split(os.pathsep):
        if not directory or not os.path.isdir(directory):
            continue
        try:
            names = sorted(os.listdir(directory))
        except OSError as exc:
            logger.debug("skipping PATH entry %s: %s", directory, exc)
            continue
        for name in names:
            match = _PYTHON_NAME.match(name)
            key = name.lower()
            if not match or key in found:
                continue
            path = os.path.join(directory, name)
            if not (os.path.isfile(path) and os.access(path, os.X_OK)):
                continue
            version = tuple(int(part) for part in match.group(1).split(".")) if match.group(1) else ()
            found[key] = Executable(name, path, version, os.path.realpath(path) == running)

    ranked = sorted(found.values(), key=lambda executable: executable.version, reverse=True)
    ranked.sort(key=lambda executable: not executable.current)
    logger.debug("found %d python executables on PATH", len(ranked))
    return ranked


def host_document(width: int = 64) -> Dict[str, Any]:
    """Report document describing the running interpreter and terminal."""
    columns, lines = shutil.get_terminal_size()
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)

    paths = [entry or "." for entry in sys.path]
    marks = [">" if index == 0 else " " for index in range(len(paths))]

    search_path = os.environ.get("PATH", "")
    executables = python_executables(search_path)
    if executables:
        ranking = {"columns": [
            [">" if index == 0 else " " for index in range(len(executables))],
            [executable.name for executable in executables],
            [".".join(str(part) for part in executable.version) or "?" for executable in executables],
            [executable.path for executable in executables],
        ], "framed": True, "fit": False, "fill": " "}
    else:
        ranking = "No Python executable found on PATH"

    return {
        "title": "lavaboard debug console",
        "buttons": ["minimise", "maximise", "close"],
        "width": width,
        "sections": [
            {
                "title": "Terminal:",
                "items": [
                    {"frame": "Size:", "items": [
                        f"Columns: {columns}",
                        f"Lines:   {lines}",
                    ]},
                    {"frame": "Stream:", "items": [
                        f"Encoding: {getattr(stream, 'encoding', None) or 'N/A'}",
                        f"TTY:      {'yes' if isatty and isatty() else 'no'}",
                        f"TERM:     {os.environ.get('TERM', 'N/A')}",
                    ]},
                ],
            },
            {
                "title": "Interpreter:",
                "items": [
                    {"frame": "Python:", "items": [
                        f"Implementation: {platform.python_implementation()}",
                        f"Version:        {platform.python_version()}",
                        f"Executable:     {sys.executable or 'N/A'}",
                    ]},
                    {"frame": "Platform:", "items": [
                        f"System:  {platform.system() or 'N/A'}",
                        f"Release: {platform.release() or 'N/A'}",
                        f"Machine: {platform.machine() or 'N/A'}",
                    ]},
                ],
            },
            {
                "title": "Environment:",
                "items": [
                    {"frame": "Variables:", "items": [
                        f"PATH entries: {len([entry for entry in search_path.split(os.pathsep) if entry])}",
                        f"VIRTUAL_ENV:  {os.environ.get('VIRTUAL_ENV', 'N/A')}",
                        f"LANG:         {os.environ.get('LANG', 'N/A')}",
                        f"SHELL:        {os.environ.get('SHELL', 'N/A')}",
                    ]},
                ],
            },
            {
                "title": "Python executables:",
                "items": [ranking],
            },
            {
                "title": "Module search path:",
                "items": [
                    {"columns": [marks, paths], "framed": True, "fit": False, "fill": " "},
                ],
            },
        ],
    }


# ----------------------------------------------------------------------
# Board documents
# ----------------------------------------------------------------------
def draw_board(document: Mapping[str, Any], canvas: Optional[Canvas] = None,
               default_width: Optional[int] = 128) -> Canvas:
    """Draw every shape of a board document onto ``canvas`` (a new one if omitted)."""
    if not isinstance(document, Mapping):
        raise DocumentError("board document must be an object")
    if canvas is None:
        canvas = Canvas(
            width=_as_bound(document.get("width", default_width), "width"),
            height=_as_bound(document.get("height", UNBOUNDED), "height"),
        )
    for shape in _as_list(document.get("shapes", []), "shapes"):
        if not isinstance(shape, Mapping):
            raise DocumentError(f"shape must be an object, got {type(shape).__name__}")
        kind = shape.get("kind")
        if kind == "point":
            canvas.set(_as_point(shape, "a"), str(shape.get("glyph", "#")))
        elif kind == "text":
            canvas.text(_as_point(shape, "a"), str(shape.get("text", "")))
        elif kind == "frame":
            canvas.rectangle_frame(_as_point(shape, "a"), _as_point(shape, "b"), str(shape.get("glyph", "#")))
        elif kind == "filled":
            canvas.rectangle_filled(_as_point(shape, "a"), _as_point(shape, "b"), str(shape.get("glyph", "#")))
        elif kind == "nice_frame":
            canvas.rectangle_nice_frame(_as_point(shape, "a"), _as_point(shape, "b"), bool(shape.get("bold", False)))
        else:
            raise DocumentError(f"unknown shape kind {kind!r}")
    return canvas


def demo_board() -> Dict[str, Any]:
    return {
        "width": 40,
        "height": 9,
        "shapes": [
            {"kind": "nice_frame", "a": [0, 0], "b": [8, 39], "bold": True},
            {"kind": "text", "a": [0, 2], "text": " lavaboard "},
            {"kind": "nice_frame", "a": [2, 3], "b": [6, 17]},
            {"kind": "text", "a": [4, 6], "text": "canvas"},
            {"kind": "filled", "a": [3, 22], "b": [6, 36], "glyph": "░"},
            {"kind": "frame", "a": [2, 21], "b": [6, 36], "glyph": "*"},
        ],
    }


# ----------------------------------------------------------------------
def _as_list(value: Any, name: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise DocumentError(f"'{name}' must be a list, got {type(value).__name__}")
    return list(value)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DocumentError(f"'{name}' must be an integer, got {value!r}")
    return value


def _as_bound(value: Any, name: str) -> Optional[int]:
    if value is UNBOUNDED:
        return UNBOUNDED
    bound = _as_int(value, name)
    if bound < 0:
        raise DocumentError(f"'{name}' must not be negative")
    return bound


def _as_point(shape: Mapping[str, Any], key: str) -> tuple:
    value = shape.get(key)
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in value)):
        raise DocumentError(f"shape '{key}' must be a pair of non-negative integers, got {value!r}")
    return value[0], value[1]
