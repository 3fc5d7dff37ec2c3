"""lavaboard rendering engines.

Two independent text-output engines for diagnostic displays: the nested-frame
``FrameConsole`` and the growable character ``Canvas``. Both write plain text
to any stream and share the glyph-width helpers of ``text_layout``.
"""
from __future__ import annotations

from .canvas import BLANK, UNBOUNDED, Canvas, Pixel, Position
from .console import FrameConsole
from .errors import (
    CanvasRangeError,
    ConfigError,
    ConsoleProtocolError,
    DocumentError,
    LavaboardError,
)
from .glyphs import WindowButtons
from .report import Executable, demo_board, draw_board, host_document, python_executables, render_report
from .text_layout import glyph_length, repeat, set_length

__all__ = [
    "BLANK",
    "UNBOUNDED",
    "Canvas",
    "CanvasRangeError",
    "ConfigError",
    "ConsoleProtocolError",
    "DocumentError",
    "Executable",
    "FrameConsole",
    "LavaboardError",
    "Pixel",
    "Position",
    "WindowButtons",
    "demo_board",
    "draw_board",
    "glyph_length",
    "host_document",
    "python_executables",
    "render_report",
    "repeat",
    "set_length",
]
