"""Nested-frame console renderer.

A ``FrameConsole`` writes a titled window of box-drawn text to a stream, one
line at a time. Inside the window, ``begin_frame``/``end_frame`` open nested
light frames and ``begin_column``/``flush_columns`` buffer ``print`` calls into
an aligned table::

    console = FrameConsole()
    with console.window("Debug console", WindowButtons.ALL, 64):
        console.begin_section("Window:")
        with console.frame("Requested:"):
            console.print("Width:   800")

Each instance holds the state of one session and must be driven by a single
writer. Calls made outside ``begin``/``end`` raise ``ConsoleProtocolError``.
"""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from . import glyphs as g
from .errors import ConsoleProtocolError
from .text_layout import glyph_length, repeat, set_length

logger = logging.getLogger(__name__)

# Width taken by one title bar button ("│ X ")
BUTTON_WIDTH = 4


class FrameConsole:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self._open = False
        self._width = 0
        self._depth = 0
        self._columns: List[List[str]] = []
        self._column = 0
        self._row = -1

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def content_width(self) -> int:
        return self._width

    @property
    def nesting_depth(self) -> int:
        return self._depth

    @property
    def active_column(self) -> int:
        return self._column

    @property
    def pending_rows(self) -> List[List[str]]:
        return [list(row) for row in self._columns]

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    def begin(self, title: str, buttons: g.WindowButtons = g.WindowButtons.NONE,
              requested_width: int = 0) -> int:
        """Open the window and return its interior width."""
        if self._open:
            raise ConsoleProtocolError("begin() called while a window is already open")

        shown = [label for flag, label in g.BUTTON_LABELS if buttons & flag]
        width = requested_width
        for _ in shown:
            if width >= BUTTON_WIDTH:
                width -= BUTTON_WIDTH
        width = max(glyph_length(title) + 2, width)

        self._emit(g.OUTER_TOP_LEFT + repeat(g.OUTER_HORIZONTAL, width)
                   + "".join(g.BUTTON_TEE_TOP + repeat(g.OUTER_HORIZONTAL, 3) for _ in shown)
                   + g.OUTER_TOP_RIGHT)
        self._emit(g.OUTER_VERTICAL + " " + set_length(title, width - 2) + " "
                   + "".join(f"{g.BUTTON_DIVIDER} {label} " for label in shown)
                   + g.OUTER_VERTICAL)
        self._emit(g.OUTER_TEE_LEFT + repeat(g.OUTER_HORIZONTAL, width)
                   + "".join(g.BUTTON_TEE_BOTTOM + repeat(g.OUTER_HORIZONTAL, 3) for _ in shown)
                   + g.OUTER_TEE_RIGHT)

        self._open = True
        self._width = width + BUTTON_WIDTH * len(shown)
        self._depth = 0
        logger.debug("opened window %r, content width %d", title, self._width)
        return self._width

    def end(self) -> None:
        self._require_open("end")
        if self._columns:
            logger.warning("discarding %d buffered column rows at end()", len(self._columns))
        self._emit(g.OUTER_BOTTOM_LEFT + repeat(g.OUTER_HORIZONTAL, self._width) + g.OUTER_BOTTOM_RIGHT)
        self._open = False
        self._depth = 0
        self._reset_columns()
        logger.debug("closed window")

    @contextmanager
    def window(self, title: str, buttons: g.WindowButtons = g.WindowButtons.NONE,
               requested_width: int = 0) -> Iterator["FrameConsole"]:
        self.begin(title, buttons, requested_width)
        try:
            yield self
        finally:
            self.end()

    def begin_section(self, title: str) -> None:
        self._require_open("begin_section")
        self._emit(g.SECTION_LEFT + g.LIGHT_HORIZONTAL + " "
                   + set_length(title, self._width - 3, g.LIGHT_HORIZONTAL, True)
                   + g.LIGHT_HORIZONTAL + g.SECTION_RIGHT)
        self._depth = 0

    # ------------------------------------------------------------------
    # Frames and lines
    # ------------------------------------------------------------------
    def begin_frame(self, label: str = "") -> None:
        self._require_open("begin_frame")
        if label:
            body = (g.LIGHT_TOP_LEFT + g.LIGHT_HORIZONTAL + " "
                    + set_length(label, self._width - 5 - 2 * self._depth, g.LIGHT_HORIZONTAL, True)
                    + g.LIGHT_HORIZONTAL + g.LIGHT_TOP_RIGHT)
        else:
            body = (g.LIGHT_TOP_LEFT + repeat(g.LIGHT_HORIZONTAL, self._width - 2 - 2 * self._depth)
                    + g.LIGHT_TOP_RIGHT)
        self._emit_nested(body)
        self._depth += 1

    def end_frame(self) -> None:
        self._require_open("end_frame")
        if self._depth == 0:
            return
        self._depth -= 1
        self._emit_nested(g.LIGHT_BOTTOM_LEFT
                          + repeat(g.LIGHT_HORIZONTAL, self._width - 2 - 2 * self._depth)
                          + g.LIGHT_BOTTOM_RIGHT)

    @contextmanager
    def frame(self, label: str = "") -> Iterator["FrameConsole"]:
        self.begin_frame(label)
        try:
            yield self
        finally:
            self.end_frame()

    def print(self, text: str = "") -> None:
        self._require_open("print")
        if self._column:
            self._row += 1
            while len(self._columns) <= self._row:
                self._columns.append([])
            for row in self._columns:
                while len(row) < self._column:
                    row.append("")
            self._columns[self._row][self._column - 1] = text
            return
        self._emit_nested(" " + set_length(text, self._width - 2 * self._depth - 2) + " ")

    def vertical_print(self, text: str) -> None:
        """Print ``text`` downwards, one glyph per line."""
        self._require_open("vertical_print")
        for glyph in text:
            self.print(glyph)

    # ------------------------------------------------------------------
    # Column mode
    # ------------------------------------------------------------------
    def begin_column(self) -> None:
        self._require_open("begin_column")
        self._column += 1
        self._row = -1

    def flush_columns(self, framed: bool = False, fit_to_width: bool = True, fill: str = "-") -> None:
        """Lay out the buffered cells as a table and print it.

        Columns are as wide as their widest cell. With ``fit_to_width`` the
        line is shared evenly between columns instead, the last column taking
        the remainder so rows end flush with the frame. This departs from a
        fixed ``available / n - 2`` per column, which can overflow the line.
        """
        self._require_open("flush_columns")
        rows = self._columns
        self._reset_columns()

        widths: List[int] = []
        for row in rows:
            for index, cell in enumerate(row):
                if len(widths) <= index:
                    widths.append(0)
                widths[index] = max(widths[index], glyph_length(cell))
        if not widths:
            return

        separator = f" {g.LIGHT_VERTICAL} " if framed else " "
        if fit_to_width:
            usable = (self._width - 2 - 2 * self._depth - (2 if framed else 0)
                      - glyph_length(separator) * (len(widths) - 1))
            share = max(0, usable // len(widths))
            widths = [share] * len(widths)
            widths[-1] = max(0, usable - share * (len(widths) - 1))
        logger.debug("flushing %d rows into columns %s", len(rows), widths)

        if framed:
            self._column_divider(widths, g.LIGHT_TOP_LEFT, g.LIGHT_TEE_DOWN, g.LIGHT_TOP_RIGHT)
            self._depth += 1
        for row in rows:
            cells = list(row) + [""] * (len(widths) - len(row))
            self.print(separator.join(set_length(cell, width, fill) for cell, width in zip(cells, widths)))
        if framed:
            self._depth -= 1
            self._column_divider(widths, g.LIGHT_BOTTOM_LEFT, g.LIGHT_TEE_UP, g.LIGHT_BOTTOM_RIGHT)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _column_divider(self, widths: List[int], left: str, junction: str, right: str) -> None:
        runs = [repeat(g.LIGHT_HORIZONTAL, width + 2) for width in widths]
        body = set_length(junction.join(runs), self._width - 2 - 2 * self._depth, g.LIGHT_HORIZONTAL)
        self._emit_nested(left + body + right)

    def _reset_columns(self) -> None:
        self._columns = []
        self._column = 0
        self._row = -1

    def _require_open(self, operation: str) -> None:
        if not self._open:
            raise ConsoleProtocolError(f"{operation}() called with no open window; call begin() first")

    def _emit_nested(self, body: str) -> None:
        walls = repeat(g.LIGHT_VERTICAL, self._depth)
        self._emit(g.OUTER_VERTICAL + walls + body + walls + g.OUTER_VERTICAL)

    def _emit(self, line: str) -> None:
        (self.stream or sys.stdout).write(line + "\n")
