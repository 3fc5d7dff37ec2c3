"""Growable character canvas used to paint ASCII-art diagrams."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, NamedTuple, Optional, TextIO, Tuple, Union

from .errors import CanvasRangeError
from .glyphs import frame_glyphs

logger = logging.getLogger(__name__)

# Dimension without a configured ceiling
UNBOUNDED = None


@dataclass(frozen=True)
class Pixel:
    character: str = " "

    def __str__(self) -> str:
        return self.character


BLANK = Pixel()


class Position(NamedTuple):
    x: int
    y: int


PixelLike = Union[Pixel, str]
PositionLike = Union[Position, Tuple[int, int]]

# Axis moved by one step of a perimeter walk
_X_AXIS = 0
_Y_AXIS = 1


def _pixel(value: PixelLike) -> Pixel:
    return value if isinstance(value, Pixel) else Pixel(str(value))


def _position(value: PositionLike) -> Position:
    x, y = value
    return Position(int(x), int(y))


@dataclass
class Canvas:
    """Grid of pixels addressed by (x = row, y = column).

    ``set`` grows the grid to fit any non-negative coordinate. Indexed
    access only reaches cells that already exist and is checked against
    the configured ``width``/``height``; ``UNBOUNDED`` disables a check.
    """

    width: Optional[int] = 128
    height: Optional[int] = UNBOUNDED
    stream: Optional[TextIO] = None
    rows: List[List[Pixel]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rows = [[] for _ in range(self.height or 0)]

    # ------------------------------------------------------------------
    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column_count(self, x: int) -> int:
        return len(self.rows[x]) if 0 <= x < len(self.rows) else 0

    def get(self, x: Union[int, PositionLike], y: Optional[int] = None) -> Pixel:
        if y is None:
            x, y = _position(x)
        return self._cell(x, y)

    def __getitem__(self, pos: PositionLike) -> Pixel:
        return self._cell(*_position(pos))

    def __setitem__(self, pos: PositionLike, pixel: PixelLike) -> None:
        x, y = _position(pos)
        self._cell(x, y)
        self.rows[x][y] = _pixel(pixel)

    def set(self, pos: PositionLike, pixel: PixelLike = BLANK) -> None:
        x, y = _position(pos)
        if x < 0 or y < 0:
            raise CanvasRangeError(x, y, "coordinates must not be negative")
        while x >= len(self.rows):
            self.rows.append([])
        row = self.rows[x]
        while y >= len(row):
            row.append(BLANK)
        row[y] = _pixel(pixel)

    def text(self, pos: PositionLike, value: str) -> None:
        """Stamp ``value`` one glyph per column, starting at ``pos``."""
        x, y = _position(pos)
        for offset, glyph in enumerate(value):
            self.set((x, y + offset), glyph)

    # ------------------------------------------------------------------
    def lines(self) -> List[str]:
        return ["".join(pixel.character for pixel in row) for row in self.rows]

    def render(self) -> str:
        return "".join(line + "\n" for line in self.lines())

    def flush(self, stream: Optional[TextIO] = None) -> None:
        """Write every row to the stream, then reset the grid."""
        out = stream or self.stream or sys.stdout
        for line in self.lines():
            out.write(line + "\n")
        logger.debug("flushed canvas with %d rows", len(self.rows))
        self.rows = [[] for _ in range(self.height or 0)]
        if self.width is not UNBOUNDED:
            for row in self.rows:
                row.extend([BLANK] * self.width)

    def snapshot(self) -> Dict[str, object]:
        return {
            "width": self.width,
            "height": self.height,
            "rows": self.lines(),
        }

    # ------------------------------------------------------------------
    def rectangle_frame(self, a: PositionLike, b: PositionLike, pixel: PixelLike) -> None:
        for cell, _ in self._perimeter(_position(a), _position(b)):
            self.set(cell, pixel)

    def rectangle_filled(self, a: PositionLike, b: PositionLike, pixel: PixelLike) -> None:
        """Fill the half-open box between ``a`` and ``b``; ``b``'s row and column stay untouched."""
        a, b = _position(a), _position(b)
        x0, x1 = sorted((a.x, b.x))
        y0, y1 = sorted((a.y, b.y))
        pixel = _pixel(pixel)
        for x in range(x0, x1):
            for y in range(y0, y1):
                self.set((x, y), pixel)

    def rectangle_nice_frame(self, a: PositionLike, b: PositionLike, bold: bool = False) -> None:
        a, b = _position(a), _position(b)
        top_left, top_right, bottom_right, bottom_left, horizontal, vertical = frame_glyphs(bold)
        for cell, axis in self._perimeter(a, b):
            self.set(cell, vertical if axis == _X_AXIS else horizontal)
        # corners win over the edge glyphs the walk left behind
        self.set(a, top_left)
        self.set((a.x, b.y), top_right)
        self.set(b, bottom_right)
        self.set((b.x, a.y), bottom_left)

    # ------------------------------------------------------------------
    def _cell(self, x: int, y: int) -> Pixel:
        if self.height is not UNBOUNDED and not 0 <= x <= self.height:
            raise CanvasRangeError(x, y, f"x exceeds height {self.height}")
        if self.width is not UNBOUNDED and not 0 <= y <= self.width:
            raise CanvasRangeError(x, y, f"y exceeds width {self.width}")
        if not (0 <= x < len(self.rows) and 0 <= y < len(self.rows[x])):
            raise CanvasRangeError(x, y, "cell has not been drawn yet")
        return self.rows[x][y]

    @staticmethod
    def _perimeter(a: Position, b: Position) -> Iterator[Tuple[Position, int]]:
        """Walk a -> b -> a one unit step at a time, x first, yielding each cell arrived at."""
        x, y = a
        for axis, target in ((_X_AXIS, b.x), (_Y_AXIS, b.y), (_X_AXIS, a.x), (_Y_AXIS, a.y)):
            if axis == _X_AXIS:
                step = 1 if target > x else -1
                while x != target:
                    x += step
                    yield Position(x, y), axis
            else:
                step = 1 if target > y else -1
                while y != target:
                    y += step
                    yield Position(x, y), axis
