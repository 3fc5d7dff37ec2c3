"""Box-drawing glyphs used by the console and the canvas.

The exact characters are part of the output contract: callers compare
rendered panels byte for byte.
"""
from __future__ import annotations

from enum import IntFlag
from typing import Iterable, Tuple


# Outer window frame (heavy)
OUTER_TOP_LEFT = "┏"
OUTER_TOP_RIGHT = "┓"
OUTER_BOTTOM_LEFT = "┗"
OUTER_BOTTOM_RIGHT = "┛"
OUTER_HORIZONTAL = "━"
OUTER_VERTICAL = "┃"
OUTER_TEE_LEFT = "┣"
OUTER_TEE_RIGHT = "┫"

# Title bar buttons
BUTTON_TEE_TOP = "┯"
BUTTON_TEE_BOTTOM = "┷"
BUTTON_DIVIDER = "│"

# Section separator
SECTION_LEFT = "┠"
SECTION_RIGHT = "┨"

# Light frames
LIGHT_TOP_LEFT = "┌"
LIGHT_TOP_RIGHT = "┐"
LIGHT_BOTTOM_LEFT = "└"
LIGHT_BOTTOM_RIGHT = "┘"
LIGHT_HORIZONTAL = "─"
LIGHT_VERTICAL = "│"
LIGHT_TEE_DOWN = "┬"
LIGHT_TEE_UP = "┴"
LIGHT_TEE_LEFT = "┤"
LIGHT_TEE_RIGHT = "├"
LIGHT_CROSS = "┼"

# Bold frames
BOLD_TOP_LEFT = "┏"
BOLD_TOP_RIGHT = "┓"
BOLD_BOTTOM_LEFT = "┗"
BOLD_BOTTOM_RIGHT = "┛"
BOLD_HORIZONTAL = "━"
BOLD_VERTICAL = "┃"
BOLD_TEE_DOWN = "┳"
BOLD_TEE_UP = "┻"
BOLD_TEE_LEFT = "┫"
BOLD_TEE_RIGHT = "┣"
BOLD_CROSS = "╋"


def frame_glyphs(bold: bool = False) -> Tuple[str, str, str, str, str, str]:
    """(top-left, top-right, bottom-right, bottom-left, horizontal, vertical)."""
    if bold:
        return (BOLD_TOP_LEFT, BOLD_TOP_RIGHT, BOLD_BOTTOM_RIGHT, BOLD_BOTTOM_LEFT,
                BOLD_HORIZONTAL, BOLD_VERTICAL)
    return (LIGHT_TOP_LEFT, LIGHT_TOP_RIGHT, LIGHT_BOTTOM_RIGHT, LIGHT_BOTTOM_LEFT,
            LIGHT_HORIZONTAL, LIGHT_VERTICAL)


class WindowButtons(IntFlag):
    NONE = 0
    MINIMISE = 1
    MAXIMISE = 2
    CLOSE = 4
    ALL = MINIMISE | MAXIMISE | CLOSE

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "WindowButtons":
        """Combine buttons given by name (``"minimise"``, ``"close"``, ...)."""
        flags = cls.NONE
        for name in names:
            key = str(name).strip().upper()
            if key not in cls.__members__:
                raise ValueError(f"unknown window button '{name}'")
            flags |= cls[key]
        return flags


# Title-row label for each button, in drawing order
BUTTON_LABELS = (
    (WindowButtons.MINIMISE, "-"),
    (WindowButtons.MAXIMISE, "□"),
    (WindowButtons.CLOSE, "X"),
)
