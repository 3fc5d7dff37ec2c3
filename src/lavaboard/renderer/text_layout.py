"""Glyph-width text helpers shared by the console and canvas engines.

Every width in lavaboard is counted in glyphs (code points), never in encoded
bytes, so the multi-byte box-drawing characters line up with plain ASCII.
"""
from __future__ import annotations


def glyph_length(text: str) -> int:
    """Number of glyphs in ``text``."""
    return len(text)


def repeat(glyph: str, count: int) -> str:
    """``glyph`` repeated ``count`` times; a negative count yields ``""``."""
    return glyph * max(0, count)


def set_length(text: str, length: int, pad: str = " ", end_with_space: bool = False) -> str:
    """Pad or truncate ``text`` to exactly ``length`` glyphs.

    With ``end_with_space`` a single space is appended before measuring.
    Short text is followed by ``pad`` repeated once per missing glyph, so
    ``pad`` must itself be one glyph wide for the result to be exact. Long
    text is cut, without an ellipsis.
    """
    if end_with_space:
        text += " "
    length = max(0, length)
    count = glyph_length(text)
    if count <= length:
        return text + repeat(pad, length - count)
    return text[:length]
