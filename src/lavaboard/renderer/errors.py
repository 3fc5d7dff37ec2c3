"""Exceptions raised by the lavaboard rendering engines."""
from __future__ import annotations


class LavaboardError(Exception):
    """Base class for every error raised by lavaboard"""
    pass


class CanvasRangeError(LavaboardError, IndexError):
    """Canvas coordinate outside the configured bounds or the grown grid"""

    def __init__(self, x: int, y: int, reason: str):
        self.x = x
        self.y = y
        super().__init__(f"pixel ({x}, {y}): {reason}")


class ConsoleProtocolError(LavaboardError, RuntimeError):
    """Console call made outside the begin/end session protocol"""
    pass


class DocumentError(LavaboardError, ValueError):
    """Malformed report or board document"""
    pass


class ConfigError(LavaboardError, ValueError):
    """Invalid value in the environment configuration"""
    pass
