"""Environment configuration for the lavaboard command line."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .renderer.canvas import UNBOUNDED
from .renderer.errors import ConfigError


@dataclass
class Settings:
    console_width: int = 64
    canvas_width: Optional[int] = 128
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read ``LAVABOARD_*`` variables, falling back to the defaults."""
        env = os.environ if environ is None else environ
        settings = cls()

        raw = env.get("LAVABOARD_WIDTH")
        if raw:
            settings.console_width = _parse_int("LAVABOARD_WIDTH", raw)

        raw = env.get("LAVABOARD_CANVAS_WIDTH")
        if raw:
            if raw.strip().lower() in ("0", "none"):
                settings.canvas_width = UNBOUNDED
            else:
                settings.canvas_width = _parse_int("LAVABOARD_CANVAS_WIDTH", raw)

        raw = env.get("LAVABOARD_LOG_LEVEL")
        if raw:
            settings.log_level = raw.strip().upper()
        return settings


def _parse_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value
