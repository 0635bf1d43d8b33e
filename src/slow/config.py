from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def baud_to_rate(baud: int, bits_per_byte: int = 10) -> int:
    # 1 start + 8 data + 1 stop bit
    return baud // bits_per_byte


class SlowConfig(BaseModel):
    """
    Configuration for one throttled copy.

    Notes:
    - The byte contract (preamble, postamble, pacing) lives here as plain
      fields so the copier never reads module globals.
    - Environment-backed fields only affect diagnostics, never the output.
    """
    default_rate: int = baud_to_rate(9600)
    min_rate: int = 10
    # delays at or below this many microseconds are not slept
    sleep_threshold_us: int = 4

    # home + clear screen, then position to line 24
    preamble: bytes = b"\x1b[H\x1b[J"
    postamble: bytes = b"\x1b[24;0H"

    # diagnostics
    event_log: Optional[str] = Field(default_factory=lambda: os.getenv("SLOW_EVENT_LOG") or None)
    log_level: str = Field(
        default_factory=lambda: os.getenv("SLOW_LOG_LEVEL", "WARNING"),
        validate_default=True,
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = str(v).strip().upper()
        # getLevelName maps known names back to their numeric level
        if not isinstance(logging.getLevelName(name), int):
            return "WARNING"
        return name


DEFAULT_CONFIG = SlowConfig()
