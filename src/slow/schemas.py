from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


CopyState = Literal["start", "preamble", "copying", "postamble", "done"]


class CopyResult(BaseModel):
    """Outcome of one copy; the CLI exits with exit_status."""
    rate: int
    delay_us: int
    bytes_copied: int = 0
    sleeps: int = 0
    state: CopyState = "start"
    exit_status: int = 0
