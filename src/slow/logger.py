from __future__ import annotations

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class EventLogger:
    """
    Append-only record of what a copy did, one JSON object per line.

    Kept apart from stdout, which carries nothing but the copied bytes.
    Without a path every call is a no-op.
    """
    log_path: Optional[Path] = None

    @classmethod
    def from_setting(cls, value: Optional[str]) -> "EventLogger":
        return cls(log_path=Path(value) if value else None)

    def log(self, stage: str, event: str, meta: Optional[Dict[str, Any]] = None) -> None:
        if self.log_path is None:
            return
        line = json.dumps(
            {
                "ts": time.strftime("%Y-%m-%dT%H:%M:%S"),
                "stage": stage,
                "event": event,
                "meta": dict(meta or {}),
            },
            ensure_ascii=False,
        )
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            print(line, file=f)
