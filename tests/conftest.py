import io
from typing import List

import pytest

from slow.config import SlowConfig


PREAMBLE = b"\x1b[H\x1b[J"
POSTAMBLE = b"\x1b[24;0H"


class RecordingSleep:
    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def cfg(monkeypatch):
    monkeypatch.delenv("SLOW_EVENT_LOG", raising=False)
    monkeypatch.delenv("SLOW_LOG_LEVEL", raising=False)
    return SlowConfig()


@pytest.fixture
def streams():
    def _streams(data: bytes):
        return io.BytesIO(data), io.BytesIO()
    return _streams
