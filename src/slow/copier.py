from __future__ import annotations

import logging
import re
import time
from typing import BinaryIO, Callable, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, SlowConfig
from .logger import EventLogger
from .schemas import CopyResult


logger = logging.getLogger(__name__)

USAGE = "usage: slow [speed] < input.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class SlowError(Exception):
    """Base error for the throttled copier."""


class UsageError(SlowError):
    def __init__(self, message: str = USAGE):
        super().__init__(message)


class OutputError(SlowError):
    """Writing to the output stream failed; the copy cannot continue."""


def parse_rate(text: str) -> int:
    """
    Parse a rate the way C atoi does.

    Leading whitespace and an optional sign are accepted, digits are read up
    to the first non-digit. Anything else yields 0.
    """
    m = _LEADING_INT.match(text)
    if not m:
        logger.debug(f"[Copier] Unparseable rate {text!r}, using 0.")
        return 0
    return int(m.group(1))


def clamp_rate(rate: int, cfg: SlowConfig = DEFAULT_CONFIG) -> int:
    return max(rate, cfg.min_rate)


def delay_for(rate: int) -> int:
    """Microseconds between bytes for a positive rate (truncated)."""
    return 1000 * 1000 // rate


def resolve_rate(args: Sequence[str], cfg: SlowConfig = DEFAULT_CONFIG) -> int:
    if len(args) > 1:
        raise UsageError()
    if not args:
        return cfg.default_rate
    return clamp_rate(parse_rate(args[0]), cfg)


def _write(dst: BinaryIO, data: bytes) -> None:
    try:
        dst.write(data)
        dst.flush()
    except OSError as e:
        raise OutputError(str(e)) from e


def throttled_copy(
    src: BinaryIO,
    dst: BinaryIO,
    delay_us: int,
    cfg: SlowConfig = DEFAULT_CONFIG,
    sleep: Callable[[float], None] = time.sleep,
) -> Tuple[int, int]:
    """
    Copy src to dst one byte at a time, pausing delay_us after each byte.

    Returns (bytes copied, sleeps taken). A read error ends the copy like
    end-of-stream; a write error raises OutputError.
    """
    pause = delay_us > cfg.sleep_threshold_us
    seconds = delay_us / 1_000_000
    count = 0
    sleeps = 0

    while True:
        try:
            c = src.read(1)
        except OSError as e:
            logger.warning(f"[Copier] Read failed after {count} bytes: {e}")
            break
        if not c:
            break

        _write(dst, c)
        count += 1

        if pause:
            sleep(seconds)
            sleeps += 1

    return count, sleeps


def run(
    rate: Optional[int],
    stdin: BinaryIO,
    stdout: BinaryIO,
    cfg: SlowConfig = DEFAULT_CONFIG,
    sleep: Callable[[float], None] = time.sleep,
    event_logger: Optional[EventLogger] = None,
) -> CopyResult:
    """
    Home and clear the screen, replay stdin paced to rate, park the cursor.

    rate=None means the configured default; low rates are clamped.
    """
    events = event_logger or EventLogger()
    rate = cfg.default_rate if rate is None else clamp_rate(rate, cfg)
    result = CopyResult(rate=rate, delay_us=delay_for(rate))
    events.log("copier", "start", {"rate": result.rate, "delay_us": result.delay_us})

    try:
        result.state = "preamble"
        _write(stdout, cfg.preamble)

        result.state = "copying"
        result.bytes_copied, result.sleeps = throttled_copy(stdin, stdout, result.delay_us, cfg, sleep)

        result.state = "postamble"
        _write(stdout, cfg.postamble)
    except OutputError as e:
        events.log("copier", "write_error", {"state": result.state, "error": str(e)})
        raise

    result.state = "done"
    logger.info(f"[Copier] Copied {result.bytes_copied} bytes at {result.rate} B/s.")
    events.log("copier", "done", {"bytes_copied": result.bytes_copied, "sleeps": result.sleeps})
    return result
