"""Millisecond clock and sleeping."""

from __future__ import annotations

import time

_START = time.monotonic()
_TICK_MASK = 0xFFFFFFFF


def ticks_ms() -> int:
    """Milliseconds since the module was loaded, wrapping at 32 bits."""
    return int((time.monotonic() - _START) * 1000) & _TICK_MASK


def sleep_ms(milliseconds: int) -> None:
    """Sleep for at least ``milliseconds``; raises ValueError if negative."""
    if milliseconds < 0:
        raise ValueError(f"cannot sleep for a negative duration: {milliseconds}")
    time.sleep(milliseconds / 1000.0)