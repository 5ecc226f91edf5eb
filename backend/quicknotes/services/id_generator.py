"""
QuickNotes — Note ID Generator
===============================

What:  Produces note identifiers from the nanosecond clock.
How:   IDs are the decimal digits of time.time_ns(). The generator remembers
       the last value it issued; if the clock has not moved past it (two calls
       in the same tick, or the wall clock stepping backwards) it issues
       last + 1 instead. IDs from one generator are strictly increasing and
       never repeat.
"""

import threading
import time
from typing import Callable


class NoteIdGenerator:
    """Thread-safe source of unique, timestamp-derived note IDs."""

    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = max(self._clock(), self._last + 1)
            self._last = value
        return str(value)

    __call__ = next_id
