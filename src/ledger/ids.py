"""
Entry Identifier Generation

Ids are creation times in milliseconds, which keeps them readable and
naturally ordered. Two entries created within the same millisecond, or a
clock that steps backwards, would collide; the generator bumps to one past
the last issued id in that case, so ids stay unique and strictly increasing
within a session.
"""

import time
from typing import Callable


class EntryIdGenerator:
    """Monotonic, time-based id source."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def observe(self, entry_id: int) -> None:
        """Make sure future ids are greater than an id already in use."""
        if entry_id > self._last:
            self._last = entry_id

    def next_id(self) -> int:
        now_ms = int(self._clock() * 1000)
        self._last = max(now_ms, self._last + 1)
        return self._last
