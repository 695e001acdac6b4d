"""Session timestamp shared by every name derived in one deployment run."""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], int]


def epoch_millis() -> int:
    return int(time.time() * 1000)


class TimestampProvider:
    """Computes the timestamp once, on first use, and returns it thereafter.

    One provider per deployment run: every rollback suffix in that run must
    carry the same value. A ``fixed`` value (e.g. a package timestamp the
    caller already recorded) short-circuits the clock.
    """

    def __init__(self, clock: Clock = epoch_millis, fixed: Optional[int] = None) -> None:
        self._clock = clock
        self._value = fixed

    def timestamp(self) -> int:
        if self._value is None:
            self._value = int(self._clock())
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None
