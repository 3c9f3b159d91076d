# services/clock.py
"""Host clock used to stamp created_at on new records.

Production code uses SystemClock. Tests inject their own Clock so
timestamps are deterministic.
"""
import time
from typing import Protocol


class Clock(Protocol):
     """Source of record creation times."""

     def now(self) -> int:
          """Return the current time in whole seconds since the epoch."""
          ...


class SystemClock:
     """Wall clock. Nanosecond host time truncated to seconds."""

     def now(self) -> int:
          return time.time_ns() // 1_000_000_000
