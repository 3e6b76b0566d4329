"""Timing helpers and day-time value conversion."""

from __future__ import annotations

import math
import time


class Timer:
    """Measures elapsed time from its creation."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def stop(self) -> int:
        """Return microseconds elapsed since the timer was created."""
        return (time.perf_counter_ns() - self._start) // 1000


class ScopeLogTimer(Timer):
    """Context manager that prints how long its block took."""

    def __init__(self, scope_id: int) -> None:
        super().__init__()
        self.scope_id = scope_id

    def __enter__(self) -> ScopeLogTimer:
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        print(f"Scope {self.scope_id} finished in {self.stop()} micros. ")


def time_value(hour: float, minute: float, second: float) -> float:
    """Convert a time of day into a fraction of a day in 0..1."""
    return (hour + (minute + second / 60.0) / 60.0) / 24.0


def _truncated_mod60(value: float) -> int:
    return int(math.fmod(int(value), 60))


def from_value(value: float) -> tuple[int, int, int]:
    """Convert a fraction of a day into (hour, minute, second)."""
    value *= 24
    hour = int(value)
    value *= 60
    minute = _truncated_mod60(value)
    value *= 60
    second = _truncated_mod60(value)
    return hour, minute, second