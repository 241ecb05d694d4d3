"""Monotonic game clock."""

import time

_START = time.perf_counter()


def time_now() -> float:
    """Seconds elapsed since the clock started."""
    return time.perf_counter() - _START


def time_delta(start: float, end: float) -> float:
    """Seconds between two clock readings."""
    return end - start