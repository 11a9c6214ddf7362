"""Wall-clock instrumentation for comparing fetch strategies."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

R = TypeVar("R")


def timed(operation: Callable[[], R]) -> tuple[float, R]:
    """Run ``operation`` and measure how long it took.

    Args:
        operation: Zero-argument callable to execute

    Returns:
        Tuple of (elapsed milliseconds, operation result)

    Exceptions raised by the operation propagate unchanged and no
    timing is reported for them.
    """
    start = time.perf_counter()
    result = operation()
    elapsed_ms = (time.perf_counter() - start) * 1000
    return elapsed_ms, result
