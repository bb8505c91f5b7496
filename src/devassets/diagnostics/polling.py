from __future__ import annotations

import time
from typing import Callable, Sized, TypeVar

T = TypeVar("T")


def _non_empty(value: object) -> bool:
    if isinstance(value, Sized):
        return len(value) > 0
    return value is not None


def poll(
    fetch: Callable[[], T],
    duration: float,
    step: float,
    predicate: Callable[[T], bool] | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> T:
    """Call ``fetch`` every ``step`` seconds until ``predicate`` holds.

    Gives up after ``duration`` seconds and returns the last fetched value
    instead of raising, so callers see whatever is currently visible.
    """
    check = predicate or _non_empty
    deadline = clock() + duration
    result = fetch()
    while not check(result):
        if clock() + step > deadline:
            break
        sleep(step)
        result = fetch()
    return result
