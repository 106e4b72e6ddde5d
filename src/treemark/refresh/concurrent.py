"""Join independent callback-style operations into one ordered result list."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Sequence

log = logging.getLogger(__name__)

# An operation receives a ``done(result, *extra)`` callback and calls it once.
Operation = Callable[[Callable[..., None]], None]


def concurrent(operations: Sequence[Operation], callback: Callable[..., None]) -> None:
    """Start every operation and call *callback* once all have completed.

    *callback* receives the results in the order the operations were given,
    whatever order they completed in, followed by any extra arguments passed
    to the final completion.  Failures are ordinary results; nothing is
    dropped or cancelled.
    """
    total = len(operations)
    if total == 0:
        callback([])
        return

    results: List[Any] = [None] * total
    reported = [False] * total
    lock = threading.Lock()
    remaining = total

    def completion(position: int) -> Callable[..., None]:
        def done(result: Any, *extra: Any) -> None:
            nonlocal remaining
            with lock:
                if reported[position]:
                    log.debug("Ignoring repeated completion of operation %d", position)
                    return
                reported[position] = True
                results[position] = result
                remaining -= 1
                finished = remaining == 0
            if finished:
                callback(list(results), *extra)

        return done

    for position, operation in enumerate(operations):
        operation(completion(position))
