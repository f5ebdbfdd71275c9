"""DelayQueue - one-shot deferred calls drained by the tick loop."""
from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Callable

from relic_schedule.components import EPSILON


@dataclass(frozen=True)
class ScheduleHandle:
    """Identifies one scheduled call for cancellation."""

    seq: int
    fire_at: float


class DelayQueue:
    """Min-heap of ``(fire_at, seq)`` entries on its own time axis.

    Time only moves when :meth:`advance` is called, so the queue follows
    the tick clock rather than the wall clock. Entries due at the same
    time fire in submission order.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._heap: list[tuple[float, int]] = []
        self._callbacks: dict[int, Callable[[], None]] = {}
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduleHandle:
        """Run ``callback`` once, ``delay`` time-units from now."""
        if delay < 0:
            raise ValueError("delay must be non-negative")
        seq = next(self._seq)
        fire_at = self._now + delay
        heapq.heappush(self._heap, (fire_at, seq))
        self._callbacks[seq] = callback
        return ScheduleHandle(seq, fire_at)

    def cancel(self, handle: ScheduleHandle) -> bool:
        """Cancel a pending call. Returns False if it already ran or was cancelled.

        Heap entries are dropped lazily; once cancelled entries outnumber
        live ones the heap is rebuilt.
        """
        if self._callbacks.pop(handle.seq, None) is None:
            return False
        if len(self._heap) > 2 * len(self._callbacks):
            self._heap = [e for e in self._heap if e[1] in self._callbacks]
            heapq.heapify(self._heap)
        return True

    def is_pending(self, handle: ScheduleHandle) -> bool:
        return handle.seq in self._callbacks

    def pending(self) -> int:
        return len(self._callbacks)

    def advance(self, dt: float) -> int:
        """Move time forward by ``dt`` and run every due call.

        Calls scheduled while draining wait for the next advance, even
        with a zero delay. Returns the number of calls run.
        """
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._now += dt
        horizon = self._now + EPSILON
        cutoff = next(self._seq)
        fired = 0
        deferred: list[tuple[float, int]] = []
        while self._heap and self._heap[0][0] <= horizon:
            entry = heapq.heappop(self._heap)
            seq = entry[1]
            if seq > cutoff:
                deferred.append(entry)
                continue
            callback = self._callbacks.pop(seq, None)
            if callback is None:
                continue
            callback()
            fired += 1
        for entry in deferred:
            heapq.heappush(self._heap, entry)
        return fired

    def clear(self) -> None:
        """Drop every pending call."""
        self._heap.clear()
        self._callbacks.clear()
