"""Clock and TickContext for the tick loop.

The clock runs at a nominal fixed timestep (``1 / tps``) but a caller may
report the real elapsed time of a tick instead, e.g. a frame delta from a
host game loop.
"""

from typing import Callable

from relic_tick.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._last_dt = 0.0
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        """Nominal timestep."""
        return self._dt

    @property
    def last_dt(self) -> float:
        """Elapsed time reported for the most recent tick."""
        return self._last_dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._dt
        elif dt < 0:
            raise ValueError("dt must be non-negative")
        self._tick_number += 1
        self._last_dt = dt
        self._elapsed += dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._last_dt = 0.0
        self._elapsed = tick_number * self._dt
