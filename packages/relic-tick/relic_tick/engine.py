"""Engine - core loop, pacing, and lifecycle hooks."""

import time
from typing import Callable

from relic_tick.clock import Clock
from relic_tick.types import System, TickContext


class Engine:
    def __init__(self, tps: int = 20) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None = None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self, dt: float | None = None) -> None:
        """Run a single tick. ``dt`` overrides the nominal timestep."""
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(ctx)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(ctx)

    def run_forever(self) -> None:
        """Tick at wall-clock pace until a system requests a stop.

        Each tick reports the real time since the previous one, so a slow
        tick does not stretch match timers.
        """
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(ctx)

        dt = self._clock.dt
        last: float | None = None
        while not self._stop_requested:
            start = time.monotonic()
            self._tick(dt if last is None else start - last)
            last = start
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(ctx)
