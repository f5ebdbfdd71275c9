"""Countdown component."""
from __future__ import annotations

from dataclasses import dataclass

# Absorbs float drift from summing frame deltas (30 x 0.1 != 3.0).
EPSILON = 1e-9


@dataclass
class Countdown:
    """One-shot countdown driven by elapsed time.

    ``tick`` returns True exactly once, on the tick the remaining time
    crosses zero, then disarms itself until re-armed.
    """

    remaining: float = 0.0
    armed: bool = False

    def arm(self, duration: float) -> None:
        if duration < 0:
            raise ValueError("duration must be non-negative")
        self.remaining = duration
        self.armed = True

    def disarm(self) -> None:
        self.remaining = 0.0
        self.armed = False

    def tick(self, dt: float) -> bool:
        if not self.armed:
            return False
        self.remaining -= dt
        if self.remaining <= EPSILON:
            self.remaining = 0.0
            self.armed = False
            return True
        return False
