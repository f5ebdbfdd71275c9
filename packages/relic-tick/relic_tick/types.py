"""Shared type aliases and errors for the tick loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class TickError(Exception):
    """Base class for errors raised by relic packages."""


System = Callable[[TickContext], None]
