"""relic-tick - A minimal tick loop for driving a timed match."""

from relic_tick.clock import Clock
from relic_tick.engine import Engine
from relic_tick.types import System, TickContext, TickError

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "TickError",
]
