"""relic-schedule - Countdown and deferred-call primitives for the tick loop."""
from __future__ import annotations

from relic_schedule.components import Countdown
from relic_schedule.queue import DelayQueue, ScheduleHandle

__all__ = ["Countdown", "DelayQueue", "ScheduleHandle"]
