"""relic-signal - In-process notification bus for the tick loop."""
from __future__ import annotations

from relic_signal.bus import SignalBus, Subscription
from relic_signal.systems import make_signal_system

__all__ = ["SignalBus", "Subscription", "make_signal_system"]
