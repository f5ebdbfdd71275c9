"""MatchStats - per-match results collected from bus notifications."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from relic_match import signals
from relic_match.phases import TASK_PHASES, Phase

if TYPE_CHECKING:
    from relic_signal import SignalBus, Subscription


class MatchStats:
    """Records task clear times and total match time.

    Listens on the bus like any presentation layer would. ``clock`` returns
    the current match time, e.g. ``lambda: orchestrator.queue.now``.

    A task's clear time is taken from the first completion reported while
    that task phase is current; completions outside task phases only count
    toward the per-actor totals.
    """

    def __init__(self, bus: SignalBus, clock: Callable[[], float]) -> None:
        self._bus = bus
        self._clock = clock
        self._subs: list[Subscription] = [
            bus.subscribe(signals.PHASE_CHANGED, self._on_phase_changed),
            bus.subscribe(signals.TASK_COMPLETED, self._on_task_completed),
            bus.subscribe(signals.MATCH_ENDED, self._on_match_ended),
        ]
        self._reset()

    def _reset(self) -> None:
        self.task_times: list[float | None] = [None] * len(TASK_PHASES)
        self.completions: dict[int, int] = {}
        self.total_time: float | None = None
        self._start_time: float | None = None
        self._task_index: int | None = None

    def close(self) -> None:
        """Stop listening. Recorded results stay readable."""
        for sub in self._subs:
            self._bus.unsubscribe(sub)
        self._subs.clear()

    def _on_phase_changed(self, signal_name: str, data: dict[str, Any]) -> None:
        phase = data["phase"]
        if phase is Phase.COUNTDOWN:
            self._reset()
            self._start_time = self._clock()
        self._task_index = TASK_PHASES.index(phase) if phase in TASK_PHASES else None

    def _on_task_completed(self, signal_name: str, data: dict[str, Any]) -> None:
        actor_id = data.get("actor_id")
        self.completions[actor_id] = self.completions.get(actor_id, 0) + 1
        if self._task_index is not None and self.task_times[self._task_index] is None:
            self.task_times[self._task_index] = data.get("elapsed", 0.0)

    def _on_match_ended(self, signal_name: str, data: dict[str, Any]) -> None:
        if self._start_time is not None and self.total_time is None:
            self.total_time = self._clock() - self._start_time

    def summary(self) -> str:
        lines = ["RESULT"]
        for i, t in enumerate(self.task_times, start=1):
            lines.append(f"Task {i}: {format_time(t)}")
        lines.append(f"Completions: {sum(self.completions.values())}")
        lines.append(f"Total: {format_time(self.total_time)}")
        return "\n".join(lines)


def format_time(seconds: float | None) -> str:
    """``mm:ss``, or ``--:--`` for an unset or non-positive time."""
    if seconds is None or seconds <= 0:
        return "--:--"
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"
