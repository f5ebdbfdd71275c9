"""Tests for MatchStats."""
from __future__ import annotations

import pytest
from relic_signal import SignalBus

from relic_match import MatchStats, Phase, format_time, signals


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _phase(bus: SignalBus, phase: Phase) -> None:
    bus.publish(signals.PHASE_CHANGED, phase=phase, remaining=0.0)


class TestRecording:
    def test_first_completion_sets_task_time(self) -> None:
        bus = SignalBus()
        clock = _Clock()
        stats = MatchStats(bus, clock)

        _phase(bus, Phase.COUNTDOWN)
        _phase(bus, Phase.TASK1)
        bus.publish(signals.TASK_COMPLETED, actor_id=1, elapsed=65.2)
        bus.publish(signals.TASK_COMPLETED, actor_id=2, elapsed=70.0)
        _phase(bus, Phase.TASK2)
        bus.flush()

        assert stats.task_times == [65.2, None, None]
        assert stats.completions == {1: 1, 2: 1}

    def test_completion_outside_task_phase_only_counts(self) -> None:
        bus = SignalBus()
        stats = MatchStats(bus, _Clock())

        _phase(bus, Phase.COUNTDOWN)
        bus.publish(signals.TASK_COMPLETED, actor_id=3, elapsed=1.0)
        _phase(bus, Phase.FINAL)
        bus.publish(signals.TASK_COMPLETED, actor_id=3, elapsed=2.0)
        bus.flush()

        assert stats.task_times == [None, None, None]
        assert stats.completions == {3: 2}

    def test_total_time_from_countdown_to_end(self) -> None:
        bus = SignalBus()
        clock = _Clock()
        stats = MatchStats(bus, clock)

        clock.now = 2.0
        _phase(bus, Phase.COUNTDOWN)
        bus.flush()
        clock.now = 127.0
        bus.publish(signals.MATCH_ENDED, phase=Phase.POST_MATCH, completed=True)
        bus.flush()

        assert stats.total_time == 125.0

    def test_end_without_countdown_leaves_total_unset(self) -> None:
        bus = SignalBus()
        stats = MatchStats(bus, _Clock())
        bus.publish(signals.MATCH_ENDED, phase=Phase.LOBBY, completed=False)
        bus.flush()
        assert stats.total_time is None

    def test_new_countdown_resets(self) -> None:
        bus = SignalBus()
        stats = MatchStats(bus, _Clock())

        _phase(bus, Phase.COUNTDOWN)
        _phase(bus, Phase.TASK1)
        bus.publish(signals.TASK_COMPLETED, actor_id=1, elapsed=9.0)
        _phase(bus, Phase.COUNTDOWN)
        bus.flush()

        assert stats.task_times == [None, None, None]
        assert stats.completions == {}

    def test_close_stops_listening(self) -> None:
        bus = SignalBus()
        stats = MatchStats(bus, _Clock())
        stats.close()

        _phase(bus, Phase.TASK1)
        bus.publish(signals.TASK_COMPLETED, actor_id=1, elapsed=9.0)
        bus.flush()

        assert stats.completions == {}
        assert bus.subscriber_count(signals.PHASE_CHANGED) == 0


class TestSummary:
    def test_summary_text(self) -> None:
        bus = SignalBus()
        clock = _Clock()
        stats = MatchStats(bus, clock)

        _phase(bus, Phase.COUNTDOWN)
        _phase(bus, Phase.TASK1)
        bus.publish(signals.TASK_COMPLETED, actor_id=1, elapsed=65.2)
        _phase(bus, Phase.TASK2)
        bus.publish(signals.TASK_COMPLETED, actor_id=2, elapsed=9.9)
        bus.flush()
        clock.now = 125.0
        bus.publish(signals.MATCH_ENDED, phase=Phase.TASK2, completed=False)
        bus.flush()

        assert stats.summary() == (
            "RESULT\n"
            "Task 1: 01:05\n"
            "Task 2: 00:09\n"
            "Task 3: --:--\n"
            "Completions: 2\n"
            "Total: 02:05"
        )


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (None, "--:--"),
        (0.0, "--:--"),
        (-3.0, "--:--"),
        (0.5, "00:00"),
        (59.9, "00:59"),
        (60.0, "01:00"),
        (3599.0, "59:59"),
        (3600.0, "60:00"),
    ],
)
def test_format_time(seconds, expected) -> None:
    assert format_time(seconds) == expected
