"""Tests for the Countdown component."""
import pytest

from relic_schedule import Countdown


class TestCountdownBasics:

    def test_starts_disarmed(self):
        countdown = Countdown()
        assert not countdown.armed
        assert countdown.remaining == 0.0

    def test_disarmed_tick_never_fires(self):
        countdown = Countdown()
        assert countdown.tick(10.0) is False
        assert countdown.remaining == 0.0

    def test_fires_when_crossing_zero(self):
        countdown = Countdown()
        countdown.arm(3.0)

        assert countdown.tick(1.0) is False
        assert countdown.tick(1.0) is False
        assert countdown.remaining == 1.0
        assert countdown.tick(1.0) is True
        assert not countdown.armed

    def test_fires_exactly_once(self):
        countdown = Countdown()
        countdown.arm(1.0)

        results = [countdown.tick(0.5) for _ in range(6)]
        assert results.count(True) == 1
        assert results[1] is True

    def test_overshoot_clamps_to_zero(self):
        countdown = Countdown()
        countdown.arm(1.0)
        assert countdown.tick(5.0) is True
        assert countdown.remaining == 0.0

    def test_fractional_steps_reach_zero(self):
        """Thirty 0.1 steps land on 3.0 despite float drift."""
        countdown = Countdown()
        countdown.arm(3.0)

        fired_at = [i for i in range(1, 41) if countdown.tick(0.1)]
        assert fired_at == [30]

    def test_zero_duration_fires_on_next_tick(self):
        countdown = Countdown()
        countdown.arm(0.0)
        assert countdown.tick(0.0) is True


class TestCountdownRearm:

    def test_rearm_after_fire(self):
        countdown = Countdown()
        countdown.arm(1.0)
        assert countdown.tick(1.0) is True

        countdown.arm(5.0)
        assert countdown.armed
        assert countdown.remaining == 5.0
        assert countdown.tick(4.0) is False
        assert countdown.tick(1.0) is True

    def test_disarm_cancels(self):
        countdown = Countdown()
        countdown.arm(1.0)
        countdown.disarm()
        assert countdown.tick(2.0) is False
        assert countdown.remaining == 0.0

    def test_negative_duration_rejected(self):
        countdown = Countdown()
        with pytest.raises(ValueError):
            countdown.arm(-1.0)
        assert not countdown.armed
