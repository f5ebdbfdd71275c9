"""PhaseOrchestrator - drives one match through the phase table."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from relic_schedule import Countdown, DelayQueue, ScheduleHandle

from relic_match import signals
from relic_match.config import MatchConfig
from relic_match.phases import TIMED_PHASES, Phase, next_phase
from relic_match.players import PlayerDirectory
from relic_match.types import PhaseTableError, SpawnTargetMissing

if TYPE_CHECKING:
    from relic_signal import SignalBus, Subscription

    from relic_match.spawner import RewardSpawner

logger = logging.getLogger(__name__)


class PhaseOrchestrator:
    """Owns the match state and is its only mutator.

    Everything runs on the caller's thread. ``update(dt)`` is called once
    per tick: it polls the phase countdown, then drains deferred advances
    that have come due. Notifications are queued on ``bus`` and reach
    subscribers when the bus is flushed.

    Args:
        bus: Session bus for outbound notifications and inbound
            ``task_completed`` signals.
        config: Timing and reward settings. Defaults to MatchConfig().
        spawner: Collaborator asked to create the reward on FINAL.
        players: Directory used to name actors in logs.
        queue: Delay queue for deferred calls. A private one is created if
            omitted.
    """

    def __init__(
        self,
        bus: SignalBus,
        config: MatchConfig | None = None,
        spawner: RewardSpawner | None = None,
        players: PlayerDirectory | None = None,
        queue: DelayQueue | None = None,
    ) -> None:
        self._bus = bus
        self._config = config if config is not None else MatchConfig()
        self._spawner = spawner
        self._players = players if players is not None else PlayerDirectory()
        self._queue = queue if queue is not None else DelayQueue()

        self._phase = Phase.LOBBY
        self._active = False
        self._started = False
        self._timer = Countdown()
        self._listener: Subscription | None = None
        self._deferred: set[ScheduleHandle] = set()
        self._auto_start: ScheduleHandle | None = None
        self._rewards_spawned = 0

    # --- Queries ---

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def has_started(self) -> bool:
        return self._started

    @property
    def remaining(self) -> float:
        """Time left in the current timed phase, 0.0 otherwise."""
        return self._timer.remaining if self._timer.armed else 0.0

    @property
    def config(self) -> MatchConfig:
        return self._config

    @property
    def players(self) -> PlayerDirectory:
        return self._players

    @property
    def queue(self) -> DelayQueue:
        return self._queue

    def pending_advances(self) -> int:
        """Deferred advances scheduled by completion signals and not yet run."""
        return len(self._deferred)

    def snapshot(self) -> dict[str, Any]:
        """Read-only view of the match state."""
        return {
            "phase": self._phase.value,
            "is_active": self._active,
            "has_started": self._started,
            "remaining": self.remaining,
            "pending_advances": len(self._deferred),
            "rewards_spawned": self._rewards_spawned,
            "time": self._queue.now,
        }

    # --- Commands ---

    def start(self) -> None:
        """Begin the match. Ignored while a match is active.

        Any pending ``start_after`` is cancelled either way.
        """
        self._cancel_auto_start()
        if self._active:
            logger.debug("start ignored: match already active")
            return
        self._active = True
        self._started = True
        self._listener = self._bus.subscribe(
            signals.TASK_COMPLETED, self._on_task_completed
        )
        logger.info("match started")
        self._bus.publish(signals.MATCH_STARTED)
        self.set_phase(Phase.COUNTDOWN)

    def start_after(self, delay: float) -> ScheduleHandle:
        """Schedule ``start()`` after ``delay`` time-units of ticking.

        Replaces any earlier pending auto-start. ``start()`` and ``end()``
        cancel it.
        """
        self._cancel_auto_start()
        self._auto_start = self._queue.schedule(delay, self.start)
        return self._auto_start

    def end(self) -> None:
        """Stop the match immediately without touching the phase.

        Ignored unless a match has been started and not yet ended.
        """
        if not self._started:
            logger.debug("end ignored: no match started")
            return
        self._started = False
        self._active = False
        self._cancel_auto_start()
        self._teardown()
        logger.info("match ended early in %s", self._phase.name)
        self._bus.publish(signals.MATCH_ENDED, phase=self._phase, completed=False)

    def advance_phase(self) -> None:
        """Move to the next phase in the table.

        Entering FINAL also requests the reward spawn. Does nothing unless
        the match is active, so POST_MATCH is never left and its side
        effects never repeat.
        """
        if not self._active:
            logger.debug("advance ignored: match not active (%s)", self._phase.name)
            return
        target = next_phase(self._phase)
        self.set_phase(target)
        if target is Phase.FINAL:
            self._spawn_reward()

    def set_phase(self, new_phase: Phase) -> None:
        """Enter ``new_phase`` and publish exactly one phase_changed."""
        if not isinstance(new_phase, Phase):
            raise PhaseTableError(new_phase)
        self._phase = new_phase

        if new_phase is Phase.COUNTDOWN:
            self._timer.arm(self._config.countdown_duration)
        elif new_phase is Phase.SABOTAGE_WINDOW:
            self._timer.arm(self._config.sabotage_duration)
        else:
            self._timer.disarm()

        remaining = self._timer.remaining if new_phase in TIMED_PHASES else 0.0
        logger.info("phase changed to %s (%.2f)", new_phase.name, remaining)
        self._bus.publish(signals.PHASE_CHANGED, phase=new_phase, remaining=remaining)

        if new_phase is Phase.POST_MATCH:
            self._active = False
            self._started = False
            self._teardown()
            logger.info("match finished")
            self._bus.publish(signals.MATCH_ENDED, phase=new_phase, completed=True)
        elif new_phase is Phase.LOBBY:
            # Back to the initial state; a running match is abandoned.
            was_started = self._started
            self._active = False
            self._started = False
            self._teardown()
            if was_started:
                logger.info("match abandoned")
                self._bus.publish(signals.MATCH_ENDED, phase=new_phase, completed=False)

    # --- Tick ---

    def update(self, dt: float) -> None:
        """Advance match time by ``dt``.

        A countdown expiry advances before any deferred call due in the
        same tick.
        """
        if self._active and self._phase in TIMED_PHASES:
            if self._timer.tick(dt):
                self.advance_phase()
        self._queue.advance(dt)

    # --- Internals ---

    def _on_task_completed(self, signal_name: str, data: dict[str, Any]) -> None:
        # Any completion advances the table; the signal is not matched
        # against the current task phase.
        actor_id = data.get("actor_id")
        elapsed = data.get("elapsed", 0.0)
        delay = self._config.transition_delay

        def deferred_advance() -> None:
            self._deferred.discard(handle)
            self.advance_phase()

        handle = self._queue.schedule(delay, deferred_advance)
        self._deferred.add(handle)
        logger.info(
            "task completed by %s in %.2fs, advancing in %.2fs",
            self._players.describe(actor_id), elapsed, delay,
        )

    def _spawn_reward(self) -> None:
        target = self._config.reward_target
        if self._spawner is None or target is None:
            self._warn("reward spawn skipped: no spawner or target configured")
            return
        try:
            self._spawner.spawn(target)
        except SpawnTargetMissing as exc:
            self._warn(f"reward spawn skipped: {exc}")
            return
        self._rewards_spawned += 1
        logger.info("reward spawned at %s", target.position)
        self._bus.publish(signals.REWARD_SPAWNED, target=target)

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self._bus.publish(signals.WARNING, message=message)

    def _cancel_auto_start(self) -> None:
        if self._auto_start is not None:
            self._queue.cancel(self._auto_start)
            self._auto_start = None

    def _teardown(self) -> None:
        if self._listener is not None:
            self._bus.unsubscribe(self._listener)
            self._listener = None
        for handle in self._deferred:
            self._queue.cancel(handle)
        self._deferred.clear()
        self._timer.disarm()
