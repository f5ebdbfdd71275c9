"""Headless match -- a full match driven by a scripted task tracker.

Demonstrates:
- Wiring PhaseOrchestrator, SignalBus and the tick Engine
- A console "HUD" that only listens to bus notifications
- Loading MatchConfig from a JSON file
- Printing the MatchStats summary at the end

Run:
    python packages/relic-match/examples/match.py
    python packages/relic-match/examples/match.py --config match.json --tps 30
"""
from __future__ import annotations

import argparse
import json
import logging
import random
from typing import Any

from relic_signal import SignalBus, make_signal_system
from relic_tick import Engine, TickContext

from relic_match import (
    TASK_PHASES,
    MatchConfig,
    MatchStats,
    Phase,
    PhaseOrchestrator,
    PlayerDirectory,
    PlayerInfo,
    RecordingSpawner,
    SpawnPoint,
    make_match_system,
    signals,
)


def hud(signal_name: str, data: dict[str, Any]) -> None:
    if signal_name == signals.PHASE_CHANGED:
        phase = data["phase"]
        timer = f" ({data['remaining']:.1f}s)" if data["remaining"] else ""
        print(f"  >> {phase.name}{timer}")
    elif signal_name == signals.REWARD_SPAWNED:
        print(f"  ** relic spawned at {data['target'].position}")
    elif signal_name == signals.WARNING:
        print(f"  !! {data['message']}")
    else:
        print(f"  -- {signal_name}")


def load_config(path: str | None) -> MatchConfig:
    if path is None:
        return MatchConfig(reward_target=SpawnPoint(position=(0.0, 1.5, 12.0)))
    with open(path) as fh:
        return MatchConfig.from_dict(json.load(fh))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config", help="JSON file with MatchConfig fields")
    parser.add_argument("--tps", type=int, default=20)
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    bus = SignalBus()
    players = PlayerDirectory()
    for pid, name in enumerate(("Ada", "Bo", "Cy"), start=1):
        players.register(PlayerInfo(id=pid, name=name, is_local=pid == 1))

    orch = PhaseOrchestrator(
        bus, load_config(args.config), spawner=RecordingSpawner(), players=players
    )
    stats = MatchStats(bus, lambda: orch.queue.now)
    for name in (
        signals.MATCH_STARTED,
        signals.MATCH_ENDED,
        signals.PHASE_CHANGED,
        signals.REWARD_SPAWNED,
        signals.WARNING,
    ):
        bus.subscribe(name, hud)

    # Each task (and the final extraction) takes a random amount of time.
    started: dict[Phase, float] = {}
    due: dict[Phase, float] = {}

    def task_tracker(ctx: TickContext) -> None:
        phase = orch.phase
        if phase not in TASK_PHASES and phase is not Phase.FINAL:
            return
        if phase not in due:
            started[phase] = ctx.elapsed
            due[phase] = ctx.elapsed + rng.uniform(2.0, 6.0)
        elif due[phase] <= ctx.elapsed and orch.pending_advances() == 0:
            due[phase] = float("inf")
            winner = rng.choice(list(players))
            bus.publish(
                signals.TASK_COMPLETED,
                actor_id=winner.id,
                elapsed=ctx.elapsed - started[phase],
            )

    def stop_after_match(ctx: TickContext) -> None:
        if orch.phase is Phase.POST_MATCH:
            ctx.request_stop()

    engine = Engine(tps=args.tps)
    engine.add_system(task_tracker)
    engine.add_system(make_match_system(orch))
    engine.add_system(make_signal_system(bus))
    engine.add_system(stop_after_match)

    print("=== Relic run ===\n")
    orch.start_after(0.25)
    engine.run(args.tps * 120)

    print()
    print(stats.summary())


if __name__ == "__main__":
    main()
