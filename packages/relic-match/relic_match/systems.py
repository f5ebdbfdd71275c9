"""System factory for match orchestration."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from relic_match.orchestrator import PhaseOrchestrator

if TYPE_CHECKING:
    from relic_tick import TickContext


def make_match_system(
    orchestrator: PhaseOrchestrator,
) -> Callable[[TickContext], None]:
    """Return a system that feeds each tick's elapsed time to the orchestrator.

    Register it before the bus's signal system so notifications raised in
    a tick are delivered in the same tick.
    """

    def match_system(ctx: TickContext) -> None:
        orchestrator.update(ctx.dt)

    return match_system
