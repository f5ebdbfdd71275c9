"""Match phases and the phase table."""
from __future__ import annotations

from enum import Enum

from relic_match.types import PhaseTableError


class Phase(Enum):
    """Lifecycle stage of a match, in play order."""

    LOBBY = "lobby"
    COUNTDOWN = "countdown"
    TASK1 = "task1"
    TASK2 = "task2"
    TASK3 = "task3"
    SABOTAGE_WINDOW = "sabotage_window"
    FINAL = "final"
    POST_MATCH = "post_match"


_NEXT: dict[Phase, Phase] = {
    Phase.LOBBY: Phase.COUNTDOWN,
    Phase.COUNTDOWN: Phase.TASK1,
    Phase.TASK1: Phase.TASK2,
    Phase.TASK2: Phase.TASK3,
    Phase.TASK3: Phase.SABOTAGE_WINDOW,
    Phase.SABOTAGE_WINDOW: Phase.FINAL,
    Phase.FINAL: Phase.POST_MATCH,
}

_ORDER: dict[Phase, int] = {phase: i for i, phase in enumerate(Phase)}

TIMED_PHASES = frozenset({Phase.COUNTDOWN, Phase.SABOTAGE_WINDOW})
TASK_PHASES = (Phase.TASK1, Phase.TASK2, Phase.TASK3)


def next_phase(phase: Phase) -> Phase:
    """Return the successor of ``phase``.

    ``POST_MATCH`` is terminal and has no successor; asking for one, or
    passing anything that is not a table phase, raises PhaseTableError.
    """
    try:
        return _NEXT[phase]
    except (KeyError, TypeError):
        raise PhaseTableError(phase) from None


def phase_index(phase: Phase) -> int:
    """Position of ``phase`` in play order (LOBBY is 0)."""
    return _ORDER[phase]
