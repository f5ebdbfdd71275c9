"""relic-match - Phase orchestration for a timed competitive match."""
from __future__ import annotations

from relic_match import signals
from relic_match.config import MatchConfig
from relic_match.orchestrator import PhaseOrchestrator
from relic_match.phases import TASK_PHASES, TIMED_PHASES, Phase, next_phase, phase_index
from relic_match.players import PlayerDirectory, PlayerInfo
from relic_match.spawner import RecordingSpawner, RewardSpawner
from relic_match.stats import MatchStats, format_time
from relic_match.systems import make_match_system
from relic_match.types import PhaseTableError, SpawnPoint, SpawnTargetMissing

__all__ = [
    "Phase",
    "next_phase",
    "phase_index",
    "TIMED_PHASES",
    "TASK_PHASES",
    "MatchConfig",
    "SpawnPoint",
    "PhaseOrchestrator",
    "PlayerDirectory",
    "PlayerInfo",
    "RewardSpawner",
    "RecordingSpawner",
    "MatchStats",
    "format_time",
    "make_match_system",
    "PhaseTableError",
    "SpawnTargetMissing",
    "signals",
]
