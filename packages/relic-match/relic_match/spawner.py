"""Reward spawner protocol and a recording implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from relic_match.types import SpawnPoint, SpawnTargetMissing


@runtime_checkable
class RewardSpawner(Protocol):
    """Instantiates the reward object when the match reaches FINAL.

    Implementations raise SpawnTargetMissing when they have no prefab or
    scene target to spawn into; the orchestrator skips the spawn with a
    warning. Any other exception propagates.
    """

    def spawn(self, target: SpawnPoint) -> object:
        ...


class RecordingSpawner:
    """Spawner that records requests instead of creating anything.

    Conforms to the RewardSpawner protocol. Used by headless runs and
    tests.

    Args:
        available: When False, every request raises SpawnTargetMissing.
    """

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.requests: list[SpawnPoint] = []

    def spawn(self, target: SpawnPoint) -> object:
        if not self.available:
            raise SpawnTargetMissing("reward prefab not set")
        self.requests.append(target)
        return target
