"""Shared types and errors for match orchestration."""
from __future__ import annotations

from dataclasses import dataclass

from relic_tick import TickError


class PhaseTableError(TickError):
    """Raised when a phase has no entry in the phase table."""

    def __init__(self, phase: object) -> None:
        self.phase = phase
        super().__init__(f"no successor for phase {phase!r}")


class SpawnTargetMissing(TickError):
    """Raised by a reward spawner that has nowhere to put the reward."""


@dataclass(frozen=True)
class SpawnPoint:
    """Where the reward object appears.

    Attributes:
        position: World-space ``(x, y, z)``.
        rotation: Orientation quaternion ``(x, y, z, w)``.
    """

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    def __post_init__(self) -> None:
        if len(self.position) != 3:
            raise ValueError(f"position must have 3 components, got {len(self.position)}")
        if len(self.rotation) != 4:
            raise ValueError(f"rotation must have 4 components, got {len(self.rotation)}")
        # Accept lists from parsed config files.
        object.__setattr__(self, "position", tuple(float(v) for v in self.position))
        object.__setattr__(self, "rotation", tuple(float(v) for v in self.rotation))
