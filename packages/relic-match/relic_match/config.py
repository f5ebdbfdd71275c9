"""Match configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from relic_match.types import SpawnPoint


@dataclass(frozen=True)
class MatchConfig:
    """Immutable timing and reward settings for one match.

    Attributes:
        countdown_duration: Time-units spent in COUNTDOWN before TASK1.
        sabotage_duration: Time-units spent in SABOTAGE_WINDOW before FINAL.
        transition_delay: Grace period between a completion signal and the
            advance it triggers.
        reward_target: Where the reward spawns on entering FINAL. None
            skips the spawn with a warning.
    """

    countdown_duration: float = 3.0
    sabotage_duration: float = 5.0
    transition_delay: float = 1.0
    reward_target: SpawnPoint | None = None

    def __post_init__(self) -> None:
        for name in ("countdown_duration", "sabotage_duration", "transition_delay"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        for name in ("countdown_duration", "sabotage_duration"):
            value = getattr(self, name)
            if value == 0:
                raise ValueError(f"{name} must be > 0, got {value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchConfig:
        """Build a config from plain data, e.g. a parsed JSON file.

        ``reward_target`` may be a mapping with ``position``/``rotation``.
        Unknown keys raise ValueError.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown MatchConfig keys: {', '.join(unknown)}")
        kwargs = dict(data)
        target = kwargs.get("reward_target")
        if isinstance(target, Mapping):
            kwargs["reward_target"] = SpawnPoint(**target)
        return cls(**kwargs)
