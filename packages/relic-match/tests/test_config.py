"""Tests for MatchConfig and SpawnPoint."""
from __future__ import annotations

import dataclasses

import pytest

from relic_match import MatchConfig, SpawnPoint


class TestMatchConfig:
    def test_defaults(self) -> None:
        config = MatchConfig()
        assert config.countdown_duration == 3.0
        assert config.sabotage_duration == 5.0
        assert config.transition_delay == 1.0
        assert config.reward_target is None

    def test_frozen(self) -> None:
        config = MatchConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.countdown_duration = 10.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field", ["countdown_duration", "sabotage_duration", "transition_delay"]
    )
    def test_negative_durations_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            MatchConfig(**{field: -0.5})

    @pytest.mark.parametrize("field", ["countdown_duration", "sabotage_duration"])
    def test_zero_phase_duration_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            MatchConfig(**{field: 0.0})

    def test_zero_delay_allowed(self) -> None:
        assert MatchConfig(transition_delay=0.0).transition_delay == 0.0

    def test_from_dict(self) -> None:
        config = MatchConfig.from_dict(
            {
                "countdown_duration": 5,
                "transition_delay": 0.5,
                "reward_target": {"position": [1, 2, 3]},
            }
        )
        assert config.countdown_duration == 5
        assert config.sabotage_duration == 5.0
        assert config.transition_delay == 0.5
        assert config.reward_target == SpawnPoint(position=(1.0, 2.0, 3.0))

    def test_from_dict_empty(self) -> None:
        assert MatchConfig.from_dict({}) == MatchConfig()

    def test_from_dict_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="countdown"):
            MatchConfig.from_dict({"countdown": 3})


class TestSpawnPoint:
    def test_default_orientation_is_identity(self) -> None:
        point = SpawnPoint()
        assert point.position == (0.0, 0.0, 0.0)
        assert point.rotation == (0.0, 0.0, 0.0, 1.0)

    def test_lists_become_tuples(self) -> None:
        point = SpawnPoint(position=[1, 2, 3], rotation=[0, 1, 0, 0])  # type: ignore[arg-type]
        assert point.position == (1.0, 2.0, 3.0)
        assert point.rotation == (0.0, 1.0, 0.0, 0.0)
        hash(point)

    def test_wrong_arity_rejected(self) -> None:
        with pytest.raises(ValueError, match="position"):
            SpawnPoint(position=(1.0, 2.0))  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="rotation"):
            SpawnPoint(rotation=(0.0, 0.0, 1.0))  # type: ignore[arg-type]
