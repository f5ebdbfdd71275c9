"""PlayerDirectory - session-owned registry of match participants."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class PlayerInfo:
    id: int
    name: str
    is_local: bool = False


class PlayerDirectory:
    """Maps player ids to PlayerInfo, preserving registration order.

    One directory belongs to one match session; there is no global
    instance.
    """

    def __init__(self) -> None:
        self._players: dict[int, PlayerInfo] = {}

    def register(self, info: PlayerInfo) -> bool:
        """Add or replace a player. Returns False for an invalid record.

        Re-registering an id keeps its original position.
        """
        if not info.name:
            logger.warning("ignoring player %r with empty name", info.id)
            return False
        self._players[info.id] = info
        return True

    def remove(self, player_id: int) -> None:
        self._players.pop(player_id, None)

    def get(self, player_id: int) -> PlayerInfo | None:
        return self._players.get(player_id)

    def opponents(self, self_id: int) -> list[PlayerInfo]:
        """Everyone except ``self_id``, in registration order."""
        return [p for pid, p in self._players.items() if pid != self_id]

    def local(self) -> PlayerInfo | None:
        """First player flagged local, if any."""
        for info in self._players.values():
            if info.is_local:
                return info
        return None

    def describe(self, player_id: int) -> str:
        info = self._players.get(player_id)
        return info.name if info is not None else f"player {player_id}"

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __iter__(self) -> Iterator[PlayerInfo]:
        return iter(list(self._players.values()))

    def __len__(self) -> int:
        return len(self._players)
