"""Signal names published and consumed on the match bus.

Payloads (keyword data passed to ``SignalBus.publish``):

- ``match_started``: none
- ``match_ended``: ``phase`` (Phase at the time the match ended),
  ``completed`` (True when reached through POST_MATCH, False for an
  explicit stop)
- ``phase_changed``: ``phase`` (Phase), ``remaining`` (float, 0.0 for
  untimed phases)
- ``reward_spawned``: ``target`` (SpawnPoint)
- ``warning``: ``message`` (str)
- ``task_completed`` (inbound): ``actor_id`` (int), ``elapsed`` (float)
"""
from __future__ import annotations

MATCH_STARTED = "match_started"
MATCH_ENDED = "match_ended"
PHASE_CHANGED = "phase_changed"
REWARD_SPAWNED = "reward_spawned"
WARNING = "warning"
TASK_COMPLETED = "task_completed"
