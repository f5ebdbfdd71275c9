"""In-memory pub/sub bus with per-tick flush semantics.

Subscribers receive ``handler(signal_name, data)``. ``subscribe`` returns
a :class:`Subscription` handle; revoking it is the only way to stop
delivery, so an owner that tears down can never be called back later.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

_Handler = Callable[[str, dict[str, Any]], None]


@dataclass(frozen=True)
class Subscription:
    """Revocable handle returned by :meth:`SignalBus.subscribe`."""

    signal_name: str
    token: int


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, dict[int, _Handler]] = {}
        # Each entry records the first token issued after it was published.
        self._queue: list[tuple[str, dict[str, Any], int]] = []
        self._next_token = 1

    def subscribe(self, signal_name: str, handler: _Handler) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._subscribers.setdefault(signal_name, {})[token] = handler
        return Subscription(signal_name, token)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Revoke a subscription. Revoking twice is a no-op."""
        handlers = self._subscribers.get(subscription.signal_name)
        if handlers is None:
            return
        handlers.pop(subscription.token, None)

    def is_subscribed(self, subscription: Subscription) -> bool:
        handlers = self._subscribers.get(subscription.signal_name, {})
        return subscription.token in handlers

    def subscriber_count(self, signal_name: str) -> int:
        return len(self._subscribers.get(signal_name, {}))

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data, self._next_token))

    def pending(self) -> int:
        """Return the number of signals waiting for the next flush."""
        return len(self._queue)

    def flush(self) -> None:
        """Dispatch queued signals in publish order.

        Signals published by handlers during a flush wait for the next
        one. A handler only receives signals published after it
        subscribed. A handler that raises is logged and skipped; the
        remaining handlers still run.
        """
        snapshot = self._queue
        self._queue = []
        for signal_name, data, watermark in snapshot:
            handlers = self._subscribers.get(signal_name)
            if not handlers:
                continue
            for token, handler in list(handlers.items()):
                # Subscribed after publish, or revoked earlier in this flush.
                if token >= watermark or token not in handlers:
                    continue
                try:
                    handler(signal_name, data)
                except Exception:
                    logger.exception(
                        "signal handler failed for %r", signal_name
                    )

    def clear(self) -> None:
        self._queue.clear()
