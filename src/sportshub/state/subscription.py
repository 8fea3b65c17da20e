"""
Per-subscriber snapshot buffer.

The authority pushes snapshots in while holding its own lock; the consumer
pulls them out from its own thread. Pushing never waits on the consumer.
With ``max_pending`` set, the oldest buffered snapshot is dropped to make
room, otherwise the buffer grows without bound.

Lifecycle: registered (current snapshot already buffered) -> active
(receives every later snapshot) -> closed (unregistered, buffer discarded).
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import deque
from typing import Callable, Iterator, Optional

from sportshub.exceptions import SubscriptionClosedError
from sportshub.models import GameState

logger = logging.getLogger(__name__)


class Subscription:
    """
    A stream of GameState snapshots from one authority.

    Usage:
        with authority.subscribe() as subscription:
            for state in subscription:
                render(state)

    Iteration blocks until the next snapshot and stops once the
    subscription is closed, from any thread.
    """

    def __init__(
        self,
        on_close: Callable[[uuid.UUID], None],
        max_pending: int = 0,
    ) -> None:
        self.id = uuid.uuid4()
        self.max_pending = max_pending
        self.dropped = 0
        self._on_close = on_close
        self._pending: deque[GameState] = deque()
        self._condition = threading.Condition()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def deliver(self, state: GameState) -> bool:
        """Buffer a snapshot. Returns False if the subscription is already closed."""
        with self._condition:
            if self._closed:
                return False
            if self.max_pending and len(self._pending) >= self.max_pending:
                skipped = self._pending.popleft()
                self.dropped += 1
                logger.warning(
                    "Subscription %s is not keeping up; dropped snapshot version %d",
                    self.id, skipped.version,
                )
            self._pending.append(state)
            self._condition.notify_all()
        return True

    def get(self, timeout: Optional[float] = None) -> GameState:
        """
        Return the next snapshot, waiting for one if necessary.

        Raises:
            TimeoutError: If nothing arrives within ``timeout`` seconds
            SubscriptionClosedError: If the subscription is closed
        """
        with self._condition:
            ready = self._condition.wait_for(lambda: self._pending or self._closed, timeout)
            if self._closed:
                raise SubscriptionClosedError(self.id)
            if not ready:
                raise TimeoutError(f"No snapshot within {timeout}s on subscription {self.id}")
            return self._pending.popleft()

    def drain(self) -> list[GameState]:
        """Return every buffered snapshot without waiting."""
        with self._condition:
            states = list(self._pending)
            self._pending.clear()
        return states

    def close(self) -> None:
        """Unregister from the authority. Safe to call more than once."""
        with self._condition:
            if self._closed:
                return
            self._closed = True
            self._pending.clear()
            self._condition.notify_all()
        self._on_close(self.id)

    def __iter__(self) -> Iterator[GameState]:
        while True:
            try:
                yield self.get()
            except SubscriptionClosedError:
                return

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "active"
        return f"<Subscription(id={self.id}, {state}, pending={len(self._pending)})>"
