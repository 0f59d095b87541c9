from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

Listener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class StateBroadcaster(Generic[S]):
    """Holds the current state and fans every new state out to listeners.

    States are expected to be immutable; listeners get the same object and must
    not mutate it.
    """

    def __init__(self, initial: S) -> None:
        self._state = initial
        self._listeners: list[Listener] = []

    @property
    def state(self) -> S:
        return self._state

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)
        active = True

        def unsubscribe() -> None:
            nonlocal active
            if not active:
                return
            active = False
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def publish(self, state: S) -> None:
        self._state = state
        # Snapshot so listeners may (un)subscribe while being notified.
        for listener in list(self._listeners):
            self._notify(listener, state)

    def replay(self, listener: Listener) -> None:
        """Deliver the current state to a single listener."""
        self._notify(listener, self._state)

    def _notify(self, listener: Listener, state: S) -> None:
        try:
            listener(state)
        except Exception:
            logger.exception("favorites listener failed: %r", listener)

    def clear(self) -> None:
        self._listeners.clear()
