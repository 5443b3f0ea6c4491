"""Snapshot-read + subscribe contract shared by every store and derived view."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")
Listener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class Observable(Generic[S]):
    """Holds an immutable snapshot and tells subscribers when it is replaced.

    Subscribers receive the new snapshot. They must treat it as read-only;
    every snapshot handed out is built from tuples and frozen dataclasses.
    """

    def __init__(self, initial_state: S) -> None:
        self._state = initial_state
        self._listeners: list[Listener[S]] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener[S]) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _replace_state(self, new_state: S) -> bool:
        """Swap the snapshot without notifying. Returns False when nothing changed."""
        if new_state == self._state:
            return False
        self._state = new_state
        return True

    def _publish(self) -> None:
        snapshot = self._state
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("[%s] Subscriber %r failed", type(self).__name__, listener)
