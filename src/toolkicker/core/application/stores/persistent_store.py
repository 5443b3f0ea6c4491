from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, TypeVar

from toolkicker.core.application.stores.observable import Observable
from toolkicker.core.application.stores.persisted_slot import PersistedSlot

S = TypeVar("S")


class PersistentStore(Observable[S], ABC):
    """An observable store whose snapshot is mirrored into one or more slots.

    Every state transition runs in the same order: swap the in-memory
    snapshot, schedule the durable writes, notify subscribers.
    """

    def __init__(self, initial_state: S, slots: Sequence[PersistedSlot[Any]]) -> None:
        super().__init__(initial_state)
        self._slots = tuple(slots)

    @abstractmethod
    async def load(self) -> None:
        """Populate the store from storage. Missing or unreadable blobs leave it empty."""

    @abstractmethod
    def _persist(self, previous: S, current: S) -> None:
        """Schedule writes for the parts of the snapshot that changed."""

    async def flush(self) -> None:
        for slot in self._slots:
            await slot.flush()

    def _commit(self, new_state: S) -> None:
        previous = self._state
        if not self._replace_state(new_state):
            return
        self._persist(previous, new_state)
        self._publish()

    def _restore(self, loaded_state: S) -> None:
        if self._replace_state(loaded_state):
            self._publish()
