"""Persistence glue: one storage key, one pydantic codec.

Loads are best-effort and writes are fire-and-forget. Neither ever raises
into the store that owns the slot.
"""

import asyncio
import logging
from typing import Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistedSlot(Generic[T]):
    """Reads and writes a whole blob under a single key.

    Writes are serialized per slot and coalesced: while one write is in
    flight, further saves only replace the pending blob, so storage always
    ends up holding the newest value in the order it was produced.
    """

    def __init__(self, storage: KeyValueStorePort, key: str, codec: TypeAdapter[T]) -> None:
        self._storage = storage
        self._codec = codec
        self.key = key
        self._pending_blob: str | None = None
        self._writer: asyncio.Task[None] | None = None

    async def load(self) -> T | None:
        """Return the decoded blob, or None when it is missing or unreadable."""
        try:
            raw = await self._storage.get(self.key)
        except StorageError as e:
            logger.warning(
                "[PersistedSlot] Failed to read '%s': %s. Starting empty.",
                self.key,
                e,
                extra=self._error_fields(e),
            )
            return None
        if raw is None:
            return None
        try:
            return self._codec.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "[PersistedSlot] Stored blob under '%s' is invalid (%d errors). Starting empty.",
                self.key,
                e.error_count(),
                extra=self._error_fields(e),
            )
            return None

    def save(self, value: T) -> None:
        """Schedule a full-blob replace. Returns immediately when a loop is running."""
        self._pending_blob = self._codec.dump_json(value, by_alias=True, exclude_none=True).decode("utf-8")
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._drain())
            return
        if self._writer is None or self._writer.done():
            self._writer = loop.create_task(self._drain(), name=f"persist:{self.key}")

    async def flush(self) -> None:
        """Wait until every scheduled write for this slot has been attempted."""
        while self._writer is not None and not self._writer.done():
            await self._writer

    async def _drain(self) -> None:
        while self._pending_blob is not None:
            blob, self._pending_blob = self._pending_blob, None
            try:
                await self._storage.set(self.key, blob)
            except Exception as e:  # noqa: BLE001
                logger.warning(
                    "[PersistedSlot] Write to '%s' failed (%s: %s). Keeping in-memory state.",
                    self.key,
                    type(e).__name__,
                    e,
                    extra=self._error_fields(e),
                )

    def _error_fields(self, error: Exception) -> dict[str, str]:
        return {
            "storage_key": self.key,
            "error_type": type(error).__name__,
            "error_details": str(error),
        }
