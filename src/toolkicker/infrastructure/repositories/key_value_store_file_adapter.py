import asyncio
import json
import os
import tempfile
import threading
from pathlib import Path

from toolkicker.core.application.ports import KeyValueStorePort
from toolkicker.core.exceptions import StorageReadError, StorageWriteError
from toolkicker.infrastructure.configuration.app_settings import AppSettings
from toolkicker.infrastructure.observability import get_logger

logger = get_logger(__name__)


class KeyValueStoreFileAdapter(KeyValueStorePort):
    """Keeps every key in one JSON document on disk.

    File I/O runs in a worker thread; a thread lock guards the
    read-modify-write cycle so writes to different keys never drop each other.
    """

    def __init__(self, settings: AppSettings):
        self.store_dir: Path = settings.runtime_data_dir
        self.file_path: Path = settings.storage_file_path
        self._lock = threading.Lock()
        self._ensure_store()

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set_sync, key, value)

    def _ensure_store(self) -> None:
        if not self.store_dir.exists():
            self.store_dir.mkdir(parents=True, exist_ok=True)

        if not self.file_path.exists():
            self._write_json({})

    def _get_sync(self, key: str) -> str | None:
        with self._lock:
            value = self._read_json().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageReadError(
                f"Value under '{key}' is not a string blob",
                context={"storage_key": key, "path": str(self.file_path)},
            )
        return value

    def _set_sync(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._read_json()
            except StorageReadError as e:
                logger.warning(
                    "Unreadable store file, rewriting from scratch",
                    storage_key=key,
                    error_type=type(e).__name__,
                    error_details=str(e),
                )
                data = {}
            data[key] = value
            self._write_json(data)

    def _read_json(self) -> dict[str, object]:
        if not self.file_path.exists():
            return {}
        try:
            with open(self.file_path, encoding="utf-8") as f:
                content = f.read().strip()
        except OSError as e:
            raise StorageReadError(f"Failed to read {self.file_path}: {e}") from e
        if not content:
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageReadError(f"Corrupt store file {self.file_path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(f"Store file {self.file_path} does not hold a JSON object")
        return data

    def _write_json(self, data: dict[str, object]) -> None:
        """
        Atomic write: write to temp file then rename.
        """
        tmp_path: str | None = None
        try:
            # Temp file lives next to the target so os.replace stays on one filesystem
            with tempfile.NamedTemporaryFile("w", dir=self.store_dir, delete=False, encoding="utf-8") as tmp:
                tmp_path = tmp.name
                json.dump(data, tmp, indent=2)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            logger.error("Failed to write store file", error_type=type(e).__name__, error_details=str(e))
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageWriteError(f"Failed to write {self.file_path}: {e}") from e
