from __future__ import annotations

import json
import logging
import re
import threading
import time
from pathlib import Path
from typing import Any, Callable

from pricecatalog.application.ports.key_value_store import KeyValueStorePort

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonKeyValueStore(KeyValueStorePort):
    """
    File-backed store: one JSON document per key.

    Each document holds the value and an optional absolute expiry timestamp.
    Writes go to a temp file that is renamed over the target, so readers never
    see a half-written document.
    """

    def __init__(self, data_dir: str = "./data/store", clock: Callable[[], float] = time.time) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._clock = clock
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, key: str) -> threading.Lock:
        """Get or create a lock for a key."""
        with self._lock_lock:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    def _get_file_path(self, key: str) -> Path:
        return self._data_dir / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Any | None:
        file_path = self._get_file_path(key)
        with self._get_lock(key):
            if not file_path.exists():
                return None
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    document = json.load(f)
            except json.JSONDecodeError:
                # A corrupted document reads as missing.
                self._logger.warning("Corrupted store document ignored", extra={"reason": str(file_path)})
                return None

            expires_at = document.get("expires_at")
            if expires_at is not None and self._clock() >= expires_at:
                file_path.unlink(missing_ok=True)
                return None
            return document.get("value")

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        document = {
            "key": key,
            "value": value,
            "expires_at": None if ttl is None else self._clock() + ttl,
        }
        file_path = self._get_file_path(key)
        temp_path = file_path.with_suffix(".json.tmp")

        with self._get_lock(key):
            try:
                with open(temp_path, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                temp_path.replace(file_path)
            except Exception:
                temp_path.unlink(missing_ok=True)
                raise

    def delete(self, key: str) -> None:
        with self._get_lock(key):
            self._get_file_path(key).unlink(missing_ok=True)
