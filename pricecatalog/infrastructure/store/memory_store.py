from __future__ import annotations

import copy
import threading
import time
from typing import Any, Callable

from pricecatalog.application.ports.key_value_store import KeyValueStorePort


class MemoryKeyValueStore(KeyValueStorePort):
    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._values: dict[str, Any] = {}
        self._expires_at: dict[str, float] = {}
        self._clock = clock
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            if key not in self._values:
                return None
            expires_at = self._expires_at.get(key)
            if expires_at is not None and self._clock() >= expires_at:
                # Expired entries read as missing; they are dropped lazily.
                self._values.pop(key, None)
                self._expires_at.pop(key, None)
                return None
            return copy.deepcopy(self._values[key])

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        with self._lock:
            self._values[key] = copy.deepcopy(value)
            if ttl is None:
                self._expires_at.pop(key, None)
            else:
                self._expires_at[key] = self._clock() + ttl

    def delete(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)
            self._expires_at.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._values)
