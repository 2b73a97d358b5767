from abc import ABC, abstractmethod
from typing import Any


class KeyValueStorePort(ABC):
    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if missing or expired."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value. ttl is in seconds; None means no expiry."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError
