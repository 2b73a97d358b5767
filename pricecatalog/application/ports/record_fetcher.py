from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class RecordFetcherPort(ABC):
    @abstractmethod
    def is_configured(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def fetch_all(self, collection: str, params: Mapping[str, Any] | None = None) -> list[Any]:
        """Return every record of a collection. Raises FetchError, never partial data."""
        raise NotImplementedError
