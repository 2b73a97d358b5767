from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class PriceApiPort(ABC):
    @abstractmethod
    def is_configured(self) -> bool:
        """True when both base URL and API key are set."""
        raise NotImplementedError

    @abstractmethod
    def request(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET endpoint and return decoded JSON. Raises FetchError on failure."""
        raise NotImplementedError
