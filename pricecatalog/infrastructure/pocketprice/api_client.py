from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from pricecatalog.application.exceptions import (
    DecodeError,
    HttpStatusError,
    TransportError,
    UnconfiguredError,
)
from pricecatalog.application.ports.config_source import ConfigSourcePort
from pricecatalog.application.ports.price_api import PriceApiPort
from pricecatalog.core.config import settings


class PocketPriceClient(PriceApiPort):
    def __init__(
        self,
        config_source: ConfigSourcePort,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ) -> None:
        self._config_source = config_source
        self._client = client or httpx.Client(timeout=timeout or settings.POCKETPRICE_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    def is_configured(self) -> bool:
        return self._config_source.get_config().is_configured

    def request(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        config = self._config_source.get_config()
        api_key = config.api_key.strip()
        base_url = config.base_url.strip().rstrip("/")
        if not api_key:
            raise UnconfiguredError("API key is not configured.")
        if not base_url:
            raise UnconfiguredError("API URL is not configured.")

        url = f"{base_url}{endpoint}"
        headers = {
            "X-API-Key": api_key,
            "Accept": "application/json",
        }

        try:
            resp = self._client.get(url, params=dict(params or {}), headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._logger.warning("Price API unreachable", extra={"endpoint": endpoint, "error": str(e)})
            raise TransportError(str(e) or e.__class__.__name__) from e

        if resp.status_code < 200 or resp.status_code >= 300:
            self._logger.warning(
                "Price API returned error status",
                extra={"endpoint": endpoint, "status": resp.status_code},
            )
            raise HttpStatusError(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as e:
            self._logger.warning("Price API returned invalid JSON", extra={"endpoint": endpoint, "error": str(e)})
            raise DecodeError("Failed to parse API response.") from e

    def get_record(self, collection: str, record_id: str) -> Any:
        return self.request(f"/api/collections/{quote(collection, safe='')}/records/{quote(record_id, safe='')}")

    def health_check(self) -> Any:
        return self.request("/api/health")

    def close(self) -> None:
        self._client.close()
