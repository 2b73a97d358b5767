from __future__ import annotations

import itertools
import logging
from typing import Any, Iterator, Mapping

from pricecatalog.application.exceptions import DecodeError
from pricecatalog.application.ports.price_api import PriceApiPort
from pricecatalog.application.ports.record_fetcher import RecordFetcherPort

DEFAULT_PAGE_SIZE = 500


def _total_pages(payload: Mapping[str, Any]) -> int:
    value = payload.get("totalPages")
    if isinstance(value, bool):
        return 1
    try:
        total = int(value)
    except (TypeError, ValueError):
        return 1
    return max(total, 1)


class PaginatedFetcher(RecordFetcherPort):
    def __init__(self, api: PriceApiPort, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._api = api
        self._page_size = page_size
        self._logger = logging.getLogger(__name__)

    def is_configured(self) -> bool:
        return self._api.is_configured()

    def iter_pages(self, collection: str, params: Mapping[str, Any] | None = None) -> Iterator[list[Any]]:
        """
        Yield the items of each page, starting at page 1.
        Stops once the page number reaches the last reported totalPages.
        Errors from the API propagate out of the generator unchanged.
        """
        endpoint = f"/api/collections/{collection}/records"
        query = {"perPage": self._page_size, **dict(params or {})}

        for page in itertools.count(1):
            payload = self._api.request(endpoint, {**query, "page": page})
            if not isinstance(payload, Mapping):
                raise DecodeError(f"Page {page} of {collection} is not a JSON object.")

            items = payload.get("items", [])
            if items is None:
                items = []
            if not isinstance(items, list):
                raise DecodeError(f"Page {page} of {collection} has non-list items.")

            yield items

            if page >= _total_pages(payload):
                return

    def fetch_all(self, collection: str, params: Mapping[str, Any] | None = None) -> list[Any]:
        records: list[Any] = []
        for items in self.iter_pages(collection, params):
            records.extend(items)
        self._logger.info("Collection fetched", extra={"collection": collection, "count": len(records)})
        return records
