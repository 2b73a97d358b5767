from __future__ import annotations

import dataclasses
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from pricecatalog.application.exceptions import FetchError, UnconfiguredError
from pricecatalog.application.ports.config_source import ConfigSourcePort
from pricecatalog.application.ports.key_value_store import KeyValueStorePort
from pricecatalog.application.ports.record_fetcher import RecordFetcherPort
from pricecatalog.application.utils.normalize import (
    normalize_category,
    normalize_service,
    normalize_subcategory,
)
from pricecatalog.domain.entities.cache_entry import CacheEntry
from pricecatalog.domain.entities.category import Category, Subcategory
from pricecatalog.domain.entities.service import Service
from pricecatalog.domain.entities.sync_result import SyncResult

META_KEY = "pocketprice_meta"

T = TypeVar("T", Service, Category, Subcategory)


@dataclass(frozen=True)
class CollectionSpec(Generic[T]):
    name: str
    entity: type[T]
    normalize: Callable[[Any], T]

    @property
    def live_key(self) -> str:
        return f"pocketprice_{self.name}"

    @property
    def fallback_key(self) -> str:
        return f"pocketprice_{self.name}_fallback"


SERVICES = CollectionSpec("services", Service, normalize_service)
CATEGORIES = CollectionSpec("categories", Category, normalize_category)
SUBCATEGORIES = CollectionSpec("subcategories", Subcategory, normalize_subcategory)
COLLECTIONS = (SERVICES, CATEGORIES, SUBCATEGORIES)


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    records: list[T] | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.records is not None


class CatalogCache:
    """
    Serves catalog collections from a TTL cache backed by a fallback snapshot.

    Lookup order per collection: live entry, then a fresh fetch from the API,
    then the last known-good snapshot. Fetch errors stop here and never reach
    the caller; an empty list is the worst case.
    """

    def __init__(
        self,
        fetcher: RecordFetcherPort,
        store: KeyValueStorePort,
        config_source: ConfigSourcePort,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._config_source = config_source
        self._clock = clock
        self._locks = {spec.name: threading.Lock() for spec in COLLECTIONS}
        self._logger = logging.getLogger(__name__)

    # Query interface

    def get_services(self, force_refresh: bool = False) -> list[Service]:
        return self._get(SERVICES, force_refresh)

    def get_categories(self, force_refresh: bool = False) -> list[Category]:
        return self._get(CATEGORIES, force_refresh)

    def get_subcategories(self, force_refresh: bool = False) -> list[Subcategory]:
        return self._get(SUBCATEGORIES, force_refresh)

    def get_service(self, service_id: str) -> Service | None:
        for service in self.get_services():
            if service.id == service_id:
                return service
        return None

    def get_services_by_category(self, category_id: str) -> list[Service]:
        return [s for s in self.get_services() if s.category_id == category_id]

    def get_services_by_subcategory(self, subcategory_id: str) -> list[Service]:
        return [s for s in self.get_services() if s.subcategory == subcategory_id]

    def get_meta(self) -> Any:
        meta = self._store.get(META_KEY)
        return {} if meta is None else meta

    # Action interface

    def flush(self) -> None:
        for spec in COLLECTIONS:
            self._store.delete(spec.live_key)
        self._logger.info("Catalog cache flushed")

    def refresh(self) -> SyncResult:
        self.flush()
        services = self.get_services(force_refresh=True)
        categories = self.get_categories(force_refresh=True)
        subcategories = self.get_subcategories(force_refresh=True)
        result = SyncResult(
            services_count=len(services),
            categories_count=len(categories),
            subcategories_count=len(subcategories),
        )
        self._logger.info("Catalog refreshed", extra={"count": result.services_count})
        return result

    def reset(self) -> None:
        """Drop live entries and fallback snapshots for every collection."""
        for spec in COLLECTIONS:
            with self._locks[spec.name]:
                self._store.delete(spec.live_key)
                self._store.delete(spec.fallback_key)

    def has_fallback(self) -> bool:
        return self._store.get(SERVICES.fallback_key) is not None

    def import_snapshot(
        self,
        services: Iterable[Any],
        categories: Iterable[Any],
        subcategories: Iterable[Any],
    ) -> bool:
        """Seed every collection from raw records. Skipped once a fallback exists."""
        if self.has_fallback():
            return False
        for spec, raw_records in ((SERVICES, services), (CATEGORIES, categories), (SUBCATEGORIES, subcategories)):
            records = [spec.normalize(raw) for raw in raw_records]
            with self._locks[spec.name]:
                self._write(spec, records)
        self._logger.info("Catalog snapshot imported")
        return True

    # Internals

    def _get(self, spec: CollectionSpec[T], force_refresh: bool) -> list[T]:
        if not force_refresh:
            cached = self._read_live(spec)
            if cached is not None:
                return cached

        with self._locks[spec.name]:
            if not force_refresh:
                # Another caller may have filled the entry while we waited.
                cached = self._read_live(spec)
                if cached is not None:
                    return cached

            outcome = self._fetch_fresh(spec)
            if outcome.ok:
                self._write(spec, outcome.records)
                return list(outcome.records)

            self._logger.warning(
                "Serving fallback snapshot",
                extra={"collection": spec.name, "reason": outcome.error.kind.value, "error": str(outcome.error)},
            )
            return self._read_fallback(spec)

    def _fetch_fresh(self, spec: CollectionSpec[T]) -> FetchOutcome[T]:
        """Fetch and normalize a collection. FetchError is returned, not raised."""
        if not self._fetcher.is_configured():
            return FetchOutcome(error=UnconfiguredError("Price API is not configured."))
        try:
            raw_records = self._fetcher.fetch_all(spec.name)
        except FetchError as e:
            return FetchOutcome(error=e)
        return FetchOutcome(records=[spec.normalize(raw) for raw in raw_records])

    def _write(self, spec: CollectionSpec[T], records: list[T]) -> None:
        ttl = self._config_source.get_config().cache_ttl_seconds
        payload = [dataclasses.asdict(record) for record in records]
        entry = CacheEntry(records=payload, captured_at=self._clock(), ttl_seconds=ttl)
        self._store.set(spec.live_key, entry.to_dict(), ttl=ttl)
        self._store.set(spec.fallback_key, payload)

    def _read_live(self, spec: CollectionSpec[T]) -> list[T] | None:
        data = self._store.get(spec.live_key)
        if not isinstance(data, Mapping):
            return None
        entry = CacheEntry.from_dict(data)
        if not entry.is_live(self._clock()):
            return None
        return self._hydrate(spec, entry.records)

    def _read_fallback(self, spec: CollectionSpec[T]) -> list[T]:
        data = self._store.get(spec.fallback_key)
        if not isinstance(data, list):
            return []
        return self._hydrate(spec, data)

    @staticmethod
    def _hydrate(spec: CollectionSpec[T], rows: list[dict[str, Any]]) -> list[T]:
        return [spec.entity(**row) for row in rows]
