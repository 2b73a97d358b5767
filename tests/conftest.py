from __future__ import annotations

from typing import Any, Mapping

import pytest

from pricecatalog.application.exceptions import FetchError
from pricecatalog.application.ports.record_fetcher import RecordFetcherPort
from pricecatalog.application.use_cases.catalog_cache import CatalogCache
from pricecatalog.domain.entities.catalog_config import CatalogConfig
from pricecatalog.infrastructure.config.config_sources import StaticConfigSource
from pricecatalog.infrastructure.store.memory_store import MemoryKeyValueStore


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher(RecordFetcherPort):
    """Serves canned collections and records every fetch."""

    def __init__(self, collections: dict[str, list[Any]] | None = None, configured: bool = True) -> None:
        self.collections = collections or {}
        self.configured = configured
        self.errors: dict[str, FetchError] = {}
        self.calls: list[str] = []

    def is_configured(self) -> bool:
        return self.configured

    def fetch_all(self, collection: str, params: Mapping[str, Any] | None = None) -> list[Any]:
        self.calls.append(collection)
        if collection in self.errors:
            raise self.errors[collection]
        return list(self.collections.get(collection, []))


RAW_SERVICES = [
    {
        "id": "svc1",
        "title": "Tow truck",
        "short_description": "City towing",
        "category": "cat1",
        "subcategory": "sub1",
        "price": 3500,
        "status": "published",
        "duration_min": 60,
    },
    {
        "id": "svc2",
        "title": "Winch",
        "category": "cat1",
        "subcategory": "sub2",
        "price": 1500,
        "price_max": 2500,
        "status": "published",
    },
    {
        "id": "svc3",
        "title": "Long distance",
        "category": "cat2",
        "subcategory": "missing",
        "price": 40,
        "price_unit": "руб./км",
        "status": "draft",
    },
]

RAW_CATEGORIES = [
    {"id": "cat1", "name_ru": "Эвакуация", "name_en": "Towing"},
    {"id": "cat2", "name_en": "Transport"},
]

RAW_SUBCATEGORIES = [
    {"id": "sub1", "name_ru": "Легковые", "category": "cat1"},
    {"id": "sub2", "name_ru": "Лебёдка", "category": "ghost"},
]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryKeyValueStore:
    return MemoryKeyValueStore(clock=clock)


@pytest.fixture
def config_source() -> StaticConfigSource:
    return StaticConfigSource(
        CatalogConfig(base_url="https://api.example.test", api_key="secret", cache_ttl_seconds=3600)
    )


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(
        {
            "services": RAW_SERVICES,
            "categories": RAW_CATEGORIES,
            "subcategories": RAW_SUBCATEGORIES,
        }
    )


@pytest.fixture
def cache(
    fetcher: FakeFetcher,
    store: MemoryKeyValueStore,
    config_source: StaticConfigSource,
    clock: FakeClock,
) -> CatalogCache:
    return CatalogCache(fetcher=fetcher, store=store, config_source=config_source, clock=clock)
