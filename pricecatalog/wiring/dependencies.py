from functools import lru_cache

from pricecatalog.application.ports.config_source import ConfigSourcePort
from pricecatalog.application.ports.key_value_store import KeyValueStorePort
from pricecatalog.application.use_cases.catalog_cache import CatalogCache
from pricecatalog.application.use_cases.lifecycle import CatalogLifecycle
from pricecatalog.core.config import settings
from pricecatalog.infrastructure.config.config_sources import SettingsConfigSource, StoredConfigSource
from pricecatalog.infrastructure.pocketprice.api_client import PocketPriceClient
from pricecatalog.infrastructure.pocketprice.paginated_fetcher import PaginatedFetcher
from pricecatalog.infrastructure.store.json_store import JsonKeyValueStore
from pricecatalog.infrastructure.store.memory_store import MemoryKeyValueStore


@lru_cache
def get_store() -> KeyValueStorePort:
    if settings.STORE_PROVIDER.lower() == "json":
        return JsonKeyValueStore(data_dir=settings.STORE_DIR)
    return MemoryKeyValueStore()


@lru_cache
def get_config_source() -> ConfigSourcePort:
    return StoredConfigSource(store=get_store(), defaults=SettingsConfigSource())


@lru_cache
def get_api_client() -> PocketPriceClient:
    return PocketPriceClient(config_source=get_config_source())


@lru_cache
def get_catalog_cache() -> CatalogCache:
    return CatalogCache(
        fetcher=PaginatedFetcher(api=get_api_client()),
        store=get_store(),
        config_source=get_config_source(),
    )


def get_lifecycle() -> CatalogLifecycle:
    return CatalogLifecycle(
        cache=get_catalog_cache(),
        store=get_store(),
    )
