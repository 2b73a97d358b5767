from __future__ import annotations

from typing import Callable, Mapping

from pricecatalog.application.ports.config_source import ConfigSourcePort
from pricecatalog.application.ports.key_value_store import KeyValueStorePort
from pricecatalog.core.config import Settings
from pricecatalog.domain.entities.catalog_config import SETTINGS_KEY, CatalogConfig, parse_ttl


class StaticConfigSource(ConfigSourcePort):
    def __init__(self, config: CatalogConfig) -> None:
        self.config = config

    def get_config(self) -> CatalogConfig:
        return self.config


class SettingsConfigSource(ConfigSourcePort):
    """Builds the config from environment / .env on every call."""

    def __init__(self, settings_factory: Callable[[], Settings] = Settings) -> None:
        self._settings_factory = settings_factory

    def get_config(self) -> CatalogConfig:
        current = self._settings_factory()
        return CatalogConfig(
            base_url=current.POCKETPRICE_API_URL,
            api_key=current.POCKETPRICE_API_KEY,
            cache_ttl_seconds=parse_ttl(current.POCKETPRICE_CACHE_TTL),
        )


class StoredConfigSource(ConfigSourcePort):
    """Settings saved in the store take precedence over the fallback source."""

    def __init__(
        self,
        store: KeyValueStorePort,
        defaults: ConfigSourcePort,
        key: str = SETTINGS_KEY,
    ) -> None:
        self._store = store
        self._defaults = defaults
        self._key = key

    def get_config(self) -> CatalogConfig:
        defaults = self._defaults.get_config()
        options = self._store.get(self._key)
        if not isinstance(options, Mapping):
            return defaults
        return defaults.with_options(options)

    def save(self, config: CatalogConfig) -> None:
        self._store.set(self._key, config.to_options())
