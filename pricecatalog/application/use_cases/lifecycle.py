from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from pricecatalog.application.dto.seed_data import SeedDataDTO
from pricecatalog.application.ports.key_value_store import KeyValueStorePort
from pricecatalog.application.use_cases.catalog_cache import META_KEY, CatalogCache
from pricecatalog.domain.entities.catalog_config import SETTINGS_KEY


class CatalogLifecycle:
    def __init__(self, cache: CatalogCache, store: KeyValueStorePort) -> None:
        self._cache = cache
        self._store = store
        self._logger = logging.getLogger(__name__)

    def install(self, seed_path: str | Path | None = None) -> bool:
        """
        Import seed data on first run. Returns True if seed data was imported.

        Settings are not written here; until something is saved under
        SETTINGS_KEY the environment stays authoritative.
        """
        if seed_path is None:
            return False
        return self.import_seed(seed_path)

    def import_seed(self, seed_path: str | Path) -> bool:
        if self._cache.has_fallback():
            return False

        path = Path(seed_path)
        if not path.exists():
            self._logger.info("Seed file not found", extra={"reason": str(path)})
            return False

        try:
            seed = SeedDataDTO.model_validate_json(path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError) as e:
            self._logger.warning("Seed file is invalid", extra={"reason": str(path), "error": str(e)})
            return False

        imported = self._cache.import_snapshot(
            services=seed.services,
            categories=seed.categories,
            subcategories=seed.subcategories,
        )
        if imported:
            self._store.set(META_KEY, seed.meta)
        return imported

    def uninstall(self) -> None:
        """Remove everything the connector persisted."""
        self._cache.reset()
        self._store.delete(META_KEY)
        self._store.delete(SETTINGS_KEY)
        self._logger.info("Catalog data removed")

