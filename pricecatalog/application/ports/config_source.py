from abc import ABC, abstractmethod

from pricecatalog.domain.entities.catalog_config import CatalogConfig


class ConfigSourcePort(ABC):
    @abstractmethod
    def get_config(self) -> CatalogConfig:
        """Return the current connector configuration. Read on every use."""
        raise NotImplementedError
