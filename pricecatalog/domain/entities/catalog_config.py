from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

SETTINGS_KEY = "pocketprice_settings"
DEFAULT_CACHE_TTL = 3600


def parse_ttl(value: Any, default: int = DEFAULT_CACHE_TTL) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return abs(int(value))
    except (TypeError, ValueError):
        return default


def _non_blank(value: Any, default: str) -> str:
    if value is None or not str(value).strip():
        return default
    return str(value)


@dataclass(frozen=True)
class CatalogConfig:
    base_url: str = ""
    api_key: str = ""
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url.strip()) and bool(self.api_key.strip())

    def to_options(self) -> dict[str, Any]:
        """Settings-form shape persisted under SETTINGS_KEY."""
        return {
            "api_url": self.base_url,
            "api_key": self.api_key,
            "cache_ttl": self.cache_ttl_seconds,
        }

    def with_options(self, options: Mapping[str, Any]) -> CatalogConfig:
        """Overlay stored options; missing or blank values keep this config's values."""
        return CatalogConfig(
            base_url=_non_blank(options.get("api_url"), self.base_url),
            api_key=_non_blank(options.get("api_key"), self.api_key),
            cache_ttl_seconds=parse_ttl(options.get("cache_ttl"), self.cache_ttl_seconds),
        )
