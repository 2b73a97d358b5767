#!/usr/bin/env python3
"""Smoke-check a live Pocket Price API with the configured credentials.

Usage:
  POCKETPRICE_API_KEY=... python3 scripts/check_api.py
"""

import sys

from pricecatalog.application.exceptions import FetchError
from pricecatalog.core.logging import configure_logging
from pricecatalog.infrastructure.config.config_sources import SettingsConfigSource
from pricecatalog.infrastructure.pocketprice.api_client import PocketPriceClient
from pricecatalog.infrastructure.pocketprice.paginated_fetcher import PaginatedFetcher


def main() -> int:
    configure_logging()
    client = PocketPriceClient(config_source=SettingsConfigSource())
    if not client.is_configured():
        print("❌ POCKETPRICE_API_URL / POCKETPRICE_API_KEY are not set")
        return 1

    try:
        health = client.health_check()
        print(f"✅ Health: {health}")

        fetcher = PaginatedFetcher(client)
        for collection in ("services", "categories", "subcategories"):
            records = fetcher.fetch_all(collection)
            print(f"✅ {collection}: {len(records)} records")
    except FetchError as e:
        print(f"❌ {e.kind.value}: {e}")
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
