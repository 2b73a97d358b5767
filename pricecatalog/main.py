import argparse
import json
import logging

from pricecatalog.core.config import settings
from pricecatalog.core.logging import configure_logging
from pricecatalog.wiring.dependencies import get_catalog_cache, get_lifecycle


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resync the price catalog cache.")
    parser.add_argument("--seed", default=settings.SEED_FILE, help="Seed JSON imported before the first sync.")
    parser.add_argument("--flush-only", action="store_true", help="Drop live cache entries without refetching.")
    args = parser.parse_args(argv)

    configure_logging()
    logger = logging.getLogger(__name__)

    if settings.STORE_PROVIDER.lower() != "json":
        logger.warning(
            "Memory store in use; synced data is lost when the process exits. Set STORE_PROVIDER=json to keep it."
        )

    get_lifecycle().install(seed_path=args.seed)
    cache = get_catalog_cache()

    if args.flush_only:
        cache.flush()
        return 0

    result = cache.refresh()
    logger.info("Sync finished", extra={"count": result.services_count})
    print(json.dumps({"success": True, **result.to_dict()}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
