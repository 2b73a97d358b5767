from __future__ import annotations

from typing import Iterable

from pricecatalog.domain.entities.category import Subcategory
from pricecatalog.domain.entities.service import Service


def group_by_subcategory(
    services: Iterable[Service],
    subcategories: Iterable[Subcategory],
) -> list[tuple[Subcategory | None, list[Service]]]:
    """
    Group services under their subcategory, in subcategory order.
    Services with an empty or dangling subcategory land in a trailing None group.
    Empty groups are skipped.
    """
    order: list[Subcategory] = []
    buckets: dict[str, list[Service]] = {}
    for subcategory in subcategories:
        if subcategory.id in buckets:
            continue
        order.append(subcategory)
        buckets[subcategory.id] = []

    uncategorized: list[Service] = []
    for service in services:
        if service.subcategory and service.subcategory in buckets:
            buckets[service.subcategory].append(service)
        else:
            uncategorized.append(service)

    groups: list[tuple[Subcategory | None, list[Service]]] = [
        (subcategory, buckets[subcategory.id]) for subcategory in order if buckets[subcategory.id]
    ]
    if uncategorized:
        groups.append((None, uncategorized))
    return groups
