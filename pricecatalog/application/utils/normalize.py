from __future__ import annotations

from typing import Any, Mapping

from pricecatalog.domain.entities.category import Category, Subcategory
from pricecatalog.domain.entities.service import Service

_SERVICE_FIELDS = (
    "id",
    "name",
    "description",
    "category_id",
    "subcategory",
    "price",
    "price_max",
    "price_unit",
    "price_note",
    "is_active",
    "currency",
    "duration",
)


def _as_record(raw: Any) -> dict[str, Any]:
    return dict(raw) if isinstance(raw, Mapping) else {}


def _as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def _localized_name(record: Mapping[str, Any]) -> str:
    name = record.get("name_ru")
    if name is None:
        name = record.get("name_en")
    return _as_str(name)


def _extra(record: Mapping[str, Any], overlaid: tuple[str, ...]) -> dict[str, Any]:
    return {key: value for key, value in record.items() if key not in overlaid}


def normalize_service(raw: Any) -> Service:
    record = _as_record(raw)

    price = _as_optional_int(record.get("price"))
    price_max = _as_optional_int(record.get("price_max"))

    return Service(
        id=_as_str(record.get("id")),
        name=_as_str(record.get("title")),
        description=_as_str(record.get("short_description")),
        category_id=_as_str(record.get("category")),
        subcategory=_as_str(record.get("subcategory")),
        price=max(price or 0, 0),
        price_max=price_max if price_max is not None and price_max >= 0 else None,
        price_unit=_as_optional_str(record.get("price_unit")),
        price_note=_as_optional_str(record.get("price_note")),
        is_active=record.get("status") == "published",
        currency=_as_optional_str(record.get("currency")) or "RUB",
        duration=_as_optional_int(record.get("duration_min")),
        extra=_extra(record, _SERVICE_FIELDS),
    )


def normalize_category(raw: Any) -> Category:
    record = _as_record(raw)
    return Category(
        id=_as_str(record.get("id")),
        name=_localized_name(record),
        extra=_extra(record, ("id", "name")),
    )


def normalize_subcategory(raw: Any) -> Subcategory:
    record = _as_record(raw)
    return Subcategory(
        id=_as_str(record.get("id")),
        name=_localized_name(record),
        category_id=_as_str(record.get("category")),
        extra=_extra(record, ("id", "name", "category_id")),
    )
