from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Service:
    id: str
    name: str = ""
    description: str = ""
    category_id: str = ""
    subcategory: str = ""
    price: int = 0
    price_max: int | None = None
    price_unit: str | None = None
    price_note: str | None = None
    is_active: bool = False
    currency: str = "RUB"
    duration: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def numeric_price(self) -> int | None:
        """Price usable as a number, or None when it must not be shown as one."""
        if not self.is_active or self.price_note:
            return None
        return self.price

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category_id": self.category_id,
            "subcategory": self.subcategory,
            "price": self.price,
            "price_max": self.price_max,
            "price_unit": self.price_unit,
            "price_note": self.price_note,
            "is_active": self.is_active,
            "currency": self.currency,
            "duration": self.duration,
        }
