from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    records: list[dict[str, Any]]
    captured_at: float
    ttl_seconds: int

    def is_live(self, now: float) -> bool:
        return now < self.captured_at + self.ttl_seconds

    def to_dict(self) -> dict[str, Any]:
        return {
            "records": self.records,
            "captured_at": self.captured_at,
            "ttl_seconds": self.ttl_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheEntry:
        return cls(
            records=list(data.get("records", [])),
            captured_at=float(data.get("captured_at", 0.0)),
            ttl_seconds=int(data.get("ttl_seconds", 0)),
        )
