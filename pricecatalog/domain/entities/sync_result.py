from dataclasses import dataclass


@dataclass(frozen=True)
class SyncResult:
    services_count: int
    categories_count: int
    subcategories_count: int

    def to_dict(self) -> dict[str, int]:
        return {
            "services_count": self.services_count,
            "categories_count": self.categories_count,
            "subcategories_count": self.subcategories_count,
        }
