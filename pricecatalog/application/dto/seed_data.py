from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SeedDataDTO(BaseModel):
    """Bundled catalog snapshot imported on install."""

    services: list[dict[str, Any]] = Field(default_factory=list)
    categories: list[dict[str, Any]] = Field(default_factory=list)
    subcategories: list[dict[str, Any]] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)
