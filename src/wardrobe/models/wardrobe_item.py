"""Canonical wardrobe item, the record every service reads and writes."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

from wardrobe.models.taxonomy import Category, normalize_category


# Field names written by earlier versions of the service.
_LEGACY_FIELDS = {
    "imageUrl": "image_url",
    "blobId": "object_ref",
    "color": "colors",
    "occasion": "occasions",
    "suitable_occasions": "occasions",
    "suitable_weather": "weather",
    "sleeves": "sleeve_style",
}


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class WardrobeItem(BaseModel):
    """Single garment with its AI-derived attributes."""

    LIST_FIELDS: ClassVar[tuple[str, ...]] = ("colors", "occasions", "weather")

    # --- Identity ---
    id: str = Field(min_length=1)
    object_ref: str = Field(min_length=1)  # encoded ObjectRef pathname
    image_url: str = ""
    created_at: str = Field(default_factory=_utcnow)

    # --- Classification ---
    category: Category = Category.OTHER
    name: str = ""

    # --- Descriptive attributes ---
    fabric: str = ""
    pattern: str = ""
    colors: list[str] = Field(default_factory=list)
    fit: str = ""
    style: str = ""
    sleeve_style: str = ""
    length: str = ""
    occasions: list[str] = Field(default_factory=list)
    weather: list[str] = Field(default_factory=list)

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> Category:
        return normalize_category(value)

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                try:
                    decoded = json.loads(value)
                except json.JSONDecodeError:
                    decoded = None
                if isinstance(decoded, list):
                    return [str(v).strip() for v in decoded if str(v).strip()]
            return [part.strip() for part in value.split(",") if part.strip()]
        return [str(v).strip() for v in value if str(v).strip()]

    def to_record(self) -> dict[str, str]:
        """Flatten to string fields for a metadata-store hash."""
        record: dict[str, str] = {}
        for field, value in self.model_dump(mode="json").items():
            if field in self.LIST_FIELDS:
                record[field] = json.dumps(value)
            else:
                record[field] = str(value)
        return record

    @staticmethod
    def canonical_record(record: dict[str, str]) -> dict[str, str]:
        """Copy of ``record`` with legacy field names mapped to current ones."""
        data = dict(record)
        for legacy, field in _LEGACY_FIELDS.items():
            if legacy in data and field not in data:
                data[field] = data.pop(legacy)
        return data

    @classmethod
    def from_record(cls, record: dict[str, str]) -> WardrobeItem:
        return cls.model_validate(cls.canonical_record(record))
