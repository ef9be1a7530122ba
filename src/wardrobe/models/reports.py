"""Result models returned by the pipeline, sync, delete and recommend operations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from wardrobe.models.objects import StoredObject
from wardrobe.models.wardrobe_item import WardrobeItem


class ItemError(BaseModel):
    """Per-item failure collected instead of aborting a batch."""

    filename: str
    message: str
    item_id: str = ""


class IngestResult(BaseModel):
    items: list[WardrobeItem] = Field(default_factory=list)
    errors: list[ItemError] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.items)

    @property
    def total(self) -> int:
        return len(self.items) + len(self.errors)


class ReconcilePlan(BaseModel):
    """What a reconciliation pass would do, computed without side effects."""

    objects: int = 0
    records: int = 0
    missing: list[StoredObject] = Field(default_factory=list)
    unrecognized: list[str] = Field(default_factory=list)


class ReconcileReport(BaseModel):
    """Counts from one reconciliation pass."""

    objects: int = 0
    records: int = 0
    missing: int = 0
    processed: int = 0
    failed: list[ItemError] = Field(default_factory=list)
    unrecognized: list[str] = Field(default_factory=list)  # pathnames with no id layout


class DeletionFailure(BaseModel):
    target: str
    message: str


class PurgeReport(BaseModel):
    keys_deleted: int = 0
    key_failures: list[DeletionFailure] = Field(default_factory=list)
    objects_deleted: int = 0
    object_failures: list[DeletionFailure] = Field(default_factory=list)


class Recommendation(BaseModel):
    text: str
    items: list[WardrobeItem] = Field(default_factory=list)
