"""Read, delete and purge operations over both stores."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from wardrobe.core.exceptions import (
    ItemNotFoundError,
    MalformedRecordError,
    MetadataStoreError,
    ObjectStoreError,
    PartialDeletionError,
)
from wardrobe.core.protocols import IMetadataStore, IObjectStore
from wardrobe.models.objects import KeySpace, ObjectRef, StoredObject
from wardrobe.models.reports import DeletionFailure, PurgeReport
from wardrobe.models.scan import ErrorEntry, HashEntry, ScanResult
from wardrobe.models.taxonomy import normalize_category
from wardrobe.models.wardrobe_item import WardrobeItem
from wardrobe.services.scanner import ExhaustiveScanner

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(
        self,
        *,
        object_store: IObjectStore,
        metadata_store: IMetadataStore,
        scanner: ExhaustiveScanner,
        keys: KeySpace | None = None,
    ) -> None:
        self._objects = object_store
        self._metadata = metadata_store
        self._scanner = scanner
        self._keys = keys or KeySpace()

    def dump(self) -> ScanResult:
        """Every entry under the wardrobe prefix, whatever its container kind."""
        return self._scanner.scan_all(self._keys.prefix)

    def list_objects(self) -> list[StoredObject]:
        return self._objects.list()

    def list_items(self, category: str | None = None) -> list[WardrobeItem]:
        """All readable items, oldest first, optionally filtered by taxonomy category."""
        result = self.dump()
        items: list[WardrobeItem] = []
        for entry in result.entries:
            if isinstance(entry, ErrorEntry):
                logger.warning("Skipping unreadable key %r: %s", entry.key, entry.error)
                continue
            if not isinstance(entry, HashEntry):
                continue
            try:
                items.append(WardrobeItem.from_record(entry.value))
            except ValidationError as exc:
                logger.warning("Skipping malformed record %r: %s", entry.key, exc)
        if category:
            wanted = normalize_category(category)
            items = [item for item in items if item.category == wanted]
        items.sort(key=lambda item: (item.created_at, item.id))
        return items

    def _record(self, item_id: str) -> dict[str, str]:
        record = self._metadata.get_fields(self._keys.key(item_id))
        if not record:
            raise ItemNotFoundError(item_id)
        return WardrobeItem.canonical_record(record)

    def get_item(self, item_id: str) -> WardrobeItem:
        record = self._record(item_id)
        try:
            return WardrobeItem.model_validate(record)
        except ValidationError as exc:
            raise MalformedRecordError(self._keys.key(item_id), str(exc)) from exc

    def _find_object(self, item_id: str, record: dict[str, str]) -> StoredObject | None:
        """Stored object behind a record: by exact ref, then by id in the pathname, then by URL.

        Older records carry a bare id or only an image URL instead of a pathname.
        """
        objects = self._objects.list()
        object_ref = record.get("object_ref", "")
        for obj in objects:
            if object_ref and obj.pathname == object_ref:
                return obj
        image_url = record.get("image_url", "")
        for obj in objects:
            ref = ObjectRef.decode(obj.pathname)
            if ref is not None and ref.item_id == item_id:
                return obj
            if image_url and obj.url == image_url:
                return obj
        return None

    def locate_image(self, item_id: str) -> StoredObject:
        obj = self._find_object(item_id, self._record(item_id))
        if obj is None:
            raise ItemNotFoundError(f"{item_id} (image)")
        return obj

    def delete_item(self, item_id: str) -> None:
        """Remove the image, then the record.

        A failed image delete leaves both halves in place. A failed record
        delete after the image is gone raises PartialDeletionError, as does a
        record whose image cannot be found (the record is still removed).
        """
        key = self._keys.key(item_id)
        record = self._record(item_id)
        obj = self._find_object(item_id, record)
        if obj is not None:
            self._objects.delete(obj.pathname)
        try:
            self._metadata.delete_key(key)
        except MetadataStoreError as exc:
            if obj is None:
                raise
            raise PartialDeletionError(item_id, deleted="object", failed="metadata", message=str(exc)) from exc
        if obj is None:
            ref = record.get("object_ref") or record.get("image_url") or "none"
            logger.warning("Deleted record %s but found no stored object (ref %r)", key, ref)
            raise PartialDeletionError(
                item_id, deleted="metadata", failed="object", message=f"no stored object found for ref {ref!r}",
            )
        logger.info("Deleted item %s (%s)", item_id, obj.pathname)

    def purge(self) -> PurgeReport:
        """Empty both stores, collecting per-key and per-object failures."""
        report = PurgeReport()

        keys, complete, _ = self._scanner.scan_keys(self._keys.prefix)
        if not complete:
            logger.warning("Purge scan was capped; some records may remain")
        for key in keys:
            try:
                report.keys_deleted += self._metadata.delete_key(key)
            except MetadataStoreError as exc:
                report.key_failures.append(DeletionFailure(target=key, message=str(exc)))

        for obj in self._objects.list():
            try:
                self._objects.delete(obj.pathname)
                report.objects_deleted += 1
            except ObjectStoreError as exc:
                report.object_failures.append(DeletionFailure(target=obj.pathname, message=str(exc)))

        logger.info(
            "Purged %d records (%d failed), %d objects (%d failed)",
            report.keys_deleted, len(report.key_failures),
            report.objects_deleted, len(report.object_failures),
        )
        return report
