"""Repair pass that re-ingests stored images lacking a metadata record.

Repair is strictly additive. Records whose image is gone and images whose
record exists are left alone; deleting an item is the only removal path.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from wardrobe.core.exceptions import WardrobeError
from wardrobe.core.protocols import IMetadataStore, IObjectStore
from wardrobe.models.objects import ImageInput, KeySpace, ObjectRef, StoredObject
from wardrobe.models.reports import ItemError, ReconcilePlan, ReconcileReport
from wardrobe.services.ingestion import SYNC_INSTRUCTION, IngestionPipeline

logger = logging.getLogger(__name__)


class ReconciliationEngine:
    """Diffs object ids against record ids and enriches the missing ones."""

    def __init__(
        self,
        *,
        object_store: IObjectStore,
        metadata_store: IMetadataStore,
        pipeline: IngestionPipeline,
        keys: KeySpace | None = None,
    ) -> None:
        self._objects = object_store
        self._metadata = metadata_store
        self._pipeline = pipeline
        self._keys = keys or KeySpace()

    def _object_index(self, objects: list[StoredObject], plan: ReconcilePlan) -> dict[str, StoredObject]:
        index: dict[str, StoredObject] = {}
        for obj in objects:
            ref = ObjectRef.decode(obj.pathname)
            if ref is None:
                plan.unrecognized.append(obj.pathname)
                continue
            if ref.item_id in index:
                logger.warning(
                    "Object %r shares id %s with %r; keeping the first",
                    obj.pathname, ref.item_id, index[ref.item_id].pathname,
                )
                continue
            index[ref.item_id] = obj
        return index

    def plan(self) -> ReconcilePlan:
        """Work out which stored objects lack a record, without touching either store."""
        objects = self._objects.list()
        keys = self._metadata.list_keys(self._keys.pattern)
        plan = ReconcilePlan(objects=len(objects), records=len(keys))

        by_id = self._object_index(objects, plan)
        record_ids = {item_id for item_id in map(self._keys.item_id, keys) if item_id}
        plan.missing = [obj for item_id, obj in by_id.items() if item_id not in record_ids]
        logger.info(
            "Reconcile plan: %d objects, %d records, %d missing metadata",
            plan.objects, plan.records, len(plan.missing),
        )
        return plan

    def reconcile(self) -> ReconcileReport:
        plan = self.plan()
        report = ReconcileReport(
            objects=plan.objects,
            records=plan.records,
            missing=len(plan.missing),
            unrecognized=plan.unrecognized,
        )

        for obj in plan.missing:
            ref = ObjectRef.decode(obj.pathname)
            image = ImageInput(
                filename=ref.filename, url=obj.url, content_type=obj.content_type or "image/jpeg",
            )
            try:
                self._pipeline.enrich(ref, image, image_url=obj.url, instruction=SYNC_INSTRUCTION)
            except (WardrobeError, ValidationError) as exc:
                logger.error("Reconcile failed for %r (id=%s): %s", obj.pathname, ref.item_id, exc)
                report.failed.append(ItemError(filename=obj.pathname, message=str(exc), item_id=ref.item_id))
                continue
            report.processed += 1

        if report.unrecognized:
            logger.warning("Reconcile skipped %d objects with unrecognized pathnames", len(report.unrecognized))
        logger.info("Reconcile done: %d processed, %d failed", report.processed, len(report.failed))
        return report
