"""Ingestion pipeline: object store write, oracle analysis, normalization, record write."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from pydantic import ValidationError

from wardrobe.core.exceptions import EmptyInputError, MetadataStoreError, WardrobeError
from wardrobe.core.protocols import IMetadataStore, IObjectStore, IVisionOracle
from wardrobe.models.objects import ImageInput, ImageUpload, KeySpace, ObjectRef
from wardrobe.models.reports import IngestResult, ItemError
from wardrobe.models.wardrobe_item import WardrobeItem
from wardrobe.services.normalizer import build_item, parse_attributes

logger = logging.getLogger(__name__)

UPLOAD_INSTRUCTION = (
    "Analyze this clothing item and provide the following attributes in JSON format "
    "without any markdown formatting: category (Top, Bottom, Dress, Outerwear, Shoes, "
    "Accessory, Suit, Sportswear, Sleepwear, Underwear, or Other), name, fabric, pattern, "
    "colors (array), fit, style, sleeves, length, suitable_weather (array), "
    "suitable_occasions (array). Keep descriptions concise."
)

SYNC_INSTRUCTION = (
    "Analyze this clothing item and provide a detailed description including its name, "
    "category, occasion, weather, fabric, pattern, color, fit, style, sleeves, length. "
    "Format your response as a series of key-value pairs, one per line."
)


class IngestionPipeline:
    """Runs each uploaded image through store -> analyze -> normalize -> persist.

    Images are processed concurrently and independently: a failure in one is
    recorded as an ItemError and never aborts its siblings.
    """

    def __init__(
        self,
        *,
        object_store: IObjectStore,
        metadata_store: IMetadataStore,
        oracle: IVisionOracle,
        keys: KeySpace | None = None,
        max_workers: int = 8,
    ) -> None:
        self._objects = object_store
        self._metadata = metadata_store
        self._oracle = oracle
        self._keys = keys or KeySpace()
        self._max_workers = max(1, max_workers)

    def ingest(self, uploads: Sequence[ImageUpload]) -> IngestResult:
        if not uploads:
            raise EmptyInputError("No images uploaded")

        workers = min(self._max_workers, len(uploads))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ingest") as pool:
            outcomes = list(pool.map(self._ingest_one, uploads))

        result = IngestResult()
        for outcome in outcomes:
            if isinstance(outcome, ItemError):
                result.errors.append(outcome)
            else:
                result.items.append(outcome)
        logger.info(
            "Ingested %d/%d images (%d failed)",
            result.success_count, len(uploads), len(result.errors),
        )
        return result

    def _ingest_one(self, upload: ImageUpload) -> WardrobeItem | ItemError:
        ref = ObjectRef.create(upload.filename)
        try:
            url = self._objects.put(ref.encode(), upload.data, upload.content_type)
            image = ImageInput(
                filename=ref.filename, data=upload.data, content_type=upload.content_type,
            )
            return self.enrich(ref, image, image_url=url)
        except (WardrobeError, ValidationError) as exc:
            logger.warning("Ingestion failed for %r (id=%s): %s", upload.filename, ref.item_id, exc)
            return ItemError(filename=upload.filename, message=str(exc), item_id=ref.item_id)

    def enrich(self, ref: ObjectRef, image: ImageInput, *, image_url: str,
               instruction: str = UPLOAD_INSTRUCTION) -> WardrobeItem:
        """Analyze an already-stored image and write its record. Raises on any failure."""
        raw = self._oracle.analyze(image, instruction)
        attributes = parse_attributes(raw)
        item = build_item(
            attributes,
            item_id=ref.item_id,
            object_ref=ref.encode(),
            image_url=image_url,
            fallback_name=ref.filename,
        )
        key = self._keys.key(item.id)
        written = self._metadata.set_fields(key, item.to_record())
        if written == 0:
            raise MetadataStoreError(f"Metadata store wrote no fields for key={key!r}")
        logger.debug("Stored %s as %s (%s)", ref.encode(), key, item.category)
        return item
