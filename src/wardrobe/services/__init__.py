"""Service layer and the factory that wires it to injected clients."""

from __future__ import annotations

from dataclasses import dataclass

from wardrobe.core.config import AppSettings
from wardrobe.core.protocols import IMetadataStore, IObjectStore, IVisionOracle
from wardrobe.models.objects import KeySpace
from wardrobe.services.ingestion import IngestionPipeline
from wardrobe.services.inventory import InventoryService
from wardrobe.services.reconciliation import ReconciliationEngine
from wardrobe.services.recommendation import RecommendationService
from wardrobe.services.scanner import ExhaustiveScanner


@dataclass
class WardrobeServices:
    """Wired-up services sharing one set of client handles."""

    settings: AppSettings
    metadata_store: IMetadataStore
    pipeline: IngestionPipeline
    scanner: ExhaustiveScanner
    reconciler: ReconciliationEngine
    inventory: InventoryService
    recommender: RecommendationService


def build_services(
    settings: AppSettings,
    object_store: IObjectStore,
    metadata_store: IMetadataStore,
    oracle: IVisionOracle,
) -> WardrobeServices:
    keys = KeySpace(settings.ingestion.key_prefix)
    scanner = ExhaustiveScanner(
        metadata_store,
        batch_size=settings.scan.batch_size,
        max_iterations=settings.scan.max_iterations,
    )
    pipeline = IngestionPipeline(
        object_store=object_store,
        metadata_store=metadata_store,
        oracle=oracle,
        keys=keys,
        max_workers=settings.ingestion.max_workers,
    )
    inventory = InventoryService(
        object_store=object_store, metadata_store=metadata_store, scanner=scanner, keys=keys,
    )
    return WardrobeServices(
        settings=settings,
        metadata_store=metadata_store,
        pipeline=pipeline,
        scanner=scanner,
        reconciler=ReconciliationEngine(
            object_store=object_store, metadata_store=metadata_store, pipeline=pipeline, keys=keys,
        ),
        inventory=inventory,
        recommender=RecommendationService(inventory=inventory, oracle=oracle),
    )
