"""Run one reconciliation pass between the object store and the metadata store.

Usage:
    python scripts/sync_wardrobe.py
    python scripts/sync_wardrobe.py --s3-endpoint-url http://localhost:4566 --dry-run
"""

from __future__ import annotations

import argparse
import json
import logging

from wardrobe.core.config import AppSettings
from wardrobe.model_providers import create_oracle
from wardrobe.model_providers.mock_provider import MockVisionOracle
from wardrobe.models.objects import ObjectRef
from wardrobe.models.reports import ReconcilePlan
from wardrobe.persistence import create_persistence
from wardrobe.services import WardrobeServices, build_services


def dry_run(services: WardrobeServices) -> ReconcilePlan:
    """Print the objects a sync would re-ingest. The oracle is never called."""
    plan = services.reconciler.plan()
    print(f"Objects: {plan.objects}, records: {plan.records}")
    for obj in plan.missing:
        print(f"  missing:      {ObjectRef.decode(obj.pathname).item_id}  {obj.pathname}")
    for pathname in plan.unrecognized:
        print(f"  unrecognized: {pathname}")
    return plan


def main() -> None:
    parser = argparse.ArgumentParser(description="Re-ingest stored images that have no metadata record")
    parser.add_argument("--s3-endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--dry-run", action="store_true", help="Only list what would be processed")
    args = parser.parse_args()

    settings = AppSettings()
    if args.s3_endpoint_url:
        settings.s3.endpoint_url = args.s3_endpoint_url
    logging.basicConfig(level=settings.log_level)

    object_store, metadata_store = create_persistence(settings)
    oracle = MockVisionOracle() if args.dry_run else create_oracle(settings)
    services = build_services(settings, object_store, metadata_store, oracle)

    if args.dry_run:
        dry_run(services)
        return

    report = services.reconciler.reconcile()
    print(json.dumps(report.model_dump(), indent=2))


if __name__ == "__main__":
    main()
