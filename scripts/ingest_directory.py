"""Upload every image in a directory through the ingestion pipeline.

Usage:
    python scripts/ingest_directory.py ./photos
"""

from __future__ import annotations

import argparse
import logging
import mimetypes
from pathlib import Path

from wardrobe.core.config import AppSettings
from wardrobe.model_providers import create_oracle
from wardrobe.models.objects import ImageUpload
from wardrobe.persistence import create_persistence
from wardrobe.services import build_services

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".webp", ".gif"}


def collect_uploads(directory: Path) -> list[ImageUpload]:
    uploads: list[ImageUpload] = []
    for path in sorted(directory.iterdir()):
        if path.suffix.lower() not in IMAGE_SUFFIXES:
            continue
        uploads.append(ImageUpload(
            filename=path.name,
            data=path.read_bytes(),
            content_type=mimetypes.guess_type(path.name)[0] or "image/jpeg",
        ))
    return uploads


def main() -> None:
    parser = argparse.ArgumentParser(description="Ingest a directory of clothing photos")
    parser.add_argument("directory", type=Path, help="Directory containing images")
    args = parser.parse_args()

    settings = AppSettings()
    logging.basicConfig(level=settings.log_level)

    uploads = collect_uploads(args.directory)
    print(f"Found {len(uploads)} images in {args.directory}")

    object_store, metadata_store = create_persistence(settings)
    services = build_services(settings, object_store, metadata_store, create_oracle(settings))
    result = services.pipeline.ingest(uploads)

    for item in result.items:
        print(f"  + {item.id}  {item.category:<12} {item.name}")
    for error in result.errors:
        print(f"  ! {error.filename}: {error.message}")
    print(f"Done: {result.success_count} stored, {len(result.errors)} failed")


if __name__ == "__main__":
    main()
