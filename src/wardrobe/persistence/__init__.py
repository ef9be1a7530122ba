"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from wardrobe.core.config import AppSettings
from wardrobe.persistence.redis_backend import RedisMetadataStore
from wardrobe.persistence.s3_backend import S3ObjectStore


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (object_store, metadata_store).
    """
    if settings is None:
        settings = AppSettings()

    metadata_store = RedisMetadataStore(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
        password=settings.redis.password,
    )

    object_store = S3ObjectStore(
        bucket=settings.s3.bucket,
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
        public_base_url=settings.s3.public_base_url,
        url_expiry=settings.s3.url_expiry,
    )

    return object_store, metadata_store
