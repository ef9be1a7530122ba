"""Integration test fixtures: LocalStack S3 and a real Redis."""

from __future__ import annotations

import os
import uuid

import boto3
import pytest
import redis

LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REDIS_HOST = os.environ.get("REDIS_HOST", "localhost")


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client("s3", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)
        client.list_buckets()
        return True
    except Exception:
        return False


def _redis_available() -> bool:
    try:
        return bool(redis.Redis(host=REDIS_HOST, socket_connect_timeout=1).ping())
    except Exception:
        return False


skip_no_backends = pytest.mark.skipif(
    not (_localstack_available() and _redis_available()),
    reason="LocalStack or Redis not available",
)


@pytest.fixture
def bucket():
    """Fresh S3 bucket on LocalStack, emptied and removed afterwards."""
    client = boto3.client("s3", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)
    name = f"wardrobe-inttest-{uuid.uuid4().hex[:8]}"
    client.create_bucket(Bucket=name)
    yield name
    for obj in client.list_objects_v2(Bucket=name).get("Contents", []):
        client.delete_object(Bucket=name, Key=obj["Key"])
    client.delete_bucket(Bucket=name)


@pytest.fixture
def key_prefix():
    """Unique key prefix so runs never see each other's records."""
    prefix = f"wardrobe-inttest-{uuid.uuid4().hex[:8]}:"
    yield prefix
    client = redis.Redis(host=REDIS_HOST)
    for key in client.scan_iter(match=f"{prefix}*"):
        client.delete(key)
