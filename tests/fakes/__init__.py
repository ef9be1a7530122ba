"""Shared test doubles: memory backends, mock oracle, and failure-injecting variants."""

from __future__ import annotations

import json

from wardrobe.core.exceptions import MetadataStoreError, ObjectStoreError
from wardrobe.model_providers.mock_provider import MockVisionOracle
from wardrobe.persistence.memory_backend import MemoryMetadataStore, MemoryObjectStore


class FlakyObjectStore(MemoryObjectStore):
    """MemoryObjectStore that fails puts/deletes for pathnames containing a marker."""

    def __init__(self, fail_put: str | None = None, fail_delete: str | None = None) -> None:
        super().__init__()
        self.fail_put = fail_put
        self.fail_delete = fail_delete

    def put(self, pathname, data, content_type="application/octet-stream"):
        if self.fail_put and self.fail_put in pathname:
            raise ObjectStoreError(f"S3 put failed for {pathname!r}: boom")
        return super().put(pathname, data, content_type)

    def delete(self, pathname):
        if self.fail_delete and self.fail_delete in pathname:
            raise ObjectStoreError(f"S3 delete failed for {pathname!r}: boom")
        super().delete(pathname)


class FlakyMetadataStore(MemoryMetadataStore):
    """MemoryMetadataStore with switchable failure modes."""

    def __init__(self) -> None:
        super().__init__()
        self.noop_writes = False
        self.fail_delete = False
        self.fail_type_for: set[str] = set()

    def set_fields(self, key, record):
        if self.noop_writes:
            return 0
        return super().set_fields(key, record)

    def delete_key(self, key):
        if self.fail_delete:
            raise MetadataStoreError(f"Redis DEL failed for key={key!r}: boom")
        return super().delete_key(key)

    def type_of(self, key):
        if key in self.fail_type_for:
            raise MetadataStoreError(f"Redis TYPE failed for key={key!r}: boom")
        return super().type_of(key)


class NeverEndingScanStore(MemoryMetadataStore):
    """Returns a fresh non-zero cursor forever, like a misbehaving store."""

    def scan(self, cursor, pattern, count):
        _, keys = super().scan(0, pattern, count)
        return cursor + 1, keys


def analysis(**attrs) -> str:
    """JSON-shaped oracle answer."""
    return json.dumps(attrs)


__all__ = [
    "analysis",
    "FlakyMetadataStore",
    "FlakyObjectStore",
    "MemoryMetadataStore",
    "MemoryObjectStore",
    "MockVisionOracle",
    "NeverEndingScanStore",
]
