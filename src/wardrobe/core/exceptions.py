"""Wardrobe exception hierarchy."""

from __future__ import annotations


class WardrobeError(Exception):
    """Base exception for all wardrobe errors."""


class PreconditionError(WardrobeError):
    """Operation rejected before any work was done."""


class ConfigurationError(PreconditionError):
    """Required configuration is missing."""


class EmptyInputError(PreconditionError):
    """Required input was not supplied."""


class ItemNotFoundError(WardrobeError):
    """No wardrobe item stored under the given id."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item not found: {item_id}")


class MalformedRecordError(WardrobeError):
    """A stored record exists but does not describe a valid item."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Malformed record at key={key!r}: {message}")


class EmptyWardrobeError(WardrobeError):
    """The wardrobe holds no items to work with."""


class StoreUnavailableError(WardrobeError):
    """A backing store call failed."""


class ObjectStoreError(StoreUnavailableError):
    """Object store (S3) operation failed."""


class MetadataStoreError(StoreUnavailableError):
    """Metadata store (Redis) operation failed."""


class OracleError(WardrobeError):
    """The vision/language model call failed."""


class OracleResponseError(OracleError):
    """The model answered, but not in a shape we can use."""


class PartialDeletionError(WardrobeError):
    """One half of a dual-store delete succeeded and the other failed."""

    def __init__(self, item_id: str, deleted: str, failed: str, message: str) -> None:
        self.item_id = item_id
        self.deleted = deleted
        self.failed = failed
        super().__init__(
            f"Item {item_id} partially deleted: {deleted} removed, {failed} failed: {message}"
        )
