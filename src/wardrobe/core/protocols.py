"""Protocol interfaces for the three external collaborators.

Services depend only on these Protocols; production backends and the
in-memory doubles satisfy them structurally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from wardrobe.core.types import Pathname, Record

if TYPE_CHECKING:
    from wardrobe.models.objects import ImageInput, StoredObject


# ---------------------------------------------------------------------------
# Object Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IObjectStore(Protocol):
    """Blob storage addressed by pathname."""

    def put(self, pathname: Pathname, data: bytes, content_type: str = "application/octet-stream") -> str: ...

    def list(self) -> list[StoredObject]: ...

    def delete(self, pathname: Pathname) -> None: ...


# ---------------------------------------------------------------------------
# Metadata Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IMetadataStore(Protocol):
    """Hash-of-hashes key-value store with cursor scanning."""

    def set_fields(self, key: str, record: Record) -> int: ...

    def get_fields(self, key: str) -> Record: ...

    def delete_key(self, key: str) -> int: ...

    def list_keys(self, pattern: str) -> list[str]: ...

    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]: ...

    def type_of(self, key: str) -> str: ...

    def read_string(self, key: str) -> str | None: ...

    def read_list(self, key: str) -> list[str]: ...

    def read_set(self, key: str) -> list[str]: ...

    def read_sorted_set(self, key: str) -> list[tuple[str, float]]: ...

    def ping(self) -> bool: ...


# ---------------------------------------------------------------------------
# Vision Analysis Oracle
# ---------------------------------------------------------------------------

@runtime_checkable
class IVisionOracle(Protocol):
    """Request/response access to the vision/language model."""

    def analyze(self, image: ImageInput, instruction: str) -> str: ...

    def complete(self, prompt: str) -> str: ...
