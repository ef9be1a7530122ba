"""Object store references, listings and image payloads."""

from __future__ import annotations

import base64
import re
import uuid
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

_UNSAFE_FILENAME = re.compile(r"[\\/\x00-\x1f]+")


def new_item_id() -> str:
    """Generate a globally unique item id (uuid4, no delimiter characters)."""
    return uuid.uuid4().hex


def safe_filename(filename: str | None) -> str:
    """Reduce an uploaded filename to a single path segment."""
    name = (filename or "").replace("\\", "/").rsplit("/", 1)[-1]
    name = _UNSAFE_FILENAME.sub("_", name).strip()
    return name or "image"


class ObjectRef(BaseModel):
    """Structured reference to a stored image: item id and original filename.

    v1 pathnames are ``w1/<id>/<filename>``. Version 0 is the legacy
    ``<id>-<filename>`` layout, decoded only so older objects can be synced.
    """

    model_config = ConfigDict(frozen=True)

    V1_TAG: ClassVar[str] = "w1"

    item_id: str
    filename: str
    version: int = 1

    @classmethod
    def create(cls, filename: str | None, item_id: str | None = None) -> ObjectRef:
        return cls(item_id=item_id or new_item_id(), filename=safe_filename(filename))

    def encode(self) -> str:
        if self.version == 0:
            return f"{self.item_id}-{self.filename}"
        return f"{self.V1_TAG}/{self.item_id}/{self.filename}"

    @classmethod
    def decode(cls, pathname: str) -> ObjectRef | None:
        """Parse a pathname back into a reference, or None if it follows no known layout."""
        if pathname.startswith(f"{cls.V1_TAG}/"):
            parts = pathname.split("/", 2)
            if len(parts) == 3 and parts[1] and parts[2]:
                return cls(item_id=parts[1], filename=parts[2])
            return None
        if "/" in pathname or "-" not in pathname:
            return None
        item_id, filename = pathname.split("-", 1)
        if not item_id:
            return None
        return cls(item_id=item_id, filename=filename, version=0)


class StoredObject(BaseModel):
    """One entry of an object store listing."""

    pathname: str
    url: str
    size: int = 0
    content_type: str = ""


class ImageUpload(BaseModel):
    """Raw uploaded image bytes with the client-supplied filename."""

    filename: str
    data: bytes
    content_type: str = "image/jpeg"


class ImageInput(BaseModel):
    """Image handed to the oracle: inline bytes or a retrievable URL."""

    filename: str = ""
    data: bytes | None = None
    url: str | None = None
    content_type: str = "image/jpeg"

    def as_url(self) -> str:
        if self.data is not None:
            encoded = base64.b64encode(self.data).decode("ascii")
            return f"data:{self.content_type};base64,{encoded}"
        if self.url:
            return self.url
        raise ValueError("ImageInput carries neither data nor url")


class KeySpace:
    """Maps item ids to metadata keys under a fixed prefix, and back."""

    def __init__(self, prefix: str = "wardrobe:") -> None:
        self.prefix = prefix

    def key(self, item_id: str) -> str:
        return f"{self.prefix}{item_id}"

    def item_id(self, key: str) -> str | None:
        if not key.startswith(self.prefix):
            return None
        return key[len(self.prefix):] or None

    @property
    def pattern(self) -> str:
        return glob_prefix(self.prefix)


def glob_prefix(prefix: str) -> str:
    """Redis MATCH pattern selecting every key that starts with ``prefix``."""
    return re.sub(r"([*?\[\]\\])", r"\\\1", prefix) + "*"
