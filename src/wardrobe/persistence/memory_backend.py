"""In-memory backends for unit tests and local development."""

from __future__ import annotations

import re
from fnmatch import fnmatchcase
from typing import Any

from wardrobe.core.exceptions import MetadataStoreError
from wardrobe.models.objects import StoredObject

_ESCAPED = re.compile(r"\\(.)")


def _glob_match(key: str, pattern: str) -> bool:
    """Redis-style MATCH: fnmatch with backslash escapes turned into one-char sets."""
    return fnmatchcase(key, _ESCAPED.sub(r"[\1]", pattern))


class MemoryObjectStore:
    """Dict-backed IObjectStore."""

    def __init__(self, base_url: str = "memory://objects") -> None:
        self._base_url = base_url
        self._objects: dict[str, tuple[bytes, str]] = {}

    def put(self, pathname: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        self._objects[pathname] = (data, content_type)
        return f"{self._base_url}/{pathname}"

    def list(self) -> list[StoredObject]:
        return [
            StoredObject(
                pathname=pathname,
                url=f"{self._base_url}/{pathname}",
                size=len(data),
                content_type=content_type,
            )
            for pathname, (data, content_type) in self._objects.items()
        ]

    def delete(self, pathname: str) -> None:
        self._objects.pop(pathname, None)

    def read(self, pathname: str) -> bytes:
        return self._objects[pathname][0]


class MemoryMetadataStore:
    """Dict-backed IMetadataStore.

    SCAN walks keys in first-insertion order and the cursor is a position in
    that order, so keys written between scan calls are still reached.
    """

    def __init__(self) -> None:
        self._data: dict[str, tuple[str, Any]] = {}
        self._scan_order: list[str] = []
        self._seen: set[str] = set()

    def _write(self, key: str, kind: str, value: Any) -> None:
        current = self._data.get(key)
        if current is not None and current[0] != kind:
            raise MetadataStoreError(f"WRONGTYPE for key={key!r}: holds {current[0]}, not {kind}")
        self._data[key] = (kind, value)
        if key not in self._seen:
            self._seen.add(key)
            self._scan_order.append(key)

    def _read(self, key: str, kind: str, default: Any) -> Any:
        current = self._data.get(key)
        if current is None:
            return default
        if current[0] != kind:
            raise MetadataStoreError(f"WRONGTYPE for key={key!r}: holds {current[0]}, not {kind}")
        return current[1]

    # ---- IMetadataStore methods ----

    def set_fields(self, key: str, record: dict[str, str]) -> int:
        existing = dict(self._read(key, "hash", {}))
        added = sum(1 for field in record if field not in existing)
        existing.update(record)
        self._write(key, "hash", existing)
        return added

    def get_fields(self, key: str) -> dict[str, str]:
        return dict(self._read(key, "hash", {}))

    def delete_key(self, key: str) -> int:
        return 1 if self._data.pop(key, None) is not None else 0

    def list_keys(self, pattern: str) -> list[str]:
        return [k for k in self._data if _glob_match(k, pattern)]

    def scan(self, cursor: int, pattern: str, count: int) -> tuple[int, list[str]]:
        window = self._scan_order[cursor:cursor + count]
        keys = [k for k in window if k in self._data and _glob_match(k, pattern)]
        next_cursor = cursor + count
        if next_cursor >= len(self._scan_order):
            next_cursor = 0
        return next_cursor, keys

    def type_of(self, key: str) -> str:
        current = self._data.get(key)
        return current[0] if current is not None else "none"

    def read_string(self, key: str) -> str | None:
        return self._read(key, "string", None)

    def read_list(self, key: str) -> list[str]:
        return list(self._read(key, "list", []))

    def read_set(self, key: str) -> list[str]:
        return sorted(self._read(key, "set", set()))

    def read_sorted_set(self, key: str) -> list[tuple[str, float]]:
        members = self._read(key, "zset", {})
        return sorted(members.items(), key=lambda kv: (kv[1], kv[0]))

    def ping(self) -> bool:
        return True

    # ---- non-hash writers for seeding other container kinds ----

    def set_string(self, key: str, value: str) -> None:
        self._write(key, "string", value)

    def push_list(self, key: str, *values: str) -> None:
        self._write(key, "list", list(self._read(key, "list", [])) + list(values))

    def add_set(self, key: str, *members: str) -> None:
        self._write(key, "set", set(self._read(key, "set", set())) | set(members))

    def add_sorted_set(self, key: str, members: dict[str, float]) -> None:
        self._write(key, "zset", {**self._read(key, "zset", {}), **members})
