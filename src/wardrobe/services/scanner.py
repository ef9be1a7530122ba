"""Exhaustive cursor-based enumeration of metadata keys."""

from __future__ import annotations

import logging
from typing import Callable

from wardrobe.core.exceptions import MetadataStoreError
from wardrobe.core.protocols import IMetadataStore
from wardrobe.models.objects import glob_prefix
from wardrobe.models.scan import (
    ErrorEntry,
    HashEntry,
    ListEntry,
    ScanEntry,
    ScanResult,
    SetEntry,
    SortedSetEntry,
    StringEntry,
)

logger = logging.getLogger(__name__)

INITIAL_CURSOR = 0


class ExhaustiveScanner:
    """Walks SCAN cursors until the store wraps back to the initial cursor.

    The walk is capped at ``max_iterations`` calls; a capped walk returns what
    it has with ``complete=False`` instead of looping on a store that never
    re-emits the initial cursor.
    """

    def __init__(self, metadata_store: IMetadataStore, *, batch_size: int = 100,
                 max_iterations: int = 100) -> None:
        self._store = metadata_store
        self._batch_size = batch_size
        self._max_iterations = max_iterations
        self._readers: dict[str, tuple[type, Callable[[str], object]]] = {
            "hash": (HashEntry, metadata_store.get_fields),
            "string": (StringEntry, metadata_store.read_string),
            "list": (ListEntry, metadata_store.read_list),
            "set": (SetEntry, metadata_store.read_set),
            "zset": (SortedSetEntry, metadata_store.read_sorted_set),
        }

    def scan_keys(self, prefix: str) -> tuple[list[str], bool, int]:
        """Return (keys, complete, iterations); each key appears once."""
        pattern = glob_prefix(prefix)
        cursor = INITIAL_CURSOR
        keys: list[str] = []
        seen: set[str] = set()
        iterations = 0

        while True:
            cursor, batch = self._store.scan(cursor, pattern, self._batch_size)
            iterations += 1
            for key in batch:
                if key not in seen:
                    seen.add(key)
                    keys.append(key)
            logger.debug("Scan %d: cursor=%s, %d keys (total %d)", iterations, cursor, len(batch), len(keys))
            if cursor == INITIAL_CURSOR:
                return keys, True, iterations
            if iterations >= self._max_iterations:
                logger.warning(
                    "Scan of %r stopped after %d iterations; %d keys found, some may be missing",
                    pattern, iterations, len(keys),
                )
                return keys, False, iterations

    def resolve(self, key: str) -> ScanEntry | None:
        """Read a key according to its container kind; None if it vanished mid-scan."""
        try:
            kind = self._store.type_of(key)
            if kind == "none":
                return None
            reader = self._readers.get(kind)
            if reader is None:
                return ErrorEntry(key=key, error=f"Unsupported type: {kind}")
            entry_type, read = reader
            return entry_type(key=key, value=read(key))
        except MetadataStoreError as exc:
            logger.error("Failed to resolve key %r: %s", key, exc)
            return ErrorEntry(key=key, error=str(exc))

    def scan_all(self, prefix: str) -> ScanResult:
        keys, complete, iterations = self.scan_keys(prefix)
        entries = [entry for entry in map(self.resolve, keys) if entry is not None]
        logger.info("Scanned %d entries under %r in %d iterations", len(entries), prefix, iterations)
        return ScanResult(entries=entries, complete=complete, iterations=iterations)
