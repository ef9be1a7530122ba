"""Tests for the in-memory doubles' store semantics."""

from __future__ import annotations

import pytest

from wardrobe.core.exceptions import MetadataStoreError
from wardrobe.persistence.memory_backend import MemoryMetadataStore, MemoryObjectStore


def test_object_store_put_list_delete():
    store = MemoryObjectStore()
    url = store.put("w1/a/x.jpg", b"abc", "image/jpeg")
    assert url == "memory://objects/w1/a/x.jpg"
    [obj] = store.list()
    assert (obj.pathname, obj.size, obj.content_type) == ("w1/a/x.jpg", 3, "image/jpeg")
    assert store.read("w1/a/x.jpg") == b"abc"
    store.delete("w1/a/x.jpg")
    assert store.list() == []


class TestMemoryMetadataStore:
    def test_set_fields_counts_new_fields_only(self):
        store = MemoryMetadataStore()
        assert store.set_fields("k", {"a": "1", "b": "2"}) == 2
        assert store.set_fields("k", {"a": "9", "c": "3"}) == 1
        assert store.get_fields("k") == {"a": "9", "b": "2", "c": "3"}

    def test_wrong_type_raises(self):
        store = MemoryMetadataStore()
        store.set_string("k", "v")
        with pytest.raises(MetadataStoreError):
            store.get_fields("k")

    def test_scan_cursor_wraps_to_zero(self):
        store = MemoryMetadataStore()
        for i in range(5):
            store.set_fields(f"wardrobe:{i}", {"id": str(i)})
        assert store.scan(0, "wardrobe:*", 3) == (3, ["wardrobe:0", "wardrobe:1", "wardrobe:2"])
        assert store.scan(3, "wardrobe:*", 3) == (0, ["wardrobe:3", "wardrobe:4"])

    def test_scan_skips_deleted_and_unmatched(self):
        store = MemoryMetadataStore()
        store.set_fields("wardrobe:1", {"id": "1"})
        store.set_fields("other:2", {"id": "2"})
        store.set_fields("wardrobe:3", {"id": "3"})
        store.delete_key("wardrobe:1")
        assert store.scan(0, "wardrobe:*", 10) == (0, ["wardrobe:3"])

    def test_container_kinds(self):
        store = MemoryMetadataStore()
        store.push_list("l", "a", "b")
        store.add_set("s", "y", "x")
        store.add_set("s", "z")
        store.add_sorted_set("z", {"b": 2.0, "a": 1.0})
        assert [store.type_of(k) for k in ("l", "s", "z", "missing")] == ["list", "set", "zset", "none"]
        assert store.read_list("l") == ["a", "b"]
        assert store.read_set("s") == ["x", "y", "z"]
        assert store.read_sorted_set("z") == [("a", 1.0), ("b", 2.0)]
