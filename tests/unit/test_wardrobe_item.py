"""Tests for the WardrobeItem model and its hash-record encoding."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from wardrobe.models.taxonomy import Category
from wardrobe.models.wardrobe_item import WardrobeItem


def _item(**kwargs):
    defaults = {"id": "abc", "object_ref": "w1/abc/shirt.jpg", "name": "Blue Shirt"}
    defaults.update(kwargs)
    return WardrobeItem(**defaults)


def test_defaults_are_empty_not_none():
    item = _item()
    assert item.category == Category.OTHER
    assert item.fabric == ""
    assert item.colors == []
    assert item.occasions == []


def test_record_is_all_strings_with_json_lists():
    record = _item(colors=["blue", "white"], category="Tops").to_record()
    assert all(isinstance(v, str) for v in record.values())
    assert record["category"] == "Tops"
    assert json.loads(record["colors"]) == ["blue", "white"]


def test_from_record_restores_item():
    item = _item(colors=["blue"], weather=["warm"], occasions=["casual", "work"])
    assert WardrobeItem.from_record(item.to_record()) == item


def test_category_text_is_normalized():
    assert _item(category="denim jacket").category == Category.OUTERWEAR


def test_list_fields_accept_comma_strings():
    assert _item(colors="red, green ,").colors == ["red", "green"]


def test_legacy_record_field_names():
    item = WardrobeItem.from_record({
        "id": "170abc",
        "blobId": "170abc",
        "name": "Old Shirt",
        "category": "Top",
        "color": "red,blue",
        "occasion": "[\"casual\"]",
        "sleeves": "short",
    })
    assert item.object_ref == "170abc"
    assert item.category == Category.TOPS
    assert item.colors == ["red", "blue"]
    assert item.occasions == ["casual"]
    assert item.sleeve_style == "short"


def test_id_is_required():
    with pytest.raises(ValidationError):
        WardrobeItem(id="", object_ref="x")
