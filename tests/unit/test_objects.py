"""Tests for object references and key derivation."""

from __future__ import annotations

from wardrobe.models.objects import ImageInput, KeySpace, ObjectRef, glob_prefix, new_item_id, safe_filename


class TestObjectRef:
    def test_v1_round_trip_keeps_delimiters_in_filename(self):
        ref = ObjectRef(item_id="abc123", filename="my-blue-shirt.jpg")
        assert ref.encode() == "w1/abc123/my-blue-shirt.jpg"
        assert ObjectRef.decode(ref.encode()) == ref

    def test_decodes_legacy_pathname(self):
        ref = ObjectRef.decode("1700000000000xyz-red-dress.png")
        assert ref is not None
        assert ref.version == 0
        assert ref.item_id == "1700000000000xyz"
        assert ref.filename == "red-dress.png"
        assert ref.encode() == "1700000000000xyz-red-dress.png"

    def test_unrecognized_pathnames(self):
        assert ObjectRef.decode("nodelimiter.jpg") is None
        assert ObjectRef.decode("w1/only-id") is None
        assert ObjectRef.decode("other/folder/file.jpg") is None
        assert ObjectRef.decode("-leading.jpg") is None

    def test_create_generates_id_and_sanitizes_filename(self):
        ref = ObjectRef.create("C:\\photos\\shirt.jpg")
        assert ref.filename == "shirt.jpg"
        assert len(ref.item_id) == 32


def test_new_item_ids_are_unique_and_delimiter_free():
    ids = {new_item_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert not any("-" in i or "/" in i or ":" in i for i in ids)


def test_safe_filename_defaults():
    assert safe_filename(None) == "image"
    assert safe_filename("a/b/") == "image"
    assert safe_filename("../../etc/passwd") == "passwd"


class TestKeySpace:
    def test_key_and_back(self):
        keys = KeySpace("wardrobe:")
        assert keys.key("abc") == "wardrobe:abc"
        assert keys.item_id("wardrobe:abc") == "abc"
        assert keys.item_id("other:abc") is None
        assert keys.item_id("wardrobe:") is None

    def test_pattern_escapes_glob_characters(self):
        assert KeySpace("wardrobe:").pattern == "wardrobe:*"
        assert glob_prefix("a*b?[c]") == "a\\*b\\?\\[c\\]*"


def test_image_input_inline_data_url():
    image = ImageInput(filename="x.png", data=b"\x89PNG", content_type="image/png")
    assert image.as_url() == "data:image/png;base64,iVBORw=="


def test_image_input_prefers_url_when_no_data():
    assert ImageInput(url="https://cdn/x.jpg").as_url() == "https://cdn/x.jpg"
