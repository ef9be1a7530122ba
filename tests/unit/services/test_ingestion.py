"""Tests for the ingestion pipeline."""

from __future__ import annotations

import pytest

from tests.fakes import analysis
from wardrobe.core.exceptions import EmptyInputError, OracleError
from wardrobe.models.objects import ImageUpload, ObjectRef
from wardrobe.models.taxonomy import Category
from wardrobe.models.wardrobe_item import WardrobeItem


def upload(filename: str, data: bytes = b"\xff\xd8jpeg") -> ImageUpload:
    return ImageUpload(filename=filename, data=data, content_type="image/jpeg")


class TestSingleImage:
    def test_upload_end_to_end(self, services, oracle, object_store, metadata_store):
        oracle.set_analysis("jacket", analysis(category="denim jacket", name="Jean Jacket"))

        result = services.pipeline.ingest([upload("jacket.jpg")])

        assert result.errors == []
        [item] = result.items
        assert item.category == Category.OUTERWEAR
        assert item.name == "Jean Jacket"

        stored = WardrobeItem.from_record(metadata_store.get_fields(f"wardrobe:{item.id}"))
        assert stored == item

        [obj] = object_store.list()
        assert obj.pathname == item.object_ref == f"w1/{item.id}/jacket.jpg"
        assert item.image_url == obj.url

    def test_oracle_receives_inline_image(self, services, oracle):
        oracle.set_analysis("tee", analysis(category="t-shirt"))
        captured = []
        original = oracle.analyze

        def spy(image, instruction):
            captured.append(image)
            return original(image, instruction)

        oracle.analyze = spy
        services.pipeline.ingest([upload("tee.jpg", b"abc")])
        assert captured[0].data == b"abc"
        assert captured[0].as_url().startswith("data:image/jpeg;base64,")

    def test_name_defaults_to_filename(self, services):
        [item] = services.pipeline.ingest([upload("mystery.jpg")]).items
        assert item.name == "mystery.jpg"


class TestBatch:
    def test_partial_failure_is_isolated(self, services, oracle, object_store):
        object_store.fail_put = "broken"
        oracle.set_analysis("garbled", "I think this is a nice shirt.")
        oracle.set_analysis("offline", OracleError("connection reset"))
        oracle.set_analysis("pants", analysis(category="pants", name="Chinos"))

        uploads = [
            upload("shirt-1.jpg"),
            upload("broken.jpg"),
            upload("garbled.jpg"),
            upload("offline.jpg"),
            upload("pants.jpg"),
        ]
        result = services.pipeline.ingest(uploads)

        assert result.success_count + len(result.errors) == len(uploads)
        assert [i.name for i in result.items] == ["shirt-1.jpg", "Chinos"]
        assert {e.filename for e in result.errors} == {"broken.jpg", "garbled.jpg", "offline.jpg"}
        messages = {e.filename: e.message for e in result.errors}
        assert "no recognizable attributes" in messages["garbled.jpg"]
        assert "connection reset" in messages["offline.jpg"]

    def test_ids_are_unique_across_batch(self, services):
        result = services.pipeline.ingest([upload(f"item{i}.jpg") for i in range(20)])
        ids = [item.id for item in result.items]
        assert len(ids) == 20
        assert all(ids)
        assert len(set(ids)) == 20

    def test_failed_analysis_leaves_object_for_sync(self, services, oracle, object_store, metadata_store):
        oracle.set_analysis("garbled", "no idea")
        result = services.pipeline.ingest([upload("garbled.jpg")])
        [error] = result.errors
        assert ObjectRef.decode(object_store.list()[0].pathname).item_id == error.item_id
        assert metadata_store.list_keys("wardrobe:*") == []

    def test_noop_metadata_write_is_a_failure(self, services, metadata_store):
        metadata_store.noop_writes = True
        result = services.pipeline.ingest([upload("a.jpg"), upload("b.jpg")])
        assert result.items == []
        assert len(result.errors) == 2
        assert all("wrote no fields" in e.message for e in result.errors)


def test_empty_batch_is_a_precondition_error(services):
    with pytest.raises(EmptyInputError):
        services.pipeline.ingest([])


def test_programming_errors_are_not_swallowed(services, oracle):
    oracle.set_analysis("bug", TypeError("unexpected keyword"))
    with pytest.raises(TypeError):
        services.pipeline.ingest([upload("bug.jpg")])
