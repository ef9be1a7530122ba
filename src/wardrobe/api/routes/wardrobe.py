"""Wardrobe item endpoints: upload, list, fetch, image redirect, delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, RedirectResponse

from wardrobe.api.deps import get_services
from wardrobe.models.objects import ImageUpload
from wardrobe.services import WardrobeServices

router = APIRouter(tags=["wardrobe"])


@router.post("")
async def upload_items(
    images: list[UploadFile] | None = File(default=None),
    services: WardrobeServices = Depends(get_services),
):
    """Ingest a batch of images; partial failures are reported alongside the items."""
    uploads = [
        ImageUpload(
            filename=image.filename or "image",
            data=await image.read(),
            content_type=image.content_type or "image/jpeg",
        )
        for image in images or []
    ]
    result = await run_in_threadpool(services.pipeline.ingest, uploads)
    body = {
        "items": [item.model_dump(mode="json") for item in result.items],
        "errors": [error.model_dump() for error in result.errors],
        "success_count": result.success_count,
    }
    if not result.items:
        return JSONResponse(status_code=502, content={"error": "All images failed to process", **body})
    body["message"] = f"Added {result.success_count} of {result.total} items"
    return body


@router.get("")
async def list_items(category: str | None = None,
                     services: WardrobeServices = Depends(get_services)) -> list[dict]:
    items = await run_in_threadpool(services.inventory.list_items, category)
    return [item.model_dump(mode="json") for item in items]


@router.get("/{item_id}")
async def get_item(item_id: str, services: WardrobeServices = Depends(get_services)) -> dict:
    item = await run_in_threadpool(services.inventory.get_item, item_id)
    return item.model_dump(mode="json")


@router.get("/{item_id}/image")
async def item_image(item_id: str, services: WardrobeServices = Depends(get_services)):
    obj = await run_in_threadpool(services.inventory.locate_image, item_id)
    return RedirectResponse(obj.url)


@router.delete("/{item_id}")
async def delete_item(item_id: str, services: WardrobeServices = Depends(get_services)) -> dict:
    await run_in_threadpool(services.inventory.delete_item, item_id)
    return {"message": "Item deleted successfully", "id": item_id}
