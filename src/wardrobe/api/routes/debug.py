"""Debug endpoints: raw store views and a full purge."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from wardrobe.api.deps import get_services
from wardrobe.services import WardrobeServices

router = APIRouter(tags=["debug"])


@router.get("/kv")
async def metadata_dump(services: WardrobeServices = Depends(get_services)) -> dict:
    result = await run_in_threadpool(services.inventory.dump)
    return result.model_dump(mode="json")


@router.get("/blob")
async def object_listing(services: WardrobeServices = Depends(get_services)) -> dict:
    objects = await run_in_threadpool(services.inventory.list_objects)
    return {"blobs": [obj.model_dump() for obj in objects]}


@router.post("/empty")
async def empty_databases(services: WardrobeServices = Depends(get_services)) -> dict:
    report = await run_in_threadpool(services.inventory.purge)
    return {"message": "Databases have been emptied", **report.model_dump()}
