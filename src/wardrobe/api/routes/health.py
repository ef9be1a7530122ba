"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from wardrobe.api.deps import get_services
from wardrobe.services import WardrobeServices

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(services: WardrobeServices = Depends(get_services)) -> dict[str, str]:
    await run_in_threadpool(services.metadata_store.ping)
    return {"status": "ready"}
