"""Reconciliation trigger."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from wardrobe.api.deps import get_services
from wardrobe.services import WardrobeServices

router = APIRouter(tags=["sync"])


@router.post("/sync")
async def sync_databases(services: WardrobeServices = Depends(get_services)) -> dict:
    report = await run_in_threadpool(services.reconciler.reconcile)
    return {"message": "Database sync completed", **report.model_dump()}
