"""Outfit recommendation endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from wardrobe.api.deps import get_services
from wardrobe.services import WardrobeServices

router = APIRouter(tags=["recommend"])


class RecommendRequest(BaseModel):
    mood: str = ""
    weather: str = ""
    occasion: str = ""


@router.post("/recommend")
async def recommend(body: RecommendRequest,
                    services: WardrobeServices = Depends(get_services)) -> dict:
    result = await run_in_threadpool(
        services.recommender.recommend, body.mood, body.weather, body.occasion,
    )
    return {
        "recommendation": result.text,
        "items": [item.model_dump(mode="json") for item in result.items],
    }
