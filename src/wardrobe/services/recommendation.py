"""Outfit recommendation and the name matcher that maps oracle prose back to items."""

from __future__ import annotations

import logging
from typing import Sequence

from wardrobe.core.exceptions import EmptyInputError, EmptyWardrobeError
from wardrobe.core.protocols import IVisionOracle
from wardrobe.models.reports import Recommendation
from wardrobe.models.wardrobe_item import WardrobeItem
from wardrobe.services.inventory import InventoryService

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """\
Given the following wardrobe and user preferences, suggest an appropriate outfit:

Wardrobe:
{wardrobe}

User preferences:
Mood: {mood}
Weather: {weather}
Occasion: {occasion}

Please suggest a complete outfit that matches the user's preferences and the weather \
conditions, using items from the wardrobe. The outfit should include a combination of \
top, bottom (or dress), accessories, jacket (if appropriate), and shoes. Be specific in \
your recommendations, mentioning the exact item names from the wardrobe."""


def match_items(text: str, inventory: Sequence[WardrobeItem]) -> list[WardrobeItem]:
    """Items whose name occurs in ``text`` (case-insensitive substring), in inventory order."""
    haystack = text.lower()
    return [
        item for item in inventory
        if item.name.strip() and item.name.strip().lower() in haystack
    ]


def describe_item(item: WardrobeItem) -> str:
    colors = ", ".join(item.colors) or "unknown color"
    weather = ", ".join(item.weather) or "any weather"
    return f"{item.name} ({item.category}): {colors} {item.fabric}, suitable for {weather}"


def build_prompt(items: Sequence[WardrobeItem], mood: str, weather: str, occasion: str) -> str:
    return PROMPT_TEMPLATE.format(
        wardrobe="\n".join(describe_item(item) for item in items),
        mood=mood,
        weather=weather,
        occasion=occasion,
    )


class RecommendationService:
    def __init__(self, *, inventory: InventoryService, oracle: IVisionOracle) -> None:
        self._inventory = inventory
        self._oracle = oracle

    def recommend(self, mood: str, weather: str, occasion: str) -> Recommendation:
        if not (mood and weather and occasion):
            raise EmptyInputError("Missing required fields: mood, weather and occasion")

        items = self._inventory.list_items()
        if not items:
            raise EmptyWardrobeError("No wardrobe items found")

        text = self._oracle.complete(build_prompt(items, mood, weather, occasion))
        matched = match_items(text, items)
        logger.info("Recommendation referenced %d of %d items", len(matched), len(items))
        return Recommendation(text=text, items=matched)
