"""Closed garment taxonomy and the ordered rules that map free text onto it.

Rules are evaluated top to bottom and the first rule with a keyword contained
in the text wins. "denim jacket dress" is therefore a Dress, not Outerwear.
Each rule also lists its own canonical spelling so that normalizing an
already-normalized value is the identity.
"""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    TOPS = "Tops"
    BOTTOMS = "Bottoms"
    DRESSES = "Dresses"
    OUTERWEAR = "Outerwear"
    FOOTWEAR = "Footwear"
    ACCESSORIES = "Accessories"
    SUITS = "Suits"
    SPORTSWEAR = "Sportswear"
    SLEEPWEAR = "Sleepwear"
    UNDERWEAR = "Underwear"
    OTHER = "Other"


CATEGORY_RULES: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.TOPS, ("top", "shirt", "blouse", "t-shirt", "sweater", "sweatshirt")),
    (Category.BOTTOMS, ("bottom", "pant", "trouser", "jeans", "skirt", "shorts")),
    (Category.DRESSES, ("dress",)),
    (Category.OUTERWEAR, ("outerwear", "coat", "jacket", "cardigan", "blazer")),
    (Category.FOOTWEAR, ("footwear", "shoe", "boot", "sneaker", "sandal", "slipper")),
    (Category.ACCESSORIES, ("accessor", "jewelry", "bag", "hat", "scarf", "belt")),
    (Category.SUITS, ("suit",)),
    (Category.SPORTSWEAR, ("sport", "athletic")),
    (Category.SLEEPWEAR, ("sleep", "pajama")),
    (Category.UNDERWEAR, ("underwear", "lingerie")),
)


def normalize_category(text: str | None) -> Category:
    """Map free-form category text to a taxonomy member (``Other`` if nothing matches)."""
    if not text:
        return Category.OTHER
    lowered = str(text).lower().strip()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.OTHER
