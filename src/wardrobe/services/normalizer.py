"""Turn free-form oracle output into canonical wardrobe attributes.

The oracle answers either with a JSON object (possibly wrapped in a markdown
code fence) or with ``key: value`` lines. Both are reduced to the same
attribute dict: every known field present, scalars as ``""`` and sequences as
``[]`` when the oracle omitted them, unknown keys dropped.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from wardrobe.core.exceptions import OracleResponseError
from wardrobe.models.taxonomy import Category, normalize_category
from wardrobe.models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

SCALAR_FIELDS = ("name", "category", "fabric", "pattern", "fit", "style", "sleeve_style", "length")
SEQUENCE_FIELDS = ("colors", "occasions", "weather")

_KEY_ALIASES: dict[str, str] = {
    "name": "name",
    "item_name": "name",
    "title": "name",
    "category": "category",
    "type": "category",
    "garment_type": "category",
    "fabric": "fabric",
    "material": "fabric",
    "fabric_material": "fabric",
    "pattern": "pattern",
    "print": "pattern",
    "pattern_print": "pattern",
    "color": "colors",
    "colors": "colors",
    "colour": "colors",
    "colours": "colors",
    "fit": "fit",
    "style": "style",
    "sleeve": "sleeve_style",
    "sleeves": "sleeve_style",
    "sleeve_style": "sleeve_style",
    "length": "length",
    "occasion": "occasions",
    "occasions": "occasions",
    "suitable_occasions": "occasions",
    "weather": "weather",
    "suitable_weather": "weather",
}

_FENCED = re.compile(r"```[a-zA-Z]*\s*(.*?)```", re.DOTALL)
_KEY_JUNK = re.compile(r"^[\s\-*#>`\d.)]+|[\s*`]+$")
_KEY_SEPARATORS = re.compile(r"[\s/\-]+")


def canonical_key(raw: str) -> str | None:
    """Map an oracle-supplied key to a canonical attribute name, or None if unknown."""
    cleaned = _KEY_JUNK.sub("", raw.strip()).lower()
    cleaned = _KEY_SEPARATORS.sub("_", cleaned).strip("_")
    return _KEY_ALIASES.get(cleaned)


def _as_sequence(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return [str(value).strip()]


def _as_scalar(value: Any) -> str:
    if value is None or isinstance(value, dict):
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v).strip() for v in value if v is not None and str(v).strip())
    return str(value).strip()


def _unwrap(text: str) -> str:
    fenced = _FENCED.search(text)
    return (fenced.group(1) if fenced else text).strip()


def _parse_json(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        if text.lstrip().startswith("{"):
            raise OracleResponseError("Oracle returned malformed JSON") from None
        return None
    if not isinstance(parsed, dict):
        raise OracleResponseError(f"Oracle returned JSON {type(parsed).__name__}, expected an object")
    return parsed


def _parse_lines(text: str) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        value = value.strip().strip("*").strip()
        if sep and key.strip() and value:
            parsed.setdefault(key, value)
    return parsed


def extract_attributes(raw: dict[str, Any]) -> dict[str, Any]:
    """Project a raw key/value mapping onto the canonical attribute set."""
    attributes: dict[str, Any] = {field: "" for field in SCALAR_FIELDS}
    attributes.update({field: [] for field in SEQUENCE_FIELDS})
    recognized = 0
    for raw_key, value in raw.items():
        field = canonical_key(str(raw_key))
        if field is None or attributes[field]:
            continue
        attributes[field] = _as_sequence(value) if field in SEQUENCE_FIELDS else _as_scalar(value)
        recognized += 1
    if not recognized:
        # {"item": {...}} style wrappers
        nested = [v for v in raw.values() if isinstance(v, dict)]
        if len(nested) == 1:
            return extract_attributes(nested[0])
        raise OracleResponseError("Oracle response contained no recognizable attributes")
    return attributes


def parse_attributes(text: str | None) -> dict[str, Any]:
    """Parse an oracle response (JSON or ``key: value`` lines) into canonical attributes."""
    if not text or not text.strip():
        raise OracleResponseError("Oracle returned an empty response")
    body = _unwrap(text)
    raw = _parse_json(body)
    if raw is None:
        raw = _parse_lines(body)
    return extract_attributes(raw)


def build_item(attributes: dict[str, Any], *, item_id: str, object_ref: str,
               image_url: str = "", fallback_name: str = "") -> WardrobeItem:
    """Assemble a WardrobeItem from parsed attributes; category goes through the taxonomy."""
    category: Category = normalize_category(attributes.get("category"))
    logger.debug("Item %s: category %r -> %s", item_id, attributes.get("category"), category)
    return WardrobeItem(
        id=item_id,
        object_ref=object_ref,
        image_url=image_url,
        category=category,
        name=attributes.get("name") or fallback_name,
        fabric=attributes.get("fabric", ""),
        pattern=attributes.get("pattern", ""),
        colors=attributes.get("colors", []),
        fit=attributes.get("fit", ""),
        style=attributes.get("style", ""),
        sleeve_style=attributes.get("sleeve_style", ""),
        length=attributes.get("length", ""),
        occasions=attributes.get("occasions", []),
        weather=attributes.get("weather", []),
    )
