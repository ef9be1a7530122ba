"""Type aliases used across the wardrobe service."""

from __future__ import annotations

Pathname = str
Record = dict[str, str]
