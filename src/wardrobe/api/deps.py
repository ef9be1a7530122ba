"""Request-scoped access to the services wired at startup."""

from __future__ import annotations

from fastapi import Request

from wardrobe.services import WardrobeServices


def get_services(request: Request) -> WardrobeServices:
    return request.app.state.services
