"""Map the exception hierarchy onto HTTP responses with an ``error`` body."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wardrobe.core.exceptions import (
    EmptyWardrobeError,
    ItemNotFoundError,
    OracleError,
    PartialDeletionError,
    PreconditionError,
    StoreUnavailableError,
    WardrobeError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: tuple[tuple[type[WardrobeError], int], ...] = (
    (PreconditionError, 400),
    (ItemNotFoundError, 404),
    (EmptyWardrobeError, 404),
    (PartialDeletionError, 500),
    (OracleError, 502),
    (StoreUnavailableError, 503),
)


def status_for(exc: WardrobeError) -> int:
    for exc_type, status in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status
    return 500


async def wardrobe_error_handler(request: Request, exc: WardrobeError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    body: dict = {"error": str(exc)}
    if isinstance(exc, PartialDeletionError):
        body.update(partial=True, deleted=exc.deleted, failed=exc.failed)
    return JSONResponse(status_code=status, content=body)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WardrobeError, wardrobe_error_handler)
