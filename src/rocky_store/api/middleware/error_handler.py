"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rocky_store.exceptions import DocumentEncodeError, PersistenceError, RockyError

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(DocumentEncodeError)
    async def handle_encode_error(request: Request, exc: DocumentEncodeError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"error": str(exc), "type": "encode_error"})

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
        log.error("Persistence failure on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "persistence_error"})

    @app.exception_handler(RockyError)
    async def handle_generic_error(request: Request, exc: RockyError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "rocky_error"})
