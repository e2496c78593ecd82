"""Liveness and readiness of the local data API."""

from __future__ import annotations

import os

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """The process is up and answering HTTP."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request) -> JSONResponse:
    """503 until the data service exists and its data directory is writable."""
    service = getattr(request.app.state, "data_service", None)
    if service is None:
        return _not_ready("data service not started")

    data_dir = service.paths.data_dir
    if not data_dir.is_dir():
        return _not_ready(f"{data_dir} is not a directory")
    if not os.access(data_dir, os.W_OK):
        return _not_ready(f"{data_dir} is not writable")
    return JSONResponse({"status": "ready", "data_dir": str(data_dir)})


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(status_code=503, content={"status": "not_ready", "reason": reason})
