"""Load / save / log endpoints backed by the data service."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from pydantic import BaseModel

from rocky_store.services.data_service import RockyDataService

log = logging.getLogger(__name__)

router = APIRouter(tags=["data"])


class LogRequest(BaseModel):
    """A single line to append to debug.log."""

    line: str


class OkResponse(BaseModel):
    ok: bool = True


def get_data_service(request: Request) -> RockyDataService:
    return request.app.state.data_service


# Handlers are sync so file I/O runs in the threadpool


@router.get("/load")
def load_data(service: RockyDataService = Depends(get_data_service)) -> Any:
    """Return the stored document (never fails on corrupt content)."""
    return service.load()


@router.post("/save", response_model=OkResponse)
def save_data(
    payload: dict[str, Any] = Body(...),
    service: RockyDataService = Depends(get_data_service),
) -> OkResponse:
    """Replace the stored document with the request body."""
    service.save(payload)
    log.debug("Saved document via API", extra={"keys": sorted(payload)})
    return OkResponse()


@router.post("/log", response_model=OkResponse)
def append_log(
    request: LogRequest,
    service: RockyDataService = Depends(get_data_service),
) -> OkResponse:
    """Append a line to the app's debug.log."""
    service.append_log(request.line)
    return OkResponse()
