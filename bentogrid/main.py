# bentogrid/main.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, Query
from fastapi.responses import ORJSONResponse

from .config import settings
from .pipeline.types import LayoutRequest, LayoutResponse
from .pipeline.layout import bento_layout, layout_stats, InvalidArgument
from .pipeline.samples import SAMPLE_IMAGES

log = logging.getLogger("bentogrid.api")

app = FastAPI(
    title="bentogrid",
    default_response_class=ORJSONResponse
)


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    log.warning(f"[InvalidArgument] {request.url.path}: {exc}")
    return ORJSONResponse(status_code=422, content={"detail": str(exc)})


def _build(images, columns: Optional[int], shuffle: Optional[bool], seed: Optional[int]) -> LayoutResponse:
    cols = settings.GRID_COLUMNS if columns is None else columns
    if cols > settings.MAX_COLUMNS:
        raise InvalidArgument(f"too many columns: {cols} > {settings.MAX_COLUMNS}")
    shuf = settings.SHUFFLE if shuffle is None else shuffle
    items = bento_layout(images, columns=cols, shuffle=shuf, seed=seed)
    return LayoutResponse(columns=cols, items=items, stats=layout_stats(items, cols))

# ---------------------------------------------------------------------

@app.post("/api/layout", response_model=LayoutResponse)
async def create_layout(req: LayoutRequest):
    """
    Картинки (id, src, width, height) -> раскладка по сетке.
    columns/shuffle не заданы: берём из настроек.
    """
    if len(req.images) > settings.MAX_IMAGES:
        raise InvalidArgument(f"too many images: {len(req.images)} > {settings.MAX_IMAGES}")
    return _build(req.images, req.columns, req.shuffle, req.seed)


@app.get("/api/layout/sample", response_model=LayoutResponse)
async def sample_layout(shuffle: Optional[bool] = None,
                        seed: Optional[int] = Query(None, ge=0),
                        columns: Optional[int] = Query(None)):
    """Раскладка демо-набора; каждый вызов без seed: новая перестановка («Regenerate»)."""
    return _build(SAMPLE_IMAGES, columns, shuffle, seed)

# ---------------------------------------------------------------------

@app.on_event("startup")
async def on_startup():
    log.info(f"Startup: GRID_COLUMNS={settings.GRID_COLUMNS} SHUFFLE={settings.SHUFFLE} MAX_IMAGES={settings.MAX_IMAGES}")


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"ok": True}
