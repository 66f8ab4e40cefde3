# src/inkwell/main.py
"""ASGI application for Inkwell.

Run with ``uvicorn inkwell.main:app`` or ``python -m inkwell.main``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from inkwell.api.v1 import api_v1
from inkwell.core.errors import InkwellError
from inkwell.core.settings import settings
from inkwell.db.session import create_tables

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

API_DESCRIPTION = "Blog backend: accounts, posts and comments"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    if settings.auto_create_tables:
        create_tables()
        logger.info("Database tables ensured")
    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(
    title=f"{settings.app_name} API",
    description=API_DESCRIPTION,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(GZipMiddleware)

app.include_router(api_v1, prefix="/api/v1")


@app.exception_handler(InkwellError)
async def inkwell_error_handler(request: Request, exc: InkwellError) -> JSONResponse:
    """Render domain errors as ``{"detail": ...}`` with their status code."""
    logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/", tags=["system"])
async def service_info() -> dict[str, str]:
    """Name, version and documentation links."""
    return {
        "name": f"{settings.app_name} API",
        "version": settings.app_version,
        "description": API_DESCRIPTION,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("inkwell.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
