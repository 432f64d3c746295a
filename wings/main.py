"""FastAPI application -- entry point for the wings mesh service.

Lifespan prepares the export temp directory, sweeps orphaned export files
and starts the periodic sweeper.  Run with ``uvicorn wings.main:app``.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wings import __version__
from wings.cleanup import cleanup_tmp_files, periodic_cleanup
from wings.export.package import EXPORT_TMP_DIR
from wings.routes.export import router as export_router
from wings.routes.generate import router as generate_router
from wings.routes.info import router as info_router

logger = logging.getLogger("wings")

# Comma-separated list, e.g. "http://localhost:5173,https://wings.example.org"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "WINGS_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup tasks:
    1. Ensure the export temp directory exists
    2. Remove export files orphaned by a previous run
    3. Start the periodic sweeper
    """
    tmp_dir = EXPORT_TMP_DIR
    try:
        tmp_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Export tmp directory ready: %s", tmp_dir)
    except OSError:
        logger.warning("Cannot create %s -- exports will fail until it exists", tmp_dir)

    try:
        deleted = cleanup_tmp_files(tmp_dir)
        if deleted:
            logger.info("Startup cleanup: removed %d orphaned export file(s)", deleted)
    except Exception:
        logger.warning("Startup export cleanup failed", exc_info=True)

    async with anyio.create_task_group() as tg:
        tg.start_soon(periodic_cleanup, tmp_dir)
        yield
        tg.cancel_scope.cancel()


app = FastAPI(title="wings", version=__version__, lifespan=lifespan)

# ---------------------------------------------------------------------------
# CORS middleware for browser clients
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# ---------------------------------------------------------------------------
# API route registration
# ---------------------------------------------------------------------------
app.include_router(info_router)
app.include_router(generate_router)
app.include_router(export_router)


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}
