"""POST /api/export/stl and /api/export/points -- wing files as downloads.

Generates the wing, writes the file into the export temp directory and
streams it to the client.  The temp file is deleted after streaming.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import anyio
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from wings.engine import _mesh_limiter
from wings.errors import ConfigurationError, DomainError, GeometryError
from wings.export.package import build_points_file, build_stl_file, export_filename
from wings.models import WingRequest

logger = logging.getLogger("wings.export")

router = APIRouter(prefix="/api/export", tags=["export"])


async def _export(
    request: WingRequest,
    build: Callable[[WingRequest], Path],
    suffix: str,
    media_type: str,
) -> FileResponse:
    try:
        # Run the blocking pipeline in a thread with the mesh limiter
        path = await anyio.to_thread.run_sync(
            build,
            request,
            limiter=_mesh_limiter,
            abandon_on_cancel=True,
        )
    except (ConfigurationError, DomainError, GeometryError) as exc:
        logger.warning("Export of %s rejected: %s", request.name, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Export failed")
        raise HTTPException(status_code=500, detail=f"Export failed: {exc}") from exc

    return FileResponse(
        path=str(path),
        media_type=media_type,
        filename=export_filename(request, suffix),
        background=BackgroundTask(lambda: path.unlink(missing_ok=True)),
    )


@router.post("/stl")
async def export_stl(request: WingRequest) -> FileResponse:
    """Generate the closed wing mesh and stream it as binary STL."""
    return await _export(request, build_stl_file, ".stl", "model/stl")


@router.post("/points")
async def export_points(request: WingRequest) -> FileResponse:
    """Generate the wing points and stream them as delimited text."""
    return await _export(request, build_points_file, ".txt", "text/plain")
