"""POST /api/derived -- planform quantities and mesh sizes for a wing request.

No mesh is built; use /api/export/stl or /api/export/points for files.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from wings.engine import compute_derived_values_safe
from wings.errors import ConfigurationError, DomainError
from wings.models import DerivedValues, WingRequest

logger = logging.getLogger("wings.generate")

router = APIRouter(prefix="/api", tags=["generate"])


@router.post("/derived", response_model=DerivedValues)
async def derived(request: WingRequest) -> DerivedValues:
    """Compute area, mean chord, aspect ratio and root/tip edges."""
    try:
        return await compute_derived_values_safe(request)
    except (ConfigurationError, DomainError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Derived value computation failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
