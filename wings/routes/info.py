"""Info route -- lists the provider kinds and presets the service accepts.

GET /api/info lets clients build their provider pickers without hard-coding
the catalogue.
"""

from __future__ import annotations

from typing import get_args

from fastapi import APIRouter, Request

from wings.models import AerofoilSpec, LiuPreset, PlanformSpec

router = APIRouter(prefix="/api", tags=["info"])


def _kinds(spec) -> list[str]:
    union = get_args(spec)[0]
    return [model.model_fields["kind"].default for model in get_args(union)]


@router.get("/info")
async def get_info(request: Request) -> dict:
    """Return the service version and provider catalogue.

    Response fields
    ---------------
    version : str
        Application version string sourced from the FastAPI app metadata.
    planforms : list[str]
        Accepted ``planform.kind`` values.
    aerofoils : list[str]
        Accepted ``aerofoil.kind`` values.
    presets : list[str]
        Bird coefficient sets accepted by the ``liu`` providers.
    """
    return {
        "version": request.app.version,
        "planforms": _kinds(PlanformSpec),
        "aerofoils": _kinds(AerofoilSpec),
        "presets": list(get_args(LiuPreset)),
    }
