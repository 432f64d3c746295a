"""Wing engine -- request to providers, points and derived values.

This module ties the pydantic request models to the geometry pipeline and
provides the entry points used by the REST handlers.

- ``assemble_wing()`` -- providers + point buffer for a request
- ``compute_derived_values()`` -- planform integrals and mesh sizes
- ``compute_derived_values_safe()`` -- async with CapacityLimiter(4)
"""

from __future__ import annotations

import logging

import anyio
import numpy as np
from numpy.typing import NDArray

from wings.errors import ConfigurationError
from wings.geometry.connectivity import solid_triangle_count
from wings.geometry.interface import area, leading_edge, mean_chord, trailing_edge
from wings.geometry.wing import Wing
from wings.models import DerivedValues, WingRequest

logger = logging.getLogger("wings.engine")

# Bounds the number of meshes built concurrently in worker threads.
_mesh_limiter = anyio.CapacityLimiter(4)


def build_wing_model(request: WingRequest) -> Wing:
    """Instantiate the planform and aerofoil providers named by ``request``."""
    return Wing(planform=request.planform.build(), aerofoil=request.aerofoil.build())


def assemble_wing(request: WingRequest) -> tuple[Wing, NDArray[np.float64]]:
    """Build the providers and the ``(nchord * nspan, 3)`` point buffer."""
    wing = build_wing_model(request)
    mesh = request.mesh
    points = wing.points(mesh.xi0, mesh.xi1, nchord=mesh.nchord, nspan=mesh.nspan)
    logger.debug("Assembled %s: %d points", request.name, points.shape[0])
    return wing, points


def compute_derived_values(request: WingRequest) -> dict[str, float]:
    """Planform integrals, edge positions and mesh sizes for ``request``.

    Integrals are over the full normalised span; edges are reported at the
    requested root and tip stations.
    """
    wing = build_wing_model(request)
    pl = wing.planform
    mesh = request.mesh

    wing_area = area(pl)
    if wing_area <= 0.0:
        raise ConfigurationError(
            f"planform {request.planform.kind!r} has zero area; aspect ratio is undefined"
        )

    return {
        "area": wing_area,
        "mean_chord": mean_chord(pl),
        "aspect_ratio": 1.0 / wing_area,
        "root_leading_edge": leading_edge(mesh.xi0, pl),
        "root_trailing_edge": trailing_edge(mesh.xi0, pl),
        "tip_leading_edge": leading_edge(mesh.xi1, pl),
        "tip_trailing_edge": trailing_edge(mesh.xi1, pl),
        "vertex_count": mesh.nchord * mesh.nspan,
        "triangle_count": solid_triangle_count(mesh.nchord, mesh.nspan),
    }


async def compute_derived_values_safe(request: WingRequest) -> DerivedValues:
    """Run compute_derived_values in a worker thread behind the mesh limiter."""
    derived = await anyio.to_thread.run_sync(
        compute_derived_values,
        request,
        limiter=_mesh_limiter,
    )
    return DerivedValues(**derived)
