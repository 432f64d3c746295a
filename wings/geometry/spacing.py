"""Chordwise discretisation with cosine clustering at both edges."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def cosine_spacing(eta: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
    """Remap a uniform chordwise coordinate so samples cluster near 0 and 1.

    ``eta`` runs from the leading edge (0) to the trailing edge (1); scalars
    and arrays are both accepted.
    """
    return 0.5 - 0.5 * np.cos(np.pi * eta)


def chordwise_coordinates(n: int) -> NDArray[np.float64]:
    """Return ``n`` cosine-spaced coordinates from 0.0 to 1.0 inclusive."""
    return cosine_spacing(np.linspace(0.0, 1.0, n))


def closed_loop_coordinates(nchord: int) -> NDArray[np.float64]:
    """Chordwise coordinates for a full aerofoil loop of ``nchord`` points.

    Upper surface leading -> trailing edge, then the lower surface back from
    trailing -> leading edge.
    """
    half = chordwise_coordinates(nchord // 2)
    return np.concatenate([half, half[::-1]])
