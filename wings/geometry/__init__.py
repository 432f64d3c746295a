"""Geometry engine -- public API re-exports.

Usage::

    from wings.geometry import build_wing, get_conns, mesh_from_points
"""

from __future__ import annotations

from wings.geometry.connectivity import (
    get_conns,
    root_cap_conns,
    solid_conns,
    tip_cap_conns,
)
from wings.geometry.interface import (
    Aerofoil,
    Planform,
    area,
    aspect_ratio,
    leading_edge,
    mean_chord,
    planform_outline,
    trailing_edge,
)
from wings.geometry.spacing import chordwise_coordinates, cosine_spacing
from wings.geometry.tessellate import MeshData, mesh_from_points
from wings.geometry.wing import Wing, build_wing

__all__ = [
    "Aerofoil",
    "MeshData",
    "Planform",
    "Wing",
    "area",
    "aspect_ratio",
    "build_wing",
    "chordwise_coordinates",
    "cosine_spacing",
    "get_conns",
    "leading_edge",
    "mean_chord",
    "mesh_from_points",
    "planform_outline",
    "root_cap_conns",
    "solid_conns",
    "tip_cap_conns",
    "trailing_edge",
]
