"""Wings -- parametric wing surface meshes and watertight STL export.

Usage::

    from wings import Wing, write_wing_stl
    from wings.providers import SEAGULL, LiuAerofoil, RectangularPlanform

    wing = Wing(RectangularPlanform(0.2), LiuAerofoil.from_preset(SEAGULL))
    write_wing_stl("seagull", wing, nchord=100, nspan=50, scale=1000.0)
"""

from __future__ import annotations

from wings.errors import ConfigurationError, DomainError, GeometryError, WingsError
from wings.export import read_stl, write_pts, write_stl, write_wing_pts, write_wing_stl
from wings.geometry import (
    Aerofoil,
    Planform,
    Wing,
    area,
    aspect_ratio,
    build_wing,
    get_conns,
    leading_edge,
    mean_chord,
    planform_outline,
    trailing_edge,
)

__version__ = "0.1.0"

__all__ = [
    "Aerofoil",
    "ConfigurationError",
    "DomainError",
    "GeometryError",
    "Planform",
    "Wing",
    "WingsError",
    "area",
    "aspect_ratio",
    "build_wing",
    "get_conns",
    "leading_edge",
    "mean_chord",
    "planform_outline",
    "read_stl",
    "trailing_edge",
    "write_pts",
    "write_stl",
    "write_wing_pts",
    "write_wing_stl",
]
