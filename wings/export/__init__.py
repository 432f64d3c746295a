"""Exporters: binary STL solids and plain-text point lists."""

from __future__ import annotations

from wings.export.points import write_pts, write_wing_pts
from wings.export.stl import read_stl, stl_bytes, write_stl, write_wing_stl

__all__ = ["read_stl", "stl_bytes", "write_pts", "write_stl", "write_wing_pts", "write_wing_stl"]
