"""Closed triangle mesh built from a wing point buffer.

MeshData couples the flat point buffer with zero-based face indices so the
exporters and the HTTP layer work from one object.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from wings.errors import ConfigurationError, GeometryError
from wings.geometry.connectivity import solid_conns

# ---------------------------------------------------------------------------
# MeshData
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MeshData:
    """Watertight triangle mesh of a wing.

    Attributes:
        vertices: Shape (N, 3), dtype float64.  The wing point buffer.
        faces:    Shape (M, 3), dtype uint32.  Zero-based triangle indices.
    """

    vertices: NDArray[np.float64]   # shape (N, 3)
    faces: NDArray[np.uint32]       # shape (M, 3)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self.vertices.shape[0]

    @property
    def face_count(self) -> int:
        """Number of triangular faces."""
        return self.faces.shape[0]

    def triangles(self, scale: float = 1.0) -> NDArray[np.float64]:
        """Corner coordinates of every face, shape (M, 3, 3), times ``scale``."""
        return self.vertices[self.faces] * scale

    def face_normals(self, scale: float = 1.0) -> NDArray[np.float64]:
        """Unit normal of each face: normalize((v2 - v1) x (v3 - v1))."""
        return compute_face_normals(self.triangles(scale))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def mesh_from_points(points: NDArray[np.float64], nchord: int) -> MeshData:
    """Build the closed mesh of a wing buffer made of ``nchord``-point loops.

    Raises:
        ConfigurationError: If the buffer length is not a multiple of
            ``nchord`` or the loops cannot be capped.
    """
    vertices = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    if nchord < 1 or vertices.shape[0] % nchord != 0:
        raise ConfigurationError(
            f"{vertices.shape[0]} points cannot be split into loops of nchord={nchord}"
        )
    nspan = vertices.shape[0] // nchord
    faces = np.asarray(solid_conns(nchord, nspan), dtype=np.uint32) - 1
    return MeshData(vertices=vertices, faces=faces)


def compute_face_normals(triangles: NDArray[np.float64]) -> NDArray[np.float64]:
    """Unit normals for an (M, 3, 3) array of triangle corners.

    Raises:
        GeometryError: If any triangle has zero area, which leaves its normal
            undefined.  The message names the first offending face.
    """
    v1 = triangles[:, 0]
    v2 = triangles[:, 1]
    v3 = triangles[:, 2]
    normals = np.cross(v2 - v1, v3 - v1)
    lengths = np.linalg.norm(normals, axis=1)

    bad = ~np.isfinite(lengths) | (lengths == 0.0)
    if np.any(bad):
        first = int(np.flatnonzero(bad)[0])
        raise GeometryError(
            f"{int(bad.sum())} degenerate triangle(s) with undefined normal; "
            f"first is face {first} with corners {triangles[first].tolist()}"
        )

    return normals / lengths[:, np.newaxis]
