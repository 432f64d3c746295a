"""Binary STL writer and reader for wing meshes.

Binary STL layout (all little-endian):
  - 80-byte header, must not begin with ``solid`` (ASCII STL marker)
  - 4-byte uint32: number of triangles
  - For each triangle (50 bytes):
    - 12 bytes: face normal (3 x float32)
    - 36 bytes: 3 vertices (3 x 3 x float32)
    - 2 bytes: attribute byte count (always 0)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from wings.errors import ConfigurationError
from wings.geometry.tessellate import MeshData, mesh_from_points

if TYPE_CHECKING:
    from wings.geometry.wing import Wing

logger = logging.getLogger("wings.export")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

HEADER_SIZE = 80

# Can be overridden via the WINGS_STL_HEADER environment variable.
DEFAULT_HEADER: str = os.environ.get("WINGS_STL_HEADER", "UNITS=mm")

STL_TRIANGLE_DTYPE = np.dtype(
    [
        ("normal", "<f4", (3,)),
        ("vertices", "<f4", (3, 3)),
        ("attribute", "<u2"),
    ]
)


@dataclass(frozen=True, slots=True)
class StlContents:
    """Parsed binary STL file."""

    header: bytes
    normals: NDArray[np.float32]    # shape (M, 3)
    triangles: NDArray[np.float32]  # shape (M, 3, 3)

    @property
    def triangle_count(self) -> int:
        return self.normals.shape[0]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def stl_header(text: str | bytes | None = None) -> bytes:
    """Return an 80-byte, zero-padded STL header.

    Raises:
        ConfigurationError: If the header is too long or starts with
            ``solid``, which readers would mistake for ASCII STL.
    """
    raw = DEFAULT_HEADER if text is None else text
    header = raw.encode("ascii") if isinstance(raw, str) else bytes(raw)
    if len(header) > HEADER_SIZE:
        raise ConfigurationError(
            f"STL header is {len(header)} bytes, maximum is {HEADER_SIZE}"
        )
    if header.lstrip().lower().startswith(b"solid"):
        raise ConfigurationError("STL header must not begin with 'solid'")
    return header.ljust(HEADER_SIZE, b"\x00")


def mesh_to_binary_stl(
    mesh: MeshData,
    scale: float = 1.0,
    header: str | bytes | None = None,
) -> bytes:
    """Serialise ``mesh`` to binary STL bytes.

    Vertices are multiplied by ``scale`` before the face normals are
    computed.

    Raises:
        ConfigurationError: If ``scale`` is not a positive finite number.
        GeometryError: If a face has zero area.
    """
    if not (np.isfinite(scale) and scale > 0):
        raise ConfigurationError(f"scale must be a positive number, got {scale!r}")

    head = stl_header(header)
    triangles = mesh.triangles(scale)
    normals = mesh.face_normals(scale)

    records = np.zeros(mesh.face_count, dtype=STL_TRIANGLE_DTYPE)
    records["normal"] = normals
    records["vertices"] = triangles

    count = np.array([mesh.face_count], dtype="<u4")
    return head + count.tobytes() + records.tobytes()


def stl_bytes(
    points: NDArray[np.float64],
    nchord: int,
    scale: float = 1.0,
    header: str | bytes | None = None,
) -> bytes:
    """Binary STL content for a wing point buffer with ``nchord``-point loops."""
    return mesh_to_binary_stl(mesh_from_points(points, nchord), scale=scale, header=header)


def write_stl(
    filename: str | os.PathLike,
    points: NDArray[np.float64],
    nchord: int,
    scale: float = 1.0,
    header: str | bytes | None = None,
) -> Path:
    """Write the closed mesh of ``points`` to a binary STL file.

    ``nchord`` must be the loop size used to build ``points`` so the facet
    connections can be recovered.  ``.stl`` is appended to ``filename`` when
    missing.  The mesh is fully serialised before the file is opened, so a
    degenerate triangle leaves nothing on disk.

    Returns:
        Path of the written file.
    """
    path = with_extension(filename, ".stl")
    payload = stl_bytes(points, nchord, scale=scale, header=header)

    with open(path, "wb") as fh:
        fh.write(payload)

    logger.info(
        "Wrote %d triangles (%d bytes) to %s",
        (len(payload) - HEADER_SIZE - 4) // STL_TRIANGLE_DTYPE.itemsize,
        len(payload),
        path,
    )
    return path


def write_wing_stl(
    filename: str | os.PathLike,
    wing: Wing,
    nchord: int = 100,
    nspan: int = 50,
    scale: float = 1.0,
) -> Path:
    """Build the full-span points of ``wing`` and write them as binary STL."""
    return write_stl(filename, wing.points(0.0, 1.0, nchord=nchord, nspan=nspan), nchord, scale=scale)


def read_stl(filename: str | os.PathLike) -> StlContents:
    """Parse a binary STL file.

    Raises:
        ValueError: If the file size does not match its triangle count.
    """
    data = Path(filename).read_bytes()
    if len(data) < HEADER_SIZE + 4:
        raise ValueError(f"{filename} is too short to be a binary STL file")

    (count,) = np.frombuffer(data, dtype="<u4", count=1, offset=HEADER_SIZE)
    expected = HEADER_SIZE + 4 + int(count) * STL_TRIANGLE_DTYPE.itemsize
    if len(data) != expected:
        raise ValueError(
            f"{filename} declares {int(count)} triangles ({expected} bytes) "
            f"but is {len(data)} bytes long"
        )

    records = np.frombuffer(data, dtype=STL_TRIANGLE_DTYPE, offset=HEADER_SIZE + 4)
    return StlContents(
        header=data[:HEADER_SIZE],
        normals=records["normal"].copy(),
        triangles=records["vertices"].copy(),
    )


def with_extension(filename: str | os.PathLike, suffix: str) -> Path:
    """Return ``filename`` as a Path, appending ``suffix`` unless already present."""
    path = Path(filename)
    if path.suffix.lower() != suffix:
        path = path.with_name(path.name + suffix)
    return path
