"""Export packaging -- writes STL / point files for a request into temp files.

Files are written under EXPORT_TMP_DIR with a unique name and the path is
returned; the caller deletes the file after streaming it.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from wings.engine import assemble_wing
from wings.export.points import write_pts
from wings.export.stl import write_stl
from wings.models import WingRequest

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EXPORT_TMP_DIR: Path = Path(os.environ.get("WINGS_DATA_DIR", tempfile.gettempdir())) / "tmp"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def export_filename(request: WingRequest, suffix: str) -> str:
    """Download filename for ``request``, e.g. ``my_wing.stl``."""
    return f"{request.name.strip().replace(' ', '_')}{suffix}"


def _make_temp_path(suffix: str) -> Path:
    """Create an empty temp file in EXPORT_TMP_DIR and return its path."""
    EXPORT_TMP_DIR.mkdir(parents=True, exist_ok=True)
    tmp_file = tempfile.NamedTemporaryFile(
        dir=str(EXPORT_TMP_DIR),
        prefix="wings_",
        suffix=suffix,
        delete=False,
    )
    tmp_file.close()
    return Path(tmp_file.name)


def _discard_on_error(path: Path, write) -> Path:
    try:
        return write(path)
    except BaseException:
        path.unlink(missing_ok=True)
        raise


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_stl_file(request: WingRequest) -> Path:
    """Generate the wing for ``request`` and write it as binary STL.

    Returns:
        Path to the temp .stl file, closed and ready for streaming.
    """
    _wing, points = assemble_wing(request)
    tmp_path = _make_temp_path(".stl")
    return _discard_on_error(
        tmp_path,
        lambda p: write_stl(p, points, request.mesh.nchord, scale=request.mesh.scale),
    )


def build_points_file(request: WingRequest) -> Path:
    """Generate the wing for ``request`` and write its points as text.

    Points are multiplied by the requested scale, like the STL export.

    Returns:
        Path to the temp .txt file, closed and ready for streaming.
    """
    _wing, points = assemble_wing(request)
    tmp_path = _make_temp_path(".txt")
    return _discard_on_error(
        tmp_path,
        lambda p: write_pts(p, points * request.mesh.scale, delimiter=request.delimiter),
    )
