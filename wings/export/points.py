"""Plain-text point export -- one wing point per line."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from wings.export.stl import with_extension

if TYPE_CHECKING:
    from wings.geometry.wing import Wing

logger = logging.getLogger("wings.export")


def points_text(points: NDArray[np.float64], delimiter: str = " ") -> str:
    """Format ``points`` as lines of ``delimiter``-joined coordinates.

    Coordinates use ``repr`` so the text round-trips to the same floats.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    return "".join(
        delimiter.join(repr(float(v)) for v in pt) + "\n" for pt in pts
    )


def write_pts(
    filename: str | os.PathLike,
    points: NDArray[np.float64],
    delimiter: str = " ",
) -> Path:
    """Write each point of ``points`` to a text file.

    ``.txt`` is appended to ``filename`` when missing.

    Returns:
        Path of the written file.
    """
    path = with_extension(filename, ".txt")
    text = points_text(points, delimiter)

    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)

    logger.info("Wrote %d points to %s", text.count("\n"), path)
    return path


def write_wing_pts(
    filename: str | os.PathLike,
    wing: Wing,
    nchord: int = 100,
    nspan: int = 50,
    delimiter: str = " ",
) -> Path:
    """Build the full-span points of ``wing`` and write them as text."""
    return write_pts(filename, wing.points(0.0, 1.0, nchord=nchord, nspan=nspan), delimiter)
