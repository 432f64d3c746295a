"""Triangle connectivity for the row-major wing point buffer.

The buffer is treated as an ``nspan x nchord`` grid that is closed around
each aerofoil loop and open along the span.  All indices returned here are
one-based: index ``k * nchord + j + 1`` is point ``j`` of station ``k``.

For ``nchord = 10`` the first quad between stations 1 and 2 is
``(1, 11, 12), (12, 2, 1)`` and the quad that closes the loop is
``(10, 20, 11), (11, 1, 10)``.
"""

from __future__ import annotations

from wings.errors import ConfigurationError

Triangle = tuple[int, int, int]


def vertex_conn(i: int, nchord: int) -> list[Triangle]:
    """Two triangles filling the quad whose lower-left corner is point ``i``.

    Point ``i`` is paired with the same chordwise point on the next station
    (``i + nchord``).  The last point of a loop wraps back to the first.
    """
    if i % nchord != 0:
        return [(i, i + nchord, i + 1 + nchord), (i + 1 + nchord, i + 1, i)]
    return [(i, i + nchord, i + 1), (i + 1, i + 1 - nchord, i)]


def get_conns(nchord: int, nspan: int) -> list[Triangle]:
    """Surface triangles for a wing of ``nspan`` stations of ``nchord`` points.

    Returns ``2 * nchord * (nspan - 1)`` triangles, ordered station pair by
    station pair and chordwise index by chordwise index.
    """
    if nchord < 2:
        raise ConfigurationError(f"nchord must be at least 2, got {nchord}")
    return [
        tri
        for station in range(nspan - 1)
        for pt in range(1, nchord + 1)
        for tri in vertex_conn(pt + station * nchord, nchord)
    ]


def _check_cap(nchord: int) -> None:
    if nchord % 2 != 0:
        raise ConfigurationError(
            f"nchord must be even to close the wing ends, got {nchord}"
        )
    if nchord < 4:
        raise ConfigurationError(
            f"nchord must be at least 4 to close the wing ends, got {nchord}"
        )


def root_cap_conns(nchord: int) -> list[Triangle]:
    """Triangles closing the root loop.

    Upper point ``i`` is paired with its mirror ``nchord + 1 - i`` on the
    lower surface, giving ``nchord // 2 - 1`` quads.  Both triangles of a
    quad share the winding of the surface triangles along the root loop, so
    every edge of the closed mesh is traversed once in each direction.
    """
    _check_cap(nchord)
    conns: list[Triangle] = []
    for i in range(1, nchord // 2):
        mirror = nchord + 1 - i
        conns.append((i, i + 1, mirror))
        conns.append((mirror, i + 1, mirror - 1))
    return conns


def tip_cap_conns(nchord: int, nspan: int) -> list[Triangle]:
    """Triangles closing the tip loop.

    Same pairing as the root, shifted to the last station and wound the
    other way so that the cap faces away from the root cap.
    """
    offset = nchord * (nspan - 1)
    return [(c + offset, b + offset, a + offset) for a, b, c in root_cap_conns(nchord)]


def solid_conns(nchord: int, nspan: int) -> list[Triangle]:
    """Surface triangles followed by the root cap and the tip cap."""
    _check_cap(nchord)
    if nspan < 2:
        raise ConfigurationError(
            f"nspan must be at least 2 to build a closed solid, got {nspan}"
        )
    return get_conns(nchord, nspan) + root_cap_conns(nchord) + tip_cap_conns(nchord, nspan)


def solid_triangle_count(nchord: int, nspan: int) -> int:
    """Number of triangles in the closed mesh built by :func:`solid_conns`."""
    return 2 * nchord * (nspan - 1) + 2 * (nchord // 2 - 1) * 2
