"""NACA four-digit aerofoils.

Thickness distribution (unit chord):

    yt = 5 t (0.2969 sqrt(x) - 0.126 x - 0.3516 x^2 + 0.2843 x^3 - 0.1036 x^4)

The cambered series adds the usual two-parabola mean line and applies the
thickness perpendicular to it.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from wings.errors import ConfigurationError, check_unit_interval
from wings.geometry.interface import Aerofoil
from wings.geometry.spacing import chordwise_coordinates

# ---------------------------------------------------------------------------
# Closed-form pieces
# ---------------------------------------------------------------------------


def naca4_thickness(x):
    """Half-thickness polynomial without the 5t factor."""
    return 0.2969 * np.sqrt(x) - 0.126 * x - 0.3516 * x**2 + 0.2843 * x**3 - 0.1036 * x**4


def naca4_camber_front(x, m: float, p: float):
    return m / p**2 * (2 * p * x - x**2)


def naca4_camber_back(x, m: float, p: float):
    return m / (1 - p) ** 2 * (1 - 2 * p + 2 * p * x - x**2)


def naca4_camber_gradient_front(x, m: float, p: float):
    return 2 * m / p**2 * (p - x)


def naca4_camber_gradient_back(x, m: float, p: float):
    return 2 * m / (1 - p) ** 2 * (p - x)


def _surface_loop(upper: NDArray[np.float64], lower: NDArray[np.float64], xi: float) -> NDArray[np.float64]:
    """Stack (x, z) upper and lower surfaces into an (n, 3) loop at ``xi``."""
    xz = np.concatenate([upper, lower[::-1]])
    loop = np.empty((xz.shape[0], 3), dtype=np.float64)
    loop[:, 0] = xz[:, 0]
    loop[:, 1] = xi
    loop[:, 2] = xz[:, 1]
    return loop


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NACA00XX(Aerofoil):
    """Symmetric NACA 00XX aerofoil, constant along the span.

    ``xx`` is the maximum thickness as a percentage of chord; the maximum
    occurs at 0.3c.
    """

    xx: float

    def _z(self, eta, upper: bool):
        sign = 1.0 if upper else -1.0
        return sign * 5 * self.xx / 100 * naca4_thickness(eta)

    def aerofoil_pt(self, eta: float, xi: float, upper: bool = True) -> NDArray[np.float64]:
        check_unit_interval("eta", eta)
        return np.array([eta, xi, self._z(eta, upper)], dtype=np.float64)

    def aerofoil(self, xi: float, nchord: int = 100) -> NDArray[np.float64]:
        etas = chordwise_coordinates(nchord // 2)
        upper = np.column_stack([etas, self._z(etas, True)])
        lower = np.column_stack([etas, self._z(etas, False)])
        return _surface_loop(upper, lower, xi)


@dataclass(frozen=True)
class NACA4(Aerofoil):
    """Cambered NACA four-digit aerofoil, e.g. ``NACA4(2, 4, 12)`` for 2412.

    - ``m``: maximum camber in percent of chord
    - ``p``: position of maximum camber in tenths of chord
    - ``xx``: maximum thickness in percent of chord
    """

    m: float
    p: float
    xx: float

    def __post_init__(self) -> None:
        if self.m != 0 and not 0 < self.p < 10:
            raise ConfigurationError(
                f"NACA4 camber position p must be between 0 and 10 tenths, got {self.p}"
            )

    def _surface(self, eta, upper: bool):
        """(x, z) of the upper or lower surface at chordwise ``eta``."""
        yt = 5 * (self.xx / 100) * naca4_thickness(eta)

        m = self.m / 100
        p = self.p / 10
        if m == 0:
            yc = np.zeros_like(eta, dtype=np.float64)
            dyc_dx = np.zeros_like(eta, dtype=np.float64)
        else:
            front = eta <= p
            yc = np.where(front, naca4_camber_front(eta, m, p), naca4_camber_back(eta, m, p))
            dyc_dx = np.where(
                front,
                naca4_camber_gradient_front(eta, m, p),
                naca4_camber_gradient_back(eta, m, p),
            )

        theta = np.arctan(dyc_dx)
        if upper:
            return eta - yt * np.sin(theta), yc + yt * np.cos(theta)
        return eta + yt * np.sin(theta), yc - yt * np.cos(theta)

    def aerofoil_pt(self, eta: float, xi: float, upper: bool = True) -> NDArray[np.float64]:
        check_unit_interval("eta", eta)
        x, z = self._surface(eta, upper)
        return np.array([x, xi, z], dtype=np.float64)

    def aerofoil(self, xi: float, nchord: int = 100) -> NDArray[np.float64]:
        etas = chordwise_coordinates(nchord // 2)
        upper = np.column_stack(self._surface(etas, True))
        lower = np.column_stack(self._surface(etas, False))
        return _surface_loop(upper, lower, xi)
