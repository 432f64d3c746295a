"""Avian wing planform and aerofoil after Liu et al. (2006).

Liu, T., Kuykendoll, K., Rhew, R. and Jones, S., "Avian Wing Geometry and
Kinematics", AIAA Journal 44(5), 2006.

The planform is a two-jointed quarter-chord line with a corrected elliptic
chord distribution.  The aerofoil is a Birnbaum-Glauert camber line plus and
minus a thickness distribution, both scaled by span-dependent maxima.
Measured coefficients for three birds are exposed as immutable records.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np
from numpy.typing import NDArray

from wings.errors import check_unit_interval
from wings.geometry.interface import Aerofoil, Planform
from wings.geometry.spacing import chordwise_coordinates

# Floor applied to the thickness so the two surfaces never touch.
MIN_THICKNESS = 0.001

# ---------------------------------------------------------------------------
# Coefficient records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiuCoefficients:
    """Fitted coefficients for one bird.

    - ``S``: 3 Birnbaum-Glauert camber line coefficients
    - ``A``: 4 thickness distribution coefficients
    - ``E``: 5 chord correction coefficients
    - ``zcmax``: 2 coefficients of the spanwise maximum camber
    - ``ztmax``: 2 coefficients of the spanwise maximum thickness
    - ``c0``: root chord normalised by wing length
    """

    S: tuple[float, float, float]
    A: tuple[float, float, float, float]
    E: tuple[float, float, float, float, float]
    zcmax: tuple[float, float]
    ztmax: tuple[float, float]
    c0: float


SEAGULL = LiuCoefficients(
    S=(3.8735, -0.807, 0.771),
    A=(-15.246, 26.482, -18.975, 4.6232),
    E=(26.08, -209.92, 637.21, -945.068, 695.03),
    zcmax=(0.14, 1.333),
    ztmax=(0.1, 3.546),
    c0=0.388,
)

MERGANSER = LiuCoefficients(
    S=(3.9385, 0.7466, 1.840),
    A=(-23.1743, 58.3057, -64.3674, 25.7629),
    E=(39.1, -323.8, 978.7, -1417.0, 1001.0),
    zcmax=(0.14, 1.333),
    ztmax=(0.05, 4.0),
    c0=0.423,
)

TEAL = LiuCoefficients(
    S=(3.9917, -0.3677, 0.0239),
    A=(1.7804, -13.6875, 18.276, -8.279),
    E=(-66.1, 435.6, -1203.0, 1664.1, -1130.2),
    zcmax=(0.11, 4.0),
    ztmax=(0.05, 4.0),
    c0=0.545,
)

LIU_PRESETS = MappingProxyType(
    {
        "seagull": SEAGULL,
        "merganser": MERGANSER,
        "teal": TEAL,
    }
)

# ---------------------------------------------------------------------------
# Closed-form pieces
# ---------------------------------------------------------------------------


def camber(eta, S, zc_max: float):
    """Birnbaum-Glauert mean camber line, normalised by chord."""
    series = sum(S[n] * (2 * eta - 1) ** n for n in range(3))
    return zc_max * eta * (1 - eta) * series


def max_camber(xi: float, zcmax) -> float:
    """Maximum camber at span station ``xi``."""
    return zcmax[0] / (1 + zcmax[1] * xi**1.4)


def thickness(eta, A, zt_max: float):
    """Thickness distribution, normalised by chord and floored at MIN_THICKNESS."""
    series = sum(A[n] * (eta ** (n + 2) - np.sqrt(eta)) for n in range(4))
    return np.maximum(MIN_THICKNESS, zt_max * series)


def max_thickness(xi: float, ztmax) -> float:
    """Maximum thickness at span station ``xi``."""
    return ztmax[0] / (1 + ztmax[1] * xi**1.4)


def base_chord(xi: float) -> float:
    """Uncorrected chord shape: constant inboard, parabolic outboard."""
    return 1.0 if 0.0 <= xi <= 0.5 else 4 * xi * (1 - xi)


def chord_correction(xi: float, E) -> float:
    return sum(E[n] * (xi ** (n + 3) - xi**8) for n in range(5))


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiuPlanform(Planform):
    """Liu et al. planform.

    - ``r``: relative length of the upper arm of the quarter-chord line
    - ``phi``: angle between upper and lower arm, in radians
    - ``E``: 5 chord correction coefficients
    - ``c0``: root chord normalised by wing length
    """

    r: float
    phi: float
    E: tuple[float, float, float, float, float]
    c0: float

    @classmethod
    def from_preset(cls, coeffs: LiuCoefficients, r: float, phi: float) -> LiuPlanform:
        return cls(r=r, phi=phi, E=coeffs.E, c0=coeffs.c0)

    def quarter_chord(self, xi: float) -> float:
        check_unit_interval("xi", xi)
        return 0.0 if xi < self.r else (xi - self.r) * math.tan(self.phi)

    def chord(self, xi: float) -> float:
        check_unit_interval("xi", xi)
        return self.c0 * (base_chord(xi) + chord_correction(xi, self.E))


@dataclass(frozen=True)
class LiuAerofoil(Aerofoil):
    """Liu et al. aerofoil: camber line plus/minus thickness.

    The owl section in the paper uses a different camber distribution and is
    not covered here.
    """

    S: tuple[float, float, float]
    A: tuple[float, float, float, float]
    zcmax: tuple[float, float]
    ztmax: tuple[float, float]

    @classmethod
    def from_preset(cls, coeffs: LiuCoefficients) -> LiuAerofoil:
        return cls(S=coeffs.S, A=coeffs.A, zcmax=coeffs.zcmax, ztmax=coeffs.ztmax)

    def _z(self, eta, xi: float, upper: bool):
        zc = camber(eta, self.S, max_camber(xi, self.zcmax))
        zt = thickness(eta, self.A, max_thickness(xi, self.ztmax))
        return zc + zt if upper else zc - zt

    def aerofoil_pt(self, eta: float, xi: float, upper: bool = True) -> NDArray[np.float64]:
        check_unit_interval("eta", eta)
        check_unit_interval("xi", xi)
        return np.array([eta, xi, self._z(eta, xi, upper)], dtype=np.float64)

    def aerofoil(self, xi: float, nchord: int = 100) -> NDArray[np.float64]:
        check_unit_interval("xi", xi)
        etas = chordwise_coordinates(nchord // 2)
        ordered = np.concatenate([etas, etas[::-1]])
        half = etas.shape[0]
        z = np.concatenate([self._z(etas, xi, True), self._z(etas, xi, False)[::-1]])
        loop = np.empty((2 * half, 3), dtype=np.float64)
        loop[:, 0] = ordered
        loop[:, 1] = xi
        loop[:, 2] = z
        return loop
