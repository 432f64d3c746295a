"""Simple closed-form and empirical planforms.

All lengths are normalised by the wing length, so ``xi`` runs from 0 at the
root to 1 at the tip.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from wings.errors import check_unit_interval
from wings.geometry.interface import Planform


@dataclass(frozen=True)
class RectangularPlanform(Planform):
    """Constant chord ``c`` with the quarter-chord line along x = 0."""

    c: float

    def quarter_chord(self, xi: float) -> float:
        return 0.0

    def chord(self, xi: float) -> float:
        return self.c


@dataclass(frozen=True)
class TrapezoidalPlanform(Planform):
    """Two-jointed quarter-chord line with a linearly tapering outer chord.

    Quarter chord (two-arm model):
    - ``r``: relative length of the upper arm
    - ``phi``: angle between the upper and lower arm, in radians

    Chord:
    - ``c0``: root chord
    - ``x``: station where the chord starts to decrease linearly, reaching
      zero at the tip

    ``TrapezoidalPlanform(r, 0.0, c, 1.0)`` is a rectangle of chord ``c``.
    """

    r: float
    phi: float
    c0: float
    x: float

    def quarter_chord(self, xi: float) -> float:
        check_unit_interval("xi", xi)
        return 0.0 if xi < self.r else (xi - self.r) * math.tan(self.phi)

    def chord(self, xi: float) -> float:
        check_unit_interval("xi", xi)
        if xi <= self.x:
            return self.c0
        return self.c0 - self.c0 * (xi - self.x) / (1 - self.x)


def _ellipse_half_width(xi: float, b: float) -> float:
    return math.sqrt((1 - xi**2) * b**2)


@dataclass(frozen=True)
class EllipticalPlanform(Planform):
    """Planform whose leading and trailing edges are quarter ellipses.

    - ``c1``: root distance from the origin to the leading edge
    - ``c2``: root distance from the origin to the trailing edge

    The root chord is ``c1 + c2``; with ``c1 == c2`` both edges lie on the
    same ellipse.
    """

    c1: float
    c2: float

    def chord(self, xi: float) -> float:
        check_unit_interval("xi", xi)
        return _ellipse_half_width(xi, self.c1) + _ellipse_half_width(xi, self.c2)

    def quarter_chord(self, xi: float) -> float:
        check_unit_interval("xi", xi)
        return -_ellipse_half_width(xi, self.c1) + 0.25 * self.chord(xi)


@dataclass(frozen=True)
class EmpiricalPlanform(Planform):
    """Planform traced from measured leading and trailing edges.

    ``le`` and ``te`` are callables (e.g. ``scipy.interpolate`` objects)
    returning the chordwise coordinate of each edge at a spanwise station.
    """

    le: Callable[[float], float]
    te: Callable[[float], float]

    def chord(self, xi: float) -> float:
        return abs(float(self.le(xi)) - float(self.te(xi)))

    def quarter_chord(self, xi: float) -> float:
        return float(self.le(xi)) + 0.25 * self.chord(xi)
