"""Planform and aerofoil capability contracts plus derived planform quantities.

A planform answers two questions for a normalised spanwise station ``xi``
(0 = root, 1 = tip): where the quarter-chord line sits chordwise, and how
long the chord is.  An aerofoil answers for a closed loop of ``nchord``
normalised points at a station, and optionally for a single surface point.

Subclasses of :class:`Planform` / :class:`Aerofoil` cannot be instantiated
without the required methods.  Duck-typed providers that do not subclass the
bases are accepted too; :func:`require_planform` and :func:`require_aerofoil`
check them before any geometry is built.
"""

from __future__ import annotations

import abc
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import integrate

from wings.errors import ConfigurationError

# ---------------------------------------------------------------------------
# Capability contracts
# ---------------------------------------------------------------------------


class Planform(abc.ABC):
    """Quarter-chord line and chord distribution of a span-normalised wing."""

    @abc.abstractmethod
    def quarter_chord(self, xi: float) -> float:
        """Chordwise (x) coordinate of the quarter-chord point at ``xi``."""

    @abc.abstractmethod
    def chord(self, xi: float) -> float:
        """Chord length at ``xi``, normalised by the wing length."""


class Aerofoil(abc.ABC):
    """Family of unit-chord cross-sections along the span."""

    @abc.abstractmethod
    def aerofoil(self, xi: float, nchord: int = 100) -> NDArray[np.float64]:
        """Closed loop of ``nchord`` (eta, xi, z) points at station ``xi``.

        The loop starts at the leading edge on the upper surface, runs to the
        trailing edge and returns along the lower surface.
        """

    def aerofoil_pt(self, eta: float, xi: float, upper: bool = True) -> NDArray[np.float64]:
        """Single surface point at chordwise ``eta``.  Optional capability."""
        raise ConfigurationError(
            f"{type(self).__name__} does not provide direct point sampling "
            "(aerofoil_pt is not implemented)"
        )


_PLANFORM_METHODS = ("quarter_chord", "chord")
_AEROFOIL_METHODS = ("aerofoil",)


def _require(provider: Any, kind: str, methods: tuple[str, ...]) -> Any:
    missing = [m for m in methods if not callable(getattr(provider, m, None))]
    if missing:
        raise ConfigurationError(
            f"{type(provider).__name__} cannot be used as a {kind}: "
            f"missing required method(s) {', '.join(missing)}"
        )
    return provider


def require_planform(planform: Any) -> Planform:
    """Return ``planform`` if it provides quarter_chord() and chord()."""
    return _require(planform, "planform", _PLANFORM_METHODS)


def require_aerofoil(aerofoil: Any) -> Aerofoil:
    """Return ``aerofoil`` if it provides aerofoil()."""
    return _require(aerofoil, "aerofoil", _AEROFOIL_METHODS)


# ---------------------------------------------------------------------------
# Derived planform quantities
# ---------------------------------------------------------------------------


def leading_edge(xi: float, planform: Planform) -> float:
    """Chordwise coordinate of the leading edge at ``xi``."""
    return planform.quarter_chord(xi) - 0.25 * planform.chord(xi)


def trailing_edge(xi: float, planform: Planform) -> float:
    """Chordwise coordinate of the trailing edge at ``xi``."""
    return planform.quarter_chord(xi) + 0.75 * planform.chord(xi)


def planform_outline(planform: Planform, n: int = 100) -> NDArray[np.float64]:
    """Outline of the planform as ``n`` points in the z = 0 plane.

    Runs from the root leading edge out to the tip leading edge, then from
    the tip trailing edge back to the root trailing edge.
    """
    half = n // 2
    outward = np.linspace(0.0, 1.0, half)
    inward = outward[::-1]
    le = [(leading_edge(xi, planform), xi, 0.0) for xi in outward]
    te = [(trailing_edge(xi, planform), xi, 0.0) for xi in inward]
    return np.array(le + te, dtype=np.float64).reshape(-1, 3)


def mean_chord(planform: Planform) -> float:
    """Integral of the chord over the normalised span [0, 1].

    Because the span is normalised this is the mean chord in multiples of
    the wing length.
    """
    value, _abserr = integrate.quad(planform.chord, 0.0, 1.0)
    return float(value)


def area(planform: Planform) -> float:
    """Projected area in multiples of the wing length squared.

    Equal to the mean chord for a span-normalised planform.
    """
    return mean_chord(planform)


def aspect_ratio(planform: Planform) -> float:
    """span**2 / area, which is 1 / area for a unit span."""
    return 1.0 / area(planform)
