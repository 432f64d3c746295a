"""Wing assembly -- places normalised aerofoils onto a planform and stacks them.

Each span station's loop is scaled by the local chord and then translated so
its leading edge sits on the planform leading edge.  Stations are appended
root to tip into one flat ``(nchord * nspan, 3)`` buffer, so point ``j`` of
station ``k`` lives at row ``k * nchord + j``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from wings.errors import ConfigurationError
from wings.geometry.interface import (
    Aerofoil,
    Planform,
    area,
    aspect_ratio,
    leading_edge,
    mean_chord,
    planform_outline,
    require_aerofoil,
    require_planform,
    trailing_edge,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------


def scale_aerofoil(xi: float, loop: Any, planform: Planform) -> NDArray[np.float64]:
    """Scale the chordwise and height components of ``loop`` by chord(xi).

    The leading edge of the normalised loop must be at x = 0.  The spanwise
    component is left untouched.
    """
    pts = np.array(loop, dtype=np.float64).reshape(-1, 3)
    c = planform.chord(xi)
    pts[:, 0] *= c
    pts[:, 2] *= c
    return pts


def translate_aerofoil(xi: float, loop: Any, planform: Planform) -> NDArray[np.float64]:
    """Shift ``loop`` chordwise so x = 0 lands on the leading edge at ``xi``.

    Expects an already scaled loop: the offset is the planform leading edge,
    which depends on the real chord.
    """
    pts = np.array(loop, dtype=np.float64).reshape(-1, 3)
    pts[:, 0] += leading_edge(xi, planform)
    return pts


def place_aerofoil(xi: float, loop: Any, planform: Planform) -> NDArray[np.float64]:
    """Scale then translate a normalised loop onto the planform at ``xi``."""
    return translate_aerofoil(xi, scale_aerofoil(xi, loop, planform), planform)


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def span_stations(xi0: float, xi1: float, nspan: int) -> NDArray[np.float64]:
    """``nspan`` uniformly spaced stations from ``xi0`` to ``xi1`` inclusive."""
    return np.linspace(xi0, xi1, nspan)


def build_wing(
    planform: Planform,
    aerofoil: Aerofoil,
    xi0: float = 0.0,
    xi1: float = 1.0,
    nchord: int = 100,
    nspan: int = 50,
) -> NDArray[np.float64]:
    """Generate the surface points of a wing.

    Args:
        planform: Provider of quarter_chord() and chord().
        aerofoil: Provider of aerofoil().
        xi0:      First spanwise station (root side).
        xi1:      Last spanwise station (tip side).
        nchord:   Points per aerofoil loop.
        nspan:    Number of aerofoil loops along the span.

    Returns:
        Array of shape ``(nchord * nspan, 3)``.  Each station runs from the
        leading edge over the upper surface to the trailing edge and back
        along the lower surface; stations are ordered from ``xi0`` to ``xi1``.

    Raises:
        ConfigurationError: If a provider lacks a required method, a count is
            not positive, or the aerofoil returns a loop of the wrong length.
    """
    require_planform(planform)
    require_aerofoil(aerofoil)
    if nchord < 1 or nspan < 1:
        raise ConfigurationError(
            f"nchord and nspan must be positive, got nchord={nchord}, nspan={nspan}"
        )

    logger.debug(
        "Building wing: %s / %s, xi=[%.3f, %.3f], nchord=%d, nspan=%d",
        type(planform).__name__, type(aerofoil).__name__, xi0, xi1, nchord, nspan,
    )

    sections: list[NDArray[np.float64]] = []
    for xi in span_stations(xi0, xi1, nspan):
        xi = float(xi)
        loop = np.asarray(aerofoil.aerofoil(xi, nchord), dtype=np.float64).reshape(-1, 3)
        if loop.shape[0] != nchord:
            raise ConfigurationError(
                f"{type(aerofoil).__name__}.aerofoil returned {loop.shape[0]} points "
                f"at xi={xi}, expected nchord={nchord}"
            )
        sections.append(place_aerofoil(xi, loop, planform))

    return np.vstack(sections)


# ---------------------------------------------------------------------------
# Wing container
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Wing:
    """A planform and an aerofoil distribution that together define a wing.

    Forwards the planform queries, so a Wing can be passed wherever a
    planform is expected.
    """

    planform: Planform
    aerofoil: Aerofoil

    def __post_init__(self) -> None:
        require_planform(self.planform)
        require_aerofoil(self.aerofoil)

    def points(
        self,
        xi0: float = 0.0,
        xi1: float = 1.0,
        nchord: int = 100,
        nspan: int = 50,
    ) -> NDArray[np.float64]:
        return build_wing(self.planform, self.aerofoil, xi0, xi1, nchord=nchord, nspan=nspan)

    def quarter_chord(self, xi: float) -> float:
        return self.planform.quarter_chord(xi)

    def chord(self, xi: float) -> float:
        return self.planform.chord(xi)

    def leading_edge(self, xi: float) -> float:
        return leading_edge(xi, self.planform)

    def trailing_edge(self, xi: float) -> float:
        return trailing_edge(xi, self.planform)

    def aerofoil_loop(self, xi: float, nchord: int = 100) -> NDArray[np.float64]:
        return self.aerofoil.aerofoil(xi, nchord)

    def aerofoil_pt(self, eta: float, xi: float, upper: bool = True) -> NDArray[np.float64]:
        return self.aerofoil.aerofoil_pt(eta, xi, upper)

    def outline(self, n: int = 100) -> NDArray[np.float64]:
        return planform_outline(self.planform, n)

    def mean_chord(self) -> float:
        return mean_chord(self.planform)

    def area(self) -> float:
        return area(self.planform)

    def aspect_ratio(self) -> float:
        return aspect_ratio(self.planform)
