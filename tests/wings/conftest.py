"""Shared fixtures for wings tests."""

from __future__ import annotations

import numpy as np
import pytest

from wings.geometry.interface import Aerofoil, Planform
from wings.providers import SEAGULL, LiuAerofoil, LiuPlanform, RectangularPlanform


# ---------------------------------------------------------------------------
# Hand-built providers (exercise the capability contract directly)
# ---------------------------------------------------------------------------


class ConstantPlanform(Planform):
    """Quarter chord fixed at x = 1.0 with a 0.5 chord everywhere."""

    def quarter_chord(self, xi: float) -> float:
        return 1.0

    def chord(self, xi: float) -> float:
        return 0.5


class BoxAerofoil(Aerofoil):
    """Unit-height rectangle: upper and lower surfaces both at z = 1."""

    def aerofoil(self, xi: float, nchord: int = 100) -> np.ndarray:
        etas = np.linspace(0.0, 1.0, nchord // 2)
        half = [(eta, xi, 1.0) for eta in etas]
        return np.array(half + half[::-1])


@pytest.fixture
def constant_planform() -> ConstantPlanform:
    return ConstantPlanform()


@pytest.fixture
def box_aerofoil() -> BoxAerofoil:
    return BoxAerofoil()


# ---------------------------------------------------------------------------
# Library providers
# ---------------------------------------------------------------------------


@pytest.fixture
def rectangular_planform() -> RectangularPlanform:
    """0.3 chord rectangle, non-degenerate all the way to the tip."""
    return RectangularPlanform(0.3)


@pytest.fixture
def seagull_planform() -> LiuPlanform:
    return LiuPlanform.from_preset(SEAGULL, r=0.5, phi=0.6)


@pytest.fixture
def seagull_aerofoil() -> LiuAerofoil:
    return LiuAerofoil.from_preset(SEAGULL)
