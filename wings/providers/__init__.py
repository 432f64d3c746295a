"""Ready-made planform and aerofoil providers."""

from __future__ import annotations

from wings.providers.liu import (
    LIU_PRESETS,
    MERGANSER,
    SEAGULL,
    TEAL,
    LiuAerofoil,
    LiuCoefficients,
    LiuPlanform,
)
from wings.providers.naca import NACA4, NACA00XX
from wings.providers.planforms import (
    EllipticalPlanform,
    EmpiricalPlanform,
    RectangularPlanform,
    TrapezoidalPlanform,
)

__all__ = [
    "EllipticalPlanform",
    "EmpiricalPlanform",
    "LIU_PRESETS",
    "LiuAerofoil",
    "LiuCoefficients",
    "LiuPlanform",
    "MERGANSER",
    "NACA00XX",
    "NACA4",
    "RectangularPlanform",
    "SEAGULL",
    "TEAL",
    "TrapezoidalPlanform",
]
