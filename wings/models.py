"""Pydantic models -- request/response contract of the HTTP service.

Provider specs are tagged by ``kind`` and turned into provider objects with
``build()``.  Responses use camelCase keys via CamelModel; requests accept
both camelCase and snake_case (populate_by_name=True).
"""

from __future__ import annotations

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from wings.geometry.interface import Aerofoil, Planform
from wings.providers import (
    LIU_PRESETS,
    NACA4,
    EllipticalPlanform,
    LiuAerofoil,
    LiuPlanform,
    NACA00XX,
    RectangularPlanform,
    TrapezoidalPlanform,
)

# ---------------------------------------------------------------------------
# Literal Types
# ---------------------------------------------------------------------------

LiuPreset = Literal["seagull", "merganser", "teal"]


# ---------------------------------------------------------------------------
# Base model for camelCase serialization
# ---------------------------------------------------------------------------

class CamelModel(BaseModel):
    """Base for models serialized with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


# ---------------------------------------------------------------------------
# Mesh resolution
# ---------------------------------------------------------------------------

class MeshSettings(CamelModel):
    """Resolution, span interval and output scale of a generated wing."""

    nchord: int = Field(default=100, ge=4, le=2000)
    nspan: int = Field(default=50, ge=2, le=1000)
    xi0: float = Field(default=0.0, ge=0.0, le=1.0)
    xi1: float = Field(default=1.0, ge=0.0, le=1.0)
    scale: float = Field(default=1.0, gt=0.0)

    @field_validator("nchord")
    @classmethod
    def nchord_must_be_even(cls, v: int) -> int:
        """End caps pair each upper point with a lower point."""
        if v % 2 != 0:
            raise ValueError(f"nchord must be even, got {v}")
        return v

    @field_validator("scale")
    @classmethod
    def scale_must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("scale must be finite")
        return v

    @model_validator(mode="after")
    def span_interval_ordered(self) -> MeshSettings:
        if self.xi0 >= self.xi1:
            raise ValueError(f"xi0 ({self.xi0}) must be less than xi1 ({self.xi1})")
        return self


# ---------------------------------------------------------------------------
# Planform specs
# ---------------------------------------------------------------------------

class RectangularPlanformSpec(CamelModel):
    kind: Literal["rectangular"] = "rectangular"
    c: float = Field(default=0.2, gt=0.0, le=2.0)

    def build(self) -> Planform:
        return RectangularPlanform(c=self.c)


class TrapezoidalPlanformSpec(CamelModel):
    kind: Literal["trapezoidal"] = "trapezoidal"
    r: float = Field(default=0.5, ge=0.0, le=1.0)
    phi: float = Field(default=0.0, ge=-1.5, le=1.5)
    c0: float = Field(default=0.3, gt=0.0, le=2.0)
    x: float = Field(default=0.5, ge=0.0, le=1.0)

    def build(self) -> Planform:
        return TrapezoidalPlanform(r=self.r, phi=self.phi, c0=self.c0, x=self.x)


class EllipticalPlanformSpec(CamelModel):
    kind: Literal["elliptical"] = "elliptical"
    c1: float = Field(default=0.1, ge=0.0, le=1.0)
    c2: float = Field(default=0.1, ge=0.0, le=1.0)

    def build(self) -> Planform:
        return EllipticalPlanform(c1=self.c1, c2=self.c2)


class LiuPlanformSpec(CamelModel):
    """Liu et al. planform from measured bird coefficients."""

    kind: Literal["liu"] = "liu"
    preset: LiuPreset = "seagull"
    r: float = Field(default=0.5, ge=0.0, le=1.0)
    phi: float = Field(default=0.6, ge=-1.5, le=1.5)

    def build(self) -> Planform:
        return LiuPlanform.from_preset(LIU_PRESETS[self.preset], r=self.r, phi=self.phi)


PlanformSpec = Annotated[
    Union[
        RectangularPlanformSpec,
        TrapezoidalPlanformSpec,
        EllipticalPlanformSpec,
        LiuPlanformSpec,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Aerofoil specs
# ---------------------------------------------------------------------------

class Naca00AerofoilSpec(CamelModel):
    kind: Literal["naca00"] = "naca00"
    xx: float = Field(default=12.0, gt=0.0, le=40.0)

    def build(self) -> Aerofoil:
        return NACA00XX(xx=self.xx)


class Naca4AerofoilSpec(CamelModel):
    kind: Literal["naca4"] = "naca4"
    m: float = Field(default=2.0, ge=0.0, le=9.5)
    p: float = Field(default=4.0, gt=0.0, lt=10.0)
    xx: float = Field(default=12.0, gt=0.0, le=40.0)

    def build(self) -> Aerofoil:
        return NACA4(m=self.m, p=self.p, xx=self.xx)


class LiuAerofoilSpec(CamelModel):
    kind: Literal["liu"] = "liu"
    preset: LiuPreset = "seagull"

    def build(self) -> Aerofoil:
        return LiuAerofoil.from_preset(LIU_PRESETS[self.preset])


AerofoilSpec = Annotated[
    Union[Naca00AerofoilSpec, Naca4AerofoilSpec, LiuAerofoilSpec],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Requests / responses
# ---------------------------------------------------------------------------

class WingRequest(CamelModel):
    """A wing to generate: providers, resolution and export options."""

    name: str = Field(default="wing", min_length=1, max_length=64)
    planform: PlanformSpec = Field(default_factory=RectangularPlanformSpec)
    aerofoil: AerofoilSpec = Field(default_factory=LiuAerofoilSpec)
    mesh: MeshSettings = Field(default_factory=MeshSettings)
    delimiter: str = Field(default=" ", min_length=1, max_length=4)

    @field_validator("name")
    @classmethod
    def name_is_filename_safe(cls, v: str) -> str:
        """Names become download filenames; reject path separators."""
        if any(ch in v for ch in "/\\\x00") or v.strip(". ") == "":
            raise ValueError(f"invalid wing name {v!r}")
        return v


class DerivedValues(CamelModel):
    """Planform quantities and mesh sizes computed for a WingRequest."""

    area: float
    mean_chord: float
    aspect_ratio: float
    root_leading_edge: float
    root_trailing_edge: float
    tip_leading_edge: float
    tip_trailing_edge: float
    vertex_count: int
    triangle_count: int
