"""Tests for wings/models.py -- request validation and provider specs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wings.models import (
    DerivedValues,
    LiuAerofoilSpec,
    LiuPlanformSpec,
    MeshSettings,
    Naca4AerofoilSpec,
    RectangularPlanformSpec,
    WingRequest,
)
from wings.providers import NACA4, LiuAerofoil, LiuPlanform, RectangularPlanform


class TestMeshSettings:
    def test_defaults(self) -> None:
        mesh = MeshSettings()
        assert (mesh.nchord, mesh.nspan, mesh.xi0, mesh.xi1, mesh.scale) == (100, 50, 0.0, 1.0, 1.0)

    def test_odd_nchord_rejected(self) -> None:
        with pytest.raises(ValidationError, match="even"):
            MeshSettings(nchord=11)

    @pytest.mark.parametrize("field,value", [("nchord", 2), ("nspan", 1), ("scale", 0.0), ("xi1", 1.5)])
    def test_bounds(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            MeshSettings(**{field: value})

    def test_infinite_scale_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeshSettings(scale=float("inf"))

    def test_span_interval_ordered(self) -> None:
        with pytest.raises(ValidationError, match="xi0"):
            MeshSettings(xi0=0.6, xi1=0.4)


class TestWingRequest:
    def test_defaults(self) -> None:
        req = WingRequest()
        assert isinstance(req.planform, RectangularPlanformSpec)
        assert isinstance(req.aerofoil, LiuAerofoilSpec)
        assert req.name == "wing"

    def test_camel_case_input(self) -> None:
        req = WingRequest.model_validate(
            {"planform": {"kind": "liu", "preset": "teal"}, "mesh": {"nchord": 20, "xi1": 0.9}}
        )
        assert isinstance(req.planform, LiuPlanformSpec)
        assert req.planform.preset == "teal"
        assert req.mesh.nchord == 20

    def test_discriminator_selects_aerofoil(self) -> None:
        req = WingRequest.model_validate({"aerofoil": {"kind": "naca4", "m": 4, "p": 4, "xx": 15}})
        assert isinstance(req.aerofoil, Naca4AerofoilSpec)
        assert req.aerofoil.build() == NACA4(4, 4, 15)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WingRequest.model_validate({"planform": {"kind": "delta"}})

    def test_unknown_preset_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WingRequest.model_validate({"aerofoil": {"kind": "liu", "preset": "owl"}})

    @pytest.mark.parametrize("name", ["../etc", "a/b", "..", "  "])
    def test_unsafe_names_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError):
            WingRequest(name=name)


class TestBuild:
    def test_rectangular(self) -> None:
        assert RectangularPlanformSpec(c=0.4).build() == RectangularPlanform(0.4)

    def test_liu_planform(self) -> None:
        pl = LiuPlanformSpec(preset="merganser", r=0.4, phi=0.3).build()
        assert isinstance(pl, LiuPlanform)
        assert pl.r == 0.4

    def test_liu_aerofoil(self) -> None:
        assert isinstance(LiuAerofoilSpec().build(), LiuAerofoil)


class TestDerivedValues:
    def test_serialises_camel_case(self) -> None:
        values = DerivedValues(
            area=0.2,
            mean_chord=0.2,
            aspect_ratio=5.0,
            root_leading_edge=-0.05,
            root_trailing_edge=0.15,
            tip_leading_edge=-0.05,
            tip_trailing_edge=0.15,
            vertex_count=5000,
            triangle_count=9996,
        )
        data = values.model_dump(by_alias=True)
        assert data["meanChord"] == 0.2
        assert data["triangleCount"] == 9996
