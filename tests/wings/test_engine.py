"""Tests for wings/engine.py -- request to wing points and derived values."""

from __future__ import annotations

import pytest

from wings.engine import assemble_wing, compute_derived_values
from wings.errors import ConfigurationError
from wings.geometry.wing import Wing
from wings.models import WingRequest


class TestAssembleWing:
    def test_points_for_request(self) -> None:
        req = WingRequest.model_validate({"mesh": {"nchord": 12, "nspan": 4}})
        wing, points = assemble_wing(req)
        assert isinstance(wing, Wing)
        assert points.shape == (48, 3)

    def test_span_interval_respected(self) -> None:
        req = WingRequest.model_validate({"mesh": {"nchord": 8, "nspan": 3, "xi0": 0.2, "xi1": 0.6}})
        _wing, points = assemble_wing(req)
        assert points[0, 1] == pytest.approx(0.2)
        assert points[-1, 1] == pytest.approx(0.6)


class TestComputeDerivedValues:
    def test_defaults(self) -> None:
        values = compute_derived_values(WingRequest())
        assert values["area"] == pytest.approx(0.2)
        assert values["mean_chord"] == pytest.approx(0.2)
        assert values["aspect_ratio"] == pytest.approx(5.0)
        assert values["root_leading_edge"] == pytest.approx(-0.05)
        assert values["root_trailing_edge"] == pytest.approx(0.15)
        assert values["vertex_count"] == 5000
        assert values["triangle_count"] == 9996

    def test_tip_edges_at_requested_station(self) -> None:
        req = WingRequest.model_validate(
            {"planform": {"kind": "trapezoidal", "r": 0.0, "phi": 0.0, "c0": 0.4, "x": 0.0},
             "mesh": {"xi1": 0.5}}
        )
        values = compute_derived_values(req)
        assert values["tip_trailing_edge"] - values["tip_leading_edge"] == pytest.approx(0.2)

    def test_zero_area_rejected(self) -> None:
        req = WingRequest.model_validate({"planform": {"kind": "elliptical", "c1": 0.0, "c2": 0.0}})
        with pytest.raises(ConfigurationError, match="zero area"):
            compute_derived_values(req)
