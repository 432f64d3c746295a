"""Tests for wings/geometry/wing.py -- aerofoil placement and point assembly."""

from __future__ import annotations

import numpy as np
import pytest

from wings.errors import ConfigurationError
from wings.geometry.interface import Aerofoil
from wings.geometry.wing import (
    Wing,
    build_wing,
    place_aerofoil,
    scale_aerofoil,
    span_stations,
    translate_aerofoil,
)
from wings.providers import NACA4, RectangularPlanform, TrapezoidalPlanform


class ShortAerofoil(Aerofoil):
    """Returns one point fewer than requested."""

    def aerofoil(self, xi: float, nchord: int = 100) -> np.ndarray:
        return np.zeros((nchord - 1, 3))


# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------


class TestPlacement:
    def test_scale_multiplies_x_and_z_only(self, constant_planform) -> None:
        loop = np.array([[1.0, 0.3, 1.0], [0.5, 0.3, -0.2]])
        scaled = scale_aerofoil(0.3, loop, constant_planform)
        np.testing.assert_allclose(scaled, [[0.5, 0.3, 0.5], [0.25, 0.3, -0.1]])

    def test_scale_does_not_mutate_input(self, constant_planform) -> None:
        loop = np.array([[1.0, 0.3, 1.0]])
        scale_aerofoil(0.3, loop, constant_planform)
        assert loop[0, 0] == 1.0

    def test_scale_then_translate(self, constant_planform) -> None:
        """Trailing edge of a unit loop lands on TE = qc + 0.75 c."""
        loop = np.array([[1.0, 0.3, 1.0]])
        placed = translate_aerofoil(0.3, scale_aerofoil(0.3, loop, constant_planform), constant_planform)
        np.testing.assert_allclose(placed, [[1.375, 0.3, 0.5]])

    def test_leading_edge_lands_on_planform(self, constant_planform) -> None:
        placed = place_aerofoil(0.7, [[0.0, 0.7, 0.0]], constant_planform)
        np.testing.assert_allclose(placed, [[0.875, 0.7, 0.0]])

    def test_span_stations_inclusive(self) -> None:
        np.testing.assert_allclose(span_stations(0.2, 0.8, 4), [0.2, 0.4, 0.6, 0.8])


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class TestBuildWing:
    @pytest.mark.parametrize("nchord,nspan", [(4, 2), (10, 5), (100, 50)])
    def test_buffer_length(self, constant_planform, box_aerofoil, nchord: int, nspan: int) -> None:
        pts = build_wing(constant_planform, box_aerofoil, nchord=nchord, nspan=nspan)
        assert pts.shape == (nchord * nspan, 3)
        assert pts.dtype == np.float64

    def test_stations_ordered_root_to_tip(self, rectangular_planform, seagull_aerofoil) -> None:
        nchord, nspan = 10, 6
        pts = build_wing(rectangular_planform, seagull_aerofoil, 0.1, 0.9, nchord=nchord, nspan=nspan)
        stations = np.linspace(0.1, 0.9, nspan)
        for k, xi in enumerate(stations):
            block = pts[k * nchord:(k + 1) * nchord]
            np.testing.assert_allclose(block[:, 1], xi)

    def test_each_station_is_placed_loop(self, rectangular_planform, seagull_aerofoil) -> None:
        nchord = 20
        pts = build_wing(rectangular_planform, seagull_aerofoil, nchord=nchord, nspan=3)
        expected = place_aerofoil(0.5, seagull_aerofoil.aerofoil(0.5, nchord), rectangular_planform)
        np.testing.assert_allclose(pts[nchord:2 * nchord], expected)

    def test_leading_edge_follows_swept_planform(self) -> None:
        pl = TrapezoidalPlanform(0.0, 0.5, 0.3, 1.0)
        nchord, nspan = 20, 5
        pts = build_wing(pl, NACA4(0, 4, 12), nchord=nchord, nspan=nspan)
        for k, xi in enumerate(np.linspace(0.0, 1.0, nspan)):
            lead = pts[k * nchord]
            assert lead[0] == pytest.approx(pl.quarter_chord(xi) - 0.25 * pl.chord(xi))

    def test_loop_length_mismatch(self, constant_planform) -> None:
        with pytest.raises(ConfigurationError, match="expected nchord=10"):
            build_wing(constant_planform, ShortAerofoil(), nchord=10, nspan=3)

    def test_odd_nchord_loop_mismatch(self, rectangular_planform, seagull_aerofoil) -> None:
        """Loops are built from nchord // 2 points per surface."""
        with pytest.raises(ConfigurationError):
            build_wing(rectangular_planform, seagull_aerofoil, nchord=11, nspan=3)

    @pytest.mark.parametrize("nchord,nspan", [(0, 5), (10, 0), (-2, 3)])
    def test_non_positive_counts(self, constant_planform, box_aerofoil, nchord: int, nspan: int) -> None:
        with pytest.raises(ConfigurationError):
            build_wing(constant_planform, box_aerofoil, nchord=nchord, nspan=nspan)

    def test_missing_provider_method(self, box_aerofoil) -> None:
        with pytest.raises(ConfigurationError, match="quarter_chord"):
            build_wing(object(), box_aerofoil, nchord=10, nspan=3)  # type: ignore[arg-type]

    def test_deterministic(self, rectangular_planform, seagull_aerofoil) -> None:
        a = build_wing(rectangular_planform, seagull_aerofoil, nchord=30, nspan=7)
        b = build_wing(rectangular_planform, seagull_aerofoil, nchord=30, nspan=7)
        np.testing.assert_array_equal(a, b)


# ---------------------------------------------------------------------------
# Wing container
# ---------------------------------------------------------------------------


class TestWing:
    def test_forwards_planform_queries(self, constant_planform, box_aerofoil) -> None:
        wing = Wing(constant_planform, box_aerofoil)
        assert wing.quarter_chord(0.2) == 1.0
        assert wing.chord(0.2) == 0.5
        assert wing.leading_edge(0.2) == 0.875
        assert wing.trailing_edge(0.2) == 1.375

    def test_points_match_build_wing(self, rectangular_planform, seagull_aerofoil) -> None:
        wing = Wing(rectangular_planform, seagull_aerofoil)
        np.testing.assert_array_equal(
            wing.points(0.0, 0.5, nchord=10, nspan=4),
            build_wing(rectangular_planform, seagull_aerofoil, 0.0, 0.5, nchord=10, nspan=4),
        )

    def test_integrals(self) -> None:
        wing = Wing(RectangularPlanform(0.25), NACA4(2, 4, 12))
        assert wing.mean_chord() == pytest.approx(0.25)
        assert wing.area() == pytest.approx(0.25)
        assert wing.aspect_ratio() == pytest.approx(4.0)

    def test_outline_and_loop(self, rectangular_planform, seagull_aerofoil) -> None:
        wing = Wing(rectangular_planform, seagull_aerofoil)
        assert wing.outline(40).shape == (40, 3)
        assert wing.aerofoil_loop(0.3, 16).shape == (16, 3)

    def test_point_sampling_forwarded(self, rectangular_planform, seagull_aerofoil) -> None:
        wing = Wing(rectangular_planform, seagull_aerofoil)
        np.testing.assert_array_equal(
            wing.aerofoil_pt(0.4, 0.3, upper=False),
            seagull_aerofoil.aerofoil_pt(0.4, 0.3, upper=False),
        )

    def test_rejects_incomplete_providers(self, constant_planform) -> None:
        with pytest.raises(ConfigurationError, match="aerofoil"):
            Wing(constant_planform, object())  # type: ignore[arg-type]

    def test_is_immutable(self, constant_planform, box_aerofoil) -> None:
        wing = Wing(constant_planform, box_aerofoil)
        with pytest.raises(AttributeError):
            wing.planform = RectangularPlanform(1.0)  # type: ignore[misc]
