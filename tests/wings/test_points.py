"""Tests for wings/export/points.py -- delimited point text export."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from wings.export.points import points_text, write_pts, write_wing_pts
from wings.geometry.wing import Wing, build_wing


class TestPointsText:
    def test_one_line_per_point(self) -> None:
        text = points_text(np.array([[0.0, 1.0, 2.0], [0.5, -0.25, 3.0]]))
        assert text == "0.0 1.0 2.0\n0.5 -0.25 3.0\n"

    def test_custom_delimiter(self) -> None:
        text = points_text(np.array([[1.0, 2.0, 3.0]]), delimiter=",")
        assert text == "1.0,2.0,3.0\n"

    def test_round_trips_floats(self) -> None:
        pts = np.array([[0.1 + 0.2, 1 / 3, -2e-17]])
        values = [float(v) for v in points_text(pts).split()]
        assert values == pts[0].tolist()


class TestWritePts:
    def test_writes_all_points(self, tmp_path: Path, rectangular_planform, seagull_aerofoil) -> None:
        pts = build_wing(rectangular_planform, seagull_aerofoil, nchord=10, nspan=5)
        path = write_pts(tmp_path / "wing", pts)
        assert path.name == "wing.txt"
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 50
        np.testing.assert_array_equal(np.loadtxt(path), pts)

    def test_delimiter_in_file(self, tmp_path: Path) -> None:
        path = write_pts(tmp_path / "pts.txt", np.zeros((2, 3)), delimiter=";")
        assert path.read_text(encoding="utf-8") == "0.0;0.0;0.0\n0.0;0.0;0.0\n"

    def test_missing_directory_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_pts(tmp_path / "missing" / "pts", np.zeros((1, 3)))

    def test_write_wing_pts(self, tmp_path: Path, rectangular_planform, seagull_aerofoil) -> None:
        wing = Wing(rectangular_planform, seagull_aerofoil)
        path = write_wing_pts(tmp_path / "full", wing, nchord=8, nspan=3, delimiter=",")
        rows = np.loadtxt(path, delimiter=",")
        assert rows.shape == (24, 3)
        assert rows[-1, 1] == 1.0
