"""Tests for wings/cleanup.py -- orphaned export file sweeping."""

from __future__ import annotations

import os
import time
from pathlib import Path

from wings.cleanup import cleanup_tmp_files


def _touch(path: Path, age_seconds: float) -> Path:
    path.write_bytes(b"x")
    stamp = time.time() - age_seconds
    os.utime(path, (stamp, stamp))
    return path


class TestCleanupTmpFiles:
    def test_removes_old_exports(self, tmp_path: Path) -> None:
        old = _touch(tmp_path / "wings_old.stl", 7200)
        fresh = _touch(tmp_path / "wings_fresh.stl", 10)
        assert cleanup_tmp_files(tmp_path, max_age_seconds=3600) == 1
        assert not old.exists()
        assert fresh.exists()

    def test_ignores_foreign_files(self, tmp_path: Path) -> None:
        other = _touch(tmp_path / "notes.txt", 7200)
        assert cleanup_tmp_files(tmp_path, max_age_seconds=3600) == 0
        assert other.exists()

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert cleanup_tmp_files(tmp_path / "absent") == 0

    def test_skips_directories(self, tmp_path: Path) -> None:
        (tmp_path / "wings_dir").mkdir()
        assert cleanup_tmp_files(tmp_path, max_age_seconds=0) == 0
