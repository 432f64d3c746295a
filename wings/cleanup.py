"""Sweeps orphaned export files out of the export temp directory.

Exports are normally deleted once streamed; files left behind by a crashed
worker or an aborted download are removed at startup and then periodically.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import anyio

from wings.export.package import EXPORT_TMP_DIR

logger = logging.getLogger("wings.cleanup")

# Export files older than this (seconds) are considered orphaned.
MAX_AGE_SECONDS = 3600

# Sweep interval (seconds) for the background task.
CLEANUP_INTERVAL_SECONDS = 1800

# Only files created by wings.export.package are touched.
EXPORT_GLOB = "wings_*"


def cleanup_tmp_files(
    tmp_dir: Path = EXPORT_TMP_DIR,
    max_age_seconds: float = MAX_AGE_SECONDS,
) -> int:
    """Delete export files in ``tmp_dir`` older than ``max_age_seconds``.

    Returns the number of files deleted.  Files that vanish or cannot be
    deleted are skipped.
    """
    if not tmp_dir.is_dir():
        return 0

    cutoff = time.time() - max_age_seconds
    deleted = 0

    for path in tmp_dir.glob(EXPORT_GLOB):
        try:
            if path.is_file() and path.stat().st_mtime < cutoff:
                path.unlink()
                deleted += 1
        except OSError as exc:
            logger.debug("Could not delete export file %s: %s", path.name, exc)

    if deleted:
        logger.info("Removed %d orphaned export file(s) from %s", deleted, tmp_dir)
    return deleted


async def periodic_cleanup(
    tmp_dir: Path = EXPORT_TMP_DIR,
    interval: float = CLEANUP_INTERVAL_SECONDS,
    max_age_seconds: float = MAX_AGE_SECONDS,
) -> None:
    """Run cleanup_tmp_files every ``interval`` seconds until cancelled."""
    while True:
        await anyio.sleep(interval)
        try:
            await anyio.to_thread.run_sync(cleanup_tmp_files, tmp_dir, max_age_seconds)
        except Exception:
            logger.exception("Periodic export cleanup failed")
