"""
Snapshot file persistence — atomic write, validated read.

The snapshot is stored as JSON in .state/category-info.json.  Writes
are atomic (write to temp file, then rename) so a concurrent
``categories`` invocation never sees a half-written document.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from pkgcategories.core.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

# Default snapshot path (relative to project root)
DEFAULT_SNAPSHOT_DIR = ".state"
DEFAULT_SNAPSHOT_FILE = "category-info.json"


class SnapshotError(Exception):
    """Raised when the snapshot file is missing, unreadable, or invalid."""


def default_snapshot_path(project_root: Path) -> Path:
    """Get the default snapshot path for a project."""
    return project_root / DEFAULT_SNAPSHOT_DIR / DEFAULT_SNAPSHOT_FILE


def save_snapshot(snapshot: Snapshot, path: Path) -> None:
    """Write the snapshot to ``path`` (atomic write).

    Args:
        snapshot: The snapshot to persist.
        path: Target path for the snapshot file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = snapshot.to_json()

    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=".category-info_",
        suffix=".tmp",
    )
    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        tmp.replace(path)
        logger.debug("Snapshot saved to %s", path)
    except Exception as e:
        tmp.unlink(missing_ok=True)
        logger.error("Failed to save snapshot to %s: %s", path, e)
        raise


def read_snapshot_text(path: Path) -> str:
    """Return the snapshot file's contents verbatim.

    Raises:
        SnapshotError: If the file doesn't exist or can't be read.
    """
    if not path.is_file():
        raise SnapshotError(
            f"No snapshot at {path}. Run 'pkgcategories build' to create one."
        )
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Cannot read {path}: {e}") from e


def load_snapshot(path: Path) -> Snapshot:
    """Load and validate the snapshot document.

    Raises:
        SnapshotError: If the file is missing, not JSON, or not a
            well-formed snapshot.
    """
    raw = read_snapshot_text(path)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Corrupt snapshot {path}: {e}") from e

    try:
        snapshot = Snapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {path}: {e}") from e

    logger.debug("Loaded snapshot from %s (%d packages)", path, len(snapshot.packages))
    return snapshot
