"""
Build use case — manifest → annotated packages → persisted snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pkgcategories.core.config.loader import (
    ConfigError,
    find_manifest_file,
    load_manifest,
    load_packages,
    manifest_snapshot_path,
)
from pkgcategories.core.errors import InvalidCategories
from pkgcategories.core.models.snapshot import Snapshot
from pkgcategories.core.persistence.snapshot_file import save_snapshot
from pkgcategories.core.services.snapshot_ops import build_snapshot

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of a snapshot build."""

    snapshot: Snapshot | None = None
    config_path: Path | None = None
    snapshot_path: Path | None = None
    saved: bool = False
    error: str | None = None
    invalid_categories: list[str] | None = None

    def to_dict(self) -> dict:
        d: dict = {
            "config_path": str(self.config_path) if self.config_path else None,
            "snapshot_path": str(self.snapshot_path) if self.snapshot_path else None,
            "saved": self.saved,
        }
        if self.error:
            d["error"] = self.error
        if self.invalid_categories:
            d["invalid_categories"] = self.invalid_categories
        if self.snapshot is not None:
            d["packages"] = {
                "total": len(self.snapshot.packages),
                "categorized": len(self.snapshot.categorized_packages()),
            }
        return d


def run_build(
    config_path: Path | None = None,
    output: Path | None = None,
    save: bool = True,
) -> BuildResult:
    """Build the snapshot from the manifest and (optionally) persist it.

    Args:
        config_path: Explicit path to packages.yml (default: search upward).
        output: Where to write the snapshot (default: manifest setting).
        save: If False, build only.

    Returns:
        BuildResult; ``error`` is set instead of raising on bad input.
    """
    result = BuildResult()

    if config_path is None:
        config_path = find_manifest_file()
    result.config_path = config_path

    try:
        manifest = load_manifest(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    try:
        packages = load_packages(manifest)
    except InvalidCategories as e:
        result.error = str(e)
        result.invalid_categories = e.categories
        return result

    assert config_path is not None  # load_manifest succeeded
    result.snapshot = build_snapshot(packages)
    result.snapshot_path = output or manifest_snapshot_path(manifest, config_path)

    if save:
        try:
            save_snapshot(result.snapshot, result.snapshot_path)
        except OSError as e:
            result.error = f"Cannot write snapshot: {e}"
            return result
        result.saved = True
        logger.info("Snapshot written to %s", result.snapshot_path)

    return result
