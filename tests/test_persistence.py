"""
Tests for persistence — snapshot file write and read.
"""

import json
from pathlib import Path

import pytest

from pkgcategories.core.persistence.snapshot_file import (
    SnapshotError,
    default_snapshot_path,
    load_snapshot,
    read_snapshot_text,
    save_snapshot,
)
from pkgcategories.core.services.snapshot_ops import build_snapshot


class TestSnapshotFile:
    """Tests for snapshot file persistence."""

    def test_save_and_load(self, tmp_path: Path, example_packages):
        path = tmp_path / ".state" / "category-info.json"
        snapshot = build_snapshot(example_packages)

        save_snapshot(snapshot, path)
        assert path.is_file()

        loaded = load_snapshot(path)
        assert loaded == snapshot
        assert loaded.packages["example2"].categories == ["development", "system"]

    def test_save_creates_directories(self, tmp_path: Path, example_packages):
        path = tmp_path / "deep" / "nested" / "snapshot.json"
        save_snapshot(build_snapshot(example_packages), path)
        assert path.is_file()

    def test_save_leaves_no_temp_files(self, tmp_path: Path, example_packages):
        path = tmp_path / "snapshot.json"
        save_snapshot(build_snapshot(example_packages), path)
        save_snapshot(build_snapshot(example_packages), path)
        assert [p.name for p in tmp_path.iterdir()] == ["snapshot.json"]

    def test_saved_document_shape(self, snapshot_path: Path):
        data = json.loads(snapshot_path.read_text())
        assert set(data) == {"categories", "packages"}
        assert data["packages"]["default"] == {
            "name": "default",
            "categories": [],
            "categoryNames": [],
        }

    def test_read_text_verbatim(self, snapshot_path: Path):
        assert read_snapshot_text(snapshot_path) == snapshot_path.read_text(encoding="utf-8")

    def test_load_missing(self, tmp_path: Path):
        with pytest.raises(SnapshotError, match="No snapshot"):
            load_snapshot(tmp_path / "nonexistent.json")

    def test_load_corrupt(self, tmp_path: Path):
        path = tmp_path / "corrupt.json"
        path.write_text("not json at all {{{")
        with pytest.raises(SnapshotError, match="Corrupt"):
            load_snapshot(path)

    def test_load_wrong_shape(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(SnapshotError, match="Invalid"):
            load_snapshot(path)

    def test_default_path(self, tmp_path: Path):
        assert default_snapshot_path(tmp_path) == tmp_path / ".state" / "category-info.json"
