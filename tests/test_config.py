"""
Tests for configuration loading — packages.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from pkgcategories.core.config.loader import (
    ConfigError,
    find_manifest_file,
    load_manifest,
    load_packages,
    manifest_snapshot_path,
    resolve_snapshot_path,
)
from pkgcategories.core.errors import InvalidCategories
from pkgcategories.core.services.category_ops import get_categories


class TestLoadManifest:
    """Tests for load_manifest()."""

    def test_load_example(self, manifest_path: Path):
        manifest = load_manifest(manifest_path)
        assert list(manifest.packages) == ["example1", "example2", "default"]
        assert manifest.packages["example2"].categories == ["development", "system"]
        assert manifest.packages["default"].categories is None

    def test_repo_manifest_loads(self, project_root: Path):
        manifest = load_manifest(project_root / "packages.yml")
        assert set(manifest.packages) == {"example1", "example2", "default"}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text("")
        assert load_manifest(path).packages == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_manifest(tmp_path / "packages.yml")

    def test_nothing_found(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigError, match="No packages.yml"):
            load_manifest()

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text("packages: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_manifest(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_manifest(path)

    def test_schema_violation(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text("packages:\n  a:\n    categories: development\n")
        with pytest.raises(ConfigError, match="Invalid manifest"):
            load_manifest(path)


class TestFindManifest:
    """Tests for find_manifest_file()."""

    def test_walks_up(self, manifest_path: Path):
        nested = manifest_path.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_manifest_file(nested) == manifest_path.resolve()


class TestLoadPackages:
    """Tests for load_packages()."""

    def test_categories_attached(self, manifest_path: Path):
        packages = load_packages(load_manifest(manifest_path))
        assert get_categories(packages["example1"]) == ["development"]
        assert get_categories(packages["example2"]) == ["development", "system"]
        assert packages["example2"].meta["license"] == "gpl3Plus"

    def test_uncategorized_has_no_metadata(self, manifest_path: Path):
        packages = load_packages(load_manifest(manifest_path))
        assert packages["default"].has_category_metadata is False
        assert packages["default"].description == "the CLI itself"

    def test_invalid_category_aborts(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text(textwrap.dedent("""\
            packages:
              ok:
                categories: [games]
              bad:
                categories: [development, bogus, worse]
        """))
        with pytest.raises(InvalidCategories) as exc:
            load_packages(load_manifest(path))
        assert exc.value.categories == ["bogus", "worse"]


class TestSnapshotPath:
    """Snapshot path resolution."""

    def test_manifest_relative(self, manifest_path: Path):
        manifest = load_manifest(manifest_path)
        expected = manifest_path.parent.resolve() / ".state" / "category-info.json"
        assert manifest_snapshot_path(manifest, manifest_path) == expected

    def test_manifest_custom(self, tmp_path: Path):
        path = tmp_path / "packages.yml"
        path.write_text("snapshot: out/info.json\n")
        assert resolve_snapshot_path(None, path) == tmp_path.resolve() / "out" / "info.json"

    def test_absolute_setting(self, tmp_path: Path):
        target = tmp_path / "elsewhere.json"
        path = tmp_path / "packages.yml"
        path.write_text(f"snapshot: {target}\n")
        assert resolve_snapshot_path(None, path) == target

    def test_explicit_wins(self, manifest_path: Path, tmp_path: Path):
        explicit = tmp_path / "x.json"
        assert resolve_snapshot_path(explicit, manifest_path) == explicit

    def test_broken_manifest_falls_back(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "packages.yml"
        path.write_text("- not a mapping\n")
        assert resolve_snapshot_path(None, path) == Path.cwd() / ".state" / "category-info.json"
