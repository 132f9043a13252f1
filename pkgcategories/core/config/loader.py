"""
Configuration loader — reads packages.yml into domain models.

This is the primary entry point for loading the package manifest.
It reads YAML, validates against Pydantic schemas, and returns typed
``Package`` records with their categories already attached.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from pkgcategories.core.models.manifest import Manifest
from pkgcategories.core.models.package import Package
from pkgcategories.core.persistence.snapshot_file import default_snapshot_path
from pkgcategories.core.services.category_ops import add_categories

logger = logging.getLogger(__name__)

# Default manifest filename
MANIFEST_FILE = "packages.yml"


class ConfigError(Exception):
    """Raised when the package manifest is invalid or missing."""


def find_manifest_file(start_dir: Path | None = None) -> Path | None:
    """Search for packages.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to packages.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_manifest(path: Path | None = None) -> Manifest:
    """Load and validate the package manifest.

    Args:
        path: Explicit path to packages.yml. If None, searches upward.

    Returns:
        Validated Manifest model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_manifest_file()

    if path is None:
        raise ConfigError(f"No {MANIFEST_FILE} found. Create one, or specify --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid manifest: {e}") from e

    logger.info("Loaded manifest with %d packages", len(manifest.packages))
    return manifest


def load_packages(manifest: Manifest) -> dict[str, Package]:
    """Turn manifest declarations into annotated packages.

    Categories go through ``add_categories``, so an unknown identifier
    aborts the load with ``InvalidCategories``.
    """
    packages: dict[str, Package] = {}
    for name, decl in manifest.packages.items():
        package = Package(
            name=name,
            version=decl.version,
            description=decl.description,
            meta=dict(decl.meta),
        )
        if decl.categories is not None:
            logger.debug("Package '%s': categories %s", name, decl.categories)
            package = add_categories(decl.categories, package)
        packages[name] = package
    return packages


def manifest_snapshot_path(manifest: Manifest, manifest_path: Path) -> Path:
    """Resolve the manifest's ``snapshot`` setting against its directory."""
    target = Path(manifest.snapshot)
    if target.is_absolute():
        return target
    return manifest_path.parent.resolve() / target


def resolve_snapshot_path(
    explicit: Path | None = None,
    config_path: Path | None = None,
) -> Path:
    """Work out where the snapshot lives.

    Precedence: explicit path > manifest ``snapshot`` setting >
    .state/category-info.json under the working directory.  A manifest
    that can't be loaded is skipped, not fatal: querying only needs the
    snapshot itself.
    """
    if explicit is not None:
        return explicit

    manifest_path = config_path or find_manifest_file()
    if manifest_path is not None:
        try:
            manifest = load_manifest(manifest_path)
        except ConfigError as e:
            logger.warning("Ignoring manifest for snapshot lookup: %s", e)
        else:
            return manifest_snapshot_path(manifest, manifest_path)

    return default_snapshot_path(Path.cwd())
