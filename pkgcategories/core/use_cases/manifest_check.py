"""
Manifest check use case — validate packages.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pkgcategories.core.config.loader import ConfigError, find_manifest_file, load_manifest
from pkgcategories.core.errors import InvalidCategories
from pkgcategories.core.models.manifest import Manifest
from pkgcategories.core.services.category_ops import validate_categories


@dataclass
class ManifestCheckResult:
    """Result of manifest validation."""

    valid: bool = False
    manifest: Manifest | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "package_count": len(self.manifest.packages) if self.manifest else 0,
            "categorized_count": len(self.manifest.categorized()) if self.manifest else 0,
        }


def check_manifest(config_path: Path | None = None) -> ManifestCheckResult:
    """Validate the manifest without building anything.

    Unlike a build, this reports every package with invalid categories
    rather than stopping at the first.
    """
    result = ManifestCheckResult()

    if config_path is None:
        config_path = find_manifest_file()

    if config_path is None:
        result.errors.append("No packages.yml found.")
        return result

    result.config_path = config_path

    try:
        manifest = load_manifest(config_path)
        result.manifest = manifest
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    for name, decl in manifest.packages.items():
        if decl.categories is None:
            continue
        try:
            validate_categories(decl.categories)
        except InvalidCategories as e:
            result.errors.append(f"Package '{name}': {e}")

    if not manifest.packages:
        result.warnings.append("No packages defined. The snapshot will be empty.")
    elif not manifest.categorized():
        result.warnings.append("No package declares any category.")

    result.valid = len(result.errors) == 0
    return result
