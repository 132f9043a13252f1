"""
Snapshot operations — build the category document and format queries.

Building happens once per build (``pkgcategories build``).  The
formatting helpers back the ``categories`` command: they only read a
loaded snapshot and return output lines, no computation beyond
filtering and joining.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pkgcategories.core.data import REGISTRY, CategoryRegistry
from pkgcategories.core.models.package import Package
from pkgcategories.core.models.snapshot import PackageEntry, Snapshot
from pkgcategories.core.services.category_ops import get_categories

logger = logging.getLogger(__name__)

PACKAGE_NOT_FOUND = "Package not found"

USAGE_TEXT = """\
Usage: categories [OPTIONS]
Options:
  --json, -j              Output all data as JSON
  --packages, -p          List all packages and their categories
  --package, -P NAME      Show categories for specific package
  --help, -h              Show this help message
  (no options)            Show available categories"""


# ── Build ───────────────────────────────────────────────────────


def build_snapshot(
    packages: Mapping[str, Package],
    registry: CategoryRegistry = REGISTRY,
) -> Snapshot:
    """Aggregate the registry and every package into a snapshot.

    Packages without category metadata appear with empty lists.  Name
    lookups cannot miss: categories were validated when attached.

    Args:
        packages: Package name → package, in the order to emit.
        registry: Category registry to embed and resolve names against.
    """
    entries: dict[str, PackageEntry] = {}
    for name, package in packages.items():
        categories = get_categories(package)
        entries[name] = PackageEntry(
            name=name,
            categories=categories,
            category_names=[registry.lookup(c) for c in categories],
        )

    snapshot = Snapshot(categories=registry.as_dict(), packages=entries)
    logger.info(
        "Built snapshot: %d categories, %d packages (%d categorized)",
        len(snapshot.categories),
        len(snapshot.packages),
        len(snapshot.categorized_packages()),
    )
    return snapshot


# ── Query formatting ────────────────────────────────────────────


def format_categories(snapshot: Snapshot) -> list[str]:
    """The registry as ``- id: Display`` lines."""
    lines = ["Available categories:"]
    lines.extend(f"- {cat}: {display}" for cat, display in snapshot.categories.items())
    return lines


def format_packages(snapshot: Snapshot) -> list[str]:
    """Every categorized package with its comma-joined display names."""
    lines = ["Packages and their categories:"]
    for entry in snapshot.categorized_packages():
        lines.append(f"{entry.name}:")
        lines.append(f"  Categories: {', '.join(entry.category_names)}")
    return lines


def format_package(snapshot: Snapshot, name: str) -> list[str]:
    """One package's display names, or the not-found message."""
    lines = [f"Package information for: {name}"]
    entry = snapshot.get_package(name)
    if entry is None:
        lines.append(PACKAGE_NOT_FOUND)
    else:
        lines.append(f"Categories: {', '.join(entry.category_names)}")
    return lines
