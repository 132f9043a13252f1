"""
Category operations — validation, annotation, and package helpers.

These are the integration points the build system calls.  All of them
are pure: annotation returns a new ``Package`` and never touches the
one it was given, since other consumers may hold the same instance.

    pkg = add_categories(["development", "system"], Package(name="hello"))
    get_category_names(pkg)   # ['Development', 'System Tools']
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence

from pkgcategories.core.data import REGISTRY, CategoryRegistry
from pkgcategories.core.errors import InvalidCategories
from pkgcategories.core.models.package import Package

logger = logging.getLogger(__name__)


def validate_categories(
    categories: Sequence[str],
    registry: CategoryRegistry = REGISTRY,
) -> Sequence[str]:
    """Return ``categories`` unchanged if every identifier is known.

    Raises:
        InvalidCategories: Naming every unknown identifier once, in the
            order it first appears.
    """
    if isinstance(categories, str):
        raise TypeError("categories must be a sequence of identifiers, not a string")

    invalid: list[str] = []
    for category in categories:
        if category not in registry and category not in invalid:
            invalid.append(category)

    if invalid:
        raise InvalidCategories(invalid)
    return categories


def add_categories(
    categories: Sequence[str],
    package: Package,
    registry: CategoryRegistry = REGISTRY,
) -> Package:
    """Derive a copy of ``package`` carrying ``categories``.

    Validation runs first; on failure nothing is attached.  Existing
    metadata keys other than ``categories`` are kept as they are, deep-copied
    so the derived package shares no mutable state with ``package``.
    The attached categories are always stored as a list.
    """
    validated = validate_categories(categories, registry)
    meta = copy.deepcopy(package.meta)
    meta["categories"] = list(validated)
    logger.debug("Annotated %s with categories %s", package.name, meta["categories"])
    return package.model_copy(update={"meta": meta})


def add_category(
    category: str,
    package: Package,
    registry: CategoryRegistry = REGISTRY,
) -> Package:
    """Single-category form of :func:`add_categories`."""
    return add_categories([category], package, registry)


def get_categories(package: Package) -> list[str]:
    """Category identifiers attached to ``package`` (empty if none).

    Always a new ``list``: ``get_categories(add_categories(cs, pkg)) == cs``
    holds for list input; tuple input comes back as the equal list.
    """
    return list(package.meta.get("categories") or [])


def has_category(category: str, package: Package) -> bool:
    return category in get_categories(package)


def get_category_names(
    package: Package,
    registry: CategoryRegistry = REGISTRY,
) -> list[str]:
    """Display names for ``package``'s categories, index-aligned."""
    return [registry.lookup(c) for c in get_categories(package)]
