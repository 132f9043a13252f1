"""
pkgcategories — category metadata for package definitions.

Library surface for the build system:

    from pkgcategories import add_category, add_categories, has_category
    from pkgcategories import get_categories, get_category_names, CATEGORIES_LIST
"""

__version__ = "0.1.0"

from pkgcategories.core.data import CATEGORIES_LIST, REGISTRY, CategoryRegistry  # noqa: E402
from pkgcategories.core.errors import (  # noqa: E402
    CategoryError,
    InvalidCategories,
    MissingArgument,
    UnknownCategory,
)
from pkgcategories.core.services.category_ops import (  # noqa: E402
    add_categories,
    add_category,
    get_categories,
    get_category_names,
    has_category,
    validate_categories,
)

__all__ = [
    "CATEGORIES_LIST",
    "REGISTRY",
    "CategoryError",
    "CategoryRegistry",
    "InvalidCategories",
    "MissingArgument",
    "UnknownCategory",
    "__version__",
    "add_categories",
    "add_category",
    "get_categories",
    "get_category_names",
    "has_category",
    "validate_categories",
]
