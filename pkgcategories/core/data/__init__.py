"""
Category registry — the closed vocabulary of package categories.

The registry is built once at import time and never changes.  Everything
downstream (validation, annotation, snapshot building, CLI) reads from
this single source of truth.

Usage::

    from pkgcategories.core.data import REGISTRY, CATEGORIES_LIST

    REGISTRY.lookup("system")      # 'System Tools'
    "games" in REGISTRY            # True
    CATEGORIES_LIST["office"]      # 'Office' (read-only mapping)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pkgcategories.core.errors import UnknownCategory

# ── Fixed vocabulary (definition order is display order) ────────

_CATEGORIES: dict[str, str] = {
    "development": "Development",
    "system": "System Tools",
    "networking": "Networking",
    "security": "Security",
    "multimedia": "Multimedia",
    "graphics": "Graphics",
    "games": "Games",
    "office": "Office",
    "science": "Science",
}


class CategoryRegistry:
    """Immutable mapping of category identifier → display name.

    Exposes lookups only; there are no mutation operations.  Extending
    the vocabulary means constructing a new registry.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))

    def lookup(self, category: str) -> str:
        """Return the display name for ``category``.

        Raises:
            UnknownCategory: If ``category`` is not a registry key.
        """
        try:
            return self._entries[category]
        except KeyError:
            raise UnknownCategory(category) from None

    def all_entries(self) -> list[tuple[str, str]]:
        """All ``(id, display_name)`` pairs, in definition order."""
        return list(self._entries.items())

    @property
    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the underlying mapping."""
        return self._entries

    def as_dict(self) -> dict[str, str]:
        """A plain-dict copy, for serialization."""
        return dict(self._entries)

    def __contains__(self, category: object) -> bool:
        return category in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CategoryRegistry({list(self._entries)!r})"


REGISTRY = CategoryRegistry(_CATEGORIES)

# Raw mapping exposed to integrators.
CATEGORIES_LIST: Mapping[str, str] = REGISTRY.mapping
