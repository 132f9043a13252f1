"""
Snapshot model — the aggregated category document.

Combines the full registry with every known package's categories.
Serialized to .state/category-info.json by the build and read back
(read-only) by the ``categories`` command.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PackageEntry(BaseModel):
    """One package's category metadata inside a snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    categories: list[str] = Field(default_factory=list)
    category_names: list[str] = Field(default_factory=list, alias="categoryNames")

    @model_validator(mode="after")
    def _aligned(self) -> PackageEntry:
        if len(self.categories) != len(self.category_names):
            raise ValueError(
                f"Package '{self.name}': categories and categoryNames differ in length"
            )
        return self


class Snapshot(BaseModel):
    """Root snapshot document — exactly two top-level keys."""

    model_config = ConfigDict(extra="forbid")

    categories: dict[str, str] = Field(default_factory=dict)
    packages: dict[str, PackageEntry] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _names_resolve(self) -> Snapshot:
        for key, entry in self.packages.items():
            if entry.name != key:
                raise ValueError(f"Package '{key}': entry name is '{entry.name}'")
            for cat, display in zip(entry.categories, entry.category_names):
                if self.categories.get(cat) != display:
                    raise ValueError(
                        f"Package '{entry.name}': category '{cat}' does not "
                        f"resolve to '{display}'"
                    )
        return self

    def get_package(self, name: str) -> PackageEntry | None:
        """Look up a package entry by name."""
        return self.packages.get(name)

    def categorized_packages(self) -> list[PackageEntry]:
        """Packages carrying at least one category, in document order."""
        return [p for p in self.packages.values() if p.categories]

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Deterministic JSON encoding (order preserved, trailing newline)."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"
