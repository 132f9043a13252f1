"""
Manifest model — the package collection declared in packages.yml.

The manifest stands in for the host build system: it names every
package and the categories each one should carry.  Categories are
declared in their own field so they always pass through validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SNAPSHOT_PATH = ".state/category-info.json"


class PackageDecl(BaseModel):
    """A package declaration from the manifest."""

    model_config = ConfigDict(extra="forbid")

    version: str = ""
    description: str = ""
    categories: list[str] | None = None  # None = no category metadata
    meta: dict[str, Any] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_str(cls, v: Any) -> Any:
        # YAML reads unquoted 2.12 as a float
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("meta")
    @classmethod
    def _no_raw_categories(cls, v: dict[str, Any]) -> dict[str, Any]:
        if "categories" in v:
            raise ValueError("declare categories with the 'categories' field, not under 'meta'")
        return v


class Manifest(BaseModel):
    """Root manifest — loaded from packages.yml."""

    version: int = 1
    snapshot: str = DEFAULT_SNAPSHOT_PATH
    packages: dict[str, PackageDecl] = Field(default_factory=dict)

    @field_validator("packages", mode="before")
    @classmethod
    def _empty_decls(cls, v: Any) -> Any:
        # `name:` with no body is an uncategorized package
        if isinstance(v, dict):
            return {name: ({} if decl is None else decl) for name, decl in v.items()}
        return v

    def categorized(self) -> list[str]:
        """Names of packages that declare at least one category."""
        return [name for name, decl in self.packages.items() if decl.categories]
