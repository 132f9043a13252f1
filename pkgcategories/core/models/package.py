"""
Package model — a package definition as supplied by the build system.

This layer never owns packages: it only derives annotated copies of
them.  Category metadata lives under ``meta["categories"]``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Package(BaseModel):
    """A named package with free-form metadata."""

    name: str
    version: str = ""
    description: str = ""
    meta: dict[str, Any] = Field(default_factory=dict)

    @property
    def has_category_metadata(self) -> bool:
        """Whether category metadata has been attached (possibly empty)."""
        return "categories" in self.meta
