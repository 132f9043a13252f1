"""
Domain models — Pydantic types for category metadata.

All models are re-exported here for convenient access:

    from pkgcategories.core.models import Package, Snapshot, PackageEntry, Manifest
"""

from pkgcategories.core.models.manifest import Manifest, PackageDecl
from pkgcategories.core.models.package import Package
from pkgcategories.core.models.snapshot import PackageEntry, Snapshot

__all__ = [
    # manifest.py
    "Manifest",
    # package.py
    "Package",
    "PackageDecl",
    # snapshot.py
    "PackageEntry",
    "Snapshot",
]
